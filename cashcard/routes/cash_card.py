"""API routes for CashCard manipulation"""

from fastapi import APIRouter, Depends, Response, status

from cashcard.middlewares.token import get_caller_from_token
from cashcard.schemas.cash_card import (
    CashCardCreateSchema,
    CashCardSchema,
    CashCardUpdateSchema,
)
from cashcard.services.cash_card import RESOURCE_ROOT, CashCardService

cash_card_router = APIRouter(prefix=RESOURCE_ROOT, tags=["CashCards"])


@cash_card_router.post("", response_model=CashCardSchema, status_code=status.HTTP_201_CREATED)
def create_cash_card(
    cash_card: CashCardCreateSchema,
    response: Response,
    cash_card_service: CashCardService = Depends(),
    caller: str = Depends(get_caller_from_token),
):
    card, location = cash_card_service.create(cash_card, caller)
    response.headers["Location"] = location
    return card


@cash_card_router.get("/{cash_card_id}", response_model=CashCardSchema)
def read_cash_card(
    cash_card_id: int,
    cash_card_service: CashCardService = Depends(),
    caller: str = Depends(get_caller_from_token),
):
    return cash_card_service.get(cash_card_id, caller)


@cash_card_router.get("", response_model=list[CashCardSchema])
def read_cash_cards(
    page: int = 0,
    size: int = 20,
    sort: str | None = None,
    cash_card_service: CashCardService = Depends(),
    caller: str = Depends(get_caller_from_token),
):
    """
    List cards of the caller, one page at a time.

    `sort` is `field` or `field,direction`, for example `amount,desc`.
    Defaults to `amount,asc`.
    """
    sort_field, sort_direction = None, None
    if sort:
        field, _, direction = sort.partition(",")
        sort_field, sort_direction = field.strip() or None, direction.strip() or None
    return cash_card_service.get_all(caller, page, size, sort_field, sort_direction)


@cash_card_router.put("/{cash_card_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_cash_card(
    cash_card_id: int,
    cash_card_update: CashCardUpdateSchema,
    cash_card_service: CashCardService = Depends(),
    caller: str = Depends(get_caller_from_token),
) -> Response:
    cash_card_service.update(cash_card_id, cash_card_update, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@cash_card_router.delete("/{cash_card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cash_card(
    cash_card_id: int,
    cash_card_service: CashCardService = Depends(),
    caller: str = Depends(get_caller_from_token),
) -> Response:
    cash_card_service.delete(cash_card_id, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
