"""CashCard service. Create, read, list, update and delete cards of the calling owner."""

import logging

from fastapi import Depends

from cashcard.config import Config, get_config
from cashcard.errors.cash_card import (
    PageParametersInvalid,
    SortDirectionInvalid,
    SortFieldInvalid,
)
from cashcard.errors.common import NotFoundError
from cashcard.models.cash_card import CashCard
from cashcard.repository.base import MAX_DB_INTEGER
from cashcard.repository.cash_card import CashCardRepository
from cashcard.schemas.cash_card import (
    CashCardCreateSchema,
    CashCardSchema,
    CashCardUpdateSchema,
)
from cashcard.services.ownership import Absent, Found, OwnershipGuard, require_caller

logger = logging.getLogger(__name__)

RESOURCE_ROOT = "/cashcards"
DEFAULT_SORT_FIELD = "amount"
DEFAULT_SORT_DIRECTION = "asc"
SORT_FIELDS = frozenset(CashCardSchema.model_fields)
SORT_DIRECTIONS = ("asc", "desc")


class CashCardService:
    def __init__(
        self,
        repo: CashCardRepository = Depends(),
        ownership_guard: OwnershipGuard = Depends(),
        config: Config = Depends(get_config),
    ):
        self.repo = repo
        self.ownership_guard = ownership_guard
        self.config = config

    @staticmethod
    def location_of(card: CashCard) -> str:
        return f"{RESOURCE_ROOT}/{card.id}"

    def create(self, schema: CashCardCreateSchema, caller: str) -> tuple[CashCard, str]:
        """Store a new card owned by the caller. Returns the card and its location."""
        owner = require_caller(caller)
        card = self.repo.save(CashCard(id=None, amount=schema.amount, owner=owner))
        logger.info("CashCard id=%s created by owner=%s", card.id, owner)
        return card, self.location_of(card)

    def get(self, obj_id: int, caller: str) -> CashCard:
        match self.ownership_guard.resolve(obj_id, caller):
            case Found(record=card):
                return card
            case Absent():
                logger.debug("CashCard id=%s not found for owner=%s", obj_id, caller)
                raise NotFoundError(f"CashCard id={obj_id}")

    def _validate_page(
        self,
        page: int,
        size: int,
        sort_field: str | None,
        sort_direction: str | None,
    ) -> tuple[str, str]:
        if (
            page < 0
            or size <= 0
            or size > self.config.max_page_size
            # the row offset must fit into the database integer
            or page * size > MAX_DB_INTEGER
        ):
            raise PageParametersInvalid(
                f"page={page} size={size} max_size={self.config.max_page_size}"
            )
        field = sort_field or DEFAULT_SORT_FIELD
        if field not in SORT_FIELDS:
            raise SortFieldInvalid(field)
        direction = (sort_direction or DEFAULT_SORT_DIRECTION).lower()
        if direction not in SORT_DIRECTIONS:
            raise SortDirectionInvalid(sort_direction)
        return field, direction

    def get_all(
        self,
        caller: str,
        page: int = 0,
        size: int = 20,
        sort_field: str | None = None,
        sort_direction: str | None = None,
    ) -> list[CashCard]:
        """
        One page of the caller's cards.

        Ordered by amount ascending unless another CashCard attribute and direction
        are given. Parameters are validated before the database is queried.
        """
        owner = require_caller(caller)
        field, direction = self._validate_page(page, size, sort_field, sort_direction)
        result = self.repo.get_page_by_owner(owner, page, size, field, direction)
        return list(result.items)

    def update(self, obj_id: int, schema: CashCardUpdateSchema, caller: str) -> None:
        """Replace the amount of an existing card. Never creates a card."""
        match self.ownership_guard.resolve(obj_id, caller):
            case Found(record=card):
                # id comes from the stored card and owner from the caller, not from the request
                self.repo.save(CashCard(id=card.id, amount=schema.amount, owner=caller))
                logger.info("CashCard id=%s updated by owner=%s", card.id, caller)
            case Absent():
                logger.debug("CashCard id=%s not found for owner=%s", obj_id, caller)
                raise NotFoundError(f"CashCard id={obj_id}")

    def delete(self, obj_id: int, caller: str) -> None:
        owner = require_caller(caller)
        if not self.repo.exists_by_id_and_owner(obj_id, owner):
            logger.debug("CashCard id=%s not found for owner=%s", obj_id, owner)
            raise NotFoundError(f"CashCard id={obj_id}")
        self.repo.delete_by_id(obj_id)
        logger.info("CashCard id=%s deleted by owner=%s", obj_id, owner)
