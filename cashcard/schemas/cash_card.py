"""DTO for CashCard"""

from decimal import Decimal

from pydantic import Field

from cashcard.schemas.base import BaseReadSchema, BaseSchema

# amounts are stored with two decimal places, more precise values are rejected
AMOUNT_DECIMAL_PLACES = 2


class CashCardSchema(BaseReadSchema):
    amount: Decimal
    owner: str


class CashCardCreateSchema(BaseSchema):
    # "id" and "owner" sent by a client are ignored, the server assigns both
    amount: Decimal = Field(allow_inf_nan=False, decimal_places=AMOUNT_DECIMAL_PLACES)


class CashCardUpdateSchema(BaseSchema):
    """Full replacement of the mutable fields of a card."""

    amount: Decimal = Field(allow_inf_nan=False, decimal_places=AMOUNT_DECIMAL_PLACES)
