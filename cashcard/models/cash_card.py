"""CashCard model. A monetary amount that belongs to exactly one owner."""

from decimal import Decimal

from sqlalchemy import DECIMAL, String
from sqlalchemy.orm import Mapped, mapped_column

from cashcard.models.base import BaseModel
from cashcard.schemas.cash_card import AMOUNT_DECIMAL_PLACES


class CashCard(BaseModel):
    __tablename__ = "cash_cards"

    amount: Mapped[Decimal] = mapped_column(DECIMAL(scale=AMOUNT_DECIMAL_PLACES), nullable=False)
    # identity of the caller who created the card, never taken from request data
    owner: Mapped[str] = mapped_column(String(256), index=True, nullable=False)
