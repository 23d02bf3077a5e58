"""Ownership guard. The single way to look up one CashCard on behalf of a caller.

A card owned by somebody else and a card that does not exist are both reported
as Absent, so callers can't learn about other owners' cards.
"""

from dataclasses import dataclass

from fastapi import Depends

from cashcard.errors.token import CallerUnauthenticated
from cashcard.models.cash_card import CashCard
from cashcard.repository.cash_card import CashCardRepository


@dataclass(frozen=True, slots=True)
class Found:
    record: CashCard


@dataclass(frozen=True, slots=True)
class Absent:
    pass


Resolution = Found | Absent


def require_caller(caller: str | None) -> str:
    """An empty identity must never be used as an owner value"""
    if caller is None or not caller.strip():
        raise CallerUnauthenticated
    return caller


class OwnershipGuard:
    def __init__(self, repo: CashCardRepository = Depends()):
        self.repo = repo

    def resolve(self, obj_id: int, caller: str) -> Resolution:
        card = self.repo.get_by_id_and_owner(obj_id, require_caller(caller))
        if card is None:
            return Absent()
        return Found(card)
