"""Base repository with persistence methods shared by all models"""

from dataclasses import dataclass
from typing import Generic, Sequence, Type, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Session

from cashcard.models.base import BaseModel
from cashcard.uow import get_uow

_M = TypeVar("_M", bound=BaseModel)  # model
_K = TypeVar("_K", bound=int)  # primary key

# range of a signed 64-bit INTEGER column, ids and offsets outside it never reach the database
MIN_DB_INTEGER = -(2**63)
MAX_DB_INTEGER = 2**63 - 1


@dataclass(frozen=True, slots=True)
class PaginationDTO(Generic[_M]):
    items: Sequence[_M]
    total: int
    page: int
    size: int


class BaseRepository(Generic[_K, _M]):
    """Stores and deletes objects without any validation or access checks."""

    model: Type[_M]
    db: Session

    def __init__(self, db: Session = Depends(get_uow)):
        self.db = db

    def save(self, obj: _M) -> _M:
        """Insert an object without id, or replace the row with the same id."""
        if obj.id is None:
            self.db.add(obj)
        else:
            obj = self.db.merge(obj)
        self.db.flush()
        self.db.refresh(obj)
        return obj

    def _fits_id(self, obj_id: int) -> bool:
        return MIN_DB_INTEGER <= obj_id <= MAX_DB_INTEGER

    def delete_by_id(self, obj_id: _K) -> None:
        """Delete the row with given id. Does nothing if there is no such row."""
        if not self._fits_id(obj_id):
            return
        self.db.query(self.model).filter(self.model.id == obj_id).delete(
            synchronize_session="fetch"
        )
        self.db.flush()
