"""Repository for CashCard model.

Every lookup takes the owner explicitly. The repository trusts the owner it is
given, checking that it belongs to the caller is the job of the services.
"""

from sqlalchemy import asc, desc
from sqlalchemy.orm import Query

from cashcard.models.cash_card import CashCard
from cashcard.repository.base import BaseRepository, PaginationDTO


class CashCardRepository(BaseRepository[int, CashCard]):
    model = CashCard

    def _owned_by(self, owner: str) -> Query[CashCard]:
        return self.db.query(self.model).filter(self.model.owner == owner)

    def get_by_id_and_owner(self, obj_id: int, owner: str) -> CashCard | None:
        if not self._fits_id(obj_id):
            return None
        return self._owned_by(owner).filter(self.model.id == obj_id).first()

    def exists_by_id_and_owner(self, obj_id: int, owner: str) -> bool:
        if not self._fits_id(obj_id):
            return False
        query = self._owned_by(owner).filter(self.model.id == obj_id)
        return self.db.query(query.exists()).scalar()

    def get_page_by_owner(
        self,
        owner: str,
        page: int,
        size: int,
        sort_field: str,
        sort_direction: str,
    ) -> PaginationDTO[CashCard]:
        query = self._owned_by(owner)
        total = query.count()
        order = desc if sort_direction == "desc" else asc
        # id breaks ties so that pages never overlap
        query = query.order_by(order(getattr(self.model, sort_field)), self.model.id.asc())
        items = query.offset(page * size).limit(size).all()
        return PaginationDTO(items=items, total=total, page=page, size=size)
