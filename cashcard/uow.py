"""Request-scoped transaction around a SQLAlchemy session"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from cashcard.db import get_db


class UnitOfWork:
    """All repository writes of one request land in a single transaction."""

    def __init__(self, db: Session):
        self.db = db

    def __getattr__(self, attr):
        # repositories call query/add/merge/flush on the unit of work directly
        return getattr(self.db, attr)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.db.rollback()
        else:
            self.db.commit()
        self.db.close()


def get_uow(
    db: Session = Depends(get_db),
) -> Generator[UnitOfWork, None, None]:
    """Commit when the request handler returns, roll back when it raises."""
    with UnitOfWork(db) as uow:
        yield uow
