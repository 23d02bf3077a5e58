"""Base for all ORM models"""

from sqlalchemy.inspection import inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    # do not create separate table for this class
    __abstract__ = True

    # everything should have an id, assigned by the database
    id: Mapped[int] = mapped_column(primary_key=True)

    def __repr__(self):
        """Automatically generate __repr__ of a database object from its columns"""
        model_name = self.__class__.__name__
        attr_strs = []
        for attr in inspect(self.__class__).columns.keys():
            value = getattr(self, attr)
            attr_strs.append(f"{attr}={value!r}")
        attr_str = ", ".join(attr_strs)
        return f"<{model_name}({attr_str})>"
