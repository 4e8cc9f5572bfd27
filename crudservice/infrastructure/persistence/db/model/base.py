from typing import Union

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class IdentifiableMixin:
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def get_id(self) -> Union[None, int]:
        return self.id
