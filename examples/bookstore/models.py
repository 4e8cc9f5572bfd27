from typing import Union

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from crudservice.infrastructure.persistence.db.model.base import (
    Base,
    IdentifiableMixin,
)


class Author(IdentifiableMixin, Base):
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(256))
    books: Mapped[list["Book"]] = relationship(back_populates="author")


class Book(IdentifiableMixin, Base):
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(512))
    year: Mapped[Union[None, int]] = mapped_column(Integer)
    author_id: Mapped[Union[None, int]] = mapped_column(ForeignKey("authors.id"))

    author: Mapped[Union[None, Author]] = relationship(back_populates="books")
