"""
Model de autor de livros.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.session import Base
from catalog.models.base import IntIdMixin

if TYPE_CHECKING:
    from catalog.models.book import Book


class Author(Base, IntIdMixin):
    """
    Autor de livros.

    Attributes:
        id: ID do autor
        name: Nome do autor
        country: País de origem (opcional)
        books: Livros do autor
    """
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Relationships
    books: Mapped[List["Book"]] = relationship(
        "Book",
        back_populates="author",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Author {self.name}>"
