"""
Model de categoria de livros.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.session import Base
from catalog.models.base import IntIdMixin

if TYPE_CHECKING:
    from catalog.models.book import Book


class Category(Base, IntIdMixin):
    """
    Categoria (gênero) de livros.

    Lado inverso do many-to-many com Book: a associação é mantida
    por Book.add_category / Book.remove_category.

    Attributes:
        id: ID da categoria
        name: Nome da categoria
        books: Livros associados
    """
    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    books: Mapped[List["Book"]] = relationship(
        "Book",
        secondary="book_category",
        back_populates="categories",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
