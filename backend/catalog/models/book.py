"""
Model de livro e tabela de associação livro-categoria.
"""

from typing import TYPE_CHECKING, Optional, Set

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.session import Base
from catalog.models.base import IntIdMixin

if TYPE_CHECKING:
    from catalog.models.author import Author
    from catalog.models.category import Category


book_category = Table(
    "book_category",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Book(Base, IntIdMixin):
    """
    Livro do catálogo.

    author_name é uma cópia desnormalizada de author.name, gravada em
    set_author. Se o autor for renomeado depois, o valor não é atualizado.

    Igualdade compara id, title, author_name, publication_year e
    is_available. Livros ainda sem id (não gravados) só são iguais a si
    mesmos, para que category.books não confunda dois livros novos.
    O hash usa os mesmos campos mutáveis: um livro guardado em set ou
    como chave de dict se perde depois de update_book.

    Attributes:
        id: ID do livro
        title: Título do livro
        author_name: Nome do autor no momento da associação
        publication_year: Ano de publicação (opcional)
        is_available: Disponível para empréstimo
        author_id: FK para o autor (opcional)
        categories: Categorias do livro
    """
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    author_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("authors.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    author: Mapped[Optional["Author"]] = relationship(
        "Author",
        back_populates="books",
        lazy="selectin",
    )
    categories: Mapped[Set["Category"]] = relationship(
        "Category",
        secondary=book_category,
        back_populates="books",
        collection_class=set,
        lazy="selectin",
    )

    def set_author(self, author: Optional["Author"]) -> None:
        """
        Associa o autor e copia o nome dele para author_name.

        O back_populates registra o livro em author.books. Com None a
        referência é removida e author_name é mantido.
        """
        self.author = author
        if author is not None:
            self.author_name = author.name

    def add_category(self, category: "Category") -> None:
        """Adiciona a categoria dos dois lados da associação."""
        if category in self.categories:
            return
        # back_populates mantém category.books em sincronia
        self.categories.add(category)

    def remove_category(self, category: "Category") -> None:
        """Remove a categoria dos dois lados da associação."""
        if category not in self.categories:
            return
        self.categories.remove(category)

    @property
    def category_names(self) -> list[str]:
        return sorted(c.name for c in self.categories)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Book):
            return NotImplemented
        if self.id is None or other.id is None:
            return False
        return (
            self.id == other.id
            and self.title == other.title
            and self.author_name == other.author_name
            and self.publication_year == other.publication_year
            and self.is_available == other.is_available
        )

    def __hash__(self) -> int:
        return hash(
            (self.id, self.title, self.author_name, self.publication_year, self.is_available)
        )

    def __repr__(self) -> str:
        return (
            f"<Book id={self.id} title={self.title!r} author_name={self.author_name!r} "
            f"publication_year={self.publication_year} is_available={self.is_available} "
            f"categories={self.category_names}>"
        )
