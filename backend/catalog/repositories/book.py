"""
Repository para operações de Book no banco de dados.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from catalog.models.book import Book, book_category
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository para operações CRUD de Book."""

    def __init__(self, db: Session):
        super().__init__(Book, db)

    def get_with_categories(self, book_id: int) -> Book | None:
        """Busca livro com autor e categorias carregados."""
        result = self.db.execute(
            select(Book)
            .where(Book.id == book_id)
            .options(
                selectinload(Book.author),
                selectinload(Book.categories),
            )
        )
        return result.scalar_one_or_none()

    def get_available(self) -> list[Book]:
        """Lista livros disponíveis."""
        result = self.db.execute(
            select(Book).where(Book.is_available.is_(True))
        )
        return list(result.scalars().all())

    def get_by_author(self, author_id: int) -> list[Book]:
        """Lista todos os livros de um autor."""
        result = self.db.execute(
            select(Book)
            .where(Book.author_id == author_id)
            .order_by(Book.title)
        )
        return list(result.scalars().all())

    def get_by_category(self, category_id: int) -> list[Book]:
        """Lista livros associados à categoria via tabela de junção."""
        result = self.db.execute(
            select(Book)
            .join(book_category, book_category.c.book_id == Book.id)
            .where(book_category.c.category_id == category_id)
            .order_by(Book.title)
        )
        return list(result.scalars().all())
