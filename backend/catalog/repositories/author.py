"""
Repository para operações de Author no banco de dados.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from catalog.models.author import Author
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository para operações CRUD de Author."""

    def __init__(self, db: Session):
        super().__init__(Author, db)

    def get_by_name(self, name: str) -> Author | None:
        """Busca autor por nome exato."""
        result = self.db.execute(
            select(Author).where(Author.name == name)
        )
        return result.scalars().first()

    def search_by_name(self, name: str) -> list[Author]:
        """Busca autores por nome (parcial, case insensitive)."""
        result = self.db.execute(
            select(Author)
            .where(Author.name.ilike(f"%{name}%"))
            .order_by(Author.name)
        )
        return list(result.scalars().all())

    def get_with_books(self, author_id: int) -> Author | None:
        """Busca autor com seus livros carregados."""
        result = self.db.execute(
            select(Author)
            .where(Author.id == author_id)
            .options(selectinload(Author.books))
        )
        return result.scalar_one_or_none()
