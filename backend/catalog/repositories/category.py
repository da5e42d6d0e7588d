"""
Repository para operações de Category no banco de dados.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.models.category import Category
from catalog.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository para operações CRUD de Category."""

    def __init__(self, db: Session):
        super().__init__(Category, db)

    def get_by_name(self, name: str) -> Category | None:
        """Busca categoria por nome exato (a primeira, se houver repetidas)."""
        result = self.db.execute(
            select(Category)
            .where(Category.name == name)
            .order_by(Category.id)
        )
        return result.scalars().first()

    def get_all_ordered(self) -> list[Category]:
        """Lista categorias por nome."""
        result = self.db.execute(
            select(Category).order_by(Category.name)
        )
        return list(result.scalars().all())
