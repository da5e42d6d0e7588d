"""
Service para operações de Category.
"""

from sqlalchemy.orm import Session

from catalog.core.logging import get_logger
from catalog.db.session import transaction
from catalog.models.category import Category
from catalog.repositories.category import CategoryRepository
from catalog.schemas.category import CategoryCreate

logger = get_logger(__name__)


class CategoryService:
    """Service para operações de Category."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CategoryRepository(db)

    def create_category(self, name: str) -> Category:
        """
        Cria nova categoria.

        Raises:
            TransactionError: Nome vazio ou falha ao gravar (rollback já feito)
        """
        with transaction(self.db, "create_category"):
            data = CategoryCreate(name=name)
            category = self.repo.create(name=data.name)
        logger.info(f"Categoria criada: {category.name} (ID: {category.id})")
        return category

    def find_category_by_id(self, category_id: int) -> Category | None:
        return self.repo.get_by_id(category_id)

    def find_category_by_name(self, name: str) -> Category | None:
        return self.repo.get_by_name(name)

    def list_categories(self) -> list[Category]:
        return self.repo.get_all_ordered()
