"""
Service para operações de Author.
"""

from sqlalchemy.orm import Session

from catalog.core.logging import get_logger
from catalog.db.session import transaction
from catalog.models.author import Author
from catalog.repositories.author import AuthorRepository
from catalog.schemas.author import AuthorCreate, AuthorWithBooks
from catalog.schemas.book import BookRead

logger = get_logger(__name__)


class AuthorService:
    """Service para operações de Author."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AuthorRepository(db)

    def create_author(self, name: str, country: str | None = None) -> Author:
        """
        Cria novo autor.

        Raises:
            TransactionError: Nome vazio ou falha ao gravar (rollback já feito)
        """
        with transaction(self.db, "create_author"):
            data = AuthorCreate(name=name, country=country)
            author = self.repo.create(name=data.name, country=data.country)
        logger.info(f"Autor criado: {author.name} (ID: {author.id})")
        return author

    def find_author_by_id(self, author_id: int) -> Author | None:
        """Busca autor por ID. Retorna None se não existir."""
        return self.repo.get_by_id(author_id)

    def load_author_with_books(self, author_id: int) -> AuthorWithBooks | None:
        """Busca autor com seus livros, já convertido para value object."""
        author = self.repo.get_with_books(author_id)
        if author is None:
            return None
        return AuthorWithBooks(
            id=author.id,
            name=author.name,
            country=author.country,
            books=[BookRead.model_validate(book) for book in author.books],
        )

    def search_authors(self, name: str) -> list[Author]:
        """Busca autores por nome parcial."""
        return self.repo.search_by_name(name)
