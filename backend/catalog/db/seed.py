"""
Dados de exemplo do catálogo.

Cria 3 autores, 5 categorias e 5 livros e associa as categorias aos
livros. Usado pelo driver de demonstração (catalog.main).
"""

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from catalog.core.logging import get_logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.category import Category
from catalog.services.author import AuthorService
from catalog.services.book import BookService
from catalog.services.category import CategoryService

logger = get_logger(__name__)

AUTHORS = [
    ("George Orwell", "United Kingdom"),
    ("Aldous Huxley", "United Kingdom"),
    ("Gabriel García Márquez", "Colombia"),
]

CATEGORIES = ["Fiction", "Dystopian", "Classic", "Science Fiction", "Magical Realism"]

# (título, autor, ano, categorias)
BOOKS = [
    ("1984", "George Orwell", 1949, ["Fiction", "Dystopian", "Classic"]),
    ("Animal Farm", "George Orwell", 1945, ["Fiction", "Classic"]),
    ("Brave New World", "Aldous Huxley", 1932, ["Fiction", "Science Fiction"]),
    ("Island", "Aldous Huxley", 1962, ["Fiction"]),
    ("One Hundred Years of Solitude", "Gabriel García Márquez", 1967, ["Fiction", "Magical Realism", "Classic"]),
]


@dataclass
class SeedResult:
    """Entidades criadas pelo seed, indexadas por nome/título."""
    authors: dict[str, Author] = field(default_factory=dict)
    categories: dict[str, Category] = field(default_factory=dict)
    books: dict[str, Book] = field(default_factory=dict)


def seed_catalog(db: Session) -> SeedResult:
    """
    Popula o banco com os dados de exemplo.

    Raises:
        TransactionError: Falha em alguma das gravações
    """
    author_service = AuthorService(db)
    category_service = CategoryService(db)
    book_service = BookService(db)
    result = SeedResult()

    logger.info("Executando seeds...")

    for name, country in AUTHORS:
        result.authors[name] = author_service.create_author(name, country)

    for name in CATEGORIES:
        result.categories[name] = category_service.create_category(name)

    for title, author_name, year, category_names in BOOKS:
        book = book_service.create_book(title, result.authors[author_name], year)
        for category_name in category_names:
            book_service.add_category(book.id, result.categories[category_name].id)
        result.books[title] = book

    logger.info(
        f"Seeds concluídos: {len(result.authors)} autores, "
        f"{len(result.categories)} categorias, {len(result.books)} livros"
    )
    return result
