"""
Models SQLAlchemy da aplicação.

Importar todos os models aqui para que o create_all registre as tabelas.
"""

from catalog.models.author import Author
from catalog.models.book import Book, book_category
from catalog.models.category import Category

__all__ = [
    "Author",
    "Book",
    "Category",
    "book_category",
]
