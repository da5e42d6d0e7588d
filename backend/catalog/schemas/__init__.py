"""
Schemas Pydantic da aplicação.
"""

from catalog.schemas.base import BaseSchema
from catalog.schemas.book import BookCreate, BookDetail, BookRead, BookUpdate
from catalog.schemas.author import AuthorCreate, AuthorRead, AuthorWithBooks
from catalog.schemas.category import CategoryCreate, CategoryRead

__all__ = [
    "BaseSchema",
    "AuthorCreate",
    "AuthorRead",
    "AuthorWithBooks",
    "BookCreate",
    "BookDetail",
    "BookRead",
    "BookUpdate",
    "CategoryCreate",
    "CategoryRead",
]
