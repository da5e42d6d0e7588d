"""
Módulo de serviços - operações transacionais do catálogo.
"""

from catalog.services.author import AuthorService
from catalog.services.book import BookService
from catalog.services.category import CategoryService

__all__ = [
    "AuthorService",
    "BookService",
    "CategoryService",
]
