"""
Módulo de repositórios - acesso a dados.
"""

from catalog.repositories.base import BaseRepository
from catalog.repositories.author import AuthorRepository
from catalog.repositories.book import BookRepository
from catalog.repositories.category import CategoryRepository

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "BookRepository",
    "CategoryRepository",
]
