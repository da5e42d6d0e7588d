"""
Schemas Pydantic para Author.
"""

from pydantic import Field

from catalog.schemas.base import BaseSchema
from catalog.schemas.book import BookRead


class AuthorCreate(BaseSchema):
    """Schema para criação de autor."""
    name: str = Field(..., min_length=1, max_length=255, examples=["George Orwell"])
    country: str | None = Field(None, max_length=255, examples=["United Kingdom"])


class AuthorRead(BaseSchema):
    """Schema para leitura de autor."""
    id: int
    name: str
    country: str | None


class AuthorWithBooks(AuthorRead):
    """Autor com lista de livros (carregada de forma explícita)."""
    books: list[BookRead] = []
