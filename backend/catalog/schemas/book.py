"""
Schemas Pydantic para Book.
"""

from pydantic import Field

from catalog.schemas.base import BaseSchema


class BookCreate(BaseSchema):
    """Schema para criação de livro."""
    title: str = Field(..., min_length=1, max_length=500, examples=["1984"])
    publication_year: int | None = Field(None, examples=[1949])


class BookUpdate(BaseSchema):
    """Schema para atualização de título e disponibilidade."""
    title: str = Field(..., min_length=1, max_length=500)
    is_available: bool


class BookRead(BaseSchema):
    """Schema para leitura de livro."""
    id: int
    title: str
    author_name: str
    publication_year: int | None
    is_available: bool
    author_id: int | None


class BookDetail(BookRead):
    """
    Livro com autor e categorias já carregados.

    Value object desacoplado da sessão: pode ser usado depois que ela
    for fechada.
    """
    author_country: str | None = None
    categories: list[str] = []
