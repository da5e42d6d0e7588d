"""
Schemas Pydantic para Category.
"""

from pydantic import Field

from catalog.schemas.base import BaseSchema


class CategoryCreate(BaseSchema):
    """Schema para criação de categoria."""
    name: str = Field(..., min_length=1, max_length=255, examples=["Dystopian"])


class CategoryRead(BaseSchema):
    """Schema para leitura de categoria."""
    id: int
    name: str
