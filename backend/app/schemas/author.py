"""
Schemas Pydantic para Author.
"""

from datetime import date
from uuid import UUID

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.gender import GenderRead


class AuthorCreate(BaseSchema):
    """Schema para criação de autor."""
    name: str = Field(..., min_length=2, max_length=255, examples=["Machado"])
    last_name: str = Field(..., min_length=2, max_length=255, examples=["de Assis"])
    birthdate: date = Field(..., examples=["1839-06-21"])
    gender_id: UUID


class AuthorRead(TimestampSchema):
    """Schema para leitura de autor."""
    id: UUID
    name: str
    last_name: str
    birthdate: date
    gender_id: UUID
    gender: GenderRead | None = None


class AuthorUpdate(BaseSchema):
    """Schema para atualização de autor."""
    name: str | None = Field(None, min_length=2, max_length=255)
    last_name: str | None = Field(None, min_length=2, max_length=255)
    birthdate: date | None = None
    gender_id: UUID | None = None


class AuthorSummary(BaseSchema):
    """Autor resumido, embutido nos livros."""
    id: UUID
    name: str
    last_name: str
