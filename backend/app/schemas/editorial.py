"""
Schemas Pydantic para Editorial.
"""

from uuid import UUID

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema, TimestampSchema


class EditorialCreate(BaseSchema):
    name: str = Field(..., min_length=2, max_length=255, examples=["Companhia das Letras"])
    address: str = Field(..., min_length=2, max_length=500)
    email: EmailStr


class EditorialRead(TimestampSchema):
    id: UUID
    name: str
    address: str
    email: str


class EditorialUpdate(BaseSchema):
    name: str | None = Field(None, min_length=2, max_length=255)
    address: str | None = Field(None, min_length=2, max_length=500)
    email: EmailStr | None = None
