"""
Schemas Pydantic para User.
"""

from uuid import UUID

from pydantic import EmailStr, Field

from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.gender import GenderRead


class UserCreate(BaseSchema):
    """
    Schema para criação de usuário.

    Validações:
        - name/last_name: 2-255 caracteres
        - email: formato válido
    """
    name: str = Field(..., min_length=2, max_length=255, examples=["João"])
    last_name: str = Field(..., min_length=2, max_length=255, examples=["Silva"])
    email: EmailStr = Field(..., examples=["joao@email.com"])
    gender_id: UUID


class UserRead(TimestampSchema):
    """Schema para leitura de usuário."""
    id: UUID
    name: str
    last_name: str
    email: EmailStr
    gender_id: UUID
    gender: GenderRead | None = None


class UserUpdate(BaseSchema):
    """Schema para atualização de usuário."""
    name: str | None = Field(None, min_length=2, max_length=255)
    last_name: str | None = Field(None, min_length=2, max_length=255)
    email: EmailStr | None = None
    gender_id: UUID | None = None


class UserSummary(BaseSchema):
    """Usuário resumido, embutido em reservas e assinaturas."""
    id: UUID
    name: str
    last_name: str
    email: EmailStr
