"""
Schemas Pydantic para Gender.
"""

from uuid import UUID

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class GenderCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=100, examples=["Female"])


class GenderRead(TimestampSchema):
    id: UUID
    name: str


class GenderUpdate(BaseSchema):
    name: str | None = Field(None, min_length=1, max_length=100)
