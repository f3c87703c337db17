"""
Schemas Pydantic para Equipment.
"""

from uuid import UUID

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class EquipmentCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255, examples=["Projetor"])
    inventory: str = Field(..., min_length=1, max_length=100, examples=["INV-0001"])
    brand: str = Field(..., min_length=1, max_length=100, examples=["Epson"])


class EquipmentRead(TimestampSchema):
    id: UUID
    name: str
    inventory: str
    brand: str


class EquipmentUpdate(BaseSchema):
    name: str | None = Field(None, min_length=1, max_length=255)
    inventory: str | None = Field(None, min_length=1, max_length=100)
    brand: str | None = Field(None, min_length=1, max_length=100)
