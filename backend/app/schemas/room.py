"""
Schemas Pydantic para Room e RoomLocation.
"""

from uuid import UUID

from pydantic import Field, model_validator

from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.statuses import RoomStatusRead


class RoomLocationCreate(BaseSchema):
    location: str = Field(..., min_length=1, max_length=255, examples=["Piso 2, ala norte"])


class RoomLocationRead(TimestampSchema):
    id: UUID
    location: str


class RoomLocationUpdate(BaseSchema):
    location: str | None = Field(None, min_length=1, max_length=255)


class RoomCreate(BaseSchema):
    """
    Schema para criação de sala.

    Validações:
        - min_people >= 1 e min_people <= max_people
    """
    name: str = Field(..., min_length=1, max_length=255, examples=["Sala de estudo 1"])
    min_people: int = Field(..., ge=1, examples=[2])
    max_people: int = Field(..., ge=1, examples=[6])
    room_location_id: UUID
    room_status_id: UUID
    room_img: str | None = Field(None, max_length=500)

    @model_validator(mode="after")
    def validate_people_range(self) -> "RoomCreate":
        if self.min_people > self.max_people:
            raise ValueError("min_people deve ser menor ou igual a max_people")
        return self


class RoomRead(TimestampSchema):
    """Schema para leitura de sala, com localização e status."""
    id: UUID
    name: str
    min_people: int
    max_people: int
    room_location_id: UUID
    room_status_id: UUID
    room_img: str | None = None
    room_location: RoomLocationRead | None = None
    room_status: RoomStatusRead | None = None


class RoomSummary(BaseSchema):
    """Sala resumida, embutida em reservas."""
    id: UUID
    name: str
    min_people: int
    max_people: int


class RoomUpdate(BaseSchema):
    name: str | None = Field(None, min_length=1, max_length=255)
    min_people: int | None = Field(None, ge=1)
    max_people: int | None = Field(None, ge=1)
    room_location_id: UUID | None = None
    room_status_id: UUID | None = None
    room_img: str | None = Field(None, max_length=500)
