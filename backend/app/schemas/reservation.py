"""
Schemas Pydantic para Reservation.

As datas chegam como horário local "YYYY-MM-DD HH:MM"; ISO 8601 também é
aceito, e valores com timezone são convertidos para o horário local.
"""

from datetime import datetime
from typing import Any, List
from uuid import UUID

from pydantic import Field, field_validator

from app.core.scheduling import parse_datetime, to_local_naive
from app.schemas.base import BaseSchema, TimestampSchema
from app.schemas.equipment import EquipmentRead
from app.schemas.room import RoomSummary
from app.schemas.user import UserSummary


def _coerce_datetime(value: Any) -> Any:
    if isinstance(value, str):
        try:
            value = parse_datetime(value)
        except ValueError:
            value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        return to_local_naive(value)
    return value


class ReservationCreate(BaseSchema):
    """Schema para criação de reserva."""
    user_id: UUID
    room_id: UUID
    start_date: datetime = Field(..., examples=["2030-01-07 10:00"])
    finish_date: datetime = Field(..., examples=["2030-01-07 12:00"])
    people: int = Field(..., examples=[4])
    equipments: List[UUID] = Field(default_factory=list)

    @field_validator("start_date", "finish_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        return _coerce_datetime(v)


class ReservationUpdate(BaseSchema):
    """Schema para atualização de reserva (campos opcionais)."""
    user_id: UUID | None = None
    room_id: UUID | None = None
    start_date: datetime | None = None
    finish_date: datetime | None = None
    people: int | None = None
    equipments: List[UUID] | None = None

    @field_validator("start_date", "finish_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        return _coerce_datetime(v)


class ReservationRead(TimestampSchema):
    """Schema para leitura de reserva."""
    id: UUID
    user_id: UUID
    room_id: UUID
    start_date: datetime
    finish_date: datetime
    people: int
    user: UserSummary | None = None
    room: RoomSummary | None = None
    equipments: List[EquipmentRead] = []
