"""
Models de sala: RoomLocation (localização) e Room.
"""

import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key

if TYPE_CHECKING:
    from app.models.statuses import RoomStatus


class RoomLocation(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "room_locations"

    location: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<RoomLocation {self.location}>"


class Room(Base, UUIDMixin, TimestampMixin):
    """
    Sala reservável.

    Attributes:
        name: Nome da sala (único)
        min_people: Quantidade mínima de pessoas por reserva
        max_people: Quantidade máxima de pessoas por reserva
        room_location_id: FK para a localização
        room_status_id: FK para o status da sala
        room_img: Caminho da imagem (opcional)
    """
    __tablename__ = "rooms"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    min_people: Mapped[int] = mapped_column(Integer, nullable=False)
    max_people: Mapped[int] = mapped_column(Integer, nullable=False)
    room_location_id: Mapped[uuid.UUID] = foreign_key("room_locations")
    room_status_id: Mapped[uuid.UUID] = foreign_key("room_statuses")
    room_img: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    room_location: Mapped["RoomLocation"] = relationship("RoomLocation", lazy="raise")
    room_status: Mapped["RoomStatus"] = relationship("RoomStatus", lazy="raise")

    __table_args__ = (
        CheckConstraint("min_people <= max_people", name="ck_rooms_people_range"),
    )

    def __repr__(self) -> str:
        return f"<Room {self.name}>"

    def accepts(self, people: int) -> bool:
        """Retorna True se `people` está em [min_people, max_people]."""
        return self.min_people <= people <= self.max_people
