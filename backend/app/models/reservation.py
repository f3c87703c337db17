"""
Model de reserva de sala.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key
from app.models.equipment import reservation_equipments

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.room import Room
    from app.models.equipment import Equipment


class Reservation(Base, UUIDMixin, TimestampMixin):
    """
    Reserva de uma sala por um usuário no intervalo [start_date, finish_date).

    Regras de negócio (aplicadas pelo ReservationService):
        - Duas reservas da mesma sala não podem se sobrepor
        - people deve estar entre min_people e max_people da sala
        - Duração máxima e horário de funcionamento configuráveis
        - start_date não pode estar no passado e deve preceder finish_date

    A sobreposição também é barrada no banco pela constraint de exclusão
    `ex_reservations_room_overlap` (ver migração alembic).

    Attributes:
        user_id: FK para o usuário
        room_id: FK para a sala
        start_date: Início (horário local, sem timezone)
        finish_date: Fim (horário local, sem timezone)
        people: Quantidade de pessoas
        equipments: Equipamentos solicitados
    """
    __tablename__ = "reservations"

    user_id: Mapped[uuid.UUID] = foreign_key("users", ondelete="CASCADE")
    room_id: Mapped[uuid.UUID] = foreign_key("rooms", ondelete="CASCADE")
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    finish_date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    people: Mapped[int] = mapped_column(Integer, nullable=False)

    user: Mapped["User"] = relationship("User", lazy="raise")
    room: Mapped["Room"] = relationship("Room", lazy="raise")
    equipments: Mapped[List["Equipment"]] = relationship(
        "Equipment",
        secondary=reservation_equipments,
        lazy="raise",
    )

    __table_args__ = (
        # Busca de conflitos por sala e período
        Index("ix_reservations_room_period", "room_id", "start_date", "finish_date"),
    )

    def __repr__(self) -> str:
        return f"<Reservation {self.id} room={self.room_id}>"
