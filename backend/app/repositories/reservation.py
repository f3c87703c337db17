"""
Repository para operações de Reservation no banco de dados.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.reservation import Reservation
from app.models.room import Room
from app.repositories.base import BaseRepository


class ReservationRepository(BaseRepository[Reservation]):
    """Repository para operações CRUD de Reservation."""

    load_options = (
        selectinload(Reservation.user),
        selectinload(Reservation.room).selectinload(Room.room_location),
        selectinload(Reservation.room).selectinload(Room.room_status),
        selectinload(Reservation.equipments),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    def _default_order(self):
        return (Reservation.start_date.asc(), Reservation.id.asc())

    async def find_overlapping(
        self,
        room_id: UUID,
        start_date: datetime,
        finish_date: datetime,
        exclude_id: UUID | None = None,
    ) -> Reservation | None:
        """
        Busca uma reserva da sala cujo intervalo intersecta [start, finish).

        Dois intervalos semiabertos se sobrepõem quando
        `a_start < b_end AND b_start < a_end`; reservas encostadas
        (fim de uma == início da outra) não conflitam.

        Args:
            room_id: Sala
            start_date: Início do intervalo candidato
            finish_date: Fim do intervalo candidato
            exclude_id: Reserva a ignorar (a própria, em atualizações)
        """
        query = self._select().where(
            Reservation.room_id == room_id,
            Reservation.start_date < finish_date,
            Reservation.finish_date > start_date,
        )
        if exclude_id is not None:
            query = query.where(Reservation.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()
