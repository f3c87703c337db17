"""
Service para lógica de negócio de Reservation.

Regras de negócio:
    - Usuário e sala precisam existir
    - start_date não pode estar no passado e deve preceder finish_date
    - Duas reservas da mesma sala não podem se sobrepor
    - people deve caber em [min_people, max_people] da sala
    - Duração máxima de RESERVATION_MAX_TIME_HOURS
    - A reserva precisa caber no horário de funcionamento do dia
    - Todos os equipamentos solicitados precisam existir
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import (
    DateInPast,
    FinishDateBeforeStartDate,
    ObjectAlreadyExists,
    ObjectMissingParameters,
    ObjectNotFound,
    ReservationLongerThanAuthorized,
    ReservationOutsideWorkingHours,
    RoomPeopleUnauthorized,
)
from app.core.filters import FieldType
from app.core.logging import get_logger
from app.core.scheduling import is_within_working_hours, reservation_duration_hours
from app.models.equipment import Equipment
from app.models.reservation import Reservation
from app.repositories.lookup import EquipmentRepository
from app.repositories.reservation import ReservationRepository
from app.repositories.room import RoomRepository
from app.repositories.user import UserRepository
from app.schemas.reservation import ReservationCreate, ReservationUpdate
from app.services.base import CrudService

logger = get_logger(__name__)

PERIOD_FIELDS = ("user_id", "room_id", "start_date", "finish_date", "people")


class ReservationService(CrudService[Reservation]):
    """Service para operações de Reservation."""

    entity_name = "reservation"
    repository_class = ReservationRepository
    field_types = {
        "user": FieldType.IDENTIFIER,
        "room": FieldType.IDENTIFIER,
        "start_date": FieldType.DATE,
        "finish_date": FieldType.DATE,
        "people": FieldType.NUMBER,
    }
    references = {"user_id": ("user", UserRepository)}

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.room_repo = RoomRepository(db)
        self.equipment_repo = EquipmentRepository(db)
        self.settings = get_settings()

    async def _validate(
        self,
        values: dict[str, Any],
        exclude_id: UUID | None = None,
    ) -> None:
        """
        Aplica todas as regras de reserva sobre `values`.

        A linha da sala fica bloqueada (FOR UPDATE) até o commit, serializando
        reservas concorrentes da mesma sala.

        Raises:
            ObjectNotFound: usuário ou sala inexistente
            DateInPast: início no passado
            FinishDateBeforeStartDate: fim não é posterior ao início
            ObjectAlreadyExists: conflito com outra reserva da sala
            RoomPeopleUnauthorized: quantidade de pessoas fora da faixa da sala
            ReservationLongerThanAuthorized: duração acima do máximo
            ReservationOutsideWorkingHours: fora do horário de funcionamento
        """
        await self._check_references(values)

        room = await self.room_repo.lock_by_id(values["room_id"])
        if room is None:
            raise ObjectNotFound("room")

        start, finish = values["start_date"], values["finish_date"]
        if start < datetime.now():
            raise DateInPast()
        if finish <= start:
            raise FinishDateBeforeStartDate()

        conflict = await self.repo.find_overlapping(
            room.id, start, finish, exclude_id=exclude_id
        )
        if conflict is not None:
            raise ObjectAlreadyExists(self.entity_name)

        if not room.accepts(values["people"]):
            raise RoomPeopleUnauthorized()

        if reservation_duration_hours(start, finish) > self.settings.RESERVATION_MAX_TIME_HOURS:
            raise ReservationLongerThanAuthorized()

        if not is_within_working_hours(start, finish, self.settings):
            raise ReservationOutsideWorkingHours()

    async def _resolve_equipments(self, ids: list[UUID]) -> list[Equipment]:
        """
        Raises:
            ObjectNotFound: algum equipamento não existe
        """
        unique_ids = set(ids)
        equipments = await self.equipment_repo.find_by_ids(list(unique_ids))
        if len(equipments) != len(unique_ids):
            raise ObjectNotFound("equipment")
        return equipments

    async def _save(self, operation, *args, **kwargs) -> Reservation:
        """
        Grava a reserva; a constraint de exclusão do banco barra conflitos
        que escaparam da verificação.
        """
        try:
            return await operation(*args, **kwargs)
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Reserva rejeitada pela constraint de sobreposição")
            raise ObjectAlreadyExists(self.entity_name)

    async def create(self, data: ReservationCreate) -> Reservation:
        """
        Cria nova reserva.

        Args:
            data: usuário, sala, período, pessoas e equipamentos

        Returns:
            Reservation criada, com referências carregadas
        """
        values = data.model_dump()
        equipment_ids = values.pop("equipments", None) or []

        await self._validate(values)
        equipments = await self._resolve_equipments(equipment_ids)

        reservation = await self._save(
            self.repo.create, **values, equipments=equipments
        )
        logger.info(
            f"Reserva criada: {reservation.id} sala={reservation.room_id} "
            f"{reservation.start_date} - {reservation.finish_date}"
        )
        return reservation

    async def update(self, id: UUID | None, data: ReservationUpdate) -> Reservation:
        """
        Atualiza reserva; os valores resultantes passam pelas mesmas regras
        da criação, ignorando a própria reserva na checagem de conflito.

        Raises:
            ObjectMissingParameters: id ou campos não informados
            ObjectNotFound: reserva, usuário, sala ou equipamento inexistente
        """
        if id is None:
            raise ObjectMissingParameters(self.entity_name)
        changes = self._changes(data)
        if not changes:
            raise ObjectMissingParameters(self.entity_name)
        reservation = await self.get_by_id(id)

        equipment_ids = changes.pop("equipments", None)
        merged = self._merge(reservation, changes, PERIOD_FIELDS)
        await self._validate(merged, exclude_id=reservation.id)
        if equipment_ids is not None:
            changes["equipments"] = await self._resolve_equipments(equipment_ids)

        updated = await self._save(self.repo.update, reservation, **changes)
        logger.info(f"Reserva atualizada: {id}")
        return updated
