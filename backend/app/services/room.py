"""
Service para lógica de negócio de Room.
"""

from app.core.errors import ObjectMissingParameters
from app.core.filters import FieldType
from app.models.room import Room
from app.repositories.lookup import RoomLocationRepository, RoomStatusRepository
from app.repositories.room import RoomRepository
from app.services.base import CrudService


class RoomService(CrudService[Room]):
    """
    Service para operações de Room.

    A faixa [min_people, max_people] é validada pelo schema na criação e,
    nas atualizações parciais, sobre os valores resultantes.
    """

    entity_name = "room"
    repository_class = RoomRepository
    field_types = {
        "name": FieldType.STRING,
        "min_people": FieldType.NUMBER,
        "max_people": FieldType.NUMBER,
        "room_location": FieldType.IDENTIFIER,
        "room_status": FieldType.IDENTIFIER,
    }
    unique_fields = ("name",)
    references = {
        "room_location_id": ("room_location", RoomLocationRepository),
        "room_status_id": ("room_status", RoomStatusRepository),
    }

    async def update(self, id, data):
        """
        Atualiza sala garantindo min_people <= max_people após o merge.

        Raises:
            ObjectMissingParameters: faixa de pessoas resultante inválida
        """
        changes = self._changes(data)
        if id is not None and {"min_people", "max_people"} & set(changes):
            room = await self.get_by_id(id)
            merged = self._merge(room, changes, ("min_people", "max_people"))
            if merged["min_people"] > merged["max_people"]:
                raise ObjectMissingParameters(self.entity_name)
        return await super().update(id, data)
