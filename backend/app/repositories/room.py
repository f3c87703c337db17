"""
Repository para operações de Room no banco de dados.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.room import Room
from app.repositories.base import BaseRepository


class RoomRepository(BaseRepository[Room]):
    """Repository para operações CRUD de Room (com localização e status)."""

    load_options = (
        selectinload(Room.room_location),
        selectinload(Room.room_status),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(Room, db)

    def _default_order(self):
        return (Room.name.asc(), Room.id.asc())
