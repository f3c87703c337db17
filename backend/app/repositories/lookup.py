"""
Repositories das entidades simples, sem referências a outras tabelas.
"""

from typing import ClassVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.editorial import Editorial
from app.models.equipment import Equipment
from app.models.gender import Gender
from app.models.plan import Plan
from app.models.room import RoomLocation
from app.models.statuses import BookStatus, LoanStatus, PlanStatus, RoomStatus
from app.repositories.base import BaseRepository, ModelType


class GenderRepository(BaseRepository[Gender]):
    def __init__(self, db: AsyncSession):
        super().__init__(Gender, db)


class EditorialRepository(BaseRepository[Editorial]):
    def __init__(self, db: AsyncSession):
        super().__init__(Editorial, db)


class PlanRepository(BaseRepository[Plan]):
    def __init__(self, db: AsyncSession):
        super().__init__(Plan, db)


class StatusRepository(BaseRepository[ModelType]):
    """Repository de tabela de status, com busca exata pelo rótulo."""

    label_column: ClassVar[str]

    async def find_by_label(self, label: str) -> ModelType | None:
        """Busca status pelo rótulo exato, ignorando maiúsculas/minúsculas."""
        column = getattr(self.model, self.label_column)
        result = await self.db.execute(
            select(self.model)
            .where(func.lower(column) == label.lower())
            .order_by(self.model.created_at.asc())
            .limit(1)
        )
        return result.scalar_one_or_none()


class PlanStatusRepository(StatusRepository[PlanStatus]):
    label_column = "plan_status"

    def __init__(self, db: AsyncSession):
        super().__init__(PlanStatus, db)


class LoanStatusRepository(StatusRepository[LoanStatus]):
    label_column = "loan_status"

    def __init__(self, db: AsyncSession):
        super().__init__(LoanStatus, db)


class BookStatusRepository(StatusRepository[BookStatus]):
    label_column = "book_status"

    def __init__(self, db: AsyncSession):
        super().__init__(BookStatus, db)


class RoomStatusRepository(BaseRepository[RoomStatus]):
    def __init__(self, db: AsyncSession):
        super().__init__(RoomStatus, db)


class RoomLocationRepository(BaseRepository[RoomLocation]):
    def __init__(self, db: AsyncSession):
        super().__init__(RoomLocation, db)


class EquipmentRepository(BaseRepository[Equipment]):
    """Repository de Equipment."""

    def __init__(self, db: AsyncSession):
        super().__init__(Equipment, db)

    async def find_by_ids(self, ids: list) -> list[Equipment]:
        """Busca vários equipamentos de uma vez (ids ausentes são ignorados)."""
        if not ids:
            return []
        result = await self.db.execute(select(Equipment).where(Equipment.id.in_(ids)))
        return list(result.scalars().all())
