"""
Repository para operações de ActivePlan no banco de dados.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.active_plan import ActivePlan
from app.models.user import User
from app.repositories.base import BaseRepository


class ActivePlanRepository(BaseRepository[ActivePlan]):
    """Repository para operações CRUD de ActivePlan."""

    load_options = (
        selectinload(ActivePlan.user).selectinload(User.gender),
        selectinload(ActivePlan.plan),
        selectinload(ActivePlan.plan_status),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(ActivePlan, db)

    async def find_overlapping(
        self,
        user_id: UUID,
        active_status_id: UUID,
        start: datetime,
        end: datetime,
        exclude_id: UUID | None = None,
    ) -> ActivePlan | None:
        """
        Busca assinatura ACTIVE do usuário cuja vigência intersecta [start, end].

        A vigência de uma assinatura existente é [created_at, ending_date] ou,
        se já encerrada, [created_at, finished_date].
        """
        query = self._select().where(
            ActivePlan.user_id == user_id,
            ActivePlan.plan_status_id == active_status_id,
            or_(
                and_(ActivePlan.created_at < end, ActivePlan.ending_date > start),
                and_(ActivePlan.created_at < end, ActivePlan.finished_date > start),
            ),
        )
        if exclude_id is not None:
            query = query.where(ActivePlan.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def find_current(
        self,
        user_id: UUID,
        active_status_id: UUID,
        at: datetime,
    ) -> ActivePlan | None:
        """
        Busca a assinatura ACTIVE do usuário vigente em `at`, com o plano
        carregado; assinaturas com finished_date não contam.
        """
        query = self._select().where(
            ActivePlan.user_id == user_id,
            ActivePlan.plan_status_id == active_status_id,
            ActivePlan.created_at <= at,
            ActivePlan.finished_date.is_(None),
            or_(ActivePlan.ending_date.is_(None), ActivePlan.ending_date > at),
        )
        result = await self.db.execute(
            query.order_by(ActivePlan.created_at.desc()).limit(1)
        )
        return result.scalar_one_or_none()
