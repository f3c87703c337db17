"""
Model de assinatura ativa (instância de um plano para um usuário).
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key
from app.models.statuses import PLAN_STATUS_CANCELED, PLAN_STATUS_FINISHED

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.plan import Plan
    from app.models.statuses import PlanStatus


class ActivePlan(Base, UUIDMixin, TimestampMixin):
    """
    Assinatura de um plano por um usuário.

    Fluxo de estados:
        ACTIVE -> FINISHED (finish)
        ACTIVE -> CANCELED (cancel)
        FINISHED e CANCELED são finais.

    A vigência vai de created_at até ending_date (ou finished_date, quando
    encerrada antes). Um usuário não pode ter duas assinaturas ACTIVE com
    vigências sobrepostas.

    Attributes:
        user_id: FK para o usuário
        plan_id: FK para o plano
        plan_status_id: FK para o status atual
        ending_date: Fim previsto da vigência
        finished_date: Data em que foi finalizada ou cancelada
    """
    __tablename__ = "active_plans"

    user_id: Mapped[uuid.UUID] = foreign_key("users", ondelete="CASCADE")
    plan_id: Mapped[uuid.UUID] = foreign_key("plans")
    plan_status_id: Mapped[uuid.UUID] = foreign_key("plan_statuses")
    ending_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    finished_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    user: Mapped["User"] = relationship("User", lazy="raise")
    plan: Mapped["Plan"] = relationship("Plan", lazy="raise")
    plan_status: Mapped["PlanStatus"] = relationship("PlanStatus", lazy="raise")

    __table_args__ = (
        Index("ix_active_plans_user_status", "user_id", "plan_status_id"),
    )

    def __repr__(self) -> str:
        return f"<ActivePlan {self.id} user={self.user_id}>"

    @property
    def status_label(self) -> str:
        """Rótulo do status em maiúsculas (requer plan_status carregado)."""
        return self.plan_status.plan_status.upper() if self.plan_status else ""

    @property
    def is_finished(self) -> bool:
        return self.status_label == PLAN_STATUS_FINISHED

    @property
    def is_cancelled(self) -> bool:
        return self.status_label == PLAN_STATUS_CANCELED
