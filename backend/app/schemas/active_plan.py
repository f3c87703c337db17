"""
Schemas Pydantic para ActivePlan.

Datas sem timezone recebidas na API são interpretadas como UTC.
"""

from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from app.schemas.base import BaseSchema, TimestampSchema, as_utc
from app.schemas.plan import PlanRead
from app.schemas.statuses import PlanStatusRead
from app.schemas.user import UserSummary


class ActivePlanCreate(BaseSchema):
    """
    Schema para criação de assinatura.

    Sem `plan_status_id` a assinatura nasce ACTIVE; sem `ending_date` a
    vigência é de ACTIVE_PLAN_SUBSCRIPTION_DAYS dias.
    """
    user_id: UUID
    plan_id: UUID
    plan_status_id: UUID | None = None
    ending_date: datetime | None = None
    finished_date: datetime | None = None

    @field_validator("ending_date", "finished_date")
    @classmethod
    def normalize_timezone(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class ActivePlanRead(TimestampSchema):
    """Schema para leitura de assinatura."""
    id: UUID
    user_id: UUID
    plan_id: UUID
    plan_status_id: UUID
    ending_date: datetime | None = None
    finished_date: datetime | None = None
    user: UserSummary | None = None
    plan: PlanRead | None = None
    plan_status: PlanStatusRead | None = None


class ActivePlanUpdate(BaseSchema):
    user_id: UUID | None = None
    plan_id: UUID | None = None
    plan_status_id: UUID | None = None
    ending_date: datetime | None = None
    finished_date: datetime | None = None

    @field_validator("ending_date", "finished_date")
    @classmethod
    def normalize_timezone(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
