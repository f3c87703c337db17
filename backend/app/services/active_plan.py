"""
Service para lógica de negócio de ActivePlan (assinaturas).

Fluxo:
    create  -> ACTIVE, vigência até now + ACTIVE_PLAN_SUBSCRIPTION_DAYS
    renew   -> estende ending_date pelo mesmo número de dias
    finish  -> FINISHED, finished_date = now
    cancel  -> CANCELED, finished_date = now

Um usuário não pode ter duas assinaturas ACTIVE com vigências sobrepostas.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.errors import (
    ActivePlanAlreadyCancelled,
    ActivePlanAlreadyFinished,
    ActivePlanStatusChangeNotAllowed,
    ObjectAlreadyExists,
    ObjectMissingParameters,
    ObjectNotFound,
)
from app.core.filters import FieldType
from app.core.logging import get_logger
from app.models.active_plan import ActivePlan
from app.models.statuses import (
    PLAN_STATUS_ACTIVE,
    PLAN_STATUS_CANCELED,
    PLAN_STATUS_FINISHED,
    PlanStatus,
)
from app.repositories.active_plan import ActivePlanRepository
from app.repositories.lookup import PlanRepository, PlanStatusRepository
from app.repositories.user import UserRepository
from app.schemas.active_plan import ActivePlanCreate, ActivePlanUpdate
from app.services.base import CrudService

logger = get_logger(__name__)


class ActivePlanService(CrudService[ActivePlan]):
    """Service para operações de ActivePlan."""

    entity_name = "active_plan"
    repository_class = ActivePlanRepository
    field_types = {
        "user": FieldType.IDENTIFIER,
        "plan": FieldType.IDENTIFIER,
        "plan_status": FieldType.IDENTIFIER,
        "ending_date": FieldType.DATE,
        "finished_date": FieldType.DATE,
    }
    references = {
        "user_id": ("user", UserRepository),
        "plan_id": ("plan", PlanRepository),
        "plan_status_id": ("plan_status", PlanStatusRepository),
    }

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.user_repo = UserRepository(db)
        self.status_repo = PlanStatusRepository(db)
        self.settings = get_settings()

    @property
    def subscription_period(self) -> timedelta:
        return timedelta(days=self.settings.ACTIVE_PLAN_SUBSCRIPTION_DAYS)

    async def _status(self, label: str) -> PlanStatus:
        """
        Raises:
            ObjectNotFound: status com o rótulo não cadastrado
        """
        plan_status = await self.status_repo.find_by_label(label)
        if plan_status is None:
            raise ObjectNotFound("plan_status")
        return plan_status

    async def _check_overlap(
        self,
        user_id: UUID,
        start: datetime,
        end: datetime,
        exclude_id: UUID | None = None,
    ) -> None:
        """
        Bloqueia a linha do usuário e rejeita vigência sobreposta a uma
        assinatura ACTIVE existente.

        Raises:
            ObjectAlreadyExists: usuário já possui assinatura ACTIVE no período
        """
        await self.user_repo.lock_by_id(user_id)
        active = await self._status(PLAN_STATUS_ACTIVE)
        conflict = await self.repo.find_overlapping(
            user_id, active.id, start, end, exclude_id=exclude_id
        )
        if conflict is not None:
            raise ObjectAlreadyExists(self.entity_name)

    async def create(self, data: ActivePlanCreate) -> ActivePlan:
        """
        Cria assinatura para o usuário.

        Sem status informado usa ACTIVE; sem ending_date usa now + período
        de assinatura.

        Raises:
            ObjectNotFound: usuário, plano ou status inexistente
            ObjectAlreadyExists: sobreposição com assinatura ACTIVE do usuário
        """
        values = data.model_dump()
        await self._check_references(values)

        now = datetime.now(timezone.utc)
        if values.get("plan_status_id") is None:
            values["plan_status_id"] = (await self._status(PLAN_STATUS_ACTIVE)).id
        if values.get("ending_date") is None:
            values["ending_date"] = now + self.subscription_period

        await self._check_overlap(values["user_id"], now, values["ending_date"])

        active_plan = await self.repo.create(**values)
        logger.info(
            f"Assinatura criada: {active_plan.id} usuário={active_plan.user_id} "
            f"até {active_plan.ending_date}"
        )
        return active_plan

    def _ensure_open(self, active_plan: ActivePlan) -> None:
        """
        Raises:
            ActivePlanAlreadyCancelled: assinatura cancelada
            ActivePlanAlreadyFinished: assinatura finalizada
        """
        if active_plan.is_cancelled:
            raise ActivePlanAlreadyCancelled()
        if active_plan.is_finished or active_plan.finished_date is not None:
            raise ActivePlanAlreadyFinished()

    async def update(self, id: UUID | None, data: ActivePlanUpdate) -> ActivePlan:
        """
        Atualiza assinatura; se o status resultante for ACTIVE, a vigência
        resultante não pode sobrepor outra assinatura ACTIVE do usuário.

        O status só muda para ACTIVE, e apenas em assinaturas não encerradas;
        FINISHED e CANCELED são alcançados somente por finish e cancel.

        Raises:
            ObjectMissingParameters: id ou campos não informados
            ObjectNotFound: assinatura ou referência inexistente
            ActivePlanAlreadyFinished: mudança de status em assinatura finalizada
            ActivePlanAlreadyCancelled: mudança de status em assinatura cancelada
            ActivePlanStatusChangeNotAllowed: status alvo diferente de ACTIVE
            ObjectAlreadyExists: sobreposição com outra assinatura ACTIVE
        """
        if id is None:
            raise ObjectMissingParameters(self.entity_name)
        changes = self._changes(data)
        if not changes:
            raise ObjectMissingParameters(self.entity_name)
        active_plan = await self.get_by_id(id)
        await self._check_references(changes)

        active = await self._status(PLAN_STATUS_ACTIVE)
        new_status_id = changes.get("plan_status_id")
        if new_status_id is not None and new_status_id != active_plan.plan_status_id:
            self._ensure_open(active_plan)
            if new_status_id != active.id:
                raise ActivePlanStatusChangeNotAllowed()

        merged = self._merge(
            active_plan, changes, ("user_id", "plan_status_id", "ending_date", "finished_date")
        )
        if merged["plan_status_id"] == active.id:
            end = merged["finished_date"] or merged["ending_date"]
            if end is not None:
                await self._check_overlap(
                    merged["user_id"], active_plan.created_at, end, exclude_id=active_plan.id
                )

        updated = await self.repo.update(active_plan, **changes)
        logger.info(f"Assinatura atualizada: {id}")
        return updated

    async def renew(self, id: UUID | None) -> ActivePlan:
        """
        Renova assinatura estendendo ending_date em ACTIVE_PLAN_SUBSCRIPTION_DAYS.

        Raises:
            ObjectMissingParameters: id não informado
            ObjectNotFound: assinatura inexistente
            ActivePlanAlreadyFinished: assinatura finalizada ou cancelada
        """
        active_plan = await self.get_by_id(id)
        if (
            active_plan.finished_date is not None
            or active_plan.is_finished
            or active_plan.is_cancelled
        ):
            raise ActivePlanAlreadyFinished()

        base = active_plan.ending_date or datetime.now(timezone.utc)
        renewed = await self.repo.update(
            active_plan, ending_date=base + self.subscription_period
        )
        logger.info(f"Assinatura renovada: {id} até {renewed.ending_date}")
        return renewed

    async def finish(self, id: UUID | None) -> ActivePlan:
        """
        Finaliza assinatura (status FINISHED).

        Raises:
            ActivePlanAlreadyCancelled: assinatura cancelada
            ActivePlanAlreadyFinished: assinatura já finalizada
        """
        active_plan = await self.get_by_id(id)
        self._ensure_open(active_plan)
        return await self._close(active_plan, PLAN_STATUS_FINISHED)

    async def cancel(self, id: UUID | None) -> ActivePlan:
        """
        Cancela assinatura (status CANCELED).

        Raises:
            ActivePlanAlreadyFinished: assinatura já finalizada
            ActivePlanAlreadyCancelled: assinatura já cancelada
        """
        active_plan = await self.get_by_id(id)
        if active_plan.is_finished:
            raise ActivePlanAlreadyFinished()
        if active_plan.is_cancelled or active_plan.finished_date is not None:
            raise ActivePlanAlreadyCancelled()
        return await self._close(active_plan, PLAN_STATUS_CANCELED)

    async def _close(self, active_plan: ActivePlan, label: str) -> ActivePlan:
        plan_status = await self._status(label)
        closed = await self.repo.update(
            active_plan,
            plan_status_id=plan_status.id,
            finished_date=datetime.now(timezone.utc),
        )
        logger.info(f"Assinatura {active_plan.id} encerrada como {label}")
        return closed
