"""
Endpoints de Assinaturas (ActivePlan).

Contratos:
    - POST /active-plans: Cria assinatura (ACTIVE por padrão)
    - GET /active-plans: Lista assinaturas paginado ou filtra por campo
    - GET /active-plans/{id}: Detalhes da assinatura
    - PUT /active-plans/{id}: Atualiza assinatura
    - DELETE /active-plans/{id}: Remove assinatura
    - PATCH /active-plans/{id}/renew: Estende a vigência
    - PATCH /active-plans/{id}/finish: Finaliza a assinatura
    - PATCH /active-plans/{id}/cancel: Cancela a assinatura

Rate Limiting aplicado:
    - POST /active-plans: 30 req/min por IP (rate_limit_strict)

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: Parâmetros ausentes ou filtros inválidos
    - 404: Assinatura, usuário, plano ou status não encontrado
    - 409: Sobreposição com assinatura ACTIVE ou assinatura já encerrada
    - 429: Rate limit excedido
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.v1.crud import list_or_filter, paginated
from app.core.deps import DbSession, Listing
from app.core.rate_limit import rate_limit_strict
from app.schemas.active_plan import ActivePlanCreate, ActivePlanRead, ActivePlanUpdate
from app.schemas.base import MessageResponse, PaginatedResponse
from app.services.active_plan import ActivePlanService

router = APIRouter(prefix="/active-plans", tags=["Active plans"])


@router.post(
    "",
    response_model=ActivePlanRead,
    status_code=status.HTTP_201_CREATED,
    summary="Criar assinatura",
    description="Assina um plano para o usuário. Rejeita vigência sobreposta a outra ACTIVE.",
)
async def create_active_plan(
    data: ActivePlanCreate,
    db: DbSession,
    _: None = Depends(rate_limit_strict),
) -> ActivePlanRead:
    service = ActivePlanService(db)
    active_plan = await service.create(data)
    return ActivePlanRead.model_validate(active_plan)


@router.get(
    "",
    response_model=PaginatedResponse[ActivePlanRead],
    summary="Listar assinaturas",
    description="Filtros aceitos: user, plan, plan_status, ending_date, finished_date.",
)
async def list_active_plans(
    db: DbSession,
    params: Listing,
) -> PaginatedResponse[ActivePlanRead]:
    service = ActivePlanService(db)
    result = await list_or_filter(service, params)
    return paginated(result, ActivePlanRead)


@router.get(
    "/{active_plan_id}",
    response_model=ActivePlanRead,
    summary="Buscar assinatura",
)
async def get_active_plan(active_plan_id: UUID, db: DbSession) -> ActivePlanRead:
    service = ActivePlanService(db)
    active_plan = await service.get_by_id(active_plan_id)
    return ActivePlanRead.model_validate(active_plan)


@router.put(
    "/{active_plan_id}",
    response_model=ActivePlanRead,
    summary="Atualizar assinatura",
)
async def update_active_plan(
    active_plan_id: UUID,
    data: ActivePlanUpdate,
    db: DbSession,
) -> ActivePlanRead:
    service = ActivePlanService(db)
    active_plan = await service.update(active_plan_id, data)
    return ActivePlanRead.model_validate(active_plan)


@router.delete(
    "/{active_plan_id}",
    response_model=MessageResponse,
    summary="Remover assinatura",
)
async def delete_active_plan(active_plan_id: UUID, db: DbSession) -> MessageResponse:
    service = ActivePlanService(db)
    await service.delete(active_plan_id)
    return MessageResponse(message="Assinatura removida com sucesso")


@router.patch(
    "/{active_plan_id}/renew",
    response_model=ActivePlanRead,
    summary="Renovar assinatura",
    description="Estende ending_date em ACTIVE_PLAN_SUBSCRIPTION_DAYS dias.",
)
async def renew_active_plan(active_plan_id: UUID, db: DbSession) -> ActivePlanRead:
    """
    Raises:
        409: Assinatura finalizada ou cancelada
    """
    service = ActivePlanService(db)
    active_plan = await service.renew(active_plan_id)
    return ActivePlanRead.model_validate(active_plan)


@router.patch(
    "/{active_plan_id}/finish",
    response_model=ActivePlanRead,
    summary="Finalizar assinatura",
)
async def finish_active_plan(active_plan_id: UUID, db: DbSession) -> ActivePlanRead:
    """
    Raises:
        409: Assinatura já finalizada ou cancelada
    """
    service = ActivePlanService(db)
    active_plan = await service.finish(active_plan_id)
    return ActivePlanRead.model_validate(active_plan)


@router.patch(
    "/{active_plan_id}/cancel",
    response_model=ActivePlanRead,
    summary="Cancelar assinatura",
)
async def cancel_active_plan(active_plan_id: UUID, db: DbSession) -> ActivePlanRead:
    """
    Raises:
        409: Assinatura já finalizada ou cancelada
    """
    service = ActivePlanService(db)
    active_plan = await service.cancel(active_plan_id)
    return ActivePlanRead.model_validate(active_plan)
