"""
Endpoints de Reservas de sala (Reservation).

Contratos:
    - POST /reservations: Cria reserva
    - GET /reservations: Lista reservas paginado ou filtra por campo
    - GET /reservations/{id}: Detalhes da reserva
    - PUT /reservations/{id}: Atualiza reserva (regras reaplicadas)
    - DELETE /reservations/{id}: Remove reserva

Rate Limiting aplicado:
    - POST /reservations: 30 req/min por IP (rate_limit_strict)

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: Data no passado, fim antes do início, duração acima do máximo,
           fora do horário de funcionamento ou pessoas fora da faixa da sala
    - 404: Reserva, usuário, sala ou equipamento não encontrado
    - 409: Conflito com outra reserva da sala
    - 429: Rate limit excedido
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.v1.crud import list_or_filter, paginated
from app.core.deps import DbSession, Listing
from app.core.rate_limit import rate_limit_strict
from app.schemas.base import MessageResponse, PaginatedResponse
from app.schemas.reservation import ReservationCreate, ReservationRead, ReservationUpdate
from app.services.reservation import ReservationService

router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.post(
    "",
    response_model=ReservationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Criar reserva",
    description="Reserva uma sala no período [start_date, finish_date).",
)
async def create_reservation(
    data: ReservationCreate,
    db: DbSession,
    _: None = Depends(rate_limit_strict),
) -> ReservationRead:
    """
    Cria nova reserva.

    Datas no formato "YYYY-MM-DD HH:MM" (horário local). Reservas encostadas
    (fim de uma igual ao início da outra) não conflitam.
    """
    service = ReservationService(db)
    reservation = await service.create(data)
    return ReservationRead.model_validate(reservation)


@router.get(
    "",
    response_model=PaginatedResponse[ReservationRead],
    summary="Listar reservas",
    description="Filtros aceitos: user, room, start_date, finish_date, people.",
)
async def list_reservations(
    db: DbSession,
    params: Listing,
) -> PaginatedResponse[ReservationRead]:
    service = ReservationService(db)
    result = await list_or_filter(service, params)
    return paginated(result, ReservationRead)


@router.get(
    "/{reservation_id}",
    response_model=ReservationRead,
    summary="Buscar reserva",
)
async def get_reservation(reservation_id: UUID, db: DbSession) -> ReservationRead:
    service = ReservationService(db)
    reservation = await service.get_by_id(reservation_id)
    return ReservationRead.model_validate(reservation)


@router.put(
    "/{reservation_id}",
    response_model=ReservationRead,
    summary="Atualizar reserva",
)
async def update_reservation(
    reservation_id: UUID,
    data: ReservationUpdate,
    db: DbSession,
) -> ReservationRead:
    """
    Atualiza a reserva; o resultado passa pelas mesmas regras da criação.
    """
    service = ReservationService(db)
    reservation = await service.update(reservation_id, data)
    return ReservationRead.model_validate(reservation)


@router.delete(
    "/{reservation_id}",
    response_model=MessageResponse,
    summary="Remover reserva",
)
async def delete_reservation(reservation_id: UUID, db: DbSession) -> MessageResponse:
    service = ReservationService(db)
    await service.delete(reservation_id)
    return MessageResponse(message="Reserva removida com sucesso")
