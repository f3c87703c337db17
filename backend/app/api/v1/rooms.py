"""
Endpoints de Salas (Room).

Contratos:
    - POST /rooms: Cria sala
    - GET /rooms: Lista salas paginado ou filtra por campo
    - GET /rooms/{id}: Busca sala com localização e status
    - PUT /rooms/{id}: Atualiza sala
    - DELETE /rooms/{id}: Remove sala (e suas reservas)

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: Parâmetros ausentes ou filtros inválidos
    - 404: Sala, localização ou status não encontrado
    - 409: Já existe sala com o mesmo nome
"""

from uuid import UUID

from fastapi import APIRouter, status

from app.api.v1.crud import list_or_filter, paginated
from app.core.deps import DbSession, Listing
from app.schemas.base import MessageResponse, PaginatedResponse
from app.schemas.room import RoomCreate, RoomRead, RoomUpdate
from app.services.room import RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.post(
    "",
    response_model=RoomRead,
    status_code=status.HTTP_201_CREATED,
    summary="Criar sala",
    description="Cria uma sala reservável com faixa de ocupação [min_people, max_people].",
)
async def create_room(data: RoomCreate, db: DbSession) -> RoomRead:
    """
    Cria nova sala.

    Raises:
        404: Localização ou status não encontrado
        409: Nome de sala já utilizado
    """
    service = RoomService(db)
    room = await service.create(data)
    return RoomRead.model_validate(room)


@router.get(
    "",
    response_model=PaginatedResponse[RoomRead],
    summary="Listar salas",
    description="Filtros aceitos: name, min_people, max_people, room_location, room_status.",
)
async def list_rooms(db: DbSession, params: Listing) -> PaginatedResponse[RoomRead]:
    service = RoomService(db)
    result = await list_or_filter(service, params)
    return paginated(result, RoomRead)


@router.get(
    "/{room_id}",
    response_model=RoomRead,
    summary="Buscar sala",
)
async def get_room(room_id: UUID, db: DbSession) -> RoomRead:
    """
    Raises:
        404: Sala não encontrada
    """
    service = RoomService(db)
    room = await service.get_by_id(room_id)
    return RoomRead.model_validate(room)


@router.put(
    "/{room_id}",
    response_model=RoomRead,
    summary="Atualizar sala",
)
async def update_room(room_id: UUID, data: RoomUpdate, db: DbSession) -> RoomRead:
    """
    Atualiza os campos informados.

    Raises:
        400: Nenhum campo informado ou faixa de pessoas inválida
        404: Sala, localização ou status não encontrado
        409: Nome de sala já utilizado por outra sala
    """
    service = RoomService(db)
    room = await service.update(room_id, data)
    return RoomRead.model_validate(room)


@router.delete(
    "/{room_id}",
    response_model=MessageResponse,
    summary="Remover sala",
)
async def delete_room(room_id: UUID, db: DbSession) -> MessageResponse:
    service = RoomService(db)
    await service.delete(room_id)
    return MessageResponse(message="Sala removida com sucesso")
