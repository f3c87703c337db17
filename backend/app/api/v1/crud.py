"""
Fábrica de routers CRUD para as entidades simples.

Contratos gerados para cada entidade:
    - POST {prefix}: Cria registro
    - GET {prefix}: Lista paginado ou filtra (filter_field + filter_value)
    - GET {prefix}/{id}: Busca por ID
    - PUT {prefix}/{id}: Atualiza registro
    - DELETE {prefix}/{id}: Remove registro

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: Parâmetros ausentes ou filtros inválidos
    - 404: Registro ou referência não encontrada
    - 409: Registro duplicado
    - 422: Corpo da requisição inválido
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, status
from pydantic import BaseModel

from app.core.deps import DbSession, Listing
from app.schemas.base import MessageResponse, PaginatedResponse
from app.services.base import CrudService


def paginated(result: dict[str, Any], schema: type[BaseModel]) -> PaginatedResponse:
    """Converte o retorno de list/filter dos services na resposta paginada."""
    return PaginatedResponse[schema](
        data=[schema.model_validate(item) for item in result["data"]],
        pagination=result["pagination"],
    )


async def list_or_filter(service: CrudService, params: Listing) -> dict[str, Any]:
    """Filtra quando filter_field e filter_value vêm juntos; senão lista."""
    if params.is_filter:
        return await service.filter(
            params.filter_field, params.filter_value, params.page, params.limit
        )
    return await service.list(params.page, params.limit)


def build_crud_router(
    *,
    prefix: str,
    tags: list[str],
    label: str,
    service_class: type[CrudService],
    create_schema: type[BaseModel],
    read_schema: type[BaseModel],
    update_schema: type[BaseModel],
) -> APIRouter:
    """
    Monta o router CRUD de uma entidade.

    Args:
        prefix: Prefixo das rotas ("/genders")
        tags: Tags do OpenAPI
        label: Nome legível usado nos resumos ("gênero")
        service_class: Service da entidade
        create_schema/read_schema/update_schema: Schemas Pydantic
    """
    router = APIRouter(prefix=prefix, tags=tags)
    entity = service_class.entity_name

    @router.post(
        "",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Criar {label}",
        name=f"create_{entity}",
    )
    async def create(data: create_schema, db: DbSession):
        instance = await service_class(db).create(data)
        return read_schema.model_validate(instance)

    @router.get(
        "",
        response_model=PaginatedResponse[read_schema],
        summary=f"Listar {label}",
        description="Lista paginada; com filter_field e filter_value aplica o filtro.",
        name=f"list_{entity}",
    )
    async def list_all(db: DbSession, params: Listing):
        result = await list_or_filter(service_class(db), params)
        return paginated(result, read_schema)

    @router.get(
        "/{id}",
        response_model=read_schema,
        summary=f"Buscar {label}",
        name=f"get_{entity}",
    )
    async def get(id: UUID, db: DbSession):
        instance = await service_class(db).get_by_id(id)
        return read_schema.model_validate(instance)

    @router.put(
        "/{id}",
        response_model=read_schema,
        summary=f"Atualizar {label}",
        name=f"update_{entity}",
    )
    async def update(id: UUID, data: update_schema, db: DbSession):
        instance = await service_class(db).update(id, data)
        return read_schema.model_validate(instance)

    @router.delete(
        "/{id}",
        response_model=MessageResponse,
        summary=f"Remover {label}",
        name=f"delete_{entity}",
    )
    async def delete(id: UUID, db: DbSession):
        await service_class(db).delete(id)
        return MessageResponse(message="Registro removido com sucesso")

    return router
