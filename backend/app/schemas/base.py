"""
Schemas base reutilizáveis em toda a aplicação.
"""

from datetime import datetime, timezone
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


def as_utc(value: datetime | None) -> datetime | None:
    """Datas sem timezone são interpretadas como UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BaseSchema(BaseModel):
    """Schema base com configurações padrão."""
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class TimestampSchema(BaseSchema):
    """Schema com timestamps."""
    created_at: datetime
    updated_at: datetime


class PaginationMeta(BaseModel):
    """Bloco `pagination` das listagens."""
    totalItems: int
    totalPages: int
    currentPage: int
    pageSize: int


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Resposta paginada genérica.

    Uso nos endpoints:
        @router.get("", response_model=PaginatedResponse[RoomRead])
        async def list_rooms(...):
            return await RoomService(db).list(params.page, params.limit)
    """
    data: List[T]
    pagination: PaginationMeta

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    """
    Resposta de erro padrão.

    `error` é o nome do erro de domínio (ex.: "RoomNotFound", "DateInPast").
    """
    message: str
    error: str | None = None


class MessageResponse(BaseModel):
    """Resposta simples com mensagem."""
    message: str
