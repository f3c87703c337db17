"""
Dependencies FastAPI compartilhadas pelos routers.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db

settings = get_settings()


class ListParams:
    """
    Parâmetros de listagem aceitos por todos os endpoints GET de coleção.

    Os valores chegam como texto e são validados pelo service, que decide
    entre listagem simples e filtro por campo.
    """

    def __init__(
        self,
        page: str = Query("1", description="Número da página (>= 1)"),
        limit: str = Query(
            str(settings.DEFAULT_PAGINATION_LIMIT),
            description='Itens por página (>= 1) ou "none" para todos',
        ),
        filter_field: str | None = Query(None, description="Campo a filtrar"),
        filter_value: str | None = Query(None, description="Valor do filtro"),
    ):
        self.page = page
        self.limit = limit
        self.filter_field = filter_field
        self.filter_value = filter_value

    @property
    def is_filter(self) -> bool:
        return bool(self.filter_field) and bool(self.filter_value)


DbSession = Annotated[AsyncSession, Depends(get_db)]
Listing = Annotated[ListParams, Depends()]
