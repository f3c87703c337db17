"""
Router principal da API v1.

Inclui todos os routers de endpoints.
"""

from fastapi import APIRouter

from app.api.v1.active_plans import router as active_plans_router
from app.api.v1.books import router as books_router
from app.api.v1.loans import router as loans_router
from app.api.v1.lookups import routers as lookup_routers
from app.api.v1.reservations import router as reservations_router
from app.api.v1.rooms import router as rooms_router
from app.schemas.base import ErrorResponse

api_router = APIRouter(
    prefix="/api/v1",
    responses={
        400: {"model": ErrorResponse, "description": "Parâmetros ou regra de negócio inválidos"},
        404: {"model": ErrorResponse, "description": "Registro não encontrado"},
        409: {"model": ErrorResponse, "description": "Conflito com registro existente"},
    },
)

for lookup_router in lookup_routers:
    api_router.include_router(lookup_router)
api_router.include_router(rooms_router)
api_router.include_router(reservations_router)
api_router.include_router(active_plans_router)
api_router.include_router(books_router)
api_router.include_router(loans_router)
