"""
Módulo de serviços - lógica de negócio.
"""

from app.services.base import CrudService
from app.services.user import UserService
from app.services.author import AuthorService
from app.services.lookup import (
    BookStatusService,
    EditorialService,
    EquipmentService,
    GenderService,
    LoanStatusService,
    PlanService,
    PlanStatusService,
    RoomLocationService,
    RoomStatusService,
)
from app.services.room import RoomService
from app.services.reservation import ReservationService
from app.services.active_plan import ActivePlanService
from app.services.book import BookService
from app.services.loan import LoanService

__all__ = [
    "CrudService",
    "UserService",
    "AuthorService",
    "BookStatusService",
    "EditorialService",
    "EquipmentService",
    "GenderService",
    "LoanStatusService",
    "PlanService",
    "PlanStatusService",
    "RoomLocationService",
    "RoomStatusService",
    "RoomService",
    "ReservationService",
    "ActivePlanService",
    "BookService",
    "LoanService",
]
