"""
Módulo de repositórios - acesso a dados.
"""

from app.repositories.base import BaseRepository
from app.repositories.user import UserRepository
from app.repositories.author import AuthorRepository
from app.repositories.lookup import (
    BookStatusRepository,
    EditorialRepository,
    EquipmentRepository,
    GenderRepository,
    LoanStatusRepository,
    PlanRepository,
    PlanStatusRepository,
    RoomLocationRepository,
    RoomStatusRepository,
    StatusRepository,
)
from app.repositories.room import RoomRepository
from app.repositories.reservation import ReservationRepository
from app.repositories.active_plan import ActivePlanRepository
from app.repositories.book import BookRepository
from app.repositories.loan import LoanRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "AuthorRepository",
    "BookStatusRepository",
    "EditorialRepository",
    "EquipmentRepository",
    "GenderRepository",
    "LoanStatusRepository",
    "PlanRepository",
    "PlanStatusRepository",
    "RoomLocationRepository",
    "RoomStatusRepository",
    "StatusRepository",
    "RoomRepository",
    "ReservationRepository",
    "ActivePlanRepository",
    "BookRepository",
    "LoanRepository",
]
