"""
Models SQLAlchemy da aplicação.

Importar todos os models aqui para que o Alembic detecte as mudanças.
"""

from app.models.gender import Gender
from app.models.user import User
from app.models.author import Author
from app.models.editorial import Editorial
from app.models.plan import Plan
from app.models.statuses import (
    BOOK_STATUS_AVAILABLE,
    BOOK_STATUS_LENT,
    BOOK_STATUS_NOT_AVAILABLE,
    LOAN_STATUS_ACTIVE,
    LOAN_STATUS_FINISHED,
    LOAN_STATUS_PENDING,
    LOAN_STATUS_RENEWED,
    PLAN_STATUS_ACTIVE,
    PLAN_STATUS_CANCELED,
    PLAN_STATUS_FINISHED,
    BookStatus,
    LoanStatus,
    PlanStatus,
    RoomStatus,
)
from app.models.room import Room, RoomLocation
from app.models.equipment import Equipment, reservation_equipments
from app.models.reservation import Reservation
from app.models.active_plan import ActivePlan
from app.models.book import Book, book_authors
from app.models.loan import Loan

__all__ = [
    "Gender",
    "User",
    "Author",
    "Editorial",
    "Plan",
    "PlanStatus",
    "LoanStatus",
    "RoomStatus",
    "BookStatus",
    "PLAN_STATUS_ACTIVE",
    "PLAN_STATUS_FINISHED",
    "PLAN_STATUS_CANCELED",
    "LOAN_STATUS_PENDING",
    "LOAN_STATUS_ACTIVE",
    "LOAN_STATUS_RENEWED",
    "LOAN_STATUS_FINISHED",
    "BOOK_STATUS_AVAILABLE",
    "BOOK_STATUS_LENT",
    "BOOK_STATUS_NOT_AVAILABLE",
    "RoomLocation",
    "Room",
    "Equipment",
    "reservation_equipments",
    "Reservation",
    "ActivePlan",
    "Book",
    "book_authors",
    "Loan",
]
