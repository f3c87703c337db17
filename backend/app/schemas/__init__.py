"""
Schemas Pydantic da aplicação.
"""

from app.schemas.base import (
    BaseSchema,
    ErrorResponse,
    MessageResponse,
    PaginatedResponse,
    PaginationMeta,
    TimestampSchema,
)
from app.schemas.health import HealthResponse
from app.schemas.gender import GenderCreate, GenderRead, GenderUpdate
from app.schemas.user import UserCreate, UserRead, UserSummary, UserUpdate
from app.schemas.author import AuthorCreate, AuthorRead, AuthorSummary, AuthorUpdate
from app.schemas.editorial import EditorialCreate, EditorialRead, EditorialUpdate
from app.schemas.plan import PlanCreate, PlanRead, PlanUpdate
from app.schemas.statuses import (
    BookStatusCreate,
    BookStatusRead,
    BookStatusUpdate,
    LoanStatusCreate,
    LoanStatusRead,
    LoanStatusUpdate,
    PlanStatusCreate,
    PlanStatusRead,
    PlanStatusUpdate,
    RoomStatusCreate,
    RoomStatusRead,
    RoomStatusUpdate,
)
from app.schemas.equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate
from app.schemas.room import (
    RoomCreate,
    RoomLocationCreate,
    RoomLocationRead,
    RoomLocationUpdate,
    RoomRead,
    RoomSummary,
    RoomUpdate,
)
from app.schemas.reservation import ReservationCreate, ReservationRead, ReservationUpdate
from app.schemas.active_plan import ActivePlanCreate, ActivePlanRead, ActivePlanUpdate
from app.schemas.book import BookCreate, BookRead, BookSummary, BookUpdate
from app.schemas.loan import LoanCreate, LoanRead, LoanUpdate

__all__ = [
    # Base
    "BaseSchema",
    "ErrorResponse",
    "MessageResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "TimestampSchema",
    # Health
    "HealthResponse",
    # Lookups
    "GenderCreate",
    "GenderRead",
    "GenderUpdate",
    "EditorialCreate",
    "EditorialRead",
    "EditorialUpdate",
    "PlanCreate",
    "PlanRead",
    "PlanUpdate",
    "BookStatusCreate",
    "BookStatusRead",
    "BookStatusUpdate",
    "LoanStatusCreate",
    "LoanStatusRead",
    "LoanStatusUpdate",
    "PlanStatusCreate",
    "PlanStatusRead",
    "PlanStatusUpdate",
    "RoomStatusCreate",
    "RoomStatusRead",
    "RoomStatusUpdate",
    "EquipmentCreate",
    "EquipmentRead",
    "EquipmentUpdate",
    # User / Author
    "UserCreate",
    "UserRead",
    "UserSummary",
    "UserUpdate",
    "AuthorCreate",
    "AuthorRead",
    "AuthorSummary",
    "AuthorUpdate",
    # Room
    "RoomCreate",
    "RoomLocationCreate",
    "RoomLocationRead",
    "RoomLocationUpdate",
    "RoomRead",
    "RoomSummary",
    "RoomUpdate",
    # Reservation / ActivePlan
    "ReservationCreate",
    "ReservationRead",
    "ReservationUpdate",
    "ActivePlanCreate",
    "ActivePlanRead",
    "ActivePlanUpdate",
    # Book / Loan
    "BookCreate",
    "BookRead",
    "BookSummary",
    "BookUpdate",
    "LoanCreate",
    "LoanRead",
    "LoanUpdate",
]
