"""
Routers CRUD das entidades simples, gerados por `build_crud_router`.
"""

from app.api.v1.crud import build_crud_router
from app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from app.schemas.editorial import EditorialCreate, EditorialRead, EditorialUpdate
from app.schemas.equipment import EquipmentCreate, EquipmentRead, EquipmentUpdate
from app.schemas.gender import GenderCreate, GenderRead, GenderUpdate
from app.schemas.plan import PlanCreate, PlanRead, PlanUpdate
from app.schemas.room import RoomLocationCreate, RoomLocationRead, RoomLocationUpdate
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
from app.schemas.user import UserCreate, UserRead, UserUpdate
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
from app.services.user import UserService

genders_router = build_crud_router(
    prefix="/genders",
    tags=["Genders"],
    label="gênero",
    service_class=GenderService,
    create_schema=GenderCreate,
    read_schema=GenderRead,
    update_schema=GenderUpdate,
)

users_router = build_crud_router(
    prefix="/users",
    tags=["Users"],
    label="usuário",
    service_class=UserService,
    create_schema=UserCreate,
    read_schema=UserRead,
    update_schema=UserUpdate,
)

authors_router = build_crud_router(
    prefix="/authors",
    tags=["Authors"],
    label="autor",
    service_class=AuthorService,
    create_schema=AuthorCreate,
    read_schema=AuthorRead,
    update_schema=AuthorUpdate,
)

editorials_router = build_crud_router(
    prefix="/editorials",
    tags=["Editorials"],
    label="editora",
    service_class=EditorialService,
    create_schema=EditorialCreate,
    read_schema=EditorialRead,
    update_schema=EditorialUpdate,
)

plans_router = build_crud_router(
    prefix="/plans",
    tags=["Plans"],
    label="plano",
    service_class=PlanService,
    create_schema=PlanCreate,
    read_schema=PlanRead,
    update_schema=PlanUpdate,
)

plan_statuses_router = build_crud_router(
    prefix="/plan-statuses",
    tags=["Plan statuses"],
    label="status de plano",
    service_class=PlanStatusService,
    create_schema=PlanStatusCreate,
    read_schema=PlanStatusRead,
    update_schema=PlanStatusUpdate,
)

loan_statuses_router = build_crud_router(
    prefix="/loan-statuses",
    tags=["Loan statuses"],
    label="status de empréstimo",
    service_class=LoanStatusService,
    create_schema=LoanStatusCreate,
    read_schema=LoanStatusRead,
    update_schema=LoanStatusUpdate,
)

book_statuses_router = build_crud_router(
    prefix="/book-statuses",
    tags=["Book statuses"],
    label="status de livro",
    service_class=BookStatusService,
    create_schema=BookStatusCreate,
    read_schema=BookStatusRead,
    update_schema=BookStatusUpdate,
)

room_statuses_router = build_crud_router(
    prefix="/room-statuses",
    tags=["Room statuses"],
    label="status de sala",
    service_class=RoomStatusService,
    create_schema=RoomStatusCreate,
    read_schema=RoomStatusRead,
    update_schema=RoomStatusUpdate,
)

room_locations_router = build_crud_router(
    prefix="/room-locations",
    tags=["Room locations"],
    label="localização de sala",
    service_class=RoomLocationService,
    create_schema=RoomLocationCreate,
    read_schema=RoomLocationRead,
    update_schema=RoomLocationUpdate,
)

equipments_router = build_crud_router(
    prefix="/equipments",
    tags=["Equipments"],
    label="equipamento",
    service_class=EquipmentService,
    create_schema=EquipmentCreate,
    read_schema=EquipmentRead,
    update_schema=EquipmentUpdate,
)

routers = [
    genders_router,
    users_router,
    authors_router,
    editorials_router,
    plans_router,
    plan_statuses_router,
    loan_statuses_router,
    book_statuses_router,
    room_statuses_router,
    room_locations_router,
    equipments_router,
]
