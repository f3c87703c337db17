"""
Fixtures compartilhadas para testes.

Os testes não dependem de PostgreSQL nem de Redis: services recebem uma
sessão mockada e os repositories são substituídos com `patch.object`.
"""

import uuid
from datetime import date, datetime, time, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient, ASGITransport

from app.db.session import get_db
from app.main import app
from app.models.active_plan import ActivePlan
from app.models.book import Book
from app.models.gender import Gender
from app.models.loan import Loan
from app.models.plan import Plan
from app.models.reservation import Reservation
from app.models.room import Room
from app.models.statuses import BookStatus, LoanStatus, PlanStatus
from app.models.user import User


# ==========================================
# Event loop configuration
# ==========================================

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Database fixtures
# ==========================================

@pytest.fixture
def mock_db():
    """Mock da sessão do banco."""
    return AsyncMock()


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP assíncrono para testes.

    Substitui a dependency get_db por uma sessão mockada; os services são
    mockados em cada teste.
    """
    async def override_get_db():
        yield AsyncMock()

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ==========================================
# Model factories
# ==========================================

def _timestamps() -> dict:
    now = datetime.now(timezone.utc)
    return {"created_at": now, "updated_at": now}


def next_monday(hour: int = 10) -> datetime:
    """Próxima segunda-feira (sempre no futuro) no horário informado."""
    today = date.today()
    day = today + timedelta(days=7 - today.weekday())
    return datetime.combine(day, time(hour, 0))


@pytest.fixture
def sample_gender() -> Gender:
    return Gender(id=uuid.uuid4(), name="Female", **_timestamps())


@pytest.fixture
def sample_user(sample_gender) -> User:
    return User(
        id=uuid.uuid4(),
        name="Ana",
        last_name="Souza",
        email="ana@example.com",
        gender_id=sample_gender.id,
        **_timestamps(),
    )


@pytest.fixture
def sample_room() -> Room:
    """Sala para 2 a 6 pessoas."""
    return Room(
        id=uuid.uuid4(),
        name="Sala de estudo 1",
        min_people=2,
        max_people=6,
        room_location_id=uuid.uuid4(),
        room_status_id=uuid.uuid4(),
        room_img=None,
        **_timestamps(),
    )


@pytest.fixture
def sample_plan() -> Plan:
    return Plan(
        id=uuid.uuid4(),
        name="Plan Lite Vindex",
        fixed_price="30.00",
        monthly_price="2.00",
        max_simultaneous_loans=3,
        max_return_days=15,
        max_renewals_per_loan=2,
        **_timestamps(),
    )


@pytest.fixture
def plan_statuses() -> dict[str, PlanStatus]:
    """Status ACTIVE, FINISHED e CANCELED indexados pelo rótulo."""
    return {
        label: PlanStatus(id=uuid.uuid4(), plan_status=label, **_timestamps())
        for label in ("ACTIVE", "FINISHED", "CANCELED")
    }


@pytest.fixture
def book_statuses() -> dict[str, BookStatus]:
    """Status AVAILABLE, LENT e NOT AVAILABLE indexados pelo rótulo."""
    return {
        label: BookStatus(id=uuid.uuid4(), book_status=label, **_timestamps())
        for label in ("AVAILABLE", "LENT", "NOT AVAILABLE")
    }


@pytest.fixture
def loan_statuses() -> dict[str, LoanStatus]:
    """Status PENDING, ACTIVE, RENEWED e FINISHED indexados pelo rótulo."""
    return {
        label: LoanStatus(id=uuid.uuid4(), loan_status=label, **_timestamps())
        for label in ("PENDING", "ACTIVE", "RENEWED", "FINISHED")
    }


@pytest.fixture
def sample_book(book_statuses) -> Book:
    """Livro disponível para empréstimo."""
    return Book(
        id=uuid.uuid4(),
        title="Dom Casmurro",
        isbn="978-8535910667",
        classification="869.3 A848d",
        summary="Bentinho e Capitu.",
        editorial_id=uuid.uuid4(),
        language="Português",
        edition="1ª",
        sample="EX-01",
        location="Estante 4B",
        book_status_id=book_statuses["AVAILABLE"].id,
        genres=["Romance"],
        book_img=None,
        **_timestamps(),
    )


def _make_reservation(user: User, room: Room, start: datetime, finish: datetime, people: int = 4) -> Reservation:
    return Reservation(
        id=uuid.uuid4(),
        user_id=user.id,
        room_id=room.id,
        start_date=start,
        finish_date=finish,
        people=people,
        **_timestamps(),
    )


def _make_active_plan(
    user: User,
    plan: Plan,
    status: PlanStatus,
    ending_date: datetime | None = None,
    finished_date: datetime | None = None,
) -> ActivePlan:
    active_plan = ActivePlan(
        id=uuid.uuid4(),
        user_id=user.id,
        plan_id=plan.id,
        plan_status_id=status.id,
        ending_date=ending_date,
        finished_date=finished_date,
        **_timestamps(),
    )
    active_plan.plan_status = status
    return active_plan


def _make_loan(
    user: User,
    book: Book,
    status: LoanStatus,
    return_date: datetime | None = None,
    returned_date: datetime | None = None,
    renewals: int = 0,
) -> Loan:
    loan = Loan(
        id=uuid.uuid4(),
        user_id=user.id,
        book_id=book.id,
        loan_status_id=status.id,
        return_date=return_date or datetime.now(timezone.utc) + timedelta(days=15),
        returned_date=returned_date,
        renewals=renewals,
        **_timestamps(),
    )
    loan.loan_status = status
    return loan


@pytest.fixture
def make_reservation():
    """Factory de Reservation."""
    return _make_reservation


@pytest.fixture
def make_active_plan():
    """Factory de ActivePlan com o status já carregado."""
    return _make_active_plan


@pytest.fixture
def monday_10h() -> datetime:
    """Segunda-feira futura às 10:00, dentro do horário de funcionamento."""
    return next_monday(10)


@pytest.fixture
def make_loan():
    """Factory de Loan com o status já carregado."""
    return _make_loan
