"""
Script de seed para criar dados iniciais no banco.

Uso:
    python -m app.db.seed

Cria, se não existirem:
    - Status de plano, de empréstimo, de livro e de sala
    - Gêneros
    - Os três planos padrão da Vindex
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import async_session_factory
from app.models.gender import Gender
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

logger = logging.getLogger(__name__)

PLAN_STATUSES = [PLAN_STATUS_ACTIVE, PLAN_STATUS_FINISHED, PLAN_STATUS_CANCELED]
LOAN_STATUSES = [LOAN_STATUS_PENDING, LOAN_STATUS_ACTIVE, LOAN_STATUS_RENEWED, LOAN_STATUS_FINISHED]
BOOK_STATUSES = [BOOK_STATUS_AVAILABLE, BOOK_STATUS_LENT, BOOK_STATUS_NOT_AVAILABLE]
ROOM_STATUSES = ["AVAILABLE", "UNAVAILABLE"]
GENDERS = ["Female", "Male", "Non-binary", "Other"]

DEFAULT_PLANS = [
    {
        "name": "Plan Lite Vindex",
        "fixed_price": "30.00",
        "monthly_price": "2.00",
        "max_simultaneous_loans": 3,
        "max_return_days": 15,
        "max_renewals_per_loan": 2,
    },
    {
        "name": "Plan Premium Vindex",
        "fixed_price": "30.00",
        "monthly_price": "5.00",
        "max_simultaneous_loans": 7,
        "max_return_days": 21,
        "max_renewals_per_loan": 3,
    },
    {
        "name": "Plan Full Vindex",
        "fixed_price": "30.00",
        "monthly_price": "10.00",
        "max_simultaneous_loans": 12,
        "max_return_days": 30,
        "max_renewals_per_loan": 5,
    },
]


async def seed_values(db: AsyncSession, model, field: str, rows: list[dict]) -> int:
    """
    Insere as linhas cujo valor de `field` ainda não existe.

    Returns:
        Quantidade de registros criados
    """
    column = getattr(model, field)
    result = await db.execute(select(column))
    existing = set(result.scalars().all())

    created = 0
    for row in rows:
        if row[field] in existing:
            continue
        db.add(model(**row))
        created += 1
    return created


async def run_seed(db: AsyncSession) -> dict[str, int]:
    """Executa todos os seeds em uma única transação."""
    counts = {
        "plan_statuses": await seed_values(
            db, PlanStatus, "plan_status", [{"plan_status": s} for s in PLAN_STATUSES]
        ),
        "loan_statuses": await seed_values(
            db, LoanStatus, "loan_status", [{"loan_status": s} for s in LOAN_STATUSES]
        ),
        "book_statuses": await seed_values(
            db, BookStatus, "book_status", [{"book_status": s} for s in BOOK_STATUSES]
        ),
        "room_statuses": await seed_values(
            db, RoomStatus, "room_status", [{"room_status": s} for s in ROOM_STATUSES]
        ),
        "genders": await seed_values(db, Gender, "name", [{"name": g} for g in GENDERS]),
        "plans": await seed_values(db, Plan, "name", DEFAULT_PLANS),
    }
    await db.commit()
    return counts


async def main() -> None:
    """Executa todos os seeds."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logger.info("Executando seeds...")
    async with async_session_factory() as db:
        counts = await run_seed(db)
    for name, created in counts.items():
        logger.info(f"{name}: {created} criado(s)")
    logger.info("Seeds concluídos!")


if __name__ == "__main__":
    asyncio.run(main())
