"""
Repository para operações de Loan no banco de dados.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.book import Book
from app.models.loan import Loan
from app.repositories.base import BaseRepository


class LoanRepository(BaseRepository[Loan]):
    """Repository para operações CRUD de Loan."""

    load_options = (
        selectinload(Loan.user),
        selectinload(Loan.book).selectinload(Book.book_status),
        selectinload(Loan.loan_status),
    )

    def __init__(self, db: AsyncSession):
        super().__init__(Loan, db)

    def _default_order(self):
        return (Loan.return_date.asc(), Loan.id.asc())

    async def count_open_by_user(self, user_id: UUID) -> int:
        """Conta empréstimos do usuário ainda não devolvidos."""
        result = await self.db.execute(
            select(func.count(Loan.id)).where(
                Loan.user_id == user_id,
                Loan.returned_date.is_(None),
            )
        )
        return result.scalar_one()
