"""
Tabelas de status (lookup) editáveis pelo administrador.

Os rótulos padrão são criados por `app.db.seed`.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin

PLAN_STATUS_ACTIVE = "ACTIVE"
PLAN_STATUS_FINISHED = "FINISHED"
PLAN_STATUS_CANCELED = "CANCELED"

LOAN_STATUS_PENDING = "PENDING"
LOAN_STATUS_ACTIVE = "ACTIVE"
LOAN_STATUS_RENEWED = "RENEWED"
LOAN_STATUS_FINISHED = "FINISHED"

BOOK_STATUS_AVAILABLE = "AVAILABLE"
BOOK_STATUS_LENT = "LENT"
BOOK_STATUS_NOT_AVAILABLE = "NOT AVAILABLE"


class PlanStatus(Base, UUIDMixin, TimestampMixin):
    """Status de uma ActivePlan (ACTIVE, FINISHED, CANCELED ou customizado)."""
    __tablename__ = "plan_statuses"

    plan_status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<PlanStatus {self.plan_status}>"


class LoanStatus(Base, UUIDMixin, TimestampMixin):
    """Status de um Loan (PENDING, ACTIVE, RENEWED, FINISHED ou customizado)."""
    __tablename__ = "loan_statuses"

    loan_status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<LoanStatus {self.loan_status}>"


class RoomStatus(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "room_statuses"

    room_status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<RoomStatus {self.room_status}>"


class BookStatus(Base, UUIDMixin, TimestampMixin):
    """Disponibilidade de um livro (AVAILABLE, LENT, NOT AVAILABLE)."""
    __tablename__ = "book_statuses"

    book_status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<BookStatus {self.book_status}>"
