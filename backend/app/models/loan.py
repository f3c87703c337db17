"""
Model de empréstimo de livros.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key
from app.models.statuses import LOAN_STATUS_FINISHED

if TYPE_CHECKING:
    from app.models.book import Book
    from app.models.statuses import LoanStatus
    from app.models.user import User


class Loan(Base, UUIDMixin, TimestampMixin):
    """
    Empréstimo de um livro para um usuário.

    Fluxo de estados:
        PENDING -> ACTIVE (approve)
        ACTIVE/RENEWED -> RENEWED (renew)
        qualquer aberto -> FINISHED (return_book)

    Os limites (empréstimos simultâneos, prazo e renovações) vêm do plano
    da assinatura ACTIVE do usuário.

    Attributes:
        user_id: FK para o usuário
        book_id: FK para o livro
        loan_status_id: FK para o status atual
        return_date: Data prevista de devolução
        returned_date: Data da devolução efetiva (null enquanto aberto)
        renewals: Renovações já realizadas
    """
    __tablename__ = "loans"

    user_id: Mapped[uuid.UUID] = foreign_key("users", ondelete="CASCADE")
    book_id: Mapped[uuid.UUID] = foreign_key("books", ondelete="CASCADE")
    loan_status_id: Mapped[uuid.UUID] = foreign_key("loan_statuses")
    return_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    returned_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    renewals: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    user: Mapped["User"] = relationship("User", lazy="raise")
    book: Mapped["Book"] = relationship("Book", lazy="raise")
    loan_status: Mapped["LoanStatus"] = relationship("LoanStatus", lazy="raise")

    __table_args__ = (
        # Empréstimos em aberto de um usuário
        Index("ix_loans_user_returned", "user_id", "returned_date"),
    )

    def __repr__(self) -> str:
        return f"<Loan {self.id} book={self.book_id}>"

    @property
    def status_label(self) -> str:
        """Rótulo do status em maiúsculas (requer loan_status carregado)."""
        return self.loan_status.loan_status.upper() if self.loan_status else ""

    @property
    def is_finished(self) -> bool:
        return self.returned_date is not None or self.status_label == LOAN_STATUS_FINISHED
