"""
Schemas Pydantic para Loan (empréstimo).

Datas sem timezone recebidas na API são interpretadas como UTC.
"""

from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from app.schemas.base import BaseSchema, TimestampSchema, as_utc
from app.schemas.book import BookSummary
from app.schemas.statuses import LoanStatusRead
from app.schemas.user import UserSummary


class LoanCreate(BaseSchema):
    """
    Schema para criação de empréstimo.

    Sem `loan_status_id` o empréstimo nasce PENDING; sem `return_date` o
    prazo é o max_return_days do plano do usuário.
    """
    user_id: UUID
    book_id: UUID
    loan_status_id: UUID | None = None
    return_date: datetime | None = None

    @field_validator("return_date")
    @classmethod
    def normalize_timezone(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class LoanUpdate(BaseSchema):
    """
    Atualização de empréstimo em aberto; só o prazo pode ser alterado.

    Status, renovações e devolução mudam apenas por approve, renew e return.
    """
    return_date: datetime | None = None

    @field_validator("return_date")
    @classmethod
    def normalize_timezone(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class LoanRead(TimestampSchema):
    """Schema para leitura de empréstimo."""
    id: UUID
    user_id: UUID
    book_id: UUID
    loan_status_id: UUID
    return_date: datetime
    returned_date: datetime | None = None
    renewals: int
    user: UserSummary | None = None
    book: BookSummary | None = None
    loan_status: LoanStatusRead | None = None
