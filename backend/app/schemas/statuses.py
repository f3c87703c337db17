"""
Schemas Pydantic dos status (plano, empréstimo e sala).
"""

from uuid import UUID

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class PlanStatusCreate(BaseSchema):
    plan_status: str = Field(..., min_length=1, max_length=50, examples=["ACTIVE"])


class PlanStatusRead(TimestampSchema):
    id: UUID
    plan_status: str


class PlanStatusUpdate(BaseSchema):
    plan_status: str | None = Field(None, min_length=1, max_length=50)


class LoanStatusCreate(BaseSchema):
    loan_status: str = Field(..., min_length=1, max_length=50, examples=["PENDING"])


class LoanStatusRead(TimestampSchema):
    id: UUID
    loan_status: str


class LoanStatusUpdate(BaseSchema):
    loan_status: str | None = Field(None, min_length=1, max_length=50)


class RoomStatusCreate(BaseSchema):
    room_status: str = Field(..., min_length=1, max_length=50, examples=["AVAILABLE"])


class RoomStatusRead(TimestampSchema):
    id: UUID
    room_status: str


class RoomStatusUpdate(BaseSchema):
    room_status: str | None = Field(None, min_length=1, max_length=50)


class BookStatusCreate(BaseSchema):
    book_status: str = Field(..., min_length=1, max_length=50, examples=["AVAILABLE"])


class BookStatusRead(TimestampSchema):
    id: UUID
    book_status: str


class BookStatusUpdate(BaseSchema):
    book_status: str | None = Field(None, min_length=1, max_length=50)
