"""
Schemas Pydantic para Plan.
"""

from uuid import UUID

from pydantic import Field

from app.schemas.base import BaseSchema, TimestampSchema


class PlanCreate(BaseSchema):
    """
    Schema para criação de plano.

    Os preços são textos decimais ("30.00") para preservar a representação.
    """
    name: str = Field(..., min_length=2, max_length=255, examples=["Plan Lite Vindex"])
    fixed_price: str = Field(..., pattern=r"^\d+(\.\d{1,2})?$", examples=["30.00"])
    monthly_price: str = Field(..., pattern=r"^\d+(\.\d{1,2})?$", examples=["2.00"])
    max_simultaneous_loans: int = Field(..., ge=0)
    max_return_days: int = Field(..., ge=1)
    max_renewals_per_loan: int = Field(..., ge=0)


class PlanRead(TimestampSchema):
    id: UUID
    name: str
    fixed_price: str
    monthly_price: str
    max_simultaneous_loans: int
    max_return_days: int
    max_renewals_per_loan: int


class PlanUpdate(BaseSchema):
    name: str | None = Field(None, min_length=2, max_length=255)
    fixed_price: str | None = Field(None, pattern=r"^\d+(\.\d{1,2})?$")
    monthly_price: str | None = Field(None, pattern=r"^\d+(\.\d{1,2})?$")
    max_simultaneous_loans: int | None = Field(None, ge=0)
    max_return_days: int | None = Field(None, ge=1)
    max_renewals_per_loan: int | None = Field(None, ge=0)
