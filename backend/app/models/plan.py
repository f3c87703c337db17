"""
Model de plano de assinatura (definição, não a assinatura em si).
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin


class Plan(Base, UUIDMixin, TimestampMixin):
    """
    Plano oferecido aos usuários.

    Attributes:
        name: Nome comercial do plano
        fixed_price: Taxa fixa (texto decimal, ex: "30.00")
        monthly_price: Mensalidade (texto decimal)
        max_simultaneous_loans: Empréstimos simultâneos permitidos
        max_return_days: Prazo de devolução em dias
        max_renewals_per_loan: Renovações permitidas por empréstimo
    """
    __tablename__ = "plans"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    fixed_price: Mapped[str] = mapped_column(String(20), nullable=False)
    monthly_price: Mapped[str] = mapped_column(String(20), nullable=False)
    max_simultaneous_loans: Mapped[int] = mapped_column(Integer, nullable=False)
    max_return_days: Mapped[int] = mapped_column(Integer, nullable=False)
    max_renewals_per_loan: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Plan {self.name}>"
