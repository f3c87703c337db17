"""
Model de equipamento que pode acompanhar uma reserva de sala.
"""

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin

# Associação N:N entre reservas e equipamentos
reservation_equipments = Table(
    "reservation_equipments",
    Base.metadata,
    Column(
        "reservation_id",
        UUID(as_uuid=True),
        ForeignKey("reservations.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "equipment_id",
        UUID(as_uuid=True),
        ForeignKey("equipments.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
)


class Equipment(Base, UUIDMixin, TimestampMixin):
    """
    Equipamento do inventário (projetor, notebook...).

    Attributes:
        name: Nome descritivo
        inventory: Código de inventário (único)
        brand: Marca
    """
    __tablename__ = "equipments"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    inventory: Mapped[str] = mapped_column(String(100), nullable=False)
    brand: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Equipment {self.inventory}>"
