"""
Model de usuário da biblioteca.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key

if TYPE_CHECKING:
    from app.models.gender import Gender


class User(Base, UUIDMixin, TimestampMixin):
    """
    Usuário que faz reservas de sala e assina planos.

    Attributes:
        id: UUID único do usuário
        name: Nome
        last_name: Sobrenome
        email: Email (único, verificado pelo service)
        gender_id: FK para o gênero
    """
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    gender_id: Mapped[uuid.UUID] = foreign_key("genders")

    gender: Mapped["Gender"] = relationship("Gender", lazy="raise")

    def __repr__(self) -> str:
        return f"<User {self.email}>"
