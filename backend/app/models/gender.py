"""
Model de gênero (tabela de apoio referenciada por autores e usuários).
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin


class Gender(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "genders"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Gender {self.name}>"
