"""
Model de autor de livros.
"""

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base
from app.models.base import UUIDMixin, TimestampMixin, foreign_key

if TYPE_CHECKING:
    from app.models.gender import Gender


class Author(Base, UUIDMixin, TimestampMixin):
    """
    Autor de livros.

    Nome e sobrenome juntos identificam o autor para fins de duplicidade.
    """
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    birthdate: Mapped[date] = mapped_column(Date, nullable=False)
    gender_id: Mapped[uuid.UUID] = foreign_key("genders")

    gender: Mapped["Gender"] = relationship("Gender", lazy="raise")

    def __repr__(self) -> str:
        return f"<Author {self.name} {self.last_name}>"
