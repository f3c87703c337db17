"""
Mixins compartilhados pelos models SQLAlchemy.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column


class UUIDMixin:
    """Primary key UUID gerada pela aplicação."""
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )


class TimestampMixin:
    """
    Timestamps de criação e atualização.

    `created_at` é também o início da vigência de uma ActivePlan.
    """
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


def foreign_key(target: str, ondelete: str = "RESTRICT", nullable: bool = False) -> Mapped[uuid.UUID]:
    """Coluna UUID com FK explícita para `<target>.id`."""
    return mapped_column(
        UUID(as_uuid=True),
        ForeignKey(f"{target}.id", ondelete=ondelete),
        nullable=nullable,
        index=True,
    )
