"""
Add exclusion constraint: no overlapping reservations for the same room.

Reservations are half-open intervals [start_date, finish_date): a reservation
ending at 10:00 does not conflict with one starting at 10:00, matching
ReservationRepository.find_overlapping.

The room row lock taken by ReservationService serializes the application
check; this constraint rejects whatever bypasses it.

Revision ID: b7e9d1c3a2f4
Revises: a1f3c2d4e5b6
Create Date: 2026-10-19 10:30:00.000000
"""

from typing import Sequence, Union

from alembic import op


revision: str = "b7e9d1c3a2f4"
down_revision: Union[str, Sequence[str], None] = "a1f3c2d4e5b6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CONSTRAINT_NAME = "ex_reservations_room_overlap"


def upgrade() -> None:
    """
    btree_gist is required to mix the scalar equality on room_id with the
    range overlap operator in a single GiST index.
    """
    op.execute("CREATE EXTENSION IF NOT EXISTS btree_gist")
    op.execute(
        f"""
        ALTER TABLE reservations
        ADD CONSTRAINT {CONSTRAINT_NAME}
        EXCLUDE USING gist (
            room_id WITH =,
            tsrange(start_date, finish_date, '[)') WITH &&
        )
        """
    )


def downgrade() -> None:
    op.execute(f"ALTER TABLE reservations DROP CONSTRAINT IF EXISTS {CONSTRAINT_NAME}")
