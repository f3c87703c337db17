"""
Initial schema: catalog, plans, rooms, reservations and active plans.

Revision ID: a1f3c2d4e5b6
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "a1f3c2d4e5b6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    """id + timestamps, shared by every table."""
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _fk(name: str, target: str, ondelete: str = "RESTRICT") -> sa.Column:
    return sa.Column(
        name,
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey(f"{target}.id", ondelete=ondelete),
        nullable=False,
        index=True,
    )


def upgrade() -> None:
    op.create_table("genders", *_base_columns(), sa.Column("name", sa.String(100), nullable=False))
    op.create_table(
        "plan_statuses", *_base_columns(), sa.Column("plan_status", sa.String(50), nullable=False)
    )
    op.create_table(
        "loan_statuses", *_base_columns(), sa.Column("loan_status", sa.String(50), nullable=False)
    )
    op.create_table(
        "room_statuses", *_base_columns(), sa.Column("room_status", sa.String(50), nullable=False)
    )
    op.create_table(
        "room_locations", *_base_columns(), sa.Column("location", sa.String(255), nullable=False)
    )

    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, index=True),
        _fk("gender_id", "genders"),
    )
    op.create_table(
        "authors",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=False),
        _fk("gender_id", "genders"),
    )
    op.create_table(
        "editorials",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
    )
    op.create_table(
        "plans",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("fixed_price", sa.String(20), nullable=False),
        sa.Column("monthly_price", sa.String(20), nullable=False),
        sa.Column("max_simultaneous_loans", sa.Integer(), nullable=False),
        sa.Column("max_return_days", sa.Integer(), nullable=False),
        sa.Column("max_renewals_per_loan", sa.Integer(), nullable=False),
    )
    op.create_table(
        "equipments",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("inventory", sa.String(100), nullable=False),
        sa.Column("brand", sa.String(100), nullable=False),
    )
    op.create_table(
        "rooms",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("min_people", sa.Integer(), nullable=False),
        sa.Column("max_people", sa.Integer(), nullable=False),
        _fk("room_location_id", "room_locations"),
        _fk("room_status_id", "room_statuses"),
        sa.Column("room_img", sa.String(500), nullable=True),
        sa.CheckConstraint("min_people <= max_people", name="ck_rooms_people_range"),
    )
    op.create_table(
        "reservations",
        *_base_columns(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("room_id", "rooms", ondelete="CASCADE"),
        sa.Column("start_date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("finish_date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("people", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_reservations_room_period",
        "reservations",
        ["room_id", "start_date", "finish_date"],
    )
    op.create_table(
        "reservation_equipments",
        sa.Column(
            "reservation_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("reservations.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "equipment_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("equipments.id", ondelete="RESTRICT"),
            primary_key=True,
        ),
    )
    op.create_table(
        "active_plans",
        *_base_columns(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("plan_id", "plans"),
        _fk("plan_status_id", "plan_statuses"),
        sa.Column("ending_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("finished_date", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_active_plans_user_status",
        "active_plans",
        ["user_id", "plan_status_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_active_plans_user_status", table_name="active_plans")
    op.drop_table("active_plans")
    op.drop_table("reservation_equipments")
    op.drop_index("ix_reservations_room_period", table_name="reservations")
    for table in (
        "reservations",
        "rooms",
        "equipments",
        "plans",
        "editorials",
        "authors",
        "users",
        "room_locations",
        "room_statuses",
        "loan_statuses",
        "plan_statuses",
        "genders",
    ):
        op.drop_table(table)
