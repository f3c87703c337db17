"""
Books, book statuses and loans.

Revision ID: c4d8e2f6a1b9
Revises: b7e9d1c3a2f4
Create Date: 2026-10-19 11:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "c4d8e2f6a1b9"
down_revision: Union[str, Sequence[str], None] = "b7e9d1c3a2f4"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
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
    op.create_table(
        "book_statuses", *_base_columns(), sa.Column("book_status", sa.String(50), nullable=False)
    )
    op.create_table(
        "books",
        *_base_columns(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("isbn", sa.String(20), nullable=False),
        sa.Column("classification", sa.String(100), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        _fk("editorial_id", "editorials"),
        sa.Column("language", sa.String(50), nullable=False),
        sa.Column("edition", sa.String(50), nullable=False),
        sa.Column("sample", sa.String(50), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        _fk("book_status_id", "book_statuses"),
        sa.Column(
            "genres",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("book_img", sa.String(500), nullable=True),
    )
    op.create_table(
        "book_authors",
        sa.Column(
            "book_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("books.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "author_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("authors.id", ondelete="RESTRICT"),
            primary_key=True,
        ),
    )
    op.create_table(
        "loans",
        *_base_columns(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("book_id", "books", ondelete="CASCADE"),
        _fk("loan_status_id", "loan_statuses"),
        sa.Column("return_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("returned_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("renewals", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_loans_user_returned", "loans", ["user_id", "returned_date"])


def downgrade() -> None:
    op.drop_index("ix_loans_user_returned", table_name="loans")
    op.drop_table("loans")
    op.drop_table("book_authors")
    op.drop_table("books")
    op.drop_table("book_statuses")
