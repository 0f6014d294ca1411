"""Baseline schema — the customers table.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-19

Databases created by ``customer-manager init`` are stamped at this
revision without running it; empty databases get it applied during
``customer-manager upgrade``.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, unique=True),
        sa.Column("phone", sa.Text),
        sa.Column("address", sa.Text),
    )


def downgrade() -> None:
    op.drop_table("customers")
