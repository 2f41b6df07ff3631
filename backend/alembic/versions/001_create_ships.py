"""Create ships table.

Revision ID: 001_create_ships
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001_create_ships"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the ships table."""
    op.create_table(
        "ships",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("planet", sa.String(50), nullable=False),
        sa.Column(
            "ship_type",
            sa.Enum("TRANSPORT", "MILITARY", "MERCHANT", name="ship_type", native_enum=False, length=20),
            nullable=False,
        ),
        sa.Column(
            "prod_date",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Production date, only the UTC year is rated",
        ),
        sa.Column("used", sa.Boolean(), nullable=False),
        sa.Column("speed", sa.Float(), nullable=False),
        sa.Column("crew_size", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False, comment="Derived from speed, used and prod_date"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the ships table."""
    op.drop_table("ships")
