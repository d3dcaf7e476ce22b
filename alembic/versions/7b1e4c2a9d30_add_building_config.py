"""add_building_config

Revision ID: 7b1e4c2a9d30
Revises:
Create Date: 2026-02-03 03:13:55.000000

Adds the singleton building_config table. The CHECK constraint pins the
only permitted row to id = 1.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7b1e4c2a9d30"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "building_config",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("building_number", sa.String(20), nullable=False, server_default="77"),
        sa.Column(
            "building_name", sa.String(200), nullable=False, server_default="Hudson Dashboard"
        ),
        sa.Column(
            "subtitle",
            sa.String(200),
            nullable=False,
            server_default="Real-time System Monitor",
        ),
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
        sa.CheckConstraint("id = 1", name="ck_building_config_singleton"),
    )


def downgrade() -> None:
    op.drop_table("building_config")
