"""add_ticker_speeds

Revision ID: 9c3f5a7e1b42
Revises: 7b1e4c2a9d30
Create Date: 2026-02-03 03:48:49.000000

Adds per-section scroll/ticker durations (seconds, higher = slower).
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "9c3f5a7e1b42"
down_revision: Union[str, None] = "7b1e4c2a9d30"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "building_config",
        sa.Column("scroll_speed", sa.Integer(), nullable=False, server_default="30"),
    )
    op.add_column(
        "building_config",
        sa.Column("ticker_speed", sa.Integer(), nullable=False, server_default="25"),
    )
    op.add_column(
        "building_config",
        sa.Column("services_scroll_speed", sa.Integer(), nullable=False, server_default="8"),
    )


def downgrade() -> None:
    op.drop_column("building_config", "services_scroll_speed")
    op.drop_column("building_config", "ticker_speed")
    op.drop_column("building_config", "scroll_speed")
