"""BuildingConfig model: the single building settings record."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.constants import BUILDING_CONFIG_DEFAULTS
from app.models.base import Base, TimestampMixin

# The table holds at most one row, always under this key
SINGLETON_ID = 1


class BuildingConfig(Base, TimestampMixin):
    """Building display configuration (singleton row)."""

    __tablename__ = "building_config"
    __table_args__ = (CheckConstraint(f"id = {SINGLETON_ID}", name="ck_building_config_singleton"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SINGLETON_ID)

    # Header shown on the dashboard
    building_number: Mapped[str] = mapped_column(
        String(20), nullable=False, default=BUILDING_CONFIG_DEFAULTS["building_number"]
    )
    building_name: Mapped[str] = mapped_column(
        String(200), nullable=False, default=BUILDING_CONFIG_DEFAULTS["building_name"]
    )
    subtitle: Mapped[str] = mapped_column(
        String(200), nullable=False, default=BUILDING_CONFIG_DEFAULTS["subtitle"]
    )

    # Ticker durations in seconds
    scroll_speed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=BUILDING_CONFIG_DEFAULTS["scroll_speed"]
    )
    ticker_speed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=BUILDING_CONFIG_DEFAULTS["ticker_speed"]
    )
    services_scroll_speed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=BUILDING_CONFIG_DEFAULTS["services_scroll_speed"]
    )

    def __repr__(self) -> str:
        return f"<BuildingConfig {self.building_number}: {self.building_name}>"


# Columns a client may write; identity and timestamps are managed by the store
EDITABLE_FIELDS: frozenset[str] = frozenset(BUILDING_CONFIG_DEFAULTS)
