"""Shared constants used across the application.

Static reference tables consumed by the dashboard and admin UIs. None of
these are persisted or mutated at runtime.
"""

from enum import StrEnum
from typing import Final, NamedTuple


class ServiceStatus(StrEnum):
    """Operational state of a building service."""

    OPERATIONAL = "Operational"
    MAINTENANCE = "Maintenance"
    OUTAGE = "Outage"


STATUS_COLORS: Final[dict[ServiceStatus, str]] = {
    ServiceStatus.OPERATIONAL: "#4caf50",
    ServiceStatus.MAINTENANCE: "#ffc107",
    ServiceStatus.OUTAGE: "#f44336",
}

ADVISORY_PRESETS: Final[tuple[str, ...]] = (
    "RESIDENT ADVISORY",
    "MAINTENANCE NOTICE",
    "EMERGENCY ALERT",
    "BUILDING UPDATE",
    "SECURITY NOTICE",
    "WEATHER ADVISORY",
)


class ImagePreset(NamedTuple):
    label: str
    url: str


IMAGE_PRESETS: Final[tuple[ImagePreset, ...]] = (
    ImagePreset(label="Yoga", url="/images/yoga.jpg"),
    ImagePreset(label="Bagels / Brunch", url="/images/bagels.jpg"),
    ImagePreset(label="Tequila / Drinks", url="/images/tequila.jpg"),
)


class DefaultSpeeds(NamedTuple):
    """Default scroll/ticker durations in seconds. Higher = slower."""

    services: int
    events: int
    ticker: int


DEFAULT_SPEEDS: Final = DefaultSpeeds(services=8, events=30, ticker=25)

# Field values for a freshly created BuildingConfig row
BUILDING_CONFIG_DEFAULTS: Final[dict[str, str | int]] = {
    "building_number": "77",
    "building_name": "Hudson Dashboard",
    "subtitle": "Real-time System Monitor",
    "scroll_speed": DEFAULT_SPEEDS.events,
    "ticker_speed": DEFAULT_SPEEDS.ticker,
    "services_scroll_speed": DEFAULT_SPEEDS.services,
}

# Message pushed to display clients after a configuration write
REFRESH_MESSAGE: Final = "refresh"
