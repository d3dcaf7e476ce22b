"""Database models package."""

from app.models.base import Base
from app.models.building_config import EDITABLE_FIELDS, SINGLETON_ID, BuildingConfig

__all__ = [
    # Base
    "Base",
    # Models
    "BuildingConfig",
    # Singleton helpers
    "EDITABLE_FIELDS",
    "SINGLETON_ID",
]
