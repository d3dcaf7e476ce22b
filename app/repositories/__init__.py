"""Database repositories for data access."""
from app.repositories.building_config_repository import BuildingConfigRepository, StorageError

__all__ = [
    "BuildingConfigRepository",
    "StorageError",
]
