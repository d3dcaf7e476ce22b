"""Pydantic schemas package."""
from app.schemas.building_config import BuildingConfigResponse, BuildingConfigUpdate
from app.schemas.reference import (
    DefaultSpeedsResponse,
    ImagePresetResponse,
    ReferenceDataResponse,
)

__all__ = [
    # Building config schemas
    "BuildingConfigResponse",
    "BuildingConfigUpdate",
    # Reference data schemas
    "ReferenceDataResponse",
    "ImagePresetResponse",
    "DefaultSpeedsResponse",
]
