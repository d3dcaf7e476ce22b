"""Pydantic schemas for the building configuration."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class BuildingConfigResponse(BaseModel):
    """Response schema for the building configuration."""

    id: int
    building_number: str
    building_name: str
    subtitle: str
    scroll_speed: int
    ticker_speed: int
    services_scroll_speed: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BuildingConfigUpdate(BaseModel):
    """Request schema for updating the building configuration (partial).

    Extra keys are kept so that the store, not this layer, decides which
    fields exist.
    """

    building_number: str | None = None
    building_name: str | None = None
    subtitle: str | None = None
    scroll_speed: int | None = None
    ticker_speed: int | None = None
    services_scroll_speed: int | None = None

    model_config = ConfigDict(extra="allow")

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)
