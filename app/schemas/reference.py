"""Pydantic schemas for static reference tables."""

from pydantic import BaseModel


class ImagePresetResponse(BaseModel):
    label: str
    url: str


class DefaultSpeedsResponse(BaseModel):
    services: int
    events: int
    ticker: int


class ReferenceDataResponse(BaseModel):
    """Lookup tables used by the dashboard and admin UIs."""

    service_statuses: list[str]
    status_colors: dict[str, str]
    advisory_presets: list[str]
    image_presets: list[ImagePresetResponse]
    default_speeds: DefaultSpeedsResponse
