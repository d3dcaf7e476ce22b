"""Read-only lookup tables for the dashboard UIs."""

from fastapi import APIRouter

from app.constants import (
    ADVISORY_PRESETS,
    DEFAULT_SPEEDS,
    IMAGE_PRESETS,
    STATUS_COLORS,
    ServiceStatus,
)
from app.schemas.reference import (
    DefaultSpeedsResponse,
    ImagePresetResponse,
    ReferenceDataResponse,
)

router = APIRouter()


@router.get("", response_model=ReferenceDataResponse)
async def get_reference_data() -> ReferenceDataResponse:
    """Service statuses, colors, presets and default ticker speeds."""
    return ReferenceDataResponse(
        service_statuses=[s.value for s in ServiceStatus],
        status_colors={s.value: color for s, color in STATUS_COLORS.items()},
        advisory_presets=list(ADVISORY_PRESETS),
        image_presets=[ImagePresetResponse(**p._asdict()) for p in IMAGE_PRESETS],
        default_speeds=DefaultSpeedsResponse(**DEFAULT_SPEEDS._asdict()),
    )
