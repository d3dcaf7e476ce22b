"""API endpoints for the building configuration."""

from fastapi import APIRouter, BackgroundTasks

from app.dependencies import BroadcasterDep
from app.providers import BuildingConfigSvc
from app.schemas.building_config import BuildingConfigResponse, BuildingConfigUpdate

router = APIRouter()


@router.get("", response_model=BuildingConfigResponse)
async def get_config(service: BuildingConfigSvc) -> BuildingConfigResponse:
    """Get the building configuration, creating the default one if absent."""
    return await service.get_config()


@router.put("", response_model=BuildingConfigResponse)
async def update_config(
    body: BuildingConfigUpdate,
    service: BuildingConfigSvc,
    broadcaster: BroadcasterDep,
    background_tasks: BackgroundTasks,
) -> BuildingConfigResponse:
    """Update the building configuration. Accepts partial updates.

    The session commits before the response goes out, so connected displays
    are told to refresh only after the write is durable.
    """
    config = await service.update_config(body.changes())
    background_tasks.add_task(broadcaster.publish)
    return config
