"""Service layer for building configuration management."""

from collections.abc import Mapping
from typing import Any

from app.repositories.protocols import BuildingConfigRepositoryProtocol
from app.schemas.building_config import BuildingConfigResponse
from app.utils.logging import get_logger

logger = get_logger(__name__)


class BuildingConfigService:
    """Version-agnostic business logic for the building configuration."""

    def __init__(self, repo: BuildingConfigRepositoryProtocol):
        self._repo = repo

    async def get_config(self) -> BuildingConfigResponse:
        config = await self._repo.get_or_create()
        return BuildingConfigResponse.model_validate(config)

    async def update_config(self, fields: Mapping[str, Any]) -> BuildingConfigResponse:
        """Apply a partial update, creating the row on the first write.

        Raises:
            StorageError: If the store rejects a field or the write fails.
        """
        created = False
        if await self._repo.get() is None:
            config, created = await self._repo.get_or_create_with(fields)
        if not created:
            # Row already existed, or another writer created it first
            config = await self._repo.update(fields)

        logger.info(
            "building_config_saved",
            created=created,
            fields=sorted(fields),
        )
        return BuildingConfigResponse.model_validate(config)
