"""Protocol definitions for repository interfaces.

These protocols enable type-safe mocking in tests and decouple service
layer code from concrete SQLAlchemy implementations.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from app.models.building_config import BuildingConfig


class BuildingConfigRepositoryProtocol(Protocol):
    """Interface for building configuration data access."""

    async def get(self) -> BuildingConfig | None: ...

    async def get_or_create(self) -> BuildingConfig: ...

    async def get_or_create_with(
        self, fields: Mapping[str, Any]
    ) -> tuple[BuildingConfig, bool]: ...

    async def update(self, fields: Mapping[str, Any]) -> BuildingConfig: ...
