"""FastAPI dependency providers for repositories and services.

Kept apart from ``dependencies.py`` so route modules can import the type
aliases without pulling the repository layer into the infrastructure
helpers.
"""

from typing import Annotated

from fastapi import Depends

from app.dependencies import DBSession
from app.repositories.building_config_repository import BuildingConfigRepository
from app.services.building_config_service import BuildingConfigService

# ---------------------------------------------------------------------------
# Repository providers
# ---------------------------------------------------------------------------


def get_building_config_repository(db: DBSession) -> BuildingConfigRepository:
    return BuildingConfigRepository(db)


BuildingConfigRepo = Annotated[BuildingConfigRepository, Depends(get_building_config_repository)]

# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_building_config_service(repo: BuildingConfigRepo) -> BuildingConfigService:
    return BuildingConfigService(repo)


BuildingConfigSvc = Annotated[BuildingConfigService, Depends(get_building_config_service)]
