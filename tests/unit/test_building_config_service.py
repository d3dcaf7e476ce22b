"""Unit tests for BuildingConfigService."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.constants import BUILDING_CONFIG_DEFAULTS
from app.models.building_config import BuildingConfig
from app.repositories.building_config_repository import StorageError
from app.services.building_config_service import BuildingConfigService


@pytest.fixture()
def service(config_repo):
    return BuildingConfigService(config_repo)


def _config(**overrides) -> BuildingConfig:
    now = datetime.now(UTC)
    return BuildingConfig(
        id=1, created_at=now, updated_at=now, **{**BUILDING_CONFIG_DEFAULTS, **overrides}
    )


class TestGetConfig:
    async def test_creates_defaults_once(self, service, config_repo):
        first = await service.get_config()
        second = await service.get_config()

        assert first.id == second.id
        assert first.building_number == "77"
        assert len(config_repo.rows) == 1


class TestUpdateConfig:
    async def test_first_write_seeds_new_row(self, service, config_repo):
        result = await service.update_config({"scroll_speed": 5})

        assert result.scroll_speed == 5
        assert result.ticker_speed == BUILDING_CONFIG_DEFAULTS["ticker_speed"]
        assert result.building_name == BUILDING_CONFIG_DEFAULTS["building_name"]
        assert len(config_repo.rows) == 1

    async def test_merge_keeps_omitted_fields(self, service):
        await service.update_config({"scroll_speed": 1, "ticker_speed": 2})

        result = await service.update_config({"ticker_speed": 3})

        assert result.scroll_speed == 1
        assert result.ticker_speed == 3

    async def test_many_writes_single_row(self, service, config_repo):
        for i in range(5):
            await service.get_config()
            await service.update_config({"services_scroll_speed": i})

        assert len(config_repo.rows) == 1
        assert (await service.get_config()).services_scroll_speed == 4

    async def test_storage_error_propagates(self, service, config_repo):
        config_repo.fail_writes = True
        with pytest.raises(StorageError):
            await service.update_config({"subtitle": "x"})

    async def test_lost_creation_race_falls_back_to_update(self):
        """Another writer created the row between the check and the insert."""
        winner = _config(building_name="Winner")
        merged = _config(building_name="Winner", subtitle="Mine")
        repo = AsyncMock()
        repo.get.return_value = None
        repo.get_or_create_with.return_value = (winner, False)
        repo.update.return_value = merged

        result = await BuildingConfigService(repo).update_config({"subtitle": "Mine"})

        repo.update.assert_awaited_once_with({"subtitle": "Mine"})
        assert result.subtitle == "Mine"
        assert result.building_name == "Winner"

    async def test_existing_row_skips_creation(self):
        repo = AsyncMock()
        repo.get.return_value = _config()
        repo.update.return_value = _config(subtitle="New")

        await BuildingConfigService(repo).update_config({"subtitle": "New"})

        repo.get_or_create_with.assert_not_awaited()
        repo.update.assert_awaited_once()
