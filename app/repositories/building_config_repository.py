"""Repository for the singleton building configuration."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.building_config import EDITABLE_FIELDS, SINGLETON_ID, BuildingConfig
from app.utils.logging import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    """Raised when the persistence layer rejects or fails an operation."""


class BuildingConfigRepository:
    """Async data access layer for the building configuration row.

    The row always lives under ``SINGLETON_ID``. Creation relies on the
    primary key: a concurrent creator that loses the race gets an
    ``IntegrityError`` inside its savepoint and re-reads the winner's row,
    so the table can never hold two rows.

    Methods flush but never commit; the request-scoped session owns the
    transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> BuildingConfig | None:
        """Return the configuration row, or None if it was never created."""
        try:
            return await self.session.get(BuildingConfig, SINGLETON_ID)
        except SQLAlchemyError as exc:
            raise StorageError("Failed to load building config") from exc

    async def get_or_create(self) -> BuildingConfig:
        """Return the configuration row, creating it with defaults if absent."""
        config, _ = await self.get_or_create_with({})
        return config

    async def get_or_create_with(
        self, fields: Mapping[str, Any]
    ) -> tuple[BuildingConfig, bool]:
        """Return ``(config, created)``.

        A newly created row is seeded with *fields*; an existing row is
        returned untouched.
        """
        config = await self.get()
        if config is not None:
            return config, False

        values = _checked_fields(fields)
        config = BuildingConfig(id=SINGLETON_ID, **values)
        try:
            async with self.session.begin_nested():
                self.session.add(config)
        except IntegrityError:
            # Lost the creation race; the other writer's row is authoritative
            logger.info("building_config_create_race_lost")
            existing = await self.get()
            if existing is None:
                raise StorageError("Building config vanished after conflicting insert")
            return existing, False
        except SQLAlchemyError as exc:
            raise StorageError("Failed to create building config") from exc

        await self._refresh(config)
        logger.info("building_config_created", fields=sorted(values))
        return config, True

    async def update(self, fields: Mapping[str, Any]) -> BuildingConfig:
        """Shallow-merge *fields* onto the existing row and return it."""
        config = await self.get()
        if config is None:
            raise StorageError("Building config does not exist")

        for key, value in _checked_fields(fields).items():
            setattr(config, key, value)

        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to update building config") from exc

        await self._refresh(config)
        return config

    async def _refresh(self, config: BuildingConfig) -> None:
        try:
            await self.session.refresh(config)
        except SQLAlchemyError as exc:
            raise StorageError("Failed to reload building config") from exc


def _checked_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Reject anything that is not a writable column."""
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise StorageError(f"Unknown or read-only fields: {', '.join(sorted(unknown))}")
    return dict(fields)
