"""Seed the default building configuration into the database."""
import asyncio
import sys
from pathlib import Path

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.repositories.building_config_repository import BuildingConfigRepository


async def main() -> None:
    """Main entry point."""
    print("Seeding building configuration...")

    settings = get_settings()
    engine = create_async_engine(str(settings.database_url))
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async with session_factory() as session:
        repo = BuildingConfigRepository(session)
        config, created = await repo.get_or_create_with({})
        await session.commit()

    if created:
        print(f"  Inserted {config.building_number}: {config.building_name}")
    else:
        print(f"  Skipping (already exists: {config.building_name})")

    await engine.dispose()
    print("Done!")


if __name__ == "__main__":
    asyncio.run(main())
