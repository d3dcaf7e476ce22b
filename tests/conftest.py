"""Shared test fixtures for the building dashboard service."""

import os

# Keep tests off any real Redis before app imports build Settings().
os.environ.setdefault("REDIS_URL", "")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "1000/minute")

from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.broadcaster import Broadcaster  # noqa: E402
from app.dependencies import DBSession  # noqa: E402
from app.main import app  # noqa: E402
from app.providers import get_building_config_repository  # noqa: E402
from tests.helpers.fakes import InMemoryBuildingConfigRepository  # noqa: E402

# ---------------------------------------------------------------------------
# Fake Redis (drop-in async replacement)
# ---------------------------------------------------------------------------


def _make_fake_redis():
    """Create a fakeredis instance that behaves like redis.asyncio.Redis."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


# ---------------------------------------------------------------------------
# Mock DB session
# ---------------------------------------------------------------------------


def _make_mock_session():
    """Create a mock async DB session.

    The mock supports ``async with factory() as session`` used by the
    readiness probe (``SELECT 1``).
    """
    session = AsyncMock()
    result_mock = MagicMock()
    result_mock.scalar.return_value = 1
    session.execute.return_value = result_mock
    session.close = AsyncMock()
    return session


def _make_mock_session_factory(mock_session=None):
    """Return a callable that mimics ``async_sessionmaker().__call__()``."""
    mock_session = mock_session or _make_mock_session()
    factory = MagicMock()
    ctx = AsyncMock()
    ctx.__aenter__.return_value = mock_session
    ctx.__aexit__.return_value = False
    factory.return_value = ctx
    return factory, mock_session


# ---------------------------------------------------------------------------
# Store / broadcaster fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def config_repo() -> InMemoryBuildingConfigRepository:
    """Empty in-memory configuration store."""
    return InMemoryBuildingConfigRepository()


@pytest.fixture()
def db_session():
    """Mock session handed out by the app's session factory."""
    return _make_mock_session()


@pytest.fixture()
def broadcaster() -> Broadcaster:
    """Broadcaster with local fan-out only."""
    return Broadcaster(redis=None)


# ---------------------------------------------------------------------------
# HTTP client fixture (FastAPI app with mocked infra)
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def client(config_repo, db_session, broadcaster) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the FastAPI app.

    Only the repository is swapped for the in-memory fake.  The real
    ``get_db_session`` unit of work still runs around every request, on
    the mocked session, so commit and rollback are observable.  Redis is
    fakeredis, so tests run without devstack.
    """
    session_factory, _ = _make_mock_session_factory(db_session)
    fake_redis = _make_fake_redis()

    def _repository_on_session(db: DBSession) -> InMemoryBuildingConfigRepository:
        return config_repo

    app.state.engine = MagicMock()
    app.state.session_factory = session_factory
    app.state.redis = fake_redis
    app.state.broadcaster = broadcaster
    app.dependency_overrides[get_building_config_repository] = _repository_on_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    await fake_redis.aclose()


# ---------------------------------------------------------------------------
# Redis fixture
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def redis_client():
    """Provide a fake Redis client."""
    client = _make_fake_redis()
    yield client
    await client.aclose()
