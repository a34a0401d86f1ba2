"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The geocoding provider is never called: FakeGeocoder stands in for it
    - client fixture injects AppServices via dependency_overrides (lifespan not run)

Design Decisions:
    - StaticPool: one shared connection so the in-memory database survives
      across sessions of the same test
"""

import os

# Ensure tests never reach a real database or geocoding provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("GEOCODER_BASE_URL", "http://geocoder.invalid")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from location_api.api.dependencies import get_services  # noqa: E402
from location_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from location_api.infrastructure.location_store import SqlLocationStore  # noqa: E402
from location_api.main import app  # noqa: E402
from location_api.services.app_services import AppServices  # noqa: E402
from tests.services.fake_geocoder import FakeGeocoder  # noqa: E402


@pytest.fixture
async def db_manager():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    manager = DatabaseSessionManager(engine)
    yield manager
    await manager.dispose()


@pytest.fixture
async def store(db_manager):
    location_store = SqlLocationStore(db_manager)
    await location_store.ensure_schema()
    return location_store


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def services(db_manager, store, geocoder):
    return AppServices.assemble(db_manager, store, geocoder)


@pytest.fixture
async def client(services):
    """FastAPI test client with AppServices overridden."""
    app.dependency_overrides[get_services] = lambda: services

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
