"""
LinkVault Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test runs against a real SQLite file, so the ordering, cascade
       and transaction behavior under test is SQLite's own.
How:   The LINKVAULT_* environment is set before anything from `linkvault`
       is imported; the settings singleton, the engine and the password gate
       are all built from it at import time.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── database: creates the tables, drops them afterwards
    ├── db_session: AsyncSession for service-level tests
    ├── other_session: a second, independent session (what another reader sees)
    └── test_client: HTTPX AsyncClient wired to the FastAPI app
"""

import os
import tempfile
from pathlib import Path

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must happen BEFORE any linkvault import
_TEST_DIR = Path(tempfile.mkdtemp(prefix="linkvault_test_"))
os.environ["LINKVAULT_CONFIG"] = str(_TEST_DIR / "missing-config.yaml")
os.environ["LINKVAULT_DATABASE__PATH"] = str(_TEST_DIR / "test.db")
os.environ["LINKVAULT_AUTH__PASSWORD"] = "secret"
os.environ["LINKVAULT_SITE__TITLE"] = "Test Links"
os.environ["LINKVAULT_LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from linkvault.database import (  # noqa: E402
    Base,
    async_session_factory,
    dispose_engine,
    engine,
    init_db,
)

PASSWORD = "secret"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """
    Provides empty `categories` and `bookmarks` tables.

    Dropping the tables also drops their AUTOINCREMENT counters, so ids start
    at 1 in every test. The engine is disposed afterwards because each test
    runs on its own event loop.
    """
    await init_db()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await dispose_engine()


@pytest_asyncio.fixture
async def db_session(database):
    """
    Provides a session for calling services directly.

    Usage:
        async def test_create(db_session):
            category = await category_service.create_category(db_session, "Work")
    """
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def other_session(database):
    """A second session, used to check what a concurrent reader would see."""
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to the FastAPI app.
    How:     ASGITransport routes requests straight into the app. It does not
             run the lifespan, which is why the `database` fixture creates
             the tables.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/categories")
            assert response.status_code == 200
    """
    from linkvault.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def auth():
    """Query parameters that unlock write operations."""
    return {"password": PASSWORD}
