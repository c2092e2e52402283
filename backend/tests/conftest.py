"""
StaffDesk Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked sessions, a throwaway
       SQLite store, an HTTP client bound to a fresh app).

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (service unit tests)
    ├── database:        Connected Database on a temp SQLite file with tables created
    ├── test_app:        create_app() wired to that database
    ├── test_client:     HTTPX AsyncClient for endpoint tests
    └── sample_image_bytes: Minimal PNG bytes for upload tests
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["STATIC_ROOT"] = tempfile.mkdtemp(prefix="staffdesk_test_")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"  # bcrypt minimum; keeps the suite fast
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.database import Base, Database  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models import category, employee  # noqa: E402,F401  (register tables)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.rowcount = 0
        await employee_service.delete_employee(mock_db_session, 42)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database(tmp_path):
    """
    A connected Database on a fresh SQLite file.

    The application never creates tables; the fixture stands in for the
    pre-existing schema.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'staffdesk.db'}")
    await db.connect()
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db
    await db.dispose()


@pytest.fixture
def test_app(database):
    return create_app(database=database)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    ASGITransport does not run the lifespan, which is why the `database`
    fixture connects the store client itself.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_image_bytes():
    """8-byte PNG signature plus an empty IHDR-sized tail; content is never decoded."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def employee_form():
    """Form fields for a valid POST /add_employee."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "analytical-engine",
        "address": "12 St James's Square",
        "salary": "4200",
        "category_id": "1",
    }
