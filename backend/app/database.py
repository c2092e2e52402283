"""
StaffDesk Backend — Database Client & Session Management
==========================================================

What:  Async SQLAlchemy store client, declarative base, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   `Database` owns the engine and session factory. The application factory
       creates one instance, the lifespan opens it on startup and disposes it on
       shutdown, and handlers receive sessions through `get_db_session`.
Who:   Route handlers (via Depends), the health check, and the test fixtures.
When:  Engine is created at startup; sessions are created per-request.

Architecture Decision:
    The client lives on `app.state.database` instead of a module-level engine so
    that each app instance (production or test) owns its connection pool and the
    pool's lifetime is tied to the application's lifespan.

Schema ownership:
    The `category` and `employee` tables pre-exist in the store. The ORM models
    only describe them for statement building; the application never issues DDL.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for the ORM mappings of the pre-existing store tables."""
    pass


class Database:
    """
    Store client with an explicit open/close lifecycle.

    Lifecycle:
        1. Constructed by create_app() with the connection URL (no I/O)
        2. connect() builds the engine and session factory (lifespan startup)
        3. session() hands out AsyncSession objects while connected
        4. dispose() closes every pooled connection (lifespan shutdown)

    Pool configuration is only applied to server backends; SQLite (used by the
    test suite) rejects QueuePool sizing arguments in some configurations.
    """

    def __init__(self, url: str, app_settings: Optional[Settings] = None):
        self.url = url
        self._settings = app_settings or default_settings
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._engine

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def _engine_options(self) -> dict:
        options = {"echo": self._settings.log_level == "DEBUG"}
        if make_url(self.url).get_backend_name() != "sqlite":
            options.update(
                pool_size=self._settings.db_pool_size,
                max_overflow=self._settings.db_max_overflow,
                pool_pre_ping=self._settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        return options

    async def connect(self) -> None:
        """Create the engine and session factory. Idempotent."""
        if self._engine is not None:
            return
        self._engine = create_async_engine(self.url, **self._engine_options())
        # expire_on_commit=False: ORM rows stay readable after the write commits
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info(
            "Database client opened (%s)",
            make_url(self.url).render_as_string(hide_password=True),
        )

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._session_factory()

    async def ping(self) -> bool:
        """Run SELECT 1; used by the health check."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections. Safe to call when never connected."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database client closed")


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Takes the Database instance held on app.state
        2. Yields a fresh session to the route handler
        3. On error: rolls back (services commit their own writes)
        4. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/category")
        async def list_categories(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    session = database.session()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
