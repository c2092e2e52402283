"""
StaffDesk Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception mapping
       and the store client's lifecycle in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn app.main:app) and by the test fixtures.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │                                                     │
    │  Routes:                                            │
    │   /category  /add-category                          │
    │   /add_employee  /employee/{id}  /auth/employee     │
    │   /auth/employee-count  /auth/total-salary          │
    │   /auth/logout  /health  /images/* (static)         │
    │                                                     │
    │  Exception Handlers:                                │
    │   Validation→400 │ NotFound→404 │ DB/File/other→500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the upload directory, open the store client
    Shutdown: dispose the store client (closes pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import __version__
from app.config import Settings, settings as default_settings
from app.database import Database
from app.exceptions import (
    DatabaseError,
    FileStorageError,
    NotFoundError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import (
    RequestIDMiddleware,
    internal_error_response,
    request_id_var,
)
from app.routes import auth, categories, employees, health, summary
from app.services.employee_service import EmployeeService
from app.services.file_service import FileService
from app.services.password_service import PasswordHasher

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure root logging once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store client on startup and dispose it on shutdown."""
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("StaffDesk Backend starting up...")

    await database.connect()
    logger.info("Upload directory: %s", Path(app.state.upload_dir).resolve())
    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("StaffDesk Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON responses.

    Handler hierarchy:
        ValidationError   → 400 {Status: false, message}
        NotFoundError     → 404 {Status: false, message}
        DatabaseError     → 500 {Status: false, Error: "Query Error"}
        FileStorageError  → 500 {Status: false, Error: "Upload Error"}
        Exception         → 500 {Status: false, Error: "Internal Server Error"}

    Server-side failures are logged with their context; the response body only
    ever carries the fixed marker.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={"Status": False, "message": exc.message, "request_id": rid},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={"Status": False, "message": exc.message, "request_id": rid},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"Status": False, "Error": "Query Error", "request_id": rid},
        )

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        rid = request_id_var.get("")
        logger.error("[%s] File storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"Status": False, "Error": "Upload Error", "request_id": rid},
        )

    # Route errors are answered by RequestIDMiddleware while the id is still
    # bound; this handler only sees failures raised outside it.
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return internal_error_response(rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the module singleton.
        database:     Store client to inject; defaults to one built from
                      app_settings.sqlalchemy_url. It is opened by the lifespan,
                      or by the caller when no lifespan runs (tests).
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="StaffDesk API",
        description="Employee and category management backend for the StaffDesk admin tool.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = database or Database(app_settings.sqlalchemy_url, app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,  # the frontend sends the auth cookie
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(categories.router)
    app.include_router(employees.router)
    app.include_router(summary.router)
    app.include_router(auth.router)
    app.include_router(health.router)

    # ── Static Uploads ────────────────────────────────────────────────────
    # StaticFiles checks the directory at construction time
    upload_dir = Path(app_settings.static_root) / app_settings.upload_subdir
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.state.upload_dir = str(upload_dir)

    # Writer, hasher and cookie name all follow app_settings, not the singleton
    app.state.file_service = FileService(upload_dir=str(upload_dir))
    app.state.password_hasher = PasswordHasher(rounds=app_settings.password_hash_rounds)
    app.state.employee_service = EmployeeService(
        files=app.state.file_service,
        hasher=app.state.password_hasher,
    )

    app.mount(
        f"/{app_settings.upload_subdir}",
        StaticFiles(directory=str(upload_dir)),
        name="images",
    )

    return app


app = create_app()


def run() -> None:
    """Start uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.backend_host,
        port=default_settings.port,
    )
