"""
StaffDesk Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the database client and the services.
When:  Loaded once at module import time.

Store connection:
    The store is addressed by its parts (DB_HOST, DB_USER, DB_PASSWORD, DB_NAME,
    DB_PORT) so deployments can reuse the same variables as the admin frontend's
    tooling. DATABASE_URL, when set, wins over the parts (tests point it at a
    temporary SQLite file).
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default; nothing is required to boot.
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="localhost")
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="")
    db_name: str = Field(default="test")
    db_port: int = Field(default=5432, ge=1, le=65535)

    # What: SQLAlchemy dialect+driver used when assembling the URL from parts
    # Format: <dialect>+<async driver>, e.g. postgresql+asyncpg
    db_driver: str = Field(default="postgresql+asyncpg")

    # What: Full async connection URL; overrides the parts above when set
    database_url: Optional[str] = Field(default=None)

    # Pool sizing for server backends (ignored for SQLite)
    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    @property
    def sqlalchemy_url(self) -> str:
        """Async connection URL for the store, rendered with the password."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    # ── File Storage ──────────────────────────────────────────────────────
    # What: Directory served as static assets; uploads live in a subfolder
    # Layout: <static_root>/<upload_subdir>/image_1718000000000.png
    static_root: str = Field(default="./public")
    upload_subdir: str = Field(default="images")

    # ── Credentials ───────────────────────────────────────────────────────
    # What: bcrypt cost factor for employee passwords
    # Trade-off: each +1 doubles hashing time; 10 matches existing stored hashes
    password_hash_rounds: int = Field(default=10, ge=4, le=16)

    # What: Cookie cleared by the logout stub
    auth_cookie_name: str = Field(default="token")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:5173")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DB_HOST and db_host both work
        "extra": "ignore",
    }


# Module singleton, imported throughout the application
settings = Settings()
