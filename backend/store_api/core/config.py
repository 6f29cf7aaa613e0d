"""
Centralized configuration management using Pydantic Settings.

Settings are read from environment variables and an optional .env file.
The module-level ``settings`` instance is the default used by the
application factory; tests and scripts may build their own ``Settings``.
"""

from typing import Annotated, List, Optional
import json

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be overridden with an upper-case environment variable
    of the same name (``DATABASE_URL``, ``LOG_LEVEL``...).
    """

    # API Configuration
    project_name: str = Field(
        default="Store API",
        description="Project name displayed in API docs"
    )
    api_prefix: str = Field(
        default="",
        description="Prefix mounted in front of every resource router"
    )

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./store.db",
        description="Async database URL (SQLite by default, PostgreSQL via asyncpg)"
    )
    database_schema: Optional[str] = Field(
        default="sales",
        description="Schema namespace holding the store tables (ignored on SQLite)"
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL (debug only)"
    )
    database_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Driver-level deadline for a single statement or lock wait"
    )
    auto_migrate: bool = Field(
        default=True,
        description="Create missing tables at startup"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit single-line JSON logs (False for a plain text format)"
    )

    # CORS Configuration
    # NoDecode hands the raw env string to parse_cors_origins
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | List[str]) -> List[str]:
        """
        Parse cors_origins from a JSON array string, a comma separated
        string, or a list.
        """
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """
        Validate database URL format.

        Only the async-capable SQLite and PostgreSQL schemes are accepted.
        """
        if not v or v.strip() == "":
            raise ValueError("DATABASE_URL is required and cannot be empty")

        valid_schemes = ["sqlite", "sqlite+aiosqlite", "postgresql", "postgresql+asyncpg"]
        if not any(v.startswith(scheme + "://") for scheme in valid_schemes):
            raise ValueError(
                f"DATABASE_URL must start with one of: {', '.join(valid_schemes)}. "
                f"Got: {v[:20]}..."
            )
        return v

    @field_validator("database_schema", mode="before")
    @classmethod
    def empty_schema_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and v.strip() == "":
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """
        Database URL with the async driver filled in.

        ``sqlite://`` and ``postgresql://`` are rewritten to their
        aiosqlite/asyncpg forms so plain URLs can be configured.
        """
        if self.database_url.startswith("sqlite://"):
            return "sqlite+aiosqlite://" + self.database_url[len("sqlite://"):]
        if self.database_url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + self.database_url[len("postgresql://"):]
        return self.database_url


# Global settings instance
settings = Settings()
