"""
Database configuration and session management.

The store handle is an explicitly constructed ``Database`` object rather
than a module-level engine: the application factory builds one from
settings, keeps it on ``app.state.database`` and hands sessions to request
handlers through the ``get_db`` dependency. Tests build their own.
"""

from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import CreateSchema

from store_api.core.config import Settings, settings as default_settings
from store_api.core.logging_config import get_logger
from store_api.models.base import Base, SCHEMA_NAME


logger = get_logger(__name__)


class Database:
    """
    Async engine plus session factory for one database.

    Attributes:
        url: Async database URL
        schema: Schema the ``sales`` placeholder resolves to (None on SQLite)
        engine: SQLAlchemy AsyncEngine
        session_maker: Factory producing AsyncSession instances
    """

    def __init__(
        self,
        url: str,
        *,
        schema: Optional[str] = SCHEMA_NAME,
        echo: bool = False,
        timeout_seconds: float = 30.0,
    ):
        self.url = url
        self.is_sqlite = url.startswith("sqlite")
        # SQLite has no schemas; tables go in the main database.
        self.schema = None if self.is_sqlite else schema
        self.engine = self._build_engine(echo, timeout_seconds)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Don't expire objects after commit
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        settings = settings or default_settings
        return cls(
            settings.async_database_url,
            schema=settings.database_schema,
            echo=settings.database_echo,
            timeout_seconds=settings.database_timeout_seconds,
        )

    def _build_engine(self, echo: bool, timeout_seconds: float) -> AsyncEngine:
        """
        Create and configure the async SQLAlchemy engine.

        For SQLite:
        - check_same_thread=False for async compatibility
        - ``timeout`` bounds how long a statement waits on a locked database
        - StaticPool for in-memory databases so every session shares one
          connection (and therefore one database)
        - foreign keys switched on for every connection

        For PostgreSQL (asyncpg), ``command_timeout`` bounds each statement.
        """
        if self.is_sqlite:
            connect_args: dict = {"check_same_thread": False, "timeout": timeout_seconds}
        else:
            connect_args = {"command_timeout": timeout_seconds}

        engine_kwargs = {
            "echo": echo,
            "connect_args": connect_args,
            "execution_options": {"schema_translate_map": {SCHEMA_NAME: self.schema}},
        }

        if self.is_sqlite and ":memory:" in self.url:
            engine_kwargs["poolclass"] = StaticPool

        engine = create_async_engine(self.url, **engine_kwargs)

        if self.is_sqlite:
            @event.listens_for(engine.sync_engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        return engine

    async def create_all(self) -> None:
        """
        Create the schema namespace (PostgreSQL) and every missing table.
        """
        # Import models to ensure metadata is populated before create_all()
        from store_api import models  # noqa: F401

        async with self.engine.begin() as conn:
            if self.schema is not None:
                await conn.execute(CreateSchema(self.schema, if_not_exists=True))
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created", extra={"schema": self.schema})

    async def drop_all(self) -> None:
        from store_api import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """
        Close every pooled connection. Call at application shutdown.
        """
        await self.engine.dispose()

    async def ping(self) -> bool:
        """
        Run ``SELECT 1``; raises whatever the driver raises on failure.
        """
        async with self.session_maker() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency providing a session from the application's Database.

    The session is rolled back on error and always closed. Commits are the
    service layer's job (it commits after each write).

    Example:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
