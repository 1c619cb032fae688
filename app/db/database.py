"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.configs import settings
from app.errors.database import DatabaseConnectionError, DatabaseInitializationError
from app.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def unicode_lower(value: object) -> object:
    """Lower-case text with Python's Unicode rules; other values pass through."""
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(engine: AsyncEngine) -> None:
    """Swap SQLite's ASCII-only ``lower`` for a Unicode-aware one, used by ``ilike``."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        dbapi_connection.create_function("lower", 1, unicode_lower, deterministic=True)


def engine_options(database_url: str) -> dict[str, Any]:
    """
    Build ``create_async_engine`` keyword arguments for a database URL.

    SQLite (aiosqlite) takes no pool sizing and needs a single shared
    connection when in memory; PostgreSQL (asyncpg) gets the pool settings
    and server-side statement timeouts.

    Args:
        database_url: SQLAlchemy async database URL.

    Returns:
        dict[str, Any]: Engine keyword arguments.
    """
    url = make_url(database_url)
    options: dict[str, Any] = {"echo": settings.DATABASE_ECHO}

    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args={
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    )
    return options


def create_session_maker(
    bind: AsyncEngine,
) -> async_sessionmaker[SQLModelAsyncSession]:
    """Create a session factory bound to ``bind``."""
    return async_sessionmaker(
        bind,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for ``database_url`` with its backend hooks.

    Args:
        database_url: SQLAlchemy async database URL.

    Returns:
        AsyncEngine: The configured engine.
    """
    new_engine = create_async_engine(database_url, **engine_options(database_url))
    if new_engine.dialect.name == "sqlite":
        _register_sqlite_functions(new_engine)
    return new_engine


engine: AsyncEngine = build_engine(settings.DATABASE_URL)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker = create_session_maker(engine)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    This function is used as a FastAPI dependency to provide
    database sessions to route handlers. The session commits when the
    request handler returns and rolls back when it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(email="ada@example.com", ...))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create any missing tables.

    Called on application startup so a fresh SQLite file is usable
    without running migrations. Production schemas are managed by Alembic.

    Raises:
        DatabaseInitializationError: If the tables cannot be created.
    """
    # Import all models to ensure they are registered
    from app.models import BlogDB, UserDB  # noqa: F401, PLC0415

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except SQLAlchemyError as e:
        logger.exception("Database initialization failed")
        raise DatabaseInitializationError from e
    logger.info("Database initialized", url=make_url(settings.DATABASE_URL).render_as_string())


async def ping() -> None:
    """
    Check database connectivity.

    Raises:
        DatabaseConnectionError: If the database cannot be reached.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database ping failed", error=str(e))
        raise DatabaseConnectionError from e


async def close_db() -> None:
    """
    Close database connections.

    This function should be called on application shutdown
    to properly close all database connections.
    """
    await engine.dispose()
    logger.info("Database connections closed")
