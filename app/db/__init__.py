"""Database engine, sessions and lifecycle."""

from app.db.database import (
    async_session_maker,
    build_engine,
    close_db,
    create_session_maker,
    engine,
    engine_options,
    get_session,
    init_db,
    ping,
    transaction,
)

__all__ = [
    "async_session_maker",
    "build_engine",
    "close_db",
    "create_session_maker",
    "engine",
    "engine_options",
    "get_session",
    "init_db",
    "ping",
    "transaction",
]
