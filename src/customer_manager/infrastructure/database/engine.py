"""Async database engine and session factory setup.

Any SQLAlchemy async URL works; the default is a SQLite file driven by
aiosqlite. SQLite connections get WAL mode and foreign keys enabled.

Sessions are created with ``expire_on_commit=False`` so that objects
returned by the service stay readable after the commit without another
round trip (lazy loads are not available under asyncio).
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from customer_manager.infrastructure.database.schema import metadata


def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, *, echo: bool = False, **engine_kwargs: Any) -> AsyncEngine:
    """Create an async engine; SQLite URLs get WAL mode and foreign keys."""
    engine = create_async_engine(url, echo=echo, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the session factory used for one-session-per-request access."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_database(engine: AsyncEngine) -> None:
    """Create every table in :data:`schema.metadata`.

    Idempotent — safe to call on an existing database.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
