"""Alembic migration infrastructure for customer-manager.

Provides programmatic Alembic configuration — no alembic.ini needed.
The migration scripts live alongside this module.

Alembic runs synchronously, so every helper that touches the database
hands Alembic the sync side of an async connection through
``Config.attributes["connection"]``; ``env.py`` picks it up from there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

if TYPE_CHECKING:
    from sqlalchemy import Connection
    from sqlalchemy.ext.asyncio import AsyncEngine


def build_config(db_url: str | None = None, *, connection: Connection | None = None) -> Config:
    """Build an Alembic Config pointing at our migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    if db_url is not None:
        # ConfigParser interpolation treats '%' specially.
        cfg.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    if connection is not None:
        cfg.attributes["connection"] = connection
    return cfg


def head_revision() -> str | None:
    """Return the newest revision id in the migration chain."""
    return ScriptDirectory.from_config(build_config()).get_current_head()


async def current_revision(engine: AsyncEngine) -> str | None:
    """Return the revision the database is stamped at, or None."""

    def _current(conn: Connection) -> str | None:
        return MigrationContext.configure(conn).get_current_revision()

    async with engine.connect() as conn:
        return await conn.run_sync(_current)


async def upgrade_head(engine: AsyncEngine) -> None:
    """Apply every pending migration up to head."""

    def _upgrade(conn: Connection) -> None:
        command.upgrade(build_config(connection=conn), "head")

    async with engine.begin() as conn:
        await conn.run_sync(_upgrade)


async def stamp_head(engine: AsyncEngine) -> None:
    """Stamp a database as at the current head revision.

    Called by ``customer-manager init`` so freshly created databases start
    at the correct Alembic version without running migrations.
    """

    def _stamp(conn: Connection) -> None:
        command.stamp(build_config(connection=conn), "head")

    async with engine.begin() as conn:
        await conn.run_sync(_stamp)
