"""Store — owner of the async engine and the per-request session factory.

The Store is created once per process (or per CLI invocation) from
:class:`~customer_manager.config.settings.CmSettings`. Services never build
sessions themselves: callers open one with :meth:`Store.session` for each
logical request and inject it into the service.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from customer_manager.infrastructure.database.engine import (
    create_db_engine,
    create_session_factory,
    init_database,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

    from customer_manager.config.settings import CmSettings

logger = logging.getLogger(__name__)


class Store:
    """Persistent store handle: engine, session factory, schema setup."""

    def __init__(self, settings: CmSettings) -> None:
        self._settings = settings
        self._engine = create_db_engine(settings.database_url)
        self._session_factory = create_session_factory(self._engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def settings(self) -> CmSettings:
        return self._settings

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield one session for a logical request.

        The session is closed on exit; anything left uncommitted is rolled
        back by the close.
        """
        async with self._session_factory() as session:
            yield session

    async def init(self) -> None:
        """Create all tables if they do not exist yet."""
        logger.debug("Initializing schema at %s", self._engine.url)
        await init_database(self._engine)

    async def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        await self._engine.dispose()
