"""UpgradeService — database migration with Alembic.

Pipeline: CHECK → MIGRATE (or STAMP) → REPORT
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from alembic.script import ScriptDirectory
from sqlalchemy import inspect

from customer_manager.infrastructure.database.migrations import (
    build_config,
    current_revision,
    head_revision,
    stamp_head,
    upgrade_head,
)
from customer_manager.infrastructure.database.schema import customers
from customer_manager.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


class UpgradeService:
    """Handles database schema migrations via Alembic."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def _tables_exist(self) -> bool:
        """Check if the customers table exists (pre-Alembic database detection)."""
        async with self._engine.connect() as conn:
            names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        return customers.name in names

    async def check_pending(self) -> ServiceResult:
        """List pending migrations without applying."""
        op = "upgrade"

        try:
            script = ScriptDirectory.from_config(build_config())
            head = script.get_current_head()
            current = await current_revision(self._engine)

            # Collect pending revisions by walking from head down to current
            pending: list[dict[str, Any]] = []
            if current != head and head is not None:
                rev_obj = script.get_revision(head)
                while rev_obj is not None and rev_obj.revision != current:
                    pending.append(
                        {
                            "revision": rev_obj.revision,
                            "description": rev_obj.doc or "",
                        }
                    )
                    down = rev_obj.down_revision
                    if down is None:
                        break
                    rev_obj = script.get_revision(str(down))

            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "pending_count": len(pending),
                    "pending": pending,
                    "current": current,
                    "head": head,
                },
            )
        except Exception as exc:
            logger.debug("Migration check failed", exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CHECK_FAILED",
                    message=f"Failed to check migrations: {exc}",
                ),
            )

    async def apply(self) -> ServiceResult:
        """Bring the database to the head revision."""
        op = "upgrade"

        check_result = await self.check_pending()
        if not check_result.ok:
            return check_result

        pending_count = check_result.data["pending_count"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": check_result.data["head"],
                    "message": "Database is already up to date",
                },
            )

        stamped = False
        try:
            current = check_result.data.get("current")
            if current is None and await self._tables_exist():
                # Tables created by create_all but no version tracking yet.
                await stamp_head(self._engine)
                stamped = True
            else:
                await upgrade_head(self._engine)
        except Exception as exc:
            logger.debug("Migration failed", exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="MIGRATION_FAILED",
                    message=f"Migration failed: {exc}",
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "applied_count": 0 if stamped else pending_count,
                "stamped": stamped,
                "current": check_result.data["head"],
            },
        )

    async def stamp_current(self) -> ServiceResult:
        """Stamp DB as at current head (for freshly created DBs)."""
        op = "upgrade"

        try:
            await stamp_head(self._engine)
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "stamped": True,
                    "current": head_revision(),
                },
            )
        except Exception as exc:
            logger.debug("Stamp failed", exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="STAMP_FAILED",
                    message=f"Failed to stamp database: {exc}",
                ),
            )
