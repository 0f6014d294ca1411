"""Command: database initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from customer_manager.commands._base import CmCommand
from customer_manager.services.result import ServiceError, ServiceResult
from customer_manager.services.upgrade import UpgradeService

if TYPE_CHECKING:
    from customer_manager.commands._context import AppContext
    from customer_manager.infrastructure.store import Store

_INIT_EXAMPLES = """\
  customer-manager init
  customer-manager --database-url sqlite+aiosqlite:///data/customers.db init
  customer-manager --json init"""


@click.command("init", cls=CmCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the customer tables and stamp the migration head."""
    op = "init"

    async def _work(store: Store) -> ServiceResult:
        await store.init()
        stamped = await UpgradeService(store.engine).stamp_current()
        if not stamped.ok:
            message = stamped.error.message if stamped.error else "Stamp failed"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="INIT_FAILED", message=message),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "database_url": store.engine.url.render_as_string(hide_password=True),
                "revision": stamped.data["current"],
            },
        )

    app.emit(app.run(op, _work, auto_create=False))
