"""Command: database schema migration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from customer_manager.commands._base import CmCommand

if TYPE_CHECKING:
    from customer_manager.commands._context import AppContext
    from customer_manager.infrastructure.store import Store
    from customer_manager.services.result import ServiceResult


@click.command(
    cls=CmCommand,
    examples="""\
  customer-manager upgrade
  customer-manager upgrade --check
  customer-manager --json upgrade --check""",
)
@click.option(
    "--check", "check_only", is_flag=True, help="Show pending migrations without applying."
)
@click.pass_obj
def upgrade(app: AppContext, check_only: bool) -> None:
    """Run pending database migrations."""
    from customer_manager.services.upgrade import UpgradeService

    async def _work(store: Store) -> ServiceResult:
        svc = UpgradeService(store.engine)
        return await (svc.check_pending() if check_only else svc.apply())

    app.emit(app.run("upgrade", _work, auto_create=False))
