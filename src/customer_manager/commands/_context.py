"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Runs command coroutines against a fresh Store and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import click
from sqlalchemy.exc import SQLAlchemyError

from customer_manager.output.formatters import OutputSettings, format_result
from customer_manager.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from customer_manager.config.settings import CmSettings
    from customer_manager.infrastructure.store import Store

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  No engine is created
    until a command calls :meth:`run`, so ``--help`` and ``--version``
    never touch the database.
    """

    def __init__(self, settings: CmSettings) -> None:
        self.settings = settings

        from customer_manager.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            echo_sql=settings.database.echo,
        )

    def run(
        self,
        op: str,
        work: Callable[[Store], Awaitable[ServiceResult]],
        *,
        auto_create: bool | None = None,
    ) -> ServiceResult:
        """Run *work* against a new Store inside one event loop.

        The store is disposed afterwards. Store errors escaping *work* are
        reported as a ``STORE_ERROR`` result for *op*.

        Args:
            op: Operation name used if a store error has to be reported.
            work: Coroutine function receiving the Store.
            auto_create: Create missing tables first. Defaults to
                ``settings.database.auto_create``.
        """
        if auto_create is None:
            auto_create = self.settings.database.auto_create
        return asyncio.run(self._run(op, work, auto_create=auto_create))

    async def _run(
        self,
        op: str,
        work: Callable[[Store], Awaitable[ServiceResult]],
        *,
        auto_create: bool,
    ) -> ServiceResult:
        from customer_manager.infrastructure.store import Store

        try:
            store = Store(self.settings)
        except ImportError as exc:
            # The URL names an async driver that is not installed.
            return _store_error(op, exc, f"Database driver not available: {exc}")
        except SQLAlchemyError as exc:
            return _store_error(op, exc, str(exc))

        try:
            if auto_create:
                await store.init()
            return await work(store)
        except SQLAlchemyError as exc:
            return _store_error(op, exc, str(exc.orig if getattr(exc, "orig", None) else exc))
        finally:
            await store.close()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)


def _store_error(op: str, exc: Exception, message: str) -> ServiceResult:
    logger.debug("Store error during %s", op, exc_info=exc)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="STORE_ERROR",
            message=message,
            detail={"exception": type(exc).__name__},
        ),
    )
