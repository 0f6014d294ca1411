"""structlog configuration for customer-manager.

Every log line goes to stderr so stdout stays clean for command output
(including ``--json``). Two renderers:

- console (default): human-readable key/value lines
- JSON (``--log-json``): one JSON object per line

SQL statement logging (``[database] echo``) is routed through the same
handler instead of SQLAlchemy's own stdout handler.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "customer_manager"
SQL_LOGGER = "sqlalchemy.engine"

# Third-party loggers that stay quiet even under --verbose.
_QUIET_LOGGERS = ("alembic", "sqlalchemy", "aiosqlite")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(
    pre_chain: list[structlog.types.Processor], log_json: bool
) -> logging.Handler:
    """Single stderr handler rendering both structlog and stdlib records."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    echo_sql: bool = False,
) -> None:
    """Route structlog and stdlib logging to one stderr handler.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: ``customer_manager`` loggers emit DEBUG. Otherwise WARNING+.
        log_json: Render JSON lines instead of console output.
        echo_sql: Emit SQL statements from ``sqlalchemy.engine`` at INFO.
    """
    pre_chain = _shared_processors()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(pre_chain, log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if echo_sql else logging.NOTSET)
