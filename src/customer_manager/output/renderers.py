"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from customer_manager.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from customer_manager.services.result import ServiceResult

_CUSTOMER_FIELDS = ("id", "name", "email", "phone", "address")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if item.get("id") is not None)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="cm.ok")
    op = Text(f"  {result.op}", style="cm.op")
    console.print(label, op, end="")
    console.print()


def _value_text(key: str, value: Any) -> Text:
    if value is None:
        return Text("-", style="cm.null")
    if key == "id":
        return Text(str(value), style="cm.id")
    if key == "name":
        return Text(str(value), style="cm.name")
    return Text(str(value))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cm.key")
    console.print(k, _value_text(key, value), end="")
    console.print()


def _customer_table(items: list[dict[str, Any]]) -> Table:
    """Build a Rich Table for a list of customers."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="cm.id", no_wrap=True, justify="right")
    table.add_column("Name", style="cm.name")
    table.add_column("Email")
    table.add_column("Phone")
    table.add_column("Address")

    for item in items:
        table.add_row(*(_value_text(key, item.get(key)) for key in _CUSTOMER_FIELDS))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cm.error")
    op = Text(f"  {result.op}", style="cm.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Customer renderers ────────────────────────────────────────────────


def _render_customer(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get/create/update results as one customer's fields."""
    _status_line(console, result)
    for key in _CUSTOMER_FIELDS:
        if key in result.data:
            _field(console, key, result.data[key])


def _render_customer_list(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render list_customers as a table."""
    items = result.data.get("items", [])
    console.print(f"[bold]{result.data.get('count', len(items))} customers[/bold]")
    if items:
        console.print(_customer_table(items))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(f"    {k}: {v}")


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "get_customer": _render_customer,
    "create_customer": _render_customer,
    "update_customer": _render_customer,
    "list_customers": _render_customer_list,
}
