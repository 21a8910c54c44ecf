"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from lemonctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from lemonctl.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Batch processing prints only the batch result string and the report
    prints only the report text, so both pipe cleanly.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "process_orders":
        return str(result.data.get("result", ""))
    if result.op == "report":
        return str(result.data.get("report", "")).rstrip("\n")

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="stand.ok")
    op = Text(f"  {result.op}", style="stand.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any, *, style: str | None = None) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="stand.key")
    v = Text(str(value), style=style or "")
    console.print(Text.assemble(k, v))


def _bills_table(bills: dict[str, int]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Bill", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Value", style="stand.money", justify="right")
    for denomination, count in bills.items():
        table.add_row(f"${denomination}", str(count), f"${int(denomination) * count}")
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="stand.error")
    op = Text(f"  {result.op}", style="stand.op")
    console.print(Text.assemble(label, op, " — ", msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_process(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a batch outcome: the batch result string and why it was refused."""
    d = result.data
    _status_line(console, result)
    committed = bool(d.get("committed"))
    _field(console, "result", d.get("result"), style="stand.bills" if committed else "stand.null")
    if committed:
        _field(console, "lemonades", d.get("lemonades", 0))
    else:
        reason = d.get("reason")
        position = d.get("position_in_line")
        if reason and position is not None:
            _field(console, "reason", f"{reason} (position {position})")
        elif reason:
            _field(console, "reason", reason)
    if verbose:
        _field(console, "orders", d.get("order_count", 0))


def _render_report(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the sales report text, plus a bill table when verbose."""
    d = result.data
    _status_line(console, result)
    for line in str(d.get("report", "")).splitlines():
        console.print(Text(f"  {line}"))
    if verbose:
        console.print()
        console.print(_bills_table(d.get("bills", {})))
        _field(console, "cash_value", f"${d.get('cash_value', 0)}", style="stand.money")


def _render_reset(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "lemonades_sold", result.data.get("lemonades_sold", 0))
    bills = result.data.get("bills", {})
    _field(console, "bills", ", ".join(f"${k}={v}" for k, v in bills.items()))


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "stand_root", d.get("stand_root", ""))
    created = "created" if d.get("config_created") else "kept existing"
    _field(console, "config", f"{d.get('config_path', '')} ({created})")
    _field(console, "database", d.get("db_path", ""))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus flat key-value fields."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS = {
    "process_orders": _render_process,
    "report": _render_report,
    "reset": _render_reset,
    "init_stand": _render_init,
}
