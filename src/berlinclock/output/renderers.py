"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from berlinclock.output.console import create_console, get_output, style_for_lamp

if TYPE_CHECKING:
    from rich.console import Console

    from berlinclock.services.result import ServiceResult

LIT_LAMP = "■"
OFF_LAMP = "□"
LIT_SECONDS = "●"
OFF_SECONDS = "○"

_ROW_KEYS = ("fiveHoursRow", "singleHoursRow", "fiveMinutesRow", "singleMinutesRow")


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
    """Render minimal output for ``--quiet`` mode: the time, if there is one."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    time = result.data.get("time")
    if time:
        return str(time)
    return f"OK: {result.op}"


def render_lamps(clock: dict[str, Any]) -> Group:
    """Draw a wire record as rows of coloured lamps, seconds lamp on top."""
    seconds = str(clock.get("secondsLamp", "O"))
    lines = [
        Text(
            LIT_SECONDS if seconds != "O" else OFF_SECONDS,
            style=style_for_lamp(seconds),
            justify="center",
        )
    ]
    for key in _ROW_KEYS:
        line = Text(justify="center")
        for position, code in enumerate(str(clock.get(key, ""))):
            if position:
                line.append(" ")
            line.append(LIT_LAMP if code != "O" else OFF_LAMP, style=style_for_lamp(code))
        lines.append(line)
    return Group(*lines)


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="clock.ok")
    op = Text(f"  {result.op}", style="clock.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text.assemble(
        (f"  {key}: ", "clock.key"),
        (str(value), "clock.time" if key == "time" else ""),
    )
    console.print(line)


def _wire_codes(console: Console, clock: dict[str, Any]) -> None:
    console.print(Text("  wire:", style="dim"))
    for key in ("secondsLamp", *_ROW_KEYS):
        console.print(f"    {key}: {clock.get(key, '')}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="clock.error")
    op = Text(f"  {result.op}", style="clock.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Clock renderers ───────────────────────────────────────────────────


def _render_clock(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render now/convert/edit results: the lamps, then the time they show."""
    d = result.data
    clock = d.get("clock", {})
    time = d.get("time")
    title = str(time) if time else "--:--:--"
    console.print(Panel(render_lamps(clock), title=title, border_style="dim", expand=False))
    _status_line(console, result)
    _field(console, "time", time if time else "undecodable")
    if "row" in d:
        _field(console, "lamp", f"{d['row']}[{d['index']}]")
    if "changed" in d:
        _field(console, "changed", "yes" if d["changed"] else "no")
    if "remaining" in d:
        _field(console, "undo steps left", d["remaining"])
    if verbose:
        _wire_codes(console, clock)


def _render_decoded(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "time", result.data.get("time"))
    if verbose:
        _wire_codes(console, result.data.get("clock", {}))


def _render_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the reading guide as a table plus the worked example."""
    d = result.data
    table = Table(title="How to read the Berlin Clock", show_header=True, expand=False)
    table.add_column("Row", style="bold", no_wrap=True)
    table.add_column("Lamps", justify="right")
    table.add_column("Colour")
    table.add_column("Meaning")
    for row in d.get("rows", []):
        table.add_row(row["row"], str(row["lamps"]), row["color"], row["meaning"])
    console.print(table)
    console.print(f"\n{d.get('reading', '')}")

    example = d.get("example", {})
    if example:
        console.print()
        console.print(
            Panel(
                render_lamps(example.get("clock", {})),
                title=f"Example {example.get('time')}",
                border_style="dim",
                expand=False,
            )
        )


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "now": _render_clock,
    "convert": _render_clock,
    "edit_show": _render_clock,
    "toggle": _render_clock,
    "reset": _render_clock,
    "undo": _render_clock,
    "decode": _render_decoded,
    "info": _render_info,
}
