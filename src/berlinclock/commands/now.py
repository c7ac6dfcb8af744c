"""Command: show the current time, once or as a live clock."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from berlinclock.commands._base import ClockCommand

if TYPE_CHECKING:
    from berlinclock.commands._context import AppContext


@click.command(
    cls=ClockCommand,
    examples="""\
  berlinclock now
  berlinclock now --watch
  berlinclock now --count 5 --interval 0.5
  berlinclock --json now""",
)
@click.option("--watch", is_flag=True, help="Redraw the clock every interval until interrupted.")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after N samples (implies --watch).",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds between samples (default: [realtime] interval_seconds).",
)
@click.pass_obj
def now(app: AppContext, watch: bool, count: int | None, interval: float | None) -> None:
    """Show the local time as a Berlin Clock."""
    from berlinclock.infrastructure.time_source import poll

    service = app.clock_service()
    if not watch and count is None:
        app.emit(service.now())
        return

    if interval is None:
        interval = app.settings.realtime.interval_seconds
    redraw = sys.stdout.isatty() and not app.settings.json_output
    for current in poll(service.time_source, interval=interval, count=count):
        if redraw:
            click.clear()
        app.emit(service.show(current))
