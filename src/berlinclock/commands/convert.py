"""Command: encode a chosen time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from berlinclock.commands._base import ClockCommand

if TYPE_CHECKING:
    from berlinclock.commands._context import AppContext


@click.command(
    cls=ClockCommand,
    examples="""\
  berlinclock convert 13:32:01
  berlinclock convert --hour 23 --minute 59
  berlinclock convert --second 30
  berlinclock convert
  berlinclock --json convert 00:00:00""",
)
@click.argument("time", required=False)
@click.option("--hour", type=int, default=None, help="Hour (0-23).")
@click.option("--minute", type=int, default=None, help="Minute (0-59).")
@click.option("--second", type=int, default=None, help="Second (0-59).")
@click.pass_obj
def convert(
    app: AppContext,
    time: str | None,
    hour: int | None,
    minute: int | None,
    second: int | None,
) -> None:
    """Show TIME (HH:MM:SS) as a Berlin Clock.

    Without TIME, parts not given as options come from the last converted
    time. The result becomes the new saved selection.
    """
    service = app.clock_service()
    if time is not None:
        if any(part is not None for part in (hour, minute, second)):
            msg = "Pass either TIME or --hour/--minute/--second, not both."
            raise click.UsageError(msg)
        app.emit(service.convert_text(time))
        return
    app.emit(service.convert(hour=hour, minute=minute, second=second))
