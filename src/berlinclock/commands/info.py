"""Command: explain how to read the clock."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from berlinclock.commands._base import ClockCommand

if TYPE_CHECKING:
    from berlinclock.commands._context import AppContext


@click.command(
    cls=ClockCommand,
    examples="""\
  berlinclock info
  berlinclock --json info""",
)
@click.pass_obj
def info(app: AppContext) -> None:
    """Explain what each row of lamps means."""
    from berlinclock.services.info import describe_clock

    app.emit(describe_clock())
