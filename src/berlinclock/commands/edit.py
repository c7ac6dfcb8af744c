"""Command group: build a configuration lamp by lamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from berlinclock.commands._base import ClockGroup
from berlinclock.domain.rows import Row

if TYPE_CHECKING:
    from berlinclock.commands._context import AppContext

_EDIT_EXAMPLES = """\
  berlinclock edit show
  berlinclock edit toggle five_hours 0
  berlinclock edit toggle five_minutes 2
  berlinclock edit toggle seconds 0
  berlinclock edit undo
  berlinclock edit reset"""


@click.group(cls=ClockGroup, examples=_EDIT_EXAMPLES)
@click.pass_obj
def edit(app: AppContext) -> None:
    """Switch lamps on and off and see which time they show.

    Lamps light left to right: a lamp can only be switched on when the lamp
    before it is lit, and switching a lamp off also clears every lamp to its
    right. The configuration is kept between runs.
    """


@edit.command(
    examples="""\
  berlinclock edit show
  berlinclock --json edit show"""
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the configuration being edited."""
    app.emit(app.editor_service().show())


@edit.command(
    examples="""\
  berlinclock edit toggle five_hours 0
  berlinclock edit toggle single_minutes 3
  berlinclock -q edit toggle seconds 0"""
)
@click.argument("row", type=click.Choice([str(r) for r in Row], case_sensitive=False))
@click.argument("index", type=int)
@click.pass_obj
def toggle(app: AppContext, row: str, index: int) -> None:
    """Click lamp INDEX (0-based, left to right) of ROW."""
    app.emit(app.editor_service().toggle(Row(row.lower()), index))


@edit.command(
    examples="""\
  berlinclock edit reset"""
)
@click.pass_obj
def reset(app: AppContext) -> None:
    """Switch every lamp off."""
    app.emit(app.editor_service().reset())


@edit.command(
    examples="""\
  berlinclock edit undo"""
)
@click.pass_obj
def undo(app: AppContext) -> None:
    """Restore the configuration before the last change."""
    app.emit(app.editor_service().undo())
