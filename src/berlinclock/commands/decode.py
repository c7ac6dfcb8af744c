"""Command: decode lamp codes into a time."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from berlinclock.commands._base import ClockCommand

if TYPE_CHECKING:
    from berlinclock.commands._context import AppContext

_FIELDS = ("secondsLamp", "fiveHoursRow", "singleHoursRow", "fiveMinutesRow", "singleMinutesRow")


@click.command(
    cls=ClockCommand,
    examples="""\
  berlinclock decode Y RROO RRRO YYRYYROOOOO YYOO
  berlinclock decode O OOOO OOOO OOOOOOOOOOO OOOO
  berlinclock decode --from-json record.json
  berlinclock --json now | jq .data.clock | berlinclock decode --from-json -""",
)
@click.argument("codes", nargs=-1)
@click.option(
    "--from-json",
    "json_file",
    type=click.File("r"),
    default=None,
    help="Read a wire record (JSON object) from a file, or - for stdin.",
)
@click.pass_obj
def decode(app: AppContext, codes: tuple[str, ...], json_file: IO[str] | None) -> None:
    """Decode lamp CODES into HH:MM:SS.

    CODES are five strings: seconds lamp, five-hours row, single-hours row,
    five-minutes row, single-minutes row. Each character is O (off) or
    Y/R (lit).
    """
    if json_file is not None:
        if codes:
            msg = "Pass either CODES or --from-json, not both."
            raise click.UsageError(msg)
        record = _read_record(json_file)
    elif len(codes) == len(_FIELDS):
        record = dict(zip(_FIELDS, (c.upper() for c in codes), strict=True))
    else:
        msg = f"Expected {len(_FIELDS)} lamp code strings, got {len(codes)}."
        raise click.UsageError(msg)

    app.emit(app.clock_service().decode(record))


def _read_record(stream: IO[str]) -> dict[str, Any]:
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        msg = f"Not valid JSON: {exc}"
        raise click.BadParameter(msg, param_hint="--from-json") from exc
    if not isinstance(payload, dict):
        raise click.BadParameter("Expected a JSON object.", param_hint="--from-json")
    return payload
