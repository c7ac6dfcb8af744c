"""Click command classes for berlinclock.

Commands declare sample invocations through ``examples=``. They are printed
by ``--examples`` (one ``$``-prompted line each) instead of crowding
``--help``, which only carries a one-line pointer to them.
"""

from __future__ import annotations

from typing import Any

import click

EXAMPLES_HINT = "Run with --examples to see sample invocations."


def _examples_callback(examples: str) -> Any:
    lines = [line.strip() for line in examples.splitlines() if line.strip()]

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in lines:
            click.echo(f"  $ {line}")
        ctx.exit(0)

    return show


class _ExamplesMixin:
    """Adds the eager ``--examples`` flag and the help-text pointer."""

    params: list[click.Parameter]
    epilog: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_examples_callback(examples),
                help="Show sample invocations and exit.",
            )
        )
        if self.epilog is None:
            self.epilog = EXAMPLES_HINT


class ClockCommand(_ExamplesMixin, click.Command):
    """A berlinclock leaf command."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)

    def invoke(self, ctx: click.Context) -> Any:
        from berlinclock.config.logging import bind_command

        bind_command(ctx.command_path)
        return super().invoke(ctx)


class ClockGroup(_ExamplesMixin, click.Group):
    """A berlinclock command group; subcommands default to :class:`ClockCommand`."""

    command_class = ClockCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
