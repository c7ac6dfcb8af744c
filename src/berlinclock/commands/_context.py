"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds services on demand and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from berlinclock.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from berlinclock.config.settings import ClockSettings
    from berlinclock.infrastructure.store import StateStore
    from berlinclock.services.clock import ClockService
    from berlinclock.services.editor import EditorService
    from berlinclock.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The state store is created lazily so ``--help`` and ``--version``
    never touch the filesystem.
    """

    def __init__(self, settings: ClockSettings) -> None:
        self.settings = settings
        self._store: StateStore | None = None

        from berlinclock.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> StateStore:
        """The state store (created on first access)."""
        if self._store is None:
            from berlinclock.infrastructure.store import StateStore

            self._store = StateStore(self.settings.state_path)
        return self._store

    def clock_service(self) -> ClockService:
        from berlinclock.services.clock import ClockService

        return ClockService(self.store, defaults=self.settings.convert)

    def editor_service(self) -> EditorService:
        from berlinclock.services.editor import EditorService

        return EditorService(self.store, history_limit=self.settings.edit.history_limit)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
