"""structlog setup for berlinclock.

Everything is written to stderr, so stdout only ever carries clock output
(lamps, ``--quiet`` times or ``--json`` results). Records from stdlib
``logging.getLogger(__name__)`` loggers go through the same processors and
carry the ``command`` bound by :func:`bind_command`.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "berlinclock"


def _processors(log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        # JSON lines need the traceback as a string field.
        processors.append(structlog.processors.format_exc_info)
    return processors


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to one stderr handler.

    Safe to call once per CLI invocation: the root handler is replaced and
    any command bound by a previous invocation is cleared.

    Args:
        verbose: DEBUG for the ``berlinclock`` loggers, otherwise WARNING.
        log_json: One JSON object per line instead of the console renderer.
    """
    shared = _processors(log_json)
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.contextvars.clear_contextvars()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_command(command_path: str) -> None:
    """Tag every following log record with the running command."""
    structlog.contextvars.bind_contextvars(command=command_path)
