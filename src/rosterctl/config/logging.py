"""structlog configuration for rosterctl.

stdout carries the interactive protocol and nothing else, so every log
record goes to stderr (or the stream passed in).  Only the ``rosterctl``
logger tree is opened up by ``--verbose``; it logs each applied command
and the end of the shell session at DEBUG.

Two renderers:
- Human (default): console output, colored when the stream is a TTY
- JSON (--log-json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Safe to call repeatedly: the root handler is replaced, not stacked.

    Args:
        verbose: Open the ``rosterctl`` loggers at DEBUG. Otherwise WARNING.
        log_json: Use the JSON renderer instead of the console renderer.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    stream = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("rosterctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
