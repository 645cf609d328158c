"""Log output for the ``rsm`` command line.

Handlers emit structlog events (``order_created``, ``part_restocked``...).
They are rendered on stderr so stdout stays reserved for the tables and
confirmations the commands print. ``--log-json`` switches the renderer to
one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _resolve_level(verbose: bool, level: str) -> int:
    if verbose:
        return logging.DEBUG
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def _stderr_handler(log_json: bool) -> logging.Handler:
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    level: str = "WARNING",
) -> None:
    """Route structlog events through stdlib logging to stderr.

    Args:
        verbose: Show everything the ``rsm`` loggers emit, down to DEBUG.
        log_json: Render JSON lines instead of the console format.
        level: Threshold for the ``rsm`` loggers when not verbose
            (``RSM_LOG_LEVEL``). Unknown names fall back to WARNING.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # The CLI runner reconfigures between invocations
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(log_json))
    # Third-party libraries stay at WARNING whatever the rsm level is
    root.setLevel(logging.WARNING)

    logging.getLogger("rsm").setLevel(_resolve_level(verbose, level))
