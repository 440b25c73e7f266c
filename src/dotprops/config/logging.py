"""structlog setup for the dotprops CLI.

The library itself only logs through ``logging.getLogger(__name__)``:
``dotprops.extractor`` warns about skipped lines and ``dotprops.decoder``
reports per-call summaries and unused keys at DEBUG. The CLI routes those
records through structlog, either as console lines or (``--log-json``) as
JSON objects on stderr. Values bound with
``structlog.contextvars.bound_contextvars`` (the commands bind the input
path) are attached to every record.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "dotprops"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler for dotprops log records.

    Args:
        verbose: Show the package's DEBUG records; otherwise WARNING and up.
        log_json: Render JSON lines instead of console lines.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    # Third-party loggers stay at WARNING; only the package opens up.
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
