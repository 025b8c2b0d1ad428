"""Logging setup for folioctl: structlog rendering over stdlib loggers.

Library modules log through ``logging.getLogger(__name__)``; this module
only decides how those records look and which of them surface.

By default the ``folioctl`` tree logs at WARNING, so a normal run shows
only problems such as a detail page whose domain id is not in the catalog.
``--verbose`` opens it to DEBUG, which adds debounce reschedules, dropped
stale searches, state loaded from a listing URL, and each page written by
``folioctl build``. Third-party loggers (Jinja2, Rich) stay at WARNING
either way. Everything goes to stderr, leaving stdout for command output;
``--log-json`` switches the renderer to one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install the stderr handler and set the folioctl log level.

    Args:
        verbose: DEBUG for ``folioctl.*``; WARNING otherwise.
        log_json: Render JSON lines instead of the console format. Console
            output is colored only when stderr is a terminal.
    """
    folio_level = logging.DEBUG if verbose else logging.WARNING

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
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("folioctl").setLevel(folio_level)
