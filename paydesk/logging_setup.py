"""structlog configuration for paydesk.

Two output modes:
- Console (default): colored key/value lines to stderr when attached to a TTY
- JSON (``LOG_JSON=true``): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    level: str = "INFO",
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route records through stdlib logging.

    Args:
        level: Level name for the ``paydesk`` logger (``"DEBUG"``, ``"INFO"``...).
        log_json: Use the JSON renderer instead of the console renderer.
    """
    paydesk_level = logging.getLevelName(level.strip().upper())
    if not isinstance(paydesk_level, int):
        paydesk_level = logging.INFO

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
        shared_processors.append(structlog.processors.format_exc_info)
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

    logging.getLogger("paydesk").setLevel(paydesk_level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
