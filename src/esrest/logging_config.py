"""
Logging setup for applications using the client.

The library only emits events through structlog; nothing is configured on
import. Call setup_logging() once at application start.
"""

from __future__ import annotations

import logging
import sys

import structlog

from esrest.settings import settings


def setup_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """
    Route structlog through stdlib logging on stderr.

    Args:
        level: Log level name. Defaults to settings.log_level.
        json_format: JSON lines if True, console rendering otherwise.
            Defaults to settings.log_json.
    """
    level = level or settings.log_level
    json_format = settings.log_json if json_format is None else json_format
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    processors: list = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
