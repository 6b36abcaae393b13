"""Logging configuration for Folio."""

import logging
import sys
from typing import Optional

import structlog

from folio.config.settings import LoggingConfig


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure stdlib logging and route structlog through it.

    Log events go to stderr so that command output on stdout stays clean.

    Args:
        config: Logging configuration; defaults are used when omitted
    """
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level)

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    logging.getLogger("folio").setLevel(level)

    # Configure specific loggers to be less verbose
    logging.getLogger("MARKDOWN").setLevel(logging.WARNING)

    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger for a component."""
    return structlog.get_logger(name)
