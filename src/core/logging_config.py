"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Events are routed through stdlib logging so handlers and levels apply.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_cli_logging(level: int = logging.INFO) -> None:
    """Send structured events to stderr for command-line runs.

    Args:
        level: Minimum stdlib log level to emit.
    """
    logging.basicConfig(level=level, format="%(message)s")
