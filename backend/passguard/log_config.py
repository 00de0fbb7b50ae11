"""Structured logging setup shared by the API and the CLI."""

import logging
import sys
from typing import Optional, TextIO

import structlog


def configure_logging(debug: bool = False, log_level: str = "info", stream: Optional[TextIO] = None) -> None:
    """Configure structlog: console output in debug, JSON otherwise."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(stream or sys.stdout),
        cache_logger_on_first_use=False,
    )
