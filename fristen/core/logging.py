"""Logging configuration for the deadline calculator."""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from fristen.config import get_settings


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structlog logger. Output follows whatever configuration the host app set."""
    return structlog.get_logger(name)


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """Configure logging for the library.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR"). Defaults to
            ``Settings.LOG_LEVEL``.
        json_output: True for JSON output (production), False for console.
            Defaults to ``Settings.LOG_JSON``.
    """
    settings = get_settings()
    level = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.LOG_JSON

    logging.basicConfig(format="%(message)s", level=getattr(logging, level))
    _configure_structlog(level, json_output)


def _configure_structlog(level: str, json_output: bool) -> None:
    shared_processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
