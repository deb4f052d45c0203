"""structlog configuration shared by the scrapers and the manual runner."""

import logging

import structlog

from typing import Optional

from pepperdeals.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog to render key/value events on the console.

    Args:
        level: Log level name (e.g. "DEBUG"); defaults to settings.LOG_LEVEL
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    if settings.DEBUG:
        level_name = "DEBUG"
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
