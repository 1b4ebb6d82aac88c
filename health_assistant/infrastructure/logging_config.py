"""structlog setup."""

import logging
from typing import Optional

import structlog

from .config import get_log_level


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog with ISO timestamps and console rendering.

    Args:
        level: Level name (DEBUG, INFO, ...), defaults to LOG_LEVEL
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
