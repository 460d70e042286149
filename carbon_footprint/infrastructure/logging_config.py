"""structlog configuration."""

import logging
from typing import Any, Optional

import structlog

from .config import get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog processors and renderer.

    Args:
        level: Minimum level name (defaults to LOG_LEVEL)
        log_format: "console" or "json" (defaults to LOG_FORMAT)
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: '{level_name}'")

    renderer: Any
    if (log_format or get_log_format()) == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
