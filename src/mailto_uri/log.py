"""structlog setup driven by Settings."""

from __future__ import annotations

import logging

import structlog

from mailto_uri.config import Settings, get_settings

logger = structlog.get_logger()


def configure_logging(settings: Settings | None = None) -> str:
    """Configure structlog with a level filter taken from settings.

    Args:
        settings: Settings to use. If None, uses the cached settings.

    Returns:
        The name of the level that was applied.
    """
    settings = settings or get_settings()
    level_name = "DEBUG" if settings.debug else settings.log_level.upper()

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger.info("logging_configured", level=level_name)
    return level_name
