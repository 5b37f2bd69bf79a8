"""structlog configuration shared by every entry point."""

import logging

import structlog

from config import settings


def configure_logging(level: str | None = None) -> None:
    """Install the JSON processor chain and the minimum log level.

    Runs when the tools package is imported; call again to change the level.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to settings.log_level.
    """
    level_name = (level or settings.log_level).upper()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
    )
