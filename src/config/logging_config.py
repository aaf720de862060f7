"""Logging setup for the application."""

import logging

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure the root logger from settings.

    Called once at startup. SQLAlchemy engine logging is left to the
    ``database_echo`` setting.
    """
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug(f"Logging configured at level {settings.log_level}")
