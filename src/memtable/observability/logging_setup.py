"""
memtable logging setup.

The library only emits through ``logging.getLogger(__name__)``; applications
that want console output call ``configure_logging`` once at startup.
"""

import logging
import sys

from memtable.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure root logging from settings and return the package logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger = logging.getLogger("memtable")
    logger.setLevel(settings.log_level.upper())
    return logger
