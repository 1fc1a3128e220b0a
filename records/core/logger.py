# /academic-records/records/core/logger.py

"""
Logging for the records manager. Store mutations, login attempts and
snapshot load/save outcomes all go through loggers built here, at the level
set by LOG_LEVEL.
"""

import logging
import sys

from .config import settings

LOG_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Logger for `name`, writing to stdout so it interleaves with the menu output."""
    logger = logging.getLogger(name)

    # One handler per logger, even when a module is imported twice
    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
