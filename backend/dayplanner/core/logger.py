"""
Logging setup.

Every module gets its logger through ``setup_logger(__name__)`` so that the
format and level stay uniform across the application.
"""

import logging
import sys

from dayplanner.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a named logger with a single stream handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(get_settings().LOG_LEVEL.upper())
        logger.propagate = False
    return logger


logger = setup_logger("dayplanner")
