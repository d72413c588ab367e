"""
Logger factory.

Every module gets its logger through ``setup_logger(__name__)`` so that the
format and level stay consistent across the application.
"""

import logging
import sys

from lifecore.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a configured logger for the given module name."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(get_settings().LOG_LEVEL)
    # Let pytest's caplog and any root handlers see the records too
    logger.propagate = True
    return logger
