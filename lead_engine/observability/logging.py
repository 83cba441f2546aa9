"""Shared logging helper for the lead engine.

Usage example:
    from lead_engine.observability.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Scored %s leads", count)
"""

import logging
import time

from ..config.settings import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a single UTC-stamped stream handler.

    Args:
        name: Logger name (use the module's ``__name__``)

    Returns:
        Logger configured at the level from ``LEAD_ENGINE_LOG_LEVEL``
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    return logger
