"""Logging for **crawl_cache**.

The package logs to the ``"CrawlCache"`` logger, which is silent until the
application configures logging itself or calls :func:`configure`::

    from crawl_cache.logger import configure
    configure("DEBUG")   # cache hits/misses and every GET on stdout
"""
from __future__ import annotations

import logging
import sys
from typing import Final, Union

_LOGGER_NAME: Final[str] = "CrawlCache"
_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger: logging.Logger = logging.getLogger(_LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure(level: Union[int, str] = "INFO", log_format: str = _DEFAULT_FORMAT) -> logging.Logger:
    """Send package records at *level* and above to stdout, replacing earlier console handlers."""
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(handler)
    return logger


__all__ = ["logger", "configure"]
