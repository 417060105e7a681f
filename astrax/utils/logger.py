"""Logging configuration for the AstraX application."""

import logging
import sys
from typing import Optional, Union

_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _configured_level() -> int:
    """Level from ASTRAX_LOG_LEVEL; unknown names fall back to INFO."""
    from astrax.config import LOG_LEVEL

    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a logger writing to stdout. Streamlit re-executes the page script on
    every rerun, so the handler is attached only the first time.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.setLevel(_configured_level())
    if level is not None:
        logger.setLevel(level)
    return logger
