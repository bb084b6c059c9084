"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Provide consistent logging for the settings loader
  - Configure loggers with standardized formatting
inputs:
  - Logger names
outputs:
  - Configured logger instances
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""

"""Shared logging utilities for consistent logging across the package."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with standardized formatting.

    A stream handler is attached the first time a given logger is requested;
    later calls return the same logger untouched unless ``level`` is given.

    Args:
        name: Logger name (typically ``__name__``).
        level: Optional logging level (default: INFO).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

        if level is None and logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)

    if level is not None:
        logger.setLevel(level)

    return logger
