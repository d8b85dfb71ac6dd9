"""
Logging setup shared by the whole package.
"""

from __future__ import annotations

import logging

from . import config

# Logger name used by every module of the package
LOGGER_NAME = "dpll_sat"


def get_logger() -> logging.Logger:
    """
    Return the package logger.

    A console handler is installed the first time this is called, unless
    the application configured one already.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)

    return logger


def set_verbosity(verbose: int) -> None:
    """Map a count of ``-v`` flags onto the package logger level."""
    logger = get_logger()
    if verbose >= 2:
        logger.setLevel(logging.DEBUG)
    elif verbose == 1:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(config.LOG_LEVEL)
