# Copyright 2026 rest2ts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging configuration for the rest2ts package.

Modules log through ``logging.getLogger(__name__)``; :func:`setup_logging`
attaches a single console handler to the ``rest2ts`` logger.
"""

from __future__ import annotations

import logging
import os

# ###############
# Public Interface
# ###############

LOGGER_NAME = "rest2ts"
LOG_LEVEL_ENV = "REST2TS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``rest2ts`` logger and return it.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            the ``REST2TS_LOG_LEVEL`` environment variable, then INFO. Unknown
            names fall back to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Replace handlers from an earlier call instead of stacking them.
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
