"""Logging setup for the point_struct package logger."""

import logging
import sys
from typing import TextIO

from point_struct.config import Settings
from point_struct.config import settings as default_settings

PACKAGE_LOGGER = "point_struct"


def setup_logging(settings: Settings | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Configure the package logger from settings.

    Only the ``point_struct`` logger is touched; the root logger is left to
    the application. Calling this again replaces the handler installed by a
    previous call.
    """
    settings = settings or default_settings
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(settings.log_format, datefmt=settings.log_datefmt))
    handler.set_name(PACKAGE_LOGGER)
    logger.addHandler(handler)
    return logger
