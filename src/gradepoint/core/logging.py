"""Logging configuration for the calculator."""

import logging
import sys

from gradepoint.config.settings import settings


def setup_logging(debug: bool = settings.debug) -> logging.Logger:
    """Configure and return the package logger."""
    logger = logging.getLogger("gradepoint")
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if debug:
        formatter = logging.Formatter(
            "%(levelname)s [%(asctime)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
