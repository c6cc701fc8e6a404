"""Logging configuration helpers for tabquad.

The library is silent by default (a NullHandler sits on the ``tabquad``
logger). Enable output explicitly:

    import tabquad
    tabquad.enable_console_logging(level="DEBUG")

or set ``TABQUAD_LOGGING=DEBUG`` and call ``tabquad.configure_from_env()``.
"""

import logging
import os
from typing import Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "tabquad"
ENV_LEVEL = "TABQUAD_LOGGING"


def _get_level(level: Union[str, int]) -> int:
    """Convert a level name or int to a logging level constant"""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close every handler except NullHandler"""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: Union[str, int] = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Enable console (stderr) logging for tabquad.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def configure_from_env() -> None:
    """Enable console logging at the level named by TABQUAD_LOGGING, if set."""
    level = os.environ.get(ENV_LEVEL, "").upper()
    if not level:
        return
    enable_console_logging(level=level)


def set_level(level: Union[str, int]) -> None:
    """Set the log level of the tabquad logger"""
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the tabquad logger"""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
