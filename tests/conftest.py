"""
Shared pytest fixtures for tabquad tests.
"""

import logging

import pytest

from tabquad import TabulatedFunction
from tabquad.logging_config import LOGGER_NAME


@pytest.fixture
def squares() -> TabulatedFunction:
    """f(x) = x^2 on 0, 1, 2, 3, 4 (N=5, h=1)"""
    return TabulatedFunction([0, 1, 2, 3, 4], [0, 1, 4, 9, 16])


@pytest.fixture
def constant() -> TabulatedFunction:
    """f(x) = 3 on [0, 2] with two points"""
    return TabulatedFunction([0, 2], [3, 3])


@pytest.fixture
def restore_logger():
    """Put the tabquad logger back the way the package left it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
