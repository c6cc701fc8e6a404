"""Definite integrals of tabulated functions by classical quadrature rules"""

import logging

from .core import (
    QuadratureError,
    InputError,
    ParityError,
    PointIndexError,
    METHODS,
    METHOD_LABELS,
    round_half_away,
)
from .tabulated import TabulatedFunction, format_number
from .solver import QuadratureSolver, QuadratureSpec
from .driver import SessionSpec, parse_input, run_session
from .logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    set_level,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'TabulatedFunction', 'format_number',
    'QuadratureSolver', 'QuadratureSpec',
    'SessionSpec', 'parse_input', 'run_session',
    'QuadratureError', 'InputError', 'ParityError', 'PointIndexError',
    'METHODS', 'METHOD_LABELS', 'round_half_away',
    'configure_from_env', 'disable_logging', 'enable_console_logging', 'set_level',
]
