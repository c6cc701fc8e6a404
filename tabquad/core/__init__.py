# tabquad/core/__init__.py
"""Core utilities shared by the tabulated quadrature rules"""

from .validation import (
    QuadratureError,
    InputError,
    ParityError,
    PointIndexError,
    check_same_length,
    check_non_negative,
    check_index,
    check_odd_count,
    check_newton_count,
)

from .numerical import (
    left_rectangle,
    middle_rectangle,
    right_rectangle,
    trapezoidal,
    simpson,
    newton,
    round_half_away,
    METHODS,
    METHOD_LABELS,
)

from .base import (
    SolverBase,
    SpecificationBase,
)

__all__ = [
    # Validation
    'QuadratureError', 'InputError', 'ParityError', 'PointIndexError',
    'check_same_length', 'check_non_negative', 'check_index',
    'check_odd_count', 'check_newton_count',

    # Numerical
    'left_rectangle', 'middle_rectangle', 'right_rectangle',
    'trapezoidal', 'simpson', 'newton', 'round_half_away',
    'METHODS', 'METHOD_LABELS',

    # Base Classes
    'SolverBase', 'SpecificationBase',
]
