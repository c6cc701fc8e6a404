# tabquad/core/validation.py
"""Unified validation for all quadrature rules"""
from typing import Union, Sequence
import logging

logger = logging.getLogger(__name__)


class QuadratureError(Exception):
    """Base exception for all tabulated quadrature calculations"""
    pass


class InputError(QuadratureError, ValueError):
    """Invalid input parameters"""
    pass


class ParityError(QuadratureError):
    """Point count has the wrong parity for the requested rule"""
    pass


class PointIndexError(QuadratureError, IndexError):
    """Index outside the tabulated points"""
    pass


def check_same_length(
    name_a: str, a: Sequence[float], name_b: str, b: Sequence[float]
) -> int:
    """Check two sequences have the same length"""
    if len(a) != len(b):
        raise InputError(
            f"Size mismatch between {name_a} ({len(a)}) and {name_b} ({len(b)})"
        )
    return len(a)


def check_non_negative(name: str, value: Union[float, int]) -> float:
    """Check value is non-negative"""
    v = float(value)
    if v < 0:
        raise InputError(f"{name} must be >= 0, got {v}")
    return v


def check_index(index: int, n: int) -> int:
    """Check 0 <= index < n"""
    if index < 0 or index >= n:
        raise PointIndexError(f"Index {index} out of range for {n} points")
    return index


def check_odd_count(n: int) -> int:
    """Check point count is odd (even number of intervals)"""
    if n % 2 == 0:
        logger.debug("Simpson's rule rejected %d points", n)
        raise ParityError(
            f"The number of points must be odd for Simpson's rule, got {n}"
        )
    return n


def check_newton_count(n: int) -> int:
    """Check point count fits Newton's 3/8 rule: n >= 4 and (n - 1) % 3 == 0"""
    if n < 4 or (n - 1) % 3 != 0:
        logger.debug("Newton's 3/8 rule rejected %d points", n)
        raise InputError(
            "Invalid number of points for Newton's 3/8 rule. It must satisfy "
            f"(number_of_points - 1) % 3 == 0 with at least 4 points, got {n}"
        )
    return n
