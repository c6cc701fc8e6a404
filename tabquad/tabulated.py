"""Tabulated function and its quadrature rules"""

import logging
from typing import Sequence

import numpy as np

from tabquad.core import numerical
from tabquad.core.validation import InputError, check_same_length, check_index

logger = logging.getLogger(__name__)


def format_number(x: float) -> str:
    """Format like a default C++ output stream (six significant digits)"""
    return "%g" % x


def _owned_array(name: str, seq: Sequence[float]) -> np.ndarray:
    arr = np.array(seq, dtype=float, copy=True)
    if arr.ndim != 1:
        raise InputError(f"{name} must be one-dimensional, got shape {arr.shape}")
    arr.flags.writeable = False
    return arr


class TabulatedFunction:
    """
    A function known only at discrete points.

    Holds N argument points and N function values. Both sequences are copied
    on construction and stored read-only, so the instance never aliases the
    caller's storage and cannot be resized.

    Points are assumed strictly increasing; this is not checked. A
    non-increasing table gives meaningless (but finite) results.
    """

    def __init__(self, points: Sequence[float] = (), values: Sequence[float] = ()):
        p = _owned_array("points", points)
        v = _owned_array("values", values)
        check_same_length("argument values", p, "function values", v)
        self._points = p
        self._values = v
        logger.debug("Tabulated function with %d points", len(v))

    @property
    def points(self) -> np.ndarray:
        """Argument points (read-only)"""
        return self._points

    @property
    def values(self) -> np.ndarray:
        """Function values (read-only)"""
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def value_at(self, index: int) -> float:
        """Function value at index; negative indices are not wrapped"""
        check_index(index, len(self))
        return float(self._values[index])

    __getitem__ = value_at

    def copy(self) -> "TabulatedFunction":
        return TabulatedFunction(self._points, self._values)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, TabulatedFunction):
            return NotImplemented
        return (np.array_equal(self._points, other._points)
                and np.array_equal(self._values, other._values))

    __hash__ = None

    def render(self) -> str:
        """
        Two-line text form:

            input= argument 0  1  2
            function 0 1 4
        """
        args = "  ".join(format_number(x) for x in self._points)
        funcs = " ".join(format_number(y) for y in self._values)
        return f"input= argument {args}\n" f"function {funcs}\n"

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"TabulatedFunction(n={len(self)})"

    # Quadrature rules

    def left_rectangle(self) -> float:
        return numerical.left_rectangle(self._points, self._values)

    def middle_rectangle(self) -> float:
        return numerical.middle_rectangle(self._points, self._values)

    def right_rectangle(self) -> float:
        return numerical.right_rectangle(self._points, self._values)

    def trapezoidal(self) -> float:
        return numerical.trapezoidal(self._points, self._values)

    def simpson(self) -> float:
        """Simpson's rule; raises ParityError for an even number of points"""
        return numerical.simpson(self._points, self._values)

    def newton(self) -> float:
        """Newton's 3/8 rule; requires N >= 4 and (N - 1) % 3 == 0"""
        return numerical.newton(self._points, self._values)

    def integrate(self, method: str) -> float:
        """Run a rule by name (see numerical.METHODS)"""
        if method not in numerical.METHODS:
            raise InputError(
                f"Unknown method {method!r}, expected one of {list(numerical.METHODS)}"
            )
        return getattr(self, method)()
