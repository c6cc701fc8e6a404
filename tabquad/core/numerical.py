# tabquad/core/numerical.py
"""Composite quadrature rules over tabulated data"""
from typing import Callable, Dict, Sequence, Tuple
import math
import numpy as np

from .validation import (
    InputError,
    check_same_length,
    check_odd_count,
    check_newton_count,
)

ArrayLike = Sequence[float]


def _as_arrays(points: ArrayLike, values: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """Coerce both sequences to float arrays of equal length"""
    p = np.asarray(points, dtype=float)
    v = np.asarray(values, dtype=float)
    if p.ndim != 1 or v.ndim != 1:
        raise InputError("points and values must be one-dimensional")
    check_same_length("points", p, "values", v)
    return p, v


def left_rectangle(points: ArrayLike, values: ArrayLike) -> float:
    """
    Left rectangle rule.

    Σ f(x_i) (x_{i+1} - x_i),  i = 0..N-2
    """
    p, v = _as_arrays(points, values)
    return float(np.sum(v[:-1] * np.diff(p)))


def right_rectangle(points: ArrayLike, values: ArrayLike) -> float:
    """
    Right rectangle rule.

    Σ f(x_i) (x_i - x_{i-1}),  i = 1..N-1
    """
    p, v = _as_arrays(points, values)
    return float(np.sum(v[1:] * np.diff(p)))


def middle_rectangle(points: ArrayLike, values: ArrayLike) -> float:
    """
    Middle rectangle rule, with the midpoint value taken as the mean of the
    two neighbouring samples.

    Σ ((f(x_i) + f(x_{i+1})) / 2) (x_{i+1} - x_i),  i = 0..N-2
    """
    p, v = _as_arrays(points, values)
    mid_values = 0.5 * (v[:-1] + v[1:])
    return float(np.sum(mid_values * np.diff(p)))


def trapezoidal(points: ArrayLike, values: ArrayLike) -> float:
    """
    Composite trapezoid rule on an arbitrary partition.

    Σ 0.5 (f(x_i) + f(x_{i-1})) (x_i - x_{i-1}),  i = 1..N-1
    """
    p, v = _as_arrays(points, values)
    return float(np.sum(0.5 * (v[1:] + v[:-1]) * np.diff(p)))


def simpson(points: ArrayLike, values: ArrayLike) -> float:
    """
    Composite Simpson's rule.

    Assumes a uniform partition; the step is taken from the end points:
    h = (x_{N-1} - x_0) / (N - 1)
    S = h/3 [f_0 + 4 f_1 + 2 f_2 + 4 f_3 + ... + 4 f_{N-2} + f_{N-1}]

    Raises:
        ParityError: if the number of points is even
    """
    p, v = _as_arrays(points, values)
    n = check_odd_count(len(v))
    if n == 1:
        # Zero-width interval
        return 0.0

    h = (p[-1] - p[0]) / (n - 1)
    coef = np.where(np.arange(1, n - 1) % 2 == 1, 4.0, 2.0)
    total = v[0] + v[-1] + np.dot(coef, v[1:-1])
    return float(total * h / 3)


def newton(points: ArrayLike, values: ArrayLike) -> float:
    """
    Newton's 3/8 rule applied to consecutive groups of three intervals.

    For each group starting at i = 0, 3, 6, ...:
    h = (x_{i+3} - x_i) / 3
    I_i = 3h/8 [f_i + 3 f_{i+1} + 3 f_{i+2} + f_{i+3}]

    Raises:
        InputError: unless N >= 4 and (N - 1) % 3 == 0
    """
    p, v = _as_arrays(points, values)
    n = check_newton_count(len(v))

    i = np.arange(0, n - 3, 3)
    h = (p[i + 3] - p[i]) / 3
    groups = v[i] + 3 * v[i + 1] + 3 * v[i + 2] + v[i + 3]
    return float(np.sum(groups * 3 * h / 8))


def round_half_away(x: float, digits: int = 1) -> float:
    """Round half away from zero, as C's round(x * 10^d) / 10^d"""
    if not math.isfinite(x):
        return x
    scale = 10 ** digits
    return math.copysign(math.floor(abs(x) * scale + 0.5), x) / scale


# Console report order
METHODS: Dict[str, Callable[[ArrayLike, ArrayLike], float]] = {
    "left_rectangle": left_rectangle,
    "middle_rectangle": middle_rectangle,
    "right_rectangle": right_rectangle,
    "trapezoidal": trapezoidal,
    "simpson": simpson,
    "newton": newton,
}

METHOD_LABELS: Dict[str, str] = {
    "left_rectangle": "lev priam=",
    "middle_rectangle": "sr priam=",
    "right_rectangle": "prav priam=",
    "trapezoidal": "trapeciy=",
    "simpson": "Simpson=",
    "newton": "Newton",
}
