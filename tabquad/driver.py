"""Console session: read a table, print it and every rule's estimate"""

from dataclasses import dataclass
from typing import List, TextIO, Tuple
import logging
import sys

from tabquad.core.base import SpecificationBase
from tabquad.core.numerical import METHODS, METHOD_LABELS, round_half_away
from tabquad.core.validation import QuadratureError, InputError, check_non_negative
from tabquad.solver import QuadratureSolver, QuadratureSpec
from tabquad.tabulated import format_number

logger = logging.getLogger(__name__)


@dataclass
class SessionSpec(SpecificationBase):
    """Specification for a console session"""
    show_middle: bool = False  # Print the "sr priam=" line
    digits: int = 1

    def validate(self) -> None:
        check_non_negative("digits", self.digits)

    @property
    def methods(self) -> Tuple[str, ...]:
        return tuple(m for m in METHODS
                     if self.show_middle or m != "middle_rectangle")


def _parse_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise InputError(f"Expected a number, got {token!r}") from None


def parse_input(text: str) -> Tuple[List[float], List[float]]:
    """
    Parse ``N x_0 .. x_{N-1} f_0 .. f_{N-1}`` (whitespace separated).

    Tokens past the 2N + 1 consumed are ignored.
    """
    tokens = text.split()
    if not tokens:
        raise InputError("Expected the number of points")
    try:
        n = int(tokens[0])
    except ValueError:
        raise InputError(f"Number of points must be an integer, got {tokens[0]!r}") from None
    if n < 0:
        raise InputError(f"Number of points must be >= 0, got {n}")
    if len(tokens) < 2 * n + 1:
        raise InputError(
            f"Expected {n} argument values and {n} function values, "
            f"got {len(tokens) - 1} numbers"
        )
    points = [_parse_float(t) for t in tokens[1:n + 1]]
    values = [_parse_float(t) for t in tokens[n + 1:2 * n + 1]]
    return points, values


def run_session(
    stdin: TextIO = None,
    stdout: TextIO = None,
    stderr: TextIO = None,
    spec: SessionSpec = None,
) -> int:
    """
    Run one console session.

    Results are written as they are computed, so a failing rule leaves the
    lines before it on stdout. Every library error is reported on stderr and
    the session still returns 0.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    spec = spec or SessionSpec()

    try:
        spec.validate()
        points, values = parse_input(stdin.read())
        solver = QuadratureSolver(
            QuadratureSpec(points, values, methods=spec.methods, digits=spec.digits)
        )
        stdout.write(solver.function.render())
        for method, value in solver.iter_results():
            rounded = round_half_away(value, spec.digits)
            stdout.write(f"{METHOD_LABELS[method]} {format_number(rounded)}\n")
    except MemoryError as e:
        logger.info("Session aborted: out of memory")
        stderr.write(f"Memory allocation error: {e}\n")
    except QuadratureError as e:
        logger.info("Session aborted: %s", e)
        stderr.write(f"Error: {e}\n")
    return 0
