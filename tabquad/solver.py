"""Run a selection of quadrature rules over one table"""

from dataclasses import dataclass
from typing import Dict, Any, Iterator, Sequence, Tuple
import logging

from tabquad.core.base import SolverBase, SpecificationBase
from tabquad.core.numerical import METHODS, round_half_away
from tabquad.core.validation import InputError, check_non_negative
from tabquad.tabulated import TabulatedFunction

logger = logging.getLogger(__name__)

DEFAULT_METHODS = tuple(METHODS)


@dataclass
class QuadratureSpec(SpecificationBase):
    """Specification for a quadrature run"""
    points: Sequence[float]
    values: Sequence[float]
    methods: Sequence[str] = DEFAULT_METHODS  # Rule names, in report order
    digits: int = 1                           # Rounding used by summary()

    def validate(self) -> None:
        unknown = [m for m in self.methods if m not in METHODS]
        if unknown:
            raise InputError(f"Unknown methods {unknown}, expected any of {list(METHODS)}")
        check_non_negative("digits", self.digits)


class QuadratureSolver(SolverBase):
    """
    Evaluates the requested rules over a TabulatedFunction.

    A rule whose point-count precondition fails raises its error out of
    iter_results()/solve(); nothing is skipped silently.
    """

    def __init__(self, spec: QuadratureSpec):
        self.spec = spec
        self.validate()
        self.function = TabulatedFunction(spec.points, spec.values)

    def validate(self) -> None:
        self.spec.validate()

    def iter_results(self) -> Iterator[Tuple[str, float]]:
        """Yield (method, value) pairs lazily, in spec order"""
        for method in self.spec.methods:
            value = self.function.integrate(method)
            logger.debug("%s = %r", method, value)
            yield method, value

    def solve(self) -> Dict[str, Any]:
        """Evaluate every requested rule"""
        return {
            "inputs": {
                "n": len(self.function),
                "points": self.function.points.tolist(),
                "values": self.function.values.tolist(),
                "methods": list(self.spec.methods),
            },
            "outputs": dict(self.iter_results()),
        }

    def summary(self) -> Dict[str, Any]:
        """solve() with outputs rounded half away from zero"""
        result = self.solve()
        result["outputs"] = {
            k: round_half_away(v, self.spec.digits)
            for k, v in result["outputs"].items()
        }
        return result
