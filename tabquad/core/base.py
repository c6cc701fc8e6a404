# tabquad/core/base.py
"""Base classes for solvers and their specifications"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Dict, Any


class SolverBase(ABC):
    """Base class for all solvers"""

    @abstractmethod
    def solve(self) -> Dict[str, Any]:
        """Main solving method"""
        pass

    def validate(self) -> None:
        """Validate inputs before solving"""
        pass

    def summary(self) -> Dict[str, Any]:
        """Return summary of results"""
        return self.solve()


@dataclass
class SpecificationBase:
    """Base class for all specifications"""

    def validate(self) -> None:
        """Validate specification parameters"""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if not f.name.startswith('_')}
