"""Fixed-point (successive approximation) iteration."""

from __future__ import annotations

import math
from typing import Callable

_STEP = 1e-3
_MIN_TOLERANCE = 1e-65
_ZERO_SNAP = 1e-7


class FixedPointError(ValueError):
    """Raised for invalid input or a failed iteration."""


class NotContractiveError(FixedPointError):
    """Raised when the map is not a contraction at a visited point."""


class FixedPointMaxIterationsError(FixedPointError):
    """Raised when the iteration limit is reached without convergence."""


def _evaluate(g: Callable[[float], float], x: float) -> float:
    # Domain and range errors from math functions read as NaN.
    try:
        return g(x)
    except (ValueError, OverflowError):
        return math.nan


def is_contraction(g: Callable[[float], float], x0: float) -> bool:
    """Report whether ``|g'(x0)| < 1``, using a finite difference of step 1e-3."""
    x1 = x0 + _STEP
    y0 = _evaluate(g, x0)
    y1 = _evaluate(g, x1)
    forward = (y1 - y0) / (x1 - x0)
    backward = (y0 - y1) / (x0 - x1)
    slope = (forward + backward) / 2.0
    return abs(slope) < 1


class FixedPointSolver:
    """Find ``x = g(x)`` by iterating ``g`` from ``x0``."""

    def __init__(
        self,
        g: Callable[[float], float],
        x0: float,
        tol: float,
        max_iter: int,
        name: str,
    ) -> None:
        if not callable(g):
            raise FixedPointError("g must be callable")
        if tol <= _MIN_TOLERANCE:
            raise FixedPointError(f"tolerance {tol!r} is too small")
        if max_iter <= 0:
            raise FixedPointError("max_iter must be positive")
        if name is None:
            raise FixedPointError("name is required")
        if not is_contraction(g, x0):
            raise NotContractiveError(f"{name} is not a contraction at {x0!r}")
        self.g = g
        self.x0 = float(x0)
        self.tol = float(tol)
        self.max_iter = int(max_iter)
        self.name = name

    def solve(self) -> float:
        """Iterate until successive values agree; fixed points near zero snap to 0."""
        g = self.g
        x0 = self.x0
        for _ in range(self.max_iter):
            x1 = _evaluate(g, x0)
            contractive = is_contraction(g, x1)
            if x1 == 0.0:
                raise FixedPointError("iterate landed exactly on zero")
            if not contractive:
                raise NotContractiveError(
                    f"{self.name} is not a contraction at {x1!r}"
                )
            if abs(x1 - x0) < self.tol:
                return 0.0 if abs(x1) < _ZERO_SNAP else x1
            x0 = x1
        raise FixedPointMaxIterationsError(
            f"no convergence for {self.name} after {self.max_iter} iterations"
        )