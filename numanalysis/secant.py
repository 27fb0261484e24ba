"""Secant-method root finding."""

from __future__ import annotations

from typing import Callable

_SLOPE_EPS = 1e-9
_MIN_TOLERANCE = 1e-65
_ZERO_SNAP = 2e-8


class SecantError(ValueError):
    """Raised for invalid input or a failed iteration."""


class SecantDivisionByZeroError(SecantError):
    """Raised when the secant slope or the step between guesses vanishes."""


class SecantMaxIterationsError(SecantError):
    """Raised when the iteration limit is reached without convergence."""


def _slope(f: Callable[[float], float], x0: float, x1: float) -> float:
    if abs(x1 - x0) < _SLOPE_EPS:
        raise SecantDivisionByZeroError(
            f"guesses {x0!r} and {x1!r} are too close together"
        )
    y1 = f(x1)
    y0 = f(x0)
    slope = (y1 - y0) / (x1 - x0)
    if abs(slope) < _SLOPE_EPS:
        raise SecantDivisionByZeroError(
            f"secant through {x0!r} and {x1!r} is flat"
        )
    return slope


class SecantSolver:
    """Solve ``f(x) = 0`` from two starting guesses ``x0`` and ``x1``."""

    def __init__(
        self,
        f: Callable[[float], float],
        x0: float,
        x1: float,
        tol: float,
        max_iter: int,
        name: str,
    ) -> None:
        if not callable(f):
            raise SecantError("f must be callable")
        if tol <= _MIN_TOLERANCE:
            raise SecantError(f"tolerance {tol!r} is too small")
        if max_iter <= 0:
            raise SecantError("max_iter must be positive")
        if name is None:
            raise SecantError("name is required")
        self.f = f
        self.x0 = float(x0)
        self.x1 = float(x1)
        self.tol = float(tol)
        self.max_iter = int(max_iter)
        self.name = name

    def solve(self) -> float:
        """Iterate from the two guesses and return the root; roots near zero snap to 0."""
        f = self.f
        x0, x1 = self.x0, self.x1
        for _ in range(self.max_iter):
            slope = _slope(f, x0, x1)
            x2 = x1 - f(x1) / slope
            if x2 == 0.0:
                raise SecantError("iterate landed exactly on zero")
            if abs(x2 - x1) < self.tol or abs(f(x2)) < self.tol:
                return 0.0 if abs(x2) < _ZERO_SNAP else x2
            x0, x1 = x1, x2
        raise SecantMaxIterationsError(
            f"no convergence for {self.name} after {self.max_iter} iterations"
        )