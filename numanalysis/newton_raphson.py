"""Newton-Raphson root finding with a finite-difference derivative."""

from __future__ import annotations

from typing import Callable

_STEP = 1e-3
_DERIVATIVE_EPS = 1e-9
_MIN_TOLERANCE = 1e-65
_ZERO_SNAP = 1e-7


class NewtonRaphsonError(ValueError):
    """Raised for invalid input or a failed iteration."""


class DerivativeZeroError(NewtonRaphsonError):
    """Raised when the estimated derivative vanishes."""


class DerivativeUnstableError(NewtonRaphsonError):
    """Raised when forward and backward difference quotients disagree."""


class MaxIterationsError(NewtonRaphsonError):
    """Raised when the iteration limit is reached without convergence."""


def _derivative(f: Callable[[float], float], x0: float) -> float:
    x1 = x0 + _STEP
    y1 = f(x1)
    y0 = f(x0)
    forward = (y1 - y0) / (x1 - x0)
    backward = (y0 - y1) / (x0 - x1)
    if abs(forward) < _DERIVATIVE_EPS or abs(backward) < _DERIVATIVE_EPS:
        raise DerivativeZeroError(f"derivative vanishes near x = {x0!r}")
    if abs(forward - backward) > _DERIVATIVE_EPS:
        raise DerivativeUnstableError(f"derivative is unstable near x = {x0!r}")
    return (forward + backward) / 2.0


class NewtonRaphsonSolver:
    """Solve ``f(x) = 0`` from a starting guess ``x0``."""

    def __init__(
        self,
        f: Callable[[float], float],
        x0: float,
        tol: float,
        max_iter: int,
        name: str,
    ) -> None:
        if not callable(f):
            raise NewtonRaphsonError("f must be callable")
        if tol <= _MIN_TOLERANCE:
            raise NewtonRaphsonError(f"tolerance {tol!r} is too small")
        if max_iter <= 0:
            raise NewtonRaphsonError("max_iter must be positive")
        if name is None:
            raise NewtonRaphsonError("name is required")
        self.f = f
        self.x0 = float(x0)
        self.tol = float(tol)
        self.max_iter = int(max_iter)
        self.name = name

    def solve(self) -> float:
        """Iterate from ``x0`` and return the root; roots near zero snap to 0."""
        f = self.f
        x0 = self.x0
        for _ in range(self.max_iter):
            slope = _derivative(f, x0)
            x1 = x0 - f(x0) / slope
            if x1 == 0.0:
                raise NewtonRaphsonError("iterate landed exactly on zero")
            if abs(x1 - x0) < self.tol or abs(f(x1)) < self.tol:
                return 0.0 if abs(x1) < _ZERO_SNAP else x1
            x0 = x1
        raise MaxIterationsError(
            f"no convergence for {self.name} after {self.max_iter} iterations"
        )