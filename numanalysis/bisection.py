"""Root finding by interval bisection."""

from __future__ import annotations

from typing import Callable

_MIN_TOLERANCE = 1e-15


class BisectionError(ValueError):
    """Raised for an invalid interval, tolerance or bracket."""


class BisectionRange:
    """An interval [a, b] around a sign change of ``f``, narrowed by ``solve``."""

    def __init__(
        self,
        f: Callable[[float], float],
        a: float,
        b: float,
        tol: float,
        name: str | None = None,
    ) -> None:
        if not callable(f):
            raise BisectionError("f must be callable")
        if tol <= _MIN_TOLERANCE:
            raise BisectionError(f"tolerance {tol!r} is too small")
        if a >= b:
            raise BisectionError(f"interval [{a!r}, {b!r}] is empty")
        self.f = f
        self.a = float(a)
        self.b = float(b)
        self.tol = float(tol)
        self.max_iter = 0
        self.name = name

    def _iterations_needed(self) -> int:
        width = abs(self.b - self.a)
        count = 0
        power = 1.0
        while width / power > self.tol:
            power *= 2
            count += 1
        return count

    def solve(self) -> float:
        """Narrow the interval around the root and return its midpoint."""
        self.max_iter = self._iterations_needed()
        if self.max_iter == 0:
            raise BisectionError("interval is already within tolerance")

        f = self.f
        product = f(self.a) * f(self.b)
        if product > 0:
            raise BisectionError(
                f"f has the same sign at {self.a!r} and {self.b!r}"
            )
        if product < 0:
            for _ in range(self.max_iter):
                mid = (self.a + self.b) / 2
                if f(self.a) * f(mid) < 0:
                    self.b = mid
                elif f(self.b) * f(mid) < 0:
                    self.a = mid

        print(
            f"[left]a={self.a:.15f} [right]b={self.b:.15f} "
            f"[iterations]max_iter={self.max_iter} [tolerance]epsilon={self.tol:e} "
            f"[equation]f(x)={self.name} "
        )
        return self.midpoint()

    def midpoint(self) -> float:
        """Return the centre of the current interval."""
        return (self.a + self.b) / 2