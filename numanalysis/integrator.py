"""Definite integrals via RK4 applied to y' = f(x), y(a) = 0."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Callable, Sequence

Integrand = Callable[[float], float]

_INITIAL_STEPS = 8
_DEFAULT_MAX_ITERATIONS = 20
_DEFAULT_TOL = 1e-9


class IntegratorStatus(enum.IntEnum):
    """Outcome of an adaptive integration."""

    OK = 0
    MAX_STEPS_REACHED = 1


@dataclass(frozen=True)
class AdaptiveConfig:
    """Tolerances and refinement limit for :func:`rk4_adaptive`.

    Non-positive values fall back to the defaults.
    """

    abs_tol: float = _DEFAULT_TOL
    rel_tol: float = _DEFAULT_TOL
    max_iterations: int = _DEFAULT_MAX_ITERATIONS


@dataclass(frozen=True)
class AdaptiveResult:
    """Value of an adaptive integral together with its status."""

    value: float
    status: IntegratorStatus

    @property
    def converged(self) -> bool:
        return self.status is IntegratorStatus.OK


def _rk4_step(f: Integrand, x: float, y: float, h: float) -> float:
    k1 = f(x)
    k2 = f(x + 0.5 * h)
    k3 = k2
    k4 = f(x + h)
    return y + (h / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def rk4_fixed(f: Integrand, a: float, b: float, steps: int) -> float:
    """Integrate ``f`` over [a, b] with ``steps`` equal RK4 steps.

    Returns 0.0 when ``steps`` is not positive.
    """
    if steps <= 0:
        return 0.0
    h = (b - a) / float(steps)
    x = a
    y = 0.0
    for _ in range(steps):
        y = _rk4_step(f, x, y, h)
        x += h
    return y


def rk4_adaptive(
    f: Integrand, a: float, b: float, config: AdaptiveConfig | None = None
) -> AdaptiveResult:
    """Integrate ``f`` over [a, b], doubling the step count until converged.

    The error is estimated by Richardson extrapolation for a fourth-order
    method: ``|I(h/2) - I(h)| / 15``.
    """
    if a == b:
        return AdaptiveResult(0.0, IntegratorStatus.OK)
    config = config or AdaptiveConfig()
    max_iterations = (
        config.max_iterations if config.max_iterations > 0 else _DEFAULT_MAX_ITERATIONS
    )
    abs_tol = config.abs_tol if config.abs_tol > 0.0 else _DEFAULT_TOL
    rel_tol = config.rel_tol if config.rel_tol > 0.0 else _DEFAULT_TOL

    steps = _INITIAL_STEPS
    previous = rk4_fixed(f, a, b, steps)
    for _ in range(max_iterations):
        steps *= 2
        refined = rk4_fixed(f, a, b, steps)
        error_estimate = abs(refined - previous) / 15.0
        if error_estimate <= max(abs_tol, abs(refined) * rel_tol):
            return AdaptiveResult(refined, IntegratorStatus.OK)
        previous = refined
    return AdaptiveResult(previous, IntegratorStatus.MAX_STEPS_REACHED)


def main(argv: Sequence[str] | None = None) -> int:
    """Integrate x**2 over [0, 2] both ways and report the error."""
    parser = argparse.ArgumentParser(
        description="Adaptive RK4 numerical integration example."
    )
    parser.parse_args(argv)

    print("=== Adaptive RK4 numerical integration ===")

    def square(x: float) -> float:
        return x * x

    a, b = 0.0, 2.0
    fixed = rk4_fixed(square, a, b, 4000)
    adaptive = rk4_adaptive(square, a, b, AdaptiveConfig(1e-12, 1e-12, 28))
    exact = 8.0 / 3.0

    print(f"Fixed step result : {fixed:.15f}")
    print(f"Adaptive result   : {adaptive.value:.15f} (status={int(adaptive.status)})")
    print(f"Analytic value    : {exact:.15f}")
    print(f"Relative error (adaptive): {abs(adaptive.value - exact) / exact:.3e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())