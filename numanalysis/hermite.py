"""Hermite interpolation from values and first derivatives."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

_NODE_TOLERANCE = 1e-9


class HermitePoint(NamedTuple):
    """A sample of the function: position, value and derivative."""

    x: float
    y: float
    dy: float


class HermiteError(ValueError):
    """Raised for invalid input or nodes too close to divide by."""


class HermiteInterpolator:
    """Newton form of the Hermite polynomial matching values and slopes."""

    def __init__(self, points: Iterable[tuple[float, float, float]]) -> None:
        samples = [HermitePoint(float(x), float(y), float(dy)) for x, y, dy in points]
        if not samples:
            raise HermiteError("at least one point is required")

        nodes = [sample.x for sample in samples for _ in range(2)]
        coefficients = [sample.y for sample in samples for _ in range(2)]
        size = len(nodes)

        # First-order differences: repeated nodes take the derivative.
        for i in range(size - 1, 0, -1):
            if i % 2:
                coefficients[i] = samples[i // 2].dy
            else:
                denominator = nodes[i] - nodes[i - 1]
                if denominator == 0.0:
                    raise HermiteError(f"duplicate x node {nodes[i]!r}")
                coefficients[i] = (coefficients[i] - coefficients[i - 1]) / denominator

        for order in range(2, size):
            for j in range(size - 1, order - 1, -1):
                denominator = nodes[j] - nodes[j - order]
                if abs(denominator) < _NODE_TOLERANCE:
                    raise HermiteError(
                        f"x nodes {nodes[j - order]!r} and {nodes[j]!r} are too close"
                    )
                coefficients[j] = (coefficients[j] - coefficients[j - 1]) / denominator

        self.points: tuple[HermitePoint, ...] = tuple(samples)
        self.nodes: tuple[float, ...] = tuple(nodes)
        self.coefficients: tuple[float, ...] = tuple(coefficients)

    @classmethod
    def from_arrays(
        cls, xs: Sequence[float], ys: Sequence[float], dys: Sequence[float]
    ) -> "HermiteInterpolator":
        """Build an interpolator from parallel sequences of x, y and dy."""
        if not (len(xs) == len(ys) == len(dys)):
            raise HermiteError("xs, ys and dys must have the same length")
        return cls(zip(xs, ys, dys))

    def __len__(self) -> int:
        return len(self.points)

    def evaluate(self, x: float) -> tuple[float, float]:
        """Return the polynomial's value and derivative at ``x``."""
        result = self.coefficients[-1]
        derivative = 0.0
        for node, coefficient in zip(
            reversed(self.nodes[:-1]), reversed(self.coefficients[:-1])
        ):
            derivative = derivative * (x - node) + result
            result = result * (x - node) + coefficient
        return result, derivative