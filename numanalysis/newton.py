"""Newton divided-difference interpolation."""

from __future__ import annotations

from typing import Iterable

_NODE_TOLERANCE = 1e-9


class NewtonError(ValueError):
    """Raised for invalid interpolation input or duplicate nodes."""


class NewtonInterpolator:
    """Newton form of the polynomial through a set of (x, y) points."""

    def __init__(self, points: Iterable[tuple[float, float]]) -> None:
        pairs = [(float(px), float(py)) for px, py in points]
        if not pairs:
            raise NewtonError("at least one point is required")
        nodes = [px for px, _ in pairs]
        coefficients = [py for _, py in pairs]
        size = len(nodes)
        for order in range(1, size):
            for i in range(size - 1, order - 1, -1):
                denominator = nodes[i] - nodes[i - order]
                if abs(denominator) < _NODE_TOLERANCE:
                    raise NewtonError(
                        f"duplicate x nodes at {nodes[i - order]!r} and {nodes[i]!r}"
                    )
                coefficients[i] = (coefficients[i] - coefficients[i - 1]) / denominator
        self.nodes: tuple[float, ...] = tuple(nodes)
        self.coefficients: tuple[float, ...] = tuple(coefficients)

    def __len__(self) -> int:
        return len(self.nodes)

    def evaluate(self, x: float) -> float:
        """Evaluate the polynomial at ``x`` by nested multiplication."""
        result = self.coefficients[-1]
        for node, coefficient in zip(
            reversed(self.nodes[:-1]), reversed(self.coefficients[:-1])
        ):
            result = result * (x - node) + coefficient
        return result

    def describe(self) -> str:
        """Summarise the nodes and divided differences."""
        if len(self.nodes) < 2:
            raise NewtonError("a description needs at least two nodes")
        nodes = " ".join(f"{value:f}" for value in self.nodes)
        differences = " ".join(f"{value:f}" for value in self.coefficients)
        return (
            "Newton Dataset:\n"
            f"Size: {len(self.nodes)}\n"
            f"X Nodes: {nodes}\n"
            f"Divided Differences: {differences}"
        )


def newton_interpolate(points: Iterable[tuple[float, float]], x: float) -> float:
    """Evaluate the Newton polynomial through ``points`` at ``x``."""
    return NewtonInterpolator(points).evaluate(x)