"""Lagrange polynomial interpolation."""

from __future__ import annotations

import sys
from typing import Iterable, NamedTuple, TextIO

_NODE_TOLERANCE = 1e-9


class Point(NamedTuple):
    """A sample (x, y) of the function being interpolated."""

    x: float
    y: float


class LagrangeError(ValueError):
    """Raised for invalid interpolation input."""


class DuplicateNodeError(LagrangeError):
    """Raised when two nodes share (almost) the same x value."""


def _basis(nodes: list[Point], k: int, x: float) -> float:
    xk = nodes[k].x
    product = 1.0
    for i, node in enumerate(nodes):
        if i == k:
            continue
        denominator = xk - node.x
        if abs(denominator) < _NODE_TOLERANCE:
            raise DuplicateNodeError(f"nodes {k} and {i} share x = {xk!r}")
        product *= (x - node.x) / denominator
    return product


def lagrange_interpolate(points: Iterable[tuple[float, float]], x: float) -> float:
    """Evaluate the Lagrange polynomial through ``points`` at ``x``."""
    nodes = [Point(float(px), float(py)) for px, py in points]
    if not nodes:
        raise LagrangeError("at least one point is required")
    if len(nodes) == 1:
        return nodes[0].y
    return sum(node.y * _basis(nodes, k, x) for k, node in enumerate(nodes))


def read_points(count: int, stream: TextIO | None = None) -> list[Point]:
    """Prompt for ``count`` points written as ``x,y``, one per line."""
    if count <= 0:
        raise LagrangeError("point count must be positive")
    source = sys.stdin if stream is None else stream
    points = []
    for index in range(1, count + 1):
        print(f"Enter point {index} as x,y: ", end="", flush=True)
        line = source.readline()
        if not line:
            raise LagrangeError(f"input ended before point {index}")
        try:
            raw_x, raw_y = line.strip().split(",")
            points.append(Point(float(raw_x), float(raw_y)))
        except ValueError as exc:
            raise LagrangeError(f"cannot read point {index} from {line.strip()!r}") from exc
    return points