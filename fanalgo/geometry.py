"""Planar geometry primitives."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


def ccw(a, b, c):
    """Return 1 for a counterclockwise turn a-b-c, -1 for clockwise, 0 if collinear."""
    area2 = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    return (area2 > 0) - (area2 < 0)