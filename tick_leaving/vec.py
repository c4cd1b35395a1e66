"""2-D point helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

from tick_leaving.types import Point

ORIGIN: Point = (0.0, 0.0)


def length(p: Point) -> float:
    return math.hypot(p[0], p[1])


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def rotate_around(p: Point, center: Point, angle: float) -> Point:
    """Rotate ``p`` counter-clockwise about ``center`` by ``angle`` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    dx = p[0] - center[0]
    dy = p[1] - center[1]
    return (dx * c - dy * s + center[0], dx * s + dy * c + center[1])
