"""Polyline container and the sampling/combination helpers that build it."""
from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence

from tick_leaving import vec
from tick_leaving.curves import ParametricCurve
from tick_leaving.types import Point

HALF_PI = math.pi / 2
TWO_PI = math.pi * 2
DEGENERATE_TOLERANCE = 1e-3

# Where the ellipse arc is anchored: the bottom of the ellipse.
REFERENCE_ANGLE = -HALF_PI


class Line:
    """Immutable, non-empty ordered sequence of 2-D points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point]) -> None:
        self._points: tuple[Point, ...] = tuple(points)
        if not self._points:
            raise ValueError("Line requires at least one point")

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def first(self) -> Point:
        return self._points[0]

    @property
    def last(self) -> Point:
        return self._points[-1]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Line({len(self._points)} points, {self.first!r} -> {self.last!r})"


def _check_point_count(point_count: int) -> None:
    if point_count < 0:
        raise ValueError("point_count must not be negative")


def ellipse_radius(rx: float, ry: float, theta: float, scale: float = 1.0) -> float:
    """Distance from the origin to the ellipse point at angle parameter ``theta``."""
    return math.hypot(scale * rx * math.cos(theta), scale * ry * math.sin(theta))


def ellipse_arc_bounds(t_ellipse: float, growing: bool) -> tuple[float, float]:
    """Parameter interval of the visible arc for the given sweep direction."""
    if growing:
        return REFERENCE_ANGLE, t_ellipse
    return t_ellipse, REFERENCE_ANGLE - TWO_PI


def sample_ellipse_arc(
    curve: ParametricCurve, t_start: float, t_end: float, point_count: int
) -> list[Point]:
    _check_point_count(point_count)
    if point_count == 0:
        return [curve.point(t_start)]
    step = (t_end - t_start) / point_count
    return [curve.point(t_start + n * step) for n in range(point_count + 1)]


def sample_travelling_wave(
    curve: ParametricCurve, t_start: float, radius: float, point_count: int
) -> list[Point]:
    _check_point_count(point_count)
    if point_count == 0:
        return [curve.point(t_start)]
    step = radius / point_count
    return [curve.point(t_start + n * step) for n in range(point_count + 1)]


def combine(
    ellipse_points: Sequence[Point], wave_points: Sequence[Point], growing: bool
) -> list[Point]:
    """Join an ellipse arc and a wave segment into one continuous polyline.

    The wave's first point coincides with the arc's end (growing) or start
    (shrinking), so it is dropped. A wave whose endpoints coincide adds
    nothing and the arc is returned as is.
    """
    if vec.distance(wave_points[0], wave_points[-1]) < DEGENERATE_TOLERANCE:
        return list(ellipse_points)
    tail = list(wave_points[1:])
    if growing:
        return list(ellipse_points) + tail
    tail.reverse()
    return tail + list(ellipse_points)
