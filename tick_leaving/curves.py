"""Parametric curves with exact first derivatives.

Ellipse:
    x = rx * cos(t)
    y = ry * sin(t)

Travelling wave along the x axis, rotated counter-clockwise by theta:
    x = t * cos(theta) - a * sin(k * t - wt) * sin(theta)
    y = t * sin(theta) + a * sin(k * t - wt) * cos(theta)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from tick_leaving.types import Point

Fn = Callable[[float], float]


@dataclass(frozen=True, slots=True)
class ParametricCurve:
    x: Fn
    y: Fn
    dx: Fn
    dy: Fn

    def point(self, t: float) -> Point:
        return (self.x(t), self.y(t))


def ellipse(rx: float, ry: float) -> ParametricCurve:
    return ParametricCurve(
        x=lambda t: rx * math.cos(t),
        y=lambda t: ry * math.sin(t),
        dx=lambda t: -rx * math.sin(t),
        dy=lambda t: ry * math.cos(t),
    )


def travelling_wave(a: float, k: float, wt: float, theta: float) -> ParametricCurve:
    cos_theta = math.cos(theta)
    sin_theta = math.sin(theta)

    def x(t: float) -> float:
        return t * cos_theta - a * math.sin(k * t - wt) * sin_theta

    def y(t: float) -> float:
        return t * sin_theta + a * math.sin(k * t - wt) * cos_theta

    def dx(t: float) -> float:
        return cos_theta - a * k * math.cos(k * t - wt) * sin_theta

    def dy(t: float) -> float:
        return sin_theta + a * k * math.cos(k * t - wt) * cos_theta

    return ParametricCurve(x=x, y=y, dx=dx, dy=dy)
