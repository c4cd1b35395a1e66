"""Tests for parametric curves and their derivatives."""
from __future__ import annotations

import math

import pytest

from tick_leaving.curves import ParametricCurve, ellipse, travelling_wave

SAMPLE_TS = [-10.0 + 0.37 * i for i in range(55)]
H = 1e-6


def _finite_difference(f, t: float) -> float:
    return (f(t + H) - f(t - H)) / (2 * H)


class TestEllipse:
    @pytest.mark.parametrize("rx,ry", [(2.0, 1.6), (1.0, 1.0), (0.5, 3.0)])
    def test_points_lie_on_ellipse(self, rx: float, ry: float) -> None:
        curve = ellipse(rx, ry)
        for t in SAMPLE_TS:
            x, y = curve.point(t)
            assert math.isclose(x * x / (rx * rx) + y * y / (ry * ry), 1.0, rel_tol=1e-12)

    def test_bottom_point(self) -> None:
        x, y = ellipse(2.0, 1.6).point(-math.pi / 2)
        assert abs(x) < 1e-12
        assert math.isclose(y, -1.6)

    def test_derivatives_match_finite_difference(self) -> None:
        curve = ellipse(2.0, 1.6)
        for t in SAMPLE_TS:
            assert abs(curve.dx(t) - _finite_difference(curve.x, t)) < 1e-4
            assert abs(curve.dy(t) - _finite_difference(curve.y, t)) < 1e-4


class TestTravellingWave:
    @pytest.mark.parametrize(
        "a,k,wt,theta",
        [
            (0.15, 2 * math.pi / 1.6, 0.0, -math.pi / 2),
            (0.15, 2 * math.pi / 1.6, 3.7, 1.1),
            (0.4, 5.0, -2.0, -3 * math.pi / 2),
            (0.0, 2.0, 1.0, 0.3),
        ],
    )
    def test_derivatives_match_finite_difference(
        self, a: float, k: float, wt: float, theta: float
    ) -> None:
        curve = travelling_wave(a, k, wt, theta)
        for t in SAMPLE_TS:
            assert abs(curve.dx(t) - _finite_difference(curve.x, t)) < 1e-4
            assert abs(curve.dy(t) - _finite_difference(curve.y, t)) < 1e-4

    def test_zero_amplitude_is_straight_ray(self) -> None:
        theta = 0.7
        curve = travelling_wave(0.0, 3.0, 1.0, theta)
        for t in SAMPLE_TS:
            x, y = curve.point(t)
            assert math.isclose(x, t * math.cos(theta), abs_tol=1e-12)
            assert math.isclose(y, t * math.sin(theta), abs_tol=1e-12)

    def test_unrotated_wave(self) -> None:
        """With theta=0 the curve is y = a*sin(k*t - wt)."""
        curve = travelling_wave(0.5, 2.0, 0.25, 0.0)
        x, y = curve.point(1.0)
        assert math.isclose(x, 1.0)
        assert math.isclose(y, 0.5 * math.sin(1.75))

    def test_returns_parametric_curve(self) -> None:
        assert isinstance(travelling_wave(0.1, 1.0, 0.0, 0.0), ParametricCurve)
