"""Tests for 2-D point helpers."""
from __future__ import annotations

import math

from tick_leaving import vec


class TestLength:
    def test_3_4_5(self) -> None:
        assert vec.length((3.0, 4.0)) == 5.0

    def test_origin(self) -> None:
        assert vec.length(vec.ORIGIN) == 0.0


class TestDistance:
    def test_same_point(self) -> None:
        assert vec.distance((1.0, 2.0), (1.0, 2.0)) == 0.0

    def test_basic(self) -> None:
        assert vec.distance((1.0, 1.0), (4.0, 5.0)) == 5.0


class TestRotateAround:
    def test_quarter_turn_about_origin(self) -> None:
        x, y = vec.rotate_around((1.0, 0.0), vec.ORIGIN, math.pi / 2)
        assert math.isclose(x, 0.0, abs_tol=1e-12)
        assert math.isclose(y, 1.0)

    def test_about_offset_center(self) -> None:
        x, y = vec.rotate_around((2.0, 1.0), (1.0, 1.0), math.pi)
        assert math.isclose(x, 0.0, abs_tol=1e-12)
        assert math.isclose(y, 1.0)

    def test_center_is_fixed(self) -> None:
        assert vec.rotate_around((1.5, -2.0), (1.5, -2.0), 0.7) == (1.5, -2.0)

    def test_zero_angle_is_identity(self) -> None:
        assert vec.rotate_around((3.0, 4.0), (1.0, 1.0), 0.0) == (3.0, 4.0)

    def test_preserves_distance(self) -> None:
        center = (0.3, -0.2)
        p = (1.7, 0.9)
        q = vec.rotate_around(p, center, -math.pi / 4)
        assert math.isclose(vec.distance(p, center), vec.distance(q, center))
