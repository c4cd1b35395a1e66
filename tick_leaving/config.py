"""Form configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = math.pi * 2


@dataclass(frozen=True)
class FormConfig:
    """Immutable configuration for one animated form.

    Attributes:
        rx: Horizontal semi-axis of the ellipse.
        ry: Vertical semi-axis of the ellipse.
        max_ticks: Ticks in one animation cycle.
        ellipse_point_count: Segments used to sample the ellipse arc.
        wave_point_count: Segments used to sample the travelling wave.
        frequency: Wave oscillations per cycle.
        max_amplitude: Peak wave amplitude (also the fixed amplitude of stages 1-5).
        outline_radius_scale: How far past the ellipse the free wave of stages 1-2 reaches.
    """

    rx: float
    ry: float
    max_ticks: int = 10000
    ellipse_point_count: int = 100
    wave_point_count: int = 50
    frequency: float = 25.0
    max_amplitude: float = 0.15
    outline_radius_scale: float = 1.1

    def __post_init__(self) -> None:
        for name in ("rx", "ry"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be finite and positive, got {value!r}")
        for name in ("max_ticks", "ellipse_point_count", "wave_point_count"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        for name in ("frequency", "max_amplitude", "outline_radius_scale"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")

    @property
    def k(self) -> float:
        """Wavenumber: one wavelength spans the shorter semi-axis."""
        return TWO_PI / min(self.rx, self.ry)

    @property
    def omega(self) -> float:
        return TWO_PI * self.frequency
