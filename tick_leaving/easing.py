"""Easing functions and the per-cycle ramps that drive the wave."""
from __future__ import annotations

import math

QUARTER_PI = math.pi / 4


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t * t * t * t * t
    return 1 - (-2 * t + 2) ** 5 / 2


# 0.00 => 0.25: 0 => 1
# 0.25 => 0.75: 1
# 0.75 => 1.00: 1 => 0
def travelling_wave_radius_ratio(tick_ratio: float) -> float:
    if tick_ratio <= 0.25:
        return tick_ratio * 4
    if tick_ratio >= 0.75:
        return (1 - tick_ratio) * 4
    return 1.0


# 0.00 => 0.25: 0 => max (eased)
# 0.25 => 0.50: max => 0
# 0.50 => 0.75: 0 => max
# 0.75 => 1.00: max => 0 (eased)
def travelling_wave_amplitude(tick_ratio: float, max_amplitude: float = 0.15) -> float:
    if tick_ratio < 0.25:
        return max_amplitude * ease_in_out_quint(tick_ratio * 4)
    if tick_ratio < 0.5:
        return max_amplitude * (0.5 - tick_ratio) * 4
    if tick_ratio < 0.75:
        return max_amplitude * (tick_ratio - 0.5) * 4
    return max_amplitude * ease_in_out_quint((1 - tick_ratio) * 4)


# 0.00 => 0.25: -PI/4 => 0
# 0.25 => 0.75: 0
# 0.75 => 1.00: 0 => PI/4
def travelling_wave_additional_rotation(tick_ratio: float) -> float:
    if tick_ratio <= 0.25:
        return -(1 - tick_ratio * 4) * QUARTER_PI
    if tick_ratio >= 0.75:
        return (tick_ratio - 0.75) * 4 * QUARTER_PI
    return 0.0
