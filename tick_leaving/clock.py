"""Cycle clock: tick counter, sweep direction and speed multiplier for one form."""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class CycleClock:
    def __init__(self, max_ticks: int, growing: bool = True) -> None:
        if max_ticks <= 0:
            raise ValueError("max_ticks must be positive")
        self._max_ticks = max_ticks
        self._growing = growing
        self._tick = 0
        self._multiplier = 1

    @property
    def max_ticks(self) -> int:
        return self._max_ticks

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def growing(self) -> bool:
        return self._growing

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def tick_ratio(self) -> float:
        return self._tick / self._max_ticks

    def advance(self) -> int:
        self._tick += self._multiplier
        self._wrap()
        return self._tick

    def toggle_growing(self) -> None:
        self._growing = not self._growing
        self._tick = 0
        logger.debug("Cycle wrapped, growing=%s", self._growing)

    def reset(self) -> None:
        self._tick = 0

    def set_speed(self, multiplier: int) -> None:
        """Change ticks per frame, rounding tick up to the next multiple."""
        if isinstance(multiplier, bool) or not isinstance(multiplier, int) or multiplier <= 0:
            raise ValueError(f"multiplier must be a positive integer, got {multiplier!r}")
        self._multiplier = multiplier
        if multiplier > 1:
            self._tick += (multiplier - self._tick % multiplier) % multiplier
            self._wrap()

    def _wrap(self) -> None:
        if self._tick >= self._max_ticks:
            self.toggle_growing()
