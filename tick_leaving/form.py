"""LeavingForm - per-form animation state and the per-frame query API."""
from __future__ import annotations

from tick_leaving.clock import CycleClock
from tick_leaving.config import FormConfig
from tick_leaving.stages import get_stage
from tick_leaving.types import FrameGeometry, IntersectionResult, StageContext


class LeavingForm:
    def __init__(
        self,
        rx: float | None = None,
        ry: float | None = None,
        growing: bool = True,
        config: FormConfig | None = None,
    ) -> None:
        if config is None:
            if rx is None or ry is None:
                raise ValueError("either rx and ry or a config is required")
            config = FormConfig(rx=rx, ry=ry)
        elif rx is not None or ry is not None:
            raise ValueError("pass rx/ry or config, not both")
        self._config = config
        self._clock = CycleClock(config.max_ticks, growing)
        self._last_intersection: IntersectionResult | None = None

    @property
    def config(self) -> FormConfig:
        return self._config

    @property
    def tick(self) -> int:
        return self._clock.tick

    @property
    def tick_ratio(self) -> float:
        return self._clock.tick_ratio

    @property
    def growing(self) -> bool:
        return self._clock.growing

    @property
    def multiplier(self) -> int:
        return self._clock.multiplier

    @property
    def last_intersection(self) -> IntersectionResult | None:
        return self._last_intersection

    def context(self) -> StageContext:
        return StageContext(
            config=self._config,
            tick_ratio=self._clock.tick_ratio,
            growing=self._clock.growing,
            previous=self._last_intersection,
        )

    def get_shapes(self, stage: int) -> FrameGeometry:
        """Render the current tick without advancing."""
        frame = get_stage(stage)(self.context())
        if frame.intersection is not None:
            self._last_intersection = frame.intersection
        return frame

    def advance_and_get_shapes(self, stage: int) -> FrameGeometry:
        frame = self.get_shapes(stage)
        growing = self._clock.growing
        self._clock.advance()
        if self._clock.growing != growing:
            self._last_intersection = None
        return frame

    def reset_cycle(self) -> None:
        """Restart the cycle; geometry from before the restart is forgotten."""
        self._clock.reset()
        self._last_intersection = None

    def set_speed(self, multiplier: int) -> None:
        growing = self._clock.growing
        self._clock.set_speed(multiplier)
        if self._clock.growing != growing:
            self._last_intersection = None

    def toggle_growing(self) -> None:
        self._clock.toggle_growing()
        self._last_intersection = None
