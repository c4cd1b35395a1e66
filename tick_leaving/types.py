"""Shared value types, handler protocol and error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Point = tuple[float, float]

if TYPE_CHECKING:
    from tick_leaving.config import FormConfig
    from tick_leaving.line import Line


@dataclass(frozen=True, slots=True)
class Root:
    """Parameter pair where two curves meet, as found by the solver."""

    t1: float
    t2: float
    iterations: int
    residual: float


@dataclass(frozen=True, slots=True)
class IntersectionResult:
    theta: float
    t_ellipse: float
    t_wave: float
    point: Point
    radius: float
    amplitude: float
    wt: float


@dataclass(frozen=True, slots=True)
class StageContext:
    config: FormConfig
    tick_ratio: float
    growing: bool
    previous: IntersectionResult | None = None


@dataclass(frozen=True, slots=True)
class FrameGeometry:
    """Everything a renderer needs to draw one frame of a form."""

    line: Line
    highlight_point: Point | None = None
    show_auxiliary_outline: bool = False
    intersection: IntersectionResult | None = None

    @property
    def points(self) -> tuple[Point, ...]:
        return self.line.points


class SolverError(ArithmeticError):
    """Raised when the Newton iteration cannot produce a trustworthy root."""

    def __init__(self, t1: float, t2: float, iterations: int, message: str) -> None:
        self.t1 = t1
        self.t2 = t2
        self.iterations = iterations
        super().__init__(message)


class SingularJacobianError(SolverError):
    """Raised when the curves' tangents are parallel at the current iterate."""


class NonConvergenceError(SolverError):
    """Raised when the iteration cap is hit or an iterate stops being finite."""


class WrongBranchError(SolverError):
    """Raised when the root found is the crossing on the far side of the ellipse."""


Stage = Callable[[StageContext], FrameGeometry]
