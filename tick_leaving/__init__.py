"""tick-leaving - Ellipse and travelling-wave outline animation, one frame per tick."""
from __future__ import annotations

from tick_leaving.clock import CycleClock
from tick_leaving.config import FormConfig
from tick_leaving.curves import ParametricCurve, ellipse, travelling_wave
from tick_leaving.form import LeavingForm
from tick_leaving.line import Line, combine, sample_ellipse_arc, sample_travelling_wave
from tick_leaving.newton import find_intersection
from tick_leaving.stages import STAGES
from tick_leaving.types import (
    FrameGeometry,
    IntersectionResult,
    NonConvergenceError,
    Point,
    Root,
    SingularJacobianError,
    SolverError,
    StageContext,
    WrongBranchError,
)

__all__ = [
    "LeavingForm",
    "FormConfig",
    "CycleClock",
    "ParametricCurve",
    "ellipse",
    "travelling_wave",
    "find_intersection",
    "Line",
    "combine",
    "sample_ellipse_arc",
    "sample_travelling_wave",
    "STAGES",
    "FrameGeometry",
    "IntersectionResult",
    "StageContext",
    "Root",
    "Point",
    "SolverError",
    "SingularJacobianError",
    "NonConvergenceError",
    "WrongBranchError",
]
