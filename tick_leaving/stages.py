"""The eight stage handlers.

Each handler is a pure function of a StageContext snapshot. Stages 3-7 need
the ellipse/wave intersection; when the solver fails they reuse the previous
frame's intersection, or degrade to solver-free geometry if there is none.
"""
from __future__ import annotations

import logging
import math

from tick_leaving import vec
from tick_leaving.config import FormConfig
from tick_leaving.curves import ellipse, travelling_wave
from tick_leaving.easing import (
    travelling_wave_additional_rotation,
    travelling_wave_amplitude,
    travelling_wave_radius_ratio,
)
from tick_leaving.line import (
    HALF_PI,
    TWO_PI,
    Line,
    combine,
    ellipse_arc_bounds,
    ellipse_radius,
    sample_ellipse_arc,
    sample_travelling_wave,
)
from tick_leaving.newton import find_intersection
from tick_leaving.types import (
    FrameGeometry,
    IntersectionResult,
    SolverError,
    Stage,
    StageContext,
    WrongBranchError,
)

logger = logging.getLogger(__name__)

# Largest Newton update, in radians / world units.
NEWTON_MAX_STEP = 0.25


def sweep_angle(tick_ratio: float) -> float:
    """Ellipse parameter of the radius hand: starts at the bottom, runs clockwise."""
    return -HALF_PI - TWO_PI * tick_ratio


def find_point_of_intersection(
    config: FormConfig, tick_ratio: float, a: float, wt: float
) -> IntersectionResult:
    """Locate where the wave aimed back through the sweep angle meets the ellipse.

    Only the crossing on the hand's side counts: the wave parameter must be
    non-positive and the ellipse parameter within a quarter turn of the sweep
    angle. Raises SolverError when the Newton iteration fails and
    WrongBranchError when it settles on the far crossing.
    """
    actual_angle = sweep_angle(tick_ratio)
    theta = actual_angle - math.pi
    ellipse_curve = ellipse(config.rx, config.ry)
    wave_curve = travelling_wave(a, config.k, wt, theta)

    # Project the unperturbed ellipse point onto the wave's axis.
    ex, ey = ellipse_curve.point(actual_angle)
    t2_guess = ex * math.cos(theta) + ey * math.sin(theta)

    root = find_intersection(
        ellipse_curve, wave_curve, actual_angle, t2_guess, max_step=NEWTON_MAX_STEP
    )

    offset = (root.t1 - actual_angle + math.pi) % TWO_PI - math.pi
    if root.t2 > 0.0 or abs(offset) >= HALF_PI:
        raise WrongBranchError(
            root.t1,
            root.t2,
            root.iterations,
            f"Far-side crossing (t_wave={root.t2!r}, offset={offset!r}) at tick_ratio={tick_ratio!r}",
        )

    t_ellipse = actual_angle + offset
    point = ellipse_curve.point(t_ellipse)
    return IntersectionResult(
        theta=theta,
        t_ellipse=t_ellipse,
        t_wave=root.t2,
        point=point,
        radius=vec.length(point),
        amplitude=a,
        wt=wt,
    )


def _resolve_intersection(ctx: StageContext, a: float, wt: float) -> IntersectionResult | None:
    try:
        return find_point_of_intersection(ctx.config, ctx.tick_ratio, a, wt)
    except SolverError as e:
        logger.debug(
            "No intersection at tick_ratio=%.5f (%s); reusing previous=%s",
            ctx.tick_ratio,
            e,
            ctx.previous is not None,
        )
        return ctx.previous


def _free_wave(ctx: StageContext, theta: float) -> FrameGeometry:
    cfg = ctx.config
    radius = ellipse_radius(cfg.rx, cfg.ry, theta, cfg.outline_radius_scale)
    wave = travelling_wave(cfg.max_amplitude, cfg.k, cfg.omega * ctx.tick_ratio, theta)
    points = sample_travelling_wave(wave, 0.0, radius, cfg.wave_point_count)
    return FrameGeometry(line=Line(points), show_auxiliary_outline=True)


def _compose(
    ctx: StageContext, a: float, radius_ratio: float = 1.0, rotation: float = 0.0
) -> FrameGeometry:
    cfg = ctx.config
    wt = cfg.omega * ctx.tick_ratio
    ellipse_curve = ellipse(cfg.rx, cfg.ry)
    hit = _resolve_intersection(ctx, a, wt)

    if hit is None:
        t_start, t_end = ellipse_arc_bounds(sweep_angle(ctx.tick_ratio), ctx.growing)
        points = sample_ellipse_arc(ellipse_curve, t_start, t_end, cfg.ellipse_point_count)
        return FrameGeometry(line=Line(points))

    t_start, t_end = ellipse_arc_bounds(hit.t_ellipse, ctx.growing)
    ellipse_points = sample_ellipse_arc(ellipse_curve, t_start, t_end, cfg.ellipse_point_count)

    wave = travelling_wave(hit.amplitude, cfg.k, hit.wt, hit.theta)
    wave_points = sample_travelling_wave(
        wave, hit.t_wave, hit.radius * radius_ratio, cfg.wave_point_count
    )
    if rotation:
        wave_points = [vec.rotate_around(p, hit.point, rotation) for p in wave_points]

    return FrameGeometry(
        line=Line(combine(ellipse_points, wave_points, ctx.growing)),
        intersection=hit,
    )


def stage0(ctx: StageContext) -> FrameGeometry:
    """A single radius hand sweeping once round the ellipse."""
    cfg = ctx.config
    tip = ellipse(cfg.rx, cfg.ry).point(sweep_angle(ctx.tick_ratio))
    return FrameGeometry(line=Line([tip, vec.ORIGIN]), show_auxiliary_outline=True)


def stage1(ctx: StageContext) -> FrameGeometry:
    """Wave pointing straight down, phase advancing."""
    return _free_wave(ctx, -HALF_PI)


def stage2(ctx: StageContext) -> FrameGeometry:
    """Wave following the radius hand round the ellipse."""
    return _free_wave(ctx, sweep_angle(ctx.tick_ratio))


def stage3(ctx: StageContext) -> FrameGeometry:
    """Wave clipped at the ellipse, with the crossing highlighted."""
    cfg = ctx.config
    a = cfg.max_amplitude
    wt = cfg.omega * ctx.tick_ratio
    hit = _resolve_intersection(ctx, a, wt)
    if hit is None:
        return stage2(ctx)

    wave = travelling_wave(hit.amplitude, cfg.k, hit.wt, hit.theta)
    points = sample_travelling_wave(wave, hit.t_wave, hit.radius, cfg.wave_point_count)
    return FrameGeometry(
        line=Line(points),
        highlight_point=hit.point,
        show_auxiliary_outline=True,
        intersection=hit,
    )


def stage4(ctx: StageContext) -> FrameGeometry:
    """Ellipse arc up to the crossing, continued by the clipped wave."""
    return _compose(ctx, ctx.config.max_amplitude)


def stage5(ctx: StageContext) -> FrameGeometry:
    """As stage 4, with the wave growing out of and back into the ellipse."""
    return _compose(
        ctx,
        ctx.config.max_amplitude,
        radius_ratio=travelling_wave_radius_ratio(ctx.tick_ratio),
    )


def stage6(ctx: StageContext) -> FrameGeometry:
    """As stage 5, with the amplitude modulated as well."""
    return _compose(
        ctx,
        travelling_wave_amplitude(ctx.tick_ratio, ctx.config.max_amplitude),
        radius_ratio=travelling_wave_radius_ratio(ctx.tick_ratio),
    )


def stage7(ctx: StageContext) -> FrameGeometry:
    """As stage 6, with the wave swung about the crossing near cycle ends."""
    return _compose(
        ctx,
        travelling_wave_amplitude(ctx.tick_ratio, ctx.config.max_amplitude),
        radius_ratio=travelling_wave_radius_ratio(ctx.tick_ratio),
        rotation=travelling_wave_additional_rotation(ctx.tick_ratio),
    )


STAGES: tuple[Stage, ...] = (stage0, stage1, stage2, stage3, stage4, stage5, stage6, stage7)


def get_stage(index: int) -> Stage:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(STAGES):
        raise ValueError(f"stage must be an integer in 0..{len(STAGES) - 1}, got {index!r}")
    return STAGES[index]
