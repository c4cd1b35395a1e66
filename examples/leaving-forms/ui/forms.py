"""Form outline renderer."""
from __future__ import annotations

import pygame

from tick_leaving import FrameGeometry, LeavingForm, Point

from ui.constants import (
    LINE_COLOR,
    LINE_WIDTH,
    OUTLINE_COLOR,
    POINT_COLOR,
    POINT_RADIUS,
    SCREEN_H,
    SCREEN_W,
    STATUS_H,
    UNITS_TO_PX,
)


def to_screen(p: Point, offset: Point) -> tuple[int, int]:
    """World units (y up, origin at centre) to pixels (y down)."""
    cx = SCREEN_W / 2 + offset[0] * UNITS_TO_PX
    cy = (SCREEN_H - STATUS_H) / 2 - offset[1] * UNITS_TO_PX
    return int(cx + p[0] * UNITS_TO_PX), int(cy - p[1] * UNITS_TO_PX)


def draw_form(
    surface: pygame.Surface, form: LeavingForm, frame: FrameGeometry, offset: Point
) -> None:
    if frame.show_auxiliary_outline:
        rx = form.config.rx * UNITS_TO_PX
        ry = form.config.ry * UNITS_TO_PX
        cx, cy = to_screen((0.0, 0.0), offset)
        pygame.draw.ellipse(surface, OUTLINE_COLOR, (cx - rx, cy - ry, 2 * rx, 2 * ry), 1)

    points = [to_screen(p, offset) for p in frame.points]
    if len(points) > 1:
        pygame.draw.lines(surface, LINE_COLOR, False, points, LINE_WIDTH)

    if frame.highlight_point is not None:
        pygame.draw.circle(
            surface, POINT_COLOR, to_screen(frame.highlight_point, offset), POINT_RADIUS
        )
