"""Two-variable Newton's method for locating where two parametric curves cross."""
from __future__ import annotations

import math

from tick_leaving.curves import ParametricCurve
from tick_leaving.types import NonConvergenceError, Root, SingularJacobianError

DEFAULT_TOLERANCE = 1e-9
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_SINGULAR_TOLERANCE = 1e-12


def find_intersection(
    c1: ParametricCurve,
    c2: ParametricCurve,
    t1: float,
    t2: float,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    singular_tolerance: float = DEFAULT_SINGULAR_TOLERANCE,
    max_step: float | None = None,
) -> Root:
    """Find (t1, t2) with c1(t1) == c2(t2), starting from the given guesses.

    Solves J * delta = -F each step, where F is the positional difference of
    the two curves and J = [[x1', -x2'], [y1', -y2']], using the closed-form
    2x2 inverse. Raises SingularJacobianError when the tangents are parallel
    and NonConvergenceError when ``max_iterations`` steps do not bring |F|
    under ``tolerance``.

    ``max_step`` caps the larger component of each update, scaling the whole
    step down so it keeps its direction. This keeps the iteration near the
    starting guess instead of jumping to a distant crossing.
    """
    if tolerance <= 0.0:
        raise ValueError("tolerance must be positive")
    if max_iterations <= 0:
        raise ValueError("max_iterations must be positive")
    if max_step is not None and not max_step > 0.0:
        raise ValueError("max_step must be positive")

    for iteration in range(max_iterations + 1):
        fx = c1.x(t1) - c2.x(t2)
        fy = c1.y(t1) - c2.y(t2)
        residual = math.hypot(fx, fy)
        if not math.isfinite(residual):
            raise NonConvergenceError(
                t1, t2, iteration, f"Residual became non-finite after {iteration} iterations"
            )
        if residual < tolerance:
            return Root(t1=t1, t2=t2, iterations=iteration, residual=residual)
        if iteration == max_iterations:
            break

        a = c1.dx(t1)
        b = -c2.dx(t2)
        c = c1.dy(t1)
        d = -c2.dy(t2)
        det = a * d - b * c
        if abs(det) < singular_tolerance:
            raise SingularJacobianError(
                t1, t2, iteration, f"Jacobian is singular (det={det!r}) at t1={t1!r}, t2={t2!r}"
            )

        # [a b; c d]^-1 = [d -b; -c a] / det
        delta1 = (-d * fx + b * fy) / det
        delta2 = (c * fx - a * fy) / det
        if max_step is not None:
            largest = max(abs(delta1), abs(delta2))
            if largest > max_step:
                delta1 *= max_step / largest
                delta2 *= max_step / largest
        t1 += delta1
        t2 += delta2

    raise NonConvergenceError(
        t1,
        t2,
        max_iterations,
        f"No convergence within {max_iterations} iterations (residual={residual!r})",
    )
