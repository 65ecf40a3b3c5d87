"""Locating points along lines.

These helpers turn "where along this segment is that point" into a
:class:`~plotforge.core.percent.Percent`. The 2D variant works along the
axis with the larger extent so that a near-vertical or near-horizontal
segment never divides by a tiny run.
"""

from typing import Optional

from .core.config import Tolerance, resolve_tolerance
from .core.errors import InterpolationError, InterpolationErrorKind
from .core.percent import Percent
from .shapes import Point, Segment


def interpolate_checked(a: float, b: float, i: float, tolerance: Optional[Tolerance] = None) -> Percent:
    """Fraction of the way from ``a`` to ``b`` that ``i`` sits.

    Args:
        a: Start value
        b: End value
        i: Value to locate
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        Percent of the way from a to b

    Raises:
        InterpolationError: POINTS_SAME when a == b, BELOW_ZERO / ABOVE_ONE
            when i falls outside [a, b]

    Examples:
        >>> interpolate_checked(0.0, 4.0, 1.0)
        Percent(0.25)
    """
    tol = resolve_tolerance(tolerance)
    if abs(b - a) <= tol.point:
        raise InterpolationError(InterpolationErrorKind.POINTS_SAME)
    v = (i - a) / (b - a)
    if v < -tol.percent:
        raise InterpolationError(InterpolationErrorKind.BELOW_ZERO)
    if v > 1.0 + tol.percent:
        raise InterpolationError(InterpolationErrorKind.ABOVE_ONE)
    return Percent.new(min(max(v, 0.0), 1.0), tol)


def interpolate_2d_checked(a: Point, b: Point, i: Point, tolerance: Optional[Tolerance] = None) -> Percent:
    """Fraction of the way from ``a`` to ``b`` that ``i`` sits, in 2D.

    The answer is read off the axis along which ``ab`` has the larger extent;
    the other coordinate must agree with the line through ``a`` and ``b``.

    Raises:
        InterpolationError: POINTS_SAME for a degenerate line,
            POINT_NOT_ON_LINE when ``i`` is off the line, BELOW_ZERO /
            ABOVE_ONE when it is on the line but outside the segment
    """
    tol = resolve_tolerance(tolerance)
    if a == b:
        raise InterpolationError(InterpolationErrorKind.POINTS_SAME)
    if i == a:
        return Percent.ZERO
    if i == b:
        return Percent.ONE

    dx, dy = b.x - a.x, b.y - a.y
    if abs(dx) <= tol.point and abs(dy) <= tol.point:
        raise InterpolationError(InterpolationErrorKind.POINTS_SAME)

    if abs(dx) >= abs(dy):
        percent = interpolate_checked(a.x, b.x, i.x, tol)
        expected, actual, extent = a.y + dy * percent.value, i.y, abs(dx)
    else:
        percent = interpolate_checked(a.y, b.y, i.y, tol)
        expected, actual, extent = a.x + dx * percent.value, i.x, abs(dy)

    if abs(expected - actual) > tol.point * max(1.0, extent):
        raise InterpolationError(InterpolationErrorKind.POINT_NOT_ON_LINE)
    return percent


def interpolate_2d(a: Point, b: Point, percent: Percent) -> Point:
    """Point ``percent`` of the way from a to b, exact at the endpoints."""
    return Segment(a, b).point_at(percent)


def extrapolate_2d(a: Point, b: Point, t: float) -> Point:
    """Point at parameter ``t`` on the line through a and b; t may be outside [0, 1]."""
    return a + (b - a) * t


def locate_on_segment(segment: Segment, point: Point, tolerance: Optional[Tolerance] = None) -> Optional[Percent]:
    """Percent along ``segment`` at which ``point`` lies, or ``None``.

    A point is on the segment when ``|segment| == |i->point| + |point->f|``
    within the relative length tolerance. Exact endpoint hits return ZERO or
    ONE without any arithmetic. Degenerate segments, and segments no longer
    than ``tolerance.point`` along either axis, contain nothing.
    """
    tol = resolve_tolerance(tolerance)
    if segment.is_degenerate():
        return None
    if point == segment.i:
        return Percent.ZERO
    if point == segment.f:
        return Percent.ONE

    whole = segment.length
    parts = segment.i.dist(point) + point.dist(segment.f)
    if parts - whole > tol.length * whole:
        return None

    a, b = segment.i, segment.f
    try:
        if abs(b.x - a.x) >= abs(b.y - a.y):
            return interpolate_checked(a.x, b.x, point.x, tol)
        return interpolate_checked(a.y, b.y, point.y, tol)
    except InterpolationError:
        return None


__all__ = [
    'interpolate_checked',
    'interpolate_2d_checked',
    'interpolate_2d',
    'extrapolate_2d',
    'locate_on_segment',
]
