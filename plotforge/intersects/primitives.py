"""Pairwise intersection of points and segments.

Exact coincidences (identical points, identical or reversed segments, shared
endpoints, colinear overlaps) are all settled before the crossing solver
runs, because the solver is unstable for parallel inputs.
"""

from typing import List, Optional, Union

from ..core.config import Tolerance, resolve_tolerance
from ..core.errors import UnsupportedGeometryError
from ..core.percent import Percent
from ..interpolate import locate_on_segment
from ..shapes import CurveArc, Group, Point, Polygon, PolygonWithCavities, Segment, Text
from .opinion import Intersection, Opinion, SpecialCase

SegmentIntersection = Union[Intersection, SpecialCase, None]


def intersect_point_point(a: Point, b: Point) -> Optional[SpecialCase]:
    """Two points meet only when they are exactly equal."""
    if a == b:
        return SpecialCase.POINTS_ARE_THE_SAME
    return None


def intersect_segment_point(segment: Segment, point: Point,
                            tolerance: Optional[Tolerance] = None) -> Optional[Intersection]:
    """Intersect a segment with a point.

    Returns:
        Intersection whose ``a`` opinion carries the percent along the
        segment, or ``None`` if the point is off the segment
    """
    percent = locate_on_segment(segment, point, tolerance)
    if percent is None:
        return None
    at = segment.point_at(percent) if percent.is_at_boundary() else point
    return Intersection(Opinion.segment(at, percent), Opinion.point(point))


def _on_same_line(a: Segment, b: Segment, tol: Tolerance) -> bool:
    d = a.vector()
    length = d.norm()
    offset = max(abs(d.cross(b.i - a.i)), abs(d.cross(b.f - a.i))) / length
    return offset <= tol.point * max(1.0, length)


def _colinear_contacts(a: Segment, b: Segment, tol: Tolerance) -> List[Point]:
    """Endpoints of either segment lying on the other, ordered along ``a``."""
    candidates = []
    for p, host in ((a.i, b), (a.f, b), (b.i, a), (b.f, a)):
        if p not in candidates and locate_on_segment(host, p, tol) is not None:
            candidates.append(p)
    d = a.vector()
    candidates.sort(key=lambda p: d.dot(p - a.i))
    return candidates


def colinear_overlap(a: Segment, b: Segment, tolerance: Optional[Tolerance] = None) -> Optional[Segment]:
    """Stretch shared by two colinear segments, oriented along ``a``.

    Returns:
        The shared subsegment, or ``None`` when the segments are not colinear
        or share at most a single point
    """
    tol = resolve_tolerance(tolerance)
    if a.is_degenerate() or b.is_degenerate() or not _on_same_line(a, b, tol):
        return None
    contacts = _colinear_contacts(a, b, tol)
    if len(contacts) < 2 or contacts[0].dist(contacts[-1]) <= tol.point:
        return None
    return Segment(contacts[0], contacts[-1])


def _endpoint_percent(segment: Segment, point: Point, tol: Tolerance) -> Percent:
    if point == segment.i:
        return Percent.ZERO
    if point == segment.f:
        return Percent.ONE
    return locate_on_segment(segment, point, tol)


def _colinear_case(a: Segment, b: Segment, tol: Tolerance) -> SegmentIntersection:
    if not _on_same_line(a, b, tol):
        return None
    contacts = _colinear_contacts(a, b, tol)
    if not contacts:
        return None
    if len(contacts) >= 2 and contacts[0].dist(contacts[-1]) > tol.point:
        return SpecialCase.LINE_SEGMENTS_ARE_COLINEAR
    # touching end to end: prefer a point that is an endpoint of both
    at = next((p for p in contacts if p in (a.i, a.f) and p in (b.i, b.f)), contacts[0])
    return Intersection(
        Opinion.segment(at, _endpoint_percent(a, at, tol)),
        Opinion.segment(at, _endpoint_percent(b, at, tol)),
    )


def intersect_segment_segment(a: Segment, b: Segment,
                              tolerance: Optional[Tolerance] = None) -> SegmentIntersection:
    """Intersect two segments.

    Args:
        a: First segment
        b: Second segment
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        - ``SpecialCase.LINE_SEGMENTS_ARE_THE_SAME`` if a == b
        - ``SpecialCase.LINE_SEGMENTS_ARE_THE_SAME_BUT_REVERSED`` if a == b.flip()
        - ``SpecialCase.LINE_SEGMENTS_ARE_COLINEAR`` if they overlap along a stretch
        - an :class:`Intersection` with one ``Opinion.segment`` per participant
          when they meet at a single point
        - ``None`` otherwise (including degenerate zero-length inputs)

    Examples:
        >>> isxn = intersect_segment_segment(Segment((0, 0), (2, 2)), Segment((0, 2), (2, 0)))
        >>> isxn.point, isxn.a.percent
        (Point(x=1.0, y=1.0), Percent(0.5))
    """
    tol = resolve_tolerance(tolerance)
    if a.is_degenerate() or b.is_degenerate():
        return None
    if a == b:
        return SpecialCase.LINE_SEGMENTS_ARE_THE_SAME
    if a == b.flip():
        return SpecialCase.LINE_SEGMENTS_ARE_THE_SAME_BUT_REVERSED

    d1, d2 = a.vector(), b.vector()
    denom = d1.cross(d2)
    if abs(denom) <= tol.point * d1.norm() * d2.norm():
        return _colinear_case(a, b, tol)

    for pa, percent_a in ((a.i, Percent.ZERO), (a.f, Percent.ONE)):
        for pb, percent_b in ((b.i, Percent.ZERO), (b.f, Percent.ONE)):
            if pa == pb:
                return Intersection(Opinion.segment(pa, percent_a), Opinion.segment(pa, percent_b))

    w = b.i - a.i
    ta = w.cross(d2) / denom
    tb = w.cross(d1) / denom
    lo, hi = -tol.percent, 1.0 + tol.percent
    if not (lo <= ta <= hi and lo <= tb <= hi):
        return None

    percent_a = Percent.new(min(max(ta, 0.0), 1.0), tol)
    percent_b = Percent.new(min(max(tb, 0.0), 1.0), tol)
    if percent_a.is_at_boundary():
        at = a.point_at(percent_a)
    elif percent_b.is_at_boundary():
        at = b.point_at(percent_b)
    else:
        at = a.extrapolate(ta)
    return Intersection(Opinion.segment(at, percent_a), Opinion.segment(at, percent_b))


_UNSUPPORTED = (Polygon, PolygonWithCavities, CurveArc, Group, Text)


def intersect(a, b, tolerance: Optional[Tolerance] = None):
    """Intersect any two points or segments.

    Results are always phrased with ``a`` first; a point/segment pair is
    computed as segment/point and flipped back.

    Raises:
        UnsupportedGeometryError: For polygons, arcs, groups and text
        TypeError: For anything that is not a plotforge shape
    """
    for obj in (a, b):
        if isinstance(obj, _UNSUPPORTED):
            raise UnsupportedGeometryError(f"intersect is not implemented for {type(obj).__name__}")
        if not isinstance(obj, (Point, Segment)):
            raise TypeError(f"Expected Point or Segment, got {type(obj).__name__}")

    if isinstance(a, Point) and isinstance(b, Point):
        return intersect_point_point(a, b)
    if isinstance(a, Segment) and isinstance(b, Point):
        return intersect_segment_point(a, b, tolerance)
    if isinstance(a, Point) and isinstance(b, Segment):
        result = intersect_segment_point(b, a, tolerance)
        return result.flip() if result is not None else None
    return intersect_segment_segment(a, b, tolerance)


__all__ = [
    'intersect',
    'intersect_point_point',
    'intersect_segment_point',
    'intersect_segment_segment',
    'colinear_overlap',
]
