"""Overlap functions and the geometric ``totally_covers`` relation.

Each ``*_overlaps_*`` function describes, for both participants, which part
of it the other one touches, or returns ``None`` when they do not meet.
Open polygons are treated as multilines and closed polygons as areas.
"""

from typing import List, Optional, Tuple

from ..classify import PointLocationKind, classify_point
from ..core.config import Tolerance, resolve_tolerance
from ..core.errors import UnsupportedGeometryError
from ..intersects import SpecialCase, colinear_overlap, intersect_segment_segment
from ..interpolate import locate_on_segment
from ..shapes import CurveArc, Group, Point, Polygon, PolygonWithCavities, Segment, Text
from .ops import MultilineOp, PolygonOp, SegmentOp, SegmentOpKind, MultilineOpKind
from .sets import MultilineOpSet, PolygonOpSet, SegmentOpSet

_UNSUPPORTED = (PolygonWithCavities, CurveArc, Group, Text)


def point_overlaps_point(a: Point, b: Point) -> Optional[Point]:
    if a == b:
        return a
    return None


def segment_overlaps_point(segment: Segment, point: Point,
                           tolerance: Optional[Tolerance] = None) -> Optional[Tuple[SegmentOp, Point]]:
    """The point op on ``segment`` where ``point`` lies, or ``None``."""
    percent = locate_on_segment(segment, point, tolerance)
    if percent is None:
        return None
    at = segment.point_at(percent) if percent.is_at_boundary() else point
    return SegmentOp.point(at, percent), point


def segment_overlaps_segment(sa: Segment, sb: Segment,
                             tolerance: Optional[Tolerance] = None) -> Optional[Tuple[SegmentOp, SegmentOp]]:
    """Describe how two segments overlap.

    Args:
        sa: First segment
        sb: Second segment (need not point the same way as ``sa``)
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        ``(op on sa, op on sb)``: ENTIRE for identical or reversed segments,
        SUBSEGMENT / ENTIRE for colinear overlaps (each subsegment runs along
        its own segment), POINT ops at a single crossing, or ``None``

    Examples:
        >>> a_op, b_op = segment_overlaps_segment(Segment((0, 0), (2, 0)), Segment((3, 0), (1, 0)))
        >>> a_op.segment, b_op.segment
        (Segment(i=Point(x=1.0, y=0.0), f=Point(x=2.0, y=0.0)), Segment(i=Point(x=2.0, y=0.0), f=Point(x=1.0, y=0.0)))
    """
    tol = resolve_tolerance(tolerance)
    result = intersect_segment_segment(sa, sb, tol)
    if result is None:
        return None
    if result in (SpecialCase.LINE_SEGMENTS_ARE_THE_SAME,
                  SpecialCase.LINE_SEGMENTS_ARE_THE_SAME_BUT_REVERSED):
        return SegmentOp.entire(), SegmentOp.entire()
    if result == SpecialCase.LINE_SEGMENTS_ARE_COLINEAR:
        overlap = colinear_overlap(sa, sb, tol)
        if overlap is None:
            return None
        a_op = SegmentOp.entire() if overlap == sa else SegmentOp.subsegment(overlap)
        along_b = overlap if overlap.dot(sb) > 0 else overlap.flip()
        b_op = SegmentOp.entire() if along_b == sb else SegmentOp.subsegment(along_b)
        return a_op, b_op
    return (
        SegmentOp.point(result.a.at, result.a.percent),
        SegmentOp.point(result.b.at, result.b.percent),
    )


def multiline_overlaps_point(multiline: Polygon, point: Point,
                             tolerance: Optional[Tolerance] = None) -> Optional[Tuple[List[MultilineOp], Point]]:
    ml_ops = MultilineOpSet(multiline, tolerance)
    for index, segment in enumerate(multiline.segments()):
        found = segment_overlaps_point(segment, point, tolerance)
        if found is not None:
            ml_ops.add(MultilineOp.from_segment_op(index, found[0]))
    ops = ml_ops.to_nonempty()
    if ops is None:
        return None
    return ops, point


def multiline_overlaps_segment(multiline: Polygon, segment: Segment,
                               tolerance: Optional[Tolerance] = None) -> Optional[Tuple[List[MultilineOp], List[SegmentOp]]]:
    ml_ops = MultilineOpSet(multiline, tolerance)
    sg_ops = SegmentOpSet(segment, tolerance)
    for index, ml_segment in enumerate(multiline.segments()):
        found = segment_overlaps_segment(ml_segment, segment, tolerance)
        if found is not None:
            ml_ops.add(MultilineOp.from_segment_op(index, found[0]))
            sg_ops.add(found[1])
    return _both(ml_ops.to_nonempty(), sg_ops.to_nonempty())


def multiline_overlaps_multiline(ml1: Polygon, ml2: Polygon,
                                 tolerance: Optional[Tolerance] = None) -> Optional[Tuple[List[MultilineOp], List[MultilineOp]]]:
    ops1 = MultilineOpSet(ml1, tolerance)
    ops2 = MultilineOpSet(ml2, tolerance)
    segments2 = ml2.segments()
    for i, s1 in enumerate(ml1.segments()):
        for j, s2 in enumerate(segments2):
            found = segment_overlaps_segment(s1, s2, tolerance)
            if found is not None:
                ops1.add(MultilineOp.from_segment_op(i, found[0]))
                ops2.add(MultilineOp.from_segment_op(j, found[1]))
    return _both(ops1.to_nonempty(), ops2.to_nonempty())


def polygon_overlaps_point(polygon: Polygon, point: Point,
                           tolerance: Optional[Tolerance] = None) -> Optional[Tuple[PolygonOp, Point]]:
    """The polygon op describing where ``point`` touches ``polygon``, or ``None`` if outside."""
    location = classify_point(polygon, point, tolerance)
    if location.kind == PointLocationKind.ON_VERTEX:
        return PolygonOp.point(location.index, polygon.points[location.index]), point
    if location.kind == PointLocationKind.ON_EDGE:
        edge = polygon.segments()[location.index]
        return PolygonOp.edge_point(location.index, point, locate_on_segment(edge, point, tolerance)), point
    if location.kind == PointLocationKind.INSIDE:
        return PolygonOp.area_point(point), point
    return None


def polygon_overlaps_segment(polygon: Polygon, segment: Segment,
                             tolerance: Optional[Tolerance] = None) -> Optional[Tuple[List[PolygonOp], List[SegmentOp]]]:
    """Describe how a segment meets a closed polygon's boundary and area.

    Boundary contacts come from edge/segment overlaps. The segment is then cut
    at those contacts and every piece whose midpoint is inside or on the
    polygon is recorded: as a subsegment on the segment side, and as an edge
    subsegment (piece along an edge) or area segment on the polygon side.
    """
    tol = resolve_tolerance(tolerance)
    pg_ops = PolygonOpSet(polygon, tol)
    sg_ops = SegmentOpSet(segment, tol)
    for index, edge in enumerate(polygon.segments()):
        found = segment_overlaps_segment(edge, segment, tol)
        if found is not None:
            pg_ops.add(PolygonOp.from_segment_op(index, found[0], polygon))
            sg_ops.add(found[1])

    if segment.is_degenerate():
        found = polygon_overlaps_point(polygon, segment.i, tol)
        if found is None:
            return None
        pg_ops.add(found[0])
        sg_ops.add(SegmentOp.entire())
        return _both(pg_ops.to_nonempty(), sg_ops.to_nonempty())

    cuts = sg_ops.to_cuts()
    for start, end in zip(cuts, cuts[1:]):
        piece = Segment(start.point, end.point)
        if piece.is_degenerate():
            continue
        location = classify_point(polygon, piece.midpoint(), tol)
        if location.is_outside:
            continue
        sg_ops.add(SegmentOp.subsegment(piece))
        if location.kind == PointLocationKind.ON_EDGE:
            pg_ops.add(PolygonOp.edge_subsegment(location.index, piece))
        else:
            pg_ops.add(PolygonOp.area_segment(piece))
    return _both(pg_ops.to_nonempty(), sg_ops.to_nonempty())


def polygon_overlaps_multiline(polygon: Polygon, multiline: Polygon,
                               tolerance: Optional[Tolerance] = None) -> Optional[Tuple[List[PolygonOp], List[MultilineOp]]]:
    pg_ops = PolygonOpSet(polygon, tolerance)
    ml_ops = MultilineOpSet(multiline, tolerance)
    for index, segment in enumerate(multiline.segments()):
        found = polygon_overlaps_segment(polygon, segment, tolerance)
        if found is None:
            continue
        for op in found[0]:
            pg_ops.add(op)
        for op in found[1]:
            ml_ops.add(MultilineOp.from_segment_op(index, op))
    return _both(pg_ops.to_nonempty(), ml_ops.to_nonempty())


def polygon_overlaps_polygon(pg1: Polygon, pg2: Polygon,
                             tolerance: Optional[Tolerance] = None) -> Optional[Tuple[List[PolygonOp], List[PolygonOp]]]:
    """Describe how two closed polygons overlap.

    Boundary contacts are recorded edge by edge. When one polygon lies wholly
    inside the other, the outer one also gets a SUBPOLYGON op and the inner
    one is ENTIRE.
    """
    if pg1 == pg2:
        return [PolygonOp.entire()], [PolygonOp.entire()]
    tol = resolve_tolerance(tolerance)
    ops1 = PolygonOpSet(pg1, tol)
    ops2 = PolygonOpSet(pg2, tol)
    edges2 = pg2.segments()
    for i, e1 in enumerate(pg1.segments()):
        for j, e2 in enumerate(edges2):
            found = segment_overlaps_segment(e1, e2, tol)
            if found is not None:
                ops1.add(PolygonOp.from_segment_op(i, found[0], pg1))
                ops2.add(PolygonOp.from_segment_op(j, found[1], pg2))

    if totally_covers(pg1, pg2, tol):
        ops1.add(PolygonOp.subpolygon(pg2))
        ops2.add(PolygonOp.entire())
    elif totally_covers(pg2, pg1, tol):
        ops1.add(PolygonOp.entire())
        ops2.add(PolygonOp.subpolygon(pg1))
    return _both(ops1.to_nonempty(), ops2.to_nonempty())


def _both(a, b):
    if a is None or b is None:
        return None
    return a, b


def _is_entire(ops, entire_kind) -> bool:
    return ops is not None and len(ops) == 1 and ops[0].kind == entire_kind


def totally_covers(a, b, tolerance: Optional[Tolerance] = None) -> bool:
    """True if every point of ``b`` is also a point of ``a``.

    Closed polygons cover their area as well as their boundary; open
    polygons only cover their segments.

    Raises:
        UnsupportedGeometryError: If either side is a PolygonWithCavities,
            CurveArc, Group or Text

    Examples:
        >>> square = Polygon([(0, 0), (2, 0), (2, 2), (0, 2)])
        >>> totally_covers(square, Segment((0, 0), (1, 1)))
        True
        >>> totally_covers(Segment((0, 0), (1, 1)), square)
        False
    """
    for obj in (a, b):
        if isinstance(obj, _UNSUPPORTED):
            raise UnsupportedGeometryError(f"totally_covers is not implemented for {type(obj).__name__}")
        if not isinstance(obj, (Point, Segment, Polygon)):
            raise TypeError(f"Expected Point, Segment or Polygon, got {type(obj).__name__}")
    tol = resolve_tolerance(tolerance)

    if isinstance(b, Segment) and b.is_degenerate():
        b = b.i

    if isinstance(a, Point):
        return isinstance(b, Point) and a == b

    if isinstance(a, Segment):
        if isinstance(b, Point):
            return segment_overlaps_point(a, b, tol) is not None
        if isinstance(b, Segment):
            if a.is_degenerate():
                return False
            found = segment_overlaps_segment(a, b, tol)
            return found is not None and found[1].kind == SegmentOpKind.ENTIRE
        return False

    if not a.is_closed:
        if isinstance(b, Point):
            return multiline_overlaps_point(a, b, tol) is not None
        if isinstance(b, Segment):
            found = multiline_overlaps_segment(a, b, tol)
            return found is not None and _is_entire(found[1], SegmentOpKind.ENTIRE)
        if b.is_closed:
            return False
        found = multiline_overlaps_multiline(a, b, tol)
        return found is not None and _is_entire(found[1], MultilineOpKind.ENTIRE)

    if isinstance(b, Point):
        return polygon_overlaps_point(a, b, tol) is not None
    if isinstance(b, Segment):
        found = polygon_overlaps_segment(a, b, tol)
        return found is not None and _is_entire(found[1], SegmentOpKind.ENTIRE)
    if a == b:
        return True
    return all(totally_covers(a, edge, tol) for edge in b.segments())


__all__ = [
    'totally_covers',
    'point_overlaps_point',
    'segment_overlaps_point',
    'segment_overlaps_segment',
    'multiline_overlaps_point',
    'multiline_overlaps_segment',
    'multiline_overlaps_multiline',
    'polygon_overlaps_point',
    'polygon_overlaps_segment',
    'polygon_overlaps_multiline',
    'polygon_overlaps_polygon',
]
