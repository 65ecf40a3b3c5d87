"""Coverage sets: non-redundant accumulations of ops against one primitive.

A set is created per call, fed ops in any order with :meth:`add`, and
finalized once with ``to_nonempty()`` or ``to_cuts()``. After every add:

1. no stored op totally covers another;
2. an incoming op already covered by a stored one is discarded;
3. an incoming op evicts the stored ops it covers;
4. subsegments of the same segment that abut or overlap are merged, and
   full coverage of a segment or multiline collapses to ``entire``.

Segment coverage is an :class:`~plotforge.coverage.intervals.IntervalList`;
multilines and polygons hold one :class:`SegmentOpSet` per edge plus their
vertex ops (and, for polygons, area ops).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..core.config import Tolerance, resolve_tolerance
from ..core.errors import InterpolationError, InterpolationErrorKind
from ..core.percent import Percent
from ..interpolate import locate_on_segment
from ..shapes import Point, Polygon, Segment
from .intervals import Interval, IntervalList
from .ops import (
    MultilineOp,
    MultilineOpKind,
    PolygonOp,
    PolygonOpKind,
    SegmentOp,
    SegmentOpKind,
)


@dataclass(frozen=True)
class Cut:
    """Where a primitive must be split.

    Attributes:
        point: The split point, exact where it came from an endpoint
        percent: How far along the (edge) segment the split is
        index: Edge index for multilines and polygons, 0 for a segment
    """
    point: Point
    percent: Percent
    index: int = 0

    def sort_key(self) -> Tuple[int, float]:
        return (self.index, self.percent.value)


def _dedup_cuts(cuts: List[Cut], eps: float) -> List[Cut]:
    out: List[Cut] = []
    for cut in cuts:
        if out and out[-1].index == cut.index and (
            out[-1].point == cut.point or cut.percent.value - out[-1].percent.value <= eps
        ):
            continue
        out.append(cut)
    return out


class SegmentOpSet:
    """Coverage of one segment.

    Args:
        original: The segment being covered
        tolerance: Tolerance policy (``None`` for the default)

    Examples:
        >>> ops = SegmentOpSet(Segment((0, 0), (4, 0)))
        >>> ops.add(SegmentOp.subsegment(Segment((0, 0), (2, 0))))
        >>> ops.add(SegmentOp.subsegment(Segment((2, 0), (3, 0))))
        >>> ops.to_nonempty()
        [SegmentOp(kind=<SegmentOpKind.SUBSEGMENT: 'subsegment'>, ..., segment=Segment(i=Point(x=0.0, y=0.0), f=Point(x=3.0, y=0.0)))]
    """

    def __init__(self, original: Segment, tolerance: Optional[Tolerance] = None):
        if not isinstance(original, Segment):
            raise TypeError(f"Expected Segment, got {type(original).__name__}")
        self._original = original
        self._tol = resolve_tolerance(tolerance)
        self._intervals = IntervalList(self._tol.percent)

    @property
    def original(self) -> Segment:
        return self._original

    @property
    def is_entire(self) -> bool:
        return self._intervals.is_full

    def __len__(self) -> int:
        return len(self._intervals)

    def _anchor(self, point: Point, percent: Optional[Percent] = None) -> Tuple[Point, Percent]:
        if percent is None:
            percent = locate_on_segment(self._original, point, self._tol)
            if percent is None:
                raise InterpolationError(InterpolationErrorKind.POINT_NOT_ON_LINE)
        if percent.is_at_boundary():
            point = self._original.point_at(percent)
        return point, percent

    def _interval_of(self, op: SegmentOp) -> Interval:
        if op.kind == SegmentOpKind.POINT:
            return Interval.at(*self._anchor(op.at, op.percent))
        if op.kind == SegmentOpKind.SUBSEGMENT:
            return Interval.between(*self._anchor(op.segment.i), *self._anchor(op.segment.f))
        return Interval(Percent.ZERO, Percent.ONE, self._original.i, self._original.f)

    @staticmethod
    def _op_of(interval: Interval) -> SegmentOp:
        if interval.is_point:
            return SegmentOp.point(interval.lo_point, interval.lo)
        return SegmentOp.subsegment(Segment(interval.lo_point, interval.hi_point))

    def add(self, op: SegmentOp) -> None:
        """Record ``op``; subsegments are stored running along the original.

        Raises:
            InterpolationError: If a subsegment endpoint is not on the original
        """
        self._intervals.add(self._interval_of(op))

    def covers(self, op: SegmentOp) -> bool:
        """True if the stored ops already cover ``op``."""
        return self._intervals.covers(self._interval_of(op))

    def discard_where(self, predicate: Callable[[SegmentOp], bool]) -> None:
        self._intervals.discard_where(lambda interval: predicate(self._op_of(interval)))

    def ops(self) -> List[SegmentOp]:
        if self._intervals.is_full:
            return [SegmentOp.entire()]
        return [self._op_of(interval) for interval in self._intervals]

    def to_nonempty(self) -> Optional[List[SegmentOp]]:
        """Sorted, deduplicated ops, or ``None`` if nothing was recorded."""
        ops = sorted(set(self.ops()), key=lambda op: op.sort_key())
        return ops or None

    def to_cuts(self) -> List[Cut]:
        """Cuts at both endpoints plus every stored op boundary, in order along the segment."""
        s = self._original
        cuts = [Cut(s.i, Percent.ZERO), Cut(s.f, Percent.ONE)]
        for interval in self._intervals:
            cuts.append(Cut(interval.lo_point, interval.lo))
            if not interval.is_point:
                cuts.append(Cut(interval.hi_point, interval.hi))
        cuts.sort(key=lambda cut: cut.percent.value)
        return _dedup_cuts(cuts, self._tol.percent)


class _BoundaryOpSet:
    """Per-edge coverage shared by multilines and polygons."""

    def __init__(self, original: Polygon, tolerance: Optional[Tolerance]):
        if not isinstance(original, Polygon):
            raise TypeError(f"Expected Polygon, got {type(original).__name__}")
        self._original = original
        self._tol = resolve_tolerance(tolerance)
        self._edges = original.segments()
        self._edge_sets = [SegmentOpSet(edge, self._tol) for edge in self._edges]
        self._vertices: Dict[int, Point] = {}
        self._entire = False

    @property
    def original(self) -> Polygon:
        return self._original

    @property
    def is_entire(self) -> bool:
        return self._entire

    def _vertex_count(self) -> int:
        return len(self._original.points)

    def _neighbour_edges(self, vertex: int) -> List[Tuple[int, Percent]]:
        n = self._vertex_count()
        if self._original.is_closed:
            return [(vertex, Percent.ZERO), ((vertex - 1) % n, Percent.ONE)]
        found = []
        if vertex < n - 1:
            found.append((vertex, Percent.ZERO))
        if vertex > 0:
            found.append((vertex - 1, Percent.ONE))
        return found

    def _vertex_covered(self, vertex: int) -> bool:
        if vertex in self._vertices:
            return True
        pt = self._original.points[vertex]
        return any(
            self._edge_sets[edge].covers(SegmentOp.point(pt, percent))
            for edge, percent in self._neighbour_edges(vertex)
            if not self._edges[edge].is_degenerate()
        )

    def _add_vertex(self, vertex: int) -> None:
        vertex %= self._vertex_count()
        if not self._vertex_covered(vertex):
            self._vertices[vertex] = self._original.points[vertex]

    def _add_edge_op(self, index: int, op: SegmentOp) -> None:
        if op.kind == SegmentOpKind.POINT and op.percent is not None and op.percent.is_at_boundary():
            self._add_vertex(index + (1 if op.percent.is_one() else 0))
            return
        self._edge_sets[index].add(op)
        for vertex in list(self._vertices):
            del self._vertices[vertex]
            if not self._vertex_covered(vertex):
                self._vertices[vertex] = self._original.points[vertex]

    def _boundary_ops(self) -> List[Tuple[int, Optional[int], Optional[SegmentOp], Point]]:
        found = []
        for vertex in sorted(self._vertices):
            found.append((vertex, None, None, self._vertices[vertex]))
        for index, edge_set in enumerate(self._edge_sets):
            for op in edge_set.ops():
                found.append((None, index, op, None))
        return found

    def to_cuts(self) -> List[Cut]:
        """Cuts ordered by ``(edge index, percent)``.

        Every vertex appears at Percent ZERO of its outgoing edge; an open
        polygon's last vertex closes the list at ONE of the last edge.
        """
        cuts: List[Cut] = []
        for index, edge_set in enumerate(self._edge_sets):
            for cut in edge_set.to_cuts():
                if cut.percent.is_one():
                    continue
                cuts.append(Cut(cut.point, cut.percent, index))
        if not self._original.is_closed:
            cuts.append(Cut(self._original.points[-1], Percent.ONE, len(self._edges) - 1))
        return cuts


class MultilineOpSet(_BoundaryOpSet):
    """Coverage of an open polygon (multiline)."""

    def __init__(self, original: Polygon, tolerance: Optional[Tolerance] = None):
        super().__init__(original, tolerance)

    def add(self, op: MultilineOp) -> None:
        if self._entire:
            return
        if op.kind == MultilineOpKind.ENTIRE:
            self._entire = True
            return
        if op.kind == MultilineOpKind.POINT:
            self._add_vertex(op.index)
        elif op.kind == MultilineOpKind.SEGMENT_POINT:
            self._add_edge_op(op.index, SegmentOp.point(op.at, op.percent))
        elif op.kind == MultilineOpKind.SUBSEGMENT:
            self._add_edge_op(op.index, SegmentOp.subsegment(op.segment))
        else:
            self._add_edge_op(op.index, SegmentOp.entire())
        if all(edge_set.is_entire for edge_set in self._edge_sets):
            self._entire = True

    def ops(self) -> List[MultilineOp]:
        if self._entire:
            return [MultilineOp.entire()]
        found = []
        for vertex, index, op, pt in self._boundary_ops():
            if op is None:
                found.append(MultilineOp.point(vertex, pt))
            else:
                found.append(MultilineOp.from_segment_op(index, op))
        return found

    def to_nonempty(self) -> Optional[List[MultilineOp]]:
        ops = sorted(set(self.ops()), key=lambda op: op.sort_key())
        return ops or None


class PolygonOpSet(_BoundaryOpSet):
    """Coverage of a closed polygon: boundary ops plus area ops.

    Boundary ops (vertices, edge points, edge subsegments, whole edges) are
    kept per edge. Area ops (points and segments inside the polygon,
    subpolygons) are compared geometrically with each other and with the
    boundary ops. A subpolygon equal to the polygon collapses to ``entire``.
    """

    def __init__(self, original: Polygon, tolerance: Optional[Tolerance] = None):
        super().__init__(original, tolerance)
        self._area: List[PolygonOp] = []

    def add(self, op: PolygonOp) -> None:
        if self._entire:
            return
        if op.kind == PolygonOpKind.ENTIRE or (
            op.kind == PolygonOpKind.SUBPOLYGON and op.polygon == self._original
        ):
            self._entire = True
            self._area = []
            return
        if op.is_area_op:
            self._add_area(op)
            return
        if any(area.totally_covers(op, self._original) for area in self._area):
            return
        if op.kind == PolygonOpKind.POINT:
            self._add_vertex(op.index)
        elif op.kind == PolygonOpKind.EDGE_POINT:
            self._add_edge_op(op.index, SegmentOp.point(op.at, op.percent))
        elif op.kind == PolygonOpKind.EDGE_SUBSEGMENT:
            self._add_edge_op(op.index, SegmentOp.subsegment(op.segment))
        else:
            self._add_edge_op(op.index, SegmentOp.entire())

    def _add_area(self, op: PolygonOp) -> None:
        original = self._original
        if any(area.totally_covers(op, original) for area in self._area):
            return
        self._area = [area for area in self._area if not op.totally_covers(area, original)]

        shape = op.to_shape(original)
        from .overlaps import totally_covers

        for vertex in list(self._vertices):
            if totally_covers(shape, self._vertices[vertex]):
                del self._vertices[vertex]
        for index, edge_set in enumerate(self._edge_sets):
            edge_set.discard_where(lambda seg_op: totally_covers(shape, seg_op.to_shape(edge_set.original)))
        self._area.append(op)

    def ops(self) -> List[PolygonOp]:
        if self._entire:
            return [PolygonOp.entire()]
        found = []
        for vertex, index, op, pt in self._boundary_ops():
            if op is None:
                found.append(PolygonOp.point(vertex, pt))
            else:
                found.append(PolygonOp.from_segment_op(index, op, self._original))
        found.extend(self._area)
        return found

    def to_nonempty(self) -> Optional[List[PolygonOp]]:
        ops = sorted(set(self.ops()), key=lambda op: op.sort_key())
        return ops or None


__all__ = [
    'Cut',
    'SegmentOpSet',
    'MultilineOpSet',
    'PolygonOpSet',
]
