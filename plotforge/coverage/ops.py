"""Coverage ops: what part of a primitive another primitive touches.

A segment, multiline or polygon gets its own op vocabulary. Segment-level
ops lift into multiline and polygon ops for a given edge: Percent ZERO
becomes the edge's start vertex, ONE its end vertex, anything else a point
along the edge.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.percent import Percent
from ..shapes import Point, Polygon, Segment


class SegmentOpKind(Enum):
    POINT = 'point'
    SUBSEGMENT = 'subsegment'
    ENTIRE = 'entire'


class MultilineOpKind(Enum):
    POINT = 'point'
    SEGMENT_POINT = 'segment_point'
    SUBSEGMENT = 'subsegment'
    SEGMENT = 'segment'
    ENTIRE = 'entire'


class PolygonOpKind(Enum):
    POINT = 'point'
    EDGE_POINT = 'edge_point'
    EDGE_SUBSEGMENT = 'edge_subsegment'
    EDGE = 'edge'
    AREA_POINT = 'area_point'
    AREA_SEGMENT = 'area_segment'
    SUBPOLYGON = 'subpolygon'
    ENTIRE = 'entire'


def _shape_covers(a, b) -> bool:
    from .overlaps import totally_covers

    return totally_covers(a, b)


def _rank(kind) -> int:
    return list(type(kind)).index(kind)


@dataclass(frozen=True)
class SegmentOp:
    """Part of a segment implicated in an overlap.

    Attributes:
        kind: POINT, SUBSEGMENT or ENTIRE
        at: The point, for POINT ops
        percent: How far along the segment ``at`` lies, for POINT ops
        segment: The covered stretch, for SUBSEGMENT ops
    """
    kind: SegmentOpKind
    at: Optional[Point] = None
    percent: Optional[Percent] = None
    segment: Optional[Segment] = None

    @classmethod
    def point(cls, at: Point, percent: Percent) -> 'SegmentOp':
        return cls(SegmentOpKind.POINT, at=at, percent=percent)

    @classmethod
    def subsegment(cls, segment: Segment) -> 'SegmentOp':
        return cls(SegmentOpKind.SUBSEGMENT, segment=segment)

    @classmethod
    def entire(cls) -> 'SegmentOp':
        return cls(SegmentOpKind.ENTIRE)

    def to_shape(self, original: Segment):
        if self.kind == SegmentOpKind.POINT:
            return self.at
        if self.kind == SegmentOpKind.SUBSEGMENT:
            return self.segment
        return original

    def totally_covers(self, other: 'SegmentOp', original: Segment) -> bool:
        """True if every point ``other`` names is also named by this op."""
        if self.kind == SegmentOpKind.ENTIRE:
            return True
        return _shape_covers(self.to_shape(original), other.to_shape(original))

    def sort_key(self):
        if self.kind == SegmentOpKind.POINT:
            return (_rank(self.kind), self.percent.value, 0.0)
        if self.kind == SegmentOpKind.SUBSEGMENT:
            return (_rank(self.kind),) + self.segment.i.as_tuple()
        return (_rank(self.kind), 0.0, 0.0)


@dataclass(frozen=True)
class MultilineOp:
    """Part of a multiline implicated in an overlap.

    ``index`` is a vertex index for POINT and a segment index for the
    SEGMENT_POINT, SUBSEGMENT and SEGMENT kinds.
    """
    kind: MultilineOpKind
    index: Optional[int] = None
    at: Optional[Point] = None
    percent: Optional[Percent] = None
    segment: Optional[Segment] = None

    @classmethod
    def point(cls, index: int, at: Point) -> 'MultilineOp':
        return cls(MultilineOpKind.POINT, index, at=at)

    @classmethod
    def segment_point(cls, index: int, at: Point, percent: Percent) -> 'MultilineOp':
        return cls(MultilineOpKind.SEGMENT_POINT, index, at=at, percent=percent)

    @classmethod
    def subsegment(cls, index: int, segment: Segment) -> 'MultilineOp':
        return cls(MultilineOpKind.SUBSEGMENT, index, segment=segment)

    @classmethod
    def whole_segment(cls, index: int) -> 'MultilineOp':
        return cls(MultilineOpKind.SEGMENT, index)

    @classmethod
    def entire(cls) -> 'MultilineOp':
        return cls(MultilineOpKind.ENTIRE)

    @classmethod
    def from_segment_op(cls, index: int, op: SegmentOp) -> 'MultilineOp':
        """Lift an op about segment ``index`` of a multiline."""
        if op.kind == SegmentOpKind.POINT:
            if op.percent.is_zero():
                return cls.point(index, op.at)
            if op.percent.is_one():
                return cls.point(index + 1, op.at)
            return cls.segment_point(index, op.at, op.percent)
        if op.kind == SegmentOpKind.SUBSEGMENT:
            return cls.subsegment(index, op.segment)
        return cls.whole_segment(index)

    def to_shape(self, original: Polygon):
        if self.kind in (MultilineOpKind.POINT, MultilineOpKind.SEGMENT_POINT):
            return self.at
        if self.kind == MultilineOpKind.SUBSEGMENT:
            return self.segment
        if self.kind == MultilineOpKind.SEGMENT:
            return original.segments()[self.index]
        return original

    def totally_covers(self, other: 'MultilineOp', original: Polygon) -> bool:
        if self.kind == MultilineOpKind.ENTIRE:
            return True
        return _shape_covers(self.to_shape(original), other.to_shape(original))

    def sort_key(self):
        index = -1 if self.index is None else self.index
        percent = self.percent.value if self.percent is not None else 0.0
        return (_rank(self.kind), index, percent)


@dataclass(frozen=True)
class PolygonOp:
    """Part of a closed polygon (boundary or area) implicated in an overlap.

    ``index`` is a vertex index for POINT and an edge index for the EDGE_*
    kinds; the AREA_* kinds and SUBPOLYGON carry their geometry directly.
    """
    kind: PolygonOpKind
    index: Optional[int] = None
    at: Optional[Point] = None
    percent: Optional[Percent] = None
    segment: Optional[Segment] = None
    polygon: Optional[Polygon] = None

    @classmethod
    def point(cls, index: int, at: Point) -> 'PolygonOp':
        return cls(PolygonOpKind.POINT, index, at=at)

    @classmethod
    def edge_point(cls, index: int, at: Point, percent: Percent) -> 'PolygonOp':
        return cls(PolygonOpKind.EDGE_POINT, index, at=at, percent=percent)

    @classmethod
    def edge_subsegment(cls, index: int, segment: Segment) -> 'PolygonOp':
        return cls(PolygonOpKind.EDGE_SUBSEGMENT, index, segment=segment)

    @classmethod
    def edge(cls, index: int) -> 'PolygonOp':
        return cls(PolygonOpKind.EDGE, index)

    @classmethod
    def area_point(cls, at: Point) -> 'PolygonOp':
        return cls(PolygonOpKind.AREA_POINT, at=at)

    @classmethod
    def area_segment(cls, segment: Segment) -> 'PolygonOp':
        return cls(PolygonOpKind.AREA_SEGMENT, segment=segment)

    @classmethod
    def subpolygon(cls, polygon: Polygon) -> 'PolygonOp':
        return cls(PolygonOpKind.SUBPOLYGON, polygon=polygon)

    @classmethod
    def entire(cls) -> 'PolygonOp':
        return cls(PolygonOpKind.ENTIRE)

    @classmethod
    def from_segment_op(cls, index: int, op: SegmentOp, original: Polygon) -> 'PolygonOp':
        """Lift an op about edge ``index`` of ``original``; vertex indices wrap."""
        n = len(original.points)
        if op.kind == SegmentOpKind.POINT:
            if op.percent.is_zero():
                return cls.point(index % n, op.at)
            if op.percent.is_one():
                return cls.point((index + 1) % n, op.at)
            return cls.edge_point(index, op.at, op.percent)
        if op.kind == SegmentOpKind.SUBSEGMENT:
            return cls.edge_subsegment(index, op.segment)
        return cls.edge(index)

    @classmethod
    def from_multiline_op(cls, op: MultilineOp, original: Polygon) -> 'PolygonOp':
        n = len(original.points)
        if op.kind == MultilineOpKind.POINT:
            return cls.point(op.index % n, op.at)
        if op.kind == MultilineOpKind.SEGMENT_POINT:
            return cls.edge_point(op.index, op.at, op.percent)
        if op.kind == MultilineOpKind.SUBSEGMENT:
            return cls.edge_subsegment(op.index, op.segment)
        if op.kind == MultilineOpKind.SEGMENT:
            return cls.edge(op.index)
        return cls.entire()

    @property
    def is_area_op(self) -> bool:
        return self.kind in (PolygonOpKind.AREA_POINT, PolygonOpKind.AREA_SEGMENT, PolygonOpKind.SUBPOLYGON)

    def to_shape(self, original: Polygon):
        if self.kind in (PolygonOpKind.POINT, PolygonOpKind.EDGE_POINT, PolygonOpKind.AREA_POINT):
            return self.at
        if self.kind in (PolygonOpKind.EDGE_SUBSEGMENT, PolygonOpKind.AREA_SEGMENT):
            return self.segment
        if self.kind == PolygonOpKind.EDGE:
            return original.segments()[self.index]
        if self.kind == PolygonOpKind.SUBPOLYGON:
            return self.polygon
        return original

    def totally_covers(self, other: 'PolygonOp', original: Polygon) -> bool:
        if self.kind == PolygonOpKind.ENTIRE:
            return True
        if other.kind == PolygonOpKind.ENTIRE:
            return False
        return _shape_covers(self.to_shape(original), other.to_shape(original))

    def sort_key(self):
        index = -1 if self.index is None else self.index
        percent = self.percent.value if self.percent is not None else 0.0
        if self.segment is not None:
            anchor = self.segment.i.as_tuple()
        elif self.at is not None:
            anchor = self.at.as_tuple()
        else:
            anchor = (0.0, 0.0)
        return (_rank(self.kind), index, percent) + anchor


__all__ = [
    'SegmentOpKind',
    'MultilineOpKind',
    'PolygonOpKind',
    'SegmentOp',
    'MultilineOp',
    'PolygonOp',
]
