"""Coverage ops, coverage sets and overlap functions."""

from .intervals import Interval, IntervalList
from .ops import (
    MultilineOp,
    MultilineOpKind,
    PolygonOp,
    PolygonOpKind,
    SegmentOp,
    SegmentOpKind,
)
from .sets import Cut, MultilineOpSet, PolygonOpSet, SegmentOpSet
from .overlaps import (
    multiline_overlaps_multiline,
    multiline_overlaps_point,
    multiline_overlaps_segment,
    point_overlaps_point,
    polygon_overlaps_multiline,
    polygon_overlaps_point,
    polygon_overlaps_polygon,
    polygon_overlaps_segment,
    segment_overlaps_point,
    segment_overlaps_segment,
    totally_covers,
)

__all__ = [
    'Interval',
    'IntervalList',
    'SegmentOp',
    'SegmentOpKind',
    'MultilineOp',
    'MultilineOpKind',
    'PolygonOp',
    'PolygonOpKind',
    'Cut',
    'SegmentOpSet',
    'MultilineOpSet',
    'PolygonOpSet',
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
