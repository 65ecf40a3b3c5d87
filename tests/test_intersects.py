"""Tests for point and segment intersection."""

import pytest

from plotforge import (
    Intersection,
    OpinionKind,
    Percent,
    Point,
    Segment,
    SpecialCase,
    UnsupportedGeometryError,
    intersect,
    intersect_point_point,
    intersect_segment_point,
    intersect_segment_segment,
    rect,
)
from plotforge.intersects import colinear_overlap


class TestPointIntersections:
    """Point/point and segment/point."""

    def test_same_points(self):
        assert intersect_point_point(Point(1, 2), Point(1, 2)) == SpecialCase.POINTS_ARE_THE_SAME

    def test_different_points(self):
        assert intersect_point_point(Point(1, 2), Point(1, 2.5)) is None

    def test_segment_point_interior(self):
        isxn = intersect_segment_point(Segment((0, 0), (4, 0)), Point(1, 0))
        assert isxn.a.kind == OpinionKind.SEGMENT
        assert isxn.a.percent == Percent(0.25)
        assert isxn.b.kind == OpinionKind.POINT
        assert isxn.point == Point(1, 0)

    def test_segment_point_endpoint(self):
        isxn = intersect_segment_point(Segment((0, 0), (4, 0)), Point(4, 0))
        assert isxn.a.percent is Percent.ONE
        assert isxn.a.is_at_endpoint()

    def test_segment_point_miss(self):
        assert intersect_segment_point(Segment((0, 0), (4, 0)), Point(1, 1)) is None


class TestSegmentSegment:
    """Tests for intersect_segment_segment."""

    def test_crossing(self):
        isxn = intersect_segment_segment(Segment((0, 0), (2, 2)), Segment((0, 2), (2, 0)))
        assert isinstance(isxn, Intersection)
        assert isxn.point == Point(1, 1)
        assert isxn.a.percent == Percent(0.5)
        assert isxn.b.percent == Percent(0.5)

    def test_same(self):
        s = Segment((0, 0), (1, 1))
        assert intersect_segment_segment(s, Segment((0, 0), (1, 1))) == SpecialCase.LINE_SEGMENTS_ARE_THE_SAME

    def test_reversed(self):
        s = Segment((0, 0), (1, 1))
        assert intersect_segment_segment(s, s.flip()) == SpecialCase.LINE_SEGMENTS_ARE_THE_SAME_BUT_REVERSED

    def test_colinear_overlap(self):
        a = Segment((0, 0), (2, 0))
        b = Segment((1, 0), (3, 0))
        assert intersect_segment_segment(a, b) == SpecialCase.LINE_SEGMENTS_ARE_COLINEAR
        assert colinear_overlap(a, b) == Segment((1, 0), (2, 0))
        assert colinear_overlap(a.flip(), b) == Segment((2, 0), (1, 0))

    def test_colinear_contained(self):
        a = Segment((0, 0), (4, 0))
        b = Segment((3, 0), (1, 0))
        assert intersect_segment_segment(a, b) == SpecialCase.LINE_SEGMENTS_ARE_COLINEAR
        assert colinear_overlap(a, b) == Segment((1, 0), (3, 0))

    def test_colinear_end_to_end(self):
        isxn = intersect_segment_segment(Segment((0, 0), (1, 0)), Segment((1, 0), (2, 0)))
        assert isinstance(isxn, Intersection)
        assert isxn.point == Point(1, 0)
        assert isxn.a.percent is Percent.ONE
        assert isxn.b.percent is Percent.ZERO

    def test_colinear_apart(self):
        assert intersect_segment_segment(Segment((0, 0), (1, 0)), Segment((2, 0), (3, 0))) is None
        assert colinear_overlap(Segment((0, 0), (1, 0)), Segment((2, 0), (3, 0))) is None

    def test_shared_endpoint(self):
        isxn = intersect_segment_segment(Segment((0, 0), (1, 0)), Segment((1, 0), (1, 1)))
        assert isxn.point == Point(1, 0)
        assert isxn.a.percent is Percent.ONE
        assert isxn.b.percent is Percent.ZERO

    def test_t_junction_reports_exact_endpoint(self):
        isxn = intersect_segment_segment(Segment((0, 0), (2, 0)), Segment((1, 0), (1, 1)))
        assert isxn.point == Point(1, 0)
        assert isxn.a.percent == Percent(0.5)
        assert isxn.b.percent is Percent.ZERO

    def test_parallel(self):
        assert intersect_segment_segment(Segment((0, 0), (1, 0)), Segment((0, 1), (1, 1))) is None

    def test_miss(self):
        assert intersect_segment_segment(Segment((0, 0), (1, 0)), Segment((2, -1), (2, 1))) is None

    def test_degenerate(self):
        assert intersect_segment_segment(Segment((1, 1), (1, 1)), Segment((0, 0), (2, 2))) is None


class TestDispatch:
    """Tests for intersect."""

    def test_point_segment_is_flipped(self):
        isxn = intersect(Point(1, 0), Segment((0, 0), (2, 0)))
        assert isxn.a.kind == OpinionKind.POINT
        assert isxn.b.kind == OpinionKind.SEGMENT
        assert isxn.b.percent == Percent(0.5)

    def test_flip_swaps_opinions(self):
        isxn = intersect(Segment((0, 0), (2, 0)), Point(1, 0))
        assert isxn.flip().a == isxn.b
        assert isxn.flip().flip() == isxn

    def test_point_point(self):
        assert intersect(Point(0, 0), Point(0, 0)) == SpecialCase.POINTS_ARE_THE_SAME

    def test_point_segment_miss(self):
        assert intersect(Point(5, 5), Segment((0, 0), (2, 0))) is None

    def test_unsupported(self):
        with pytest.raises(UnsupportedGeometryError):
            intersect(rect((0, 0), 1, 1), Point(0, 0))

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="Expected Point or Segment"):
            intersect(Point(0, 0), (1, 1))
