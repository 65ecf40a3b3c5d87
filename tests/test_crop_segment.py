"""Tests for cropping points, segments and multilines."""

import math

import numpy as np
import pytest

from plotforge import (
    CropMode,
    CurveArc,
    Group,
    Point,
    Polygon,
    PolygonWithCavities,
    Segment,
    Text,
    ThisPolygonNotClosed,
    ThisPolygonNotPositivelyOriented,
    UnsupportedGeometryError,
    crop,
    multiline,
    rect,
    to_shapely,
)
from plotforge.crop import crop_segment, keeps, segment_pieces
from plotforge.classify import PointLocation


def _square() -> Polygon:
    return Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


def _comb() -> Polygon:
    return Polygon([
        (0, 0), (1, 0), (1, 3), (2, 3), (2, 0), (5, 0),
        (5, 4), (4, 4), (4, 1), (3, 1), (3, 5), (0, 5),
    ])


def _flat(segments):
    """Flatten segments into [x0, y0, x1, y1, ...] for approx comparison."""
    return [c for s in segments for c in (s.i.x, s.i.y, s.f.x, s.f.y)]


def _total_length(segments) -> float:
    return sum(s.length for s in segments)


class TestCropPoint:
    """Tests for cropping points."""

    def test_inside(self):
        assert crop(Point(0.5, 0.5), _square()) == [Point(0.5, 0.5)]
        assert crop(Point(0.5, 0.5), _square(), CropMode.EXCLUSIVE) == []

    def test_boundary_is_inclusive(self):
        assert crop(Point(0, 0.5), _square()) == [Point(0, 0.5)]
        assert crop(Point(1, 1), _square(), CropMode.EXCLUSIVE) == []

    def test_outside(self):
        assert crop(Point(2, 2), _square()) == []
        assert crop(Point(2, 2), _square(), CropMode.EXCLUSIVE) == [Point(2, 2)]


class TestCropSegment:
    """Tests for cropping segments."""

    def test_through_square_inclusive(self):
        result = crop(Segment((-0.5, 0.5), (1.5, 0.5)), _square(), CropMode.INCLUSIVE)
        assert result == [Segment((0, 0.5), (1, 0.5))]

    def test_through_square_exclusive(self):
        result = crop(Segment((-0.5, 0.5), (1.5, 0.5)), _square(), CropMode.EXCLUSIVE)
        assert result == [Segment((-0.5, 0.5), (0, 0.5)), Segment((1, 0.5), (1.5, 0.5))]

    def test_inclusive_and_exclusive_partition_the_segment(self):
        s = Segment((-1, -0.5), (2, 1.7))
        inside = crop(s, _comb(), CropMode.INCLUSIVE)
        outside = crop(s, _comb(), CropMode.EXCLUSIVE)
        assert _total_length(inside) + _total_length(outside) == pytest.approx(s.length)

    def test_comb(self):
        result = crop(Segment((0, 2), (5, 2)), _comb())
        assert _flat(result) == pytest.approx([0, 2, 1, 2, 2, 2, 3, 2, 4, 2, 5, 2])

    def test_comb_exclusive(self):
        result = crop(Segment((0, 2), (5, 2)), _comb(), CropMode.EXCLUSIVE)
        assert _flat(result) == pytest.approx([1, 2, 2, 2, 3, 2, 4, 2])

    def test_direction_is_preserved(self):
        result = crop(Segment((1.5, 0.5), (-0.5, 0.5)), _square())
        assert result == [Segment((1, 0.5), (0, 0.5))]

    def test_fully_inside_is_untouched(self):
        s = Segment((0.2, 0.2), (0.8, 0.7))
        assert crop(s, _square()) == [s]
        assert crop(s, _square(), CropMode.EXCLUSIVE) == []

    def test_along_edge_is_inclusive(self):
        s = Segment((0, 0), (1, 0))
        assert crop(s, _square()) == [s]
        assert crop(s, _square(), CropMode.EXCLUSIVE) == []

    def test_touching_a_vertex_from_outside(self):
        s = Segment((1, 1), (2, 2))
        assert crop(s, _square()) == []
        assert crop(s, _square(), CropMode.EXCLUSIVE) == [s]

    def test_idempotent(self):
        once = crop(Segment((0, 2), (5, 2)), _comb())
        twice = [piece for s in once for piece in crop(s, _comb())]
        assert twice == once

    def test_degenerate_segment(self):
        s = Segment((0.5, 0.5), (0.5, 0.5))
        assert crop(s, _square()) == [s]
        assert crop(s, _square(), CropMode.EXCLUSIVE) == []

    def test_string_mode(self):
        s = Segment((-0.5, 0.5), (1.5, 0.5))
        assert crop(s, _square(), 'exclusive') == crop(s, _square(), CropMode.EXCLUSIVE)

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown CropMode"):
            crop(Segment((0, 0), (1, 1)), _square(), 'sideways')

    def test_crop_segment_directly(self):
        assert crop_segment(Segment((-0.5, 0.5), (1.5, 0.5)), _square()) == [Segment((0, 0.5), (1, 0.5))]


class TestSegmentPieces:
    """Tests for segment_pieces and keeps."""

    def test_pieces_are_labelled(self):
        pieces = segment_pieces(Segment((-0.5, 0.5), (1.5, 0.5)), _square())
        assert [loc.kind.value for _, loc in pieces] == ['outside', 'inside', 'outside']
        assert pieces[0][0].f == pieces[1][0].i

    def test_keeps(self):
        assert keeps(PointLocation.on_edge(0), CropMode.INCLUSIVE)
        assert not keeps(PointLocation.on_vertex(0), CropMode.EXCLUSIVE)
        assert keeps(PointLocation.outside(), CropMode.EXCLUSIVE)


class TestCropMultiline:
    """Tests for cropping open polygons."""

    def _frame(self):
        return rect((0, 0), 2, 2)

    def test_inclusive_rechains(self):
        ml = multiline([(-1, 1), (1, 1), (1, 3)])
        assert crop(ml, self._frame()) == [multiline([(0, 1), (1, 1), (1, 2)])]

    def test_exclusive_splits(self):
        ml = multiline([(-1, 1), (1, 1), (1, 3)])
        assert crop(ml, self._frame(), CropMode.EXCLUSIVE) == [
            multiline([(-1, 1), (0, 1)]),
            multiline([(1, 2), (1, 3)]),
        ]

    def test_results_are_open(self):
        for piece in crop(multiline([(-1, 1), (3, 1), (3, 0.5), (-1, 0.5)]), self._frame()):
            assert not piece.is_closed

    def test_weaving_multiline(self):
        ml = multiline([(-1, 0.5), (2.5, 2.5), (6, 0.5)])
        inside = crop(ml, _comb())
        outside = crop(ml, _comb(), CropMode.EXCLUSIVE)
        total = sum(s.length for piece in inside + outside for s in piece.segments())
        assert total == pytest.approx(sum(s.length for s in ml.segments()))


class TestFramePreconditions:
    """The frame must be closed and counter-clockwise."""

    def test_open_frame(self):
        frame = multiline([(0, 0), (1, 0), (1, 1), (0, 1)])
        for subject in (Point(0.5, 0.5), Segment((0, 0), (1, 1)), multiline([(0, 0), (1, 1)]), rect((0, 0), 1, 1)):
            with pytest.raises(ThisPolygonNotClosed):
                crop(subject, frame)

    def test_clockwise_frame(self):
        with pytest.raises(ThisPolygonNotPositivelyOriented):
            crop(Segment((0, 0), (1, 1)), _square().reversed())

    def test_frame_must_be_polygon(self):
        with pytest.raises(TypeError, match="Expected Polygon"):
            crop(Point(0, 0), Segment((0, 0), (1, 1)))


class TestUnsupportedSubjects:
    """Shapes the clip engine does not handle."""

    def test_unsupported(self):
        subjects = [
            PolygonWithCavities(rect((0, 0), 4, 4), (rect((1, 1), 1, 1),)),
            CurveArc((0, 0), 1.0, 0.0, math.pi),
            Group([Point(0, 0)]),
            Text((0, 0), "label"),
        ]
        for subject in subjects:
            with pytest.raises(UnsupportedGeometryError):
                crop(subject, _square())

    def test_not_a_shape(self):
        with pytest.raises(TypeError, match="Expected a plotforge shape"):
            crop((0, 0), _square())


class TestRandomSegments:
    """Seeded random segments against the comb frame."""

    def test_partition_and_shapely_agree(self):
        rng = np.random.default_rng(7)
        frame = _comb()
        shapely_frame = to_shapely(frame)
        for x0, y0, x1, y1 in rng.uniform(-1.0, 6.0, size=(50, 4)):
            s = Segment((x0, y0), (x1, y1))
            inside = crop(s, frame, CropMode.INCLUSIVE)
            outside = crop(s, frame, CropMode.EXCLUSIVE)
            assert _total_length(inside) + _total_length(outside) == pytest.approx(s.length)
            expected = to_shapely(s).intersection(shapely_frame).length
            assert _total_length(inside) == pytest.approx(expected, abs=1e-9)
