"""Tests for the geometric value types."""

import math

import pytest

from plotforge import (
    Bounds,
    CurveArc,
    Group,
    Orientation,
    Point,
    Polygon,
    PolygonKind,
    Segment,
    Text,
    Tolerance,
    ValidationError,
    multiline,
    rect,
)


def _square() -> Polygon:
    """Unit square, counter-clockwise."""
    return Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


class TestPoint:
    """Tests for Point."""

    def test_exact_equality_and_hash(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2

    def test_total_order(self):
        pts = [Point(1, 0), Point(0, 5), Point(0, 1)]
        assert sorted(pts) == [Point(0, 1), Point(0, 5), Point(1, 0)]

    def test_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(1, 2) + (1, 1) == Point(2, 3)
        assert Point(3, 4) - (1, 1) == Point(2, 3)
        assert Point(1, 2) * 2 == Point(2, 4)
        assert 2 * Point(1, 2) == Point(2, 4)
        assert Point(2, 4) / 2 == Point(1, 2)
        assert -Point(1, -2) == Point(-1, 2)

    def test_products_and_norm(self):
        assert Point(1, 0).dot((0, 1)) == 0.0
        assert Point(1, 0).cross((0, 1)) == 1.0
        assert Point(3, 4).norm() == 5.0
        assert Point(0, 0).dist((3, 4)) == 5.0
        assert Point(0, 0).avg((2, 2)) == Point(1, 1)

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            Point(float('inf'), 0)
        with pytest.raises(ValidationError):
            Point(0, float('nan'))

    def test_coerce(self):
        p = Point(1, 2)
        assert Point.coerce(p) is p
        assert Point.coerce((1, 2)) == p
        with pytest.raises(TypeError, match="Expected Point"):
            Point.coerce(3)

    def test_negative_zero_normalised(self):
        assert str(Point(-0.0, 0.0)) == str(Point(0.0, 0.0))


class TestSegment:
    """Tests for Segment."""

    def test_flip_and_length(self):
        s = Segment((0, 0), (3, 4))
        assert s.flip() == Segment((3, 4), (0, 0))
        assert s.length == 5.0
        assert abs(s) == 5.0

    def test_direction_matters(self):
        assert Segment((0, 0), (1, 0)) != Segment((1, 0), (0, 0))

    def test_midpoint_vector_slope(self):
        s = Segment((0, 0), (2, 4))
        assert s.midpoint() == Point(1, 2)
        assert s.vector() == Point(2, 4)
        assert s.slope() == 2.0
        assert Segment((1, 0), (1, 5)).slope() is None

    def test_extrapolate(self):
        s = Segment((0, 0), (2, 0))
        assert s.extrapolate(1.5) == Point(3, 0)
        assert s.extrapolate(-0.5) == Point(-1, 0)

    def test_try_add(self):
        a = Segment((0, 0), (1, 0))
        b = Segment((1, 0), (3, 0))
        assert a.try_add(b) == Segment((0, 0), (3, 0))
        assert b.try_add(a) == Segment((0, 0), (3, 0))
        assert a.try_add(Segment((1, 0), (1, 1))) is None
        assert a.try_add(Segment((5, 0), (6, 0))) is None

    def test_try_add_doubling_back(self):
        a = Segment((0, 0), (2, 0))
        assert a.try_add(Segment((2, 0), (1, 0))) is None
        assert a.try_add(a.flip()) is None

    def test_try_add_uses_tolerance(self):
        a = Segment((0, 0), (1, 0))
        slight = Segment((1, 0), (2, 1e-6))
        assert a.try_add(slight) is None
        assert a.try_add(slight, Tolerance(point=1e-5)) == Segment((0, 0), (2, 1e-6))

    def test_translate(self):
        assert Segment((0, 0), (1, 1)).translate((1, 2)) == Segment((1, 2), (2, 3))


class TestPolygon:
    """Tests for Polygon."""

    def test_closed_drops_repeated_closing_point(self):
        pg = Polygon([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert len(pg) == 3

    def test_minimum_points(self):
        with pytest.raises(ValidationError, match="at least 3"):
            Polygon([(0, 0), (1, 1)])
        with pytest.raises(ValidationError, match="at least 2"):
            multiline([(0, 0)])

    def test_rotation_invariant_equality(self):
        assert _square() == Polygon([(1, 1), (0, 1), (0, 0), (1, 0)])
        assert hash(_square()) == hash(Polygon([(1, 0), (1, 1), (0, 1), (0, 0)]))
        assert _square() != _square().reversed()

    def test_open_equality_is_pointwise(self):
        assert multiline([(0, 0), (1, 0), (1, 1)]) != multiline([(1, 0), (1, 1), (0, 0)])
        assert multiline([(0, 0), (1, 0)]) != Polygon([(0, 0), (1, 0), (1, 1)])

    def test_segments(self):
        assert len(_square().segments()) == 4
        assert _square().segments()[-1] == Segment((0, 1), (0, 0))
        assert len(multiline([(0, 0), (1, 0), (1, 1)]).segments()) == 2

    def test_kind_from_string(self):
        assert Polygon([(0, 0), (1, 0)], 'open').kind == PolygonKind.OPEN

    def test_orientation(self):
        assert _square().signed_area() == pytest.approx(1.0)
        assert _square().orientation() == Orientation.POSITIVE
        assert _square().reversed().orientation() == Orientation.NEGATIVE
        assert Polygon([(0, 0), (1, 0), (2, 0)]).orientation() is None

    def test_oriented_positively(self):
        square = _square()
        assert square.reversed().oriented_positively() == square
        assert square.oriented_positively() is square
        with pytest.raises(ValidationError):
            Polygon([(0, 0), (1, 0), (2, 0)]).oriented_positively()

    def test_vertex_wraps(self):
        assert _square().vertex(4) == Point(0, 0)
        assert _square().vertex(-1) == Point(0, 1)

    def test_translate(self):
        assert _square().translate((1, 1)) == rect((1, 1), 1, 1)


class TestConstructors:
    """Tests for rect and multiline."""

    def test_rect_is_positive(self):
        r = rect((1, 2), 3, 4)
        assert r.is_positively_oriented()
        assert r.signed_area() == pytest.approx(12.0)

    def test_rect_needs_positive_size(self):
        with pytest.raises(ValidationError):
            rect((0, 0), 0, 1)

    def test_multiline_is_open(self):
        ml = multiline([(0, 0), (1, 1), (2, 0)])
        assert not ml.is_closed


class TestBounds:
    """Tests for Bounds."""

    def test_of_polygon(self):
        b = Bounds.of(Polygon([(0, 0), (4, 1), (2, 3)]))
        assert b == Bounds(0, 0, 4, 3)
        assert b.width == 4 and b.height == 3

    def test_of_group_and_arc(self):
        group = Group([Point(5, 5), CurveArc((0, 0), 1.0, 0.0, math.pi), Text((2, -3), "hi")])
        assert Bounds.of(group) == Bounds(-1, -3, 5, 5)

    def test_to_polygon(self):
        assert Bounds(0, 0, 2, 1).to_polygon() == rect((0, 0), 2, 1)

    def test_union(self):
        assert Bounds(0, 0, 1, 1).union(Bounds(2, -1, 3, 0)) == Bounds(0, -1, 3, 1)

    def test_inverted_rejected(self):
        with pytest.raises(ValidationError):
            Bounds(1, 0, 0, 1)

    def test_empty_group_rejected(self):
        with pytest.raises(ValidationError):
            Bounds.of(Group([]))
