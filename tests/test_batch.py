"""Tests for batch cropping and cropping to bounds."""

import pytest

from plotforge import (
    Bounds,
    CropMode,
    Point,
    PolygonWithCavities,
    Segment,
    ThisPolygonNotClosed,
    UnsupportedGeometryError,
    crop_many,
    crop_to_bounds,
    multiline,
    rect,
)


def _frame():
    return rect((0, 0), 2, 2)


def _cavity():
    return PolygonWithCavities(rect((0, 0), 4, 4), (rect((1, 1), 1, 1),))


class TestCropMany:
    """Tests for crop_many."""

    def test_all_succeed(self):
        subjects = [Point(1, 1), Segment((-1, 1), (3, 1)), rect((1, 1), 2, 2)]
        results, errors = crop_many(subjects, _frame())
        assert errors == []
        assert results[0] == [Point(1, 1)]
        assert results[1] == [Segment((0, 1), (2, 1))]
        assert results[2] == [rect((1, 1), 1, 1)]

    def test_exclusive(self):
        results, errors = crop_many([Point(1, 1), Point(3, 3)], _frame(), CropMode.EXCLUSIVE)
        assert results == [[], [Point(3, 3)]]

    def test_skip_failed_subject(self):
        subjects = [Point(1, 1), _cavity()]
        with pytest.warns(UserWarning, match="subject 1"):
            results, errors = crop_many(subjects, _frame(), on_error='skip')
        assert results == [[Point(1, 1)], []]
        assert len(errors) == 1
        assert errors[0][0] == 1
        assert isinstance(errors[0][1], UnsupportedGeometryError)

    def test_keep_failed_subject(self):
        cavity = _cavity()
        with pytest.warns(UserWarning):
            results, errors = crop_many([cavity], _frame(), on_error='keep')
        assert results == [[cavity]]

    def test_raise_failed_subject(self):
        with pytest.raises(UnsupportedGeometryError):
            crop_many([_cavity()], _frame(), on_error='raise')

    def test_clockwise_subject_is_collected(self):
        with pytest.warns(UserWarning):
            results, errors = crop_many([rect((0, 0), 1, 1).reversed()], _frame())
        assert results == [[]]
        assert len(errors) == 1

    def test_bad_frame_raises_immediately(self):
        with pytest.raises(ThisPolygonNotClosed):
            crop_many([Point(0, 0)], multiline([(0, 0), (1, 0), (1, 1)]))

    def test_invalid_on_error(self):
        with pytest.raises(ValueError, match="on_error"):
            crop_many([Point(0, 0)], _frame(), on_error='ignore')


class TestCropToBounds:
    """Tests for crop_to_bounds."""

    def test_segment(self):
        result = crop_to_bounds(Segment((-1, 1), (3, 1)), Bounds(0, 0, 2, 2))
        assert result == [Segment((0, 1), (2, 1))]

    def test_exclusive(self):
        result = crop_to_bounds(Point(5, 5), Bounds(0, 0, 2, 2), 'exclusive')
        assert result == [Point(5, 5)]

    def test_requires_bounds(self):
        with pytest.raises(TypeError, match="Expected Bounds"):
            crop_to_bounds(Point(0, 0), (0, 0, 2, 2))
