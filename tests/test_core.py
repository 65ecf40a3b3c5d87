"""Tests for the Percent witness, tolerance policy and enum coercion."""

import pytest

from plotforge.core import (
    ConfigurationError,
    CropMode,
    DEFAULT_TOLERANCE,
    Percent,
    PercentRangeError,
    PlotforgeError,
    PolygonKind,
    Tolerance,
    coerce_enum,
    resolve_tolerance,
)
from plotforge.core.errors import (
    CropPreconditionError,
    CycleError,
    InterpolationError,
    InterpolationErrorKind,
    ThisPolygonNotClosed,
    UnsupportedGeometryError,
)


class TestPercent:
    """Tests for Percent."""

    def test_endpoints_are_distinguished(self):
        assert Percent.ZERO.is_zero()
        assert Percent.ONE.is_one()
        assert Percent.ZERO.is_at_boundary()
        assert Percent.ONE.is_at_boundary()
        assert not Percent(0.5).is_at_boundary()

    def test_ordering(self):
        """ZERO sorts before any interior value, ONE after."""
        values = [Percent.ONE, Percent(0.7), Percent.ZERO, Percent(0.2)]
        assert sorted(values) == [Percent.ZERO, Percent(0.2), Percent(0.7), Percent.ONE]

    def test_new_snaps_to_endpoints(self):
        assert Percent.new(1e-12) is Percent.ZERO
        assert Percent.new(1.0 - 1e-12) is Percent.ONE
        assert Percent.new(0.25) == Percent(0.25)

    def test_new_uses_given_tolerance(self):
        loose = Tolerance(percent=0.01)
        assert Percent.new(0.005, loose) is Percent.ZERO
        assert Percent.new(0.005) == Percent(0.005)

    def test_out_of_range_rejected(self):
        with pytest.raises(PercentRangeError):
            Percent(1.5)
        with pytest.raises(PercentRangeError):
            Percent.new(-0.1)
        with pytest.raises(PercentRangeError):
            Percent(float('nan'))

    def test_range_error_is_value_error(self):
        with pytest.raises(ValueError):
            Percent(-2.0)

    def test_float_conversion(self):
        assert float(Percent(0.5)) == 0.5


class TestTolerance:
    """Tests for Tolerance configuration."""

    def test_defaults(self):
        assert resolve_tolerance(None) is DEFAULT_TOLERANCE
        assert DEFAULT_TOLERANCE.winding == pytest.approx(1e-5)

    def test_custom_tolerance_passes_through(self):
        tol = Tolerance(point=1e-6)
        assert resolve_tolerance(tol) is tol

    def test_non_positive_rejected(self):
        with pytest.raises(ConfigurationError, match="point"):
            Tolerance(point=0.0)
        with pytest.raises(ConfigurationError, match="length"):
            Tolerance(length=-1.0)

    def test_wrong_type_rejected(self):
        with pytest.raises(TypeError, match="Expected Tolerance"):
            resolve_tolerance(0.001)

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_TOLERANCE.point = 1.0


class TestCoerceEnum:
    """Tests for coerce_enum."""

    def test_member_passes_through(self):
        assert coerce_enum(CropMode.EXCLUSIVE, CropMode) is CropMode.EXCLUSIVE

    def test_string_value(self):
        assert coerce_enum('inclusive', CropMode) is CropMode.INCLUSIVE
        assert coerce_enum('open', PolygonKind) is PolygonKind.OPEN

    def test_unknown_value(self):
        with pytest.raises(ValueError, match="Unknown CropMode"):
            coerce_enum('sideways', CropMode)


class TestErrorHierarchy:
    """All library errors share one root."""

    def test_precondition_errors(self):
        err = ThisPolygonNotClosed()
        assert isinstance(err, CropPreconditionError)
        assert isinstance(err, PlotforgeError)
        assert "not closed" in str(err)

    def test_cycle_error(self):
        assert isinstance(CycleError(), PlotforgeError)

    def test_unsupported_is_not_implemented(self):
        assert issubclass(UnsupportedGeometryError, NotImplementedError)
        assert issubclass(UnsupportedGeometryError, PlotforgeError)

    def test_interpolation_error_kind(self):
        err = InterpolationError(InterpolationErrorKind.POINTS_SAME)
        assert err.kind == InterpolationErrorKind.POINTS_SAME
        assert "same" in str(err)
