"""Exception hierarchy for plotforge.

All errors raised by the library derive from :class:`PlotforgeError`, so a
caller cropping many independent objects can recover per object with a single
``except PlotforgeError``.
"""

from enum import Enum


class PlotforgeError(Exception):
    """Base class for every error raised by plotforge."""


class ValidationError(PlotforgeError, ValueError):
    """A shape could not be constructed from the given data.

    Examples:
        >>> Polygon([(0, 0), (1, 1)])
        Traceback (most recent call last):
        ...
        ValidationError: closed polygon needs at least 3 points, got 2
    """


class ConfigurationError(PlotforgeError, ValueError):
    """A configuration value (e.g. a tolerance) is out of range."""


class PercentRangeError(PlotforgeError, ValueError):
    """A value could not be expressed as a Percent in [0, 1]."""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"{value!r} is not in 0.0..=1.0")


class InterpolationErrorKind(Enum):
    """Why a point could not be located along a line."""
    BELOW_ZERO = 'below_zero'
    ABOVE_ONE = 'above_one'
    POINTS_SAME = 'points_same'
    POINT_NOT_ON_LINE = 'point_not_on_line'


_INTERPOLATION_MESSAGES = {
    InterpolationErrorKind.BELOW_ZERO: "the resultant percentage was below zero",
    InterpolationErrorKind.ABOVE_ONE: "the resultant percentage was above one",
    InterpolationErrorKind.POINTS_SAME: "points a and b are the same, so interpolation cannot be performed",
    InterpolationErrorKind.POINT_NOT_ON_LINE: "point i does not lie on the line ab",
}


class InterpolationError(PlotforgeError, ValueError):
    """Locating a point some percentage along a line failed.

    Attributes:
        kind: Which of the :class:`InterpolationErrorKind` cases occurred
    """

    def __init__(self, kind: InterpolationErrorKind):
        self.kind = kind
        super().__init__(_INTERPOLATION_MESSAGES[kind])


class ContainsPointError(PlotforgeError):
    """Asked whether an open polygon contains a point.

    An open polygon (a multiline) bounds no area, so containment is undefined.
    """


class CropError(PlotforgeError):
    """Base class for failures of a single crop call."""


class CropPreconditionError(CropError):
    """An input polygon violates the closed / positively oriented contract."""


class ThisPolygonNotClosed(CropPreconditionError):
    """The frame polygon is not closed."""

    def __init__(self, message: str = "The frame polygon is not closed."):
        super().__init__(message)


class ThatPolygonNotClosed(CropPreconditionError):
    """The subject polygon is not closed."""

    def __init__(self, message: str = "The inner polygon is not closed."):
        super().__init__(message)


class ThisPolygonNotPositivelyOriented(CropPreconditionError):
    """The frame polygon is not positively oriented."""

    def __init__(self, message: str = "The frame polygon is not positively oriented."):
        super().__init__(message)


class ThatPolygonNotPositivelyOriented(CropPreconditionError):
    """The subject polygon is not positively oriented."""

    def __init__(self, message: str = "The inner polygon is not positively oriented."):
        super().__init__(message)


class CycleError(CropError):
    """Reassembling cut fragments could not close a ring.

    This means the input geometry broke a precondition (self-intersecting
    polygon, wrong orientation) rather than being a recoverable input.
    """

    def __init__(self, message: str = "Constructing a resultant polygon failed because we encountered a cycle."):
        super().__init__(message)


class UnsupportedGeometryError(PlotforgeError, NotImplementedError):
    """The operation is not implemented for this kind of geometry.

    Raised for polygons with cavities, curve arcs, groups and text, and for
    crops whose answer would need a cavity.
    """


__all__ = [
    'PlotforgeError',
    'ValidationError',
    'ConfigurationError',
    'PercentRangeError',
    'InterpolationErrorKind',
    'InterpolationError',
    'ContainsPointError',
    'CropError',
    'CropPreconditionError',
    'ThisPolygonNotClosed',
    'ThatPolygonNotClosed',
    'ThisPolygonNotPositivelyOriented',
    'ThatPolygonNotPositivelyOriented',
    'CycleError',
    'UnsupportedGeometryError',
]
