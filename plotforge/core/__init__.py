"""Core types and utilities for plotforge.

This module provides the enums, exceptions, tolerance policy and the Percent
witness used throughout the library.
"""

from .types import (
    CropMode,
    PolygonKind,
    Orientation,
    coerce_enum,
)

from .errors import (
    PlotforgeError,
    ValidationError,
    ConfigurationError,
    PercentRangeError,
    InterpolationErrorKind,
    InterpolationError,
    ContainsPointError,
    CropError,
    CropPreconditionError,
    ThisPolygonNotClosed,
    ThatPolygonNotClosed,
    ThisPolygonNotPositivelyOriented,
    ThatPolygonNotPositivelyOriented,
    CycleError,
    UnsupportedGeometryError,
)

from .config import Tolerance, DEFAULT_TOLERANCE, resolve_tolerance
from .percent import Percent

__all__ = [
    # Enums
    'CropMode',
    'PolygonKind',
    'Orientation',
    'coerce_enum',
    # Exceptions
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
    # Configuration
    'Tolerance',
    'DEFAULT_TOLERANCE',
    'resolve_tolerance',
    # Witnesses
    'Percent',
]
