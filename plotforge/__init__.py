"""Plotforge - overlap classification and clipping for pen-plotter geometry.

This library classifies how points, segments, multilines and polygons meet a
frame polygon, and crops them to the inside (inclusive) or outside
(exclusive) of that frame.
"""


# Shapes
from .shapes import (
    Point,
    Segment,
    Polygon,
    PolygonWithCavities,
    CurveArc,
    Group,
    Text,
    Bounds,
    multiline,
    rect,
)

# Point classification
from .classify import (
    PointLocation,
    PointLocationKind,
    classify_point,
    point_is_inside,
    point_is_outside,
    point_is_inside_or_on_border,
)

# Intersection primitives
from .intersects import (
    Intersection,
    Opinion,
    OpinionKind,
    SpecialCase,
    intersect,
    intersect_point_point,
    intersect_segment_point,
    intersect_segment_segment,
)

# Coverage sets
from .coverage import (
    Cut,
    SegmentOp,
    MultilineOp,
    PolygonOp,
    SegmentOpSet,
    MultilineOpSet,
    PolygonOpSet,
    totally_covers,
)

# Cropping
from .crop import (
    crop,
    crop_polygon,
    crop_many,
    crop_to_bounds,
    chain_fragments,
    trace_rings,
)

# Shapely interop
from .interop import to_shapely, from_shapely

# Core types
from .core import (
    CropMode,
    PolygonKind,
    Orientation,
    Percent,
    Tolerance,
    DEFAULT_TOLERANCE,
)

# Core exceptions
from .core import (
    PlotforgeError,
    ValidationError,
    ConfigurationError,
    PercentRangeError,
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

__version__ = "0.1.0"

__all__ = [
    # Shapes
    'Point',
    'Segment',
    'Polygon',
    'PolygonWithCavities',
    'CurveArc',
    'Group',
    'Text',
    'Bounds',
    'multiline',
    'rect',
    # Classification
    'PointLocation',
    'PointLocationKind',
    'classify_point',
    'point_is_inside',
    'point_is_outside',
    'point_is_inside_or_on_border',
    # Intersection
    'Intersection',
    'Opinion',
    'OpinionKind',
    'SpecialCase',
    'intersect',
    'intersect_point_point',
    'intersect_segment_point',
    'intersect_segment_segment',
    # Coverage
    'Cut',
    'SegmentOp',
    'MultilineOp',
    'PolygonOp',
    'SegmentOpSet',
    'MultilineOpSet',
    'PolygonOpSet',
    'totally_covers',
    # Cropping
    'crop',
    'crop_polygon',
    'crop_many',
    'crop_to_bounds',
    'chain_fragments',
    'trace_rings',
    # Interop
    'to_shapely',
    'from_shapely',
    # Core types
    'CropMode',
    'PolygonKind',
    'Orientation',
    'Percent',
    'Tolerance',
    'DEFAULT_TOLERANCE',
    # Exceptions
    'PlotforgeError',
    'ValidationError',
    'ConfigurationError',
    'PercentRangeError',
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
