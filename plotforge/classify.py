"""Point-in-polygon classification.

Exact boundary hits are resolved before any approximate test: a point equal
to a vertex is ON_VERTEX, a point on an edge is ON_EDGE, and only then does
the winding number decide INSIDE or OUTSIDE.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .core.config import Tolerance, resolve_tolerance
from .core.errors import ContainsPointError
from .interpolate import locate_on_segment
from .shapes import Point, PointLike, Polygon


class PointLocationKind(Enum):
    OUTSIDE = 'outside'
    INSIDE = 'inside'
    ON_VERTEX = 'on_vertex'
    ON_EDGE = 'on_edge'


@dataclass(frozen=True)
class PointLocation:
    """Where a point sits relative to a closed polygon.

    Attributes:
        kind: OUTSIDE, INSIDE, ON_VERTEX or ON_EDGE
        index: Vertex index for ON_VERTEX, edge index for ON_EDGE, else None
    """
    kind: PointLocationKind
    index: Optional[int] = None

    @classmethod
    def outside(cls) -> 'PointLocation':
        return cls(PointLocationKind.OUTSIDE)

    @classmethod
    def inside(cls) -> 'PointLocation':
        return cls(PointLocationKind.INSIDE)

    @classmethod
    def on_vertex(cls, index: int) -> 'PointLocation':
        return cls(PointLocationKind.ON_VERTEX, index)

    @classmethod
    def on_edge(cls, index: int) -> 'PointLocation':
        return cls(PointLocationKind.ON_EDGE, index)

    @property
    def is_inside(self) -> bool:
        return self.kind == PointLocationKind.INSIDE

    @property
    def is_outside(self) -> bool:
        return self.kind == PointLocationKind.OUTSIDE

    @property
    def is_on_boundary(self) -> bool:
        return self.kind in (PointLocationKind.ON_VERTEX, PointLocationKind.ON_EDGE)


def winding_angle(polygon: Polygon, point: Point) -> float:
    """Sum of signed angles subtended at ``point`` by each edge.

    About +/-2*pi for a point inside a simple polygon and about 0 outside.
    """
    rel = polygon.to_array() - np.array([point.x, point.y])
    nxt = np.roll(rel, -1, axis=0)
    cross = rel[:, 0] * nxt[:, 1] - rel[:, 1] * nxt[:, 0]
    dot = rel[:, 0] * nxt[:, 0] + rel[:, 1] * nxt[:, 1]
    return float(np.sum(np.arctan2(cross, dot)))


def classify_point(polygon: Polygon, point: PointLike, tolerance: Optional[Tolerance] = None) -> PointLocation:
    """Classify ``point`` against a closed polygon.

    Args:
        polygon: Closed polygon (any orientation)
        point: Point to classify
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        PointLocation; the kind does not depend on which vertex the polygon's
        point list starts at

    Raises:
        ContainsPointError: If ``polygon`` is open
        TypeError: If ``polygon`` is not a Polygon

    Examples:
        >>> square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> classify_point(square, (0.5, 0.5)).kind
        <PointLocationKind.INSIDE: 'inside'>
        >>> classify_point(square, (0, 0))
        PointLocation(kind=<PointLocationKind.ON_VERTEX: 'on_vertex'>, index=0)
    """
    if not isinstance(polygon, Polygon):
        raise TypeError(f"Expected Polygon, got {type(polygon).__name__}")
    if not polygon.is_closed:
        raise ContainsPointError("an open polygon does not contain points")
    tol = resolve_tolerance(tolerance)
    point = Point.coerce(point)

    for index, vertex in enumerate(polygon.points):
        if vertex == point:
            return PointLocation.on_vertex(index)

    n = len(polygon.points)
    for index, edge in enumerate(polygon.segments()):
        percent = locate_on_segment(edge, point, tol)
        if percent is None:
            continue
        if percent.is_zero():
            return PointLocation.on_vertex(index)
        if percent.is_one():
            return PointLocation.on_vertex((index + 1) % n)
        return PointLocation.on_edge(index)

    if abs(winding_angle(polygon, point)) <= tol.winding:
        return PointLocation.outside()
    return PointLocation.inside()


def point_is_inside(polygon: Polygon, point: PointLike, tolerance: Optional[Tolerance] = None) -> bool:
    return classify_point(polygon, point, tolerance).is_inside


def point_is_outside(polygon: Polygon, point: PointLike, tolerance: Optional[Tolerance] = None) -> bool:
    return classify_point(polygon, point, tolerance).is_outside


def point_is_inside_or_on_border(polygon: Polygon, point: PointLike, tolerance: Optional[Tolerance] = None) -> bool:
    return not classify_point(polygon, point, tolerance).is_outside


__all__ = [
    'PointLocationKind',
    'PointLocation',
    'classify_point',
    'winding_angle',
    'point_is_inside',
    'point_is_outside',
    'point_is_inside_or_on_border',
]
