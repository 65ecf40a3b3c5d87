"""Geometric value types: points, segments, polygons and friends.

Every shape here is immutable. Points compare exactly (no tolerance), which
lets the clipping engine deduplicate, sort and hash cut points; any epsilon
is applied explicitly by the algorithms that need one.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .core.config import Tolerance, resolve_tolerance
from .core.errors import ValidationError
from .core.percent import Percent
from .core.types import Orientation, PolygonKind, coerce_enum

PointLike = Union['Point', Tuple[float, float], Sequence[float]]


@dataclass(frozen=True, order=True)
class Point:
    """A 2D point with exact equality and lexicographic order.

    Attributes:
        x: X coordinate
        y: Y coordinate

    Examples:
        >>> Point(1, 2) + (1, 1)
        Point(x=2.0, y=3.0)
        >>> sorted({Point(1, 0), Point(0, 1), Point(1, 0)})
        [Point(x=0.0, y=1.0), Point(x=1.0, y=0.0)]
    """
    x: float
    y: float

    def __post_init__(self):
        x = float(self.x)
        y = float(self.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValidationError(f"Point coordinates must be finite, got ({x!r}, {y!r})")
        object.__setattr__(self, 'x', x + 0.0)
        object.__setattr__(self, 'y', y + 0.0)

    @classmethod
    def coerce(cls, value: PointLike) -> 'Point':
        """Accept a Point or any two-element sequence of numbers."""
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise TypeError(f"Expected Point or (x, y) pair, got {type(value).__name__}")
        return cls(x, y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: PointLike) -> 'Point':
        other = Point.coerce(other)
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: PointLike) -> 'Point':
        other = Point.coerce(other)
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> 'Point':
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> 'Point':
        return Point(self.x / k, self.y / k)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    def dot(self, other: PointLike) -> float:
        other = Point.coerce(other)
        return self.x * other.x + self.y * other.y

    def cross(self, other: PointLike) -> float:
        """Z component of the 3D cross product; positive when ``other`` is to the left."""
        other = Point.coerce(other)
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def dist(self, other: PointLike) -> float:
        other = Point.coerce(other)
        return math.hypot(self.x - other.x, self.y - other.y)

    def avg(self, other: PointLike) -> 'Point':
        other = Point.coerce(other)
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)

    midpoint = avg

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, order=True)
class Segment:
    """A directed line segment from ``i`` (initial) to ``f`` (final).

    Attributes:
        i: Initial point
        f: Final point
    """
    i: Point
    f: Point

    def __post_init__(self):
        object.__setattr__(self, 'i', Point.coerce(self.i))
        object.__setattr__(self, 'f', Point.coerce(self.f))

    def flip(self) -> 'Segment':
        return Segment(self.f, self.i)

    @property
    def length(self) -> float:
        return self.i.dist(self.f)

    def __abs__(self) -> float:
        return self.length

    def is_degenerate(self) -> bool:
        return self.i == self.f

    def vector(self) -> Point:
        return self.f - self.i

    def midpoint(self) -> Point:
        return self.i.avg(self.f)

    def slope(self) -> Optional[float]:
        """Rise over run, or ``None`` for a vertical segment."""
        run = self.f.x - self.i.x
        if run == 0.0:
            return None
        return (self.f.y - self.i.y) / run

    def dot(self, other: 'Segment') -> float:
        return self.vector().dot(other.vector())

    def extrapolate(self, t: float) -> Point:
        """Point at parameter ``t`` along the supporting line (not clamped)."""
        return self.i + self.vector() * float(t)

    def point_at(self, percent: Percent) -> Point:
        """Point ``percent`` of the way along; exact at the endpoints."""
        if percent.is_zero():
            return self.i
        if percent.is_one():
            return self.f
        return self.extrapolate(percent.value)

    def translate(self, offset: PointLike) -> 'Segment':
        return Segment(self.i + offset, self.f + offset)

    def try_add(self, other: 'Segment', tolerance: Optional[Tolerance] = None) -> Optional['Segment']:
        """Merge two colinear segments that meet head to tail.

        Args:
            other: Segment to merge with; either order of meeting is accepted
            tolerance: Tolerance policy (``None`` for the default); ``point``
                bounds the sine of the bend between the two

        Returns:
            The merged segment, or ``None`` if they do not abut in a straight line
        """
        tol = resolve_tolerance(tolerance)
        if self.f == other.i:
            first, second = self, other
        elif other.f == self.i:
            first, second = other, self
        else:
            return None
        a, b = first.vector(), second.vector()
        scale = a.norm() * b.norm()
        if scale == 0.0 or abs(a.cross(b)) > tol.point * scale or a.dot(b) <= 0.0:
            return None
        return Segment(first.i, second.f)


@dataclass(frozen=True, eq=False)
class Polygon:
    """An ordered ring or chain of points.

    A ``CLOSED`` polygon has an implied edge from its last point back to its
    first. An ``OPEN`` polygon is a multiline: no closing edge, no area, and
    it cannot be used as a crop frame.

    Closed polygons compare equal under any cyclic rotation of their points.

    Attributes:
        points: Vertices in order (a repeated closing point is dropped)
        kind: OPEN or CLOSED

    Examples:
        >>> sq = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> sq == Polygon([(1, 1), (0, 1), (0, 0), (1, 0)])
        True
        >>> sq.orientation()
        <Orientation.POSITIVE: 'positive'>
    """
    points: Tuple[Point, ...]
    kind: PolygonKind = PolygonKind.CLOSED

    def __post_init__(self):
        kind = coerce_enum(self.kind, PolygonKind)
        points = tuple(Point.coerce(p) for p in self.points)
        if kind == PolygonKind.CLOSED:
            if len(points) > 1 and points[0] == points[-1]:
                points = points[:-1]
            if len(points) < 3:
                raise ValidationError(f"closed polygon needs at least 3 points, got {len(points)}")
        elif len(points) < 2:
            raise ValidationError(f"open polygon needs at least 2 points, got {len(points)}")
        object.__setattr__(self, 'points', points)
        object.__setattr__(self, 'kind', kind)

    @property
    def is_closed(self) -> bool:
        return self.kind == PolygonKind.CLOSED

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if self.kind != other.kind or len(self.points) != len(other.points):
            return False
        if self.kind == PolygonKind.OPEN:
            return self.points == other.points
        n = len(self.points)
        doubled = other.points + other.points
        for offset, p in enumerate(other.points):
            if p == self.points[0] and doubled[offset:offset + n] == self.points:
                return True
        return False

    def __hash__(self) -> int:
        if self.kind == PolygonKind.OPEN:
            return hash((self.kind, self.points))
        return hash((self.kind, frozenset(self.points)))

    def segments(self) -> List[Segment]:
        """Edges in order: n for a closed polygon, n - 1 for an open one."""
        pts = self.points
        edges = [Segment(a, b) for a, b in zip(pts, pts[1:])]
        if self.kind == PolygonKind.CLOSED:
            edges.append(Segment(pts[-1], pts[0]))
        return edges

    def vertex(self, index: int) -> Point:
        """Vertex at ``index``, wrapping around for closed polygons."""
        if self.kind == PolygonKind.CLOSED:
            return self.points[index % len(self.points)]
        return self.points[index]

    def to_array(self) -> np.ndarray:
        return np.array([p.as_tuple() for p in self.points], dtype=float)

    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise rings."""
        coords = self.to_array()
        x, y = coords[:, 0], coords[:, 1]
        return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))

    def orientation(self) -> Optional[Orientation]:
        """POSITIVE or NEGATIVE by signed area, ``None`` for a zero-area ring."""
        area = self.signed_area()
        if area > 0.0:
            return Orientation.POSITIVE
        if area < 0.0:
            return Orientation.NEGATIVE
        return None

    def is_positively_oriented(self) -> bool:
        return self.orientation() == Orientation.POSITIVE

    def oriented_positively(self) -> 'Polygon':
        """Return this polygon wound counter-clockwise.

        Crop never reorients its inputs; callers use this to satisfy the frame
        precondition.

        Raises:
            ValidationError: If the polygon has zero area
        """
        orientation = self.orientation()
        if orientation is None:
            raise ValidationError("cannot orient a polygon with zero area")
        if orientation == Orientation.POSITIVE:
            return self
        return Polygon(tuple(reversed(self.points)), self.kind)

    def reversed(self) -> 'Polygon':
        return Polygon(tuple(reversed(self.points)), self.kind)

    def bounds(self) -> 'Bounds':
        return Bounds.of(self)

    def translate(self, offset: PointLike) -> 'Polygon':
        return Polygon(tuple(p + offset for p in self.points), self.kind)


def multiline(points: Iterable[PointLike]) -> Polygon:
    """Build an OPEN polygon (a polyline) from points."""
    return Polygon(tuple(points), PolygonKind.OPEN)


def rect(origin: PointLike, width: float, height: float) -> Polygon:
    """Build a positively oriented axis-aligned rectangle.

    Args:
        origin: Lower-left corner
        width: Extent along x (must be positive)
        height: Extent along y (must be positive)

    Returns:
        Closed counter-clockwise Polygon

    Examples:
        >>> rect((0, 0), 2, 1).points
        (Point(x=0.0, y=0.0), Point(x=2.0, y=0.0), Point(x=2.0, y=1.0), Point(x=0.0, y=1.0))
    """
    if not (width > 0 and height > 0):
        raise ValidationError(f"rect needs positive width and height, got {width!r} x {height!r}")
    o = Point.coerce(origin)
    return Polygon((o, o + (width, 0), o + (width, height), o + (0, height)))


@dataclass(frozen=True)
class PolygonWithCavities:
    """A closed outer polygon with closed holes cut out of it."""
    outer: Polygon
    inner: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'inner', tuple(self.inner))


@dataclass(frozen=True)
class CurveArc:
    """A circular arc from ``angle_i`` to ``angle_f`` radians."""
    center: Point
    radius: float
    angle_i: float
    angle_f: float

    def __post_init__(self):
        object.__setattr__(self, 'center', Point.coerce(self.center))


@dataclass(frozen=True)
class Group:
    """A bag of shapes drawn together."""
    objects: Tuple[object, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'objects', tuple(self.objects))


@dataclass(frozen=True)
class Text:
    """A text label anchored at ``point``."""
    point: Point
    text: str
    font_size: float = 12.0

    def __post_init__(self):
        object.__setattr__(self, 'point', Point.coerce(self.point))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        left: Minimum x
        bottom: Minimum y
        right: Maximum x
        top: Maximum y
    """
    left: float
    bottom: float
    right: float
    top: float

    def __post_init__(self):
        if self.left > self.right or self.bottom > self.top:
            raise ValidationError(
                f"Bounds edges are inverted: ({self.left}, {self.bottom}, {self.right}, {self.top})"
            )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def to_polygon(self) -> Polygon:
        """Rectangle covering these bounds, counter-clockwise from the lower left."""
        return rect((self.left, self.bottom), self.width, self.height)

    def union(self, other: 'Bounds') -> 'Bounds':
        return Bounds(
            min(self.left, other.left),
            min(self.bottom, other.bottom),
            max(self.right, other.right),
            max(self.top, other.top),
        )

    @classmethod
    def of(cls, geometry) -> 'Bounds':
        """Bounding box of any plotforge shape.

        Raises:
            ValidationError: For an empty Group
        """
        pts = np.array([p.as_tuple() for p in _bounding_points(geometry)], dtype=float)
        if len(pts) == 0:
            raise ValidationError("cannot bound an empty group")
        mins = pts.min(axis=0)
        maxs = pts.max(axis=0)
        return cls(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


def _bounding_points(geometry) -> List[Point]:
    if isinstance(geometry, Point):
        return [geometry]
    if isinstance(geometry, Segment):
        return [geometry.i, geometry.f]
    if isinstance(geometry, Polygon):
        return list(geometry.points)
    if isinstance(geometry, PolygonWithCavities):
        return list(geometry.outer.points)
    if isinstance(geometry, CurveArc):
        c, r = geometry.center, geometry.radius
        return [c - (r, r), c + (r, r)]
    if isinstance(geometry, Text):
        return [geometry.point]
    if isinstance(geometry, Group):
        pts = []
        for obj in geometry.objects:
            pts.extend(_bounding_points(obj))
        return pts
    raise TypeError(f"Expected a plotforge shape, got {type(geometry).__name__}")


__all__ = [
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
]
