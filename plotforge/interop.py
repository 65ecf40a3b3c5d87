"""Conversion between plotforge shapes and shapely geometries."""

from typing import Union

import shapely.geometry as sg
from shapely.geometry.base import BaseGeometry

from .core.errors import UnsupportedGeometryError
from .shapes import Point, Polygon, PolygonWithCavities, Segment, multiline


def to_shapely(geometry) -> BaseGeometry:
    """Convert a plotforge shape to its shapely equivalent.

    Args:
        geometry: Point, Segment, Polygon (open or closed) or PolygonWithCavities

    Returns:
        shapely Point, LineString or Polygon

    Examples:
        >>> to_shapely(rect((0, 0), 2, 1)).area
        2.0
    """
    if isinstance(geometry, Point):
        return sg.Point(geometry.x, geometry.y)
    if isinstance(geometry, Segment):
        return sg.LineString([geometry.i.as_tuple(), geometry.f.as_tuple()])
    if isinstance(geometry, Polygon):
        coords = [p.as_tuple() for p in geometry.points]
        if geometry.is_closed:
            return sg.Polygon(coords)
        return sg.LineString(coords)
    if isinstance(geometry, PolygonWithCavities):
        return sg.Polygon(
            [p.as_tuple() for p in geometry.outer.points],
            [[p.as_tuple() for p in hole.points] for hole in geometry.inner],
        )
    raise UnsupportedGeometryError(f"no shapely conversion for {type(geometry).__name__}")


def from_shapely(geometry: BaseGeometry) -> Union[Point, Segment, Polygon, PolygonWithCavities]:
    """Convert a shapely Point, LineString or Polygon to a plotforge shape.

    Two-point LineStrings become Segments, longer ones open Polygons. Shapely
    polygons keep their ring order; holes produce a PolygonWithCavities.

    Raises:
        UnsupportedGeometryError: For empty or multi-part geometries
    """
    if not isinstance(geometry, BaseGeometry):
        raise TypeError(f"Expected shapely geometry, got {type(geometry).__name__}")
    if geometry.is_empty:
        raise UnsupportedGeometryError("cannot convert an empty geometry")
    if isinstance(geometry, sg.Point):
        return Point(geometry.x, geometry.y)
    if isinstance(geometry, sg.LineString):
        coords = list(geometry.coords)
        if len(coords) == 2:
            return Segment(coords[0], coords[1])
        return multiline(coords)
    if isinstance(geometry, sg.Polygon):
        outer = Polygon(list(geometry.exterior.coords))
        if len(geometry.interiors) == 0:
            return outer
        return PolygonWithCavities(outer, tuple(Polygon(list(ring.coords)) for ring in geometry.interiors))
    raise UnsupportedGeometryError(f"no plotforge shape for {geometry.geom_type}")


__all__ = ['to_shapely', 'from_shapely']
