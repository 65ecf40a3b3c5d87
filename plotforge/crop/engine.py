"""Crop a subject against a frame polygon.

``crop`` is the single entry point: it validates the frame, then dispatches
on the subject's kind. Points stay points, segments split into segments,
multilines into multilines and polygons into polygons.
"""

import logging
from typing import List, Optional, Tuple, Union

from ..classify import PointLocation, PointLocationKind, classify_point
from ..core.config import Tolerance, resolve_tolerance
from ..core.errors import (
    ThisPolygonNotClosed,
    ThisPolygonNotPositivelyOriented,
    UnsupportedGeometryError,
)
from ..core.types import CropMode, coerce_enum
from ..coverage import SegmentOpSet, segment_overlaps_segment
from ..shapes import CurveArc, Group, Point, Polygon, PolygonWithCavities, Segment, Text, multiline
from .reassembly import chain_fragments

logger = logging.getLogger(__name__)

_UNSUPPORTED = (PolygonWithCavities, CurveArc, Group, Text)


def check_frame(frame: Polygon) -> None:
    """Validate the frame precondition.

    Raises:
        TypeError: If ``frame`` is not a Polygon
        ThisPolygonNotClosed: If ``frame`` is open
        ThisPolygonNotPositivelyOriented: If ``frame`` winds clockwise or has no area
    """
    if not isinstance(frame, Polygon):
        raise TypeError(f"Expected Polygon, got {type(frame).__name__}")
    if not frame.is_closed:
        raise ThisPolygonNotClosed()
    if not frame.is_positively_oriented():
        raise ThisPolygonNotPositivelyOriented()


def keeps(location: PointLocation, mode: CropMode) -> bool:
    """Whether a point at ``location`` survives a crop in ``mode``.

    Boundary points belong to the inclusive side.
    """
    if mode == CropMode.INCLUSIVE:
        return location.kind != PointLocationKind.OUTSIDE
    return location.kind == PointLocationKind.OUTSIDE


def crop_point(point: Point, frame: Polygon, mode: Union[CropMode, str] = CropMode.INCLUSIVE,
               tolerance: Optional[Tolerance] = None) -> List[Point]:
    mode = coerce_enum(mode, CropMode)
    check_frame(frame)
    if keeps(classify_point(frame, point, tolerance), mode):
        return [point]
    return []


def segment_pieces(segment: Segment, frame: Polygon,
                   tolerance: Optional[Tolerance] = None) -> List[Tuple[Segment, PointLocation]]:
    """Split ``segment`` wherever it meets the frame boundary.

    Returns:
        ``(piece, location of the piece's midpoint)`` pairs in order along
        the segment
    """
    tol = resolve_tolerance(tolerance)
    ops = SegmentOpSet(segment, tol)
    for edge in frame.segments():
        found = segment_overlaps_segment(segment, edge, tol)
        if found is not None:
            ops.add(found[0])

    pieces = []
    cuts = ops.to_cuts()
    for start, end in zip(cuts, cuts[1:]):
        piece = Segment(start.point, end.point)
        if piece.is_degenerate():
            continue
        pieces.append((piece, classify_point(frame, piece.midpoint(), tol)))
    return pieces


def crop_segment(segment: Segment, frame: Polygon, mode: Union[CropMode, str] = CropMode.INCLUSIVE,
                 tolerance: Optional[Tolerance] = None) -> List[Segment]:
    """Crop a segment to (or away from) a frame.

    Pieces whose midpoint lies inside or on the frame boundary are inclusive;
    pieces outside are exclusive. Neighbouring kept pieces are merged, so a
    segment crossing a convex frame yields one inclusive segment.

    Args:
        segment: Subject segment
        frame: Closed, positively oriented frame
        mode: INCLUSIVE or EXCLUSIVE (or their string values)
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        Kept pieces, in order along the segment

    Examples:
        >>> square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> crop_segment(Segment((-0.5, 0.5), (1.5, 0.5)), square)
        [Segment(i=Point(x=0.0, y=0.5), f=Point(x=1.0, y=0.5))]
    """
    mode = coerce_enum(mode, CropMode)
    check_frame(frame)
    if segment.is_degenerate():
        return [segment] if crop_point(segment.i, frame, mode, tolerance) else []

    kept: List[Segment] = []
    for piece, location in segment_pieces(segment, frame, tolerance):
        if not keeps(location, mode):
            continue
        if kept and kept[-1].f == piece.i:
            kept[-1] = Segment(kept[-1].i, piece.f)
        else:
            kept.append(piece)
    return kept


def crop_multiline(subject: Polygon, frame: Polygon, mode: Union[CropMode, str] = CropMode.INCLUSIVE,
                   tolerance: Optional[Tolerance] = None) -> List[Polygon]:
    """Crop an open polygon edge by edge and re-chain the surviving pieces."""
    mode = coerce_enum(mode, CropMode)
    check_frame(frame)
    fragments: List[Segment] = []
    for edge in subject.segments():
        if edge.is_degenerate():
            continue
        fragments.extend(crop_segment(edge, frame, mode, tolerance))
    return [multiline(chain) for chain in chain_fragments(fragments)]


def crop(subject, frame: Polygon, mode: Union[CropMode, str] = CropMode.INCLUSIVE,
         tolerance: Optional[Tolerance] = None) -> list:
    """Crop ``subject`` against ``frame``.

    Args:
        subject: Point, Segment, or Polygon (open or closed)
        frame: Closed, positively oriented polygon
        mode: INCLUSIVE keeps what is inside the frame, EXCLUSIVE what is outside
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        Zero or more shapes of the subject's kind

    Raises:
        ThisPolygonNotClosed: Frame is open
        ThisPolygonNotPositivelyOriented: Frame is not counter-clockwise
        ThatPolygonNotPositivelyOriented: Closed subject polygon is not counter-clockwise
        CycleError: Polygon pieces could not be reassembled
        UnsupportedGeometryError: Subject is a PolygonWithCavities, CurveArc,
            Group or Text, or a polygon result would need a cavity

    Examples:
        >>> square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> crop(Segment((-0.5, 0.5), (1.5, 0.5)), square, CropMode.EXCLUSIVE)
        [Segment(i=Point(x=-0.5, y=0.5), f=Point(x=0.0, y=0.5)), Segment(i=Point(x=1.0, y=0.5), f=Point(x=1.5, y=0.5))]
    """
    mode = coerce_enum(mode, CropMode)
    check_frame(frame)
    logger.debug("cropping %s against %d-gon, mode=%s", type(subject).__name__, len(frame), mode.value)

    if isinstance(subject, Point):
        return crop_point(subject, frame, mode, tolerance)
    if isinstance(subject, Segment):
        return crop_segment(subject, frame, mode, tolerance)
    if isinstance(subject, Polygon):
        if subject.is_closed:
            from .polygon import crop_polygon

            return crop_polygon(subject, frame, mode, tolerance)
        return crop_multiline(subject, frame, mode, tolerance)
    if isinstance(subject, _UNSUPPORTED):
        raise UnsupportedGeometryError(f"crop is not implemented for {type(subject).__name__}")
    raise TypeError(f"Expected a plotforge shape, got {type(subject).__name__}")


__all__ = [
    'crop',
    'crop_point',
    'crop_segment',
    'crop_multiline',
    'segment_pieces',
    'check_frame',
    'keeps',
]
