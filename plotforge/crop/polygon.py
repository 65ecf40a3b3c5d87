"""Crop a closed polygon against a frame polygon.

Both boundaries are cut wherever they meet. Each subject piece is labelled
by where its midpoint sits in the frame, each frame piece by where its
midpoint sits in the subject, and the kept pieces are walked back into
rings:

=================================  ==========  ==========
piece                              INCLUSIVE   EXCLUSIVE
=================================  ==========  ==========
subject, inside frame              keep        drop
subject, outside frame             drop        keep
subject, on frame edge, same way   keep        drop
subject, on frame edge, opposite   drop        keep
frame, strictly inside subject     forward     reversed
frame, elsewhere                   drop        drop
=================================  ==========  ==========
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Union

from ..classify import PointLocation, PointLocationKind, classify_point
from ..core.config import Tolerance, resolve_tolerance
from ..core.errors import (
    ThatPolygonNotClosed,
    ThatPolygonNotPositivelyOriented,
    UnsupportedGeometryError,
)
from ..core.types import CropMode, Orientation, coerce_enum
from ..coverage import Cut, PolygonOp, PolygonOpSet, segment_overlaps_segment
from ..shapes import Bounds, Point, Polygon, Segment
from .engine import check_frame
from .reassembly import trace_rings

logger = logging.getLogger(__name__)


def boundary_pieces(polygon: Polygon, cuts: List[Cut]) -> List[Segment]:
    """Split a polygon's boundary at ``cuts`` (as produced by ``PolygonOpSet.to_cuts``)."""
    by_edge: Dict[int, List[Point]] = defaultdict(list)
    for cut in cuts:
        by_edge[cut.index].append(cut.point)

    pieces = []
    for index, edge in enumerate(polygon.segments()):
        pts = by_edge.get(index) or [edge.i]
        if pts[-1] != edge.f:
            pts = pts + [edge.f]
        for a, b in zip(pts, pts[1:]):
            if a != b:
                pieces.append(Segment(a, b))
    return pieces


def _bounds_disjoint(a: Bounds, b: Bounds) -> bool:
    return a.right < b.left or b.right < a.left or a.top < b.bottom or b.top < a.bottom


def _keep_subject_piece(piece: Segment, location: PointLocation, frame_edges: List[Segment],
                        mode: CropMode) -> bool:
    inclusive = mode == CropMode.INCLUSIVE
    if location.kind == PointLocationKind.INSIDE:
        return inclusive
    if location.kind == PointLocationKind.OUTSIDE:
        return not inclusive
    # on the frame boundary: keep when the two interiors lie on the same side
    same_way = piece.dot(frame_edges[location.index]) > 0.0
    return same_way if inclusive else not same_way


def crop_polygon(subject: Polygon, frame: Polygon, mode: Union[CropMode, str] = CropMode.INCLUSIVE,
                 tolerance: Optional[Tolerance] = None) -> List[Polygon]:
    """Crop a closed polygon to (or away from) a frame.

    Args:
        subject: Closed, positively oriented polygon
        frame: Closed, positively oriented polygon
        mode: INCLUSIVE for subject-and-frame, EXCLUSIVE for subject-minus-frame
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        Positively oriented result polygons (possibly none)

    Raises:
        ThisPolygonNotClosed: Frame is open
        ThisPolygonNotPositivelyOriented: Frame is not counter-clockwise
        ThatPolygonNotClosed: Subject is open
        ThatPolygonNotPositivelyOriented: Subject is not counter-clockwise
        CycleError: Kept pieces could not be walked into closed rings
        UnsupportedGeometryError: The result would need a cavity

    Examples:
        >>> a = rect((0, 0), 2, 2)
        >>> b = rect((1, 1), 2, 2)
        >>> crop_polygon(a, b, CropMode.INCLUSIVE) == [rect((1, 1), 1, 1)]
        True
    """
    mode = coerce_enum(mode, CropMode)
    tol = resolve_tolerance(tolerance)
    check_frame(frame)
    if not isinstance(subject, Polygon):
        raise TypeError(f"Expected Polygon, got {type(subject).__name__}")
    if not subject.is_closed:
        raise ThatPolygonNotClosed()
    if not subject.is_positively_oriented():
        raise ThatPolygonNotPositivelyOriented()

    inclusive = mode == CropMode.INCLUSIVE
    if subject == frame:
        return [subject] if inclusive else []
    if _bounds_disjoint(subject.bounds(), frame.bounds()):
        return [] if inclusive else [subject]

    subject_ops = PolygonOpSet(subject, tol)
    frame_ops = PolygonOpSet(frame, tol)
    frame_edges = frame.segments()
    for i, subject_edge in enumerate(subject.segments()):
        for j, frame_edge in enumerate(frame_edges):
            found = segment_overlaps_segment(subject_edge, frame_edge, tol)
            if found is None:
                continue
            subject_ops.add(PolygonOp.from_segment_op(i, found[0], subject))
            frame_ops.add(PolygonOp.from_segment_op(j, found[1], frame))

    arcs: List[Segment] = []
    for piece in boundary_pieces(subject, subject_ops.to_cuts()):
        location = classify_point(frame, piece.midpoint(), tol)
        if _keep_subject_piece(piece, location, frame_edges, mode):
            arcs.append(piece)
    for piece in boundary_pieces(frame, frame_ops.to_cuts()):
        if classify_point(subject, piece.midpoint(), tol).is_inside:
            arcs.append(piece if inclusive else piece.flip())

    rings = trace_rings(arcs, keep=set(subject.points) | set(frame.points), tolerance=tol)
    results = []
    for ring in rings:
        polygon = Polygon(ring)
        if polygon.orientation() != Orientation.POSITIVE:
            raise UnsupportedGeometryError(
                "the result of this crop has a cavity; PolygonWithCavities output is not implemented"
            )
        results.append(polygon)

    logger.debug("crop_polygon kept %d arcs, produced %d polygons", len(arcs), len(results))
    return results


__all__ = [
    'crop_polygon',
    'boundary_pieces',
]
