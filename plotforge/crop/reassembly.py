"""Reassemble cut fragments into chains and closed rings."""

import logging
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

import numpy as np

from ..core.config import Tolerance, resolve_tolerance
from ..core.errors import CycleError
from ..shapes import Point, PointLike, Segment

logger = logging.getLogger(__name__)

Fragment = Union[Segment, Sequence[PointLike]]


def chain_fragments(fragments: Iterable[Fragment]) -> List[List[Point]]:
    """Join fragments into maximal chains.

    A fragment extends the current chain when its first point equals the
    chain's last point; otherwise it starts a new chain. Order is preserved.

    Args:
        fragments: Segments or point sequences, in walking order

    Returns:
        List of point lists, one per chain

    Examples:
        >>> chain_fragments([Segment((0, 0), (1, 0)), Segment((1, 0), (1, 1)), Segment((2, 2), (3, 3))])
        [[Point(x=0.0, y=0.0), Point(x=1.0, y=0.0), Point(x=1.0, y=1.0)], [Point(x=2.0, y=2.0), Point(x=3.0, y=3.0)]]
    """
    chains: List[List[Point]] = []
    for fragment in fragments:
        if isinstance(fragment, Segment):
            pts = [fragment.i, fragment.f]
        else:
            pts = [Point.coerce(p) for p in fragment]
        if not pts:
            continue
        if chains and chains[-1][-1] == pts[0]:
            chains[-1].extend(pts[1:])
        else:
            chains.append(pts)
    return chains


def _clockwise_turn(incoming: Segment, outgoing: Segment) -> float:
    back = -incoming.vector()
    ahead = outgoing.vector()
    ccw = math.atan2(back.cross(ahead), back.dot(ahead))
    turn = (-ccw) % (2.0 * math.pi)
    return turn if turn > 0.0 else 2.0 * math.pi


def ring_area(points: Sequence[Point]) -> float:
    coords = np.array([p.as_tuple() for p in points], dtype=float)
    x, y = coords[:, 0], coords[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def _is_straight(prev: Point, here: Point, nxt: Point, tol: Tolerance) -> bool:
    a, b = here - prev, nxt - here
    scale = a.norm() * b.norm()
    return scale > 0.0 and abs(a.cross(b)) <= tol.point * scale and a.dot(b) > 0.0


def _split_loops(ring: List[Point]) -> List[List[Point]]:
    """Split a closed walk at every repeated vertex into simple loops."""
    loops: List[List[Point]] = []
    stack: List[Point] = []
    position: Dict[Point, int] = {}
    for p in ring:
        if p in position:
            start = position[p]
            for q in stack[start + 1:]:
                del position[q]
            loops.append(stack[start:])
            del stack[start + 1:]
        else:
            position[p] = len(stack)
            stack.append(p)
    loops.append(stack)
    return loops


def _simplify_ring(ring: List[Point], keep: Optional[Set[Point]], tol: Tolerance) -> Optional[List[Point]]:
    pts = [p for i, p in enumerate(ring) if p != ring[i - 1]] if len(ring) > 1 else list(ring)

    changed = True
    while changed and len(pts) > 3:
        changed = False
        for i, here in enumerate(pts):
            if keep is not None and here in keep:
                continue
            if _is_straight(pts[i - 1], here, pts[(i + 1) % len(pts)], tol):
                del pts[i]
                changed = True
                break

    if len(set(pts)) < 3:
        return None
    coords = np.array([p.as_tuple() for p in pts], dtype=float)
    scale = float(np.max(coords.max(axis=0) - coords.min(axis=0)))
    if abs(ring_area(pts)) <= tol.point * scale * scale:
        return None
    return pts


def trace_rings(arcs: Sequence[Segment], keep: Optional[Iterable[Point]] = None,
                tolerance: Optional[Tolerance] = None) -> List[List[Point]]:
    """Walk directed arcs into closed rings.

    Arcs are joined where one's final point equals another's initial point.
    At a junction the walk takes the sharpest left turn, so the region on the
    left of each ring stays as small as possible and rings touching at a
    single point come out separately. Every arc is used once. A walk that
    still passes through a vertex twice is split there into simple loops, so
    a clockwise loop pinched onto an outer ring comes out as its own ring.

    Args:
        arcs: Directed segments; zero-length arcs are ignored
        keep: Points that must survive simplification (original vertices);
            other vertices lying straight between their neighbours are dropped
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        One point list per ring (no repeated closing point), in the
        orientation it was walked. Rings with fewer than three distinct
        points or zero area are dropped.

    Raises:
        CycleError: If a walk reaches a point with no unused outgoing arc
            before returning to where it started
    """
    tol = resolve_tolerance(tolerance)
    keep_set = set(keep) if keep is not None else None

    outgoing: Dict[Point, List[int]] = defaultdict(list)
    for index, arc in enumerate(arcs):
        if not arc.is_degenerate():
            outgoing[arc.i].append(index)

    used: Set[int] = set()
    rings: List[List[Point]] = []
    for start, arc in enumerate(arcs):
        if start in used or arc.is_degenerate():
            continue
        used.add(start)
        ring = [arc.i]
        current = arc
        while current.f != arc.i:
            ring.append(current.f)
            candidates = [k for k in outgoing[current.f] if k not in used]
            if not candidates:
                raise CycleError(
                    f"Constructing a resultant polygon failed: no way forward from {current.f}"
                )
            nxt = min(candidates, key=lambda k: (_clockwise_turn(current, arcs[k]), k))
            used.add(nxt)
            current = arcs[nxt]
        for loop in _split_loops(ring):
            simplified = _simplify_ring(loop, keep_set, tol)
            if simplified is not None:
                rings.append(simplified)

    logger.debug("traced %d rings from %d arcs", len(rings), len(arcs))
    return rings


__all__ = [
    'chain_fragments',
    'trace_rings',
    'ring_area',
]
