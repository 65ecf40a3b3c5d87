"""Typed results of intersecting two primitives."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.percent import Percent
from ..shapes import Point


class OpinionKind(Enum):
    POINT = 'point'
    SEGMENT = 'segment'
    POLYGON = 'polygon'


class SpecialCase(Enum):
    """Degenerate pairings reported instead of an intersection point.

    Attributes:
        POINTS_ARE_THE_SAME: Two identical points
        LINE_SEGMENTS_ARE_THE_SAME: Identical segments, same direction
        LINE_SEGMENTS_ARE_THE_SAME_BUT_REVERSED: Identical segments, opposite direction
        LINE_SEGMENTS_ARE_COLINEAR: Colinear segments overlapping along a stretch
    """
    POINTS_ARE_THE_SAME = 'points_are_the_same'
    LINE_SEGMENTS_ARE_THE_SAME = 'line_segments_are_the_same'
    LINE_SEGMENTS_ARE_THE_SAME_BUT_REVERSED = 'line_segments_are_the_same_but_reversed'
    LINE_SEGMENTS_ARE_COLINEAR = 'line_segments_are_colinear'


@dataclass(frozen=True)
class Opinion:
    """What one participant of an intersection says about the contact.

    Attributes:
        kind: POINT, SEGMENT or POLYGON
        at: Where the contact happens
        percent: For SEGMENT opinions, how far along the segment ``at`` lies
    """
    kind: OpinionKind
    at: Optional[Point] = None
    percent: Optional[Percent] = None

    @classmethod
    def point(cls, at: Point) -> 'Opinion':
        return cls(OpinionKind.POINT, at)

    @classmethod
    def segment(cls, at: Point, percent: Percent) -> 'Opinion':
        return cls(OpinionKind.SEGMENT, at, percent)

    @classmethod
    def polygon(cls, at: Optional[Point] = None) -> 'Opinion':
        return cls(OpinionKind.POLYGON, at)

    def is_at_endpoint(self) -> bool:
        return self.percent is not None and self.percent.is_at_boundary()


@dataclass(frozen=True)
class Intersection:
    """A pair of opinions, one about each participant.

    ``a`` describes the first argument of the intersect call, ``b`` the second.
    """
    a: Opinion
    b: Opinion

    def flip(self) -> 'Intersection':
        return Intersection(self.b, self.a)

    @property
    def point(self) -> Point:
        return self.a.at


__all__ = [
    'OpinionKind',
    'SpecialCase',
    'Opinion',
    'Intersection',
]
