"""Pairwise intersection primitives and their typed results."""

from .opinion import Intersection, Opinion, OpinionKind, SpecialCase
from .primitives import (
    colinear_overlap,
    intersect,
    intersect_point_point,
    intersect_segment_point,
    intersect_segment_segment,
)

__all__ = [
    'Intersection',
    'Opinion',
    'OpinionKind',
    'SpecialCase',
    'colinear_overlap',
    'intersect',
    'intersect_point_point',
    'intersect_segment_point',
    'intersect_segment_segment',
]
