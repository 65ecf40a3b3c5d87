"""Clip engine: crop subjects against frame polygons."""

from .engine import (
    check_frame,
    crop,
    crop_multiline,
    crop_point,
    crop_segment,
    keeps,
    segment_pieces,
)
from .polygon import boundary_pieces, crop_polygon
from .reassembly import chain_fragments, ring_area, trace_rings
from .batch import crop_many, crop_to_bounds

__all__ = [
    'crop',
    'crop_point',
    'crop_segment',
    'crop_multiline',
    'crop_polygon',
    'crop_many',
    'crop_to_bounds',
    'check_frame',
    'keeps',
    'segment_pieces',
    'boundary_pieces',
    'chain_fragments',
    'trace_rings',
    'ring_area',
]
