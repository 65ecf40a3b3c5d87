"""Batch cropping and cropping to a bounding box."""

import logging
import warnings
from typing import List, Optional, Sequence, Tuple, Union

from ..core.config import Tolerance
from ..core.errors import PlotforgeError
from ..core.types import CropMode, coerce_enum
from ..shapes import Bounds, Polygon
from .engine import check_frame, crop

logger = logging.getLogger(__name__)

_ON_ERROR = ('skip', 'keep', 'raise')


def crop_many(
    subjects: Sequence[object],
    frame: Polygon,
    mode: Union[CropMode, str] = CropMode.INCLUSIVE,
    on_error: str = 'skip',
    tolerance: Optional[Tolerance] = None,
) -> Tuple[List[list], List[Tuple[int, PlotforgeError]]]:
    """Crop many independent subjects against one frame.

    One subject failing does not abort the others. The frame is validated
    once up front, so frame precondition errors still raise immediately.

    Args:
        subjects: Shapes to crop
        frame: Closed, positively oriented frame
        mode: INCLUSIVE or EXCLUSIVE
        on_error: What to do when a subject fails:
            - 'skip': Its result is an empty list
            - 'keep': Its result is the uncropped subject
            - 'raise': Re-raise the error
        tolerance: Tolerance policy (``None`` for the default)

    Returns:
        Tuple of (results, errors): one result list per subject, and an
        ``(index, error)`` pair per failed subject

    Examples:
        >>> results, errors = crop_many(hatch_lines, frame)
        >>> print(f"Cropped {len(results)}, failed {len(errors)}")
    """
    if on_error not in _ON_ERROR:
        raise ValueError(f"on_error must be one of {_ON_ERROR}, got {on_error!r}")
    mode = coerce_enum(mode, CropMode)
    check_frame(frame)

    results: List[list] = []
    errors: List[Tuple[int, PlotforgeError]] = []
    for index, subject in enumerate(subjects):
        try:
            results.append(crop(subject, frame, mode, tolerance))
        except PlotforgeError as e:
            if on_error == 'raise':
                raise
            errors.append((index, e))
            results.append([subject] if on_error == 'keep' else [])
            logger.debug("crop of subject %d failed: %s", index, e)
            warnings.warn(f"crop of subject {index} failed: {e}", UserWarning, stacklevel=2)
    return results, errors


def crop_to_bounds(subject, bounds: Bounds, mode: Union[CropMode, str] = CropMode.INCLUSIVE,
                   tolerance: Optional[Tolerance] = None) -> list:
    """Crop ``subject`` against the rectangle described by ``bounds``.

    Raises:
        ValidationError: If ``bounds`` has zero width or height
    """
    if not isinstance(bounds, Bounds):
        raise TypeError(f"Expected Bounds, got {type(bounds).__name__}")
    return crop(subject, bounds.to_polygon(), mode, tolerance)


__all__ = [
    'crop_many',
    'crop_to_bounds',
]
