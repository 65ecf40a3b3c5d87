"""Floating-point tolerance policy.

Every floating comparison in the engine goes through one :class:`Tolerance`
value, with one epsilon per kind of comparison. Callers that need a different
policy pass their own instance as ``tolerance=``; ``None`` means
:data:`DEFAULT_TOLERANCE`.
"""

from dataclasses import dataclass, fields
from typing import Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class Tolerance:
    """Epsilons used by the classification and clipping engine.

    Attributes:
        point: Absolute tolerance for coordinate coincidence (axis degeneracy
            during interpolation, cross-product collinearity tests)
        length: Relative tolerance of the ``|ab| == |ai| + |ib|`` test that
            decides whether a point lies on a segment
        percent: Snap distance of a parameter to 0 or 1, and how far outside
            [0, 1] a crossing parameter may fall before it is rejected
        winding: Absolute tolerance on the winding-number angle sum below
            which a point counts as outside

    Examples:
        >>> loose = Tolerance(length=1e-9)
        >>> crop(segment, frame, CropMode.INCLUSIVE, tolerance=loose)
    """
    point: float = 1e-9
    length: float = 1e-12
    percent: float = 1e-9
    winding: float = 1e-5

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise ConfigurationError(f"tolerance {f.name} must be positive, got {value!r}")


DEFAULT_TOLERANCE = Tolerance()


def resolve_tolerance(tolerance: Optional[Tolerance]) -> Tolerance:
    """Return ``tolerance`` or the library default when it is ``None``."""
    if tolerance is None:
        return DEFAULT_TOLERANCE
    if not isinstance(tolerance, Tolerance):
        raise TypeError(f"Expected Tolerance, got {type(tolerance).__name__}")
    return tolerance


__all__ = [
    'Tolerance',
    'DEFAULT_TOLERANCE',
    'resolve_tolerance',
]
