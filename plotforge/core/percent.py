"""Percent: a float witnessed to lie in [0, 1]."""

import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .errors import PercentRangeError

if TYPE_CHECKING:
    from .config import Tolerance


@dataclass(frozen=True, order=True)
class Percent:
    """How far along a segment something happens, confined to [0, 1].

    ``Percent.ZERO`` and ``Percent.ONE`` are the segment's own endpoints and
    every other value is strictly interior, so a caller can tell "at a vertex"
    apart from "along an edge" without comparing floats.

    Attributes:
        value: The fraction along the segment

    Examples:
        >>> Percent.new(0.25)
        Percent(0.25)
        >>> Percent.new(1e-12) is Percent.ZERO
        True
        >>> Percent.ZERO < Percent(0.5) < Percent.ONE
        True
    """
    value: float

    def __post_init__(self):
        value = float(self.value)
        if math.isnan(value) or not 0.0 <= value <= 1.0:
            raise PercentRangeError(value)
        # -0.0 compares equal to 0.0 but prints oddly
        object.__setattr__(self, 'value', value + 0.0)

    @classmethod
    def new(cls, value: float, tolerance: Optional['Tolerance'] = None) -> 'Percent':
        """Build a Percent, snapping values near 0 or 1 to the exact endpoints.

        Args:
            value: Candidate fraction
            tolerance: Snap distance source; ``None`` uses the default policy

        Returns:
            ``Percent.ZERO``, ``Percent.ONE`` or an interior Percent

        Raises:
            PercentRangeError: If ``value`` lies outside [0, 1] beyond tolerance
        """
        from .config import resolve_tolerance

        eps = resolve_tolerance(tolerance).percent
        value = float(value)
        if math.isnan(value):
            raise PercentRangeError(value)
        if abs(value) <= eps:
            return cls.ZERO
        if abs(value - 1.0) <= eps:
            return cls.ONE
        return cls(value)

    def is_zero(self) -> bool:
        return self.value == 0.0

    def is_one(self) -> bool:
        return self.value == 1.0

    def is_at_boundary(self) -> bool:
        """True for ZERO and ONE, i.e. an endpoint of the segment."""
        return self.value == 0.0 or self.value == 1.0

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        if self.value == 0.0:
            return 'Percent.ZERO'
        if self.value == 1.0:
            return 'Percent.ONE'
        return f'Percent({self.value!r})'


Percent.ZERO = Percent(0.0)
Percent.ONE = Percent(1.0)


__all__ = ['Percent']
