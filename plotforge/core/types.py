"""Enum definitions for plotforge operations."""

from enum import Enum
from typing import Type, TypeVar, Union

E = TypeVar('E', bound=Enum)


class CropMode(Enum):
    """Which part of a subject a crop keeps.

    Attributes:
        INCLUSIVE: Keep the part of the subject inside the frame
        EXCLUSIVE: Keep the part of the subject outside the frame

    Examples:
        >>> from plotforge import crop, CropMode
        >>> pieces = crop(segment, frame, CropMode.EXCLUSIVE)
        >>> pieces = crop(segment, frame, "inclusive")  # string values work too
    """
    INCLUSIVE = 'inclusive'
    EXCLUSIVE = 'exclusive'


class PolygonKind(Enum):
    """Whether a polygon implies a closing edge.

    Attributes:
        OPEN: A multiline; no edge from the last point back to the first
        CLOSED: A true polygon; the last point connects back to the first
    """
    OPEN = 'open'
    CLOSED = 'closed'


class Orientation(Enum):
    """Winding direction of a closed polygon.

    Attributes:
        POSITIVE: Counter-clockwise, positive signed area
        NEGATIVE: Clockwise, negative signed area
    """
    POSITIVE = 'positive'
    NEGATIVE = 'negative'


def coerce_enum(value: Union[E, str], enum_cls: Type[E]) -> E:
    """Accept either an enum member or its string value.

    Args:
        value: Enum member or the ``value`` of one
        enum_cls: Enum class to coerce into

    Returns:
        The matching enum member

    Raises:
        ValueError: If ``value`` names no member of ``enum_cls``
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(repr(m.value) for m in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__}: {value!r} (expected one of {valid})")


__all__ = [
    'CropMode',
    'PolygonKind',
    'Orientation',
    'coerce_enum',
]
