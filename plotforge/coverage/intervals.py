"""Coverage of a single segment as a sorted list of [lo, hi] percent intervals.

A point op is a degenerate interval (lo == hi); a subsegment op is a proper
one. Each end keeps the exact Point that produced it, so cut positions are
never recomputed from a rounded percent.
"""

from bisect import insort
from dataclasses import dataclass
from typing import Callable, Iterator, List

from ..core.percent import Percent
from ..shapes import Point


@dataclass(frozen=True)
class Interval:
    """A closed stretch [lo, hi] of a segment's parameter range."""
    lo: Percent
    hi: Percent
    lo_point: Point
    hi_point: Point

    @classmethod
    def at(cls, point: Point, percent: Percent) -> 'Interval':
        return cls(percent, percent, point, point)

    @classmethod
    def between(cls, p1: Point, percent1: Percent, p2: Point, percent2: Percent) -> 'Interval':
        if percent2 < percent1:
            p1, percent1, p2, percent2 = p2, percent2, p1, percent1
        return cls(percent1, percent2, p1, p2)

    @property
    def is_point(self) -> bool:
        return self.lo == self.hi

    @property
    def is_full(self) -> bool:
        return self.lo.is_zero() and self.hi.is_one()

    def sort_key(self):
        return (self.lo.value, self.hi.value)

    def __lt__(self, other: 'Interval') -> bool:
        return self.sort_key() < other.sort_key()

    def covers(self, other: 'Interval', eps: float = 0.0) -> bool:
        return self.lo.value - eps <= other.lo.value and other.hi.value <= self.hi.value + eps

    def touches(self, other: 'Interval', eps: float = 0.0) -> bool:
        return other.lo.value <= self.hi.value + eps and self.lo.value <= other.hi.value + eps

    def union(self, other: 'Interval') -> 'Interval':
        lo, lo_point = (self.lo, self.lo_point) if self.lo <= other.lo else (other.lo, other.lo_point)
        hi, hi_point = (self.hi, self.hi_point) if self.hi >= other.hi else (other.hi, other.hi_point)
        return Interval(lo, hi, lo_point, hi_point)


class IntervalList:
    """Sorted, non-redundant coverage of one segment.

    After every :meth:`add` no stored interval covers another, proper
    intervals never touch each other, and point intervals never sit inside a
    proper one.

    Args:
        eps: Percent slack used when testing cover and contact
    """

    def __init__(self, eps: float = 0.0):
        self._eps = eps
        self._items: List[Interval] = []

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_full(self) -> bool:
        return any(item.is_full for item in self._items)

    def covers(self, interval: Interval) -> bool:
        return any(item.covers(interval, self._eps) for item in self._items)

    def add(self, interval: Interval) -> bool:
        """Insert ``interval``, merging and evicting as needed.

        Returns:
            False if an existing interval already covered it, else True
        """
        if self.covers(interval):
            return False
        if interval.is_point:
            insort(self._items, interval)
            return True

        merged = interval
        rest = self._items
        changed = True
        while changed:
            changed = False
            keep = []
            for item in rest:
                if merged.covers(item, self._eps):
                    continue
                if not item.is_point and merged.touches(item, self._eps):
                    merged = merged.union(item)
                    changed = True
                    continue
                keep.append(item)
            rest = keep
        rest.append(merged)
        rest.sort()
        self._items = rest
        return True

    def discard_where(self, predicate: Callable[[Interval], bool]) -> None:
        self._items = [item for item in self._items if not predicate(item)]


__all__ = ['Interval', 'IntervalList']
