"""One dimensional closed interval with an explicit empty value."""

from __future__ import annotations

from typing import NamedTuple


class Interval(NamedTuple):
    """A closed range of real numbers [min, max].

    The interval is empty if `min > max`. The canonical empty
    interval is `Interval(0, -1)` (see :meth:`none`).

    All operations return new values; an Interval is never mutated.
    """

    min: float = 0.0
    max: float = -1.0

    @classmethod
    def none(cls) -> Interval:
        """The canonical empty interval."""
        return cls(0.0, -1.0)

    @classmethod
    def of_pts(cls, a: float, b: float) -> Interval:
        """Create an interval spanning two values in any order."""
        if a > b:
            return cls(b, a)
        return cls(a, b)

    def is_none(self) -> bool:
        """Return True if this interval is empty."""
        return self.min > self.max

    def size(self) -> float:
        """Length of the interval. Zero if empty."""
        if self.is_none():
            return 0.0
        return self.max - self.min

    def center(self) -> float:
        """Midpoint of the interval."""
        return (self.min + self.max) / 2

    def contains(self, value: float) -> bool:
        """Return True if `value` lies within the interval."""
        return self.min <= value <= self.max

    def contains_interval(self, other: Interval) -> bool:
        """Return True if `other` is a subset of this interval.

        The empty interval is a subset of every interval.
        """
        if other.is_none():
            return True
        if self.is_none():
            return False
        return self.min <= other.min and other.max <= self.max

    def include(self, value: float) -> Interval:
        """Widen the interval to include `value`.

        Including a value in an empty interval yields `[value, value]`.
        """
        if self.is_none():
            return Interval(value, value)
        return Interval(min(self.min, value), max(self.max, value))

    def union(self, other: Interval) -> Interval:
        """Smallest interval containing both intervals.

        An empty operand is neutral.
        """
        if self.is_none():
            return other
        if other.is_none():
            return self
        return Interval(min(self.min, other.min), max(self.max, other.max))

    def intersect(self, other: Interval) -> Interval:
        """The overlap of both intervals.

        An empty operand yields an empty result, as do disjoint intervals.
        """
        if self.is_none() or other.is_none():
            return Interval.none()
        lo = max(self.min, other.min)
        hi = min(self.max, other.max)
        if lo > hi:
            return Interval.none()
        return Interval(lo, hi)

    def enlarge(self, value: float) -> Interval:
        """Grow both ends by `value`. No-op on an empty interval."""
        if self.is_none():
            return self
        return Interval(self.min - value, self.max + value)

    def reduce(self, value: float) -> Interval:
        """Shrink both ends by `value`. No-op on an empty interval."""
        if self.is_none():
            return self
        return Interval(self.min + value, self.max - value)

    def __add__(self, value: float) -> Interval:  # type: ignore [override]
        return Interval(self.min + value, self.max + value)

    def __sub__(self, value: float) -> Interval:
        return Interval(self.min - value, self.max - value)

    def __mul__(self, scale: float) -> Interval:  # type: ignore [override]
        if self.is_none():
            return self
        # A negative scale flips the interval
        if scale < 0:
            return Interval(self.max * scale, self.min * scale)
        return Interval(self.min * scale, self.max * scale)

    def __truediv__(self, scale: float) -> Interval:
        if self.is_none():
            return self
        if scale < 0:
            return Interval(self.max / scale, self.min / scale)
        return Interval(self.min / scale, self.max / scale)

    def __str__(self) -> str:
        if self.is_none():
            return '[]'
        return f'[{self.min},{self.max}]'
