"""Axis-aligned bounding box built from a pair of intervals."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, NamedTuple

from .interval import Interval
from .point import P

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .point import TPoint


class BBox(NamedTuple):
    """Axis-aligned rectangle given by an X and a Y interval.

    The box is empty if either interval is empty.
    """

    x: Interval = Interval.none()
    y: Interval = Interval.none()

    @classmethod
    def none(cls) -> BBox:
        """The empty bounding box."""
        return cls(Interval.none(), Interval.none())

    @classmethod
    def new(cls, x0: float, y0: float, x1: float, y1: float) -> BBox:
        """Create a box from two opposite corner coordinates in any order."""
        return cls(Interval.of_pts(x0, x1), Interval.of_pts(y0, y1))

    @classmethod
    def of_ranges(cls, x: Interval, y: Interval) -> BBox:
        """Create a box from an X and a Y interval."""
        return cls(x, y)

    @classmethod
    def of_points(cls, points: Iterable[TPoint]) -> BBox:
        """The smallest box containing all the points."""
        bbox = cls.none()
        for p in points:
            bbox = bbox.include(p)
        return bbox

    @classmethod
    def of_cwh(cls, center: TPoint, width: float, height: float) -> BBox:
        """Create a box from its center, width and height."""
        w2 = width / 2
        h2 = height / 2
        return cls.new(
            center[0] - w2, center[1] - h2, center[0] + w2, center[1] + h2
        )

    @property
    def xrange(self) -> Interval:
        """The X interval."""
        return self.x

    @property
    def yrange(self) -> Interval:
        """The Y interval."""
        return self.y

    @property
    def width(self) -> float:
        return self.x.size()

    @property
    def height(self) -> float:
        return self.y.size()

    def is_none(self) -> bool:
        """Return True if this box is empty."""
        return self.x.is_none() or self.y.is_none()

    def get_wh(self) -> tuple[float, float]:
        """Width and height."""
        return (self.width, self.height)

    def center(self) -> P:
        return P(self.x.center(), self.y.center())

    def get_cwh(self) -> tuple[P, float, float]:
        """Center, width and height."""
        return (self.center(), self.width, self.height)

    def get_bounds(self) -> tuple[float, float, float, float]:
        """Minimum corner, width and height as (x, y, w, h)."""
        return (self.x.min, self.y.min, self.width, self.height)

    def corners(self) -> list[P]:
        """The four corners, anticlockwise starting at the minimum corner."""
        return [
            P(self.x.min, self.y.min),
            P(self.x.max, self.y.min),
            P(self.x.max, self.y.max),
            P(self.x.min, self.y.max),
        ]

    def as_points(self, close: bool = False) -> list[P]:
        """The corners as a polygon, optionally closed."""
        points = self.corners()
        if close:
            points.append(points[0])
        return points

    def include(self, p: TPoint) -> BBox:
        """Grow the box to include a point."""
        return BBox(self.x.include(p[0]), self.y.include(p[1]))

    def add_as_points(self, points: Iterable[TPoint]) -> BBox:
        """Grow the box to include all the points."""
        bbox = self
        for p in points:
            bbox = bbox.include(p)
        return bbox

    def contains(self, p: TPoint) -> bool:
        """Return True if the point is inside or on the box."""
        return self.x.contains(p[0]) and self.y.contains(p[1])

    def contains_bbox(self, other: BBox) -> bool:
        """Return True if `other` lies completely within this box."""
        if other.is_none():
            return True
        if self.is_none():
            return False
        return self.x.contains_interval(other.x) and self.y.contains_interval(
            other.y
        )

    def pt_within(self, p: TPoint) -> P:
        """Map a point to fractional box coordinates.

        (0, 0) is the minimum corner and (1, 1) the maximum corner.
        A point is returned unchanged for an empty (or zero sized) box.
        """
        w = self.width
        h = self.height
        if self.is_none() or w == 0 or h == 0:
            return P(p)
        return P((p[0] - self.x.min) / w, (p[1] - self.y.min) / h)

    def enlarge(self, value: float) -> BBox:
        """Grow every side by `value`. No-op on an empty box."""
        if self.is_none():
            return self
        return BBox(self.x.enlarge(value), self.y.enlarge(value))

    def reduce(self, value: float) -> BBox:
        """Shrink every side by `value`. No-op on an empty box."""
        if self.is_none():
            return self
        return BBox(self.x.reduce(value), self.y.reduce(value))

    def expand(self, deltas: Sequence[float], scale: float = 1.0) -> BBox:
        """Move each side outwards independently.

        Args:
            deltas: Amounts for the (left, top, right, bottom) sides,
                i.e. (x.min, y.min, x.max, y.max).
            scale: Multiplier for all deltas.
        """
        if self.is_none():
            return self
        return BBox(
            Interval(
                self.x.min - scale * deltas[0], self.x.max + scale * deltas[2]
            ),
            Interval(
                self.y.min - scale * deltas[1], self.y.max + scale * deltas[3]
            ),
        )

    def shrink(self, deltas: Sequence[float], scale: float = 1.0) -> BBox:
        """Move each side inwards independently. See :meth:`expand`."""
        return self.expand(deltas, -scale)

    def union(self, other: BBox) -> BBox:
        """Smallest box containing both boxes. Empty boxes are neutral."""
        if self.is_none():
            return other
        if other.is_none():
            return self
        return BBox(self.x.union(other.x), self.y.union(other.y))

    def intersect(self, other: BBox) -> BBox:
        """Overlap of both boxes. Empty if either box is empty."""
        if self.is_none() or other.is_none():
            return BBox.none()
        return BBox(self.x.intersect(other.x), self.y.intersect(other.y))

    def new_rotated_around(self, origin: TPoint, degrees: float) -> BBox:
        """Bounding box of this box rotated around a point.

        The four corners are rotated and the axis-aligned box
        containing them is returned.
        """
        if self.is_none():
            return self
        angle = math.radians(degrees)
        return BBox.of_points(p.rotate(angle, origin) for p in self.corners())

    def __add__(self, p: TPoint) -> BBox:  # type: ignore [override]
        if self.is_none():
            return self
        return BBox(self.x + p[0], self.y + p[1])

    def __sub__(self, p: TPoint) -> BBox:
        if self.is_none():
            return self
        return BBox(self.x - p[0], self.y - p[1])

    def __mul__(self, scale: float) -> BBox:  # type: ignore [override]
        return BBox(self.x * scale, self.y * scale)

    def __truediv__(self, scale: float) -> BBox:
        return BBox(self.x / scale, self.y / scale)

    def __str__(self) -> str:
        return f'({self.x} x {self.y})'
