"""Basic 2D point/vector type."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typing_extensions import Self, TypeAlias

    TPoint: TypeAlias = 'P | Sequence[float]'

# Tolerance used for approximate point comparisons
EPSILON = 1e-9


class P(tuple):
    """Two dimensional immutable point (vector).

    Represented as a two element tuple (x, y) so it can be used
    anywhere a point tuple is expected.
    """

    __slots__ = ()

    def __new__(
        cls, x: float | Sequence[float], y: float | None = None
    ) -> Self:
        """Create a new point.

        Args:
            x: The X coordinate, or a point/sequence of two coordinates
                if `y` is not specified.
            y: The Y coordinate.
        """
        if y is None:
            x, y = x  # type: ignore [misc]
        xy = (float(x), float(y))  # type: ignore [arg-type]
        return tuple.__new__(cls, xy)

    @classmethod
    def zero(cls) -> P:
        """Return the origin."""
        return cls(0.0, 0.0)

    @classmethod
    def from_polar(cls, r: float, angle: float) -> P:
        """Create a point from polar coordinates (angle in radians)."""
        return cls(r * math.cos(angle), r * math.sin(angle))

    @property
    def x(self) -> float:
        """The horizontal coordinate."""
        return self[0]

    @property
    def y(self) -> float:
        """The vertical coordinate."""
        return self[1]

    def is_zero(self) -> bool:
        """Return True if both coordinates are zero."""
        return self[0] == 0 and self[1] == 0

    def length(self) -> float:
        """Length of this vector (distance from the origin)."""
        return math.hypot(self[0], self[1])

    def distance(self, other: TPoint) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other[0] - self[0], other[1] - self[1])

    def unit(self) -> P:
        """This vector scaled to unit length.

        A zero vector stays a zero vector.
        """
        d = self.length()
        if d == 0:
            return P.zero()
        return P(self[0] / d, self[1] / d)

    def dot(self, other: TPoint) -> float:
        """Dot product."""
        return self[0] * other[0] + self[1] * other[1]

    def cross(self, other: TPoint) -> float:
        """2D cross product (the Z component of the 3D cross product)."""
        return self[0] * other[1] - self[1] * other[0]

    def angle(self) -> float:
        """Angle of this vector from the X axis, in radians."""
        return math.atan2(self[1], self[0])

    def rotate(self, angle: float, origin: TPoint | None = None) -> P:
        """Rotate this point counter-clockwise around `origin`.

        Args:
            angle: Rotation angle in radians.
            origin: Center of rotation. Default is (0, 0).
        """
        ox, oy = origin if origin is not None else (0.0, 0.0)
        c = math.cos(angle)
        s = math.sin(angle)
        x = self[0] - ox
        y = self[1] - oy
        return P(x * c - y * s + ox, x * s + y * c + oy)

    def lerp(self, other: TPoint, t: float) -> P:
        """Linear interpolation between this point and `other`."""
        return P(
            self[0] + (other[0] - self[0]) * t,
            self[1] + (other[1] - self[1]) * t,
        )

    def almost_equal(self, other: TPoint, tolerance: float = EPSILON) -> bool:
        """Compare points within a tolerance."""
        return (
            abs(self[0] - other[0]) <= tolerance
            and abs(self[1] - other[1]) <= tolerance
        )

    def to_svg(self) -> str:
        """Format as an SVG coordinate pair with four decimal places."""
        return f'{self[0]:.4f},{self[1]:.4f}'

    def __add__(self, other: TPoint) -> P:  # type: ignore [override]
        return P(self[0] + other[0], self[1] + other[1])

    __radd__ = __add__

    def __sub__(self, other: TPoint) -> P:
        return P(self[0] - other[0], self[1] - other[1])

    def __rsub__(self, other: TPoint) -> P:
        return P(other[0] - self[0], other[1] - self[1])

    def __mul__(self, s: float) -> P:  # type: ignore [override]
        return P(self[0] * s, self[1] * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> P:
        return P(self[0] / s, self[1] / s)

    def __neg__(self) -> P:
        return P(-self[0], -self[1])

    def __repr__(self) -> str:
        return f'P({self[0]!r}, {self[1]!r})'
