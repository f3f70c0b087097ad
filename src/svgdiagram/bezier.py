"""Linear, quadratic and cubic Bezier curve segments.

:class:`Bezier` wraps the svgpathtools segment types (`Line`,
`QuadraticBezier` and `CubicBezier`) with the point type and
construction helpers used by :mod:`svgdiagram.bezierpath`:
arc and round corner construction, evaluation, subdivision and
arc length parameterization.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import svgpathtools

from .bbox import BBox
from .point import P

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from typing_extensions import Self, TypeAlias

    from .point import TPoint
    from .transform import Transform

    TSegment: TypeAlias = (
        svgpathtools.Line
        | svgpathtools.QuadraticBezier
        | svgpathtools.CubicBezier
    )

# Default flatness tolerance for arc length computation
STRAIGHTNESS = 1e-3

# Handle length of a quarter circle arc as a fraction of its radius
QUARTER_ARC_HANDLE = 0.5571469

# Corners flatter or sharper than this (sine of angle) can't be rounded
_MIN_CORNER_SIN = 1e-9

_LINE = 2
_CUBIC = 4


def arc_handle(angle: float) -> float:
    """Cubic handle length, relative to the radius, for an arc.

    Scales with `tan(angle / 4)` and is :data:`QUARTER_ARC_HANDLE`
    for a quarter circle.

    Args:
        angle: Angle swept by the arc, in radians.
    """
    return QUARTER_ARC_HANDLE * math.tan(angle / 4) / math.tan(math.pi / 8)


def _to_complex(p: TPoint) -> complex:
    return complex(p[0], p[1])


def _to_point(z: complex) -> P:
    return P(z.real, z.imag)


class Bezier:
    """A Bezier curve of degree one (line), two or three.

    The control points are in curve order: start point,
    zero to two intermediate control points, then end point.
    """

    __slots__ = ('segment',)

    segment: TSegment

    def __init__(self, points: Sequence[TPoint]) -> None:
        if not _LINE <= len(points) <= _CUBIC:
            raise ValueError(
                f'a Bezier needs 2 to 4 control points, got {len(points)}'
            )
        self.segment = svgpathtools.bpoints2bezier(
            [_to_complex(p) for p in points]
        )

    @classmethod
    def of_segment(cls, segment: TSegment) -> Self:
        """Wrap an svgpathtools segment."""
        bezier = cls.__new__(cls)
        bezier.segment = segment
        return bezier

    @classmethod
    def line(cls, p0: TPoint, p1: TPoint) -> Self:
        return cls((p0, p1))

    @classmethod
    def quadratic(cls, p0: TPoint, c: TPoint, p1: TPoint) -> Self:
        return cls((p0, c, p1))

    @classmethod
    def cubic(cls, p0: TPoint, c0: TPoint, c1: TPoint, p1: TPoint) -> Self:
        return cls((p0, c0, c1, p1))

    @classmethod
    def arc(
        cls,
        angle: float,
        radius: float,
        center: TPoint,
        unit: TPoint = (1.0, 0.0),
        normal: TPoint = (0.0, 1.0),
        rotate: float = 0.0,
    ) -> Self:
        """Cubic approximation of a circular or elliptical arc.

        The arc follows `center + radius * (unit * cos(a) + normal * sin(a))`
        for `a` from `rotate` to `rotate + angle`. With perpendicular unit
        vectors this is a circle, otherwise an ellipse.

        Args:
            angle: Angle swept by the arc, in radians.
            radius: Arc radius.
            center: Center point.
            unit: Axis vector for angle zero.
            normal: Axis vector for angle pi/2.
            rotate: Start angle in radians.
        """
        center = P(center)
        unit = P(unit) * radius
        normal = P(normal) * radius

        def _pt(a: float) -> P:
            return center + unit * math.cos(a) + normal * math.sin(a)

        def _dir(a: float) -> P:
            return normal * math.cos(a) - unit * math.sin(a)

        k = arc_handle(angle)
        a0 = rotate
        a1 = rotate + angle
        p0 = _pt(a0)
        p1 = _pt(a1)
        return cls((p0, p0 + _dir(a0) * k, p1 - _dir(a1) * k, p1))

    @classmethod
    def of_round_corner(
        cls, corner: TPoint, v0: TPoint, v1: TPoint, radius: float
    ) -> Self | None:
        """Circular arc of `radius` that rounds off a corner.

        Both lines meet at `corner`; `v0` and `v1` are their directions
        pointing into the corner. The arc starts on the first line and
        ends on the second, tangent to both.

        Returns:
            The arc, or None if the lines are parallel.
        """
        corner = P(corner)
        u0 = P(v0).unit()
        u1 = P(v1).unit()
        sin_theta = abs(u0.cross(u1))
        if sin_theta < _MIN_CORNER_SIN:
            return None
        # Angle between the two lines at the corner
        theta = math.atan2(sin_theta, u0.dot(u1))
        trim = radius / math.tan(theta / 2)
        handle = radius * arc_handle(math.pi - theta)
        p0 = corner - u0 * trim
        p1 = corner - u1 * trim
        return cls((p0, p0 + u0 * handle, p1 + u1 * handle, p1))

    @property
    def points(self) -> tuple[P, ...]:
        """The control points, in curve order."""
        return tuple(_to_point(z) for z in self.segment.bpoints())

    @property
    def degree(self) -> int:
        return len(self.segment.bpoints()) - 1

    @property
    def start(self) -> P:
        return _to_point(self.segment.start)

    @property
    def end(self) -> P:
        return _to_point(self.segment.end)

    def is_line(self) -> bool:
        return isinstance(self.segment, svgpathtools.Line)

    def is_quadratic(self) -> bool:
        return isinstance(self.segment, svgpathtools.QuadraticBezier)

    def is_cubic(self) -> bool:
        return isinstance(self.segment, svgpathtools.CubicBezier)

    def get_pt(self, index: int) -> P:
        """Start point for index 0, end point otherwise."""
        return self.start if index == 0 else self.end

    def point_at(self, t: float) -> P:
        return _to_point(self.segment.point(t))

    def tangent_at(self, t: float) -> P:
        """Derivative of the curve at `t`.

        The direction of travel; not normalized.
        """
        if self.is_line():
            # svgpathtools rejects the derivative of a zero length line
            return self.end - self.start
        return _to_point(self.segment.derivative(t))

    def split(self, t: float) -> tuple[Bezier, Bezier]:
        """Subdivide the curve at `t` into two curves of the same degree."""
        left, right = self.segment.split(t)
        return Bezier.of_segment(left), Bezier.of_segment(right)

    def bezier_between(self, t0: float, t1: float) -> Bezier:
        """The part of the curve between parameters `t0` and `t1`."""
        t0 = max(t0, 0.0)
        t1 = min(t1, 1.0)
        if t0 <= 0 and t1 >= 1:
            return self
        if t0 >= t1:
            return Bezier([self.point_at(t0)] * (self.degree + 1))
        return Bezier.of_segment(self.segment.cropped(t0, t1))

    def length(self, straightness: float = STRAIGHTNESS) -> float:
        """Approximate arc length of the curve.

        Args:
            straightness: Absolute error allowed in the length.
        """
        return float(self.segment.length(error=straightness))

    def t_of_distance(
        self, straightness: float, distance: float
    ) -> tuple[float, bool]:
        """Find the parameter at an arc length distance from the start.

        Args:
            straightness: Length tolerance, as for :meth:`length`.
            distance: Distance along the curve.

        Returns:
            A tuple (t, within) where `within` is False if the distance
            lies outside the curve, in which case `t` is clamped to 0 or 1.
        """
        if distance <= 0:
            return (0.0, distance == 0)
        length = self.length(straightness)
        if distance >= length:
            return (1.0, distance == length)
        t = self.segment.ilength(
            distance, s_tol=straightness, error=straightness
        )
        return (float(t), True)

    def bounds(self) -> BBox:
        """Tight bounding box of the curve."""
        xmin, xmax, ymin, ymax = self.segment.bbox()
        return BBox.new(float(xmin), float(ymin), float(xmax), float(ymax))

    def transformed(self, transform: Transform) -> Bezier:
        """A copy of this curve mapped by a Transform."""
        return Bezier([transform.apply(p) for p in self.points])

    def reversed(self) -> Bezier:
        """The same curve traversed end to start."""
        return Bezier.of_segment(self.segment.reversed())

    def __iter__(self) -> Iterator[P]:
        return iter(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bezier):
            return NotImplemented
        return self.points == other.points

    def __hash__(self) -> int:
        return hash(self.points)

    def __repr__(self) -> str:
        pts = ', '.join(f'({p.x:g}, {p.y:g})' for p in self.points)
        return f'Bezier({pts})'
