"""Regular polygon, star and ellipse generator."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .bezierpath import BezierPath
from .point import P

if TYPE_CHECKING:
    from typing_extensions import Self

    from .bbox import BBox
    from .point import TPoint


class Polygon:
    """Parametric description of a polygon, star or ellipse.

    A Polygon does not store geometry; :meth:`as_paths` generates
    a :class:`BezierPath` from the parameters on demand.

    Polygons are immutable: the setters and arithmetic operators
    return a modified copy, and assigning an attribute raises
    AttributeError.

    Attributes:
        center: Center point.
        vertices: Number of vertices. Zero is an ellipse, one is
            an empty path.
        size: Distance from the center to each vertex (the Y radius
            of an ellipse).
        stellate_size: Distance from the center to the inner points
            of a star. Zero for a plain polygon.
        eccentricity: X axis scale factor.
        rotation: Rotation about the center in degrees.
        rounding: Corner rounding radius.
    """

    __slots__ = (
        'center',
        'vertices',
        'size',
        'stellate_size',
        'eccentricity',
        'rotation',
        'rounding',
    )

    def __init__(
        self,
        vertices: int = 0,
        stellate_size: float = 0.0,
        size: float = 1.0,
        center: TPoint = (0.0, 0.0),
        eccentricity: float = 1.0,
        rotation: float = 0.0,
        rounding: float = 0.0,
    ) -> None:
        _set = object.__setattr__
        _set(self, 'center', P(center))
        _set(self, 'vertices', vertices)
        _set(self, 'size', size)
        _set(self, 'stellate_size', stellate_size)
        _set(self, 'eccentricity', eccentricity)
        _set(self, 'rotation', rotation)
        _set(self, 'rounding', rounding)

    @classmethod
    def new(cls, vertices: int, stellate_size: float = 0.0) -> Polygon:
        """Create a unit size polygon with `vertices` points."""
        return cls(vertices, stellate_size)

    @classmethod
    def new_rect(cls, width: float, height: float) -> Polygon:
        """Create an axis-aligned rectangle centered on the origin."""
        return cls(4).set_size(height / math.sqrt(2), width / height)

    @classmethod
    def new_polygon(
        cls,
        vertices: int,
        size: float,
        rotation: float = 0.0,
        rounding: float = 0.0,
    ) -> Polygon:
        """Create a regular polygon."""
        return cls(vertices, size=size, rotation=rotation, rounding=rounding)

    @classmethod
    def new_star(
        cls,
        vertices: int,
        size: float,
        in_out: float,
        rotation: float = 0.0,
        rounding: float = 0.0,
    ) -> Polygon:
        """Create a star.

        Args:
            vertices: Number of outer points.
            size: Radius of the outer points.
            in_out: Ratio of the inner point radius to the outer.
            rotation: Rotation in degrees.
            rounding: Corner rounding radius.
        """
        return cls(
            vertices,
            stellate_size=size * in_out,
            size=size,
            rotation=rotation,
            rounding=rounding,
        )

    @classmethod
    def new_circle(cls, radius: float) -> Polygon:
        return cls(0, size=radius)

    @classmethod
    def new_ellipse(
        cls, rx: float, ry: float, rotation: float = 0.0
    ) -> Polygon:
        """Create an ellipse with X radius `rx` and Y radius `ry`."""
        return cls(0).set_size(ry, rx / ry).set_rotation(rotation)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'Polygon is immutable, cannot set {name!r}')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'Polygon is immutable, cannot delete {name!r}')

    def _replace(self, **kwargs: float | int | P) -> Self:
        poly = object.__new__(type(self))
        for name in self.__slots__:
            value = kwargs.get(name, getattr(self, name))
            object.__setattr__(poly, name, value)
        return poly

    def set_vertices(self, vertices: int) -> Self:
        return self._replace(vertices=vertices)

    def set_size(self, size: float, eccentricity: float = 1.0) -> Self:
        return self._replace(size=size, eccentricity=eccentricity)

    def set_stellate_size(self, stellate_size: float) -> Self:
        return self._replace(stellate_size=stellate_size)

    def set_rotation(self, rotation: float) -> Self:
        return self._replace(rotation=rotation)

    def set_rounding(self, rounding: float) -> Self:
        return self._replace(rounding=rounding)

    def set_center(self, center: TPoint) -> Self:
        return self._replace(center=P(center))

    def get_points(self) -> list[P]:
        """The polygon corner points, in order.

        Stars interleave the outer and inner points.
        Ellipses and single vertex polygons have no corners.
        """
        n = self.vertices
        if n < 2:  # noqa: PLR2004
            return []
        delta = 2 * math.pi / n
        rotation = math.radians(self.rotation)
        points = []
        for i in range(n):
            points.append(P.from_polar(self.size, delta * (0.5 - i)))
            if self.stellate_size != 0:
                # Inner point between vertex i and vertex i + 1
                points.append(P.from_polar(self.stellate_size, -delta * i))
        return [
            P(p.x * self.eccentricity, p.y).rotate(rotation) + self.center
            for p in points
        ]

    def as_paths(self) -> BezierPath:
        """Generate the path for this polygon."""
        if self.vertices == 0:
            return BezierPath.of_ellipse(
                self.center, self.size, self.eccentricity, self.rotation
            )
        if self.vertices == 1:
            return BezierPath()
        return BezierPath.of_points(self.get_points(), self.rounding)

    def bounds(self) -> BBox:
        """Bounding box of the generated path."""
        return self.as_paths().bounds()

    def __add__(self, p: TPoint) -> Self:
        return self._replace(center=self.center + p)

    def __sub__(self, p: TPoint) -> Self:
        return self._replace(center=self.center - p)

    def __mul__(self, scale: float) -> Self:
        return self._replace(
            size=self.size * scale, stellate_size=self.stellate_size * scale
        )

    def __truediv__(self, scale: float) -> Self:
        return self._replace(
            size=self.size / scale, stellate_size=self.stellate_size / scale
        )

    def __repr__(self) -> str:
        return (
            f'Polygon(vertices={self.vertices}, size={self.size},'
            f' stellate_size={self.stellate_size}, center={self.center},'
            f' eccentricity={self.eccentricity}, rotation={self.rotation},'
            f' rounding={self.rounding})'
        )
