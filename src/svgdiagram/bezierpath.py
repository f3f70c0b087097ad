"""A path made of a chain of Bezier curve segments."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from .bbox import BBox
from .bezier import STRAIGHTNESS, Bezier
from .point import P

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from .point import TPoint
    from .transform import Transform

logger = logging.getLogger(__name__)


class BezierPath:
    """An ordered chain of Bezier segments.

    The end point of each segment is the start point of the next.
    Whether the path is closed is up to the caller.
    """

    def __init__(self, beziers: Iterable[Bezier] | None = None) -> None:
        self.elements: list[Bezier] = list(beziers) if beziers else []

    @classmethod
    def of_points(
        cls, corners: Sequence[TPoint], rounding: float = 0.0
    ) -> BezierPath:
        """Create a closed polygonal path with optionally rounded corners.

        Args:
            corners: Polygon vertices. The last vertex is joined
                back to the first.
            rounding: Corner radius. Zero for sharp corners.
        """
        n = len(corners)
        path = cls(
            Bezier.line(corners[i], corners[(i + 1) % n]) for i in range(n)
        )
        path.round(rounding, closed=True)
        return path

    @classmethod
    def of_ellipse(
        cls,
        origin: TPoint,
        radius: float,
        eccentricity: float = 1.0,
        degrees: float = 0.0,
    ) -> BezierPath:
        """Create an ellipse from four quarter arcs.

        Args:
            origin: Center of the ellipse.
            radius: Radius along the (unrotated) Y axis.
            eccentricity: Ratio of the X radius to the Y radius.
            degrees: Rotation of the ellipse axes.
        """
        angle = math.radians(degrees)
        x_axis = P(eccentricity, 0.0).rotate(angle)
        y_axis = P(0.0, 1.0).rotate(angle)
        quarter = math.pi / 2
        return cls(
            Bezier.arc(quarter, radius, origin, x_axis, y_axis, quarter * i)
            for i in range(4)
        )

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> Bezier:
        return self.elements[index]

    def __iter__(self) -> Iterator[Bezier]:
        return iter(self.elements)

    def iter_beziers(self) -> Iterator[Bezier]:
        """Iterate over the segments in path order."""
        return iter(self.elements)

    def add_bezier(self, bezier: Bezier) -> None:
        """Append a segment to the end of the path."""
        self.elements.append(bezier)

    def get_pt(self, index: int) -> P:
        """Start point of the path for index 0, else the end point.

        An empty path returns the origin.
        """
        if not self.elements:
            return P.zero()
        if index == 0:
            return self.elements[0].start
        return self.elements[-1].end

    def is_closed(self, tolerance: float = 1e-9) -> bool:
        """Return True if the path ends where it starts."""
        return bool(self.elements) and self.get_pt(0).almost_equal(
            self.get_pt(1), tolerance
        )

    def length(self, straightness: float = STRAIGHTNESS) -> float:
        """Total approximate arc length."""
        return sum(b.length(straightness) for b in self.elements)

    def round(self, amount: float, closed: bool) -> None:
        """Round each corner between two adjacent straight lines.

        Each such pair of lines is shortened and a circular arc of
        radius `amount` is put between them. Corners next to curves
        are left as is.

        Args:
            amount: Corner radius.
            closed: Also round the corner joining the last segment
                back to the first.
        """
        n = len(self.elements)
        if n < 2 or amount == 0:  # noqa: PLR2004
            return
        segments = list(self.elements)
        corners: list[Bezier | None] = [None] * n
        # corners[i] rounds the join between segment i and segment i + 1
        last = n if closed else n - 1
        for i in range(last):
            j = (i + 1) % n
            first = segments[i]
            second = segments[j]
            if not (first.is_line() and second.is_line()):
                continue
            curve = Bezier.of_round_corner(
                first.end, first.tangent_at(1), -second.tangent_at(0), amount
            )
            if curve is None:
                logger.debug('corner %d is straight, not rounded', i)
                continue
            corners[i] = curve
            segments[i] = Bezier.line(first.start, curve.start)
            segments[j] = Bezier.line(curve.end, second.end)

        elements: list[Bezier] = []
        for segment, corner in zip(segments, corners):
            elements.append(segment)
            if corner is not None:
                elements.append(corner)
        self.elements = elements

    def apply_relief(
        self, index: int, straightness: float, distance: float
    ) -> None:
        """Remove a length of path from one end.

        Whole segments are dropped while they are shorter than the
        remaining distance, then the last affected segment is cut.

        Args:
            index: 0 to trim from the start, otherwise from the end.
            straightness: Flatness tolerance for arc length.
            distance: Arc length to remove.
        """
        while self.elements and distance > 0:
            at_start = index == 0
            bezier = self.elements[0] if at_start else self.elements[-1]
            length = bezier.length(straightness)
            if distance > length:
                self.elements.pop(0 if at_start else -1)
                distance -= length
                continue
            if at_start:
                t, _ = bezier.t_of_distance(straightness, distance)
                if t >= 1:
                    self.elements.pop(0)
                elif t > 0:
                    self.elements[0] = bezier.bezier_between(t, 1)
            else:
                t, _ = bezier.t_of_distance(straightness, length - distance)
                if t <= 0:
                    self.elements.pop()
                elif t < 1:
                    self.elements[-1] = bezier.bezier_between(0, t)
            return
        if not self.elements:
            logger.debug('relief removed the entire path')

    def bounds(self) -> BBox:
        """Bounding box of all the segments."""
        bbox = BBox.none()
        for bezier in self.elements:
            bbox = bbox.union(bezier.bounds())
        return bbox

    def transformed(self, transform: Transform) -> BezierPath:
        """A copy of the path mapped by a Transform."""
        return BezierPath(b.transformed(transform) for b in self.elements)

    def as_svg_path(self, closed: bool = False) -> str:
        """The path as SVG path data (the `d` attribute).

        Coordinates have four decimal places.
        """
        dparts = [f'M {self.get_pt(0).to_svg()}']
        for bezier in self.elements:
            if bezier.is_line():
                dparts.append(f'L {bezier.end.to_svg()}')
            elif bezier.is_quadratic():
                dparts.append(
                    f'Q {bezier.points[1].to_svg()} {bezier.end.to_svg()}'
                )
            else:
                c0, c1 = bezier.points[1:3]
                dparts.append(
                    f'C {c0.to_svg()} {c1.to_svg()} {bezier.end.to_svg()}'
                )
        if closed:
            dparts.append('z')
        return ' '.join(dparts)

    def __repr__(self) -> str:
        return f'BezierPath({self.elements!r})'
