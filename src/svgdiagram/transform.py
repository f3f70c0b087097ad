"""Translate-rotate-scale affine transform."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, NamedTuple

from .bbox import BBox
from .errors import InvalidTransformMatrix
from .point import P

if TYPE_CHECKING:
    from collections.abc import Sequence

    from typing_extensions import TypeAlias

    from .point import TPoint

    TMatrix: TypeAlias = list[float]

# Tolerances used when decomposing a matrix
SKEW_TOLERANCE = 1e-6
DETERMINANT_TOLERANCE = 1e-9

_MATRIX_SIZE = 9


class Transform(NamedTuple):
    """An affine transform of scale, then rotation, then translation.

    Attributes:
        translation: Translation applied last.
        rotation: Counter-clockwise rotation in degrees.
        scale: Uniform scale factor applied first.
    """

    translation: P = P(0.0, 0.0)
    rotation: float = 0.0
    scale: float = 1.0

    @classmethod
    def identity(cls) -> Transform:
        return cls(P.zero(), 0.0, 1.0)

    @classmethod
    def of_trs(
        cls, translation: TPoint, rotation: float, scale: float
    ) -> Transform:
        """Create a transform from translation, rotation (degrees) and scale."""
        return cls(P(translation), float(rotation), float(scale))

    @classmethod
    def of_translation(cls, translation: TPoint) -> Transform:
        return cls(P(translation), 0.0, 1.0)

    @classmethod
    def of_rotation(cls, rotation: float) -> Transform:
        """Rotation (in degrees) about the origin."""
        return cls(P.zero(), float(rotation), 1.0)

    @classmethod
    def of_matrix(
        cls, matrix: Sequence[float] | Sequence[Sequence[float]]
    ) -> Transform:
        """Decompose a 3x3 homogeneous matrix into a transform.

        Args:
            matrix: Nine values in row-major order, or three rows of three.

        Returns:
            The equivalent transform.

        Raises:
            InvalidTransformMatrix: If the matrix is not 3x3, the bottom
                row is not (0, 0, 1), the matrix contains skew, or
                it mirrors (negative determinant).
        """
        m = _flatten_matrix(matrix)
        if m[6] != 0 or m[7] != 0 or m[8] != 1:
            raise InvalidTransformMatrix(
                f'bottom row must be (0, 0, 1), got ({m[6]}, {m[7]}, {m[8]})'
            )
        skew = m[0] * m[1] + m[4] * m[3]
        if abs(skew) > SKEW_TOLERANCE:
            raise InvalidTransformMatrix(f'matrix has skew {skew}')
        det = m[0] * m[4] - m[1] * m[3]
        if det < -DETERMINANT_TOLERANCE:
            raise InvalidTransformMatrix(
                f'matrix has negative determinant {det}'
            )
        scale = math.sqrt(max(det, 0.0))
        rotation = math.degrees(math.atan2(m[3], m[4]))
        return cls(P(m[2], m[5]), rotation, scale)

    def is_identity(self) -> bool:
        """Return True if this transform does nothing."""
        return (
            self.translation.is_zero()
            and self.rotation == 0
            and self.scale == 1
        )

    def to_matrix(self) -> TMatrix:
        """The transform as nine values of a row-major 3x3 matrix."""
        angle = math.radians(self.rotation)
        c = math.cos(angle) * self.scale
        s = math.sin(angle) * self.scale
        dx, dy = self.translation
        return [c, -s, dx, s, c, dy, 0.0, 0.0, 1.0]

    def apply(self, p: TPoint) -> P:
        """Transform a point."""
        return (
            P(p[0] * self.scale, p[1] * self.scale).rotate(
                math.radians(self.rotation)
            )
            + self.translation
        )

    def apply_to_bbox(self, bbox: BBox) -> BBox:
        """Bounding box of a transformed box.

        The box is scaled and rotated about the origin, then translated.
        """
        if bbox.is_none() or self.is_identity():
            return bbox
        return (bbox * self.scale).new_rotated_around(
            P.zero(), self.rotation
        ) + self.translation

    def apply_to_transform(self, other: Transform) -> Transform:
        """Compose transforms so that `other` is applied first.

        The result maps `p` to `self.apply(other.apply(p))`.
        """
        translation = (
            other.translation.rotate(math.radians(self.rotation)) * self.scale
            + self.translation
        )
        return Transform(
            translation,
            self.rotation + other.rotation,
            self.scale * other.scale,
        )

    def as_svg_attribute_string(self) -> str:
        """The transform as an SVG `transform` attribute value.

        Only the non-identity parts are included, so the identity
        transform is an empty string.
        """
        parts = []
        dx, dy = self.translation
        if dx != 0 or dy != 0:
            parts.append(f'translate({dx:.4f} {dy:.4f})')
        if self.rotation != 0:
            parts.append(f'rotate({self.rotation:.4f})')
        if self.scale != 1:
            parts.append(f'scale({self.scale:.4f})')
        return ' '.join(parts)

    def almost_equal(self, other: Transform, tolerance: float = 1e-6) -> bool:
        """Compare transforms within a tolerance.

        Rotations are compared modulo 360 degrees.
        """
        drot = (self.rotation - other.rotation) % 360
        drot = min(drot, 360 - drot)
        return (
            self.translation.almost_equal(other.translation, tolerance)
            and drot <= tolerance
            and abs(self.scale - other.scale) <= tolerance
        )

    def __add__(self, p: TPoint) -> Transform:  # type: ignore [override]
        return Transform(self.translation + p, self.rotation, self.scale)

    def __sub__(self, p: TPoint) -> Transform:
        return Transform(self.translation - p, self.rotation, self.scale)

    def __mul__(self, scale: float) -> Transform:  # type: ignore [override]
        return Transform(
            self.translation * scale, self.rotation, self.scale * scale
        )

    def __truediv__(self, scale: float) -> Transform:
        return Transform(
            self.translation / scale, self.rotation, self.scale / scale
        )


def _flatten_matrix(
    matrix: Sequence[float] | Sequence[Sequence[float]],
) -> TMatrix:
    m: list[float] = []
    for row in matrix:
        if isinstance(row, int | float):
            m.append(float(row))
        else:
            if len(row) != 3:  # noqa: PLR2004
                raise InvalidTransformMatrix(
                    f'matrix rows must have 3 values, got {len(row)}'
                )
            m.extend(float(v) for v in row)
    if len(m) != _MATRIX_SIZE:
        raise InvalidTransformMatrix(
            f'matrix must have {_MATRIX_SIZE} values, got {len(m)}'
        )
    return m
