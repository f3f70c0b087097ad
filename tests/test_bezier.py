"""Test Bezier curve segments."""

from __future__ import annotations

import math

import pytest

from svgdiagram import Bezier, Transform
from svgdiagram.bezier import QUARTER_ARC_HANDLE, arc_handle

# Quarter circle control point offset
KAPPA = 0.5571469


def test_line() -> None:
    line = Bezier.line((0, 0), (3, 4))
    assert line.is_line()
    assert not line.is_cubic()
    assert line.length() == pytest.approx(5)
    assert line.point_at(0.5) == pytest.approx((1.5, 2))
    assert line.tangent_at(0.3) == pytest.approx((3, 4))
    assert line.get_pt(0) == (0, 0)
    assert line.get_pt(1) == (3, 4)


def test_arc() -> None:
    arc = Bezier.arc(math.pi / 2, 1, (0, 0))
    assert arc.is_cubic()
    expected = [(1, 0), (1, KAPPA), (KAPPA, 1), (0, 1)]
    for p, q in zip(arc.points, expected):
        assert p == pytest.approx(q, abs=1e-7)
    # Midpoint of the cubic approximation lies close to the circle
    assert arc.point_at(0.5).length() == pytest.approx(1, abs=3e-3)


def test_arc_offset_center() -> None:
    arc = Bezier.arc(math.pi / 2, 2, (5, 5), rotate=math.pi)
    assert arc.start == pytest.approx((3, 5))
    assert arc.end == pytest.approx((5, 3))


def test_round_corner() -> None:
    curve = Bezier.of_round_corner((1, 0), (1, 0), (0, -1), 0.1)
    assert curve is not None
    assert curve.start == pytest.approx((0.9, 0))
    assert curve.end == pytest.approx((1, 0.1))
    # Tangent to both lines
    assert curve.tangent_at(0).unit() == pytest.approx((1, 0), abs=1e-12)
    assert curve.tangent_at(1).unit() == pytest.approx((0, 1), abs=1e-12)
    # Parallel lines can't be rounded
    assert Bezier.of_round_corner((1, 0), (1, 0), (-1, 0), 0.1) is None


def test_split() -> None:
    curve = Bezier.cubic((0, 0), (1, 2), (3, 2), (4, 0))
    left, right = curve.split(0.25)
    assert left.start == curve.start
    assert right.end == curve.end
    assert left.end == pytest.approx(curve.point_at(0.25))
    assert right.start == pytest.approx(curve.point_at(0.25))
    assert left.point_at(0.5) == pytest.approx(curve.point_at(0.125))


def test_bezier_between() -> None:
    curve = Bezier.quadratic((0, 0), (1, 2), (2, 0))
    part = curve.bezier_between(0.25, 0.75)
    assert part.is_quadratic()
    assert part.start == pytest.approx(curve.point_at(0.25))
    assert part.end == pytest.approx(curve.point_at(0.75))
    assert part.point_at(0.5) == pytest.approx(curve.point_at(0.5))
    assert curve.bezier_between(0, 1) == curve


def test_t_of_distance_line() -> None:
    line = Bezier.line((0, 0), (10, 0))
    assert line.t_of_distance(0.01, 2.5) == (pytest.approx(0.25), True)
    assert line.t_of_distance(0.01, 0) == (0.0, True)
    assert line.t_of_distance(0.01, 11) == (1.0, False)
    assert line.t_of_distance(0.01, -1) == (0.0, False)


def test_t_of_distance_curve() -> None:
    arc = Bezier.arc(math.pi / 2, 1, (0, 0))
    length = arc.length(1e-6)
    assert length == pytest.approx(math.pi / 2, rel=1e-3)
    t, within = arc.t_of_distance(1e-6, length / 2)
    assert within
    assert t == pytest.approx(0.5, abs=1e-3)
    t, _ = arc.t_of_distance(1e-6, length / 4)
    assert 0 < t < 0.5


def test_bounds() -> None:
    arc = Bezier.arc(math.pi / 2, 1, (0, 0))
    bbox = arc.bounds()
    assert bbox.x == pytest.approx((0, 1), abs=1e-9)
    assert bbox.y == pytest.approx((0, 1), abs=1e-9)
    curve = Bezier.quadratic((0, 0), (1, 2), (2, 0))
    assert curve.bounds().y == pytest.approx((0, 1))


def test_transformed_reversed() -> None:
    line = Bezier.line((0, 0), (1, 0))
    moved = line.transformed(Transform.of_trs((1, 1), 90, 2))
    assert moved.start == pytest.approx((1, 1))
    assert moved.end == pytest.approx((1, 3))
    assert line.reversed() == Bezier.line((1, 0), (0, 0))


def test_invalid() -> None:
    with pytest.raises(ValueError):
        Bezier([(0, 0)])


def test_arc_handle() -> None:
    assert arc_handle(math.pi / 2) == QUARTER_ARC_HANDLE
    assert arc_handle(0) == 0
    # Smaller sweeps get proportionally shorter handles
    ratio = math.tan(math.pi / 16) / math.tan(math.pi / 8)
    assert arc_handle(math.pi / 4) == pytest.approx(KAPPA * ratio)
    corner = Bezier.of_round_corner((1, 0), (1, 0), (0, -1), 2.0)
    assert corner is not None
    assert corner.points[1] == pytest.approx((-1 + 2 * KAPPA, 0))
    assert corner.points[2] == pytest.approx((1, 2 - 2 * KAPPA))


def test_wraps_segment() -> None:
    curve = Bezier.cubic((0, 0), (1, 2), (3, 2), (4, 0))
    assert curve.segment.bpoints() == (0j, 1 + 2j, 3 + 2j, 4 + 0j)
    assert Bezier.of_segment(curve.segment) == curve
    assert Bezier.line((0, 0), (0, 0)).tangent_at(0.5) == (0, 0)
    assert curve.bezier_between(0.5, 0.5).start == pytest.approx((2, 1.5))
