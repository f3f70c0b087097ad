"""Test BBox algebra."""

from __future__ import annotations

import pytest

from svgdiagram import BBox, Interval


def test_new_orders_corners() -> None:
    bbox = BBox.new(5, 7, 2, 1)
    assert bbox.x == Interval(2, 5)
    assert bbox.y == Interval(1, 7)
    assert bbox.get_wh() == (3, 6)
    assert bbox.get_bounds() == (2, 1, 3, 6)
    assert bbox.center() == pytest.approx((3.5, 4))


def test_none() -> None:
    assert BBox.none().is_none()
    assert BBox(Interval(0, 1), Interval.none()).is_none()
    assert not BBox.new(0, 0, 0, 0).is_none()


def test_of_points() -> None:
    bbox = BBox.of_points([(1, 2), (-1, 5), (3, 0)])
    assert bbox == BBox.new(-1, 0, 3, 5)
    assert BBox.of_points([]).is_none()


def test_of_cwh() -> None:
    bbox = BBox.of_cwh((1, 1), 4, 2)
    assert bbox == BBox.new(-1, 0, 3, 2)
    center, w, h = bbox.get_cwh()
    assert center == pytest.approx((1, 1))
    assert (w, h) == (4, 2)


def test_expand_shrink() -> None:
    bbox = BBox.new(2, 1, 5, 7)
    expanded = bbox.expand([0.1, 0.2, 0.3, 0.5], 1)
    assert expanded.x == pytest.approx((1.9, 5.3))
    assert expanded.y == pytest.approx((0.8, 7.5))
    shrunk = bbox.shrink([0.1, 0.2, 0.3, 0.5], 1)
    assert shrunk.x == pytest.approx((2.1, 4.7))
    assert shrunk.y == pytest.approx((1.2, 6.5))


def test_enlarge_reduce_inverse() -> None:
    for bbox in (BBox.new(2, 1, 5, 7), BBox.new(-3, -3, 0.5, 0.25)):
        enlarged = bbox.enlarge(0.75)
        assert enlarged.width == pytest.approx(bbox.width + 1.5)
        restored = enlarged.reduce(0.75)
        assert restored.x == pytest.approx(bbox.x)
        assert restored.y == pytest.approx(bbox.y)
    assert BBox.none().enlarge(1).is_none()
    assert BBox.none().reduce(1).is_none()


def test_union_intersect() -> None:
    a = BBox.new(2, 1, 5, 7)
    b = BBox.new(5, 1, 7, 4)
    assert a.union(b) == BBox.new(2, 1, 7, 7)
    touching = a.intersect(b)
    assert not touching.is_none()
    assert touching == BBox.new(5, 1, 5, 4)
    assert a.intersect(BBox.new(8, 8, 9, 9)).is_none()
    assert a.union(BBox.none()) == a
    assert BBox.none().union(a) == a
    assert a.intersect(BBox.none()).is_none()


def test_rotated_around() -> None:
    bbox = BBox.new(0, 0, 2, 1)
    rotated = bbox.new_rotated_around((0, 0), 90)
    assert rotated.x == pytest.approx((-1, 0), abs=1e-12)
    assert rotated.y == pytest.approx((0, 2), abs=1e-12)
    rotated = BBox.new(-1, -1, 1, 1).new_rotated_around((0, 0), 45)
    assert rotated.width == pytest.approx(2 * 2**0.5)
    rotated = bbox.new_rotated_around((1, 0), 180)
    assert rotated.x == pytest.approx((0, 2), abs=1e-12)
    assert rotated.y == pytest.approx((-1, 0), abs=1e-12)


def test_pt_within() -> None:
    bbox = BBox.new(0, 0, 2, 4)
    assert bbox.pt_within((1, 1)) == pytest.approx((0.5, 0.25))
    assert bbox.pt_within((2, 4)) == pytest.approx((1, 1))
    assert BBox.none().pt_within((3, 5)) == (3, 5)


def test_arithmetic() -> None:
    bbox = BBox.new(0, 0, 2, 4)
    assert bbox + (1, 2) == BBox.new(1, 2, 3, 6)
    assert bbox - (1, 2) == BBox.new(-1, -2, 1, 2)
    assert bbox * 2 == BBox.new(0, 0, 4, 8)
    assert bbox / 2 == BBox.new(0, 0, 1, 2)


def test_contains() -> None:
    bbox = BBox.new(0, 0, 2, 4)
    assert bbox.contains((1, 1))
    assert not bbox.contains((3, 1))
    assert bbox.contains_bbox(BBox.new(0.5, 0.5, 1, 1))
    assert bbox.contains_bbox(BBox.none())
    assert not bbox.contains_bbox(BBox.new(1, 1, 3, 3))
