"""Test Interval algebra."""

from __future__ import annotations

import itertools

import pytest

from svgdiagram import Interval

_SAMPLES = [
    Interval(0, 4),
    Interval(-1, 3),
    Interval(2, 5),
    Interval(6, 7),
    Interval(1, 1),
    Interval.none(),
]


def test_none() -> None:
    empty = Interval.none()
    assert empty.is_none()
    assert empty == Interval(0, -1)
    assert empty.size() == 0
    assert not Interval(3, 3).is_none()
    assert Interval(2, 5).size() == 3


def test_of_pts() -> None:
    assert Interval.of_pts(5, 2) == Interval(2, 5)
    assert Interval.of_pts(2, 5) == Interval(2, 5)


def test_union() -> None:
    assert Interval(0, 4).union(Interval(-1, 3)) == Interval(-1, 4)
    assert Interval.none().union(Interval(1, 2)) == Interval(1, 2)
    assert Interval(1, 2).union(Interval.none()) == Interval(1, 2)


def test_intersect() -> None:
    assert Interval(0, 4).intersect(Interval(2, 5)) == Interval(2, 4)
    assert Interval.none().intersect(Interval(1, 2)).is_none()
    assert Interval(1, 2).intersect(Interval.none()).is_none()
    # Disjoint
    assert Interval(0, 1).intersect(Interval(2, 3)).is_none()
    # Touching
    assert Interval(0, 1).intersect(Interval(1, 3)) == Interval(1, 1)


def test_union_intersect_properties() -> None:
    for a, b in itertools.product(_SAMPLES, repeat=2):
        union = a.union(b)
        assert union.contains_interval(a)
        assert union.contains_interval(b)
        overlap = a.intersect(b)
        assert a.contains_interval(overlap)
        assert b.contains_interval(overlap)


def test_include() -> None:
    assert Interval.none().include(3) == Interval(3, 3)
    assert Interval(0, 1).include(3) == Interval(0, 3)
    assert Interval(0, 1).include(-2) == Interval(-2, 1)
    assert Interval(0, 1).include(0.5) == Interval(0, 1)


def test_enlarge_reduce() -> None:
    assert Interval(0, 1).enlarge(1) == Interval(-1, 2)
    assert Interval(0, 4).reduce(1) == Interval(1, 3)
    assert Interval.none().enlarge(1).is_none()
    assert Interval.none().reduce(1).is_none()


def test_arithmetic() -> None:
    assert Interval(0, 1) + 2 == Interval(2, 3)
    assert Interval(0, 1) - 2 == Interval(-2, -1)
    assert Interval(1, 3) * 2 == Interval(2, 6)
    # A negative scale keeps min <= max
    assert Interval(1, 3) * -2 == Interval(-6, -2)
    assert Interval(2, 6) / 2 == Interval(1, 3)
    assert Interval(2, 6) / -2 == Interval(-3, -1)
    assert (Interval.none() * 0).is_none()


def test_center_contains() -> None:
    assert Interval(1, 3).center() == pytest.approx(2)
    assert Interval(1, 3).contains(1)
    assert Interval(1, 3).contains(3)
    assert not Interval(1, 3).contains(3.5)
    assert not Interval.none().contains(0)
