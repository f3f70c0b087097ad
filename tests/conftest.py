"""Pytest fixtures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from svgdiagram import BBox, BezierPath, SvgConfig, SvgElement

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture(scope='session', autouse=True)
def _initialize() -> None:
    # Exercise the debug logging paths
    logging.getLogger('svgdiagram').setLevel(logging.DEBUG)


@pytest.fixture
def config() -> SvgConfig:
    return SvgConfig()


@pytest.fixture
def unit_square() -> list[tuple[float, float]]:
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def make_box() -> Callable[[float, float, float, float], SvgElement]:
    """Factory for closed rectangular path elements."""

    def _make_box(x0: float, y0: float, x1: float, y1: float) -> SvgElement:
        bbox = BBox.new(x0, y0, x1, y1)
        return SvgElement.new_path(
            BezierPath.of_points(bbox.corners()), closed=True
        )

    return _make_box
