"""Test element tree finalization."""

from __future__ import annotations

import pytest

from svgdiagram import BBox, Polygon, SvgConfig, SvgElement, Transform


def test_group_bbox(config: SvgConfig, make_box) -> None:
    path = make_box(0, 0, 2, 1)
    group = SvgElement.new_group()
    group.push_content(path)
    group.apply_transform(Transform.of_trs((10, 0), 90, 1))
    assert group.finalize(config) == []
    assert path.bbox == BBox.new(0, 0, 2, 1)
    assert group.content_bbox == path.bbox
    assert group.bbox.x == pytest.approx((9, 10))
    assert group.bbox.y == pytest.approx((0, 2))
    expected = group.transform.apply_to_bbox(path.bbox)
    assert group.bbox.x == pytest.approx(expected.x)
    assert group.bbox.y == pytest.approx(expected.y)


def test_nested_transforms(config: SvgConfig, make_box) -> None:
    path = make_box(0, 0, 1, 1)
    path.apply_transform(Transform.of_translation((1, 0)))
    group = SvgElement.new_group()
    group.push_content(path)
    group.apply_transform(Transform.identity() * 2)
    group.finalize(config)
    assert path.bbox == BBox.new(1, 0, 2, 1)
    assert group.bbox.x == pytest.approx((2, 4))
    assert group.bbox.y == pytest.approx((0, 2))


def test_apply_transform_composes() -> None:
    element = SvgElement.new_group()
    element.apply_transform(Transform.of_translation((1, 0)))
    element.apply_transform(Transform.of_rotation(90))
    assert element.transform.rotation == 90
    assert element.transform.translation == pytest.approx((0, 1), abs=1e-12)


def test_attributes(config: SvgConfig, make_box) -> None:
    path = make_box(0, 0, 1, 1)
    path.add_attribute('fill', 'red')
    path.apply_transform(Transform.of_rotation(30))
    path.finalize(config)
    assert [a.name for a in path.attributes] == ['fill', 'transform', 'd']
    assert path.attributes[1].value == 'rotate(30.0000)'
    assert path.attributes[2].value.startswith('M 0.0000,0.0000 L 1.0000')
    assert path.attributes[2].value.endswith(' z')


def test_identity_transform_not_baked(config: SvgConfig, make_box) -> None:
    path = make_box(0, 0, 1, 1)
    path.finalize(config)
    assert [a.name for a in path.attributes] == ['d']


def test_attribute_helpers() -> None:
    element = SvgElement.new('line', prefix='svg')
    assert element.ns_name == 'svg:line'
    assert element.name == 'line'
    element.add_size('stroke-width', 0.25)
    element.add_color('stroke', (0, 0, 255, 255))
    element.add_markers(start='arrow', end='dot')
    element.add_attribute('href', '#a', prefix='xlink')
    assert [(a.qualified_name, a.value) for a in element.attributes] == [
        ('stroke-width', '0.2500'),
        ('stroke', '#0000ff'),
        ('marker-start', 'url(#arrow)'),
        ('marker-end', 'url(#dot)'),
        ('xlink:href', '#a'),
    ]


def test_content_rectangles(make_box) -> None:
    config = SvgConfig().set_content_rectangles(0.5, 'green')
    a = make_box(0, 0, 1, 1)
    a.apply_transform(Transform.of_translation((5, 5)))
    b = make_box(2, 2, 3, 3)
    group = SvgElement.new_group()
    group.push_content(a)
    group.push_content(b)
    extras = group.finalize(config)

    # One outline per finalized element, added beside it
    assert len(extras) == 1
    assert group.contents[:2] == [a, b]
    assert len(group.contents) == 4
    outline_a, outline_b = group.contents[2:]
    assert all(e.finalized for e in (*extras, outline_a, outline_b))
    assert outline_a.contents == []
    assert extras[0].content_bbox == group.content_bbox

    attrs = {x.name: x.value for x in outline_a.attributes}
    assert attrs['fill'] == 'none'
    assert attrs['stroke'] == '#008000'
    assert attrs['stroke-width'] == '0.5000'
    assert attrs['transform'] == 'translate(5.0000 5.0000)'
    assert attrs['d'].startswith('M 0.0000,0.0000')
    assert 'transform' not in {x.name for x in outline_b.attributes}

    # Outlines don't change the layout
    assert group.content_bbox == BBox.new(2, 2, 6, 6)


def test_empty_content_rectangles() -> None:
    config = SvgConfig().set_content_rectangles(0.5, 'green')
    empty = SvgElement.new_group()
    point = SvgElement.new_polygon(Polygon.new(1))
    group = SvgElement.new_group()
    group.push_content(empty)
    group.push_content(point)
    extras = group.finalize(config)

    assert group.content_bbox.is_none()
    assert len(extras) == 1
    assert len(group.contents) == 4
    for outline in (*group.contents[2:], *extras):
        attrs = {x.name: x.value for x in outline.attributes}
        assert attrs['d'] == 'M 0.0000,0.0000 z'
        assert attrs['stroke'] == '#008000'
        assert outline.bbox.is_none()


def test_double_finalize(config: SvgConfig, make_box) -> None:
    path = make_box(0, 0, 1, 1)
    path.finalize(config)
    with pytest.raises(RuntimeError):
        path.finalize(config)


def test_polygon_element(config: SvgConfig) -> None:
    element = SvgElement.new_polygon(Polygon.new_circle(2) + (1, 1))
    element.finalize(config)
    assert element.bbox.x == pytest.approx((-1, 3))
    assert element.bbox.y == pytest.approx((-1, 3))
    d = element.attributes[-1].value
    assert d.count('C ') == 4
    assert d.endswith(' z')


def test_box(config: SvgConfig) -> None:
    element = SvgElement.new_box(BBox.new(1, 2, 4, 6))
    element.finalize(config)
    assert element.bbox == BBox.new(1, 2, 4, 6)
    assert SvgElement.new_box(BBox.none()).kind.path.elements == []


def test_grid(config: SvgConfig) -> None:
    extent = BBox.new(0, 0, 30, 20)
    grid = SvgElement.new_grid(extent, 10, 0.1, 'grey')
    assert grid is not None
    grid.finalize(config)
    assert grid.bbox == extent
    attrs = {a.name: a.value for a in grid.attributes}
    assert attrs['fill'] == 'none'
    assert attrs['stroke'] == '#808080'
    assert attrs['stroke-width'] == '0.1000'
    assert attrs['d'].startswith('M 0.0000,0.0000 v 20.0000 M 10.0000')
    assert 'M 0.0000,10.0000 h 30.0000' in attrs['d']
    assert attrs['d'].count('M ') == 9


def test_grid_layout() -> None:
    grid = SvgElement.new_grid(BBox.new(0, 0, 30, 20), 10, 0.1, 'grey')
    assert grid is not None
    grid.finalize(SvgConfig(show_layout=True))
    d = grid.attributes[-1].value
    assert d.count('M ') == 10
    assert d.endswith(' z')


def test_grid_too_small() -> None:
    assert SvgElement.new_grid(BBox.new(0, 0, 5, 5), 10, 0.1, 'grey') is None
    assert SvgElement.new_grid(BBox.none(), 10, 0.1, 'grey') is None


def test_indent(config: SvgConfig, make_box) -> None:
    group = SvgElement.new_group()
    group.push_content(make_box(0, 0, 1, 1))
    group.finalize(config)
    text = group.indent()
    assert text.splitlines()[0] == 'g'
    assert '  path' in text
    assert [e.name for e in group.iter_elements()] == ['g', 'path']
