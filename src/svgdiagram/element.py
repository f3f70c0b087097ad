"""SVG element tree nodes and the finalize pass.

An element tree is built top-down (see :class:`svgdiagram.svg.Svg`),
then finalized bottom-up by :meth:`SvgElement.finalize`, which computes
bounding boxes, bakes transforms into attributes and generates the
kind-specific attributes such as path data. Finalized trees are
serialized with :class:`svgdiagram.events.ElementIter`.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, NamedTuple, Protocol

from .bbox import BBox
from .bezierpath import BezierPath
from .color import Color
from .transform import Transform

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .color import TColor
    from .polygon import Polygon
    from .svg import SvgConfig

logger = logging.getLogger(__name__)

# Minimum number of grid lines along each axis
_MIN_GRID_LINES = 3


class Attribute(NamedTuple):
    """An element attribute with an optional namespace prefix."""

    name: str
    value: str
    prefix: str | None = None

    @property
    def qualified_name(self) -> str:
        """The attribute name as written in markup, i.e. `xmlns:svg`."""
        if self.prefix:
            return f'{self.prefix}:{self.name}'
        return self.name


class ElementKind(Protocol):
    """Node-kind specific behavior of an :class:`SvgElement`."""

    @property
    def name(self) -> str:
        """The element (tag) name."""

    def finalize(self, element: SvgElement, config: SvgConfig) -> BBox:
        """Return the bounding box this kind adds to the element."""

    def add_attributes(self, element: SvgElement, config: SvgConfig) -> None:
        """Add the kind-specific attributes once the bounding box is known."""


class SvgRoot:
    """The document root `svg` element."""

    name = 'svg'

    def finalize(self, element: SvgElement, config: SvgConfig) -> BBox:
        return BBox.none()

    def add_attributes(self, element: SvgElement, config: SvgConfig) -> None:
        pass


class SvgGroup:
    """A container element, a `g` unless otherwise named."""

    def __init__(self, name: str = 'g') -> None:
        self.name = name

    def finalize(self, element: SvgElement, config: SvgConfig) -> BBox:
        return BBox.none()

    def add_attributes(self, element: SvgElement, config: SvgConfig) -> None:
        pass


class SvgPathKind:
    """A `path` element drawing a :class:`BezierPath`."""

    name = 'path'

    def __init__(self, path: BezierPath, closed: bool = False) -> None:
        self.path = path
        self.closed = closed

    def finalize(self, element: SvgElement, config: SvgConfig) -> BBox:
        return self.path.bounds()

    def add_attributes(self, element: SvgElement, config: SvgConfig) -> None:
        element.add_attribute('d', self.path.as_svg_path(self.closed))


class SvgGridKind:
    """A `path` element drawing a grid of lines over a region."""

    name = 'path'

    def __init__(
        self, extent: BBox, spacing: float, line_width: float, color: Color
    ) -> None:
        self.extent = extent
        self.spacing = spacing
        self.line_width = line_width
        self.color = color

    @staticmethod
    def line_range(extent: BBox, spacing: float) -> tuple[range, range]:
        """Grid line indices along the X and Y axes."""
        x = extent.x
        y = extent.y
        return (
            range(math.floor(x.min / spacing), math.floor(x.max / spacing) + 2),
            range(math.floor(y.min / spacing), math.floor(y.max / spacing) + 2),
        )

    def grid_path(self, show_layout: bool = False) -> str:
        """SVG path data for the grid lines.

        Args:
            show_layout: Also outline the grid extent.
        """
        x = self.extent.x
        y = self.extent.y
        xlines, ylines = self.line_range(self.extent, self.spacing)
        dparts = [
            f'M {i * self.spacing:.4f},{y.min:.4f} v {y.size():.4f}'
            for i in xlines
        ]
        dparts.extend(
            f'M {x.min:.4f},{i * self.spacing:.4f} h {x.size():.4f}'
            for i in ylines
        )
        if show_layout:
            dparts.append(
                f'M {x.min:.4f},{y.min:.4f} h {x.size():.4f} v {y.size():.4f}'
                f' h {-x.size():.4f} z'
            )
        return ' '.join(dparts)

    def finalize(self, element: SvgElement, config: SvgConfig) -> BBox:
        return self.extent

    def add_attributes(self, element: SvgElement, config: SvgConfig) -> None:
        element.add_attribute('fill', 'none')
        element.add_color('stroke', self.color)
        element.add_size('stroke-width', self.line_width)
        element.add_attribute('d', self.grid_path(config.show_layout))


class SvgElement:
    """A node of an SVG element tree.

    Attributes:
        kind: Node-kind specific behavior and payload.
        prefix: Optional namespace prefix of the element name.
        attributes: Attributes in the order they were added.
        transform: Transform from this element's space to its parent's.
        contents: Child elements, owned by this element.
        characters: Character content, empty if none.
        content_bbox: Bounding box in this element's own space.
            Only valid after finalize.
        bbox: Bounding box in the parent's space. Only valid after finalize.
    """

    def __init__(self, kind: ElementKind, prefix: str | None = None) -> None:
        self.kind = kind
        self.prefix = prefix
        self.attributes: list[Attribute] = []
        self.transform = Transform.identity()
        self.contents: list[SvgElement] = []
        self.characters = ''
        self.content_bbox = BBox.none()
        self.bbox = BBox.none()
        self.finalized = False

    @classmethod
    def new(cls, name: str, prefix: str | None = None) -> SvgElement:
        """Create a plain container element with the given name."""
        return cls(SvgGroup(name), prefix)

    @classmethod
    def new_root(cls) -> SvgElement:
        return cls(SvgRoot())

    @classmethod
    def new_group(cls) -> SvgElement:
        return cls(SvgGroup())

    @classmethod
    def new_path(cls, path: BezierPath, closed: bool = False) -> SvgElement:
        return cls(SvgPathKind(path, closed))

    @classmethod
    def new_polygon(cls, polygon: Polygon, closed: bool = True) -> SvgElement:
        return cls.new_path(polygon.as_paths(), closed)

    @classmethod
    def new_box(cls, bbox: BBox) -> SvgElement:
        """Create a closed rectangular path outlining `bbox`."""
        if bbox.is_none():
            return cls.new_path(BezierPath(), closed=True)
        return cls.new_path(BezierPath.of_points(bbox.corners()), closed=True)

    @classmethod
    def new_grid(
        cls, bbox: BBox, spacing: float, line_width: float, color: TColor
    ) -> SvgElement | None:
        """Create a grid of lines covering `bbox`.

        Returns:
            The grid element, or None if the region is too small
            for three grid lines in each direction.
        """
        if bbox.is_none() or spacing <= 0:
            return None
        xlines, ylines = SvgGridKind.line_range(bbox, spacing)
        if len(xlines) < _MIN_GRID_LINES or len(ylines) < _MIN_GRID_LINES:
            return None
        return cls(SvgGridKind(bbox, spacing, line_width, Color.parse(color)))

    @property
    def name(self) -> str:
        return self.kind.name

    @property
    def ns_name(self) -> str:
        """The element name including any namespace prefix."""
        if self.prefix:
            return f'{self.prefix}:{self.kind.name}'
        return self.kind.name

    def add_attribute(
        self, name: str, value: str, prefix: str | None = None
    ) -> None:
        self.attributes.append(Attribute(name, value, prefix))

    def add_size(self, name: str, value: float) -> None:
        """Add a numeric attribute with four decimal places."""
        self.add_attribute(name, f'{value:.4f}')

    def add_color(self, name: str, color: TColor) -> None:
        self.add_attribute(name, str(Color.parse(color)))

    def add_markers(
        self,
        start: str | None = None,
        mid: str | None = None,
        end: str | None = None,
    ) -> None:
        """Reference marker definitions by id."""
        markers = (('start', start), ('mid', mid), ('end', end))
        for position, marker_id in markers:
            if marker_id:
                self.add_attribute(f'marker-{position}', f'url(#{marker_id})')

    def add_string(self, text: str) -> None:
        """Set the character content."""
        self.characters = text

    def push_content(self, element: SvgElement) -> None:
        """Append a child element."""
        self.contents.append(element)

    def apply_transform(self, transform: Transform) -> None:
        """Apply a transform after this element's current transform."""
        self.transform = transform.apply_to_transform(self.transform)

    def finalize(self, config: SvgConfig) -> list[SvgElement]:
        """Finalize this element and its subtree.

        Children are finalized first and their bounding boxes combined
        with this element's own content. Then the transform and the
        kind-specific attributes are added.

        Args:
            config: Diagram configuration.

        Returns:
            Extra elements (content rectangle outlines) to be added
            as siblings of this element by the caller.

        Raises:
            RuntimeError: If the element was already finalized.
        """
        if self.finalized:
            raise RuntimeError(f'element <{self.ns_name}> is already finalized')

        bbox = BBox.none()
        child_extras: list[SvgElement] = []
        for child in self.contents:
            child_extras.extend(child.finalize(config))
            bbox = bbox.union(child.bbox)
        self.contents.extend(child_extras)

        bbox = bbox.union(self.kind.finalize(self, config))
        self.content_bbox = bbox

        extras: list[SvgElement] = []
        if config.show_content_rectangles is not None:
            extras.append(self._content_rectangle(config))

        self.bbox = self.transform.apply_to_bbox(bbox)
        if not self.transform.is_identity():
            self.add_attribute(
                'transform', self.transform.as_svg_attribute_string()
            )
        self.kind.add_attributes(self, config)
        self.finalized = True
        logger.debug(
            'finalized <%s> content %s bbox %s', self.ns_name, bbox, self.bbox
        )
        return extras

    def _content_rectangle(self, config: SvgConfig) -> SvgElement:
        """An outline of the content, empty if there is no content."""
        width, color = config.show_content_rectangles  # type: ignore [misc]
        outline = SvgElement.new_box(self.content_bbox)
        outline.transform = self.transform
        outline.add_attribute('fill', 'none')
        outline.add_color('stroke', color)
        outline.add_size('stroke-width', width)
        # The outline is complete and must not itself be outlined
        outline.content_bbox = self.content_bbox
        outline.bbox = self.transform.apply_to_bbox(self.content_bbox)
        if not self.transform.is_identity():
            outline.add_attribute(
                'transform', self.transform.as_svg_attribute_string()
            )
        outline.kind.add_attributes(outline, config)
        outline.finalized = True
        return outline

    def iter_elements(self) -> Iterator[SvgElement]:
        """Depth-first pre-order iteration over this subtree."""
        yield self
        for child in self.contents:
            yield from child.iter_elements()

    def indent(self, depth: int = 0) -> str:
        """A readable indented dump of this subtree, for debugging."""
        pad = ' ' * depth
        lines = [f'{pad}{self.ns_name}']
        lines.extend(
            f'{pad}      {a.qualified_name}={a.value}' for a in self.attributes
        )
        if self.characters:
            lines.append(f'{pad}      "{self.characters}"')
        lines.extend(child.indent(depth + 2) for child in self.contents)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'<SvgElement {self.ns_name} at {id(self):#x}>'
