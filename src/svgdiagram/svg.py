"""Build, finalize and generate an SVG diagram."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, TextIO

from . import writer
from .bbox import BBox
from .color import Color
from .element import SvgElement
from .events import ElementIter

if TYPE_CHECKING:
    from typing_extensions import Self

    from .color import TColor

logger = logging.getLogger(__name__)

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'

# Grid drawn over the diagram when show_grid is set
GRID_SPACING = 10.0
GRID_LINE_WIDTH = 0.1
GRID_COLOR = 'grey'


class SvgVersion(enum.Enum):
    """SVG version written to the root element."""

    V1_0 = '1.0'
    V1_1 = '1.1'
    V2_0 = '2.0'


class SvgConfig:
    """Diagram output options.

    Attributes:
        show_grid: Draw a grid over the whole diagram.
        show_layout: Outline the extent of grids.
        show_content_rectangles: If set, a (line width, color) pair
            used to outline the content of every element.
    """

    def __init__(
        self,
        show_grid: bool = False,
        show_layout: bool = False,
        show_content_rectangles: tuple[float, Color] | None = None,
    ) -> None:
        self.show_grid = show_grid
        self.show_layout = show_layout
        self.show_content_rectangles = show_content_rectangles

    def set_show_grid(self, show_grid: bool = True) -> Self:
        self.show_grid = show_grid
        return self

    def set_show_layout(self, show_layout: bool = True) -> Self:
        self.show_layout = show_layout
        return self

    def set_content_rectangles(self, width: float, color: TColor) -> Self:
        """Outline element contents with lines of `width` and `color`."""
        self.show_content_rectangles = (width, Color.parse(color))
        return self

    def clear_content_rectangles(self) -> Self:
        self.show_content_rectangles = None
        return self

    def __repr__(self) -> str:
        return (
            f'SvgConfig(show_grid={self.show_grid},'
            f' show_layout={self.show_layout},'
            f' show_content_rectangles={self.show_content_rectangles})'
        )


class Svg:
    """SVG diagram builder.

    Elements are assembled on a stack: push an element, add
    subelements to the top of the stack, then move the completed
    element into its parent, the diagram contents, or the definitions.

    Once all elements are added, :meth:`finalize` computes the
    layout and :meth:`generate_diagram` creates the document root,
    which can then be serialized with :meth:`iter_events`.

    Misuse of the stack raises RuntimeError.
    """

    def __init__(self, config: SvgConfig | None = None) -> None:
        self.config = config if config is not None else SvgConfig()
        self.version = SvgVersion.V2_0
        self.bbox = BBox.none()
        self.contents: list[SvgElement] = []
        self.definitions: list[SvgElement] = []
        self.stack: list[SvgElement] = []
        self.root: SvgElement | None = None
        self._finalized = False

    def set_version(self, version: SvgVersion | str) -> Self:
        """Set the SVG version, one of '1.0', '1.1' or '2.0'."""
        self.version = SvgVersion(version)
        return self

    def stack_push(self, element: SvgElement) -> None:
        """Push an element under construction."""
        self.stack.append(element)

    def stack_pop(self) -> SvgElement:
        """Remove and return the top element of the stack."""
        if not self.stack:
            raise RuntimeError('cannot pop from an empty element stack')
        return self.stack.pop()

    def stack_add_subelement(self, element: SvgElement) -> None:
        """Add a child to the element on top of the stack."""
        if not self.stack:
            raise RuntimeError('cannot add a subelement to an empty stack')
        self.stack[-1].push_content(element)

    def stack_pop_to_child(self) -> None:
        """Pop the top element and add it to the element below it."""
        if len(self.stack) < 2:  # noqa: PLR2004
            raise RuntimeError(
                'the stack needs two elements to pop an element to a child'
            )
        element = self.stack.pop()
        self.stack_add_subelement(element)

    def contents_add_element(self, element: SvgElement) -> None:
        """Add a completed element to the visible diagram contents."""
        self.contents.append(element)

    def contents_take_stack(self) -> None:
        """Move the only element on the stack to the contents."""
        self.contents_add_element(self._take_stack('contents'))

    def definitions_add_element(self, element: SvgElement) -> None:
        """Add a completed element to the definitions (`defs`)."""
        self.definitions.append(element)

    def definitions_take_stack(self) -> None:
        """Move the only element on the stack to the definitions."""
        self.definitions_add_element(self._take_stack('definitions'))

    def _take_stack(self, target: str) -> SvgElement:
        if len(self.stack) != 1:
            raise RuntimeError(
                f'the stack must hold exactly one element to move to the'
                f' {target}, it has {len(self.stack)}'
            )
        return self.stack.pop()

    def finalize(self) -> None:
        """Finalize all the contents and definitions.

        Raises:
            RuntimeError: If elements are left on the stack or the
                diagram is already finalized.
        """
        if self.stack:
            raise RuntimeError(
                f'{len(self.stack)} elements left on the stack at finalize'
            )
        if self._finalized:
            raise RuntimeError('the diagram is already finalized')

        bbox = BBox.none()
        extras: list[SvgElement] = []
        for element in self.contents:
            extras.extend(element.finalize(self.config))
            bbox = bbox.union(element.bbox)
        self.contents.extend(extras)

        definition_extras: list[SvgElement] = []
        for element in self.definitions:
            definition_extras.extend(element.finalize(self.config))
        # Outlines of definitions stay inside the defs
        self.definitions.extend(definition_extras)

        self.bbox = bbox
        self._finalized = True
        logger.debug('diagram finalized: bbox %s', bbox)

    def generate_diagram(self) -> SvgElement:
        """Create the finalized document root element.

        The diagram is finalized first if it has not been already.

        Returns:
            The root `svg` element.
        """
        if not self._finalized:
            self.finalize()

        x, y, w, h = self.bbox.get_bounds()
        root = SvgElement.new_root()
        root.add_attribute('svg', SVG_NAMESPACE, prefix='xmlns')
        root.add_attribute('xmlns', SVG_NAMESPACE)
        root.add_attribute('version', self.version.value)
        root.add_attribute('width', f'{w:.4f}mm')
        root.add_attribute('height', f'{h:.4f}mm')
        root.add_attribute('viewBox', f'{x:.4f} {y:.4f} {w:.4f} {h:.4f}')

        if self.definitions:
            defs = SvgElement.new('defs')
            defs.contents.extend(self.definitions)
            _mark_finalized(defs, BBox.none())
            root.push_content(defs)

        root.contents.extend(self.contents)

        if self.config.show_grid:
            grid = SvgElement.new_grid(
                self.bbox, GRID_SPACING, GRID_LINE_WIDTH, GRID_COLOR
            )
            if grid is not None:
                grid_extras = grid.finalize(self.config)
                root.push_content(grid)
                root.contents.extend(grid_extras)
            else:
                logger.debug('diagram too small for a grid')

        _mark_finalized(root, self.bbox)
        self.root = root
        logger.debug(
            'generated SVG %s diagram, viewBox %s %s %s %s',
            self.version.value,
            x,
            y,
            w,
            h,
        )
        return root

    def iter_events(self) -> ElementIter:
        """Iterate over the markup events of the generated diagram.

        Raises:
            RuntimeError: If :meth:`generate_diagram` has not been called.
        """
        if self.root is None:
            raise RuntimeError('generate_diagram must be called first')
        return ElementIter(self.root)

    def write_document(
        self, stream: TextIO, pretty_print: bool = False
    ) -> None:
        """Write the generated diagram to a stream as an SVG document."""
        writer.write_events(self.iter_events(), stream, pretty_print)


def _mark_finalized(element: SvgElement, bbox: BBox) -> None:
    """Finalize a container whose children are already finalized."""
    element.content_bbox = bbox
    element.bbox = bbox
    element.finalized = True
