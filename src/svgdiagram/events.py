"""Serialize a finalized element tree as a stream of markup events."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, NamedTuple
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .element import SvgElement

_ATTR_ENTITIES = {'"': '&quot;'}

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'


class EventKind(enum.Enum):
    START_DOCUMENT = enum.auto()
    START_ELEMENT = enum.auto()
    CHARACTERS = enum.auto()
    END_ELEMENT = enum.auto()
    END_DOCUMENT = enum.auto()


class XmlEvent(NamedTuple):
    """A markup event.

    Element and character events refer to the element they came from,
    document events have no element.
    """

    kind: EventKind
    element: SvgElement | None = None

    def as_xml(self) -> str:
        """Render the event as XML text."""
        if self.kind == EventKind.START_DOCUMENT:
            return XML_DECLARATION
        if self.kind == EventKind.END_DOCUMENT or self.element is None:
            return ''
        if self.kind == EventKind.START_ELEMENT:
            attrs = ''.join(
                f' {a.qualified_name}="{escape(a.value, _ATTR_ENTITIES)}"'
                for a in self.element.attributes
            )
            return f'<{self.element.ns_name}{attrs}>'
        if self.kind == EventKind.CHARACTERS:
            return escape(self.element.characters)
        return f'</{self.element.ns_name}>'


class ElementIter:
    """Depth-first iterator over the events of an element tree.

    Emits a start document event, then for each element a start event,
    a characters event if it has any character content, the events of
    its children, and an end event, then finally an end document event.

    The iterator is single use; create a new one to iterate again.
    The tree must not be modified during iteration.
    """

    def __init__(self, root: SvgElement) -> None:
        self._events = self._walk(root)

    def __iter__(self) -> ElementIter:
        return self

    def __next__(self) -> XmlEvent:
        return next(self._events)

    @staticmethod
    def _open(element: SvgElement) -> Iterator[XmlEvent]:
        yield XmlEvent(EventKind.START_ELEMENT, element)
        if element.characters:
            yield XmlEvent(EventKind.CHARACTERS, element)

    @classmethod
    def _walk(cls, root: SvgElement) -> Iterator[XmlEvent]:
        yield XmlEvent(EventKind.START_DOCUMENT)
        yield from cls._open(root)
        # Each entry is an element and the index of its next child
        stack: list[list] = [[root, 0]]
        while stack:
            entry = stack[-1]
            element, index = entry
            if index < len(element.contents):
                entry[1] = index + 1
                child = element.contents[index]
                stack.append([child, 0])
                yield from cls._open(child)
            else:
                stack.pop()
                yield XmlEvent(EventKind.END_ELEMENT, element)
        yield XmlEvent(EventKind.END_DOCUMENT)


def events_as_xml(events: Iterator[XmlEvent]) -> str:
    """Concatenate the XML text of a sequence of events."""
    return ''.join(event.as_xml() for event in events)
