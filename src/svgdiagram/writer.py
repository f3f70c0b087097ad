"""Write markup events as an XML document with lxml."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from lxml import etree

from .events import XML_DECLARATION, EventKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typing_extensions import TypeAlias

    from .element import Attribute, SvgElement
    from .events import XmlEvent

logger = logging.getLogger(__name__)

TDocument: TypeAlias = (
    etree._ElementTree  # noqa: SLF001 pylint: disable=protected-access
)

# Namespaces for well known prefixes
XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'
XMLNS = 'xmlns'


def add_ns(tag: str, ns_map: dict[str | None, str], prefix: str | None) -> str:
    """Prepend a mapped namespace to `tag` (Clark notation)."""
    if prefix == 'xml':
        return f'{{{XML_NAMESPACE}}}{tag}'
    uri = ns_map.get(prefix)
    if uri is None:
        if prefix is not None:
            raise ValueError(f'Undeclared namespace prefix: {prefix}')
        return tag
    return f'{{{uri}}}{tag}'


def strip_ns(tag: str) -> str:
    """Strip the namespace part from the tag if any."""
    return tag.rpartition('}')[2]


def _element_nsmap(element: SvgElement) -> dict[str | None, str]:
    """Namespace declarations made by an element's attributes."""
    nsmap: dict[str | None, str] = {}
    for attr in element.attributes:
        if attr.prefix == XMLNS:
            nsmap[attr.name] = attr.value
        elif attr.prefix is None and attr.name == XMLNS:
            nsmap[None] = attr.value
    return nsmap


def _attribute_name(
    name: str, ns_map: dict[str | None, str], prefix: str | None
) -> str:
    """Resolve an attribute name (Clark notation).

    Unprefixed attributes are in no namespace, whatever the
    default namespace of their element.
    """
    if prefix is None:
        return name
    return add_ns(name, ns_map, prefix)


def _is_ns_declaration(attr: Attribute) -> bool:
    return attr.prefix == XMLNS or (attr.prefix is None and attr.name == XMLNS)


def events_to_tree(events: Iterable[XmlEvent]) -> TDocument:
    """Build an lxml document from a stream of events.

    Namespace declarations (`xmlns` and `xmlns:*` attributes) become
    the element namespace map and prefixed names are resolved.
    """
    builder = etree.TreeBuilder()
    scopes: list[dict[str | None, str]] = [{}]
    for event in events:
        element = event.element
        if event.kind == EventKind.START_ELEMENT and element is not None:
            declared = _element_nsmap(element)
            nsmap = {**scopes[-1], **declared}
            scopes.append(nsmap)
            attrib = {
                _attribute_name(attr.name, nsmap, attr.prefix): attr.value
                for attr in element.attributes
                if not _is_ns_declaration(attr)
            }
            builder.start(
                add_ns(element.name, nsmap, element.prefix),
                attrib,
                declared or None,
            )
        elif event.kind == EventKind.CHARACTERS and element is not None:
            builder.data(element.characters)
        elif event.kind == EventKind.END_ELEMENT and element is not None:
            builder.end(add_ns(element.name, scopes.pop(), element.prefix))
    root = builder.close()
    return etree.ElementTree(root)


def events_to_string(
    events: Iterable[XmlEvent], pretty_print: bool = False
) -> str:
    """Serialize a stream of events to an XML string (no declaration)."""
    document = events_to_tree(events)
    return etree.tostring(
        document.getroot(), encoding='unicode', pretty_print=pretty_print
    )


def write_events(
    events: Iterable[XmlEvent], stream: TextIO, pretty_print: bool = False
) -> None:
    """Write a stream of events to a text stream as an XML document."""
    stream.write(XML_DECLARATION + '\n')
    stream.write(events_to_string(events, pretty_print=pretty_print))
    logger.debug('wrote document')
