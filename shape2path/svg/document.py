"""Document access — lxml facade used by the dispatcher, CLI and API.

The converters only see attribute mappings. Everything that touches the
tree itself (tag names, children, building and swapping nodes) goes through
a ``NodeAdapter`` so another DOM can be plugged in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from lxml import etree

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


class SvgParseError(ValueError):
    """Raised when the input is not well-formed XML."""


class NodeAdapter(Protocol):
    def tag_name(self, node: Any) -> str | None: ...

    def children(self, node: Any) -> Iterable[Any]: ...

    def attributes(self, node: Any) -> Mapping[str, str]: ...

    def set_attribute(self, node: Any, name: str, value: str) -> None: ...

    def remove_attribute(self, node: Any, name: str) -> None: ...

    def replace(self, node: Any, new_node: Any) -> None: ...


class LxmlAdapter:
    """``NodeAdapter`` over ``lxml.etree`` elements."""

    def tag_name(self, node: Any) -> str | None:
        # Comments, processing instructions and entities have a callable tag
        if not isinstance(node.tag, str):
            return None
        return etree.QName(node).localname

    def children(self, node: Any) -> Iterable[Any]:
        return list(node)

    def attributes(self, node: Any) -> Mapping[str, str]:
        return node.attrib

    def set_attribute(self, node: Any, name: str, value: str) -> None:
        node.set(name, value)

    def remove_attribute(self, node: Any, name: str) -> None:
        node.attrib.pop(name, None)

    def replace(self, node: Any, new_node: Any) -> None:
        parent = node.getparent()
        if parent is None:
            logger.debug("Node <%s> has no parent, left in place", self.tag_name(node))
            return
        # lxml keeps the tail text with the element it belongs to
        tail = node.tail
        parent.replace(node, new_node)
        new_node.tail = tail


def create_path(node: Any) -> Any:
    """Default node factory: a ``path`` in the node's namespace with its attributes."""
    namespace = etree.QName(node).namespace
    tag = etree.QName(namespace, "path").text if namespace else "path"
    path = etree.Element(tag, nsmap=node.nsmap)
    for name, value in node.attrib.items():
        path.set(name, value)
    return path


def parse_svg(svg: str | bytes) -> Any:
    """Parse SVG markup into an lxml root element."""
    if isinstance(svg, str):
        # lxml refuses str input that carries an encoding declaration
        svg = svg.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(svg, parser)
    except etree.XMLSyntaxError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e
    if root is None:
        raise SvgParseError("Malformed SVG: empty document")
    return root


def serialize_svg(root: Any, xml_declaration: bool = False) -> str:
    if xml_declaration:
        body = etree.tostring(root, encoding="unicode")
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
    return etree.tostring(root, encoding="unicode")
