"""Shape dispatcher — walks a document and swaps every basic shape for a path."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from shape2path.engine import converters  # noqa: F401  (registers the converters)
from shape2path.engine.registry import ConverterRegistry, get_registry
from shape2path.models.options import ConversionOptions
from shape2path.svg.document import LxmlAdapter, NodeAdapter, create_path

logger = logging.getLogger(__name__)

NodeFactory = Callable[[Any], Any]


def iter_nodes(root: Any, adapter: NodeAdapter) -> list[Any]:
    """Every node under ``root`` (inclusive), depth-first, parents before children."""
    ordered: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        ordered.append(node)
        stack.extend(reversed(list(adapter.children(node))))
    return ordered


def convert(
    root: Any,
    node_factory: NodeFactory | None = None,
    options: ConversionOptions | Mapping[str, Any] | None = None,
    *,
    adapter: NodeAdapter | None = None,
    registry: ConverterRegistry | None = None,
) -> int:
    """Replace rect/circle/ellipse/line/polyline/polygon nodes with paths.

    The tree is walked once, as it was before any replacement. Each shape
    node is handed to ``node_factory`` to build its replacement, which gets
    the computed ``d`` attribute, loses the shape-only attributes and takes
    the original's place. Anything else is left alone.

    Returns the number of shape nodes converted.
    """
    adapter = adapter or LxmlAdapter()
    node_factory = node_factory or create_path
    registry = registry or get_registry()
    opts = ConversionOptions.coerce(options)

    converted = 0
    for node in iter_nodes(root, adapter):
        tag = adapter.tag_name(node)
        if not tag:
            continue
        kind = tag.lower()
        spec = registry.get(kind)
        if spec is None:
            continue

        d = spec.fn(adapter.attributes(node), kind, opts)
        path = node_factory(node)
        adapter.set_attribute(path, "d", d)
        for name in spec.attributes_to_strip(opts.attribute_cleanup):
            adapter.remove_attribute(path, name)
        adapter.replace(node, path)

        converted += 1
        logger.debug("  <%s> -> <path d=%r>", tag, d)

    logger.info(
        "Converted %d shape(s) to path (circles: %s)",
        converted,
        opts.circle_algorithm.value,
    )
    return converted


shape2path = convert
