#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/ast/serialization.py
"""JSON serialization of parsed shortcode trees.

The JSON form is a debugging and reporting aid (the CLI ``parse`` command);
it is not read back by the library.

Format
------
Text nodes serialize as ``{"type": "text", "content": ...}``. Shortcode nodes
serialize as ``{"type": "shortcode", "tag": ..., "attributes": {...},
"content": ..., "children": [...], "raw": ...}``; ``content`` and ``raw`` are
omitted with ``include_source=False``.

"""

from __future__ import annotations

import json
from typing import Any, Sequence

from shortcode2blocks.ast.nodes import Node, Shortcode, Text


def node_to_dict(node: Node, include_source: bool = True) -> dict[str, Any]:
    """Convert a single node (recursively) to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to convert
    include_source : bool, default True
        Include raw inner content and the matched source text

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    TypeError
        If ``node`` is not a known node type

    """
    if isinstance(node, Text):
        return {"type": "text", "content": node.content}

    if isinstance(node, Shortcode):
        data: dict[str, Any] = {
            "type": "shortcode",
            "tag": node.tag,
            "attributes": dict(node.attributes),
        }
        if node.self_closing:
            data["self_closing"] = True
        if include_source:
            data["content"] = node.content
        data["children"] = [node_to_dict(child, include_source) for child in node.children]
        if include_source:
            data["raw"] = node.raw
        return data

    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def nodes_to_json(nodes: Sequence[Node], include_source: bool = True, indent: int | None = 2) -> str:
    """Serialize a node sequence to a JSON array string."""
    return json.dumps([node_to_dict(node, include_source) for node in nodes], indent=indent, ensure_ascii=False)


__all__ = ["node_to_dict", "nodes_to_json"]
