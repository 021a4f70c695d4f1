#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Abstract Syntax Tree for parsed shortcode documents.

Examples
--------
    >>> from shortcode2blocks.ast import Shortcode, Text
    >>> node = Shortcode(tag="vc_column_text", children=[Text(content="Hello")])

"""

from shortcode2blocks.ast.nodes import AnyNode, Node, Shortcode, Text
from shortcode2blocks.ast.serialization import node_to_dict, nodes_to_json
from shortcode2blocks.ast.visitors import NodeVisitor, ShortcodeCounter

__all__ = [
    "AnyNode",
    "Node",
    "Shortcode",
    "Text",
    "NodeVisitor",
    "ShortcodeCounter",
    "node_to_dict",
    "nodes_to_json",
]
