#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors separate algorithms over the shortcode tree (counting, rendering,
validation) from the node classes themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Iterable

from shortcode2blocks.ast.nodes import Node, Shortcode, Text


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    Collecting every tag name:

        >>> class TagCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.tags = []
        ...
        ...     def visit_text(self, node):
        ...         pass
        ...
        ...     def visit_shortcode(self, node):
        ...         self.tags.append(node.tag)
        ...         self.visit_all(node.children)

    """

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_shortcode(self, node: Shortcode) -> Any:
        """Visit a Shortcode node."""
        pass

    def visit_all(self, nodes: Iterable[Node]) -> list[Any]:
        """Visit each node in order and collect the results."""
        return [node.accept(self) for node in nodes]


class ShortcodeCounter(NodeVisitor):
    """Count shortcode occurrences by tag at every nesting depth.

    Each occurrence is counted exactly once, whether it sits at the top level
    or deep inside other shortcodes.
    """

    def __init__(self) -> None:
        """Initialize an empty counter."""
        self.counts: Counter[str] = Counter()

    def visit_text(self, node: Text) -> None:
        """Text contributes nothing to the count."""
        return None

    def visit_shortcode(self, node: Shortcode) -> None:
        """Count the tag and descend into its children."""
        self.counts[node.tag] += 1
        self.visit_all(node.children)

    def report(self) -> dict[str, int]:
        """Return counts ordered by descending count, ties in first-seen order."""
        return dict(self.counts.most_common())


__all__ = ["NodeVisitor", "ShortcodeCounter"]
