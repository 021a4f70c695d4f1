#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/ast/nodes.py
"""AST node classes for parsed shortcode documents.

A parsed document is an ordered sequence of nodes. There are exactly two
node kinds:

- ``Text`` holds literal text or HTML found outside (or inside) shortcodes.
- ``Shortcode`` holds one recognized tag with its attributes, its raw inner
  content, the nodes parsed from that content, and the exact source text the
  parser matched.

Both kinds support the visitor pattern through ``accept``.

Invariants
----------
``Shortcode.children`` is non-empty only when the inner content contains a
catalog tag; otherwise non-blank inner content is represented by a single
``Text`` child. ``Shortcode.raw`` is always the exact matched substring of the
input, so unconverted tags can be emitted losslessly.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Union


class Node(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_text`` and ``visit_shortcode`` methods

        Returns
        -------
        Any
            Result of the visitor's processing

        """
        ...


@dataclass
class Text(Node):
    """Literal text between or inside shortcodes.

    Parameters
    ----------
    content : str
        The text exactly as it appeared in the source (untrimmed)

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor."""
        return visitor.visit_text(self)

    @property
    def is_blank(self) -> bool:
        """Whether the text is empty after trimming whitespace."""
        return not self.content.strip()


@dataclass
class Shortcode(Node):
    """A recognized shortcode tag.

    Parameters
    ----------
    tag : str
        Shortcode tag name (e.g., ``vc_row``)
    attributes : dict of str to str
        Attributes in source order. Bare positional tokens are stored under
        their stringified index (``"0"``, ``"1"``, ...)
    content : str, default ""
        Raw, unparsed inner content between the opening and closing tags
    children : list of Node, default empty
        Nodes parsed from ``content``
    raw : str, default ""
        The exact source substring matched for this shortcode
    self_closing : bool, default False
        Whether the tag was written in the ``[tag /]`` form

    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    content: str = ""
    children: list[Node] = field(default_factory=list)
    raw: str = ""
    self_closing: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor."""
        return visitor.visit_shortcode(self)

    def get(self, key: str, default: str = "") -> str:
        """Look up an attribute value, returning ``default`` when absent."""
        return self.attributes.get(key, default)

    @property
    def positional(self) -> list[str]:
        """Bare positional attribute values in encounter order."""
        return [value for key, value in self.attributes.items() if key.isdigit()]

    @property
    def named(self) -> dict[str, str]:
        """Keyed attributes, excluding positional tokens."""
        return {key: value for key, value in self.attributes.items() if not key.isdigit()}

    @property
    def has_shortcode_children(self) -> bool:
        """Whether any direct child is itself a shortcode."""
        return any(isinstance(child, Shortcode) for child in self.children)

    def iter_shortcodes(self) -> Iterator[Shortcode]:
        """Yield this node and every nested shortcode, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Shortcode):
                yield from child.iter_shortcodes()


AnyNode = Union[Text, Shortcode]
