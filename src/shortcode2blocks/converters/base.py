#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/base.py
"""Abstract base class for shortcode converters.

A converter handles one family of shortcode tags. It declares the tags it
supports in ``TAGS`` and turns one ``Shortcode`` node into block markup.
Child nodes are rendered by asking the builder (``convert_children``), so a
converter never parses text or dispatches on other families' tags itself.

Converters may add CSS rules and font requests to the builder's current
``ConversionContext``; they have no other side effects.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Mapping, Sequence

from shortcode2blocks.ast import Node, Shortcode
from shortcode2blocks.attachments import Attachment
from shortcode2blocks.constants import MAX_NUMERIC_DIGITS
from shortcode2blocks.context import ConversionContext
from shortcode2blocks.exceptions import ConverterRegistryError
from shortcode2blocks.options import ConversionOptions
from shortcode2blocks.utils.html_sanitizer import sanitize_post_content

if TYPE_CHECKING:
    from shortcode2blocks.builder import BlockBuilder

logger = logging.getLogger(__name__)


class BaseConverter(ABC):
    """Abstract base class for all tag-family converters.

    Parameters
    ----------
    builder : BlockBuilder
        The builder that owns this converter; used for child conversion and
        for access to the current context, options and attachment resolver

    Examples
    --------
    A minimal converter:

        >>> class RuleConverter(BaseConverter):
        ...     TAGS = frozenset({"vc_separator"})
        ...
        ...     def convert(self, node):
        ...         return "<!-- wp:separator /-->\\n\\n"

    """

    TAGS: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, builder: BlockBuilder):
        """Bind the converter to its builder."""
        self.builder = builder

    @property
    def context(self) -> ConversionContext:
        """The context of the conversion in progress."""
        return self.builder.context

    @property
    def options(self) -> ConversionOptions:
        """Conversion options of the owning builder."""
        return self.builder.options

    def can_convert(self, tag: str) -> bool:
        """Check whether this converter handles ``tag``."""
        return tag in self.TAGS

    @abstractmethod
    def convert(self, node: Shortcode) -> str:
        """Convert a shortcode node to block markup.

        Parameters
        ----------
        node : Shortcode
            Node whose tag is in ``TAGS``

        Returns
        -------
        str
            Block markup, or an empty string when the node yields no output

        Raises
        ------
        ConverterRegistryError
            If the node's tag is not handled by this converter

        """
        ...

    def unsupported(self, node: Shortcode) -> ConverterRegistryError:
        """Build the error raised when a converter receives a tag it does not handle."""
        return ConverterRegistryError(
            f"{type(self).__name__} cannot convert [{node.tag}]",
            tag=node.tag,
        )

    def convert_children(self, children: Sequence[Node]) -> str:
        """Render child nodes through the builder."""
        if not children:
            return ""
        return self.builder.build_from_nodes(children)

    def resolve_attachment(self, value: str) -> Attachment | None:
        """Resolve a numeric attachment reference, or return None."""
        value = value.strip()
        if not value.isdecimal() or len(value) > MAX_NUMERIC_DIGITS:
            return None
        attachment = self.builder.attachment_resolver.resolve(int(value))
        if attachment is None or not attachment.url:
            logger.debug("Attachment %s could not be resolved", value)
            return None
        return attachment

    def mint_class(self, declarations: Mapping[str, str]) -> str:
        """Mint a class and register ``declarations`` for it.

        Returns an empty string (and mints nothing) when no declaration has
        a value.
        """
        kept = {prop: value for prop, value in declarations.items() if value}
        if not kept:
            return ""
        class_name = self.context.next_class()
        self.context.add_class_css(class_name, kept)
        return class_name

    @staticmethod
    def body(node: Shortcode) -> str:
        """The node's inner content, trimmed."""
        return node.content.strip()

    @staticmethod
    def kses(text: str) -> str:
        """Clean text to the post-content HTML subset."""
        return sanitize_post_content(text)


__all__ = ["BaseConverter"]
