#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/builder.py
"""Block builder: walks the shortcode AST and emits block markup.

The builder is a visitor over the AST. Text nodes become paragraph blocks
(or freeform blocks when they carry structural HTML); shortcode nodes are
dispatched to the first registered converter that claims their tag; any
other shortcode is passed through verbatim inside an HTML block.

Converters render their children by calling ``build_from_nodes``, which is
the only recursion point of the conversion.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from shortcode2blocks.ast import Node, NodeVisitor, Shortcode, Text
from shortcode2blocks.attachments import AttachmentResolver, NullAttachmentResolver
from shortcode2blocks.constants import BLOCK_LEVEL_HTML_PATTERN
from shortcode2blocks.context import ConversionContext
from shortcode2blocks.converters import DEFAULT_CONVERTERS, BaseConverter, validate_registry
from shortcode2blocks.exceptions import InvalidOptionsError
from shortcode2blocks.options import ConversionOptions
from shortcode2blocks.parsers import ShortcodeParser
from shortcode2blocks.utils.block_markup import block
from shortcode2blocks.utils.html_sanitizer import esc_attr, sanitize_html_content

logger = logging.getLogger(__name__)


def reconstruct_shortcode(node: Shortcode) -> str:
    """Rebuild shortcode text from a node that has no recorded source.

    Positional attributes are written bare, keyed attributes as
    ``key="escaped value"``; a closing tag is added only when the node has
    inner content.

    Examples
    --------
    >>> reconstruct_shortcode(Shortcode(tag="vc_gallery", attributes={"0": "wide", "ids": "1,2"}))
    '[vc_gallery wide ids="1,2"]'

    """
    parts = [f"[{node.tag}"]
    for key, value in node.attributes.items():
        if key.isdigit():
            parts.append(f" {value}")
        else:
            parts.append(f' {key}="{esc_attr(value)}"')
    parts.append("]")

    if node.content != "":
        parts.append(f"{node.content}[/{node.tag}]")

    return "".join(parts)


class BlockBuilder(NodeVisitor):
    """Convert shortcode documents into block markup.

    Parameters
    ----------
    options : ConversionOptions, optional
        Conversion options. Defaults to ``ConversionOptions()``.
    attachment_resolver : AttachmentResolver, optional
        Lookup for media library attachments. Defaults to a resolver that
        resolves nothing.
    parser : ShortcodeParser, optional
        Parser to use. Defaults to a parser over the known tag catalog.
    converters : sequence of BaseConverter subclasses, optional
        Converter classes in dispatch order. Defaults to the six built-in
        families.

    Attributes
    ----------
    context : ConversionContext
        State of the most recent (or current) conversion; replaced at the
        start of every ``convert`` call

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a ``ConversionOptions`` instance
    ConverterRegistryError
        If the converters overlap or claim tags outside the catalog

    Examples
    --------
        >>> builder = BlockBuilder()
        >>> markup = builder.convert('[vc_empty_space height="50"]', document_id=7)
        >>> builder.context.document_id
        7

    """

    def __init__(
        self,
        options: ConversionOptions | None = None,
        attachment_resolver: AttachmentResolver | None = None,
        parser: ShortcodeParser | None = None,
        converters: Sequence[type[BaseConverter]] = DEFAULT_CONVERTERS,
    ):
        """Initialize the builder and register its converters."""
        if options is not None and not isinstance(options, ConversionOptions):
            raise InvalidOptionsError(
                component_name="BlockBuilder",
                expected_type=ConversionOptions,
                received_type=type(options),
            )

        self.options = options or ConversionOptions()
        self.attachment_resolver: AttachmentResolver = attachment_resolver or NullAttachmentResolver()
        self.parser = parser or ShortcodeParser()

        validate_registry(converters)
        self.converters: list[BaseConverter] = [converter_class(self) for converter_class in converters]

        self.context = ConversionContext(document_id=0, options=self.options)

    def convert(self, text: str, document_id: int = 0) -> str:
        """Convert a document to block markup.

        A fresh ``ConversionContext`` is created for ``document_id``; read
        ``self.context`` afterwards for the generated CSS and fonts.

        Parameters
        ----------
        text : str
            Document content
        document_id : int, default 0
            Identifier used to namespace generated class names

        Returns
        -------
        str
            Block markup, or ``text`` unchanged when it holds no shortcode

        """
        self.context = ConversionContext(document_id=document_id, options=self.options)

        nodes = self.parser.parse(text)
        if not any(isinstance(node, Shortcode) for node in nodes):
            logger.debug("Document %s has no shortcodes; leaving it unchanged", document_id)
            return text

        markup = self.build_from_nodes(nodes)
        logger.debug(
            "Converted document %s: %d CSS rules, %d font families",
            document_id,
            len(self.context.css_rules),
            len(self.context.fonts),
        )
        return markup

    def build_from_nodes(self, nodes: Iterable[Node]) -> str:
        """Render already-parsed nodes and concatenate the markup."""
        return "".join(self.visit_all(nodes))

    def find_converter(self, tag: str) -> BaseConverter | None:
        """Return the first converter that claims ``tag``."""
        for converter in self.converters:
            if converter.can_convert(tag):
                return converter
        return None

    def visit_text(self, node: Text) -> str:
        """Wrap free text in a freeform block (structural HTML) or a paragraph block."""
        content = node.content.strip()
        if not content:
            return ""

        if BLOCK_LEVEL_HTML_PATTERN.search(content):
            return block("freeform", content)

        cleaned = sanitize_html_content(content, self.options.paragraph_html_mode).strip()
        if not cleaned:
            return ""
        return block("paragraph", f"<p>{cleaned}</p>")

    def visit_shortcode(self, node: Shortcode) -> str:
        """Dispatch a shortcode to its converter, or pass it through."""
        converter = self.find_converter(node.tag)
        if converter is None:
            return self.pass_through(node)
        return converter.convert(node)

    def pass_through(self, node: Shortcode) -> str:
        """Keep a shortcode as-is inside an HTML block."""
        raw = node.raw or reconstruct_shortcode(node)
        logger.debug("Passing [%s] through unchanged", node.tag)
        return block("html", raw)


__all__ = ["BlockBuilder", "reconstruct_shortcode"]
