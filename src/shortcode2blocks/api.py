#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/api.py
"""Public entry points.

- ``parse`` turns shortcode text into AST nodes.
- ``convert`` turns shortcode text into block markup plus the CSS and fonts
  generated along the way.
- ``analyze`` counts shortcode occurrences by tag.
- ``contains_shortcode`` is a cheap pre-check for batch scanners.

None of them raise on malformed input: unknown or unbalanced shortcode
syntax is kept as text, unknown tags are passed through, and nodes missing
a required attribute produce no output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shortcode2blocks.ast import Node, ShortcodeCounter
from shortcode2blocks.attachments import AttachmentResolver
from shortcode2blocks.builder import BlockBuilder
from shortcode2blocks.options import ConversionOptions
from shortcode2blocks.parsers import ShortcodeParser
from shortcode2blocks.utils.fonts import google_fonts_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Output of a document conversion.

    Parameters
    ----------
    markup : str
        Block markup (the input itself when it held no shortcode)
    css : str
        Generated CSS rules, one per line
    fonts : dict of str to list of str
        Requested web font variants per family

    """

    markup: str
    css: str = ""
    fonts: dict[str, list[str]] = field(default_factory=dict)

    @property
    def fonts_url(self) -> str:
        """Google Fonts stylesheet URL for ``fonts`` (empty when none)."""
        return google_fonts_url(self.fonts)


def parse(text: str) -> list[Node]:
    """Parse shortcode text into an ordered list of AST nodes.

    Examples
    --------
        >>> nodes = parse('[vc_row][vc_column]Hi[/vc_column][/vc_row]')
        >>> nodes[0].tag
        'vc_row'

    """
    return ShortcodeParser().parse(text)


def convert(
    text: str,
    document_id: int = 0,
    *,
    options: ConversionOptions | None = None,
    attachment_resolver: AttachmentResolver | None = None,
) -> ConversionResult:
    """Convert shortcode text into block markup.

    Parameters
    ----------
    text : str
        Document content
    document_id : int, default 0
        Identifier that namespaces generated class names
    options : ConversionOptions, optional
        Conversion options
    attachment_resolver : AttachmentResolver, optional
        Lookup for media library attachments referenced by id

    Returns
    -------
    ConversionResult
        Markup, generated CSS and requested fonts

    Examples
    --------
        >>> result = convert('[vc_empty_space height="50"]')
        >>> '"height":"50px"' in result.markup
        True

    """
    builder = BlockBuilder(options=options, attachment_resolver=attachment_resolver)
    markup = builder.convert(text, document_id=document_id)
    context = builder.context
    return ConversionResult(
        markup=markup,
        css=context.render_css(),
        fonts={family: list(variants) for family, variants in context.fonts.items()},
    )


def analyze(text: str) -> dict[str, int]:
    """Count shortcode occurrences by tag at every nesting depth.

    Returns
    -------
    dict of str to int
        Counts ordered by descending count

    """
    counter = ShortcodeCounter()
    counter.visit_all(parse(text))
    return counter.report()


def contains_shortcode(text: str) -> bool:
    """Check whether text contains an opening bracket for any known tag."""
    return ShortcodeParser().contains_shortcode(text)


__all__ = ["ConversionResult", "parse", "convert", "analyze", "contains_shortcode"]
