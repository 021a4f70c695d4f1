"""shortcode2blocks - convert page-builder shortcodes into block editor markup.

Legacy posts built with a visual page builder store their layout as nested
bracket shortcodes (``[vc_row][vc_column]...[/vc_column][/vc_row]``). This
package parses that syntax into a small AST and renders it as block editor
markup (``<!-- wp:name {...} -->...<!-- /wp:name -->``), collecting the CSS
rules and web fonts the converted content needs along the way.

Key Features
------------
- Tolerant parser: malformed or unknown syntax is never an error
- Converters for layout, text, media, button, separator and misc tags
- Unknown tags passed through verbatim inside HTML blocks
- Generated CSS namespaced per document, with hover and phone rules
- Google Fonts manifest and stylesheet URL
- Attachment id lookup through a pluggable resolver

Requirements
------------
- Python 3.10+

Examples
--------
Converting a document:

    >>> from shortcode2blocks import convert
    >>> result = convert('[vc_row][vc_column]Hello[/vc_column][/vc_row]', document_id=42)
    >>> print(result.markup)  # doctest: +SKIP

Counting shortcode usage:

    >>> from shortcode2blocks import analyze
    >>> analyze('[vc_row][vc_column][/vc_column][vc_column][/vc_column][/vc_row]')
    {'vc_column': 2, 'vc_row': 1}

See Also
--------
shortcode2blocks.ast : AST node definitions and visitors
shortcode2blocks.converters : Tag-family converters

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "shortcode2blocks requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from shortcode2blocks.api import ConversionResult, analyze, contains_shortcode, convert, parse
from shortcode2blocks.attachments import AttachmentResolver, MappingAttachmentResolver, NullAttachmentResolver
from shortcode2blocks.builder import BlockBuilder
from shortcode2blocks.exceptions import (
    ConfigError,
    ConverterRegistryError,
    FileError,
    InvalidOptionsError,
    Shortcode2BlocksError,
    ValidationError,
)
from shortcode2blocks.options import ConversionOptions

__all__ = [
    "__version__",
    "convert",
    "parse",
    "analyze",
    "contains_shortcode",
    "ConversionResult",
    "BlockBuilder",
    "ConversionOptions",
    "AttachmentResolver",
    "MappingAttachmentResolver",
    "NullAttachmentResolver",
    "Shortcode2BlocksError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ConfigError",
    "ConverterRegistryError",
]
