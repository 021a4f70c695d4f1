#  Copyright (c) 2025 Tom Villani, Ph.D.

# shortcode2blocks/options/conversion.py
"""Configuration options for shortcode to block conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from shortcode2blocks.constants import (
    DEFAULT_CLASS_PREFIX,
    DEFAULT_INCLUDE_TEXT_SEPARATOR_TITLE,
    DEFAULT_PARAGRAPH_HTML_MODE,
    DEFAULT_RESPONSIVE_BREAKPOINT,
    DEFAULT_SPACER_HEIGHT,
    HtmlPassthroughMode,
)
from shortcode2blocks.options.base import BaseConversionOptions

_CSS_IDENTIFIER = re.compile(r"^-?[_a-zA-Z][_a-zA-Z0-9-]*$")
_CSS_LENGTH = re.compile(r"^\d+(?:\.\d+)?(?:px|em|rem|vh|vw|%)$")

HTML_MODES = ("pass-through", "escape", "drop", "sanitize")


@dataclass(frozen=True)
class ConversionOptions(BaseConversionOptions):
    """Configuration options for the block builder.

    Parameters
    ----------
    class_prefix : str, default "dtg"
        Namespace for minted style classes (``<prefix>-<document_id>-<n>``)
        and for message container classes.
    responsive_breakpoint : str, default "767px"
        Max-width used for phone-size rules.
    default_spacer_height : str, default "32px"
        Spacer height when a spacer tag carries no height.
    paragraph_html_mode : {"pass-through", "escape", "drop", "sanitize"}, default "sanitize"
        How free text wrapped into paragraph blocks is cleaned.
    include_text_separator_title : bool, default True
        Emit the title of a text separator as a centered paragraph.

    Examples
    --------
        >>> options = ConversionOptions(class_prefix="site")
        >>> options.create_updated(responsive_breakpoint="600px").responsive_breakpoint
        '600px'

    """

    class_prefix: str = field(
        default=DEFAULT_CLASS_PREFIX,
        metadata={"help": "Namespace prefix for generated CSS class names", "importance": "core"},
    )
    responsive_breakpoint: str = field(
        default=DEFAULT_RESPONSIVE_BREAKPOINT,
        metadata={"help": "Max-width breakpoint for phone-specific rules (e.g., 767px)", "importance": "advanced"},
    )
    default_spacer_height: str = field(
        default=DEFAULT_SPACER_HEIGHT,
        metadata={"help": "Spacer height used when a spacer has no height attribute", "importance": "advanced"},
    )
    paragraph_html_mode: HtmlPassthroughMode = field(
        default=DEFAULT_PARAGRAPH_HTML_MODE,
        metadata={
            "help": "How to clean free text wrapped in paragraphs: pass-through, escape, drop, or sanitize",
            "choices": list(HTML_MODES),
            "importance": "security",
        },
    )
    include_text_separator_title: bool = field(
        default=DEFAULT_INCLUDE_TEXT_SEPARATOR_TITLE,
        metadata={
            "help": "Emit text separator titles as centered paragraphs",
            "cli_name": "no-text-separator-title",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        super().__post_init__()

        if not _CSS_IDENTIFIER.match(self.class_prefix):
            raise ValueError(f"class_prefix must be a valid CSS identifier, got {self.class_prefix!r}")

        if not _CSS_LENGTH.match(self.responsive_breakpoint):
            raise ValueError(f"responsive_breakpoint must be a CSS length, got {self.responsive_breakpoint!r}")

        if not _CSS_LENGTH.match(self.default_spacer_height):
            raise ValueError(f"default_spacer_height must be a CSS length, got {self.default_spacer_height!r}")

        if self.paragraph_html_mode not in HTML_MODES:
            raise ValueError(
                f"paragraph_html_mode must be one of {', '.join(HTML_MODES)}, got {self.paragraph_html_mode!r}"
            )


__all__ = ["ConversionOptions", "HTML_MODES"]
