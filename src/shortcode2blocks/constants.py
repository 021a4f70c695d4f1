#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the shortcode2blocks library.

This module centralizes the hardcoded values, lookup tables and default
configuration constants used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Defaults - Default option values
3. Lookup Tables - Width fractions, alignments, separator styles
4. Security Constants - HTML sanitization allow-lists and URL schemes
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlPassthroughMode = Literal["pass-through", "escape", "drop", "sanitize"]
NodeType = Literal["text", "shortcode"]
Tier = Literal["convertible", "pass-through"]

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_CLASS_PREFIX = "dtg"
DEFAULT_RESPONSIVE_BREAKPOINT = "767px"
DEFAULT_SPACER_HEIGHT = "32px"
DEFAULT_PARAGRAPH_HTML_MODE: HtmlPassthroughMode = "sanitize"
DEFAULT_INCLUDE_TEXT_SEPARATOR_TITLE = True

DEFAULT_HEADING_LEVEL = 2
DEFAULT_BUTTON_LABEL = "Button"
DEFAULT_HIGHLIGHT_COLOR = "#fff000"
DEFAULT_MESSAGE_COLOR = "info"
DEFAULT_OUTLINE_ACCENT_COLOR = "#333"
DEFAULT_FONT_WEIGHT = "400"
DEFAULT_FONT_STYLE = "normal"

# Longest digit run read from an attribute as a number (ids, weights, levels, fractions)
MAX_NUMERIC_DIGITS = 9

# Classes that mark an image size on the figure element
IMAGE_SIZE_SLUGS = frozenset({"thumbnail", "medium", "large", "full"})

# Heading container tags rendered as paragraph blocks instead of heading blocks
PARAGRAPH_CONTAINER_TAGS = frozenset({"p", "div", "span"})

GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"

# =============================================================================
# Lookup Tables
# =============================================================================

WIDTH_FRACTION_PERCENTAGES: dict[str, str] = {
    "1/1": "100%",
    "1/2": "50%",
    "1/3": "33.33%",
    "2/3": "66.66%",
    "1/4": "25%",
    "3/4": "75%",
    "1/6": "16.66%",
    "5/6": "83.33%",
    "1/12": "8.33%",
    "5/12": "41.66%",
    "7/12": "58.33%",
    "11/12": "91.66%",
}

# left/center/right table shared by media alignment and button layout
IMAGE_ALIGNMENTS: dict[str, str] = {
    "left": "left",
    "center": "center",
    "right": "right",
}

FLEX_JUSTIFICATIONS: dict[str, str] = {
    "left": "flex-start",
    "center": "center",
    "right": "flex-end",
}

SEPARATOR_STYLE_CLASSES: dict[str, str] = {
    "solid": "is-style-default",
    "dashed": "is-style-default",
    "dotted": "is-style-dots",
    "double": "is-style-default",
}
DEFAULT_SEPARATOR_STYLE_CLASS = "is-style-default"

BUTTON_CORNER_RADII: dict[str, str] = {
    "full_rounded": "99px",
    "rounded": "4px",
}

# Values of vc_section ``full_width`` that stretch the section to full width
FULL_WIDTH_VALUES = frozenset({"true", "stretch_row", "stretch_row_content", "stretch_row_content_no_spaces"})

VIDEO_PROVIDER_KEYWORDS: dict[str, str] = {
    "vimeo.com": "vimeo",
}
DEFAULT_VIDEO_PROVIDER = "youtube"

# Text nodes matching this pattern carry hand-written structural HTML
BLOCK_LEVEL_HTML_PATTERN = re.compile(
    r"<(?:div|table|ul|ol|h[1-6]|blockquote|figure|form|section|article|header|footer|nav|aside|p)\b",
    re.IGNORECASE,
)

# =============================================================================
# Security Constants
# =============================================================================

DANGEROUS_SCHEMES = ("javascript:", "vbscript:", "data:text/html", "data:text/javascript")

# Subset of WordPress' post-content allow-list used for free text
POST_CONTENT_ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "cite",
        "code",
        "del",
        "div",
        "em",
        "figcaption",
        "figure",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "li",
        "mark",
        "ol",
        "p",
        "pre",
        "q",
        "s",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "u",
        "ul",
    }
)

POST_CONTENT_ALLOWED_ATTRIBUTES: dict[str, list[str]] = {
    "a": ["href", "title", "rel", "target"],
    "img": ["src", "alt", "title", "width", "height"],
    "abbr": ["title"],
    "*": ["class", "id", "style"],
}

POST_CONTENT_ALLOWED_PROTOCOLS = ["http", "https", "mailto", "tel", "ftp"]

POST_CONTENT_ALLOWED_CSS_PROPERTIES = [
    "color",
    "background-color",
    "font-size",
    "font-family",
    "font-style",
    "font-weight",
    "text-align",
    "text-decoration",
    "text-transform",
    "margin",
    "padding",
    "border",
    "width",
    "height",
    "line-height",
    "letter-spacing",
    "background",
    "border-radius",
]
