#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/utils/html_sanitizer.py
"""HTML sanitization and escaping utilities.

Free text that ends up inside a generated paragraph block is cleaned to a
safe subset of post-content HTML; values interpolated into generated HTML
attributes are escaped; URLs are checked for dangerous schemes before they
are emitted.

The module supports multiple strategies for free text:
- pass-through: No sanitization (use only with trusted content)
- escape: HTML-escape all content
- drop: Remove the content entirely
- sanitize: Remove disallowed elements/attributes but keep safe inline HTML
"""

from __future__ import annotations

import html
import logging
import re

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup

from shortcode2blocks.constants import (
    DANGEROUS_SCHEMES,
    POST_CONTENT_ALLOWED_ATTRIBUTES,
    POST_CONTENT_ALLOWED_CSS_PROPERTIES,
    POST_CONTENT_ALLOWED_PROTOCOLS,
    POST_CONTENT_ALLOWED_TAGS,
    HtmlPassthroughMode,
)

logger = logging.getLogger(__name__)

_SCHEME_NOISE = re.compile(r"[\x00-\x20]+")

_CSS_SANITIZER = CSSSanitizer(allowed_css_properties=POST_CONTENT_ALLOWED_CSS_PROPERTIES)


def sanitize_post_content(content: str) -> str:
    """Clean HTML down to the allowed post-content subset.

    Disallowed tags are stripped (their text is kept), disallowed attributes
    and URL protocols are removed, and inline styles are limited to a list of
    presentational properties.

    Parameters
    ----------
    content : str
        HTML fragment to clean

    Returns
    -------
    str
        Cleaned HTML fragment

    Examples
    --------
    >>> sanitize_post_content("<strong>Bold</strong> <script>alert(1)</script>")
    '<strong>Bold</strong> alert(1)'

    """
    if not content:
        return ""

    return bleach.clean(
        content,
        tags=POST_CONTENT_ALLOWED_TAGS,
        attributes=POST_CONTENT_ALLOWED_ATTRIBUTES,
        protocols=POST_CONTENT_ALLOWED_PROTOCOLS,
        css_sanitizer=_CSS_SANITIZER,
        strip=True,
    )


def sanitize_html_content(content: str, mode: HtmlPassthroughMode = "sanitize") -> str:
    """Sanitize HTML content string according to the specified mode.

    Parameters
    ----------
    content : str
        HTML content to sanitize
    mode : {"pass-through", "escape", "drop", "sanitize"}, default "sanitize"
        Sanitization mode:
        - "pass-through": Return content unchanged (for trusted sources)
        - "escape": HTML-escape all content
        - "drop": Return empty string
        - "sanitize": Clean to the post-content allow-list

    Returns
    -------
    str
        Sanitized HTML content

    Examples
    --------
    >>> sanitize_html_content("<b>x</b>", mode="escape")
    '&lt;b&gt;x&lt;/b&gt;'

    >>> sanitize_html_content("<b>x</b>", mode="drop")
    ''

    """
    if mode == "pass-through":
        return content

    if mode == "escape":
        return html.escape(content)

    if mode == "drop":
        return ""

    if mode == "sanitize":
        return sanitize_post_content(content)

    raise ValueError(f"Unknown HTML sanitization mode: {mode!r}")


def strip_html_tags(content: str) -> str:
    """Remove all HTML tags from content, leaving only text.

    Examples
    --------
    >>> strip_html_tags("<p>Hello <strong>world</strong>!</p>")
    'Hello world!'

    """
    if not content:
        return ""
    if "<" not in content and "&" not in content:
        return content
    return BeautifulSoup(content, "html.parser").get_text()


def esc_attr(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True

    >>> is_url_safe("javascript:alert('xss')")
    False

    """
    if not url or not url.strip():
        return True

    normalized = _SCHEME_NOISE.sub("", url).lower()
    return not any(normalized.startswith(scheme) for scheme in DANGEROUS_SCHEMES)


def sanitize_url(url: str) -> str:
    """Return the trimmed URL, or an empty string if it uses a dangerous scheme.

    Examples
    --------
    >>> sanitize_url(" https://example.com ")
    'https://example.com'

    >>> sanitize_url("javascript:alert('xss')")
    ''

    """
    if not is_url_safe(url):
        logger.debug("Dropping URL with dangerous scheme: %r", url)
        return ""
    return url.strip()


def esc_url(url: str) -> str:
    """Sanitize a URL and escape it for an HTML attribute."""
    return esc_attr(sanitize_url(url))


__all__ = [
    "sanitize_post_content",
    "sanitize_html_content",
    "strip_html_tags",
    "esc_attr",
    "is_url_safe",
    "sanitize_url",
    "esc_url",
]
