#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/utils/block_markup.py
"""Helpers for writing block markup.

Block markup pairs a comment header carrying JSON attributes with literal
HTML::

    <!-- wp:group {"layout":{"type":"constrained"}} -->
    <div class="wp-block-group">...</div>
    <!-- /wp:group -->

Every block emitted by the library is followed by one blank line.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from shortcode2blocks.utils.html_sanitizer import esc_attr


# Sequences that could end the comment or be read as markup inside a block header
_HEADER_ESCAPES = (
    ("--", "\\u002d\\u002d"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == {} or value == [] or value is False


def json_attrs(attrs: Mapping[str, Any] | None) -> str:
    """Serialize block attributes for a comment header.

    Empty values (``None``, ``False``, empty strings, empty containers) are
    dropped. Slashes and non-ASCII characters are written unescaped; ``--``,
    ``<``, ``>`` and ``&`` become unicode escapes so a value can never close
    the comment early.

    Parameters
    ----------
    attrs : mapping, optional
        Block attributes

    Returns
    -------
    str
        ``" {json}"`` with a leading space, or an empty string when no
        attribute survives

    Examples
    --------
    >>> json_attrs({"url": "https://example.com/a", "className": ""})
    ' {"url":"https://example.com/a"}'
    >>> json_attrs({})
    ''

    """
    if not attrs:
        return ""
    filtered = {key: value for key, value in attrs.items() if not _is_empty(value)}
    if not filtered:
        return ""
    encoded = json.dumps(filtered, ensure_ascii=False, separators=(",", ":"))
    for sequence, escape in _HEADER_ESCAPES:
        encoded = encoded.replace(sequence, escape)
    return " " + encoded


def block(name: str, inner_html: str = "", attrs: Mapping[str, Any] | None = None, trailing: str = "\n\n") -> str:
    """Wrap HTML in an opening and closing block comment.

    Examples
    --------
    >>> block("paragraph", "<p>Hi</p>")
    '<!-- wp:paragraph -->\\n<p>Hi</p>\\n<!-- /wp:paragraph -->\\n\\n'

    """
    header = json_attrs(attrs)
    return f"<!-- wp:{name}{header} -->\n{inner_html}\n<!-- /wp:{name} -->{trailing}"


def class_names(*names: str | None) -> str:
    """Join non-empty class names with single spaces, dropping duplicates."""
    seen: list[str] = []
    for name in names:
        if not name:
            continue
        for token in name.split():
            if token not in seen:
                seen.append(token)
    return " ".join(seen)


def class_attr(*names: str | None) -> str:
    """Render a ``class`` HTML attribute (with leading space) or nothing."""
    value = class_names(*names)
    return f' class="{esc_attr(value)}"' if value else ""


def style_declarations(declarations: Mapping[str, str]) -> str:
    """Render declarations as an inline style value (``a:b;c:d``)."""
    return ";".join(f"{prop}:{value}" for prop, value in declarations.items() if value)


def join_blocks(parts: Iterable[str]) -> str:
    """Concatenate rendered blocks."""
    return "".join(part for part in parts if part)


__all__ = ["json_attrs", "block", "class_names", "class_attr", "style_declarations", "join_blocks"]
