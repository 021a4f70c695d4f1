#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/utils/descriptors.py
"""Decoders for the small languages embedded in shortcode attribute values.

Page builders pack structured values into a single attribute string:

- link descriptors: ``url:https%3A%2F%2Fexample.com|title:Home|target:_blank``
- inline CSS blocks: ``.vc_custom_1600000000000{padding-top: 20px !important;}``
- font containers: ``tag:h3|font_size:24|text_align:center|color:%23333333``
- Google font descriptors: ``font_family:Lato%3A400%2C700|font_style:700%20bold%3A700%3Anormal``

All decoders are total: malformed input yields empty fields, never an error.
Column width fractions (``1/3``) are also mapped to percentages here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote_plus

from shortcode2blocks.constants import (
    DEFAULT_FONT_STYLE,
    DEFAULT_FONT_WEIGHT,
    MAX_NUMERIC_DIGITS,
    WIDTH_FRACTION_PERCENTAGES,
)

_FRACTION_PATTERN = re.compile(rf"^\s*(\d{{1,{MAX_NUMERIC_DIGITS}}})\s*/\s*(\d{{1,{MAX_NUMERIC_DIGITS}}})\s*$")
_NUMERIC_LENGTH_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")
_IMPORTANT_PATTERN = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
_ATTACHMENT_ID_QUERY = re.compile(r"\?id=\d+")
_CSS_URL_PATTERN = re.compile(r"url\(([^)]*)\)", re.IGNORECASE)


@dataclass(frozen=True)
class LinkDescriptor:
    """Decoded link descriptor.

    Parameters
    ----------
    url : str
        Link target URL (percent-decoded)
    title : str
        Link title
    target : str
        Browsing context (``_blank``, ``_self``...)
    rel : str
        Link relationship tokens

    """

    url: str = ""
    title: str = ""
    target: str = ""
    rel: str = ""

    def __bool__(self) -> bool:
        return bool(self.url)


@dataclass(frozen=True)
class FontContainer:
    """Decoded font-container descriptor used by custom headings."""

    tag: str = ""
    font_size: str = ""
    text_align: str = ""
    color: str = ""
    line_height: str = ""


@dataclass(frozen=True)
class GoogleFont:
    """Decoded Google font descriptor."""

    family: str = ""
    weight: str = DEFAULT_FONT_WEIGHT
    style: str = DEFAULT_FONT_STYLE


def _split_pipe_pairs(value: str) -> dict[str, str]:
    """Split ``key:value|key:value`` on pipes, then on the first colon of each part."""
    pairs: dict[str, str] = {}
    if not value:
        return pairs

    for part in value.split("|"):
        if ":" not in part:
            continue
        key, _, raw = part.partition(":")
        key = key.strip()
        if key:
            pairs[key] = raw
    return pairs


def parse_vc_link(value: str) -> LinkDescriptor:
    """Decode a WPBakery link descriptor.

    Parameters
    ----------
    value : str
        Pipe-separated ``key:percent-encoded-value`` pairs

    Returns
    -------
    LinkDescriptor
        Decoded fields; unknown keys are ignored

    Examples
    --------
    >>> parse_vc_link("url:https%3A%2F%2Fexample.com|target:_blank")
    LinkDescriptor(url='https://example.com', title='', target='_blank', rel='')

    """
    pairs = _split_pipe_pairs(value)
    return LinkDescriptor(
        url=unquote_plus(pairs.get("url", "")).strip(),
        title=unquote_plus(pairs.get("title", "")),
        target=unquote_plus(pairs.get("target", "")).strip(),
        rel=unquote_plus(pairs.get("rel", "")).strip(),
    )


def is_link_descriptor(value: str) -> bool:
    """Check whether an attribute value uses the ``url:...|...`` descriptor form."""
    stripped = value.strip()
    return stripped.startswith("url:") or "|" in stripped


def resolve_link(value: str) -> LinkDescriptor:
    """Decode a link attribute that is either a descriptor or a plain URL.

    Examples
    --------
    >>> resolve_link("https://example.com/page").url
    'https://example.com/page'
    >>> resolve_link("url:%2Fcontact|target:%20_blank").target
    '_blank'

    """
    if not value or not value.strip():
        return LinkDescriptor()
    if is_link_descriptor(value):
        return parse_vc_link(value)
    return LinkDescriptor(url=value.strip())


def _clean_css_value(value: str) -> str:
    value = _IMPORTANT_PATTERN.sub("", value.strip())

    def _strip_attachment_query(match: re.Match[str]) -> str:
        return "url(" + _ATTACHMENT_ID_QUERY.sub("", match.group(1)) + ")"

    return _CSS_URL_PATTERN.sub(_strip_attachment_query, value).strip()


def parse_vc_css(value: str) -> dict[str, str]:
    """Decode a WPBakery inline CSS micro-block into declarations.

    Only the text between the first ``{`` and the following ``}`` is read
    when braces are present; otherwise the whole value is treated as a
    declaration list. Property names are lowercased, ``!important`` flags
    are dropped and media library ``?id=N`` suffixes are removed from
    ``url()`` values.

    Parameters
    ----------
    value : str
        The ``css`` attribute value

    Returns
    -------
    dict of str to str
        Declarations in source order; later duplicates win

    Examples
    --------
    >>> parse_vc_css(".vc_custom_1{padding-top: 20px !important;background-color: #fff !important;}")
    {'padding-top': '20px', 'background-color': '#fff'}

    """
    if not value or not value.strip():
        return {}

    body = value
    open_brace = value.find("{")
    if open_brace != -1:
        close_brace = value.find("}", open_brace + 1)
        body = value[open_brace + 1 : close_brace if close_brace != -1 else len(value)]

    declarations: dict[str, str] = {}
    for declaration in body.split(";"):
        if ":" not in declaration:
            continue
        prop, _, raw = declaration.partition(":")
        prop = prop.strip().lower()
        cleaned = _clean_css_value(raw)
        if prop and cleaned:
            declarations[prop] = cleaned
    return declarations


def parse_font_container(value: str) -> FontContainer:
    """Decode a font-container descriptor.

    Examples
    --------
    >>> parse_font_container("tag:h3|text_align:center|color:%23ff0000")
    FontContainer(tag='h3', font_size='', text_align='center', color='#ff0000', line_height='')

    """
    pairs = _split_pipe_pairs(value)
    return FontContainer(
        tag=unquote_plus(pairs.get("tag", "")).strip().lower(),
        font_size=unquote_plus(pairs.get("font_size", "")).strip(),
        text_align=unquote_plus(pairs.get("text_align", "")).strip().lower(),
        color=unquote_plus(pairs.get("color", "")).strip(),
        line_height=unquote_plus(pairs.get("line_height", "")).strip(),
    )


def parse_google_fonts(value: str) -> GoogleFont:
    """Decode a Google font descriptor.

    The ``font_family`` field decodes to ``Family:variants`` and only the
    family is kept. The ``font_style`` field decodes to
    ``label:weight:style``; weight and style default to ``400`` and
    ``normal``.

    Examples
    --------
    >>> parse_google_fonts("font_family:Lato%3A400%2C700|font_style:700%20bold%20regular%3A700%3Anormal")
    GoogleFont(family='Lato', weight='700', style='normal')

    """
    pairs = _split_pipe_pairs(value)

    family = unquote_plus(pairs.get("font_family", "")).split(":", 1)[0].strip()

    weight = DEFAULT_FONT_WEIGHT
    style = DEFAULT_FONT_STYLE
    font_style = unquote_plus(pairs.get("font_style", ""))
    if font_style:
        parts = font_style.split(":")
        if len(parts) > 1 and parts[1].strip():
            weight = parts[1].strip()
        if len(parts) > 2 and parts[2].strip():
            style = parts[2].strip().lower()

    return GoogleFont(family=family, weight=weight, style=style)


def width_to_percentage(width: str) -> str:
    """Map a column width fraction to a CSS percentage.

    Known fractions come from a fixed table; other ``a/b`` fractions are
    computed and rounded to two decimals with trailing zeros removed.

    Parameters
    ----------
    width : str
        Fraction such as ``1/3``

    Returns
    -------
    str
        Percentage such as ``33.33%``, or an empty string for values that
        are not fractions

    Examples
    --------
    >>> width_to_percentage("1/3")
    '33.33%'
    >>> width_to_percentage("5/7")
    '71.43%'
    >>> width_to_percentage("bogus")
    ''

    """
    if not width:
        return ""

    key = width.strip()
    if key in WIDTH_FRACTION_PERCENTAGES:
        return WIDTH_FRACTION_PERCENTAGES[key]

    match = _FRACTION_PATTERN.match(key)
    if match is None:
        return ""

    numerator, denominator = int(match.group(1)), int(match.group(2))
    if denominator == 0:
        return ""

    percentage = f"{numerator / denominator * 100:.2f}".rstrip("0").rstrip(".")
    return f"{percentage}%"


def ensure_px(value: str) -> str:
    """Append ``px`` to bare numbers; other lengths are returned trimmed.

    Examples
    --------
    >>> ensure_px("50")
    '50px'
    >>> ensure_px("2em")
    '2em'

    """
    value = value.strip()
    if _NUMERIC_LENGTH_PATTERN.match(value):
        return f"{value}px"
    return value


__all__ = [
    "LinkDescriptor",
    "FontContainer",
    "GoogleFont",
    "parse_vc_link",
    "is_link_descriptor",
    "resolve_link",
    "parse_vc_css",
    "parse_font_container",
    "parse_google_fonts",
    "width_to_percentage",
    "ensure_px",
]
