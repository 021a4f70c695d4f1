#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/parsers/attributes.py
"""Shortcode attribute segment parsing.

Turns the raw text between a tag name and the closing bracket of its opening
tag into an ordered attribute map, following the conventions of the
WordPress shortcode API:

- ``key="value"``, ``key='value'`` and ``key=value`` pairs, keys lowercased
- bare ``"quoted"`` or unquoted tokens stored as positional attributes under
  their stringified index (``"0"``, ``"1"``, ...)
- C-style backslash escapes are removed from values
- non-breaking and zero-width spaces count as whitespace
- a value holding an unbalanced HTML fragment (an unclosed ``<``) is blanked
"""

from __future__ import annotations

import re

_ATTRIBUTE_PATTERN = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r"""|"([^"]*)"(?:\s|$)"""
    r"""|'([^']*)'(?:\s|$)"""
    r"""|(\S+)(?:\s|$)"""
)

_SPECIAL_SPACES = re.compile("[\u00a0\u200b]+")

_BALANCED_HTML = re.compile(r"^[^<]*(?:<[^>]*>[^<]*)*$")

_C_ESCAPE = re.compile(r"\\(x[0-9A-Fa-f]{1,2}|[0-7]{1,3}|.)", re.DOTALL)

_C_ESCAPE_CHARS = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}


def _unescape_match(match: re.Match[str]) -> str:
    sequence = match.group(1)
    if sequence in _C_ESCAPE_CHARS:
        return _C_ESCAPE_CHARS[sequence]
    if len(sequence) > 1 and sequence[0] == "x":
        return chr(int(sequence[1:], 16))
    if sequence.isdigit() and all(ch in "01234567" for ch in sequence):
        return chr(int(sequence, 8) & 0xFF)
    return sequence


def strip_c_slashes(value: str) -> str:
    """Remove C-style backslash escapes from ``value``.

    Examples
    --------
    >>> strip_c_slashes(r'say \\"hi\\"')
    'say "hi"'
    >>> strip_c_slashes(r"line\\nbreak")
    'line\\nbreak'

    """
    if "\\" not in value:
        return value
    return _C_ESCAPE.sub(_unescape_match, value)


def parse_shortcode_attributes(segment: str) -> dict[str, str]:
    """Parse a raw attribute segment into an ordered attribute map.

    Parameters
    ----------
    segment : str
        The text between the tag name and the end of the opening tag

    Returns
    -------
    dict of str to str
        Attributes in encounter order. Positional tokens are keyed by their
        index among positional tokens. Blank input yields an empty map.

    Examples
    --------
    >>> parse_shortcode_attributes(' width="1/2" el_class=hero')
    {'width': '1/2', 'el_class': 'hero'}
    >>> parse_shortcode_attributes(' "first token" second')
    {'0': 'first token', '1': 'second'}

    """
    if not segment or not segment.strip():
        return {}

    text = _SPECIAL_SPACES.sub(" ", segment)
    attributes: dict[str, str] = {}
    position = 0

    for match in _ATTRIBUTE_PATTERN.finditer(text):
        groups = match.groups()
        if groups[0]:
            attributes[groups[0].lower()] = strip_c_slashes(groups[1])
        elif groups[2]:
            attributes[groups[2].lower()] = strip_c_slashes(groups[3])
        elif groups[4]:
            attributes[groups[4].lower()] = strip_c_slashes(groups[5])
        else:
            token = next((g for g in groups[6:] if g), None)
            if token is None:
                continue
            attributes[str(position)] = strip_c_slashes(token)
            position += 1

    for key, value in attributes.items():
        if "<" in value and not _BALANCED_HTML.match(value):
            attributes[key] = ""

    return attributes


__all__ = ["parse_shortcode_attributes", "strip_c_slashes"]
