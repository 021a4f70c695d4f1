#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/parsers/shortcode.py
"""Shortcode text to AST parser.

This module turns page-builder content (WPBakery ``vc_*`` and Jupiter Donut
``mk_*`` shortcodes mixed with HTML) into an ordered list of ``Text`` and
``Shortcode`` nodes.

The grammar is the WordPress shortcode grammar restricted to the catalog of
known tags. Scanning is an explicit loop of regex searches from an advancing
offset rather than one global substitution, so the text between matches is
kept and every node records the exact source span it came from.

Parsing never fails: anything that does not match a known tag, including
malformed or unbalanced bracket syntax, is captured as text.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable

from shortcode2blocks.ast import Node, Shortcode, Text
from shortcode2blocks.catalog import KNOWN_TAGS
from shortcode2blocks.parsers.attributes import parse_shortcode_attributes

logger = logging.getLogger(__name__)

# Match groups produced by build_shortcode_pattern()
GROUP_ESCAPE_OPEN = 1
GROUP_TAG = 2
GROUP_ATTRIBUTES = 3
GROUP_SELF_CLOSING = 4
GROUP_CONTENT = 5
GROUP_ESCAPE_CLOSE = 7


@lru_cache(maxsize=8)
def build_shortcode_pattern(tags: tuple[str, ...]) -> re.Pattern[str]:
    """Build the shortcode regex for a set of tag names.

    Parameters
    ----------
    tags : tuple of str
        Tag names to recognize

    Returns
    -------
    re.Pattern
        Compiled pattern. Groups: 1 escape bracket, 2 tag name, 3 attribute
        segment, 4 self-closing slash, 5 inner content, 6 inner content scan
        (internal), 7 escape bracket.

    Notes
    -----
    The inner content is scanned inside a lookahead and then consumed through
    a backreference. Lookaheads are atomic, so a tag without a closing tag
    costs one pass to the end of the text instead of backtracking through
    every character.

    """
    alternation = "|".join(re.escape(tag) for tag in tags)
    return re.compile(
        r"\["
        r"(\[?)"  # 1: optional second bracket for escaping
        rf"({alternation})"  # 2: tag name
        r"(?![\w-])"  # not followed by a word character or hyphen
        r"("  # 3: inside the opening tag
        r"[^\]\/]*"  # not a closing bracket or forward slash
        r"(?:"
        r"\/(?!\])"  # a forward slash not followed by a closing bracket
        r"[^\]\/]*"
        r")*?"
        r")"
        r"(?:"
        r"(\/)"  # 4: self-closing slash
        r"\]"
        r"|"
        r"\]"
        r"(?:"
        r"("  # 5: inner content
        r"(?="
        r"("  # 6: atomic scan of the inner content
        r"[^\[]*"  # not an opening bracket
        r"(?:"
        r"\[(?!\/\2\])"  # an opening bracket not starting this tag's closing tag
        r"[^\[]*"
        r")*"
        r")"
        r")"
        r"\6"
        r")"
        r"\[\/\2\]"  # closing tag
        r")?"
        r")"
        r"(\]?)",  # 7: optional second closing bracket for escaping
        re.DOTALL,
    )


@lru_cache(maxsize=8)
def build_opening_pattern(tags: tuple[str, ...]) -> re.Pattern[str]:
    """Build a pattern that finds any opening bracket followed by a known tag name."""
    return re.compile(r"\[(?:" + "|".join(re.escape(tag) for tag in tags) + r")")


class ShortcodeParser:
    """Parse shortcode markup into AST nodes.

    Parameters
    ----------
    tags : iterable of str, optional
        Tag names to recognize. Defaults to the known tag catalog.

    Examples
    --------
    Parsing a row with one column:

        >>> parser = ShortcodeParser()
        >>> nodes = parser.parse('[vc_row][vc_column width="1/2"]Hi[/vc_column][/vc_row]')
        >>> nodes[0].tag, nodes[0].children[0].get("width")
        ('vc_row', '1/2')

    """

    def __init__(self, tags: Iterable[str] | None = None):
        """Initialize the parser and compile (or reuse) its patterns."""
        self.tags: tuple[str, ...] = tuple(tags) if tags is not None else KNOWN_TAGS
        self._pattern = build_shortcode_pattern(self.tags)
        self._opening_pattern = build_opening_pattern(self.tags)

    def parse(self, text: str) -> list[Node]:
        """Parse text into an ordered list of nodes.

        Text between shortcodes is kept as ``Text`` nodes unless it is blank
        after trimming; blank gaps are formatting whitespace and are dropped.

        Parameters
        ----------
        text : str
            Content containing shortcodes

        Returns
        -------
        list of Node
            Top-level nodes in source order. Empty for empty input.

        """
        if not text:
            return []

        nodes: list[Node] = []
        offset = 0

        while True:
            match = self._pattern.search(text, offset)
            if match is None:
                break

            if match.start() > offset:
                self._append_text(nodes, text[offset : match.start()])

            nodes.append(self._build_shortcode(match))
            offset = match.end()

        if offset < len(text):
            self._append_text(nodes, text[offset:])

        return nodes

    def contains_shortcode(self, text: str) -> bool:
        """Check whether text contains an opening bracket for any known tag."""
        if not text or "[" not in text:
            return False
        return self._opening_pattern.search(text) is not None

    @staticmethod
    def _append_text(nodes: list[Node], text: str) -> None:
        if text.strip():
            nodes.append(Text(content=text))

    def _build_shortcode(self, match: re.Match[str]) -> Shortcode:
        tag = match.group(GROUP_TAG)
        attributes = parse_shortcode_attributes(match.group(GROUP_ATTRIBUTES) or "")
        content = match.group(GROUP_CONTENT) or ""
        self_closing = bool(match.group(GROUP_SELF_CLOSING))

        children: list[Node] = []
        if not self_closing and content:
            if self.contains_shortcode(content):
                children = self.parse(content)
            elif content.strip():
                children = [Text(content=content)]

        return Shortcode(
            tag=tag,
            attributes=attributes,
            content=content,
            children=children,
            raw=match.group(0),
            self_closing=self_closing,
        )


__all__ = ["ShortcodeParser", "build_shortcode_pattern", "build_opening_pattern"]
