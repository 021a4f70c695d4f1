#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning shortcode markup into AST nodes."""

from shortcode2blocks.parsers.attributes import parse_shortcode_attributes
from shortcode2blocks.parsers.shortcode import ShortcodeParser

__all__ = ["ShortcodeParser", "parse_shortcode_attributes"]
