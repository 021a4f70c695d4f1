#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_attributes.py
"""Unit tests for shortcode attribute parsing."""

import pytest

from shortcode2blocks.parsers import parse_shortcode_attributes
from shortcode2blocks.parsers.attributes import strip_c_slashes


@pytest.mark.unit
class TestParseShortcodeAttributes:
    """Test the attribute segment micro-parser."""

    @pytest.mark.parametrize("segment", ["", "   ", "\n"])
    def test_blank_segment(self, segment):
        """Blank input yields an empty map."""
        assert parse_shortcode_attributes(segment) == {}

    def test_quoting_styles(self):
        """Double-, single- and un-quoted values are all accepted."""
        attributes = parse_shortcode_attributes(""" title="Hello world" align='center' width=1/2""")
        assert attributes == {"title": "Hello world", "align": "center", "width": "1/2"}

    def test_keys_are_lowercased(self):
        """Keys are normalized to lowercase; values are not."""
        assert parse_shortcode_attributes(' Title="MiXeD"') == {"title": "MiXeD"}

    def test_hyphenated_keys(self):
        """Keys may contain hyphens."""
        assert parse_shortcode_attributes(' data-id="3"') == {"data-id": "3"}

    def test_positional_tokens(self):
        """Bare tokens are stored under their positional index."""
        attributes = parse_shortcode_attributes(' "first token" second ids="1,2" third')
        assert attributes == {"0": "first token", "1": "second", "ids": "1,2", "2": "third"}

    def test_source_order_is_kept(self):
        """Attributes keep encounter order."""
        attributes = parse_shortcode_attributes(' z="1" a="2" m="3"')
        assert list(attributes) == ["z", "a", "m"]

    def test_special_spaces_separate_attributes(self):
        """Non-breaking and zero-width spaces count as whitespace."""
        attributes = parse_shortcode_attributes("\u00a0width=\"50\"\u200bheight=\"20\"")
        assert attributes == {"width": "50", "height": "20"}

    def test_c_escapes_are_removed(self):
        """Backslash escapes in values are decoded."""
        assert parse_shortcode_attributes(r' title="line\nbreak"') == {"title": "line\nbreak"}

    def test_unbalanced_html_value_is_blanked(self):
        """A value with an unclosed '<' is blanked; balanced HTML is kept."""
        assert parse_shortcode_attributes(' title="<b"') == {"title": ""}
        assert parse_shortcode_attributes(' title="<b>x</b>"') == {"title": "<b>x</b>"}

    def test_link_descriptor_value(self):
        """Pipe-separated descriptors survive as one value."""
        attributes = parse_shortcode_attributes(' link="url:https%3A%2F%2Fexample.com|target:_blank"')
        assert attributes == {"link": "url:https%3A%2F%2Fexample.com|target:_blank"}


@pytest.mark.unit
class TestStripCSlashes:
    """Test C-style escape removal."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("plain", "plain"),
            (r"tab\there", "tab\there"),
            (r"\x41\101", "AA"),
            (r"quote\"d", 'quote"d'),
            (r"back\\slash", "back\\slash"),
            (r"\q", "q"),
        ],
    )
    def test_strip_c_slashes(self, value, expected):
        assert strip_c_slashes(value) == expected
