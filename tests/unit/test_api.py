#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api.py
"""Unit tests for the public entry points."""

import dataclasses

import pytest

import shortcode2blocks
from shortcode2blocks import (
    ConversionOptions,
    ConversionResult,
    InvalidOptionsError,
    MappingAttachmentResolver,
    analyze,
    contains_shortcode,
    convert,
    parse,
)
from shortcode2blocks.ast import Shortcode


@pytest.mark.unit
class TestConvert:
    """Test the convert entry point."""

    def test_result_fields(self):
        result = convert(
            '[vc_custom_heading text="Hi" '
            'google_fonts="font_family:Lato%3A400%2C700|font_style:700%20bold%20regular%3A700%3Anormal"]',
            document_id=8,
        )
        assert isinstance(result, ConversionResult)
        assert "dtg-8-1" in result.markup
        assert result.css.startswith(".dtg-8-1 {")
        assert result.fonts == {"Lato": ["700"]}
        assert result.fonts_url == "https://fonts.googleapis.com/css2?family=Lato:ital,wght@0,700&display=swap"

    def test_unchanged_document(self):
        result = convert("No shortcodes here.")
        assert result == ConversionResult(markup="No shortcodes here.")
        assert result.fonts_url == ""

    def test_options_and_resolver(self):
        resolver = MappingAttachmentResolver({3: "https://example.com/c.jpg"})
        result = convert(
            '[vc_single_image image="3" css=".x{margin: 0 !important;}"]',
            options=ConversionOptions(class_prefix="site"),
            attachment_resolver=resolver,
        )
        assert 'src="https://example.com/c.jpg"' in result.markup
        assert "site-0-1" in result.markup

    def test_invalid_options(self):
        with pytest.raises(InvalidOptionsError):
            convert("[vc_row][/vc_row]", options="fast")

    def test_calls_are_independent(self):
        text = '[mk_fancy_title color="#000"]A[/mk_fancy_title]'
        assert convert(text, 1) == convert(text, 1)

    def test_result_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            convert("x").markup = "y"  # type: ignore[misc]


@pytest.mark.unit
class TestParseAndAnalyze:
    """Test parse, analyze and contains_shortcode."""

    def test_parse(self):
        nodes = parse('[vc_row][vc_column width="1/2"]Hi[/vc_column][/vc_row]')
        assert len(nodes) == 1
        assert isinstance(nodes[0], Shortcode)
        assert nodes[0].children[0].get("width") == "1/2"

    def test_analyze_counts_every_depth(self):
        counts = analyze("[vc_row][vc_column][/vc_column][vc_column][/vc_column][/vc_row]")
        assert counts == {"vc_column": 2, "vc_row": 1}
        assert list(counts) == ["vc_column", "vc_row"]

    def test_analyze_empty(self):
        assert analyze("") == {}
        assert analyze("plain") == {}

    @pytest.mark.parametrize(
        "text,expected",
        [("[vc_row]", True), ("[mk_button]Go[/mk_button]", True), ("[gallery]", False), ("", False)],
    )
    def test_contains_shortcode(self, text, expected):
        assert contains_shortcode(text) is expected


@pytest.mark.unit
def test_version():
    assert shortcode2blocks.__version__ == "1.0.0"
