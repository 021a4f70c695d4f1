#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/converters/test_text_converter.py
"""Unit tests for text, heading, quote, list and inline conversion."""

import pytest

from shortcode2blocks import BlockBuilder
from shortcode2blocks.converters.text import heading_level
from shortcode2blocks.options import ConversionOptions


@pytest.mark.unit
class TestColumnText:
    """Test body text conversion."""

    def test_plain_body_becomes_freeform(self, builder):
        markup = builder.convert("[vc_column_text]<p>Hello</p>[/vc_column_text]")
        assert markup == "<!-- wp:freeform -->\n<p>Hello</p>\n<!-- /wp:freeform -->\n\n"

    def test_extra_class_wraps_body(self, builder):
        markup = builder.convert('[vc_column_text el_class="intro"]<p>Hello</p>[/vc_column_text]')
        assert markup == '<!-- wp:freeform -->\n<div class="intro">\n<p>Hello</p>\n</div>\n<!-- /wp:freeform -->\n\n'

    def test_alignment_and_css_mint_class(self, builder):
        markup = builder.convert(
            '[vc_column_text align="center" css=".vc_custom_1{padding-top: 4px !important;}"]Hi[/vc_column_text]'
        )
        assert '<div class="dtg-0-1">' in markup
        assert builder.context.render_css() == ".dtg-0-1 { padding-top: 4px; text-align: center; }"

    def test_empty_body_dropped(self, builder):
        assert builder.convert("[vc_column_text]   [/vc_column_text]") == ""

    def test_nested_shortcodes_are_converted(self, builder):
        markup = builder.convert('[vc_column_text]Intro [vc_empty_space height="10"][/vc_column_text]')
        assert markup.startswith('<!-- wp:group {"layout":{"type":"constrained"}} -->')
        assert "<p>Intro</p>" in markup
        assert '<!-- wp:spacer {"height":"10px"} -->' in markup


@pytest.mark.unit
class TestCustomHeading:
    """Test vc_custom_heading conversion."""

    def test_default_heading(self, builder):
        markup = builder.convert('[vc_custom_heading text="Welcome"]')
        assert markup == '<!-- wp:heading -->\n<h2 class="wp-block-heading">Welcome</h2>\n<!-- /wp:heading -->\n\n'

    def test_font_container_and_google_font(self, builder):
        markup = builder.convert(
            '[vc_custom_heading text="Hello" font_container="tag:h3|text_align:center|font_size:24" '
            'google_fonts="font_family:Lato%3A400%2C700|font_style:700%20bold%20regular%3A700%3Anormal"]'
        )
        assert markup == (
            '<!-- wp:heading {"level":3,"textAlign":"center","className":"dtg-0-1"} -->\n'
            '<h3 class="wp-block-heading has-text-align-center dtg-0-1">Hello</h3>\n'
            "<!-- /wp:heading -->\n\n"
        )
        assert builder.context.render_css() == (
            '.dtg-0-1 { font-size: 24px; font-family: "Lato", sans-serif; font-weight: 700; }'
        )
        assert builder.context.fonts == {"Lato": ["700"]}

    def test_theme_fonts_skip_google_font(self, builder):
        builder.convert(
            '[vc_custom_heading text="Hi" use_theme_fonts="yes" '
            'google_fonts="font_family:Lato|font_style:x%3A700%3Anormal"]'
        )
        assert builder.context.fonts == {}
        assert builder.context.css_rules == []

    def test_paragraph_container(self, builder):
        markup = builder.convert('[vc_custom_heading text="Lead" font_container="tag:p|text_align:left"]')
        assert markup == (
            '<!-- wp:paragraph {"align":"left"} -->\n'
            '<p class="has-text-align-left">Lead</p>\n<!-- /wp:paragraph -->\n\n'
        )

    def test_link_wraps_text(self, builder):
        markup = builder.convert(
            '[vc_custom_heading text="Read" link="url:https%3A%2F%2Fexample.com|target:_blank|rel:nofollow"]'
        )
        assert '<a href="https://example.com" target="_blank" rel="nofollow">Read</a>' in markup

    def test_text_from_body(self, builder):
        markup = builder.convert("[vc_custom_heading]Body title[/vc_custom_heading]")
        assert "<h2" in markup and "Body title</h2>" in markup

    def test_empty_heading_dropped(self, builder):
        assert builder.convert("[vc_custom_heading]") == ""

    @pytest.mark.parametrize("tag,expected", [("h4", 4), ("H1", 1), ("h9", 2), ("div", 2), ("", 2)])
    def test_heading_level(self, tag, expected):
        assert heading_level(tag) == expected

    def test_oversized_heading_level_uses_default(self, builder):
        assert heading_level("h" + "1" * 5000) == 2
        markup = builder.convert('[mk_fancy_title tag_name="h' + "1" * 5000 + '"]Title[/mk_fancy_title]')
        assert "Title</h2>" in markup


@pytest.mark.unit
class TestJupiterHeadings:
    """Test mk_* title conversion."""

    def test_fancy_title(self, builder):
        markup = builder.convert(
            '[mk_fancy_title tag_name="h3" color="#333" size="30" align="center" margin_bottom="20" size_phone="18"]'
            "Title[/mk_fancy_title]"
        )
        assert markup.startswith('<!-- wp:heading {"level":3,"textAlign":"center","className":"dtg-0-1"} -->')
        assert '<h3 class="wp-block-heading has-text-align-center dtg-0-1">Title</h3>' in markup
        assert builder.context.render_css() == (
            ".dtg-0-1 { color: #333; font-size: 30px; text-align: center; margin-bottom: 20px; }\n"
            "@media (max-width: 767px) { .dtg-0-1 { font-size: 18px; } }"
        )

    def test_left_alignment_not_in_block_attrs(self, builder):
        markup = builder.convert('[mk_fancy_title align="left"]Title[/mk_fancy_title]')
        assert "textAlign" not in markup
        assert "text-align: left;" in builder.context.render_css()

    def test_google_font_registered(self, builder):
        builder.convert('[mk_fancy_title font_family="Roboto" font_type="google" font_weight="700"]T[/mk_fancy_title]')
        assert builder.context.fonts == {"Roboto": ["700"]}
        assert 'font-family: "Roboto", sans-serif;' in builder.context.render_css()

    def test_non_google_font_not_registered(self, builder):
        builder.convert('[mk_fancy_title font_family="Arial"]T[/mk_fancy_title]')
        assert builder.context.fonts == {}

    def test_title_attribute_fallback(self, builder):
        markup = builder.convert('[mk_title_box title="Boxed"]')
        assert "Boxed</h2>" in markup

    def test_text_transform_and_spacing(self, builder):
        builder.convert('[mk_ornamental_title txt_transform="uppercase" letter_spacing="2"]T[/mk_ornamental_title]')
        assert builder.context.render_css() == ".dtg-0-1 { text-transform: uppercase; letter-spacing: 2px; }"


@pytest.mark.unit
class TestQuotesAndLists:
    """Test blockquote and list conversion."""

    def test_blockquote(self, builder):
        markup = builder.convert("[mk_blockquote]Wise words[/mk_blockquote]")
        assert markup == (
            '<!-- wp:quote -->\n<blockquote class="wp-block-quote"><p>Wise words</p></blockquote>\n'
            "<!-- /wp:quote -->\n\n"
        )

    def test_list_from_html_items(self, builder):
        markup = builder.convert("[mk_custom_list]<ul><li>One</li><li>Two</li></ul>[/mk_custom_list]")
        assert markup == (
            '<!-- wp:list -->\n<ul class="wp-block-list">'
            "<!-- wp:list-item -->\n<li>One</li>\n<!-- /wp:list-item -->"
            "<!-- wp:list-item -->\n<li>Two</li>\n<!-- /wp:list-item -->"
            "</ul>\n<!-- /wp:list -->\n\n"
        )

    def test_list_from_lines(self, builder):
        markup = builder.convert("[mk_custom_list]\nOne\n\nTwo\n[/mk_custom_list]")
        assert markup.count("<!-- wp:list-item -->") == 2

    def test_icon_color_adds_bullet_rule(self, builder):
        markup = builder.convert('[mk_custom_list icon_color="#f00"]<ul><li>One</li></ul>[/mk_custom_list]')
        assert '<!-- wp:list {"className":"dtg-0-1"} -->' in markup
        assert builder.context.render_css() == (
            ".dtg-0-1 { list-style: none; }\n"
            '.dtg-0-1 li::before { content: "\\2022"; color: #f00; font-weight: bold; margin-right: 0.5em; }'
        )

    def test_empty_list_dropped(self, builder):
        assert builder.convert("[mk_custom_list]<ul><li> </li></ul>[/mk_custom_list]") == ""


@pytest.mark.unit
class TestInline:
    """Test inline emphasis conversion."""

    def test_highlight_default_color(self, builder):
        markup = builder.convert("[mk_highlight]hot[/mk_highlight]")
        assert markup == (
            '<!-- wp:freeform -->\n<p><mark style="background-color:#fff000">hot</mark></p>\n<!-- /wp:freeform -->\n\n'
        )

    def test_highlight_colors(self, builder):
        markup = builder.convert('[mk_highlight bg_color="#ff0" text_color="#000"]hot[/mk_highlight]')
        assert '<mark style="background-color:#ff0;color:#000">hot</mark>' in markup

    def test_dropcaps(self, builder):
        markup = builder.convert("[mk_dropcaps]A[/mk_dropcaps]")
        assert '<p><span class="has-drop-cap">A</span></p>' in markup


@pytest.mark.unit
def test_custom_prefix_applies_to_minted_classes():
    builder = BlockBuilder(options=ConversionOptions(class_prefix="site"))
    markup = builder.convert('[mk_fancy_title color="#333"]T[/mk_fancy_title]', document_id=9)
    assert "site-9-1" in markup
