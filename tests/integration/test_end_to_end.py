#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_end_to_end.py
"""End-to-end conversion of realistic page-builder documents."""

import pytest

from shortcode2blocks import MappingAttachmentResolver, analyze, convert

TWO_COLUMN_ROW = (
    '[vc_row][vc_column width="1/2"][vc_column_text]Hello[/vc_column_text][/vc_column]'
    '[vc_column width="1/2"][vc_column_text]World[/vc_column_text][/vc_column][/vc_row]'
)

LANDING_PAGE = """
[mk_page_section bg_color="#111" padding_top="80" padding_bottom="80"]
[vc_row][vc_column]
[mk_fancy_title tag_name="h1" size="48" align="center" font_family="Lato" font_type="google"]Welcome[/mk_fancy_title]
[vc_column_text]<p>We build <strong>fast</strong> websites.</p>[/vc_column_text]
[mk_button url="https://example.com/start" bg_color="#e00" btn_hover_bg="#a00" align="center"]Get started[/mk_button]
[/vc_column][/vc_row]
[/mk_page_section]
[vc_row][vc_column width="1/3"][vc_single_image image="42" alignment="center"][/vc_column]
[vc_column width="2/3"][vc_custom_heading text="About us" font_container="tag:h2|text_align:left"]
[vc_empty_space height="20"][vc_gallery ids="1,2,3"][/vc_column][/vc_row]
"""


@pytest.mark.integration
class TestLayouts:
    """Test complete layout documents."""

    def test_two_column_row(self):
        result = convert(TWO_COLUMN_ROW)
        column = (
            '<!-- wp:column {"width":"50%"} -->\n'
            '<div class="wp-block-column" style="flex-basis:50%"><!-- wp:freeform -->\n'
            "{text}\n"
            "<!-- /wp:freeform -->\n\n"
            "</div>\n"
            "<!-- /wp:column -->\n"
        )
        assert result.markup == (
            "<!-- wp:columns -->\n"
            '<div class="wp-block-columns">'
            + column.replace("{text}", "Hello")
            + column.replace("{text}", "World")
            + "</div>\n<!-- /wp:columns -->\n\n"
        )
        assert result.css == ""

    def test_two_column_row_structure(self, soup):
        tree = soup(convert(TWO_COLUMN_ROW).markup)
        columns = tree.select("div.wp-block-columns > div.wp-block-column")
        assert [column.get_text(strip=True) for column in columns] == ["Hello", "World"]
        assert all(column["style"] == "flex-basis:50%" for column in columns)

    def test_three_levels_of_nesting(self, soup):
        markup = convert(
            '[vc_section][vc_row][vc_column][vc_column_text]Deep[/vc_column_text][/vc_column][/vc_row][/vc_section]'
        ).markup
        order = [
            markup.index("<!-- wp:group"),
            markup.index('<div class="wp-block-group"><!-- wp:group'),
            markup.index("<!-- wp:column -->"),
            markup.index("Deep"),
            markup.index("<!-- /wp:column -->"),
        ]
        assert order == sorted(order)
        assert markup.count("<!-- wp:group") == 2
        assert markup.count("<!-- /wp:group -->") == 2
        tree = soup(markup)
        innermost = tree.select_one("div.wp-block-group div.wp-block-group div.wp-block-column")
        assert innermost.get_text(strip=True) == "Deep"

    def test_landing_page(self, attachments, soup):
        result = convert(LANDING_PAGE, document_id=77, attachment_resolver=attachments)
        tree = soup(result.markup)

        section = tree.select_one("div.wp-block-group.alignfull")
        assert section is not None
        assert section.select_one("h1").get_text() == "Welcome"
        assert section.select_one("a.wp-block-button__link")["href"] == "https://example.com/start"
        assert tree.select_one("figure.aligncenter img")["src"] == "https://cdn.example.com/hero.jpg"
        assert '<!-- wp:spacer {"height":"20px"} -->' in result.markup
        assert '<!-- wp:html -->\n[vc_gallery ids="1,2,3"]\n<!-- /wp:html -->' in result.markup

        assert ".dtg-77-1 {" in result.css
        assert ":hover { background-color: #a00; }" in result.css
        assert result.fonts == {"Lato": ["400"]}

    def test_inventory_of_landing_page(self):
        counts = analyze(LANDING_PAGE)
        assert counts["vc_column"] == 3
        assert counts["vc_row"] == 2
        assert counts["vc_gallery"] == 1


@pytest.mark.integration
class TestDocumentProperties:
    """Test whole-document guarantees."""

    def test_spacer(self):
        assert '"height":"50px"' in convert('[vc_empty_space height="50"]').markup

    def test_button_link(self, soup):
        markup = convert('[vc_btn title="Go" link="url:https%3A%2F%2Fexample.com|target:_blank"]').markup
        anchor = soup(markup).select_one("a")
        assert anchor["href"] == "https://example.com"
        assert anchor["target"] == "_blank"

    def test_fonts_merged_per_family(self):
        result = convert(
            '[vc_custom_heading text="A" google_fonts="font_family:Lato|font_style:400%20regular%3A400%3Anormal"]'
            '[vc_custom_heading text="B" '
            'google_fonts="font_family:Lato|font_style:700%20bold%20regular%3A700%3Anormal"]'
        )
        assert result.fonts == {"Lato": ["400", "700"]}
        assert "family=Lato:ital,wght@0,400;0,700" in result.fonts_url

    def test_pass_through_is_byte_identical(self):
        source = '[vc_gallery a="1" b="2"]'
        assert convert(source).markup == f"<!-- wp:html -->\n{source}\n<!-- /wp:html -->\n\n"

    def test_converted_markup_is_stable(self):
        first = convert(TWO_COLUMN_ROW).markup
        assert convert(first).markup == first

    def test_missing_attachment_dropped_quietly(self):
        resolver = MappingAttachmentResolver({})
        assert convert('[vc_single_image image="5"]', attachment_resolver=resolver).markup == ""
        markup = convert(
            '[vc_row][vc_column][vc_single_image image="5"][/vc_column][/vc_row]', attachment_resolver=resolver
        ).markup
        assert "wp:image" not in markup
        assert '<!-- wp:column -->\n<div class="wp-block-column"></div>' in markup

    def test_stray_brackets_kept_as_text(self):
        markup = convert('Before [/vc_row] [vc_empty_space height="5"] after [vc_row').markup
        assert "<p>Before [/vc_row]</p>" in markup
        assert "wp:spacer" in markup
        assert "<p>after [vc_row</p>" in markup
