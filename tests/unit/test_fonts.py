#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_fonts.py
"""Unit tests for font manifest helpers."""

import pytest

from shortcode2blocks.utils.fonts import font_variant, google_fonts_url, merge_font_manifests, split_variant


@pytest.mark.unit
class TestFontVariants:
    """Test variant keys."""

    @pytest.mark.parametrize(
        "weight,style,expected",
        [
            ("700", "italic", "700italic"),
            ("400", "normal", "400"),
            ("", "normal", "400"),
            ("300", "Italic", "300italic"),
        ],
    )
    def test_font_variant(self, weight, style, expected):
        assert font_variant(weight, style) == expected

    @pytest.mark.parametrize(
        "variant,expected",
        [("700italic", (True, "700")), ("400", (False, "400")), ("bold", (False, "700")), ("italic", (True, "400"))],
    )
    def test_split_variant(self, variant, expected):
        assert split_variant(variant) == expected


@pytest.mark.unit
class TestManifests:
    """Test manifest merging and stylesheet URLs."""

    def test_merge_keeps_order_and_uniqueness(self):
        target = {"Lato": ["400"]}
        merge_font_manifests(target, {"Lato": ["700", "400"], "Roboto": ["300"]})
        assert target == {"Lato": ["400", "700"], "Roboto": ["300"]}

    def test_google_fonts_url_sorts_axes(self):
        url = google_fonts_url({"Lato": ["700", "400"]})
        assert url == "https://fonts.googleapis.com/css2?family=Lato:ital,wght@0,400;0,700&display=swap"

    def test_google_fonts_url_multiple_families(self):
        url = google_fonts_url({"Open Sans": ["400", "300italic"], "Lato": []})
        assert url == (
            "https://fonts.googleapis.com/css2"
            "?family=Open+Sans:ital,wght@0,400;1,300"
            "&family=Lato:ital,wght@0,400"
            "&display=swap"
        )

    def test_google_fonts_url_skips_non_numeric_weights(self):
        url = google_fonts_url({"Lato": ["heavy"]})
        assert url.endswith("family=Lato:ital,wght@0,400&display=swap")

    def test_google_fonts_url_skips_oversized_weights(self):
        url = google_fonts_url({"Lato": ["7" * 5000, "700"]})
        assert url.endswith("family=Lato:ital,wght@0,700&display=swap")

    def test_empty_manifest(self):
        assert google_fonts_url({}) == ""
        assert google_fonts_url({"": ["400"]}) == ""
