#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/separator.py
"""Separator and spacer converter."""

from __future__ import annotations

import logging

from shortcode2blocks.ast import Shortcode
from shortcode2blocks.constants import DEFAULT_SEPARATOR_STYLE_CLASS, SEPARATOR_STYLE_CLASSES
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.utils.block_markup import block, class_names
from shortcode2blocks.utils.descriptors import ensure_px, parse_vc_css
from shortcode2blocks.utils.html_sanitizer import esc_attr

logger = logging.getLogger(__name__)

RULE_TAGS = frozenset({"vc_separator", "vc_text_separator", "mk_divider"})
SPACER_TAGS = frozenset({"vc_empty_space", "mk_padding_divider"})

DOTS_STYLE_CLASS = "is-style-dots"

# Color attributes in lookup order; "custom" defers to the next one
_COLOR_ATTRIBUTES = ("accent_color", "border_color", "divider_color", "color")

_TITLE_ALIGNMENTS = {
    "separator_align_left": "left",
    "separator_align_right": "right",
    "separator_align_center": "center",
}


class SeparatorConverter(BaseConverter):
    """Convert horizontal rule and spacer shortcodes."""

    TAGS = RULE_TAGS | SPACER_TAGS

    def convert(self, node: Shortcode) -> str:
        if node.tag in RULE_TAGS:
            return self._convert_separator(node)
        elif node.tag in SPACER_TAGS:
            return self._convert_spacer(node)
        raise self.unsupported(node)

    @staticmethod
    def _rule_color(node: Shortcode) -> str:
        for attribute in _COLOR_ATTRIBUTES:
            value = node.get(attribute).strip()
            if value and value != "custom":
                return value
        return ""

    def _title_block(self, node: Shortcode) -> str:
        title = node.get("title").strip()
        if node.tag != "vc_text_separator" or not title or not self.options.include_text_separator_title:
            return ""
        align = _TITLE_ALIGNMENTS.get(node.get("title_align").strip(), "center")
        return block("paragraph", f'<p class="has-text-align-{align}">{self.kses(title)}</p>', {"align": align})

    def _convert_separator(self, node: Shortcode) -> str:
        style = node.get("style", "solid").strip()
        style_class = SEPARATOR_STYLE_CLASSES.get(style, DEFAULT_SEPARATOR_STYLE_CLASS)

        declarations: dict[str, str] = {}
        border_width = node.get("border_width").strip()
        if border_width:
            declarations["border-top-width"] = ensure_px(border_width)

        color = self._rule_color(node)
        if color:
            declarations["border-color"] = color
            declarations["color"] = color

        declarations.update(parse_vc_css(node.get("css")))
        css_class = self.mint_class(declarations)

        attrs = {"className": class_names(DOTS_STYLE_CLASS if style_class == DOTS_STYLE_CLASS else "", css_class)}
        hr_classes = class_names("wp-block-separator has-alpha-channel-opacity", style_class, css_class)
        rule = block("separator", f'<hr class="{esc_attr(hr_classes)}"/>', attrs)

        return self._title_block(node) + rule

    def _convert_spacer(self, node: Shortcode) -> str:
        height = node.get("height").strip() or node.get("size").strip() or self.options.default_spacer_height
        height = ensure_px(height)

        css_class = self.mint_class(parse_vc_css(node.get("css")))
        classes = class_names("wp-block-spacer", css_class)

        html = f'<div style="height:{esc_attr(height)}" aria-hidden="true" class="{esc_attr(classes)}"></div>'
        return block("spacer", html, {"height": height, "className": css_class})


__all__ = ["SeparatorConverter"]
