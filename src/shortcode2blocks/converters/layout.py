#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/layout.py
"""Layout converter: rows, columns and sections.

Rows become a group block when they hold at most one column and a columns
block otherwise. Columns become column blocks sized from their width
fraction. Sections become constrained group blocks whose background,
height, padding, vertical centering and video overlay are expressed as
generated CSS on a minted class.
"""

from __future__ import annotations

import logging

from shortcode2blocks.ast import Shortcode
from shortcode2blocks.constants import FULL_WIDTH_VALUES
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.utils.block_markup import block, class_attr, class_names
from shortcode2blocks.utils.descriptors import ensure_px, parse_vc_css, width_to_percentage
from shortcode2blocks.utils.html_sanitizer import esc_attr, sanitize_url

logger = logging.getLogger(__name__)

ROW_TAGS = frozenset({"vc_row", "vc_row_inner"})
COLUMN_TAGS = frozenset({"vc_column", "vc_column_inner"})
SECTION_TAGS = frozenset({"vc_section", "mk_page_section"})

CONSTRAINED_LAYOUT = {"type": "constrained"}


class LayoutConverter(BaseConverter):
    """Convert row, column and section shortcodes."""

    TAGS = ROW_TAGS | COLUMN_TAGS | SECTION_TAGS

    def convert(self, node: Shortcode) -> str:
        if node.tag in ROW_TAGS:
            return self._convert_row(node)
        elif node.tag in COLUMN_TAGS:
            return self._convert_column(node)
        elif node.tag in SECTION_TAGS:
            return self._convert_section(node)
        raise self.unsupported(node)

    def _convert_row(self, node: Shortcode) -> str:
        column_count = sum(
            1 for child in node.children if isinstance(child, Shortcode) and child.tag in COLUMN_TAGS
        )

        css_class = self.mint_class(parse_vc_css(node.get("css")))
        extra_classes = class_names(css_class, node.get("el_class"))
        inner = self.convert_children(node.children)

        if column_count <= 1:
            attrs = {"className": extra_classes, "layout": CONSTRAINED_LAYOUT}
            html = f"<div{class_attr('wp-block-group', extra_classes)}>{inner}</div>"
            return block("group", html, attrs)

        html = f"<div{class_attr('wp-block-columns', extra_classes)}>{inner}</div>"
        return block("columns", html, {"className": extra_classes})

    def _convert_column(self, node: Shortcode) -> str:
        percentage = width_to_percentage(node.get("width"))

        css_class = self.mint_class(parse_vc_css(node.get("css")))
        extra_classes = class_names(css_class, node.get("el_class"))

        style = f' style="flex-basis:{esc_attr(percentage)}"' if percentage else ""
        inner = self.convert_children(node.children)

        html = f"<div{class_attr('wp-block-column', extra_classes)}{style}>{inner}</div>"
        return block("column", html, {"width": percentage, "className": extra_classes}, trailing="\n")

    def _is_full_width(self, node: Shortcode) -> bool:
        if node.tag == "mk_page_section":
            return True
        return node.get("full_width").strip() in FULL_WIDTH_VALUES

    def _background_image(self, value: str) -> str:
        value = value.strip()
        if not value:
            return ""
        if value.isdecimal():
            attachment = self.resolve_attachment(value)
            return attachment.url if attachment else ""
        return sanitize_url(value)

    def _section_declarations(self, node: Shortcode) -> dict[str, str]:
        declarations: dict[str, str] = {}

        bg_color = node.get("bg_color").strip()
        if bg_color:
            declarations["background-color"] = bg_color

        image_url = self._background_image(node.get("bg_image"))
        if image_url:
            declarations["background-image"] = f'url("{image_url}")'

        bg_position = node.get("bg_position").strip()
        if bg_position:
            declarations["background-position"] = bg_position

        bg_repeat = node.get("bg_repeat").strip()
        if bg_repeat:
            declarations["background-repeat"] = bg_repeat

        if node.get("bg_stretch").strip().lower() == "true":
            declarations["background-size"] = "cover"

        min_height = node.get("min_height").strip()
        if min_height and min_height != "0":
            declarations["min-height"] = ensure_px(min_height)

        if node.get("full_height").strip().lower() in ("yes", "true"):
            declarations["min-height"] = "100vh"

        for attribute, prop in (("padding_top", "padding-top"), ("padding_bottom", "padding-bottom")):
            value = node.get(attribute).strip()
            if value:
                declarations[prop] = ensure_px(value)

        if node.get("vertical_align").strip() == "center" or node.get("content_placement").strip() == "middle":
            declarations["display"] = "flex"
            declarations["flex-direction"] = "column"
            declarations["justify-content"] = "center"

        if node.get("video_color_mask").strip():
            declarations["position"] = "relative"

        return declarations

    def _convert_section(self, node: Shortcode) -> str:
        declarations = self._section_declarations(node)
        declarations.update(parse_vc_css(node.get("css")))
        css_class = self.mint_class(declarations)

        mask_color = node.get("video_color_mask").strip()
        if mask_color and css_class:
            overlay = {
                "content": '""',
                "position": "absolute",
                "inset": "0",
                "background-color": mask_color,
                "opacity": node.get("video_opacity").strip(),
                "pointer-events": "none",
            }
            self.context.add_css(f".{css_class}::before", overlay)

        full_width = self._is_full_width(node)
        extra_classes = class_names(css_class, node.get("el_class"))
        inner = self.convert_children(node.children)

        attrs = {
            "className": extra_classes,
            "layout": CONSTRAINED_LAYOUT,
            "align": "full" if full_width else "",
        }
        html_classes = class_names("wp-block-group", "alignfull" if full_width else "", extra_classes)
        html = f"<div{class_attr(html_classes)}>{inner}</div>"
        return block("group", html, attrs)


__all__ = ["LayoutConverter"]
