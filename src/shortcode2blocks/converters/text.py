#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/text.py
"""Text converter: body text, headings, quotes, lists and inline emphasis."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from shortcode2blocks.ast import Shortcode
from shortcode2blocks.constants import (
    DEFAULT_FONT_WEIGHT,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_HIGHLIGHT_COLOR,
    MAX_NUMERIC_DIGITS,
    PARAGRAPH_CONTAINER_TAGS,
)
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.utils.block_markup import block, class_attr, class_names, join_blocks, style_declarations
from shortcode2blocks.utils.descriptors import (
    ensure_px,
    parse_font_container,
    parse_google_fonts,
    parse_vc_css,
    resolve_link,
)
from shortcode2blocks.utils.html_sanitizer import esc_attr, esc_url

logger = logging.getLogger(__name__)

HEADING_TAGS = frozenset({"mk_fancy_title", "mk_ornamental_title", "mk_title_box"})
INLINE_TAGS = frozenset({"mk_highlight", "mk_dropcaps"})

_LINE_SPLIT = re.compile(r"\r?\n")
_DIGITS = re.compile(r"\D")


def heading_level(tag_name: str, default: int = DEFAULT_HEADING_LEVEL) -> int:
    """Extract a heading level (1-6) from a tag name such as ``h3``."""
    digits = _DIGITS.sub("", tag_name or "")
    if digits and len(digits) <= MAX_NUMERIC_DIGITS:
        level = int(digits)
        if 1 <= level <= 6:
            return level
    return default


class TextConverter(BaseConverter):
    """Convert text, heading, quote, list and inline emphasis shortcodes."""

    TAGS = (
        frozenset({"vc_column_text", "vc_custom_heading", "mk_blockquote", "mk_custom_list"})
        | HEADING_TAGS
        | INLINE_TAGS
    )

    def convert(self, node: Shortcode) -> str:
        if node.tag == "vc_column_text":
            return self._convert_column_text(node)
        elif node.tag == "vc_custom_heading":
            return self._convert_custom_heading(node)
        elif node.tag in HEADING_TAGS:
            return self._convert_mk_heading(node)
        elif node.tag == "mk_blockquote":
            return self._convert_blockquote(node)
        elif node.tag == "mk_custom_list":
            return self._convert_custom_list(node)
        elif node.tag in INLINE_TAGS:
            return self._convert_inline(node)
        raise self.unsupported(node)

    def _convert_column_text(self, node: Shortcode) -> str:
        declarations = parse_vc_css(node.get("css"))
        align = node.get("align").strip()
        if align:
            declarations["text-align"] = align

        if node.has_shortcode_children:
            inner = self.convert_children(node.children)
            if not inner:
                return ""
            extra_classes = class_names(self.mint_class(declarations), node.get("el_class"))
            html = f"<div{class_attr('wp-block-group', extra_classes)}>{inner}</div>"
            return block("group", html, {"className": extra_classes, "layout": {"type": "constrained"}})

        content = self.body(node)
        if not content:
            logger.debug("Dropping empty [%s]", node.tag)
            return ""

        extra_classes = class_names(self.mint_class(declarations), node.get("el_class"))
        if extra_classes:
            return block("freeform", f'<div class="{esc_attr(extra_classes)}">\n{content}\n</div>')
        return block("freeform", content)

    def _link_wrap(self, text: str, link_value: str) -> str:
        link = resolve_link(link_value)
        href = esc_url(link.url)
        if not href:
            return text
        target = f' target="{esc_attr(link.target)}"' if link.target else ""
        rel = f' rel="{esc_attr(link.rel)}"' if link.rel else ""
        return f'<a href="{href}"{target}{rel}>{text}</a>'

    def _convert_custom_heading(self, node: Shortcode) -> str:
        text = node.get("text").strip() or self.body(node)
        if not text:
            return ""

        container = parse_font_container(node.get("font_container"))
        level = heading_level(container.tag)
        is_paragraph = container.tag in PARAGRAPH_CONTAINER_TAGS
        text_align = container.text_align

        declarations: dict[str, str] = {}
        if container.font_size:
            declarations["font-size"] = ensure_px(container.font_size)
        if container.color:
            declarations["color"] = container.color
        if container.line_height:
            declarations["line-height"] = container.line_height

        if node.get("use_theme_fonts").strip().lower() != "yes":
            font = parse_google_fonts(node.get("google_fonts"))
            if font.family:
                declarations["font-family"] = f'"{font.family}", sans-serif'
                declarations["font-weight"] = font.weight
                if font.style != "normal":
                    declarations["font-style"] = font.style
                self.context.add_font(font.family, font.weight, font.style)

        declarations.update(parse_vc_css(node.get("css")))
        css_class = self.mint_class(declarations)

        text = self._link_wrap(self.kses(text), node.get("link"))

        if is_paragraph:
            attrs = {"align": text_align, "className": css_class}
            align_class = f"has-text-align-{text_align}" if text_align else ""
            return block("paragraph", f"<p{class_attr(align_class, css_class)}>{text}</p>", attrs)

        attrs = {
            "level": level if level != DEFAULT_HEADING_LEVEL else None,
            "textAlign": text_align,
            "className": css_class,
        }
        return self._heading_block(level, text, attrs, text_align, css_class)

    @staticmethod
    def _heading_block(level: int, text: str, attrs: dict, text_align: str, css_class: str) -> str:
        align_class = f"has-text-align-{text_align}" if text_align else ""
        classes = class_attr("wp-block-heading", align_class, css_class)
        return block("heading", f"<h{level}{classes}>{text}</h{level}>", attrs)

    def _convert_mk_heading(self, node: Shortcode) -> str:
        content = node.get("content").strip() or self.body(node) or node.get("title").strip()
        if not content:
            return ""

        level = heading_level(node.get("tag_name", "h2"))
        text_align = node.get("align").strip()
        font_weight = node.get("font_weight").strip()

        declarations: dict[str, str] = {}

        color = node.get("color").strip()
        if color:
            declarations["color"] = color

        size = node.get("size").strip()
        if size:
            declarations["font-size"] = ensure_px(size)

        if text_align:
            declarations["text-align"] = text_align

        if font_weight and font_weight != "inherit":
            declarations["font-weight"] = font_weight

        transform = node.get("txt_transform").strip()
        if transform and transform not in ("initial", "none"):
            declarations["text-transform"] = transform

        letter_spacing = node.get("letter_spacing").strip()
        if letter_spacing and letter_spacing != "0":
            declarations["letter-spacing"] = ensure_px(letter_spacing)

        margin_top = node.get("margin_top").strip()
        if margin_top and margin_top != "0":
            declarations["margin-top"] = ensure_px(margin_top)

        margin_bottom = node.get("margin_bottom").strip()
        if margin_bottom:
            declarations["margin-bottom"] = ensure_px(margin_bottom)

        font_family = node.get("font_family", "none").strip()
        if font_family and font_family != "none":
            declarations["font-family"] = f'"{font_family}", sans-serif'
            if node.get("font_type").strip() == "google":
                weight = font_weight if font_weight and font_weight != "inherit" else DEFAULT_FONT_WEIGHT
                self.context.add_font(font_family, weight)

        css_class = self.mint_class(declarations)

        size_phone = node.get("size_phone").strip()
        if css_class and size_phone:
            self.context.add_responsive(css_class, {"font-size": ensure_px(size_phone)})

        block_align = text_align if text_align != "left" else ""
        attrs = {
            "level": level if level != DEFAULT_HEADING_LEVEL else None,
            "textAlign": block_align,
            "className": css_class,
        }
        return self._heading_block(level, self.kses(content), attrs, block_align, css_class)

    def _convert_blockquote(self, node: Shortcode) -> str:
        content = node.get("content").strip() or self.body(node)
        if not content:
            return ""
        return block("quote", f'<blockquote class="wp-block-quote"><p>{self.kses(content)}</p></blockquote>')

    def _list_items(self, content: str) -> list[str]:
        if "<li" in content.lower():
            soup = BeautifulSoup(content, "html.parser")
            return [item.decode_contents().strip() for item in soup.find_all("li")]
        return [line.strip() for line in _LINE_SPLIT.split(content) if line.strip()]

    def _convert_custom_list(self, node: Shortcode) -> str:
        content = node.get("content").strip() or self.body(node)
        if not content:
            return ""

        items = [item for item in self._list_items(content) if item]
        if not items:
            return ""

        icon_color = node.get("icon_color").strip()
        declarations: dict[str, str] = {}
        if icon_color:
            declarations["list-style"] = "none"

        margin_bottom = node.get("margin_bottom").strip()
        if margin_bottom and margin_bottom != "30":
            declarations["margin-bottom"] = ensure_px(margin_bottom)

        align = node.get("align").strip()
        if align:
            declarations["text-align"] = align

        css_class = self.mint_class(declarations)
        if css_class and icon_color:
            self.context.add_css(
                f".{css_class} li::before",
                {
                    "content": '"\\2022"',
                    "color": icon_color,
                    "font-weight": "bold",
                    "margin-right": "0.5em",
                },
            )

        extra_classes = class_names(css_class, node.get("el_class"))
        list_items = join_blocks(
            block("list-item", f"<li>{self.kses(item)}</li>", trailing="") for item in items
        )
        html = f"<ul{class_attr('wp-block-list', extra_classes)}>{list_items}</ul>"
        return block("list", html, {"className": extra_classes})

    def _convert_inline(self, node: Shortcode) -> str:
        content = self.body(node)
        if not content:
            return ""

        content = self.kses(content)
        if node.tag == "mk_highlight":
            style = style_declarations(
                {
                    "background-color": node.get("bg_color").strip() or DEFAULT_HIGHLIGHT_COLOR,
                    "color": node.get("text_color").strip(),
                }
            )
            content = f'<mark style="{esc_attr(style)}">{content}</mark>'
        else:
            content = f'<span class="has-drop-cap">{content}</span>'

        return block("freeform", f"<p>{content}</p>")


__all__ = ["TextConverter", "heading_level"]
