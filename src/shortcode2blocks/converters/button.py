#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/button.py
"""Button converter.

Every button shortcode becomes a ``buttons`` block wrapping a single
``button`` block. Styled Jupiter buttons fold their colors, corner rounding,
flat/outline variant and bottom margin into one minted class, with a
``:hover`` companion rule when hover colors are set.
"""

from __future__ import annotations

import logging

from shortcode2blocks.ast import Shortcode
from shortcode2blocks.constants import (
    BUTTON_CORNER_RADII,
    DEFAULT_BUTTON_LABEL,
    DEFAULT_OUTLINE_ACCENT_COLOR,
    FLEX_JUSTIFICATIONS,
)
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.utils.block_markup import block, class_names
from shortcode2blocks.utils.descriptors import LinkDescriptor, ensure_px, resolve_link
from shortcode2blocks.utils.html_sanitizer import esc_attr, esc_url, sanitize_url, strip_html_tags

logger = logging.getLogger(__name__)

LEGACY_TAGS = frozenset({"vc_button", "vc_button2"})
STYLED_TAGS = frozenset({"mk_button", "mk_button_gradient"})

BLANK_TARGET = "_blank"
BLANK_TARGET_REL = "noreferrer noopener"


def button_markup(text: str, link: LinkDescriptor, align: str = "", css_class: str = "") -> str:
    """Render a buttons block holding one button.

    Parameters
    ----------
    text : str
        Button label (already cleaned); the default label is used when empty
    link : LinkDescriptor
        Link target; no ``href`` is written when its URL is empty or unsafe
    align : str, default ""
        ``left``, ``center`` or ``right``; other values leave the layout unset
    css_class : str, default ""
        Extra class for the button link

    Returns
    -------
    str
        Block markup

    """
    text = text or DEFAULT_BUTTON_LABEL
    url = sanitize_url(link.url)
    opens_blank = link.target == BLANK_TARGET

    buttons_attrs = {}
    if align in FLEX_JUSTIFICATIONS:
        buttons_attrs["layout"] = {"type": "flex", "justifyContent": FLEX_JUSTIFICATIONS[align]}

    button_attrs = {
        "url": url,
        "linkTarget": BLANK_TARGET if url and opens_blank else "",
        "rel": link.rel if url else "",
        "className": css_class,
    }

    href = ""
    if url:
        href = f' href="{esc_url(url)}"'
        if opens_blank:
            rel = class_names(link.rel, BLANK_TARGET_REL)
            href += f' target="{BLANK_TARGET}" rel="{esc_attr(rel)}"'
        elif link.rel:
            href += f' rel="{esc_attr(link.rel)}"'

    link_class = esc_attr(class_names("wp-block-button__link wp-element-button", css_class))
    anchor = f'<a class="{link_class}"{href}>{text}</a>'
    inner = block("button", f'<div class="wp-block-button">{anchor}</div>', button_attrs, trailing="")
    return block("buttons", f'<div class="wp-block-buttons">{inner}</div>', buttons_attrs)


class ButtonConverter(BaseConverter):
    """Convert button shortcodes."""

    TAGS = frozenset({"vc_btn"}) | LEGACY_TAGS | STYLED_TAGS

    def convert(self, node: Shortcode) -> str:
        if node.tag == "vc_btn":
            return self._convert_vc_btn(node)
        elif node.tag in LEGACY_TAGS:
            return self._convert_legacy(node)
        elif node.tag in STYLED_TAGS:
            return self._convert_styled(node)
        raise self.unsupported(node)

    def _convert_vc_btn(self, node: Shortcode) -> str:
        title = node.get("title", DEFAULT_BUTTON_LABEL)
        link = resolve_link(node.get("link"))
        return button_markup(self.kses(title), link, node.get("align").strip())

    def _convert_legacy(self, node: Shortcode) -> str:
        title = node.get("title").strip() or strip_html_tags(node.content).strip()

        href = node.get("href").strip()
        if href:
            link = LinkDescriptor(url=href, title=title, target=node.get("target").strip())
        elif node.tag == "vc_button2":
            link = resolve_link(node.get("link"))
        else:
            link = LinkDescriptor()

        return button_markup(self.kses(title), link, node.get("align").strip())

    def _convert_styled(self, node: Shortcode) -> str:
        label = strip_html_tags(node.content).strip() or node.get("text").strip() or DEFAULT_BUTTON_LABEL
        link = LinkDescriptor(
            url=node.get("url").strip(),
            title=label,
            target=node.get("target", "_self").strip(),
        )

        declarations: dict[str, str] = {}
        hover: dict[str, str] = {}

        bg_color = node.get("bg_color").strip()
        if bg_color:
            declarations["background-color"] = bg_color

        txt_color = node.get("txt_color").strip()
        if txt_color:
            declarations["color"] = txt_color

        hover_bg = node.get("btn_hover_bg").strip()
        if hover_bg:
            hover["background-color"] = hover_bg

        hover_txt = node.get("btn_hover_txt_color").strip()
        if hover_txt:
            hover["color"] = hover_txt

        radius = BUTTON_CORNER_RADII.get(node.get("corner_style").strip())
        if radius:
            declarations["border-radius"] = radius

        dimension = node.get("dimension").strip()
        if dimension == "flat":
            declarations["border"] = "none"
        elif dimension == "outline":
            accent = bg_color or DEFAULT_OUTLINE_ACCENT_COLOR
            declarations["border"] = f"2px solid {accent}"
            declarations["background-color"] = "transparent"
            declarations["color"] = accent

        margin_bottom = node.get("margin_bottom").strip()
        if margin_bottom and margin_bottom != "0":
            declarations["margin-bottom"] = ensure_px(margin_bottom)

        css_class = self.mint_class(declarations)
        if hover:
            css_class = css_class or self.context.next_class()
            self.context.add_hover(css_class, hover)

        return button_markup(self.kses(label), link, node.get("align").strip(), css_class)


__all__ = ["ButtonConverter", "button_markup"]
