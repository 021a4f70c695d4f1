#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/misc.py
"""Miscellaneous converter: raw HTML/JS, calls to action, messages and boxes.

Raw HTML and raw JS payloads are stored percent-encoded and then base64
encoded by the page builder. They are decoded before emission; a payload
that does not decode (or decodes to nothing) is emitted literally.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from urllib.parse import unquote

from shortcode2blocks.ast import Shortcode
from shortcode2blocks.constants import DEFAULT_MESSAGE_COLOR
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.converters.button import button_markup
from shortcode2blocks.utils.block_markup import block, class_attr, class_names
from shortcode2blocks.utils.descriptors import ensure_px, resolve_link
from shortcode2blocks.utils.html_sanitizer import esc_attr

logger = logging.getLogger(__name__)

RAW_TAGS = frozenset({"vc_raw_html", "vc_raw_js"})
CTA_TAGS = frozenset({"vc_cta", "vc_cta_button", "vc_cta_button2"})

_WHITESPACE = re.compile(r"\s+")
_SCRIPT_TAG = re.compile(r"<script", re.IGNORECASE)

GRADIENT_STYLE = "gradient_color"
DEFAULT_GRADIENT_COLOR = "#000000"


def decode_raw_payload(payload: str) -> str:
    """Decode a base64, then percent-encoded raw HTML/JS payload.

    Parameters
    ----------
    payload : str
        Encoded payload as stored in the shortcode body

    Returns
    -------
    str
        Decoded text, or the trimmed payload itself when it is not valid
        base64/UTF-8 or decodes to blank text

    Examples
    --------
    >>> decode_raw_payload("<p>plain</p>")
    '<p>plain</p>'

    """
    literal = payload.strip()
    if not literal:
        return ""

    try:
        raw = base64.b64decode(_WHITESPACE.sub("", literal), validate=True)
        decoded = unquote(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.debug("Raw payload is not base64/UTF-8 (%s); emitting it literally", e)
        return literal

    if not decoded.strip():
        logger.debug("Raw payload decoded to blank text; emitting it literally")
        return literal

    return decoded


def gradient(start: str, end: str) -> str:
    """Top-to-bottom linear gradient between two colors."""
    return f"linear-gradient(to bottom, {start}, {end})"


class MiscConverter(BaseConverter):
    """Convert raw code, call-to-action, message, icon, copyright and box shortcodes."""

    TAGS = RAW_TAGS | CTA_TAGS | frozenset({"vc_message", "vc_icon", "vc_copyright", "mk_custom_box"})

    def convert(self, node: Shortcode) -> str:
        if node.tag in RAW_TAGS:
            return self._convert_raw(node)
        elif node.tag in CTA_TAGS:
            return self._convert_cta(node)
        elif node.tag == "vc_message":
            return self._convert_message(node)
        elif node.tag == "vc_icon":
            logger.debug("Dropping [vc_icon]: icons have no block equivalent")
            return ""
        elif node.tag == "vc_copyright":
            return self._convert_copyright(node)
        elif node.tag == "mk_custom_box":
            return self._convert_custom_box(node)
        raise self.unsupported(node)

    def _convert_raw(self, node: Shortcode) -> str:
        code = decode_raw_payload(node.content)
        if not code:
            return ""
        if node.tag == "vc_raw_js" and not _SCRIPT_TAG.search(code):
            code = f"<script>{code}</script>"
        return block("html", code)

    def _rich_body(self, node: Shortcode, trailing: str = "\n\n") -> str:
        """Render the body: nested shortcodes through the builder, otherwise as a freeform block."""
        if node.has_shortcode_children:
            return self.convert_children(node.children)
        content = self.body(node)
        return block("freeform", content, trailing=trailing) if content else ""

    def _convert_cta(self, node: Shortcode) -> str:
        parts: list[str] = []

        heading = node.get("h2").strip()
        if heading:
            parts.append(block("heading", f'<h2 class="wp-block-heading">{self.kses(heading)}</h2>', trailing="\n"))

        sub_heading = node.get("h4").strip()
        if sub_heading:
            parts.append(
                block("heading", f'<h4 class="wp-block-heading">{self.kses(sub_heading)}</h4>', {"level": 4}, "\n")
            )

        parts.append(self._rich_body(node, trailing="\n"))

        button_title = node.get("btn_title").strip()
        if button_title:
            parts.append(button_markup(self.kses(button_title), resolve_link(node.get("btn_link"))))

        inner = "".join(parts)
        if not inner:
            logger.debug("Dropping empty [%s]", node.tag)
            return ""

        return block("group", f'<div class="wp-block-group">{inner}</div>', {"layout": {"type": "constrained"}})

    def _convert_message(self, node: Shortcode) -> str:
        inner = self.convert_children(node.children) if node.has_shortcode_children else self.body(node)
        if not inner:
            logger.debug("Dropping empty [%s]", node.tag)
            return ""

        color = node.get("message_box_color").strip() or DEFAULT_MESSAGE_COLOR
        prefix = self.options.class_prefix
        classes = class_names(f"{prefix}-message", f"{prefix}-message-{color}", node.get("el_class"))
        return block("freeform", f'<div class="{esc_attr(classes)}">{inner}</div>')

    def _convert_copyright(self, node: Shortcode) -> str:
        content = self.body(node)
        if not content:
            return ""
        return block("paragraph", f"<p>{self.kses(content)}</p>")

    def _convert_custom_box(self, node: Shortcode) -> str:
        declarations: dict[str, str] = {}

        radius = node.get("corner_radius").strip()
        if radius:
            declarations["border-radius"] = ensure_px(radius)

        padding = node.get("padding_vertical").strip()
        if padding:
            declarations["padding-top"] = ensure_px(padding)
            declarations["padding-bottom"] = ensure_px(padding)

        min_height = node.get("min_height").strip()
        if min_height:
            declarations["min-height"] = ensure_px(min_height)

        bg_color = node.get("bg_color").strip()
        if node.get("background_style").strip() == GRADIENT_STYLE:
            declarations["background"] = gradient(
                node.get("bg_grandient_color_from").strip() or DEFAULT_GRADIENT_COLOR,
                node.get("bg_grandient_color_to").strip() or DEFAULT_GRADIENT_COLOR,
            )
        elif bg_color:
            declarations["background-color"] = bg_color

        declarations["padding-left"] = "20px"
        declarations["padding-right"] = "20px"
        declarations["overflow"] = "hidden"

        css_class = self.mint_class(declarations)

        if node.get("background_hov_color_style").strip() == GRADIENT_STYLE:
            hover_from = node.get("bg_hov_grandient_color_from").strip()
            hover_to = node.get("bg_hov_grandient_color_to").strip()
            if hover_from and hover_to:
                self.context.add_hover(css_class, {"background": gradient(hover_from, hover_to)})

        extra_classes = class_names(css_class, node.get("el_class"))
        inner = self.convert_children(node.children)
        html = f"<div{class_attr('wp-block-group', extra_classes)}>{inner}</div>"
        return block("group", html, {"className": extra_classes, "layout": {"type": "constrained"}})


__all__ = ["MiscConverter", "decode_raw_payload", "gradient"]
