#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/converters/media.py
"""Media converter: images and video embeds.

Images reference either a media library attachment (resolved through the
builder's ``AttachmentResolver``) or a literal URL. An image whose URL
cannot be obtained produces no output. Videos need a non-empty ``link``;
the provider slug is derived from the URL.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from shortcode2blocks.ast import Shortcode
from shortcode2blocks.constants import (
    DEFAULT_VIDEO_PROVIDER,
    IMAGE_ALIGNMENTS,
    IMAGE_SIZE_SLUGS,
    VIDEO_PROVIDER_KEYWORDS,
)
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.utils.block_markup import block, class_attr, class_names
from shortcode2blocks.utils.descriptors import LinkDescriptor, parse_vc_css, resolve_link
from shortcode2blocks.utils.html_sanitizer import esc_attr, esc_url, sanitize_url

logger = logging.getLogger(__name__)


def video_provider(url: str) -> str:
    """Pick the embed provider slug for a video URL."""
    lowered = url.lower()
    for keyword, slug in VIDEO_PROVIDER_KEYWORDS.items():
        if keyword in lowered:
            return slug
    return DEFAULT_VIDEO_PROVIDER


class MediaConverter(BaseConverter):
    """Convert image and video shortcodes."""

    TAGS = frozenset({"vc_single_image", "mk_image", "vc_video"})

    def convert(self, node: Shortcode) -> str:
        if node.tag == "vc_single_image":
            return self._convert_vc_image(node)
        elif node.tag == "mk_image":
            return self._convert_mk_image(node)
        elif node.tag == "vc_video":
            return self._convert_video(node)
        raise self.unsupported(node)

    def _convert_vc_image(self, node: Shortcode) -> str:
        link = resolve_link(node.get("link"))
        link_target = node.get("img_link_target").strip()
        if link and not link.target and link_target:
            link = replace(link, target=link_target)

        alignment = node.get("alignment").strip()
        caption = node.get("caption").strip()
        size = node.get("img_size", "full").strip().lower()

        external_url = sanitize_url(node.get("external_img_url"))
        if node.get("source").strip() == "external_link" and external_url:
            return self._image_block(
                node, 0, external_url, "", alignment=alignment, caption=caption, link=link, size=size
            )

        attachment = self.resolve_attachment(node.get("image"))
        if attachment is None:
            logger.debug("Dropping [%s]: no image URL", node.tag)
            return ""

        if not caption and node.get("add_caption").strip().lower() == "yes":
            caption = attachment.caption

        return self._image_block(
            node,
            attachment.id,
            attachment.url,
            attachment.alt,
            alignment=alignment,
            caption=caption,
            link=link,
            size=size,
        )

    def _convert_mk_image(self, node: Shortcode) -> str:
        source = node.get("src").strip()
        alignment = node.get("align").strip()
        caption = node.get("caption").strip()
        link = resolve_link(node.get("link"))

        if source.isdecimal():
            attachment = self.resolve_attachment(source)
            if attachment is None:
                logger.debug("Dropping [%s]: attachment %s not found", node.tag, source)
                return ""
            return self._image_block(
                node, attachment.id, attachment.url, attachment.alt, alignment=alignment, caption=caption, link=link
            )

        url = sanitize_url(node.get("image_url") or source)
        if not url:
            logger.debug("Dropping [%s]: no image URL", node.tag)
            return ""
        return self._image_block(node, 0, url, "", alignment=alignment, caption=caption, link=link)

    def _image_block(
        self,
        node: Shortcode,
        attachment_id: int,
        url: str,
        alt: str,
        *,
        alignment: str = "",
        caption: str = "",
        link: LinkDescriptor | None = None,
        size: str = "full",
    ) -> str:
        align = IMAGE_ALIGNMENTS.get(alignment, "")
        size = size if size in IMAGE_SIZE_SLUGS else "full"
        extra_classes = class_names(self.mint_class(parse_vc_css(node.get("css"))), node.get("el_class"))

        attrs = {
            "id": attachment_id or None,
            "sizeSlug": size if size != "full" else "",
            "align": align,
            "className": extra_classes,
        }

        img = f'<img src="{esc_url(url)}"'
        if alt:
            img += f' alt="{esc_attr(alt)}"'
        if attachment_id:
            img += f' class="wp-image-{attachment_id}"'
        img += "/>"

        if link and esc_url(link.url):
            target = f' target="{esc_attr(link.target)}"' if link.target else ""
            rel = f' rel="{esc_attr(link.rel)}"' if link.rel else ""
            img = f'<a href="{esc_url(link.url)}"{target}{rel}>{img}</a>'

        figcaption = f'<figcaption class="wp-element-caption">{self.kses(caption)}</figcaption>' if caption else ""

        figure_classes = class_attr("wp-block-image", f"size-{size}", f"align{align}" if align else "", extra_classes)
        return block("image", f"<figure{figure_classes}>{img}{figcaption}</figure>", attrs)

    def _convert_video(self, node: Shortcode) -> str:
        url = sanitize_url(node.get("link"))
        if not url:
            logger.debug("Dropping [%s]: empty link", node.tag)
            return ""

        provider = video_provider(url)
        attrs = {
            "url": url,
            "type": "video",
            "providerNameSlug": provider,
            "responsive": True,
        }
        html = (
            f'<figure class="wp-block-embed is-type-video is-provider-{provider} wp-block-embed-{provider}">'
            f'<div class="wp-block-embed__wrapper">\n{esc_url(url)}\n</div></figure>'
        )
        return block("embed", html, attrs)


__all__ = ["MediaConverter", "video_provider"]
