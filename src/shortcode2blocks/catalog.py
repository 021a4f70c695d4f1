#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/catalog.py
"""Known shortcode tag catalog.

The catalog lists every page-builder tag the parser recognizes: WPBakery
(``vc_*``) and Jupiter Donut (``mk_*``). Membership is the only question the
catalog answers. Whether a tag is *convertible* or *pass-through* is decided by
the converter registry (see ``shortcode2blocks.converters``); anything in the
catalog without a converter is preserved verbatim.

The tuple order only feeds the parser's regex alternation. Tag names are
disjoint strings and the parser guards each name with a negative lookahead,
so the order never changes where a match ends.
"""

from __future__ import annotations

KNOWN_TAGS: tuple[str, ...] = (
    # WPBakery layout
    "vc_row",
    "vc_row_inner",
    "vc_column",
    "vc_column_inner",
    "vc_section",
    # WPBakery content
    "vc_column_text",
    "vc_icon",
    "vc_separator",
    "vc_zigzag",
    "vc_text_separator",
    "vc_message",
    "vc_hoverbox",
    "vc_copyright",
    "vc_toggle",
    "vc_single_image",
    "vc_gallery",
    "vc_images_carousel",
    "vc_custom_heading",
    "vc_btn",
    "vc_cta",
    "vc_pricing_table",
    "vc_video",
    "vc_goo_maps",
    "vc_raw_html",
    "vc_raw_js",
    "vc_flickr",
    "vc_progress_bar",
    "vc_pie",
    "vc_round_chart",
    "vc_line_chart",
    "vc_empty_space",
    "vc_posts_slider",
    # WPBakery tabs, tours and accordions
    "vc_tta_tabs",
    "vc_tta_tour",
    "vc_tta_accordion",
    "vc_tta_pageable",
    "vc_tta_toggle",
    "vc_tta_section",
    "vc_tta_toggle_section",
    # WPBakery grids
    "vc_basic_grid",
    "vc_media_grid",
    "vc_masonry_grid",
    "vc_masonry_media_grid",
    # WPBakery social
    "vc_facebook",
    "vc_tweetmeme",
    "vc_googleplus",
    "vc_pinterest",
    # WPBakery WordPress widgets
    "vc_wp_search",
    "vc_wp_meta",
    "vc_wp_recentcomments",
    "vc_wp_calendar",
    "vc_wp_pages",
    "vc_wp_tagcloud",
    "vc_wp_custommenu",
    "vc_wp_text",
    "vc_wp_posts",
    "vc_wp_links",
    "vc_wp_categories",
    "vc_wp_archives",
    "vc_wp_rss",
    # WPBakery structure
    "vc_widget_sidebar",
    # WPBakery deprecated
    "vc_tabs",
    "vc_tour",
    "vc_tab",
    "vc_accordion",
    "vc_accordion_tab",
    "vc_button",
    "vc_button2",
    "vc_cta_button",
    "vc_cta_button2",
    "vc_gmaps",
    # Jupiter Donut
    "mk_advanced_gmaps",
    "mk_animated_columns",
    "mk_audio",
    "mk_banner_builder",
    "mk_blockquote",
    "mk_blog",
    "mk_blog_carousel",
    "mk_blog_showcase",
    "mk_blog_teaser",
    "mk_button",
    "mk_button_gradient",
    "mk_category",
    "mk_chart",
    "mk_circle_image",
    "mk_clients",
    "mk_contact_form",
    "mk_contact_info",
    "mk_content_box",
    "mk_countdown",
    "mk_custom_box",
    "mk_custom_list",
    "mk_custom_sidebar",
    "mk_divider",
    "mk_dropcaps",
    "mk_edge_one_pager",
    "mk_edge_slider",
    "mk_employees",
    "mk_fancy_title",
    "mk_faq",
    "mk_flexslider",
    "mk_flickr",
    "mk_flipbox",
    "mk_font_icons",
    "mk_fullwidth_slideshow",
    "mk_gallery",
    "mk_highlight",
    "mk_icon_box",
    "mk_icon_box_gradient",
    "mk_icon_box2",
    "mk_image",
    "mk_image_slideshow",
    "mk_image_switch",
    "mk_imagebox",
    "mk_imagebox_item",
    "mk_laptop_slideshow",
    "mk_layerslider",
    "mk_lcd_slideshow",
    "mk_message_box",
    "mk_milestone",
    "mk_mini_callout",
    "mk_moving_image",
    "mk_news",
    "mk_news_tab",
    "mk_ornamental_title",
    "mk_padding_divider",
    "mk_page_section",
    "mk_page_title_box",
    "mk_photo_album",
    "mk_photo_roller",
    "mk_portfolio",
    "mk_portfolio_carousel",
    "mk_pricing_table",
    "mk_pricing_table_2",
    "mk_revslider",
    "mk_skill_meter",
    "mk_skill_meter_chart",
    "mk_slideshow_box",
    "mk_social_networks",
    "mk_steps",
    "mk_subscribe",
    "mk_swipe_slideshow",
    "mk_tab_slider",
    "mk_table",
    "mk_testimonials",
    "mk_theatre_slider",
    "mk_title_box",
    "mk_toggle",
    "mk_tooltip",
    "mk_woocommerce_recent_carousel",
)

KNOWN_TAG_SET: frozenset[str] = frozenset(KNOWN_TAGS)


def is_known_tag(tag: str) -> bool:
    """Return True when ``tag`` belongs to the catalog."""
    return tag in KNOWN_TAG_SET


__all__ = ["KNOWN_TAGS", "KNOWN_TAG_SET", "is_known_tag"]
