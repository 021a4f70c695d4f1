#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/utils/fonts.py
"""Font manifest helpers.

A font manifest maps a family name to its ordered list of variant strings.
A variant is a weight (``"700"``) optionally suffixed with ``italic``
(``"700italic"``).
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence
from urllib.parse import quote_plus

from shortcode2blocks.constants import DEFAULT_FONT_WEIGHT, GOOGLE_FONTS_CSS_URL, MAX_NUMERIC_DIGITS

logger = logging.getLogger(__name__)

ITALIC_SUFFIX = "italic"

_NAMED_WEIGHTS = {
    "thin": "100",
    "light": "300",
    "regular": "400",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "black": "900",
}


def font_variant(weight: str = DEFAULT_FONT_WEIGHT, style: str = "normal") -> str:
    """Build the variant key for a weight and style.

    Examples
    --------
    >>> font_variant("700", "italic")
    '700italic'
    >>> font_variant("400")
    '400'

    """
    weight = (weight or DEFAULT_FONT_WEIGHT).strip()
    if style and style.strip().lower() == "italic":
        return f"{weight}{ITALIC_SUFFIX}"
    return weight


def split_variant(variant: str) -> tuple[bool, str]:
    """Split a variant key into ``(italic, numeric weight)``."""
    italic = variant.endswith(ITALIC_SUFFIX)
    weight = variant[: -len(ITALIC_SUFFIX)] if italic else variant
    weight = weight.strip().lower() or DEFAULT_FONT_WEIGHT
    return italic, _NAMED_WEIGHTS.get(weight, weight)


def merge_font_manifests(target: dict[str, list[str]], source: Mapping[str, Sequence[str]]) -> dict[str, list[str]]:
    """Merge ``source`` into ``target`` in place, keeping variants unique and ordered."""
    for family, variants in source.items():
        existing = target.setdefault(family, [])
        for variant in variants:
            if variant not in existing:
                existing.append(variant)
    return target


def google_fonts_url(fonts: Mapping[str, Sequence[str]]) -> str:
    """Build a Google Fonts CSS2 URL requesting every family and variant.

    Parameters
    ----------
    fonts : mapping of str to sequence of str
        Font manifest

    Returns
    -------
    str
        Stylesheet URL, or an empty string when the manifest is empty

    Examples
    --------
    >>> google_fonts_url({"Lato": ["700", "400"]})
    'https://fonts.googleapis.com/css2?family=Lato:ital,wght@0,400;0,700&display=swap'

    """
    families: list[str] = []
    for family, variants in fonts.items():
        if not family:
            continue

        axes: set[tuple[int, int]] = set()
        for variant in variants or [DEFAULT_FONT_WEIGHT]:
            italic, weight = split_variant(variant)
            if not weight.isdecimal() or len(weight) > MAX_NUMERIC_DIGITS:
                logger.debug("Skipping invalid font weight %r for %s", variant, family)
                continue
            axes.add((1 if italic else 0, int(weight)))

        if not axes:
            axes.add((0, int(DEFAULT_FONT_WEIGHT)))

        tuples = ";".join(f"{ital},{weight}" for ital, weight in sorted(axes))
        families.append(f"family={quote_plus(family)}:ital,wght@{tuples}")

    if not families:
        return ""

    return f"{GOOGLE_FONTS_CSS_URL}?{'&'.join(families)}&display=swap"


__all__ = ["font_variant", "split_variant", "merge_font_manifests", "google_fonts_url"]
