#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/context.py
"""Per-document conversion state.

A ``ConversionContext`` collects everything a conversion produces besides
the block markup itself: generated CSS rules, requested web fonts, and the
counter used to mint unique class names. One context belongs to one
document conversion and is never shared between documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from shortcode2blocks.constants import DEFAULT_FONT_STYLE, DEFAULT_FONT_WEIGHT
from shortcode2blocks.options import ConversionOptions
from shortcode2blocks.utils.fonts import font_variant, google_fonts_url

logger = logging.getLogger(__name__)


@dataclass
class CssRule:
    """A generated CSS rule.

    Parameters
    ----------
    selector : str
        CSS selector (e.g., ``.dtg-12-3:hover``)
    declarations : dict of str to str
        Property/value pairs in insertion order
    media : str, optional
        Media query condition wrapping the rule (e.g., ``(max-width: 767px)``)

    """

    selector: str
    declarations: dict[str, str] = field(default_factory=dict)
    media: str | None = None

    def render(self) -> str:
        """Render the rule as CSS text."""
        body = " ".join(f"{prop}: {value};" for prop, value in self.declarations.items())
        rule = f"{self.selector} {{ {body} }}"
        if self.media:
            return f"@media {self.media} {{ {rule} }}"
        return rule


class ConversionContext:
    """Mutable state for a single document conversion.

    Parameters
    ----------
    document_id : int, default 0
        Identifier of the document being converted; namespaces minted classes
    options : ConversionOptions, optional
        Conversion options (class prefix, responsive breakpoint)

    Attributes
    ----------
    css_rules : list of CssRule
        Generated rules in the order they were added
    fonts : dict of str to list of str
        Requested font variants per family, unique and in request order
    counter : int
        Number of classes minted so far

    """

    def __init__(self, document_id: int = 0, options: ConversionOptions | None = None):
        """Initialize an empty context."""
        self.document_id = document_id
        self.options = options or ConversionOptions()
        self.css_rules: list[CssRule] = []
        self.fonts: dict[str, list[str]] = {}
        self.counter = 0

    def next_class(self) -> str:
        """Mint a new unique class name (``<prefix>-<document_id>-<n>``), starting at 1."""
        self.counter += 1
        return f"{self.options.class_prefix}-{self.document_id}-{self.counter}"

    def add_css(self, selector: str, declarations: Mapping[str, str], media: str | None = None) -> bool:
        """Append a rule unless it has no declarations.

        Identical selectors are not merged; every call adds its own rule.
        Declarations with empty values are dropped.

        Returns
        -------
        bool
            Whether a rule was added

        """
        kept = {prop: value for prop, value in declarations.items() if value not in (None, "")}
        if not kept:
            return False
        self.css_rules.append(CssRule(selector=selector, declarations=kept, media=media))
        return True

    def add_class_css(self, class_name: str, declarations: Mapping[str, str]) -> bool:
        """Append a rule for ``.class_name``."""
        return self.add_css(f".{class_name}", declarations)

    def add_hover(self, class_name: str, declarations: Mapping[str, str]) -> bool:
        """Append a ``:hover`` rule for a minted class."""
        return self.add_css(f".{class_name}:hover", declarations)

    def add_responsive(
        self, class_name: str, declarations: Mapping[str, str], breakpoint: str | None = None
    ) -> bool:
        """Append a rule for a minted class inside a max-width media query."""
        breakpoint = breakpoint or self.options.responsive_breakpoint
        return self.add_css(f".{class_name}", declarations, media=f"(max-width: {breakpoint})")

    def add_font(self, family: str, weight: str = DEFAULT_FONT_WEIGHT, style: str = DEFAULT_FONT_STYLE) -> None:
        """Register a font family variant; repeated variants are ignored."""
        family = family.strip()
        if not family:
            return
        variant = font_variant(weight, style)
        variants = self.fonts.setdefault(family, [])
        if variant not in variants:
            logger.debug("Registering font %s variant %s", family, variant)
            variants.append(variant)

    def render_css(self) -> str:
        """Render all collected rules, one per line, in insertion order."""
        return "\n".join(rule.render() for rule in self.css_rules)

    @property
    def fonts_url(self) -> str:
        """Google Fonts stylesheet URL for the requested fonts."""
        return google_fonts_url(self.fonts)

    def reset(self, document_id: int | None = None) -> None:
        """Clear collected state, optionally switching to another document."""
        if document_id is not None:
            self.document_id = document_id
        self.css_rules = []
        self.fonts = {}
        self.counter = 0


__all__ = ["CssRule", "ConversionContext"]
