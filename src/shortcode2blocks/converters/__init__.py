#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tag-family converters and their registration order.

The builder tries converters in ``DEFAULT_CONVERTERS`` order and uses the
first one that claims a tag. Tags claimed by no converter are passed
through unchanged.
"""

from __future__ import annotations

from typing import Iterable

from shortcode2blocks.catalog import KNOWN_TAG_SET
from shortcode2blocks.converters.base import BaseConverter
from shortcode2blocks.converters.button import ButtonConverter
from shortcode2blocks.converters.layout import LayoutConverter
from shortcode2blocks.converters.media import MediaConverter
from shortcode2blocks.converters.misc import MiscConverter
from shortcode2blocks.converters.separator import SeparatorConverter
from shortcode2blocks.converters.text import TextConverter
from shortcode2blocks.exceptions import ConverterRegistryError

DEFAULT_CONVERTERS: tuple[type[BaseConverter], ...] = (
    LayoutConverter,
    TextConverter,
    MediaConverter,
    ButtonConverter,
    SeparatorConverter,
    MiscConverter,
)


def validate_registry(converter_classes: Iterable[type[BaseConverter]]) -> dict[str, type[BaseConverter]]:
    """Check that converters partition part of the tag catalog.

    Parameters
    ----------
    converter_classes : iterable of BaseConverter subclasses
        Converters in registration order

    Returns
    -------
    dict of str to type
        Each claimed tag mapped to its converter class

    Raises
    ------
    ConverterRegistryError
        If a converter claims a tag outside the catalog, or two converters
        claim the same tag

    """
    owners: dict[str, type[BaseConverter]] = {}
    for converter_class in converter_classes:
        for tag in sorted(converter_class.TAGS):
            if tag not in KNOWN_TAG_SET:
                raise ConverterRegistryError(
                    f"{converter_class.__name__} claims [{tag}], which is not a known tag", tag=tag
                )
            if tag in owners:
                raise ConverterRegistryError(
                    f"[{tag}] is claimed by both {owners[tag].__name__} and {converter_class.__name__}", tag=tag
                )
            owners[tag] = converter_class
    return owners


CONVERTIBLE_TAGS: frozenset[str] = frozenset(validate_registry(DEFAULT_CONVERTERS))


def tag_tier(tag: str) -> str:
    """Return ``"convertible"`` for tags with a converter, else ``"pass-through"``."""
    return "convertible" if tag in CONVERTIBLE_TAGS else "pass-through"


__all__ = [
    "BaseConverter",
    "ButtonConverter",
    "LayoutConverter",
    "MediaConverter",
    "MiscConverter",
    "SeparatorConverter",
    "TextConverter",
    "DEFAULT_CONVERTERS",
    "CONVERTIBLE_TAGS",
    "validate_registry",
    "tag_tier",
]
