#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for shortcode2blocks conversion.

Options are frozen dataclasses; use ``create_updated`` to derive modified
copies.
"""

from shortcode2blocks.options.base import BaseConversionOptions, CloneFrozenMixin
from shortcode2blocks.options.conversion import ConversionOptions

__all__ = ["BaseConversionOptions", "CloneFrozenMixin", "ConversionOptions"]
