#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/options/base.py
"""Base classes for conversion options.

Options are frozen dataclasses. Field metadata (``help``, ``choices``,
``importance``, ``cli_name``) drives the generated command-line flags and
configuration-file validation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from shortcode2blocks.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseConversionOptions(CloneFrozenMixin):
    """Base class for options consumed by the block builder.

    Notes
    -----
    Subclasses define their settings as frozen dataclass fields and validate
    them in ``__post_init__``.

    """

    @classmethod
    def field_names(cls) -> list[str]:
        """Names of all option fields, in declaration order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a plain mapping (e.g., a loaded config section).

        Keys may use hyphens or underscores.

        Raises
        ------
        ValidationError
            If the mapping holds an unknown key or a value fails validation

        """
        known = set(cls.field_names())
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ValidationError(
                    f"Unknown option '{key}' for {cls.__name__}",
                    parameter_name=str(key),
                    parameter_value=value,
                )
            kwargs[name] = value

        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e), parameter_value=values, original_error=e) from e

    def to_dict(self) -> dict[str, Any]:
        """Return the option values as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __post_init__(self) -> None:
        """Hook for subclass validation."""
        pass


__all__ = ["CloneFrozenMixin", "BaseConversionOptions"]
