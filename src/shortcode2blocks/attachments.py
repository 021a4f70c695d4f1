#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/shortcode2blocks/attachments.py
"""Attachment lookup for media shortcodes.

Image shortcodes usually reference a media library entry by numeric id.
Resolving an id to a URL and alt text belongs to the content store, so the
builder only depends on the small ``AttachmentResolver`` protocol. Two
implementations are provided: one that resolves nothing, and one backed by
an in-memory mapping that can be loaded from a JSON or YAML export.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

import yaml

from shortcode2blocks.exceptions import FileError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attachment:
    """A resolved media library entry.

    Parameters
    ----------
    id : int
        Attachment id
    url : str
        Public URL of the file
    alt : str, default ""
        Alternative text
    caption : str, default ""
        Caption text

    """

    id: int
    url: str
    alt: str = ""
    caption: str = ""


@runtime_checkable
class AttachmentResolver(Protocol):
    """Look up attachments by id."""

    def resolve(self, attachment_id: int) -> Attachment | None:
        """Return the attachment, or None when it cannot be resolved."""
        ...


class NullAttachmentResolver:
    """Resolver that knows no attachments."""

    def resolve(self, attachment_id: int) -> Attachment | None:
        return None


class MappingAttachmentResolver:
    """Resolver backed by an in-memory mapping.

    Parameters
    ----------
    mapping : mapping
        Maps attachment ids (int or numeric str) to either a URL string or a
        mapping with ``url`` and optional ``alt`` and ``caption`` keys

    Examples
    --------
        >>> resolver = MappingAttachmentResolver({42: {"url": "https://example.com/a.jpg", "alt": "A"}})
        >>> resolver.resolve(42).alt
        'A'

    """

    def __init__(self, mapping: Mapping[Any, Any]):
        """Normalize the mapping into attachments."""
        self._attachments: dict[int, Attachment] = {}
        for key, value in mapping.items():
            attachment = self._coerce(key, value)
            if attachment is not None:
                self._attachments[attachment.id] = attachment

    @staticmethod
    def _coerce(key: Any, value: Any) -> Attachment | None:
        try:
            attachment_id = int(key)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Attachment id must be an integer, got {key!r}", parameter_name="id", parameter_value=key
            ) from e

        if isinstance(value, str):
            return Attachment(id=attachment_id, url=value)

        if isinstance(value, Mapping):
            url = str(value.get("url") or "")
            if not url:
                logger.debug("Attachment %d has no URL; ignoring", attachment_id)
                return None
            return Attachment(
                id=attachment_id,
                url=url,
                alt=str(value.get("alt") or ""),
                caption=str(value.get("caption") or ""),
            )

        raise ValidationError(
            f"Attachment {attachment_id} must map to a URL or an object with a 'url' key",
            parameter_name=str(attachment_id),
            parameter_value=value,
        )

    def __len__(self) -> int:
        return len(self._attachments)

    def resolve(self, attachment_id: int) -> Attachment | None:
        """Return the attachment for ``attachment_id`` if known."""
        return self._attachments.get(attachment_id)

    @classmethod
    def from_file(cls, path: str | Path) -> MappingAttachmentResolver:
        """Load a resolver from a JSON or YAML file.

        Parameters
        ----------
        path : str or Path
            ``.json``, ``.yaml`` or ``.yml`` file holding the mapping

        Raises
        ------
        FileError
            If the file cannot be read, parsed, or does not hold a mapping

        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileError(f"Cannot read attachments file: {e}", file_path=str(file_path), original_error=e) from e

        try:
            if file_path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise FileError(
                f"Invalid attachments file {file_path}: {e}", file_path=str(file_path), original_error=e
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise FileError(f"Attachments file {file_path} must contain a mapping", file_path=str(file_path))

        resolver = cls(data)
        logger.debug("Loaded %d attachments from %s", len(resolver), file_path)
        return resolver


__all__ = ["Attachment", "AttachmentResolver", "NullAttachmentResolver", "MappingAttachmentResolver"]
