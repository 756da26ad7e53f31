# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Palette export serializer.

Formats extracted colors as the JSON document palette tools save and load::

    {
      "name": "My Color Palette",
      "colors": ["#64a0c8", "#ffffff"],
      "created": "2026-01-01T00:00:00.000Z"
    }
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Iterable, Optional

from huepick.measure.encode import normalize_hex
from huepick.runtime.serializers.base import SerializerFormat

DEFAULT_PALETTE_NAME = "My Color Palette"


def _iso_utc(created: datetime) -> str:
    """UTC timestamp with millisecond precision and a "Z" suffix."""
    utc = created.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _valid_colors(colors: Iterable[str]) -> list[str]:
    """Normalize colors and drop the invalid ones, keeping order."""
    normalized = (normalize_hex(c) for c in colors)
    return [c for c in normalized if c]


def to_palette_export(
    colors: Iterable[str],
    *,
    name: str = DEFAULT_PALETTE_NAME,
    created: Optional[datetime] = None,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
) -> str:
    """Serialize colors as a palette export document.

    Args:
        colors: Hex colors, e.g. an ExtractionResult. Invalid entries
            are dropped.
        name: Palette name.
        created: Creation time (default: now, UTC).
        format: JSON (compact), JSON_PRETTY (indented) or TEXT.

    Returns:
        Serialized palette.
    """
    valid = _valid_colors(colors)

    if format == SerializerFormat.TEXT:
        return "\n".join(valid)

    if created is None:
        created = datetime.now(timezone.utc)

    data = {
        "name": name,
        "colors": valid,
        "created": _iso_utc(created),
    }

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def to_text(colors: Iterable[str]) -> str:
    """One valid hex color per line."""
    return to_palette_export(colors, format=SerializerFormat.TEXT)
