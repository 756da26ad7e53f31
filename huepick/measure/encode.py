# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Hex encoding of representative colors.

Also hosts the hex validation helpers used by palette consumers.
"""

from __future__ import annotations

import re
from typing import Iterable

from huepick.schema import ColorBucket

HEX_LENGTH = 7

_HEX_RE = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")


def clamp_channel(x: float) -> int:
    """Clamp to [0, 255] and truncate to int."""
    return int(min(255, max(0, x)))


def encode_hex(rgb: tuple[int, int, int]) -> str:
    """
    Encode an RGB triple as lowercase ``#rrggbb``.

    Channels outside 0-255 (e.g. 260 from quantizing 255) are clamped.
    """
    r, g, b = (clamp_channel(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def encode_buckets(buckets: Iterable[ColorBucket]) -> list[tuple[str, int]]:
    """
    Encode ranked buckets, keeping their order.

    Any encoding that is not exactly 7 characters is dropped.

    Returns:
        List of (hex, count) pairs
    """
    encoded = []
    for bucket in buckets:
        hex_val = encode_hex(bucket.rgb)
        if len(hex_val) != HEX_LENGTH:
            continue
        encoded.append((hex_val, bucket.count))
    return encoded


def is_valid_hex(color: str) -> bool:
    """True for ``#rgb`` or ``#rrggbb``, with or without the leading ``#``."""
    hex_color = color if color.startswith("#") else f"#{color}"
    return _HEX_RE.fullmatch(hex_color) is not None


def normalize_hex(color: str) -> str:
    """
    Prefix ``#`` to a valid hex color.

    Returns:
        The normalized color, or ``""`` for empty or invalid input
    """
    if not color:
        return ""
    hex_color = color if color.startswith("#") else f"#{color}"
    return hex_color if is_valid_hex(hex_color) else ""
