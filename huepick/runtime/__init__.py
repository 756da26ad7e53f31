# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Huepick.

Hands extracted colors to palette consumers:

1. Palette export -- JSON document with name, colors and timestamp
2. Plain text -- One hex color per line
"""

from huepick.runtime.serializers import (
    SerializerFormat,
    to_palette_export,
    to_text,
)

__all__ = [
    "to_palette_export",
    "to_text",
    "SerializerFormat",
]
