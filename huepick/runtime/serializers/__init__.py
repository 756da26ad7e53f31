# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Serializers for extraction results.

Each serializer formats extracted colors for a palette consumer.
Serializers only drop entries that are not valid hex colors; order is kept.
"""

from huepick.runtime.serializers.base import SerializerFormat
from huepick.runtime.serializers.palette import to_palette_export, to_text

__all__ = [
    "SerializerFormat",
    "to_palette_export",
    "to_text",
]
