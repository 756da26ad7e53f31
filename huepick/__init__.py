# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Huepick -- Dominant color extraction from raster images.

Samples a decoded RGBA buffer, buckets colors on a coarse grid and
returns the most frequent buckets as hex strings.

Quick start::

    from huepick import extract, extract_image

    extract(rgba_bytes, width, height).colors   # ('#64a0c8', ...)
    extract_image("photo.png").dominant         # '#64a0c8'
"""

from __future__ import annotations

__version__ = "1.0.0"

from huepick.measure import extract, extract_image
from huepick.schema import (
    ColorBucket,
    ExtractionConfig,
    ExtractionResult,
)

__all__ = [
    # Core API
    "extract",
    "extract_image",
    # Types
    "ExtractionConfig",
    "ExtractionResult",
    "ColorBucket",
    # Version
    "__version__",
]
