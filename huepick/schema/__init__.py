# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Schema definitions for dominant-color extraction.

Configuration and results are immutable (frozen dataclasses).
Buckets are the only mutable type and never outlive one extraction call.
"""

from huepick.schema.extraction import (
    DEFAULT_ALPHA_THRESHOLD,
    DEFAULT_MAX_DIMENSION,
    DEFAULT_PIXEL_STRIDE,
    DEFAULT_QUANT_STEP,
    DEFAULT_TOP_K,
    ColorBucket,
    ExtractionConfig,
    ExtractionResult,
)

__all__ = [
    # Defaults
    "DEFAULT_MAX_DIMENSION",
    "DEFAULT_PIXEL_STRIDE",
    "DEFAULT_ALPHA_THRESHOLD",
    "DEFAULT_QUANT_STEP",
    "DEFAULT_TOP_K",
    # Types
    "ExtractionConfig",
    "ColorBucket",
    "ExtractionResult",
]
