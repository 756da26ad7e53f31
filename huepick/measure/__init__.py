# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Measurement core for Huepick.

This module provides deterministic dominant-color extraction from
decoded RGBA pixel buffers.
"""

from huepick.measure.extract import extract
from huepick.measure.load import extract_image

__all__ = ["extract", "extract_image"]
