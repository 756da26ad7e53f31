# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Analysis canvas sizing and resampling.

Every image is redrawn onto a canvas whose longer side equals
``max_dimension`` before sampling. Small images are scaled UP as well,
which keeps the number of sampled pixels roughly constant across inputs.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from huepick.schema import DEFAULT_MAX_DIMENSION
from huepick.measure.sampler import Buffer

# Shared by extraction and previews so both see the same canvas
RESAMPLE_FILTER = Image.Resampling.BILINEAR


def target_size(
    width: int,
    height: int,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
) -> tuple[int, int]:
    """
    Compute the analysis canvas size for a ``width`` x ``height`` image.

    The ratio is ``min(max_dimension / width, max_dimension / height)`` and
    is not capped at 1.0.

    Returns:
        (canvas_width, canvas_height), each at least 1
    """
    ratio = min(max_dimension / width, max_dimension / height)
    return max(1, int(width * ratio)), max(1, int(height * ratio))


def to_image(buffer: Buffer, width: int, height: int) -> Image.Image:
    """Wrap a complete RGBA8 buffer as a PIL image (copies the pixel data)."""
    data = buffer.tobytes() if isinstance(buffer, np.ndarray) else bytes(buffer)
    return Image.frombuffer("RGBA", (width, height), data, "raw", "RGBA", 0, 1)


def preview(
    buffer: Buffer,
    width: int,
    height: int,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
) -> Image.Image:
    """Render the analysis canvas as an image for display."""
    img = to_image(buffer, width, height)
    size = target_size(width, height, max_dimension)
    if size == (width, height):
        return img
    return img.resize(size, RESAMPLE_FILTER)


def resample(
    buffer: Buffer,
    width: int,
    height: int,
    size: tuple[int, int],
) -> Buffer:
    """
    Resample a complete RGBA8 buffer to ``size``.

    Args:
        buffer: Row-major RGBA8 data of exactly ``4 * width * height`` bytes
        width: Source width
        height: Source height
        size: Target (width, height)

    Returns:
        The resampled RGBA8 bytes, or ``buffer`` itself when the size
        is unchanged
    """
    if size == (width, height):
        return buffer
    img = to_image(buffer, width, height)
    return img.resize(size, RESAMPLE_FILTER).tobytes()
