# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Strided pixel sampling over a flat RGBA8 buffer.

Only every ``stride``-th pixel is examined. Pixels that are mostly
transparent, or whose bytes fall outside a truncated buffer, are dropped.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

from huepick.schema import DEFAULT_ALPHA_THRESHOLD, DEFAULT_PIXEL_STRIDE

Buffer = Union[bytes, bytearray, memoryview, NDArray[np.uint8]]

BYTES_PER_PIXEL = 4


def as_uint8(buffer: Buffer) -> NDArray[np.uint8]:
    """View any supported buffer as a flat uint8 array."""
    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {buffer.dtype}")
        return buffer.reshape(-1)
    return np.frombuffer(buffer, dtype=np.uint8)


def sample_positions(
    width: int,
    height: int,
    stride: int = DEFAULT_PIXEL_STRIDE,
) -> NDArray[np.int64]:
    """
    Pixel indices visited for a ``width`` x ``height`` canvas.

    Returns ``ceil(width * height / stride)`` indices: 0, stride, 2*stride, ...
    """
    return np.arange(0, max(0, width * height), stride, dtype=np.int64)


def sample_pixels(
    buffer: Buffer,
    width: int,
    height: int,
    stride: int = DEFAULT_PIXEL_STRIDE,
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
) -> NDArray[np.int64]:
    """
    Collect the RGB values of visited, sufficiently opaque pixels.

    Args:
        buffer: Row-major RGBA8 data, nominally ``4 * width * height`` bytes.
            Shorter buffers are tolerated; missing pixels are skipped.
        width: Canvas width in pixels
        height: Canvas height in pixels
        stride: Pixel step between visited positions
        alpha_threshold: Minimum alpha for a pixel to be kept

    Returns:
        Array of shape (N, 3) with RGB values, in scan order
    """
    data = as_uint8(buffer)

    # Bounds check: all 4 bytes of the pixel must be present. A pixel
    # missing only its alpha byte is dropped too, its opacity is unknown.
    available = len(data) // BYTES_PER_PIXEL
    last = min(max(0, width * height), available)
    positions = np.arange(0, last, stride, dtype=np.int64)
    if len(positions) == 0:
        return np.empty((0, 3), dtype=np.int64)

    rgba = data[: available * BYTES_PER_PIXEL].reshape(-1, BYTES_PER_PIXEL)
    visited = rgba[positions]

    opaque = visited[:, 3] >= alpha_threshold
    return visited[opaque, :3].astype(np.int64)
