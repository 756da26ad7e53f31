# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Coarse color quantization and bucket counting.

Each channel snaps to the nearest multiple of ``step``, halves rounding
away from zero (150 -> 160 with step 20). Results are NOT clamped: a
channel of 255 becomes 260. The encoder clamps later.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from huepick.schema import ColorBucket, DEFAULT_QUANT_STEP


def quantize_channel(x: int, step: int = DEFAULT_QUANT_STEP) -> int:
    """Snap one non-negative channel value to the step grid."""
    # Integer form of floor(x / step + 0.5) * step
    return (2 * x + step) // (2 * step) * step


def quantize(
    pixels: NDArray[np.int64],
    step: int = DEFAULT_QUANT_STEP,
) -> NDArray[np.int64]:
    """
    Vectorized ``quantize_channel`` over an (N, 3) array.

    Returns:
        Array of shape (N, 3) with quantized keys
    """
    pixels = np.asarray(pixels, dtype=np.int64)
    return (2 * pixels + step) // (2 * step) * step


def count_buckets(
    pixels: NDArray[np.int64],
    step: int = DEFAULT_QUANT_STEP,
) -> dict[tuple[int, int, int], ColorBucket]:
    """
    Group pixels into buckets keyed by their quantized color.

    Buckets are created in scan order; dict insertion order is the
    creation order and ``ColorBucket.order`` records it explicitly.

    Args:
        pixels: Array of shape (N, 3) with RGB values [0-255]
        step: Quantization step

    Returns:
        Mapping of (qr, qg, qb) to ColorBucket
    """
    buckets: dict[tuple[int, int, int], ColorBucket] = {}

    for qr, qg, qb in quantize(pixels, step).tolist():
        key = (qr, qg, qb)
        bucket = buckets.get(key)
        if bucket is None:
            buckets[key] = ColorBucket(key=key, count=1, order=len(buckets))
        else:
            bucket.count += 1

    return buckets
