# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Main extraction API.

This is the primary entry point for Huepick's measurement core. It works
on already-decoded RGBA8 buffers and performs no I/O.
"""

from __future__ import annotations

import logging
from typing import Optional

from huepick.schema import (
    DEFAULT_ALPHA_THRESHOLD,
    DEFAULT_MAX_DIMENSION,
    DEFAULT_PIXEL_STRIDE,
    DEFAULT_QUANT_STEP,
    DEFAULT_TOP_K,
    ExtractionConfig,
    ExtractionResult,
)
from huepick.measure.downscale import resample, target_size
from huepick.measure.sampler import BYTES_PER_PIXEL, Buffer, as_uint8, sample_pixels
from huepick.measure.quantize import count_buckets
from huepick.measure.rank import rank_buckets
from huepick.measure.encode import encode_buckets

logger = logging.getLogger(__name__)


def extract(
    buffer: Buffer,
    width: int,
    height: int,
    *,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    pixel_stride: int = DEFAULT_PIXEL_STRIDE,
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD,
    quant_step: int = DEFAULT_QUANT_STEP,
    top_k: int = DEFAULT_TOP_K,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Extract the dominant colors of a decoded image.

    Pipeline: resize to the analysis canvas, sample every ``pixel_stride``-th
    pixel, bucket by quantized color, rank by count, encode as hex.

    Args:
        buffer: Row-major RGBA8 pixel data (bytes-like or uint8 array),
            nominally ``4 * width * height`` bytes
        width: Image width in pixels
        height: Image height in pixels
        max_dimension: Longer side of the analysis canvas (default: 300)
        pixel_stride: Sample every Nth pixel (default: 4)
        alpha_threshold: Ignore pixels with alpha below this (default: 128)
        quant_step: Quantization step per channel (default: 20)
        top_k: Maximum number of colors returned (default: 5)
        config: Complete configuration; overrides the keyword options

    Returns:
        ExtractionResult with up to ``top_k`` lowercase ``#rrggbb`` colors,
        most frequent first. Empty for fully transparent or empty images.

    Example:
        >>> from huepick import extract
        >>> extract(bytes([100, 150, 200, 255]) * 64, 8, 8).colors
        ('#64a0c8',)
    """
    cfg = config or ExtractionConfig(
        max_dimension=max_dimension,
        pixel_stride=pixel_stride,
        alpha_threshold=alpha_threshold,
        quant_step=quant_step,
        top_k=top_k,
    )

    if width <= 0 or height <= 0:
        logger.debug("Empty image (%dx%d), nothing to extract", width, height)
        return ExtractionResult()

    data = as_uint8(buffer)
    expected = BYTES_PER_PIXEL * width * height

    # Only complete buffers can be redrawn; truncated ones are sampled
    # at their declared size and the sampler's bounds check drops the tail.
    if len(data) >= expected:
        canvas_width, canvas_height = target_size(width, height, cfg.max_dimension)
        data = resample(data[:expected], width, height, (canvas_width, canvas_height))
    else:
        logger.warning(
            "Pixel buffer truncated: %d bytes for %dx%d (expected %d)",
            len(data), width, height, expected,
        )
        canvas_width, canvas_height = width, height

    pixels = sample_pixels(
        data,
        canvas_width,
        canvas_height,
        stride=cfg.pixel_stride,
        alpha_threshold=cfg.alpha_threshold,
    )
    buckets = count_buckets(pixels, step=cfg.quant_step)
    ranked = rank_buckets(buckets, top_k=cfg.top_k)
    encoded = encode_buckets(ranked)

    logger.debug(
        "Canvas %dx%d: %d sampled pixels, %d buckets, %d colors",
        canvas_width, canvas_height, len(pixels), len(buckets), len(encoded),
    )

    return ExtractionResult(
        colors=tuple(hex_val for hex_val, _ in encoded),
        counts=tuple(count for _, count in encoded),
        sampled=len(pixels),
    )
