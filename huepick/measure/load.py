# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Image decoding for callers that do not hold a pixel buffer yet.

Turns a file path, a PIL image or a numpy array into an RGBA8 buffer and
hands it to ``extract``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from huepick.schema import ExtractionResult
from huepick.measure.extract import extract


def extract_image(
    image: Union[str, Path, NDArray[np.uint8], Any],
    **options: Any,
) -> ExtractionResult:
    """
    Decode an image and extract its dominant colors.

    Args:
        image: One of:
            - Path to image file (str or Path)
            - PIL.Image.Image in any mode (converted to RGBA)
            - NumPy array of shape (H, W, 4) or (H, W, 3) with uint8 values.
              Three-channel arrays are treated as fully opaque.
        **options: Keyword options forwarded to ``extract``

    Returns:
        ExtractionResult
    """
    pixels, height, width = load_rgba(image)
    return extract(pixels, width, height, **options)


def load_rgba(
    image: Union[str, Path, NDArray[np.uint8], Any],
) -> tuple[NDArray[np.uint8], int, int]:
    """
    Load image from file, PIL image or array as RGBA8.

    Returns:
        (pixels, height, width) where pixels has shape (H, W, 4)
    """
    if isinstance(image, np.ndarray):
        pixels = image

        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}"
            )

        if pixels.dtype != np.uint8:
            raise ValueError(
                f"Expected uint8 array, got {pixels.dtype}"
            )

        if pixels.shape[2] == 3:
            alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels, alpha], axis=2)

        pixels = np.ascontiguousarray(pixels)
        height, width = pixels.shape[:2]
        return pixels, height, width

    if isinstance(image, (str, Path)):
        with Image.open(image) as img:
            img.load()
            rgba = img.convert("RGBA")
    elif isinstance(image, Image.Image):
        rgba = image.convert("RGBA")
    else:
        raise TypeError(
            f"Expected file path, PIL image or numpy array, got {type(image)}"
        )

    pixels = np.array(rgba, dtype=np.uint8)
    height, width = pixels.shape[:2]
    return pixels, height, width
