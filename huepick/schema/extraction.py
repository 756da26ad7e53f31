# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""
Extraction schema: configuration, working buckets and results.

Design principles:
- Deterministic: Same buffer + same config → same result
- Scoped: Buckets live for exactly one extraction call
- Serializable: Results are JSON-ready for palette consumers

Quantization:
    A bucket key is the triple (qr, qg, qb) produced by rounding each channel
    to the nearest multiple of the quantization step. The key doubles as the
    bucket's representative color. Keys may exceed 255 (255 rounds to 260
    with a step of 20); clamping happens only when encoding to hex.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterator, Optional


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_MAX_DIMENSION = 300
DEFAULT_PIXEL_STRIDE = 4
DEFAULT_ALPHA_THRESHOLD = 128
DEFAULT_QUANT_STEP = 20
DEFAULT_TOP_K = 5


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for one dominant-color extraction.

    Attributes:
        max_dimension: Side length bounding the analysis canvas. Images are
            scaled (up or down) so the longer side matches it.
        pixel_stride: Visit every Nth pixel of the canvas.
        alpha_threshold: Pixels with alpha below this are ignored.
        quant_step: Bucket granularity per channel (colors within ±step/2
            share a bucket).
        top_k: Maximum number of colors returned.
    """

    max_dimension: int = DEFAULT_MAX_DIMENSION
    pixel_stride: int = DEFAULT_PIXEL_STRIDE
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD
    quant_step: int = DEFAULT_QUANT_STEP
    top_k: int = DEFAULT_TOP_K

    def __post_init__(self) -> None:
        """Validate option ranges."""
        if self.max_dimension < 1:
            raise ValueError(f"max_dimension must be >= 1, got {self.max_dimension}")
        if self.pixel_stride < 1:
            raise ValueError(f"pixel_stride must be >= 1, got {self.pixel_stride}")
        # 256 is allowed: it rejects every pixel, including fully opaque ones
        if not 0 <= self.alpha_threshold <= 256:
            raise ValueError(
                f"alpha_threshold must be 0-256, got {self.alpha_threshold}"
            )
        if self.quant_step < 1:
            raise ValueError(f"quant_step must be >= 1, got {self.quant_step}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {self.top_k}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "max_dimension": self.max_dimension,
            "pixel_stride": self.pixel_stride,
            "alpha_threshold": self.alpha_threshold,
            "quant_step": self.quant_step,
            "top_k": self.top_k,
        }


# =============================================================================
# Working Types
# =============================================================================


@dataclass(slots=True)
class ColorBucket:
    """
    A group of sampled pixels that quantize to the same key.

    Mutable on purpose: the quantizer increments ``count`` for every pixel
    that lands in the bucket. Never shared across extraction calls.

    Attributes:
        key: Quantized (qr, qg, qb); channels may exceed 255
        count: Number of sampled pixels mapped to this bucket
        order: Zero-based creation index during the scan (tie-break)
    """
    key: tuple[int, int, int]
    count: int = 1
    order: int = 0

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Representative color. Always equal to the key."""
        return self.key


# =============================================================================
# Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """
    Ranked dominant colors of one image.

    Acts as a read-only sequence of hex strings, most frequent first.

    Attributes:
        colors: Lowercase ``#rrggbb`` strings, descending by frequency
        counts: Sampled pixel count behind each color (same order)
        sampled: Pixels that survived sampling (alpha and bounds checks)
    """
    colors: tuple[str, ...] = ()
    counts: tuple[int, ...] = field(default=())
    sampled: int = 0

    def __post_init__(self) -> None:
        """Validate parallel fields."""
        if self.counts and len(self.counts) != len(self.colors):
            raise ValueError(
                f"counts must match colors, got {len(self.counts)} counts "
                f"for {len(self.colors)} colors"
            )

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)

    def __getitem__(self, index):
        return self.colors[index]

    @property
    def dominant(self) -> Optional[str]:
        """The most frequent color, or None for an empty result."""
        return self.colors[0] if self.colors else None

    @property
    def weights(self) -> tuple[float, ...]:
        """Counts normalized to sum to 1.0 over the returned colors."""
        total = sum(self.counts)
        if total == 0:
            return tuple(0.0 for _ in self.counts)
        return tuple(c / total for c in self.counts)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "colors": list(self.colors),
            "counts": list(self.counts),
            "sampled": self.sampled,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ExtractionResult:
        """Deserialize from dictionary."""
        return cls(
            colors=tuple(data.get("colors", ())),
            counts=tuple(data.get("counts", ())),
            sampled=data.get("sampled", 0),
        )
