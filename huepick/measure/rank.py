# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Frequency ranking of color buckets."""

from __future__ import annotations

from typing import Mapping

from huepick.schema import ColorBucket, DEFAULT_TOP_K


def rank_buckets(
    buckets: Mapping[tuple[int, int, int], ColorBucket],
    top_k: int = DEFAULT_TOP_K,
) -> list[ColorBucket]:
    """
    Order buckets by count, most frequent first, and keep the top ``top_k``.

    Equal counts keep creation order (first encountered wins).

    Returns:
        Up to ``top_k`` buckets; all of them if there are fewer
    """
    ordered = sorted(buckets.values(), key=lambda b: b.order)
    ordered.sort(key=lambda b: b.count, reverse=True)
    return ordered[:top_k]
