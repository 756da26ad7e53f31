# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Tests for frequency ranking (ordering, stable ties, truncation)."""

from huepick.measure.rank import rank_buckets
from huepick.schema import ColorBucket


def _buckets(*counts):
    """Buckets created in argument order with the given counts."""
    return {
        (i, 0, 0): ColorBucket(key=(i, 0, 0), count=count, order=i)
        for i, count in enumerate(counts)
    }


class TestRankBuckets:

    def test_descending_by_count(self):
        ranked = rank_buckets(_buckets(1, 5, 3))
        assert [b.count for b in ranked] == [5, 3, 1]

    def test_ties_keep_creation_order(self):
        ranked = rank_buckets(_buckets(2, 7, 2, 7, 2))
        assert [b.key[0] for b in ranked] == [1, 3, 0, 2, 4]

    def test_ties_use_order_not_key(self):
        buckets = {
            (200, 0, 0): ColorBucket(key=(200, 0, 0), count=4, order=0),
            (0, 0, 0): ColorBucket(key=(0, 0, 0), count=4, order=1),
        }
        ranked = rank_buckets(buckets)
        assert [b.key for b in ranked] == [(200, 0, 0), (0, 0, 0)]

    def test_truncates_to_top_k(self):
        ranked = rank_buckets(_buckets(1, 2, 3, 4, 5, 6, 7), top_k=5)
        assert [b.count for b in ranked] == [7, 6, 5, 4, 3]

    def test_fewer_than_k(self):
        ranked = rank_buckets(_buckets(3, 1), top_k=5)
        assert len(ranked) == 2

    def test_empty(self):
        assert rank_buckets({}) == []
