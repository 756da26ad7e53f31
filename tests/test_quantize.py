# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Tests for color quantization and bucket counting."""

import numpy as np
import pytest

from huepick.measure.quantize import count_buckets, quantize, quantize_channel


class TestQuantizeChannel:

    @pytest.mark.parametrize("x, expected", [
        (0, 0),
        (9, 0),
        (10, 20),    # half rounds away from zero
        (50, 60),
        (100, 100),
        (149, 140),
        (150, 160),
        (200, 200),
    ])
    def test_step_20(self, x, expected):
        assert quantize_channel(x, 20) == expected

    def test_255_not_clamped(self):
        assert quantize_channel(255, 20) == 260

    def test_other_step(self):
        assert quantize_channel(7, 5) == 5
        assert quantize_channel(8, 5) == 10


class TestQuantize:

    def test_vectorized_matches_scalar(self):
        pixels = np.array([[100, 150, 200], [255, 9, 10]])
        result = quantize(pixels, 20)
        assert result.tolist() == [[100, 160, 200], [260, 0, 20]]

    def test_empty(self):
        assert quantize(np.empty((0, 3), dtype=np.int64)).shape == (0, 3)


class TestCountBuckets:

    def test_similar_colors_share_bucket(self):
        pixels = np.array([
            [100, 150, 200],
            [101, 151, 199],
            [0, 0, 0],
            [100, 150, 200],
        ])
        buckets = count_buckets(pixels, 20)
        assert len(buckets) == 2
        assert buckets[(100, 160, 200)].count == 3
        assert buckets[(0, 0, 0)].count == 1

    def test_creation_order(self):
        pixels = np.array([[0, 0, 0], [255, 255, 255], [0, 0, 0], [100, 100, 100]])
        buckets = count_buckets(pixels, 20)
        assert list(buckets) == [(0, 0, 0), (260, 260, 260), (100, 100, 100)]
        assert [b.order for b in buckets.values()] == [0, 1, 2]

    def test_representative_is_key(self):
        buckets = count_buckets(np.array([[255, 255, 255]]), 20)
        bucket = buckets[(260, 260, 260)]
        # Out-of-range representative is kept until encoding
        assert bucket.rgb == (260, 260, 260)

    def test_representative_independent_of_insertion(self):
        a = count_buckets(np.array([[95, 95, 95], [104, 104, 104]]), 20)
        b = count_buckets(np.array([[104, 104, 104], [95, 95, 95]]), 20)
        assert list(a) == list(b) == [(100, 100, 100)]
        assert a[(100, 100, 100)].count == b[(100, 100, 100)].count == 2

    def test_no_pixels(self):
        assert count_buckets(np.empty((0, 3), dtype=np.int64)) == {}
