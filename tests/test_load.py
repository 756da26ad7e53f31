# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Tests for image loading and extract_image()."""

import numpy as np
import pytest
from PIL import Image

from huepick import extract, extract_image
from huepick.measure.load import load_rgba


def _solid_rgb(r, g, b, height=12, width=16):
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


class TestLoadRGBA:

    def test_rgb_array_gets_opaque_alpha(self):
        pixels, height, width = load_rgba(_solid_rgb(1, 2, 3))
        assert (height, width) == (12, 16)
        assert pixels.shape == (12, 16, 4)
        assert (pixels[..., 3] == 255).all()

    def test_rgba_array_passthrough(self):
        arr = np.full((4, 5, 4), [1, 2, 3, 4], dtype=np.uint8)
        pixels, height, width = load_rgba(arr)
        assert (height, width) == (4, 5)
        np.testing.assert_array_equal(pixels, arr)

    def test_pil_image_converted(self):
        img = Image.new("RGB", (6, 3), (10, 20, 30))
        pixels, height, width = load_rgba(img)
        assert (height, width) == (3, 6)
        assert pixels[0, 0].tolist() == [10, 20, 30, 255]

    def test_file_path(self, tmp_path):
        path = tmp_path / "swatch.png"
        Image.new("RGBA", (5, 7), (1, 2, 3, 200)).save(path)
        pixels, height, width = load_rgba(str(path))
        assert (height, width) == (7, 5)
        assert pixels[0, 0].tolist() == [1, 2, 3, 200]

    def test_invalid_shape_raises(self):
        with pytest.raises(ValueError, match="Expected"):
            load_rgba(np.zeros((10, 10), dtype=np.uint8))

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Expected uint8"):
            load_rgba(np.zeros((10, 10, 4), dtype=np.float32))

    def test_invalid_type_raises(self):
        with pytest.raises(TypeError, match="Expected file path"):
            load_rgba(42)


class TestExtractImage:

    def test_matches_extract_on_buffer(self):
        rgb = _solid_rgb(100, 150, 200)
        rgba = np.concatenate([rgb, np.full((12, 16, 1), 255, dtype=np.uint8)], axis=2)
        assert extract_image(rgb) == extract(rgba.tobytes(), 16, 12)

    def test_from_file(self, tmp_path):
        path = tmp_path / "solid.png"
        Image.new("RGB", (10, 10), (100, 150, 200)).save(path)
        assert extract_image(path).colors == ("#64a0c8",)

    def test_options_forwarded(self, tmp_path):
        path = tmp_path / "half.png"
        img = Image.new("RGBA", (10, 10), (0, 255, 0, 255))
        img.paste((255, 0, 0, 255), (0, 0, 10, 3))
        img.save(path)
        assert len(extract_image(path, top_k=1)) == 1

    def test_transparent_png(self, tmp_path):
        path = tmp_path / "clear.png"
        Image.new("RGBA", (10, 10), (255, 0, 0, 0)).save(path)
        assert extract_image(path).colors == ()
