"""
Unit tests for copy, grayscale, shift and clamp transforms.
"""

import numpy as np
import pytest

from pixelkit.processing.image import from_array, make_image, to_array
from pixelkit.processing.pixels import get_pixel, set_pixel
from pixelkit.processing.transforms import (
    LUMA_WEIGHTS,
    clamp_image,
    copy_image,
    rgb_to_grayscale,
    shift_channel,
    shift_image,
)


@pytest.fixture
def rgb():
    """Deterministic 5×4 RGB image with values in [0, 1]."""
    rng = np.random.default_rng(1234)
    return from_array(rng.random((4, 5, 3)))


class TestCopyImage:
    """Copies are equal and independent."""

    def test_values_equal(self, rgb):
        copy = copy_image(rgb)

        assert (copy.w, copy.h, copy.c) == (rgb.w, rgb.h, rgb.c)
        np.testing.assert_array_equal(copy.data, rgb.data)

    def test_mutating_copy_leaves_source(self, rgb):
        before = rgb.data.copy()
        copy = copy_image(rgb)
        set_pixel(copy, 0, 0, 0, 42.0)

        np.testing.assert_array_equal(rgb.data, before)
        assert get_pixel(copy, 0, 0, 0) == 42.0

    def test_mutating_source_leaves_copy(self, rgb):
        copy = copy_image(rgb)
        set_pixel(rgb, 4, 3, 2, -1.0)

        assert get_pixel(copy, 4, 3, 2) != -1.0

    def test_copy_empty(self):
        copy = copy_image(make_image(0, 0, 3))
        assert copy.size == 0


class TestRgbToGrayscale:
    """Luma conversion."""

    def test_weights_sum_to_one(self):
        assert sum(LUMA_WEIGHTS) == pytest.approx(1.0)

    def test_shape(self, rgb):
        gray = rgb_to_grayscale(rgb)
        assert (gray.w, gray.h, gray.c) == (5, 4, 1)

    @pytest.mark.parametrize("k", [0.0, 0.25, 0.5, 1.0])
    def test_uniform_gray_preserved(self, k):
        im = from_array(np.full((3, 3, 3), k))
        gray = rgb_to_grayscale(im)

        np.testing.assert_allclose(gray.data, k, atol=1e-6)

    def test_primary_colors(self):
        array = np.zeros((1, 3, 3))
        array[0, 0, 0] = 1.0
        array[0, 1, 1] = 1.0
        array[0, 2, 2] = 1.0
        gray = rgb_to_grayscale(from_array(array))

        np.testing.assert_allclose(gray.data, LUMA_WEIGHTS, atol=1e-6)

    def test_matches_weighted_sum(self, rgb):
        gray = rgb_to_grayscale(rgb)
        expected = to_array(rgb) @ np.array(LUMA_WEIGHTS)

        np.testing.assert_allclose(to_array(gray)[:, :, 0], expected, atol=1e-6)

    def test_source_untouched(self, rgb):
        before = rgb.data.copy()
        rgb_to_grayscale(rgb)
        np.testing.assert_array_equal(rgb.data, before)

    @pytest.mark.parametrize("channels", [1, 2, 4])
    def test_requires_three_channels(self, channels):
        with pytest.raises(ValueError, match="Expected 3 channels"):
            rgb_to_grayscale(make_image(2, 2, channels))


class TestShiftImage:
    """Additive channel shift."""

    def test_shifts_only_target_channel(self, rgb):
        before = to_array(rgb)
        shift_image(rgb, 1, 0.4)
        after = to_array(rgb)

        np.testing.assert_allclose(after[:, :, 1], before[:, :, 1] + 0.4, atol=1e-6)
        np.testing.assert_array_equal(after[:, :, 0], before[:, :, 0])
        np.testing.assert_array_equal(after[:, :, 2], before[:, :, 2])

    def test_not_clamped(self):
        im = from_array(np.full((2, 2, 3), 0.9))
        shift_image(im, 0, 0.5)

        assert get_pixel(im, 1, 1, 0) == pytest.approx(1.4)

    def test_negative_shift(self):
        im = from_array(np.full((2, 2, 3), 0.1))
        shift_image(im, 2, -0.3)

        assert get_pixel(im, 0, 0, 2) == pytest.approx(-0.2)

    def test_shift_channel_alias(self):
        im = from_array(np.zeros((2, 2, 3)))
        shift_channel(im, 0, 0.5)

        np.testing.assert_allclose(to_array(im)[:, :, 0], 0.5)

    @pytest.mark.parametrize("channel", [-1, 3, 10])
    def test_channel_out_of_range_is_noop(self, rgb, channel):
        before = rgb.data.copy()
        shift_image(rgb, channel, 0.5)
        np.testing.assert_array_equal(rgb.data, before)


class TestClampImage:
    """Clipping into the unit range."""

    def test_clips_both_sides(self):
        im = from_array(np.array([[-0.5, 0.0, 0.3, 1.0, 1.7]]))
        clamp_image(im)

        np.testing.assert_allclose(im.data, [0.0, 0.0, 0.3, 1.0, 1.0], atol=1e-7)

    def test_all_channels(self):
        im = from_array(np.random.default_rng(7).normal(0.5, 1.0, (6, 6, 3)))
        clamp_image(im)

        assert np.all(im.data >= 0.0)
        assert np.all(im.data <= 1.0)

    def test_idempotent(self):
        im = from_array(np.random.default_rng(3).normal(0.5, 1.0, (6, 6, 3)))
        clamp_image(im)
        once = im.data.copy()
        clamp_image(im)

        np.testing.assert_array_equal(im.data, once)

    def test_shift_then_clamp(self, rgb):
        shift_image(rgb, 0, 2.0)
        clamp_image(rgb)

        np.testing.assert_array_equal(to_array(rgb)[:, :, 0], 1.0)

    def test_empty_image(self):
        im = make_image(0, 0, 0)
        clamp_image(im)
        assert im.size == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
