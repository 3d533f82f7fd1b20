"""
Pixel-level transforms: copy, grayscale conversion, channel shift, clamp.

All transforms except copy_image() go through the pixel accessor. Shift and
clamp mutate their argument in place; copy and grayscale allocate.
"""

from typing import Final

import numpy as np
from numpy.typing import NDArray

from pixelkit.core import get_logger
from pixelkit.processing.image import Image, make_image
from pixelkit.processing.pixels import get_pixel, set_pixel

logger = get_logger(__name__)

# ITU-R BT.601 luma weights for R, G, B
LUMA_WEIGHTS: Final[tuple[float, float, float]] = (0.299, 0.587, 0.114)


def spatial_grid(im: Image) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    """Return (xs, ys) index arrays of shape (h, w) covering every pixel."""
    ys, xs = np.indices((im.h, im.w), dtype=np.intp)
    return xs, ys


def copy_image(im: Image) -> Image:
    """
    Create an independent copy of an image.

    The buffer is duplicated in bulk; mutating either image afterwards
    leaves the other untouched.
    """
    copy = make_image(im.w, im.h, im.c)
    np.copyto(copy.data, im.data)
    return copy


def rgb_to_grayscale(im: Image) -> Image:
    """
    Convert a 3-channel RGB image to single-channel luma.

    Each output pixel is Y' = 0.299 R + 0.587 G + 0.114 B. See
    https://en.wikipedia.org/wiki/Luma_(video)

    Args:
        im: RGB image

    Returns:
        Image: New single-channel image of the same width and height

    Raises:
        ValueError: If the image does not have exactly 3 channels
    """
    if im.c != 3:
        raise ValueError(f"Expected 3 channels, got {im.c}")

    gray = make_image(im.w, im.h, 1)
    if gray.size == 0:
        return gray

    xs, ys = spatial_grid(im)
    red = get_pixel(im, xs, ys, 0)
    green = get_pixel(im, xs, ys, 1)
    blue = get_pixel(im, xs, ys, 2)

    r_weight, g_weight, b_weight = LUMA_WEIGHTS
    set_pixel(gray, xs, ys, 0, red * r_weight + green * g_weight + blue * b_weight)

    logger.debug("Converted RGB to grayscale", extra={"width": im.w, "height": im.h})
    return gray


def shift_image(im: Image, c: int, v: float) -> None:
    """
    Add v to every pixel of channel c, in place.

    Results are not clamped; call clamp_image() afterwards if the values
    must stay in [0, 1]. A channel index outside the image is a no-op.
    """
    if im.w == 0 or im.h == 0 or not 0 <= c < im.c:
        return

    xs, ys = spatial_grid(im)
    set_pixel(im, xs, ys, c, get_pixel(im, xs, ys, c) + v)


# Alias
shift_channel = shift_image


def clamp_image(im: Image) -> None:
    """Clip every sample of every channel into [0, 1], in place."""
    if im.size == 0:
        return

    xs, ys = spatial_grid(im)
    for channel in range(im.c):
        values = get_pixel(im, xs, ys, channel)
        set_pixel(im, xs, ys, channel, np.clip(values, 0.0, 1.0))
