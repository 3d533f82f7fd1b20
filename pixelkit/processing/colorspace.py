"""
RGB <-> HSV colorspace conversion.

Both conversions work in place on a 3-channel image and only reinterpret the
channels: after rgb_to_hsv() channels 0, 1, 2 hold hue, saturation and value,
all in [0, 1] for [0, 1] input. The Image type does not record which
colorspace it is in; callers track that themselves.

References:
    https://en.wikipedia.org/wiki/HSL_and_HSV#Hue_and_chroma
    https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pixelkit.core import get_logger
from pixelkit.processing.image import Image
from pixelkit.processing.pixels import get_pixel, set_pixel
from pixelkit.processing.transforms import spatial_grid

logger = get_logger(__name__)


def three_way_max(a: ArrayLike, b: ArrayLike, c: ArrayLike) -> NDArray:
    """Element-wise maximum of three values or arrays."""
    return np.maximum(np.maximum(a, b), c)


def three_way_min(a: ArrayLike, b: ArrayLike, c: ArrayLike) -> NDArray:
    """Element-wise minimum of three values or arrays."""
    return np.minimum(np.minimum(a, b), c)


def _require_three_channels(im: Image) -> None:
    if im.c != 3:
        raise ValueError(f"Expected 3 channels, got {im.c}")


def rgb_to_hsv(im: Image) -> None:
    """
    Convert an image from RGB to HSV, in place.

    Value is the largest component and saturation is the chroma
    (max - min) relative to value. Hue is picked from the hexagon sector of
    whichever component is the maximum and normalized to [0, 1).

    Pure black (value == 0) gets saturation 0 and achromatic pixels
    (max == min) get hue 0; neither case divides by zero.

    Raises:
        ValueError: If the image does not have exactly 3 channels
    """
    _require_three_channels(im)
    if im.size == 0:
        return

    xs, ys = spatial_grid(im)
    red = get_pixel(im, xs, ys, 0).astype(np.float64)
    green = get_pixel(im, xs, ys, 1).astype(np.float64)
    blue = get_pixel(im, xs, ys, 2).astype(np.float64)

    value = three_way_max(red, green, blue)
    diff = value - three_way_min(red, green, blue)

    saturation = np.zeros_like(value)
    np.divide(diff, value, out=saturation, where=value > 0)

    # Substitute 1 for zero chroma so the sector formulas stay finite; those
    # pixels are masked back to hue 0 below.
    chromatic = diff != 0
    safe_diff = np.where(chromatic, diff, 1.0)

    hue = np.select(
        [value == red, value == green],
        [(green - blue) / safe_diff, (blue - red) / safe_diff + 2.0],
        default=(red - green) / safe_diff + 4.0,
    )
    hue = np.where(hue < 0, hue / 6.0 + 1.0, hue / 6.0)
    hue = np.where(chromatic, hue, 0.0)

    set_pixel(im, xs, ys, 0, hue)
    set_pixel(im, xs, ys, 1, saturation)
    set_pixel(im, xs, ys, 2, value)

    logger.debug("Converted RGB to HSV", extra={"width": im.w, "height": im.h})


def hsv_to_rgb(im: Image) -> None:
    """
    Convert an image from HSV back to RGB, in place.

    With chroma C = V * S and H' = 6 * H, the point (R, G, B) on the bottom
    faces of the RGB cube is chosen by the sector of H' and then lifted by
    m = V - C. A hue outside [0, 1] maps to the gray level m.

    Raises:
        ValueError: If the image does not have exactly 3 channels
    """
    _require_three_channels(im)
    if im.size == 0:
        return

    xs, ys = spatial_grid(im)
    hue = get_pixel(im, xs, ys, 0).astype(np.float64)
    saturation = get_pixel(im, xs, ys, 1).astype(np.float64)
    value = get_pixel(im, xs, ys, 2).astype(np.float64)

    chroma = value * saturation
    h6 = hue * 6.0
    x = chroma * (1.0 - np.abs(np.fmod(h6, 2.0) - 1.0))
    m = value - chroma
    zero = np.zeros_like(chroma)

    # Closed intervals; on a shared boundary the lower sector wins
    sectors = [(k <= h6) & (h6 <= k + 1) for k in range(6)]

    red = np.select(sectors, [chroma, x, zero, zero, x, chroma], default=0.0)
    green = np.select(sectors, [x, chroma, chroma, x, zero, zero], default=0.0)
    blue = np.select(sectors, [zero, zero, x, chroma, chroma, x], default=0.0)

    set_pixel(im, xs, ys, 0, red + m)
    set_pixel(im, xs, ys, 1, green + m)
    set_pixel(im, xs, ys, 2, blue + m)

    logger.debug("Converted HSV to RGB", extra={"width": im.w, "height": im.h})
