"""
Image resampling: nearest-neighbor and bilinear interpolation.

resize() is written once and parameterized over a sampling function with the
signature ``sample_fn(im, x, y, c)``. Destination pixel centers are mapped
back onto the source grid with half-pixel alignment:

    ratio = src_size / dst_size
    src = ratio * dst + (-0.5 + 0.5 * ratio)

so pixel centers (not grid corners) line up. Samplers read through
get_pixel(), whose clamp-to-edge policy covers coordinates that fall just
outside the source.
"""

from enum import Enum
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pixelkit.core import get_logger, settings
from pixelkit.processing.image import Image, make_image
from pixelkit.processing.pixels import Coord, get_pixel, set_pixel

logger = get_logger(__name__)

Sample = float | NDArray[np.float32]
SampleFn = Callable[[Image, ArrayLike, ArrayLike, Coord], Sample]


def round_half_away(x: ArrayLike) -> NDArray[np.intp]:
    """Round to the nearest integer, ties away from zero (C ``round``)."""
    x = np.asarray(x, dtype=np.float64)
    return (np.sign(x) * np.floor(np.abs(x) + 0.5)).astype(np.intp)


def nn_interpolate(im: Image, x: ArrayLike, y: ArrayLike, c: Coord) -> Sample:
    """
    Sample the nearest source pixel to real-valued (x, y).

    Example:
        >>> im = from_array(np.array([[0.0, 1.0]]))
        >>> nn_interpolate(im, 0.5, 0.0, 0)
        1.0
    """
    return get_pixel(im, round_half_away(x), round_half_away(y), c)


def bilinear_interpolate(im: Image, x: ArrayLike, y: ArrayLike, c: Coord) -> Sample:
    """
    Blend the four source pixels surrounding real-valued (x, y).

    The corners are (left, top), (right, top), (left, bottom) and
    (right, bottom) with left = floor(x), right = left + 1 and likewise for
    rows. Rows are blended first, then columns. At an integer coordinate the
    far corner's weight is exactly zero, so the stored sample comes back
    unchanged.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    left = np.floor(x)
    top = np.floor(y)
    dx = x - left
    dy = y - top

    left = left.astype(np.intp)
    top = top.astype(np.intp)
    right = left + 1
    bottom = top + 1

    v1 = get_pixel(im, left, top, c)
    v2 = get_pixel(im, right, top, c)
    v3 = get_pixel(im, left, bottom, c)
    v4 = get_pixel(im, right, bottom, c)

    q1 = (1.0 - dy) * v1 + dy * v3
    q2 = (1.0 - dy) * v2 + dy * v4
    q = dx * q2 + (1.0 - dx) * q1

    if np.ndim(q) == 0:
        return float(q)
    return q.astype(np.float32)


# Aliases naming the samplers by strategy
nearest_neighbor_sample = nn_interpolate
bilinear_sample = bilinear_interpolate


def source_coordinates(src_size: int, dst_size: int) -> NDArray[np.float64]:
    """
    Map each destination index 0..dst_size-1 onto the source axis.

    Example:
        >>> source_coordinates(2, 4)
        array([-0.25,  0.25,  0.75,  1.25])
    """
    ratio = src_size / dst_size
    return ratio * np.arange(dst_size, dtype=np.float64) + (-0.5 + 0.5 * ratio)


def resize(im: Image, w: int, h: int, sample_fn: SampleFn) -> Image:
    """
    Resize an image to (w, h) using the given sampling function.

    Args:
        im: Source image (not modified)
        w: Destination width (> 0)
        h: Destination height (> 0)
        sample_fn: Sampler called as sample_fn(im, x, y, channel) with
            arrays of real-valued source coordinates

    Returns:
        Image: Newly allocated (w, h, im.c) image

    Raises:
        ValueError: If w or h is not positive or the source has zero width
            or height
    """
    if w <= 0 or h <= 0:
        raise ValueError(f"Target size must be positive, got {(w, h)}")
    if im.w == 0 or im.h == 0:
        raise ValueError(f"Cannot resize an empty image {im.shape}")

    resized = make_image(w, h, im.c)

    xs = source_coordinates(im.w, w)
    ys = source_coordinates(im.h, h)
    src_x, src_y = np.meshgrid(xs, ys)
    rows, cols = np.indices((h, w), dtype=np.intp)

    for channel in range(im.c):
        set_pixel(resized, cols, rows, channel, sample_fn(im, src_x, src_y, channel))

    logger.debug(
        "Resized image",
        extra={
            "source_size": (im.w, im.h),
            "target_size": (w, h),
            "channels": im.c,
            "sampler": getattr(sample_fn, "__name__", repr(sample_fn)),
        },
    )
    return resized


def nn_resize(im: Image, w: int, h: int) -> Image:
    """Resize with nearest-neighbor sampling."""
    return resize(im, w, h, nn_interpolate)


def bilinear_resize(im: Image, w: int, h: int) -> Image:
    """Resize with bilinear sampling."""
    return resize(im, w, h, bilinear_interpolate)


class ResampleMethod(str, Enum):
    """Named sampling strategies accepted by resize_image()."""

    NEAREST = "nearest"
    BILINEAR = "bilinear"

    @property
    def sampler(self) -> SampleFn:
        return _SAMPLERS[self]


_SAMPLERS: dict[ResampleMethod, SampleFn] = {
    ResampleMethod.NEAREST: nn_interpolate,
    ResampleMethod.BILINEAR: bilinear_interpolate,
}


def resize_image(
    im: Image, w: int, h: int, method: ResampleMethod | str | None = None
) -> Image:
    """
    Resize using a sampler chosen by name.

    Args:
        im: Source image
        w: Destination width
        h: Destination height
        method: "nearest" or "bilinear"; defaults to settings.default_resample

    Raises:
        ValueError: If the method name is unknown
    """
    method = ResampleMethod(method or settings.default_resample)
    return resize(im, w, h, method.sampler)
