"""
Bounds-safe pixel access.

Every other processing module reads and writes image samples through
get_pixel() and set_pixel(). Coordinates may be Python ints or NumPy integer
arrays; arrays are broadcast together and handled element-wise with exactly
the same rules as scalars, which lets callers process whole planes at once.

Boundary rules (valid indices on each axis are 0..bound-1):
- get_pixel clamps each coordinate independently: >= bound becomes
  bound - 1, negative becomes 0. Reads never fail on a non-empty image.
- set_pixel drops any write whose coordinates fall outside [0, bound).
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pixelkit.processing.image import Image

Coord = int | NDArray[np.integer]


def pixel_offset(im: Image, x: Coord, y: Coord, c: Coord) -> int | NDArray[np.intp]:
    """Planar linear offset of (x, y, c); performs no bounds handling."""
    return x + y * im.w + c * im.w * im.h


def get_pixel(im: Image, x: Coord, y: Coord, c: Coord) -> float | NDArray[np.float32]:
    """
    Read the sample at (x, y, c), clamping coordinates to the nearest edge.

    Args:
        im: Source image
        x: Column index (or array of indices)
        y: Row index (or array of indices)
        c: Channel index (or array of indices)

    Returns:
        float for scalar coordinates, float32 array of the broadcast shape
        otherwise

    Raises:
        ValueError: If the image holds no samples

    Example:
        >>> im = make_image(2, 2, 1)
        >>> set_pixel(im, 1, 1, 0, 0.5)
        >>> get_pixel(im, 7, 9, 0)
        0.5
    """
    if im.size == 0:
        raise ValueError(f"Cannot read from an empty image {im.shape}")

    x = np.clip(x, 0, im.w - 1)
    y = np.clip(y, 0, im.h - 1)
    c = np.clip(c, 0, im.c - 1)

    value = im.data[pixel_offset(im, x, y, c)]
    if np.ndim(value) == 0:
        return float(value)
    return value


def set_pixel(im: Image, x: Coord, y: Coord, c: Coord, v: ArrayLike) -> None:
    """
    Write v at (x, y, c) in place; out-of-range writes are silently dropped.

    Args:
        im: Target image (mutated)
        x: Column index (or array of indices)
        y: Row index (or array of indices)
        c: Channel index (or array of indices)
        v: Value (or array of values) broadcast against the coordinates
    """
    x, y, c, v = np.broadcast_arrays(
        np.asarray(x, dtype=np.intp),
        np.asarray(y, dtype=np.intp),
        np.asarray(c, dtype=np.intp),
        np.asarray(v, dtype=np.float32),
    )

    inside = (x >= 0) & (x < im.w) & (y >= 0) & (y < im.h) & (c >= 0) & (c < im.c)
    if not inside.any():
        return

    im.data[pixel_offset(im, x[inside], y[inside], c[inside])] = v[inside]
