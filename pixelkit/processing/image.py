"""
Planar float image container and in-memory buffer interop.

An Image owns a flat ``float32`` buffer of ``w * h * c`` samples laid out
channel-major: the linear offset of ``(x, y, c)`` is ``c*w*h + y*w + x``.
The helpers at the bottom convert between this layout and the interleaved
``(H, W, C)`` arrays used by NumPy and Pillow collaborators.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from PIL import Image as PILImage

from pixelkit.core import get_logger

logger = get_logger(__name__)


@dataclass(eq=False)
class Image:
    """
    Planar float image.

    Attributes:
        w: Width in pixels (>= 0)
        h: Height in pixels (>= 0)
        c: Number of channels (>= 0)
        data: Flat float32 buffer of exactly w*h*c samples

    Raises:
        ValueError: If a dimension is negative or the buffer does not hold
            exactly w*h*c samples
    """

    w: int
    h: int
    c: int
    data: NDArray[np.float32] = field(repr=False)

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0 or self.c < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {(self.w, self.h, self.c)}")

        self.data = np.asarray(self.data, dtype=np.float32)
        if self.data.ndim != 1:
            raise ValueError(f"Expected 1D buffer, got shape {self.data.shape}")
        if self.data.size != self.w * self.h * self.c:
            raise ValueError(
                f"Buffer holds {self.data.size} samples, expected {self.w * self.h * self.c}"
            )

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    @property
    def channels(self) -> int:
        return self.c

    @property
    def shape(self) -> tuple[int, int, int]:
        """Planar shape (c, h, w) of the buffer."""
        return (self.c, self.h, self.w)

    @property
    def size(self) -> int:
        """Total number of samples."""
        return self.data.size


def make_image(w: int, h: int, c: int) -> Image:
    """
    Allocate a zero-filled image.

    Args:
        w: Width in pixels
        h: Height in pixels
        c: Number of channels

    Returns:
        Image: New image whose buffer holds w*h*c zeros
    """
    if w < 0 or h < 0 or c < 0:
        raise ValueError(f"Image dimensions must be non-negative, got {(w, h, c)}")
    return Image(w, h, c, np.zeros(w * h * c, dtype=np.float32))


def from_array(array: NDArray) -> Image:
    """
    Build an Image from an interleaved (H, W) or (H, W, C) array.

    Values are converted to float32 as-is; no normalization is applied.

    Example:
        >>> im = from_array(np.zeros((2, 3, 3)))
        >>> (im.w, im.h, im.c)
        (3, 2, 3)
    """
    array = np.asarray(array)
    if array.ndim == 2:
        array = array[:, :, np.newaxis]
    if array.ndim != 3:
        raise ValueError(f"Expected 2D or 3D array, got shape {array.shape}")

    h, w, c = array.shape
    # (H, W, C) -> (C, H, W) puts the channel on the slowest axis
    # Always copy: the Image must not share the caller's array
    planar = np.array(np.transpose(array, (2, 0, 1)), dtype=np.float32, order="C", copy=True)
    return Image(w, h, c, planar.reshape(-1))


def to_array(im: Image) -> NDArray[np.float32]:
    """
    Return an interleaved (H, W, C) copy of the image buffer.

    Example:
        >>> to_array(make_image(3, 2, 1)).shape
        (2, 3, 1)
    """
    planar = im.data.reshape(im.c, im.h, im.w)
    # Single-channel transposes are already contiguous, so copy explicitly
    return np.transpose(planar, (1, 2, 0)).copy()


def from_pil(pil_image: PILImage.Image) -> Image:
    """
    Convert a Pillow image to a normalized [0, 1] float Image.

    "L" images become single-channel, "RGB" images three-channel. Any other
    mode is converted to "RGB" first (alpha is dropped).
    """
    if pil_image.mode not in ("L", "RGB"):
        logger.debug("Converting PIL image to RGB", extra={"source_mode": pil_image.mode})
        pil_image = pil_image.convert("RGB")

    array = np.asarray(pil_image, dtype=np.float32) / 255.0
    return from_array(array)


def to_pil(im: Image) -> PILImage.Image:
    """
    Convert a 1- or 3-channel Image to an 8-bit Pillow image.

    Samples are clipped to [0, 1] on a copy before scaling; the source
    image is not modified.

    Raises:
        ValueError: If the image has a channel count other than 1 or 3
    """
    if im.c not in (1, 3):
        raise ValueError(f"Expected 1 or 3 channels, got {im.c}")

    array = np.clip(to_array(im), 0.0, 1.0)
    array = np.rint(array * 255.0).astype(np.uint8)
    # Pillow infers "L" from 2D uint8 and "RGB" from (H, W, 3) uint8
    if im.c == 1:
        return PILImage.fromarray(array[:, :, 0])
    return PILImage.fromarray(array)
