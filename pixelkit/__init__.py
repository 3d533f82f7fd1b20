"""
pixelkit - a small image-processing kernel over planar float buffers.

Images are stored channel-major (planar) in a flat ``float32`` buffer and are
only ever read or written through the pixel accessor, which gives every
operation the same clamp-to-edge read policy and drop-on-miss write policy.
"""

from pixelkit.processing import (
    Image,
    ResampleMethod,
    bilinear_interpolate,
    bilinear_resize,
    clamp_image,
    copy_image,
    from_array,
    from_pil,
    get_pixel,
    hsv_to_rgb,
    make_image,
    nn_interpolate,
    nn_resize,
    resize,
    resize_image,
    rgb_to_grayscale,
    rgb_to_hsv,
    set_pixel,
    shift_image,
    to_array,
    to_pil,
)

__version__ = "0.1.0"

__all__ = [
    "Image",
    "make_image",
    "from_array",
    "to_array",
    "from_pil",
    "to_pil",
    "get_pixel",
    "set_pixel",
    "copy_image",
    "rgb_to_grayscale",
    "shift_image",
    "clamp_image",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "nn_interpolate",
    "bilinear_interpolate",
    "resize",
    "nn_resize",
    "bilinear_resize",
    "resize_image",
    "ResampleMethod",
]
