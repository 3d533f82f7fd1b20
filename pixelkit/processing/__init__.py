"""Image processing kernel exports."""

from pixelkit.processing.colorspace import hsv_to_rgb, rgb_to_hsv, three_way_max, three_way_min
from pixelkit.processing.image import Image, from_array, from_pil, make_image, to_array, to_pil
from pixelkit.processing.pixels import get_pixel, pixel_offset, set_pixel
from pixelkit.processing.resample import (
    ResampleMethod,
    bilinear_interpolate,
    bilinear_resize,
    bilinear_sample,
    nearest_neighbor_sample,
    nn_interpolate,
    nn_resize,
    resize,
    resize_image,
    round_half_away,
    source_coordinates,
)
from pixelkit.processing.transforms import (
    LUMA_WEIGHTS,
    clamp_image,
    copy_image,
    rgb_to_grayscale,
    shift_channel,
    shift_image,
)

__all__ = [
    "Image",
    "make_image",
    "from_array",
    "to_array",
    "from_pil",
    "to_pil",
    "get_pixel",
    "set_pixel",
    "pixel_offset",
    "LUMA_WEIGHTS",
    "copy_image",
    "rgb_to_grayscale",
    "shift_image",
    "shift_channel",
    "clamp_image",
    "three_way_max",
    "three_way_min",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "round_half_away",
    "source_coordinates",
    "nn_interpolate",
    "bilinear_interpolate",
    "nearest_neighbor_sample",
    "bilinear_sample",
    "resize",
    "nn_resize",
    "bilinear_resize",
    "resize_image",
    "ResampleMethod",
]
