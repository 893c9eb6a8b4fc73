"""Utility functions for pixtransform.

Modules:
- loader: Load/save Pillow <-> NumPy conversion utilities.
- pixels: Packed 0xRRGGBB channel accessors.
- raster: Input validation shared by every transform.
"""
from .loader import load_image, save_image
from .pixels import (
    get_blue,
    get_color_at_pos,
    get_green,
    get_red,
    pack_image,
    pack_rgb,
    unpack_image,
)
from .raster import as_rgb

__all__ = [
    "load_image",
    "save_image",
    "get_red",
    "get_green",
    "get_blue",
    "pack_rgb",
    "pack_image",
    "unpack_image",
    "get_color_at_pos",
    "as_rgb",
]
