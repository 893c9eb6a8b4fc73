"""Packed-pixel channel helpers.

A packed pixel is an integer ``0xRRGGBB``. The accessors work on Python
ints and on NumPy integer arrays alike, so whole rasters can be decomposed
at once via :func:`pack_image`.
"""
from __future__ import annotations

import numpy as np

from ..errors import OutOfBoundsSourceError

Array = np.ndarray


def get_red(rgb):
    return (rgb >> 16) & 0xFF


def get_green(rgb):
    return (rgb >> 8) & 0xFF


def get_blue(rgb):
    return rgb & 0xFF


def pack_rgb(r, g, b):
    """Combine 8-bit channel values into ``0xRRGGBB``."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def pack_image(arr: Array) -> Array:
    """Pack an (H, W, 3) uint8 raster into an (H, W) uint32 array."""
    planes = arr.astype(np.uint32)
    return pack_rgb(planes[:, :, 0], planes[:, :, 1], planes[:, :, 2])


def unpack_image(packed: Array) -> Array:
    """Inverse of :func:`pack_image`: (H, W) packed -> (H, W, 3) uint8."""
    packed = packed.astype(np.uint32, copy=False)
    out = np.stack([get_red(packed), get_green(packed), get_blue(packed)], axis=-1)
    return out.astype(np.uint8)


def get_color_at_pos(arr: Array, x: int, y: int) -> tuple[int, int, int]:
    """Return the ``(r, g, b)`` of pixel ``(x, y)``.

    Raises
    ------
    OutOfBoundsSourceError
        If ``(x, y)`` lies outside the raster. Negative coordinates are
        rejected rather than wrapped.
    """
    H, W = arr.shape[:2]
    if not (0 <= x < W and 0 <= y < H):
        raise OutOfBoundsSourceError(f"pixel ({x}, {y}) outside {W}x{H} image")
    r, g, b = arr[y, x, :3]
    return int(r), int(g), int(b)
