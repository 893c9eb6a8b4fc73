"""Per-pixel color transforms: red removal, grayscale and inversion.

Each pixel is decomposed into channels through the packed-pixel helpers and
recombined, so every output pixel depends only on the matching input pixel.
"""
from __future__ import annotations

import logging

import numpy as np

from ..utils.pixels import get_blue, get_green, get_red, pack_image, pack_rgb, unpack_image
from ..utils.raster import as_rgb

logger = logging.getLogger(__name__)

Array = np.ndarray


def zero_red(arr: Array) -> Array:
    """Force the red channel of every pixel to 0.

    Parameters
    ----------
    arr : np.ndarray
        Input raster (H, W, 3) or (H, W, 4).

    Returns
    -------
    np.ndarray
        New (H, W, 3) uint8 raster with green and blue copied unchanged.
    """
    packed = pack_image(as_rgb(arr))
    out = unpack_image(pack_rgb(0, get_green(packed), get_blue(packed)))
    logger.debug("zero_red: %s -> %s", arr.shape, out.shape)
    return out


def grayscale(arr: Array) -> Array:
    """Convert to gray using the truncated mean ``(r + g + b) // 3``.

    This is the plain average of the three channels, not a luminance
    weighting. The result is stored as RGB with three equal channels.
    """
    packed = pack_image(as_rgb(arr))
    avg = (get_red(packed) + get_green(packed) + get_blue(packed)) // 3
    out = unpack_image(pack_rgb(avg, avg, avg))
    logger.debug("grayscale: %s -> %s", arr.shape, out.shape)
    return out


def invert(arr: Array) -> Array:
    """Replace each channel ``c`` with ``255 - c``."""
    packed = pack_image(as_rgb(arr))
    out = unpack_image(
        pack_rgb(255 - get_red(packed), 255 - get_green(packed), 255 - get_blue(packed))
    )
    logger.debug("invert: %s -> %s", arr.shape, out.shape)
    return out
