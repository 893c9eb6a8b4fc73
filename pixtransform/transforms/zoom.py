"""Bilinear scaling by a floating-point factor.

Output pixel centers are mapped back into the source with
``src = (dst + 0.5) * (in_size / out_size) - 0.5`` and clamped to the image,
then the four surrounding source pixels are blended by their fractional
distances. A factor of 1.0 maps every center onto itself and reproduces the
input exactly.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from ..errors import InvalidParameterError
from ..utils.raster import as_rgb, dimensions

logger = logging.getLogger(__name__)

Array = np.ndarray


def _sample_axis(in_size: int, out_size: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return lower index, upper index and upper weight for each output index."""
    pos = (np.arange(out_size, dtype=np.float64) + 0.5) * (in_size / out_size) - 0.5
    pos = np.clip(pos, 0.0, in_size - 1)
    lo = np.floor(pos).astype(np.int64)
    hi = np.minimum(lo + 1, in_size - 1)
    return lo, hi, pos - lo


def zoom(arr: Array, zoom_factor: float) -> Array:
    """Scale an image by ``zoom_factor`` with bilinear interpolation.

    Parameters
    ----------
    arr : np.ndarray
        Input raster (H, W, 3) or (H, W, 4).
    zoom_factor : float
        Scale factor (>0). Values >1 enlarge, <1 shrink.

    Returns
    -------
    np.ndarray
        New uint8 raster of shape ``(int(H * f), int(W * f), 3)``.

    Raises
    ------
    InvalidParameterError
        If the factor is not a positive finite number or truncates either
        output dimension to zero.
    """
    try:
        f = float(zoom_factor)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"zoom factor must be a number, got {zoom_factor!r}") from None
    if not math.isfinite(f) or f <= 0:
        raise InvalidParameterError(f"zoom factor must be > 0, got {zoom_factor!r}")

    rgb = as_rgb(arr)
    W, H = dimensions(rgb)
    new_w = int(W * f)
    new_h = int(H * f)
    if new_w < 1 or new_h < 1:
        raise InvalidParameterError(
            f"zoom factor {f} turns {W}x{H} into an empty {new_w}x{new_h} image"
        )

    y0, y1, wy = _sample_axis(H, new_h)
    x0, x1, wx = _sample_axis(W, new_w)
    wy = wy[:, None, None]
    wx = wx[None, :, None]

    src = rgb.astype(np.float64)
    top = src[y0][:, x0] * (1.0 - wx) + src[y0][:, x1] * wx
    bottom = src[y1][:, x0] * (1.0 - wx) + src[y1][:, x1] * wx
    out = top * (1.0 - wy) + bottom * wy
    out = np.clip(np.rint(out), 0, 255).astype(np.uint8)
    logger.debug("zoom(%.3f): %s -> %s", f, arr.shape, out.shape)
    return out
