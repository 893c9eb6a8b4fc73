"""Shared checks and conversions for raster arrays.

A raster is a NumPy array of shape (H, W, 3) or (H, W, 4) in RGB(A) order.
Alpha is never used by the transforms and is dropped here.
"""
from __future__ import annotations

import numpy as np

from ..errors import InvalidDimensionError

Array = np.ndarray


def as_rgb(arr: Array) -> Array:
    """Validate ``arr`` and return its RGB planes as ``uint8``.

    Parameters
    ----------
    arr : np.ndarray
        Raster of shape (H, W, 3) or (H, W, 4).

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 3), dtype=uint8. This may be a view of the
        input; callers must not write into it.

    Raises
    ------
    ValueError
        If ``arr`` is not an RGB(A) array.
    InvalidDimensionError
        If the raster has zero width or height.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError("image must be an RGB(A) array with shape (H, W, 3) or (H, W, 4)")
    H, W, _ = arr.shape
    if H == 0 or W == 0:
        raise InvalidDimensionError(f"image must have non-zero width and height, got {W}x{H}")

    rgb = arr[:, :, :3]
    if rgb.dtype != np.uint8:
        rgb = np.clip(np.rint(rgb.astype(np.float64)), 0, 255).astype(np.uint8)
    return rgb


def dimensions(arr: Array) -> tuple[int, int]:
    """Return ``(width, height)`` of a raster."""
    return arr.shape[1], arr.shape[0]
