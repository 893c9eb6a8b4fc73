"""Raster transforms and a unified entry-point for applying them.

Exported API
------------
- apply_transform(image_array, method, **params)

Supported methods
-----------------
- "zero-red"  : force the red channel to 0
- "grayscale" : truncated mean of r, g, b in all three channels
- "invert"    : 255 - c for every channel
- "mirror"    : reflect one half onto the other (needs ``direction``)
- "rotate"    : 90 degree rotation of a square image (needs ``direction``)
- "repeat"    : tile copies along one axis (needs ``n`` and ``direction``)
- "zoom"      : bilinear scaling (needs ``factor``)

Implementation notes
--------------------
All transforms operate on NumPy arrays of shape (H, W, 3) or (H, W, 4) and
return a newly allocated (H', W', 3) uint8 array. Inputs are never modified.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from ..errors import InvalidParameterError
from .color import grayscale, invert, zero_red
from .geometry import mirror, rotate
from .tiling import repeat
from .zoom import zoom

Array = np.ndarray

TRANSFORM_METHODS = [
    "zero-red",
    "grayscale",
    "invert",
    "mirror",
    "rotate",
    "repeat",
    "zoom",
]


def _require(params: dict[str, Any], name: str, method: str) -> Any:
    if params.get(name) is None:
        raise InvalidParameterError(f"{method} requires a '{name}' parameter")
    return params[name]


def apply_transform(image_array: Array, method: str, **params: Any) -> Array:
    """Apply the named transform to an image array.

    Parameters
    ----------
    image_array : np.ndarray
        RGB(A) image array of shape (H, W, 3) or (H, W, 4).
    method : str
        One of ``TRANSFORM_METHODS``. Case-insensitive; underscores are
        accepted in place of hyphens.
    **params
        ``direction`` for mirror/rotate/repeat, ``n`` for repeat and
        ``factor`` for zoom. Unused parameters are ignored.

    Returns
    -------
    np.ndarray
        Transformed image array, dtype=uint8.
    """
    m = method.lower().replace("_", "-")
    if m == "zero-red":
        return zero_red(image_array)
    if m == "grayscale":
        return grayscale(image_array)
    if m == "invert":
        return invert(image_array)
    if m == "mirror":
        return mirror(image_array, _require(params, "direction", m))
    if m == "rotate":
        return rotate(image_array, _require(params, "direction", m))
    if m == "repeat":
        return repeat(image_array, _require(params, "n", m), _require(params, "direction", m))
    if m == "zoom":
        return zoom(image_array, _require(params, "factor", m))

    raise InvalidParameterError(f"Unknown transform method: {method}")


__all__ = [
    "TRANSFORM_METHODS",
    "apply_transform",
    "zero_red",
    "grayscale",
    "invert",
    "mirror",
    "rotate",
    "repeat",
    "zoom",
]
