"""Pixel-level raster transforms on NumPy arrays.

Every transform takes an (H, W, 3) or (H, W, 4) array and returns a new
(H', W', 3) uint8 array; inputs are never modified.
"""
from __future__ import annotations

from .directions import MirrorDirection, RepeatDirection, RotateDirection
from .errors import (
    InvalidDimensionError,
    InvalidParameterError,
    OutOfBoundsSourceError,
    TransformError,
)
from .transforms import (
    TRANSFORM_METHODS,
    apply_transform,
    grayscale,
    invert,
    mirror,
    repeat,
    rotate,
    zero_red,
    zoom,
)
from .utils.loader import load_image, save_image

__all__ = [
    "MirrorDirection",
    "RotateDirection",
    "RepeatDirection",
    "TransformError",
    "InvalidDimensionError",
    "InvalidParameterError",
    "OutOfBoundsSourceError",
    "TRANSFORM_METHODS",
    "apply_transform",
    "zero_red",
    "grayscale",
    "invert",
    "mirror",
    "rotate",
    "repeat",
    "zoom",
    "load_image",
    "save_image",
]
