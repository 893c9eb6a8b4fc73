"""Repeat an image contiguously along one axis."""
from __future__ import annotations

import logging
import numbers
from typing import Union

import numpy as np

from ..directions import RepeatDirection, parse_direction
from ..errors import InvalidParameterError
from ..utils.raster import as_rgb

logger = logging.getLogger(__name__)

Array = np.ndarray


def repeat(arr: Array, n: int, direction: Union[RepeatDirection, str]) -> Array:
    """Tile ``n`` identical copies of the image.

    Parameters
    ----------
    arr : np.ndarray
        Input raster (H, W, 3) or (H, W, 4).
    n : int
        Number of copies (>=1).
    direction : RepeatDirection | str
        ``HORIZONTAL`` lays copies left to right, giving (H, W*n);
        ``VERTICAL`` lays them top to bottom, giving (H*n, W).

    Returns
    -------
    np.ndarray
        New uint8 raster.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameterError(f"repeat count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidParameterError(f"repeat count must be >= 1, got {n}")
    d = parse_direction(RepeatDirection, direction)
    rgb = as_rgb(arr)

    reps = (1, int(n), 1) if d is RepeatDirection.HORIZONTAL else (int(n), 1, 1)
    out = np.tile(rgb, reps)
    logger.debug("repeat(%s, n=%d): %s -> %s", d.value, n, arr.shape, out.shape)
    return out
