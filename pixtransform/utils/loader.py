"""Pillow <-> NumPy conversion for rasters on disk.

The transforms never touch files. These helpers sit at the edge, turning an
image file into the (H, W, 3) uint8 array the transforms expect and writing
their output back out.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

Array = np.ndarray


def load_image(path: Union[str, Path]) -> Array:
    """Decode an image file into an RGB NumPy array (uint8).

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow. Palette, grayscale and RGBA
        images are converted to RGB; alpha is discarded.

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 3), dtype=uint8, in RGB order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not point to a file.
    ValueError
        If Pillow does not recognise the file as an image.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Image file not found: {p}")
    try:
        with Image.open(p) as im:
            arr = np.array(im.convert("RGB"), dtype=np.uint8)
    except UnidentifiedImageError as exc:
        raise ValueError(f"Not an image file: {p}") from exc
    logger.debug("loaded %s as %s", p, arr.shape)
    return arr


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Encode an RGB NumPy array (uint8) to a file, format from the extension.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 3), dtype=uint8, as returned by the transforms.
    path : str | Path
        Output file path.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")

    p = Path(path)
    Image.fromarray(arr).save(p)
    logger.debug("saved %s to %s", arr.shape, p)
