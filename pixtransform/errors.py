"""Exception types raised by the raster transforms.

Every error derives from ``ValueError`` so callers that only guard against
bad values keep working.
"""
from __future__ import annotations


class TransformError(ValueError):
    """Base class for transform precondition failures."""


class InvalidDimensionError(TransformError):
    """The input raster has zero width or zero height."""


class InvalidParameterError(TransformError):
    """A count, factor, direction or method argument is out of range."""


class OutOfBoundsSourceError(TransformError):
    """A computed source coordinate falls outside the input raster."""


__all__ = [
    "TransformError",
    "InvalidDimensionError",
    "InvalidParameterError",
    "OutOfBoundsSourceError",
]
