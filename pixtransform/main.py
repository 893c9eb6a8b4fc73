"""Command-line entry point for pixtransform.

This tool loads an image, applies one raster transform, and saves the
result. All processing occurs on NumPy arrays; Pillow is used only for
loading and saving.

Usage example:
    python -m pixtransform.main -i input.png -o output.png --op mirror --direction vertical
    python -m pixtransform.main -i input.png -o output.png --op repeat --count 3 --direction horizontal
    python -m pixtransform.main -i input.png -o output.png --op zoom --factor 1.5
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .errors import TransformError
from .transforms import TRANSFORM_METHODS, apply_transform
from .utils.loader import load_image, save_image

logger = logging.getLogger(__name__)

_NEEDS_DIRECTION = {"mirror", "rotate", "repeat"}


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="pixtransform",
        description=(
            "Apply a pixel-level transform (channel removal, grayscale, invert, "
            "mirror, rotate, repeat, zoom) to an image."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")
    parser.add_argument(
        "--op",
        required=True,
        choices=TRANSFORM_METHODS,
        help="Transform to apply: " + " | ".join(TRANSFORM_METHODS),
    )
    parser.add_argument(
        "--direction",
        type=str,
        default=None,
        help=(
            "Direction for mirror/repeat (horizontal | vertical) or rotate "
            "(clockwise | counter-clockwise, or cw | ccw)."
        ),
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of copies for repeat (>=1).",
    )
    parser.add_argument(
        "--factor",
        type=float,
        default=None,
        help="Scale factor for zoom (>0); values >1 enlarge, <1 shrink.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Range checks on count and factor are left to the transforms themselves.
    """
    if ns.op in _NEEDS_DIRECTION and ns.direction is None:
        raise ValueError(f"--direction is required for {ns.op}")
    if ns.op == "repeat" and ns.count is None:
        raise ValueError("--count is required for repeat")
    if ns.op == "zoom" and ns.factor is None:
        raise ValueError("--factor is required for zoom")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Returns
    -------
    int
        0 on success, 2 for argument errors, 1 when the transform rejects
        the image or parameters.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    img = load_image(args.input)
    try:
        out = apply_transform(
            img,
            args.op,
            direction=args.direction,
            n=args.count,
            factor=args.factor,
        )
    except TransformError as e:
        print(f"Transform error: {e}")
        return 1

    save_image(out, args.output)
    logger.info("wrote %s (%dx%d)", args.output, out.shape[1], out.shape[0])
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
