import numpy as np
import pytest

from pixtransform import (
    TRANSFORM_METHODS,
    InvalidParameterError,
    MirrorDirection,
    RepeatDirection,
    RotateDirection,
    apply_transform,
    invert,
    repeat,
    rotate,
)
from pixtransform.directions import parse_direction


@pytest.mark.parametrize("method", TRANSFORM_METHODS)
def test_every_method_returns_new_uint8_image(numbered, method):
    out = apply_transform(numbered, method, direction="horizontal" if method != "rotate" else "cw", n=2, factor=1.0)
    assert out.dtype == np.uint8
    assert out.ndim == 3 and out.shape[2] == 3
    assert not np.shares_memory(out, numbered)


@pytest.mark.parametrize("method", ["zero-red", "grayscale", "invert", "mirror", "rotate"])
def test_same_size_methods_keep_dimensions(numbered, method):
    out = apply_transform(numbered, method, direction="vertical" if method == "mirror" else "ccw")
    assert out.shape == numbered.shape


def test_method_name_is_normalised(quad):
    assert np.array_equal(apply_transform(quad, "ZERO_RED"), apply_transform(quad, "zero-red"))


def test_dispatch_forwards_parameters(numbered):
    assert np.array_equal(
        apply_transform(numbered, "repeat", n=2, direction="vertical"),
        repeat(numbered, 2, RepeatDirection.VERTICAL),
    )
    assert np.array_equal(
        apply_transform(numbered, "rotate", direction="clockwise"),
        rotate(numbered, RotateDirection.CLOCKWISE),
    )
    assert np.array_equal(apply_transform(numbered, "invert"), invert(numbered))


@pytest.mark.parametrize(
    "method, params",
    [
        ("mirror", {}),
        ("rotate", {"direction": None}),
        ("repeat", {"direction": "horizontal"}),
        ("repeat", {"n": 2}),
        ("zoom", {}),
        ("blur", {}),
    ],
)
def test_missing_parameters_and_unknown_methods(quad, method, params):
    with pytest.raises(InvalidParameterError):
        apply_transform(quad, method, **params)


@pytest.mark.parametrize(
    "enum_cls, text, expected",
    [
        (MirrorDirection, "Vertical", MirrorDirection.VERTICAL),
        (MirrorDirection, "HORIZONTAL", MirrorDirection.HORIZONTAL),
        (RotateDirection, "cw", RotateDirection.CLOCKWISE),
        (RotateDirection, "CCW", RotateDirection.COUNTER_CLOCKWISE),
        (RotateDirection, "counter-clockwise", RotateDirection.COUNTER_CLOCKWISE),
        (RotateDirection, "counter_clockwise", RotateDirection.COUNTER_CLOCKWISE),
        (RepeatDirection, " vertical ", RepeatDirection.VERTICAL),
    ],
)
def test_parse_direction(enum_cls, text, expected):
    assert parse_direction(enum_cls, text) is expected


def test_parse_direction_rejects_other_enum():
    with pytest.raises(InvalidParameterError):
        parse_direction(MirrorDirection, RepeatDirection.VERTICAL)


def test_errors_are_value_errors(quad):
    with pytest.raises(ValueError):
        apply_transform(quad, "zoom", factor=-1)
