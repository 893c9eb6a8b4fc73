import numpy as np
import pytest

from pixtransform import OutOfBoundsSourceError
from pixtransform.utils.pixels import (
    get_blue,
    get_color_at_pos,
    get_green,
    get_red,
    pack_image,
    pack_rgb,
    unpack_image,
)


def test_channel_accessors_on_int():
    rgb = pack_rgb(0x12, 0x34, 0x56)
    assert rgb == 0x123456
    assert (get_red(rgb), get_green(rgb), get_blue(rgb)) == (0x12, 0x34, 0x56)


def test_pack_image_layout(quad):
    packed = pack_image(quad)
    assert packed.shape == (2, 2)
    assert packed.tolist() == [[0xFF0000, 0x00FF00], [0x0000FF, 0xFFFFFF]]
    assert np.array_equal(unpack_image(packed), quad)


def test_get_color_at_pos_is_x_then_y(numbered):
    assert get_color_at_pos(numbered, 3, 1) == (3, 1, 0)


@pytest.mark.parametrize("x, y", [(4, 0), (0, 4), (-1, 0)])
def test_get_color_at_pos_out_of_bounds(numbered, x, y):
    with pytest.raises(OutOfBoundsSourceError):
        get_color_at_pos(numbered, x, y)
