import numpy as np
import pytest


@pytest.fixture
def quad():
    """2x2 image: red, green / blue, white."""
    return np.array(
        [
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ],
        dtype=np.uint8,
    )


@pytest.fixture
def noise():
    """Random 5 wide x 4 tall RGB image with a fixed seed."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(4, 5, 3), dtype=np.uint8)


@pytest.fixture
def numbered():
    """4x4 image whose red channel holds the pixel's column and green its row."""
    ys, xs = np.indices((4, 4))
    return np.stack([xs, ys, np.zeros_like(xs)], axis=-1).astype(np.uint8)
