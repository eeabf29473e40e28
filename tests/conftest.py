import numpy
import pytest


@pytest.fixture
def solid_image():
    """2x2 RGBA image with every pixel (10, 10, 10, 255)."""
    im = numpy.empty((2, 2, 4), numpy.uint8)
    im[...] = (10, 10, 10, 255)
    return im


@pytest.fixture
def random_image():
    rng = numpy.random.default_rng(1234)
    return rng.integers(0, 256, size=(37, 23, 4), dtype=numpy.uint8)


@pytest.fixture
def dark_image():
    """RGB image whose values are all crammed in the range 20 to 59."""
    rng = numpy.random.default_rng(42)
    return rng.integers(20, 60, size=(16, 16, 3), dtype=numpy.uint8)


@pytest.fixture
def split_image():
    """4x4 RGBA image, black on the left half (x < 2) and white on the right half."""
    im = numpy.zeros((4, 4, 4), numpy.uint8)
    im[:, 2:, :3] = 255
    im[..., 3] = 255
    return im
