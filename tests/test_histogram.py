import numpy
import pytest

from imtoolbox import Channel, ChannelHistogram, InvalidImage, imhist


def test_solid_image_histogram(solid_image):
    hist = ChannelHistogram.build(solid_image)
    assert hist.npixels == 4
    assert hist.probability_of(Channel.R, 10) == 1.0
    assert hist.probability_at(10) == (1.0, 1.0, 1.0)
    for value in range(256):
        if value != 10:
            assert hist.probability_of(Channel.R, value) == 0.0
            assert hist.probability_at(value) == (0.0, 0.0, 0.0)


def test_channels_sum_to_one(random_image):
    hist = imhist(random_image)
    for channel in Channel:
        total = sum(hist.probability_of(channel, v) for v in range(256))
        assert total == pytest.approx(1.0, abs=1e-4)


def test_probabilities_in_range(random_image):
    hist = imhist(random_image)
    for channel in Channel:
        for value in range(256):
            assert 0.0 <= hist.probability_of(channel, value) <= 1.0


def test_counts_match_pixels(random_image):
    hist = imhist(random_image)
    for channel in Channel:
        expected = numpy.bincount(random_image[:, :, channel].ravel(), minlength=256)
        numpy.testing.assert_array_equal(hist.counts[channel], expected)


def test_alpha_is_ignored(solid_image):
    im = solid_image.copy()
    im[0, 0, 3] = 0
    hist = imhist(im)
    numpy.testing.assert_array_equal(hist.counts, imhist(solid_image).counts)


def test_cumulative_is_inclusive(random_image):
    hist = imhist(random_image)
    total = 0.0
    for value in range(256):
        total += hist.probability_of(Channel.G, value)
        assert hist.cumulative_up_to(Channel.G, value) == pytest.approx(total, abs=1e-12)
    assert hist.cumulative_up_to(Channel.G, 255) == pytest.approx(1.0)


def test_channel_can_be_int(random_image):
    hist = imhist(random_image)
    assert hist.probability_of(2, 100) == hist.probability_of(Channel.B, 100)


@pytest.mark.parametrize('shape', [(0, 5, 4), (5, 0, 3), (0, 0, 4)])
def test_empty_image(shape):
    with pytest.raises(InvalidImage):
        ChannelHistogram.build(numpy.zeros(shape, numpy.uint8))


@pytest.mark.parametrize('im', [
    numpy.zeros((4, 4), numpy.uint8),
    numpy.zeros((4, 4, 2), numpy.uint8),
    numpy.zeros((4, 4, 3), numpy.float64),
])
def test_not_an_image(im):
    with pytest.raises(ValueError):
        ChannelHistogram.build(im)


def test_histogram_is_readonly(random_image):
    hist = imhist(random_image)
    with pytest.raises(ValueError):
        hist.distributions[0, 0] = 0.5
    with pytest.raises(ValueError):
        hist.cdf[0, 0] = 0.5


def test_histogram_does_not_share_source(random_image):
    im = random_image.copy()
    hist = imhist(im)
    before = hist.distributions.copy()
    im[...] = 0
    numpy.testing.assert_array_equal(hist.distributions, before)


def test_describe(solid_image):
    text = imhist(solid_image).describe()
    assert '----------------- RED -----------------' in text
    assert '----------------- BLUE -----------------' in text
    assert text.count('10 => 1.0') == 3
    assert '<ChannelHistogram of 4 pixels>' == repr(imhist(solid_image))
