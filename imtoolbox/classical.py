"""
Implements classical histogram equalization of RGB(A) images. Each color channel is remapped
through its own inclusive cumulative distribution, the alpha channel is left untouched.
"""

import logging
from math import floor

from numpy import uint8

from .histogram import Channel, ChannelHistogram
from .util import PEAK, NCOLORS, check_image, image_size, new_image, make_readonly

logger = logging.getLogger(__name__)

def histeq(im):
    """
    Equalize the histogram of an image. The histogram of the image is calculated and then every
    pixel has each of its color channels remapped independently with remap_pixel. The alpha
    channel is copied unchanged. A new image of the same dimensions is returned and the original
    image is not modified.

    Equalization spreads the intensities of the image across the full range proportionally to
    their cumulative frequency, so the values that dominate a too-bright or too-dark image are
    pulled apart. An image with no pixels raises InvalidImage.
    """
    im = check_image(im)
    return histeq_apply(im, histeq_trans(ChannelHistogram.build(im)))

equalize_image = histeq

def normalize_brightness(im):
    """Turn a very bright (or very dark) image into normal colors, this is just histeq."""
    return histeq(im)

def remap_pixel(value, channel, hist):
    """
    Remap a single value of a channel using a histogram. The new value is
        floor(255 * cdf(value))
    where cdf is the inclusive cumulative distribution of the channel. Since the distribution is
    non-decreasing and at most 1 the result is non-decreasing in value and within 0 to 255.
    """
    new_value = floor(PEAK * hist.cumulative_up_to(channel, value))
    return min(max(new_value, 0), PEAK)

def histeq_trans(hist):
    """
    Calculates the histogram equalization transform of a histogram. The transform is a read-only
    (3, 256) uint8 lookup table, one row per channel, with transform[c, v] equal to
    remap_pixel(v, c, hist). This transform can be used with histeq_apply. This allows you to
    calculate the transform just once and use it for many images.
    """
    from numpy import floor as _floor
    transform = _floor(PEAK * hist.cdf)
    transform.clip(0, PEAK, out=transform)
    return make_readonly(transform.astype(uint8))

def histeq_apply(im, transform):
    """
    Apply a histogram-equalization transform to an image. The transform can be created with
    histeq_trans. Returns a new image, the alpha channel (if any) is copied as-is.
    """
    im = check_image(im)
    if transform.shape != (NCOLORS, PEAK+1): raise ValueError('transform must be 3x256')
    width, height = image_size(im)
    out = new_image(width, height, im.shape[2])
    for channel in Channel:
        out[:, :, channel] = transform[channel].take(im[:, :, channel])
    out[:, :, NCOLORS:] = im[:, :, NCOLORS:]
    logger.debug('equalized %dx%d image', width, height)
    return out
