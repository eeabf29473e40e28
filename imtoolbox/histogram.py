"""
Per-channel histograms of RGB(A) images.
"""

import logging
from enum import IntEnum

from numpy import stack, cumsum

from .util import NLEVELS, NCOLORS, check_image, image_size, make_readonly

logger = logging.getLogger(__name__)

class Channel(IntEnum):
    """A color channel of an image. The value is the index of the channel in a pixel."""
    R = 0
    G = 1
    B = 2

def imhist(im):
    """Calculate the per-channel histogram of an RGB(A) image, see ChannelHistogram.build."""
    return ChannelHistogram.build(im)

class ChannelHistogram:
    """
    The empirical distribution of the red, green, and blue values of an image. Entry i of a
    channel is the fraction of pixels in the image whose value on that channel equals i, so each
    channel sums to 1. The alpha channel, if present, is not considered.

    Instances are immutable: all of the arrays exposed are read-only.
    """

    def __init__(self, counts):
        """
        Create a histogram from integer counts with shape (3, 256). Normally ChannelHistogram.build
        is used instead of calling this directly.
        """
        if counts.shape != (NCOLORS, NLEVELS): raise ValueError('counts must be 3x256')
        npixels = int(counts[0].sum())
        if npixels == 0: raise ValueError('counts are empty')
        self.__npixels = npixels
        self.__counts = make_readonly(counts.copy())
        self.__dist = make_readonly(counts / npixels)
        # sequential prefix sum, the same as adding the probabilities one at a time
        self.__cdf = make_readonly(cumsum(self.__dist, axis=1))

    @classmethod
    def build(cls, im):
        """
        Build the histogram of an image. Every pixel is counted exactly once in each of the three
        color channels and the counts are then divided by the number of pixels. An image with no
        pixels raises InvalidImage.
        """
        from scipy.ndimage import histogram
        im = check_image(im)
        counts = stack([histogram(im[:, :, c], 0, NLEVELS-1, NLEVELS) for c in Channel])
        logger.debug('built histogram of %dx%d image', *image_size(im))
        return cls(counts)

    @property
    def npixels(self):
        """Number of pixels counted in each channel."""
        return self.__npixels

    @property
    def counts(self):
        """The raw (3, 256) integer pixel counts."""
        return self.__counts

    @property
    def distributions(self):
        """The (3, 256) probabilities, one row per channel."""
        return self.__dist

    @property
    def cdf(self):
        """The (3, 256) inclusive cumulative distributions, one row per channel."""
        return self.__cdf

    def probability_at(self, value):
        """Get the (r, g, b) probabilities of a value."""
        r, g, b = self.__dist[:, value]
        return float(r), float(g), float(b)

    def probability_of(self, channel, value):
        """Get the probability of a value in a single channel."""
        return float(self.__dist[channel, value])

    def cumulative_up_to(self, channel, value):
        """
        Get the sum of the probabilities of all values from 0 up to and including value in a
        single channel.
        """
        return float(self.__cdf[channel, value])

    def describe(self):
        """
        Multi-line listing of every value with a non-zero probability in each channel, in the
        format "value => probability".
        """
        lines = []
        for channel, name in zip(Channel, ('RED', 'GREEN', 'BLUE')):
            lines.append('----------------- %s -----------------' % name)
            dist = self.__dist[channel]
            lines.extend('%d => %s' % (i, dist[i]) for i in dist.nonzero()[0])
        return '\n'.join(lines)

    def __repr__(self):
        return '<ChannelHistogram of %d pixels>' % self.__npixels
