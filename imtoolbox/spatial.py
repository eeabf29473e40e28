"""
Splitting images into fixed-size blocks and comparing blocks with each other.

Blocks are compared one color channel at a time: the pixels of each block are flattened into a
sample vector per channel (column by column, i.e. x-major then y) and the vectors of the two blocks
are compared elementwise. The distances of the three channels are then averaged.
"""

import logging
from collections import namedtuple

from numpy import asarray, errstate, int64, log10

from .errors import InvalidTileSize, LengthMismatch
from .util import PEAK, NCOLORS, check_image, image_size

logger = logging.getLogger(__name__)

class Block(namedtuple('Block', ('x', 'y', 'width', 'height'))):
    """
    An axis-aligned window of an image: the origin (x, y) plus the width and height extents. This
    is only a coordinate descriptor, it does not hold any pixel data.
    """
    __slots__ = ()

    @property
    def edge_x(self):
        """One past the last x coordinate of the block."""
        return self.x + self.width

    @property
    def edge_y(self):
        """One past the last y coordinate of the block."""
        return self.y + self.height


##### Partitioning #####
def is_valid_window(im, x, y, length):
    """Checks if a square window of the given length starting at (x, y) fits inside the image."""
    width, height = image_size(im)
    return x + length <= width and y + length <= height

def partition(im, tile_size):
    """
    Tile an image into non-overlapping tile_size-by-tile_size blocks. Any rows or columns along
    the right and bottom edges that do not fill a complete tile are dropped.

    The blocks are returned with x as the outer loop and y as the inner loop, so for a 4x4 image
    and a tile size of 2 the origins are (0,0), (0,2), (2,0), (2,2).

    The tile size must be at least 1 and smaller than both the width and height of the image,
    otherwise InvalidTileSize is raised.
    """
    im = check_image(im, allow_empty=True)
    width, height = image_size(im)
    if tile_size < 1 or tile_size >= width or tile_size >= height:
        raise InvalidTileSize('tile size %d does not fit in a %dx%d image' %
                              (tile_size, width, height))
    blocks = [Block(x, y, tile_size, tile_size)
              for x in range(0, width, tile_size)
              for y in range(0, height, tile_size)
              if is_valid_window(im, x, y, tile_size)]
    logger.debug('partitioned %dx%d image into %d blocks of size %d',
                 width, height, len(blocks), tile_size)
    return blocks


##### Comparing #####
def extract_channels(im, block):
    """
    Get the red, green, and blue sample vectors of a block. Each is a 1D integer array of length
    width*height ordered x-major then y, the same order blocks are generated in by partition.
    """
    im = check_image(im, allow_empty=True)
    width, height = image_size(im)
    if block.x < 0 or block.y < 0 or block.edge_x > width or block.edge_y > height:
        raise ValueError('block %r is outside of the %dx%d image' % (block, width, height))
    window = im[block.y:block.edge_y, block.x:block.edge_x, :NCOLORS]
    samples = window.transpose(1, 0, 2).reshape(-1, NCOLORS).T.astype(int64)
    return tuple(samples)

def __check_samples(seq_a, seq_b):
    """Converts two sample sequences to float arrays after checking they have the same length."""
    seq_a, seq_b = asarray(seq_a, float), asarray(seq_b, float)
    if seq_a.size != seq_b.size:
        raise LengthMismatch('sample lengths differ: %d != %d' % (seq_a.size, seq_b.size))
    if seq_a.size == 0: raise ValueError('no samples to compare')
    return seq_a.ravel(), seq_b.ravel()

def distance(seq_a, seq_b):
    """
    The mean of the absolute differences between two equal-length sample sequences:
        1/n * sum(|A-B|)

    This is what is used for classifying blocks. Note that it is not squared, for the mean squared
    error use squared_distance.
    """
    from numpy import abs # pylint: disable=redefined-builtin
    seq_a, seq_b = __check_samples(seq_a, seq_b)
    diff = seq_a - seq_b
    return float(abs(diff, out=diff).mean())

def squared_distance(seq_a, seq_b):
    """
    The mean squared error between two equal-length sample sequences:
        1/n * sum((A-B)^2)
    """
    seq_a, seq_b = __check_samples(seq_a, seq_b)
    diff = seq_a - seq_b
    diff *= diff
    return float(diff.mean())

def __block_metric(metric, im, reference, candidate):
    """Unweighted average of a metric over the three channels of two blocks."""
    ref_samples = extract_channels(im, reference)
    cand_samples = extract_channels(im, candidate)
    return sum(metric(cand, ref) for cand, ref in zip(cand_samples, ref_samples)) / NCOLORS

def block_distance(im, reference, candidate):
    """
    The distance between two blocks of an image: the average over the red, green, and blue
    channels of distance(). A block compared with itself always has a distance of 0.
    """
    return __block_metric(distance, im, reference, candidate)

def block_squared_distance(im, reference, candidate):
    """Like block_distance but uses squared_distance() for each channel."""
    return __block_metric(squared_distance, im, reference, candidate)

def classify(im, reference, candidate, threshold):
    """Returns True if the candidate block is similar to the reference block under a threshold."""
    return block_distance(im, reference, candidate) <= threshold

def find_similar(im, reference, candidates, threshold):
    """Get all of the candidate blocks that are similar to the reference block, in order."""
    return [block for block in candidates if classify(im, reference, block, threshold)]

def find_dissimilar(im, reference, candidates, threshold):
    """
    Get all of the candidate blocks whose distance from the reference block exceeds the
    threshold, in order. Since the distance of a channel can be at most 255, a threshold of 255 or
    more never finds any blocks.
    """
    im = check_image(im, allow_empty=True)
    out = [block for block in candidates if not classify(im, reference, block, threshold)]
    logger.debug('%d blocks are dissimilar to %r', len(out), reference)
    return out

def psnr(distance_value, peak_signal=PEAK):
    """
    Calculates the peak signal-to-noise ratio from a precomputed distance. The returned value is
    in dB. Computed as:
        PSNR = -10*log10(D/S^2)
    where D is the distance and S is the peak value of the signal (255 for 8-bit images). A
    distance of 0 results in infinity.

    This formula expects a squared error, see block_psnr.
    """
    with errstate(divide='ignore'):
        return float(-10 * log10(distance_value / (peak_signal * peak_signal)))

def block_psnr(im, reference, candidate, peak_signal=PEAK):
    """The peak signal-to-noise ratio between two blocks, using the mean squared error."""
    return psnr(block_squared_distance(im, reference, candidate), peak_signal)
