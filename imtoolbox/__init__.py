"""
Histogram equalization of RGB(A) images and block-based comparison of image regions.
"""

from .errors import InvalidImage, InvalidTileSize, LengthMismatch
from .util import new_image
from .histogram import Channel, ChannelHistogram, imhist
from .classical import (histeq, histeq_trans, histeq_apply, equalize_image, normalize_brightness,
                        remap_pixel)
from .spatial import (Block, partition, extract_channels, distance, squared_distance,
                      block_distance, block_squared_distance, classify, find_similar,
                      find_dissimilar, psnr, block_psnr)
