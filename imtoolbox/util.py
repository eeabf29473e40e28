"""
Basic utilities for working with images.

Images are numpy arrays of uint8 with shape (height, width, channels) where channels is 3 (RGB)
or 4 (RGBA). A pixel at (x, y) is im[y, x] so x runs along the width and y along the height.
"""

import numpy

from .errors import InvalidImage

NLEVELS = 256
PEAK = NLEVELS - 1
NCOLORS = 3

##### Image Verification #####
def is_image(im):
    """
    Returns True if `im` is an RGB or RGBA image, basically it is a uint8 ndarray of 3 dimensions
    where the 3rd dimension length is 3 or 4. Does not check to see that the image has no
    zero-length dimensions.
    """
    return (isinstance(im, numpy.ndarray) and im.dtype == numpy.uint8 and
            im.ndim == 3 and im.shape[2] in (3, 4))

def check_image(im, allow_empty=False):
    """
    Similar to is_image except instead of returning True/False it throws an exception if it isn't
    an image. Unless allow_empty is True, an image with zero width or height raises InvalidImage.
    """
    im = numpy.asanyarray(im)
    if not is_image(im): raise ValueError('Not an RGB/RGBA uint8 image format')
    if not allow_empty and im.shape[0] * im.shape[1] == 0:
        raise InvalidImage('Image has no pixels (%dx%d)' % image_size(im))
    return im

def image_size(im):
    """Gets the (width, height) of an image."""
    return im.shape[1], im.shape[0]

def new_image(width, height, channels=4):
    """Creates a blank (all zero, including alpha) image of the given dimensions."""
    if channels not in (3, 4): raise ValueError('channels must be 3 or 4')
    return numpy.zeros((height, width, channels), numpy.uint8)


##### Other Helpers #####
def make_readonly(value):
    """
    Makes numpy arrays read-only. If the value is a tuple then it is searched for arrays
    recursively. Lists are changed into tuples. Anything else is just return as-is.
    """
    if isinstance(value, (tuple, list)):
        return tuple(make_readonly(elem) for elem in value)
    if isinstance(value, numpy.ndarray):
        value.flags.writeable = False
    return value
