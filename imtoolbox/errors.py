"""
Exceptions raised when a caller violates the preconditions of the image operations. They are all
ValueErrors so that code catching ValueError for bad arguments keeps working.
"""

class InvalidImage(ValueError):
    """The image has no pixels (zero width or height)."""

class InvalidTileSize(ValueError):
    """The tile size does not fit at least once (with room to spare) in both image dimensions."""

class LengthMismatch(ValueError):
    """Two sample sequences being compared do not have the same length."""
