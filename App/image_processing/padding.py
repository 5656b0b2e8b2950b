"""Padding images to power-of-two dimensions.

AIDEV-NOTE: The padded image is what gets partitioned, so its dimensions
define the valid resolution range. Padding is white and centered; when the
padding along an axis is odd, the extra pixel goes to the bottom/right.
"""

import numpy as np

from exceptions import InvalidImageError

from .buffer import ImageBuffer

WHITE = 255


def is_power_of_two(num: int) -> bool:
    """Check if a positive integer is a power of two."""
    return num > 0 and (num & (num - 1)) == 0


def closest_power_of_two(num: int) -> int:
    """Smallest power of two greater than or equal to num (num >= 1)."""
    if num < 1:
        raise ValueError(f"Expected a positive integer, got {num}")
    return 1 << (num - 1).bit_length()


def padded_size(width: int, height: int) -> "tuple[int, int]":
    """Dimensions an image of the given size will have after padding."""
    if width <= 0 or height <= 0:
        raise InvalidImageError(f"Invalid image dimensions: {width}x{height}")
    return closest_power_of_two(width), closest_power_of_two(height)


def pad_image(image: ImageBuffer) -> ImageBuffer:
    """Center the image on a white canvas with power-of-two dimensions.

    Args:
        image: Source image buffer

    Returns:
        The input itself if both dimensions are already powers of two,
        otherwise a new padded buffer

    Raises:
        InvalidImageError: If width or height is not positive
    """
    new_width, new_height = padded_size(image.width, image.height)
    if (new_width, new_height) == image.size:
        return image

    # Floor of the padding goes to the top/left side
    top = (new_height - image.height) // 2
    left = (new_width - image.width) // 2

    canvas = np.full((new_height, new_width, 3), WHITE, dtype=np.uint8)
    canvas[top : top + image.height, left : left + image.width] = image.pixels
    return ImageBuffer(canvas)
