"""Brightness scoring for sub-images."""

import numpy as np

from exceptions import InvalidImageError

from .buffer import ImageBuffer

# Rec. 709 luma weights
RED_FACTOR = 0.2126
GREEN_FACTOR = 0.7152
BLUE_FACTOR = 0.0722
LUMA_WEIGHTS = np.array([RED_FACTOR, GREEN_FACTOR, BLUE_FACTOR])

PIXEL_MAX_VALUE = 255.0


def sub_image_brightness(image: ImageBuffer) -> float:
    """Average luma of an image, from 0 (black) to 1 (white).

    Args:
        image: Sub-image buffer

    Returns:
        Sum of per-pixel luma divided by (pixel count * 255)

    Raises:
        InvalidImageError: If the image has no pixels
    """
    pixel_count = image.width * image.height
    if pixel_count == 0:
        raise InvalidImageError("Cannot score an empty image")

    luma_sum = float(np.sum(image.pixels.astype(np.float64) @ LUMA_WEIGHTS))
    brightness = luma_sum / (pixel_count * PIXEL_MAX_VALUE)
    # Weights sum to 1.0 only up to float rounding
    return min(max(brightness, 0.0), 1.0)
