"""Splitting a padded image into a square grid of sub-images."""

from exceptions import PartitionError

from .buffer import ImageBuffer


def partition_image(image: ImageBuffer, resolution: int) -> "list[ImageBuffer]":
    """Split an image into resolution x resolution equal sub-images.

    Args:
        image: Padded image buffer
        resolution: Number of grid cells along each axis

    Returns:
        resolution**2 sub-images in row-major order (index = row * resolution + col)

    Raises:
        PartitionError: If resolution is not positive or does not evenly
            divide both image dimensions

    AIDEV-NOTE: Callers keep the resolution within the padded image's bounds,
    so the divisibility check should never fire in practice.
    """
    if resolution < 1:
        raise PartitionError(f"Resolution must be positive, got {resolution}")
    if image.width % resolution or image.height % resolution:
        raise PartitionError(
            f"Resolution {resolution} does not divide image size "
            f"{image.width}x{image.height}"
        )

    cell_height = image.height // resolution
    cell_width = image.width // resolution
    pixels = image.pixels

    sub_images = []
    for row in range(resolution):
        y = row * cell_height
        for col in range(resolution):
            x = col * cell_width
            sub_images.append(ImageBuffer(pixels[y : y + cell_height, x : x + cell_width]))
    return sub_images
