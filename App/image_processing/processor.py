"""Main processor orchestrating the image-to-ASCII pipeline.

AIDEV-NOTE: Pads the image, partitions it into a square grid, scores each
cell's brightness and maps it to the closest palette character. Holds no
state between calls besides the palette reference.
"""

from typing import TYPE_CHECKING

from exceptions import EmptyPaletteError, ImageLoadError, ResolutionError
from models import ConversionResult, ShellSession

from .brightness import sub_image_brightness
from .buffer import ImageBuffer
from .padding import pad_image
from .partition import partition_image

if TYPE_CHECKING:
    from char_matching import CharacterPalette


class AsciiArtProcessor:
    """Converts image buffers into character grids."""

    def __init__(self, palette: "CharacterPalette"):
        self.palette = palette

    def pad_image(self, image: ImageBuffer) -> ImageBuffer:
        """Pad image to power-of-two dimensions."""
        return pad_image(image)

    def partition(self, image: ImageBuffer, resolution: int) -> "list[ImageBuffer]":
        """Split a padded image into resolution**2 sub-images."""
        return partition_image(image, resolution)

    def brightness_grid(self, image: ImageBuffer, resolution: int) -> "list[float]":
        """Brightness of every grid cell, row-major."""
        padded = self.pad_image(image)
        return [sub_image_brightness(cell) for cell in self.partition(padded, resolution)]

    def convert(self, image: ImageBuffer, resolution: int) -> ConversionResult:
        """Execute the complete conversion pipeline.

        Args:
            image: Source image buffer (any positive size)
            resolution: Number of characters per row and column

        Returns:
            ConversionResult with resolution x resolution characters

        Raises:
            ResolutionError: If resolution is less than 1
            EmptyPaletteError: If the palette has no characters
        """
        if resolution < 1:
            raise ResolutionError(f"Resolution must be at least 1, got {resolution}")
        if len(self.palette) == 0:
            raise EmptyPaletteError("Character palette is empty")

        closest = self.palette.closest_character
        chars = [closest(value) for value in self.brightness_grid(image, resolution)]
        rows = tuple(
            tuple(chars[row * resolution : (row + 1) * resolution])
            for row in range(resolution)
        )
        return ConversionResult(rows=rows)


def convert_session(session: ShellSession) -> ConversionResult:
    """Convert the session's current image at its current resolution."""
    if session.image is None:
        raise ImageLoadError("No image loaded")
    return AsciiArtProcessor(session.palette).convert(session.image, session.resolution)
