"""Immutable RGB pixel buffer shared by every pipeline stage."""

import numpy as np
from PIL import Image

from exceptions import InvalidImageError


class ImageBuffer:
    """Read-only grid of RGB pixels.

    AIDEV-NOTE: Pixels are stored as a (height, width, 3) uint8 array that is
    copied on construction and flagged read-only, so no two stages ever share
    a writable view of the same data.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels):
        array = np.array(pixels, dtype=np.uint8)
        if array.ndim != 3 or array.shape[2] != 3:
            raise InvalidImageError(
                f"Expected pixel array of shape (height, width, 3), got {array.shape}"
            )
        array.setflags(write=False)
        self._pixels = array

    @classmethod
    def from_pil(cls, image: Image.Image) -> "ImageBuffer":
        """Build a buffer from a PIL image, compositing alpha over white."""
        if image.mode in ("RGBA", "LA", "P"):
            rgba = image.convert("RGBA")
            background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
            image = Image.alpha_composite(background, rgba)
        return cls(np.asarray(image.convert("RGB")))

    @classmethod
    def filled(
        cls, width: int, height: int, color: "tuple[int, int, int]" = (255, 255, 255)
    ) -> "ImageBuffer":
        """Create a buffer of a single solid color."""
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = color
        return cls(pixels)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> "tuple[int, int]":
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Read-only (height, width, 3) view of the pixel data."""
        return self._pixels

    def get_pixel(self, row: int, col: int) -> "tuple[int, int, int]":
        r, g, b = self._pixels[row, col]
        return int(r), int(g), int(b)

    def __eq__(self, other):
        if not isinstance(other, ImageBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    def __hash__(self):
        return hash((self._pixels.shape, self._pixels.tobytes()))

    def __repr__(self):
        return f"ImageBuffer(width={self.width}, height={self.height})"
