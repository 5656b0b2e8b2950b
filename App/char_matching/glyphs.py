"""Rasterizing characters into fixed-size boolean masks."""

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from models import GLYPH_SIZE

BACKGROUND = 255
INK = 0
ON_THRESHOLD = 128
DEFAULT_FONT = "Courier New"


class GlyphRasterizer:
    """Renders single characters to size x size boolean masks.

    AIDEV-NOTE: A mask pixel is True ("on") where the background stays
    white, i.e. not covered by ink. A space is therefore all-on and the
    densest glyphs have the fewest on-pixels.
    """

    def __init__(
        self,
        size: int = GLYPH_SIZE,
        font_path: str | None = None,
        font_name: str = DEFAULT_FONT,
    ):
        self.size = size
        self.font_path = font_path
        self.font_name = font_name
        self._font = self._load_font()

    def _load_font(self):
        if self.font_path:
            return ImageFont.truetype(self.font_path, size=self.size)
        try:
            return ImageFont.truetype(self.font_name, size=self.size)
        except OSError:
            # Named font not installed
            return ImageFont.load_default(size=self.size)

    def __call__(self, char: str) -> np.ndarray:
        """Render a character and return its boolean mask."""
        canvas = Image.new("L", (self.size, self.size), BACKGROUND)
        draw = ImageDraw.Draw(canvas)

        # Center the glyph's ink box in the canvas
        left, top, right, bottom = draw.textbbox((0, 0), char, font=self._font)
        x = (self.size - (right - left)) / 2 - left
        y = (self.size - (bottom - top)) / 2 - top
        draw.text((x, y), char, fill=INK, font=self._font)

        return np.asarray(canvas) >= ON_THRESHOLD


def glyph_brightness(mask: np.ndarray) -> float:
    """Fraction of on-pixels in a glyph mask."""
    return float(np.count_nonzero(mask)) / mask.size
