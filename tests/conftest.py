"""Shared fixtures for the test-suite."""

import numpy as np
import pytest

from char_matching import CharacterPalette
from image_processing import ImageBuffer

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class FakeRasterizer:
    """Rasterizer returning masks with a fixed fraction of on-pixels.

    Masks are 10x10, so brightness levels are exact multiples of 0.01.
    """

    size = 10

    def __init__(self, levels):
        self.levels = dict(levels)
        self.calls = []

    def __call__(self, char):
        self.calls.append(char)
        on_pixels = round(self.levels[char] * self.size * self.size)
        mask = np.zeros(self.size * self.size, dtype=bool)
        mask[:on_pixels] = True
        return mask.reshape(self.size, self.size)


@pytest.fixture
def rasterizer():
    return FakeRasterizer(
        {
            "a": 0.2,
            "b": 0.8,
            "c": 0.5,
            "d": 0.3,
            "e": 0.9,
            "f": 0.1,
            "g": 0.8,
            "x": 0.2,
            " ": 1.0,
            "#": 0.0,
        }
    )


@pytest.fixture
def make_palette(rasterizer):
    def _make(chars=""):
        return CharacterPalette(chars, rasterizer)

    return _make


def checkerboard(size=2, cell=1):
    """Black/white checkerboard with a black top-left cell."""
    pixels = np.zeros((size * cell, size * cell, 3), dtype=np.uint8)
    for row in range(size):
        for col in range(size):
            if (row + col) % 2:
                pixels[row * cell : (row + 1) * cell, col * cell : (col + 1) * cell] = WHITE
    return ImageBuffer(pixels)


def random_image(width, height, seed=0):
    rng = np.random.default_rng(seed)
    return ImageBuffer(rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8))
