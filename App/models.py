"""Data models and constants for the ASCII art generator."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from exceptions import ResolutionError

if TYPE_CHECKING:
    from char_matching import CharacterPalette
    from image_processing import ImageBuffer

# AIDEV-NOTE: Printable ASCII range used by "add all" / "remove all"
MIN_ASCII_VALUE = 32
MAX_ASCII_VALUE = 126

DEFAULT_RESOLUTION = 128
DEFAULT_CHARSET = "0123456789"
GLYPH_SIZE = 16  # pixels per glyph side

# Configuration file path
CONFIG_FILE = Path.home() / ".asciiart_config.json"


class OutputMode(Enum):
    """Where the generated ASCII art is written."""

    CONSOLE = "console"
    HTML = "html"


@dataclass
class AsciiArtConfig:
    """Startup settings for a shell session."""

    image_path: str = "cat.jpeg"
    resolution: int = DEFAULT_RESOLUTION
    charset: str = DEFAULT_CHARSET
    output_mode: OutputMode = OutputMode.CONSOLE

    # HTML output
    html_output_path: str = "out.html"
    html_font: str = "Courier New"

    # Glyph rasterization
    glyph_size: int = GLYPH_SIZE
    glyph_font_path: Optional[str] = None  # None = Pillow built-in font


@dataclass(frozen=True)
class CharacterEntry:
    """A palette character with its raw and normalized brightness.

    AIDEV-NOTE: raw_brightness is the fraction of "on" (un-inked) pixels in
    the glyph raster. normalized_brightness is raw rescaled against the
    palette's current min/max.
    """

    char: str
    raw_brightness: float
    normalized_brightness: float


@dataclass(frozen=True)
class ConversionResult:
    """Square grid of characters produced by one conversion run."""

    rows: "tuple[tuple[str, ...], ...]"

    @property
    def resolution(self) -> int:
        return len(self.rows)

    def to_text(self, separator: str = "") -> str:
        """Join the grid into lines of text."""
        return "\n".join(separator.join(row) for row in self.rows)


@dataclass
class ShellSession:
    """Mutable state of one interactive session.

    AIDEV-NOTE: Passed explicitly into the shell and the processor so a
    conversion can be reproduced without the command loop.
    """

    palette: "CharacterPalette"
    image: "Optional[ImageBuffer]" = None
    image_path: Optional[str] = None
    resolution: int = DEFAULT_RESOLUTION
    output_mode: OutputMode = OutputMode.CONSOLE
    padded_width: int = 0
    padded_height: int = 0

    def resolution_bounds(self) -> "tuple[int, int]":
        """Smallest and largest resolution allowed for the padded image.

        The upper bound is capped at the padded height so the square grid
        always divides both dimensions.
        """
        if self.padded_width <= 0 or self.padded_height <= 0:
            raise ResolutionError("No image loaded")
        upper = min(self.padded_width, self.padded_height)
        lower = min(max(1, self.padded_width // self.padded_height), upper)
        return lower, upper
