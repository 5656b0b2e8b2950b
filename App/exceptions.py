"""Error types raised by the ASCII art engine and its shell.

AIDEV-NOTE: The engine never prints; every failure surfaces as one of these.
The shell catches AsciiArtError, prints the message and keeps the session.
"""


class AsciiArtError(Exception):
    """Base class for all ASCII art errors."""


class InvalidImageError(AsciiArtError):
    """Image has non-positive dimensions or malformed pixel data."""


class PartitionError(AsciiArtError):
    """Resolution does not evenly divide the padded image."""


class EmptyPaletteError(AsciiArtError):
    """A lookup was attempted against a palette with no characters."""


class ImageLoadError(AsciiArtError):
    """Image file could not be opened or decoded."""


class ResolutionError(AsciiArtError):
    """Resolution is outside the allowed bounds."""


class CommandError(AsciiArtError):
    """Shell command has an incorrect format."""


class OutputError(AsciiArtError):
    """Rendered ASCII art could not be written."""
