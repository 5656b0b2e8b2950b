"""Image processing pipeline for image-to-ASCII conversion.

AIDEV-NOTE: This package handles the complete pipeline from image file
to character grid. Organized into modular components:
- buffer: Immutable RGB pixel buffer
- loader: Image file decoding
- padding: Power-of-two padding
- partition: Square grid partitioning
- brightness: Sub-image brightness scoring
- processor: Main AsciiArtProcessor orchestrator
"""

from .buffer import ImageBuffer
from .loader import load_image
from .processor import AsciiArtProcessor

__all__ = ["AsciiArtProcessor", "ImageBuffer", "load_image"]
