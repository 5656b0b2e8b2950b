"""Loading image files into pixel buffers."""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from exceptions import ImageLoadError

from .buffer import ImageBuffer


def load_image(file_path: str | Path) -> ImageBuffer:
    """Load and decode an image file.

    Args:
        file_path: Path to image file (PNG, JPG, etc.)

    Returns:
        ImageBuffer with RGB pixels (transparency composited over white)

    Raises:
        ImageLoadError: If file cannot be opened or decoded
    """
    try:
        with Image.open(file_path) as image:
            image.load()
            return ImageBuffer.from_pil(image)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise ImageLoadError(f"Failed to load image: {e}") from e
