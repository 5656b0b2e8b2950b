"""ASCII Art Generator - Main entry point."""

import sys

from char_matching import CharacterPalette, GlyphRasterizer
from config_manager import ConfigManager
from exceptions import AsciiArtError
from models import AsciiArtConfig, ShellSession
from shell import INITIALIZATION_ERR_MSG, Shell


def create_shell(
    config: AsciiArtConfig, rasterizer=None, config_manager: ConfigManager | None = None
) -> Shell:
    """Build a session from config and load its default image.

    Raises:
        AsciiArtError: If the default image cannot be loaded
    """
    rasterizer = rasterizer or GlyphRasterizer(config.glyph_size, config.glyph_font_path)
    session = ShellSession(
        palette=CharacterPalette(config.charset, rasterizer),
        resolution=config.resolution,
        output_mode=config.output_mode,
    )
    shell = Shell(session, config, config_manager)
    shell.load_image(config.image_path)
    return shell


def main() -> int:
    """Launch the interactive ASCII art shell."""
    config_manager = ConfigManager()
    config = config_manager.load()
    try:
        shell = create_shell(config, config_manager=config_manager)
    except (AsciiArtError, OSError) as e:
        print(INITIALIZATION_ERR_MSG)
        print(f"Warning: {e}")
        return 1

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
