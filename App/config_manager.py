"""Configuration persistence manager for the ASCII art generator.

This module handles loading and saving of session defaults to/from JSON files.
The character palette itself is never persisted.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, AsciiArtConfig, OutputMode


class ConfigManager:
    """Handles loading and saving of startup configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.asciiart_config.json)
        """
        self.config_path = config_path

    def load(self) -> AsciiArtConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            AsciiArtConfig with loaded or default values
        """
        config = AsciiArtConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    if not isinstance(data, dict):
                        raise ValueError("expected a JSON object at the top level")
                    # Update config with loaded values (fallback to defaults)
                    config.image_path = data.get("image_path", config.image_path)
                    config.resolution = int(data.get("resolution", config.resolution))
                    config.charset = data.get("charset", config.charset)
                    config.output_mode = OutputMode(
                        data.get("output_mode", config.output_mode.value)
                    )
                    config.html_output_path = data.get(
                        "html_output_path", config.html_output_path
                    )
                    config.html_font = data.get("html_font", config.html_font)
                    config.glyph_size = int(data.get("glyph_size", config.glyph_size))
                    config.glyph_font_path = data.get(
                        "glyph_font_path", config.glyph_font_path
                    )
                print(f"✓ Loaded configuration from {self.config_path}")
        except (OSError, ValueError, TypeError) as e:
            print(f"Warning: Could not load config file: {e}")
            config = AsciiArtConfig()

        return config

    def save(self, config: AsciiArtConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: AsciiArtConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = asdict(config)
        data["output_mode"] = config.output_mode.value
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)
