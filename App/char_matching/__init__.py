"""Character palette and glyph rasterization.

AIDEV-NOTE: Characters are scored by how much of a fixed-size glyph raster
stays un-inked, then normalized against the palette's min/max so the
darkest and lightest characters span the full 0-1 brightness range.
- glyphs: Pillow-based glyph rasterizer
- palette: CharacterPalette with incremental min/max maintenance
"""

from .glyphs import GlyphRasterizer
from .palette import CharacterPalette

__all__ = ["CharacterPalette", "GlyphRasterizer"]
