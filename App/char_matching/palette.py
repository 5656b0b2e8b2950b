"""Character palette matching image brightness to characters.

AIDEV-NOTE: The palette owns three pieces of state that must stay
consistent: the raw-brightness cache, the normalized brightness of every
current entry, and the current min/max raw brightness. A full
renormalization pass runs only when a mutation changes the min or max;
adding a character strictly inside the current range normalizes that
character alone.
"""

from bisect import bisect_left
from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from exceptions import EmptyPaletteError
from models import CharacterEntry

from .glyphs import GlyphRasterizer, glyph_brightness

# Normalized brightness used when every entry has the same raw brightness
DEGENERATE_BRIGHTNESS = 0.5


class CharacterPalette:
    """Mutable set of characters with precomputed brightness values.

    Lookup ties are broken by code point: among characters equally close
    to the requested brightness, the lowest code point wins.
    """

    def __init__(
        self,
        chars: Iterable[str] = (),
        rasterizer: Optional[Callable[[str], np.ndarray]] = None,
    ):
        self._rasterizer = rasterizer or GlyphRasterizer()
        self._raw_cache: dict[str, float] = {}
        self._raw: dict[str, float] = {}
        self._normalized: dict[str, float] = {}
        self._min: Optional[float] = None
        self._max: Optional[float] = None
        # Sorted (normalized, char) table, rebuilt lazily after mutations
        self._lookup: Optional[list[tuple[float, str]]] = None
        self._lookup_keys: list[float] = []

        for char in chars:
            _check_char(char)
            if char not in self._raw:
                self._raw[char] = self._raw_brightness(char)
        if self._raw:
            self._min = min(self._raw.values())
            self._max = max(self._raw.values())
            self._renormalize()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._raw)

    def __contains__(self, char: object) -> bool:
        return char in self._raw

    def __iter__(self) -> Iterator[str]:
        """Iterate characters in ascending code-point order."""
        return iter(sorted(self._raw))

    @property
    def min_brightness(self) -> Optional[float]:
        return self._min

    @property
    def max_brightness(self) -> Optional[float]:
        return self._max

    def raw_brightness(self, char: str) -> float:
        return self._raw[char]

    def normalized_brightness(self, char: str) -> float:
        return self._normalized[char]

    def entries(self) -> "list[CharacterEntry]":
        """Snapshot of all entries in ascending code-point order."""
        return [
            CharacterEntry(char, self._raw[char], self._normalized[char])
            for char in self
        ]

    def closest_character(self, brightness: float) -> str:
        """Character whose normalized brightness is closest to brightness.

        Raises:
            EmptyPaletteError: If the palette has no characters
        """
        if not self._raw:
            raise EmptyPaletteError("Character palette is empty")

        table = self._lookup_table()
        keys = self._lookup_keys
        index = bisect_left(keys, brightness)

        best: Optional[tuple[float, str]] = None
        # The nearest value is either the first key >= brightness or the
        # last key below it; the first entry of each key group has the
        # lowest code point for that value.
        if index < len(keys):
            best = (keys[index] - brightness, table[index][1])
        if index > 0:
            below = bisect_left(keys, keys[index - 1])
            candidate = (brightness - keys[below], table[below][1])
            if best is None or candidate < best:
                best = candidate
        return best[1]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, char: str) -> None:
        """Add a character; no-op if already present."""
        _check_char(char)
        if char in self._raw:
            return

        raw = self._raw_brightness(char)
        self._raw[char] = raw
        self._lookup = None

        if self._min is None or self._max is None:
            self._min = self._max = raw
            self._renormalize()
            return

        extremes_changed = False
        if raw > self._max:
            self._max = raw
            extremes_changed = True
        if raw < self._min:
            self._min = raw
            extremes_changed = True

        if extremes_changed:
            self._renormalize()
        else:
            self._normalized[char] = self._normalize(raw)

    def remove(self, char: str) -> None:
        """Remove a character; no-op if absent."""
        if char not in self._raw:
            return

        raw = self._raw.pop(char)
        del self._normalized[char]
        self._lookup = None

        if not self._raw:
            self._min = self._max = None
            return

        extremes_changed = False
        if raw == self._max:
            new_max = max(self._raw.values())
            extremes_changed |= new_max != self._max
            self._max = new_max
        if raw == self._min:
            new_min = min(self._raw.values())
            extremes_changed |= new_min != self._min
            self._min = new_min

        if extremes_changed:
            self._renormalize()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _raw_brightness(self, char: str) -> float:
        """Raw brightness from the cache, rasterizing on first use."""
        if char not in self._raw_cache:
            self._raw_cache[char] = glyph_brightness(self._rasterizer(char))
        return self._raw_cache[char]

    def _normalize(self, raw: float) -> float:
        span = self._max - self._min
        if span == 0:
            return DEGENERATE_BRIGHTNESS
        return (raw - self._min) / span

    def _renormalize(self) -> None:
        self._normalized = {char: self._normalize(raw) for char, raw in self._raw.items()}

    def _lookup_table(self) -> "list[tuple[float, str]]":
        if self._lookup is None:
            self._lookup = sorted((value, char) for char, value in self._normalized.items())
            self._lookup_keys = [value for value, _ in self._lookup]
        return self._lookup


def _check_char(char: object) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
