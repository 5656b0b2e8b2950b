import random
from unittest.mock import patch

import pytest

from exceptions import EmptyPaletteError
from models import CharacterEntry


def expected_normalized(palette, char):
    low = min(palette.raw_brightness(c) for c in palette)
    high = max(palette.raw_brightness(c) for c in palette)
    if high == low:
        return 0.5
    return (palette.raw_brightness(char) - low) / (high - low)


class TestLookup:
    def test_closest_character_scenario(self, make_palette):
        palette = make_palette("ab")

        assert palette.normalized_brightness("a") == 0.0
        assert palette.normalized_brightness("b") == 1.0
        assert palette.closest_character(0.1) == "a"
        assert palette.closest_character(0.9) == "b"

    def test_picks_nearest_value(self, make_palette):
        palette = make_palette("abc")

        assert palette.closest_character(0.0) == "a"
        assert palette.closest_character(0.45) == "c"
        assert palette.closest_character(0.6) == "c"
        assert palette.closest_character(1.0) == "b"

    def test_out_of_range_brightness(self, make_palette):
        palette = make_palette("abc")

        assert palette.closest_character(-1.0) == "a"
        assert palette.closest_character(2.0) == "b"

    def test_tie_between_values_prefers_lower_code_point(self, make_palette):
        palette = make_palette("ab")
        assert palette.closest_character(0.5) == "a"

    def test_tie_on_same_value_prefers_lower_code_point(self, make_palette):
        palette = make_palette("agb")
        assert palette.closest_character(1.0) == "b"
        assert palette.closest_character(0.9) == "b"

    def test_lookup_is_deterministic(self, make_palette):
        palette = make_palette("abcdefg")
        first = [palette.closest_character(i / 20) for i in range(21)]
        second = [palette.closest_character(i / 20) for i in range(21)]
        assert first == second

    def test_empty_palette_raises(self, make_palette):
        with pytest.raises(EmptyPaletteError):
            make_palette().closest_character(0.5)

    def test_palette_emptied_by_removal_raises(self, make_palette):
        palette = make_palette("a")
        palette.remove("a")
        with pytest.raises(EmptyPaletteError):
            palette.closest_character(0.5)

    def test_lookup_follows_mutations(self, make_palette):
        palette = make_palette("ab")
        assert palette.closest_character(0.4) == "a"

        palette.add("c")
        assert palette.closest_character(0.4) == "c"

        palette.remove("c")
        assert palette.closest_character(0.4) == "a"


class TestAdd:
    def test_interior_add_does_not_renormalize(self, make_palette):
        palette = make_palette("ab")
        with patch.object(palette, "_renormalize", wraps=palette._renormalize) as spy:
            palette.add("c")

        spy.assert_not_called()
        assert palette.normalized_brightness("a") == 0.0
        assert palette.normalized_brightness("b") == 1.0
        assert palette.normalized_brightness("c") == pytest.approx(0.5)

    def test_new_max_renormalizes(self, make_palette):
        palette = make_palette("ab")
        with patch.object(palette, "_renormalize", wraps=palette._renormalize) as spy:
            palette.add("e")

        spy.assert_called_once()
        assert palette.max_brightness == 0.9
        assert palette.normalized_brightness("e") == 1.0
        assert palette.normalized_brightness("a") == 0.0
        assert palette.normalized_brightness("b") == pytest.approx(0.6 / 0.7)

    def test_new_min_renormalizes(self, make_palette):
        palette = make_palette("ab")
        with patch.object(palette, "_renormalize", wraps=palette._renormalize) as spy:
            palette.add("f")

        spy.assert_called_once()
        assert palette.min_brightness == 0.1
        assert palette.normalized_brightness("f") == 0.0
        assert palette.normalized_brightness("a") == pytest.approx(0.1 / 0.7)

    def test_duplicate_add_is_noop(self, make_palette, rasterizer):
        palette = make_palette("ab")
        calls = len(rasterizer.calls)
        with patch.object(palette, "_renormalize", wraps=palette._renormalize) as spy:
            palette.add("a")

        spy.assert_not_called()
        assert len(rasterizer.calls) == calls
        assert len(palette) == 2

    def test_add_to_empty_palette(self, make_palette):
        palette = make_palette()
        palette.add("c")

        assert palette.min_brightness == palette.max_brightness == 0.5
        assert palette.normalized_brightness("c") == 0.5
        assert palette.closest_character(0.0) == "c"

    def test_rejects_non_characters(self, make_palette):
        palette = make_palette()
        with pytest.raises(ValueError):
            palette.add("ab")
        with pytest.raises(ValueError):
            palette.add("")

    def test_constructor_collapses_duplicates(self, make_palette, rasterizer):
        palette = make_palette("abba")

        assert len(palette) == 2
        assert rasterizer.calls == ["a", "b"]


class TestRemove:
    def test_remove_max_renormalizes_survivors(self, make_palette):
        palette = make_palette("abc")
        palette.remove("b")

        assert palette.max_brightness == 0.5
        assert palette.normalized_brightness("a") == 0.0
        assert palette.normalized_brightness("c") == 1.0

    def test_remove_min_renormalizes_survivors(self, make_palette):
        palette = make_palette("abc")
        palette.remove("a")

        assert palette.min_brightness == 0.5
        assert palette.normalized_brightness("c") == 0.0
        assert palette.normalized_brightness("b") == 1.0

    def test_remove_interior_leaves_others_untouched(self, make_palette):
        palette = make_palette("abcd")
        before = {char: palette.normalized_brightness(char) for char in "abd"}
        with patch.object(palette, "_renormalize", wraps=palette._renormalize) as spy:
            palette.remove("c")

        spy.assert_not_called()
        assert {char: palette.normalized_brightness(char) for char in "abd"} == before

    def test_remove_shared_max_keeps_extremes(self, make_palette):
        palette = make_palette("abg")
        with patch.object(palette, "_renormalize", wraps=palette._renormalize) as spy:
            palette.remove("b")

        spy.assert_not_called()
        assert palette.max_brightness == 0.8
        assert palette.normalized_brightness("g") == 1.0

    def test_remove_missing_is_noop(self, make_palette):
        palette = make_palette("ab")
        palette.remove("z")
        assert list(palette) == ["a", "b"]

    def test_remove_last_character(self, make_palette):
        palette = make_palette("a")
        palette.remove("a")

        assert len(palette) == 0
        assert palette.min_brightness is None
        assert palette.max_brightness is None

    def test_re_add_uses_cached_brightness(self, make_palette, rasterizer):
        palette = make_palette("ab")
        palette.remove("a")
        palette.add("a")

        assert rasterizer.calls.count("a") == 1
        assert palette.normalized_brightness("a") == 0.0


class TestNormalization:
    def test_single_character_is_degenerate(self, make_palette):
        palette = make_palette("c")
        assert palette.normalized_brightness("c") == 0.5

    def test_identical_raw_brightness_is_degenerate(self, make_palette):
        palette = make_palette("ax")

        assert palette.normalized_brightness("a") == 0.5
        assert palette.normalized_brightness("x") == 0.5
        assert palette.closest_character(0.0) == "a"

    def test_leaving_degenerate_state(self, make_palette):
        palette = make_palette("ax")
        palette.add("b")

        assert palette.normalized_brightness("a") == 0.0
        assert palette.normalized_brightness("x") == 0.0
        assert palette.normalized_brightness("b") == 1.0

    def test_invariants_hold_after_random_mutations(self, make_palette, rasterizer):
        palette = make_palette("ab")
        chars = sorted(rasterizer.levels)
        rng = random.Random(1234)

        for _ in range(300):
            char = rng.choice(chars)
            if rng.random() < 0.55:
                palette.add(char)
            else:
                palette.remove(char)

            if not len(palette):
                continue
            raws = [palette.raw_brightness(c) for c in palette]
            assert palette.min_brightness == min(raws)
            assert palette.max_brightness == max(raws)
            for c in palette:
                assert palette.normalized_brightness(c) == pytest.approx(
                    expected_normalized(palette, c)
                )
            if len(set(raws)) >= 2:
                for c in palette:
                    if palette.raw_brightness(c) == min(raws):
                        assert palette.normalized_brightness(c) == 0.0
                    if palette.raw_brightness(c) == max(raws):
                        assert palette.normalized_brightness(c) == 1.0

        # Every character was rasterized at most once
        assert sorted(rasterizer.calls) == sorted(set(rasterizer.calls))


def test_iteration_and_entries(make_palette):
    palette = make_palette("cab")

    assert list(palette) == ["a", "b", "c"]
    assert "a" in palette
    assert "z" not in palette
    entries = palette.entries()
    assert [entry.char for entry in entries] == ["a", "b", "c"]
    assert entries[0] == CharacterEntry("a", 0.2, 0.0)
    assert entries[1] == CharacterEntry("b", 0.8, 1.0)
