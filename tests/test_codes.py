# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for codes.py — describe, icon_for, emoji_for and the catalog itself."""

import pytest

from weather_dash.codes import (
    ICON_EMOJI,
    UNKNOWN_DESCRIPTIONS,
    WEATHER_CODES,
    DayNightIcon,
    StaticIcon,
    describe,
    emoji_for,
    icon_for,
)


# ---------------------------------------------------------------------------
# Catalog contents
# ---------------------------------------------------------------------------

class TestCatalog:

    def test_has_all_28_wmo_codes(self):
        expected = {0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
                    71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99}
        assert set(WEATHER_CODES) == expected

    def test_every_entry_has_both_languages(self):
        for code, entry in WEATHER_CODES.items():
            assert entry.descriptions["sl"], code
            assert entry.descriptions["en"], code

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            WEATHER_CODES[100] = WEATHER_CODES[0]

    def test_icon_kinds(self):
        assert isinstance(WEATHER_CODES[0].icon, DayNightIcon)
        assert isinstance(WEATHER_CODES[95].icon, StaticIcon)
        assert isinstance(WEATHER_CODES[56].icon, StaticIcon)

    def test_every_icon_has_an_emoji(self):
        """All icon names the catalog can produce are covered by ICON_EMOJI."""
        for entry in WEATHER_CODES.values():
            for is_day in (True, False):
                assert entry.icon.resolve(is_day) in ICON_EMOJI


# ---------------------------------------------------------------------------
# describe
# ---------------------------------------------------------------------------

class TestDescribe:

    def test_known_code_slovenian_default(self):
        assert describe(0) == "Jasno"
        assert describe(3) == "Oblačno"

    def test_known_code_english(self):
        assert describe(0, "en") == "Clear sky"
        assert describe(95, "en") == "Thunderstorm"

    def test_unknown_code_gets_unknown_label(self):
        assert describe(9999) == "Neznano"
        assert describe(9999, "en") == "Unknown"

    def test_none_code_is_unknown(self):
        assert describe(None) == UNKNOWN_DESCRIPTIONS["sl"]

    def test_unsupported_language_falls_back_to_slovenian(self):
        assert describe(0, "de") == "Jasno"
        assert describe(9999, "de") == "Neznano"

    def test_float_code_is_accepted(self):
        """JSON numbers sometimes arrive as 61.0."""
        assert describe(61.0, "en") == "Slight rain"

    def test_total_over_wide_range(self):
        for code in range(-1000, 1001):
            assert describe(code)
            assert describe(code, "en")


# ---------------------------------------------------------------------------
# icon_for / emoji_for
# ---------------------------------------------------------------------------

class TestIconFor:

    def test_day_night_pair_resolves_on_is_day(self):
        assert icon_for(0, is_day=True) == "clear-day"
        assert icon_for(0, is_day=False) == "clear-night"

    def test_static_icon_ignores_is_day(self):
        assert icon_for(95, is_day=True) == "thunderstorms"
        assert icon_for(95, is_day=False) == "thunderstorms"

    def test_is_day_defaults_to_true(self):
        assert icon_for(2) == "cloudy-1-day"

    def test_unknown_code_uses_clear_sky_icon(self):
        """Description and icon fall back differently for unknown codes."""
        assert icon_for(9999) == icon_for(0)
        assert icon_for(9999, is_day=False) == "clear-night"
        assert describe(9999) != describe(0)

    def test_none_code_uses_clear_sky_icon(self):
        assert icon_for(None) == "clear-day"

    def test_total_over_wide_range(self):
        for code in range(-1000, 1001):
            assert icon_for(code, True)
            assert icon_for(code, False)

    def test_emoji_for_known_and_unknown(self):
        assert emoji_for(0) == "☀️"
        assert emoji_for(0, is_day=False) == "🌙"
        assert emoji_for(9999) == emoji_for(0)
