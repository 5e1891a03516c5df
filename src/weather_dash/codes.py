# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
codes.py — WMO weather code catalog: localized descriptions and icons.

Open-Meteo reports conditions as WMO interpretation codes (0-99, sparse).
Each known code maps to a description per language and an icon that is
either a single name or a day/night pair.

API docs: https://open-meteo.com/en/docs (section "WMO Weather interpretation codes")
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


LANGUAGES = ("sl", "en")
DEFAULT_LANGUAGE = "sl"

UNKNOWN_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "sl": "Neznano",
    "en": "Unknown",
})


@dataclass(frozen=True)
class StaticIcon:
    """An icon that looks the same by day and by night."""

    name: str

    def resolve(self, is_day: bool) -> str:
        return self.name


@dataclass(frozen=True)
class DayNightIcon:
    """An icon with separate variants for daytime and nighttime."""

    day: str
    night: str

    def resolve(self, is_day: bool) -> str:
        return self.day if is_day else self.night


IconRef = StaticIcon | DayNightIcon


@dataclass(frozen=True)
class ConditionEntry:
    descriptions: Mapping[str, str]
    icon: IconRef

    def description(self, language: str = DEFAULT_LANGUAGE) -> str:
        return self.descriptions.get(language) or self.descriptions[DEFAULT_LANGUAGE]


def _entry(sl: str, en: str, icon: IconRef) -> ConditionEntry:
    return ConditionEntry(descriptions=MappingProxyType({"sl": sl, "en": en}), icon=icon)


def _pair(base: str) -> DayNightIcon:
    return DayNightIcon(day=f"{base}-day", night=f"{base}-night")


WEATHER_CODES: Mapping[int, ConditionEntry] = MappingProxyType({
    0:  _entry("Jasno",                "Clear sky",                  _pair("clear")),
    1:  _entry("Pretežno jasno",       "Mainly clear",               _pair("clear")),
    2:  _entry("Delno oblačno",        "Partly cloudy",              _pair("cloudy-1")),
    3:  _entry("Oblačno",              "Overcast",                   _pair("cloudy-3")),
    45: _entry("Megla",                "Fog",                        _pair("fog")),
    48: _entry("Megla z ivjem",        "Depositing rime fog",        _pair("fog")),
    51: _entry("Rahlo rosenje",        "Light drizzle",              _pair("rainy-1")),
    53: _entry("Zmerno rosenje",       "Moderate drizzle",           _pair("rainy-2")),
    55: _entry("Gosto rosenje",        "Dense drizzle",              _pair("rainy-3")),
    56: _entry("Rahlo ledeno rosenje", "Light freezing drizzle",     StaticIcon("rain-and-sleet-mix")),
    57: _entry("Gosto ledeno rosenje", "Dense freezing drizzle",     StaticIcon("rain-and-sleet-mix")),
    61: _entry("Rahlo deževje",        "Slight rain",                _pair("rainy-1")),
    63: _entry("Zmerno deževje",       "Moderate rain",              _pair("rainy-2")),
    65: _entry("Močno deževje",        "Heavy rain",                 _pair("rainy-3")),
    66: _entry("Rahlo ledeno deževje", "Light freezing rain",        StaticIcon("rain-and-sleet-mix")),
    67: _entry("Močno ledeno deževje", "Heavy freezing rain",        StaticIcon("rain-and-sleet-mix")),
    71: _entry("Rahlo sneženje",       "Slight snow fall",           _pair("snowy-1")),
    73: _entry("Zmerno sneženje",      "Moderate snow fall",         _pair("snowy-2")),
    75: _entry("Močno sneženje",       "Heavy snow fall",            _pair("snowy-3")),
    77: _entry("Snežna zrna",          "Snow grains",                _pair("snowy-1")),
    80: _entry("Rahle dežne plohe",    "Slight rain showers",        _pair("rainy-1")),
    81: _entry("Zmerne dežne plohe",   "Moderate rain showers",      _pair("rainy-2")),
    82: _entry("Močne dežne plohe",    "Violent rain showers",       _pair("rainy-3")),
    85: _entry("Rahle snežne plohe",   "Slight snow showers",        _pair("snowy-1")),
    86: _entry("Močne snežne plohe",   "Heavy snow showers",         _pair("snowy-3")),
    95: _entry("Nevihta",              "Thunderstorm",               StaticIcon("thunderstorms")),
    96: _entry("Nevihta z rahlo točo", "Thunderstorm with slight hail",
               _pair("scattered-thunderstorms")),
    99: _entry("Nevihta z močno točo", "Thunderstorm with heavy hail",
               StaticIcon("severe-thunderstorm")),
})


def _lookup(code: int | None) -> ConditionEntry | None:
    if code is None:
        return None
    return WEATHER_CODES.get(int(code))


def describe(code: int | None, language: str = DEFAULT_LANGUAGE) -> str:
    """Return the localized description for a WMO weather code.

    Unknown codes get the fixed "unknown" label, not the code-0 text.

    Args:
        code: WMO weather code as reported by Open-Meteo.
        language: 'sl' or 'en'; anything else falls back to 'sl'.

    Returns:
        Description string, never empty.
    """
    if language not in LANGUAGES:
        language = DEFAULT_LANGUAGE
    entry = _lookup(code)
    if entry is None:
        return UNKNOWN_DESCRIPTIONS[language]
    return entry.description(language)


def icon_for(code: int | None, is_day: bool = True) -> str:
    """Return the icon name for a WMO weather code.

    Unknown codes use the code-0 (clear sky) icon. Day/night pairs resolve
    on is_day; single icons ignore it.
    """
    entry = _lookup(code) or WEATHER_CODES[0]
    return entry.icon.resolve(is_day)


# Terminal/Streamlit stand-ins for the icon set, keyed by icon name
ICON_EMOJI: Mapping[str, str] = MappingProxyType({
    "clear-day": "☀️",
    "clear-night": "🌙",
    "cloudy-1-day": "🌤",
    "cloudy-1-night": "☁️",
    "cloudy-3-day": "☁️",
    "cloudy-3-night": "☁️",
    "fog-day": "🌫",
    "fog-night": "🌫",
    "rainy-1-day": "🌦",
    "rainy-1-night": "🌧",
    "rainy-2-day": "🌧",
    "rainy-2-night": "🌧",
    "rainy-3-day": "🌧",
    "rainy-3-night": "🌧",
    "rain-and-sleet-mix": "🧊",
    "snowy-1-day": "🌨",
    "snowy-1-night": "🌨",
    "snowy-2-day": "🌨",
    "snowy-2-night": "🌨",
    "snowy-3-day": "❄️",
    "snowy-3-night": "❄️",
    "thunderstorms": "⛈",
    "scattered-thunderstorms-day": "⛈",
    "scattered-thunderstorms-night": "⛈",
    "severe-thunderstorm": "⛈",
})


def emoji_for(code: int | None, is_day: bool = True) -> str:
    """Return an emoji standing in for the icon of a weather code."""
    return ICON_EMOJI.get(icon_for(code, is_day), "❔")
