# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
analysis.py — Statistical analysis of a daily historical weather series.

Pure functions only: no I/O, no shared state. The series comes from
history.fetch_historical(); the summary is consumed by chart.py and the
Streamlit dashboards.

All rounding is half away from zero (decimal.ROUND_HALF_UP), so 2.25 mm
becomes 2.3 mm where Python's round() would give 2.2.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from weather_dash.codes import DEFAULT_LANGUAGE, describe, icon_for


@dataclass(frozen=True)
class DailySeries:
    """Index-aligned daily arrays from the Open-Meteo archive API.

    time[i], weather_code[i], temperature_max[i] ... all describe the same
    day. Optional arrays are empty tuples when the response lacks them.
    Numeric entries may be None for days the provider has not processed yet.
    """

    time: tuple[date, ...]
    weather_code: tuple[int | None, ...]
    temperature_max: tuple[float | None, ...]
    temperature_min: tuple[float | None, ...]
    precipitation_sum: tuple[float | None, ...]
    temperature_mean: tuple[float | None, ...] = ()
    wind_speed_max: tuple[float | None, ...] = ()
    units: Mapping[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class Extremes:
    hottest_day: int | None
    coldest_day: int | None
    wettest_day: float | None


@dataclass(frozen=True)
class Averages:
    avg_max_temp: int | None
    avg_min_temp: int | None
    total_precipitation: float | None


@dataclass(frozen=True)
class WeatherPatterns:
    most_common_weather: str
    most_common_weather_days: int
    total_days: int


@dataclass(frozen=True)
class AnalysisSummary:
    extremes: Extremes
    averages: Averages
    weather_patterns: WeatherPatterns
    units: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class YearComparison:
    """Two calendar years analysed side by side.

    Differences are second minus first and None when either side has no data.
    """

    first_year: int
    second_year: int
    first: AnalysisSummary | None
    second: AnalysisSummary | None
    avg_max_temp_diff: int | None
    avg_min_temp_diff: int | None
    total_precipitation_diff: float | None


def round_half_up(value: float, ndigits: int = 0) -> int | float:
    """Round half away from zero at the given number of decimal places.

    The shortest repr of the float is rounded, so 0.15 is treated as 0.15
    and not as its binary approximation 0.1499999...

    Args:
        value: Number to round.
        ndigits: Decimal places to keep (0 returns an int).

    Returns:
        int when ndigits == 0, otherwise float.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)


def _present(values: Sequence[float | None]) -> list[float]:
    return [float(v) for v in values if v is not None]


def _round_or_none(value: float | None, ndigits: int = 0) -> int | float | None:
    if value is None:
        return None
    return round_half_up(value, ndigits)


def most_common_weather(
    codes: Sequence[int | None],
    language: str = DEFAULT_LANGUAGE,
) -> tuple[str, int]:
    """Find the most frequent weather description in a code sequence.

    Codes are counted by their localized description, so two codes that share
    a description land in one bucket. On a tie the description seen first
    (lowest index) wins.

    Returns:
        (description, day count); ('unknown' label, 0) for an empty sequence.
    """
    counts = Counter(describe(code, language) for code in codes)
    if not counts:
        return describe(None, language), 0
    # Counter.most_common keeps first-encountered order among equal counts.
    description, days = counts.most_common(1)[0]
    return description, days


def analyze(
    series: DailySeries | None,
    language: str = DEFAULT_LANGUAGE,
) -> AnalysisSummary | None:
    """Summarize a daily series: extremes, averages and the dominant condition.

    Args:
        series: Parsed archive data, or None when the API returned no daily block.
        language: Language for the most-common-weather description.

    Returns:
        AnalysisSummary, or None when there is nothing to analyze.
    """
    if series is None or len(series) == 0:
        return None

    maxes  = _present(series.temperature_max)
    mins   = _present(series.temperature_min)
    precip = _present(series.precipitation_sum)

    extremes = Extremes(
        hottest_day=_round_or_none(max(maxes) if maxes else None),
        coldest_day=_round_or_none(min(mins) if mins else None),
        wettest_day=_round_or_none(max(precip) if precip else None, 1),
    )
    averages = Averages(
        avg_max_temp=_round_or_none(sum(maxes) / len(maxes) if maxes else None),
        avg_min_temp=_round_or_none(sum(mins) / len(mins) if mins else None),
        total_precipitation=_round_or_none(sum(precip) if precip else None, 1),
    )

    description, days = most_common_weather(series.weather_code, language)
    patterns = WeatherPatterns(
        most_common_weather=description,
        most_common_weather_days=days,
        total_days=len(series.weather_code),
    )

    return AnalysisSummary(
        extremes=extremes,
        averages=averages,
        weather_patterns=patterns,
        units=dict(series.units),
    )


def daily_breakdown(
    series: DailySeries | None,
    language: str = DEFAULT_LANGUAGE,
    is_day: bool = True,
) -> list[dict]:
    """Build per-day rows for the history table, newest day first.

    Returns list of dicts with keys:
        date (datetime.date), temp_max, temp_min, temp_mean (int or None),
        precipitation (float, 1 decimal, or None), wind_max (int or None),
        description (str), icon (str)
    """
    if series is None:
        return []

    n = len(series)
    means = series.temperature_mean or (None,) * n
    winds = series.wind_speed_max or (None,) * n

    rows = []
    for i in range(n):
        code = series.weather_code[i]
        rows.append({
            "date":          series.time[i],
            "temp_max":      _round_or_none(series.temperature_max[i]),
            "temp_min":      _round_or_none(series.temperature_min[i]),
            "temp_mean":     _round_or_none(means[i]),
            "precipitation": _round_or_none(series.precipitation_sum[i], 1),
            "wind_max":      _round_or_none(winds[i]),
            "description":   describe(code, language),
            "icon":          icon_for(code, is_day),
        })
    rows.reverse()
    return rows


def _diff(a: float | None, b: float | None, ndigits: int = 0) -> int | float | None:
    if a is None or b is None:
        return None
    return round_half_up(b - a, ndigits)


def compare_years(
    first_year: int,
    first: DailySeries | None,
    second_year: int,
    second: DailySeries | None,
    language: str = DEFAULT_LANGUAGE,
) -> YearComparison:
    """Analyse two years of daily data and compute their differences."""
    first_summary = analyze(first, language)
    second_summary = analyze(second, language)

    if first_summary is None or second_summary is None:
        return YearComparison(
            first_year=first_year,
            second_year=second_year,
            first=first_summary,
            second=second_summary,
            avg_max_temp_diff=None,
            avg_min_temp_diff=None,
            total_precipitation_diff=None,
        )

    a, b = first_summary.averages, second_summary.averages
    return YearComparison(
        first_year=first_year,
        second_year=second_year,
        first=first_summary,
        second=second_summary,
        avg_max_temp_diff=_diff(a.avg_max_temp, b.avg_max_temp),
        avg_min_temp_diff=_diff(a.avg_min_temp, b.avg_min_temp),
        total_precipitation_diff=_diff(a.total_precipitation, b.total_precipitation, 1),
    )
