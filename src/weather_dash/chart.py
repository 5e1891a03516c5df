# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — Terminal rendering for current conditions, forecasts and history.

Uses only the Python standard library (os).
All rendering functions return strings ready to print. Units are the
provider's unit strings and are printed as given.
"""

import os

from weather_dash.analysis import AnalysisSummary, YearComparison
from weather_dash.codes import describe, emoji_for
from weather_dash.utils import TODAY_LABELS, fmt_day, fmt_hour

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar

LABELS = {
    "sl": {
        "now": "zdaj",
        "feels_like": "Občutek",
        "humidity": "Vlažnost",
        "wind": "Veter",
        "gusts": "sunki",
        "pressure": "Tlak",
        "hourly": "urna napoved",
        "daily": "dnevna napoved",
        "history": "zgodovina vremena",
        "days": "dni",
        "time": "Ura",
        "day": "Dan",
        "temp": "Temp",
        "max": "Maks",
        "min": "Min",
        "mean": "Povp",
        "rain": "Dež",
        "precip": "Padavine",
        "condition": "Vreme",
        "extremes": "Ekstremi",
        "hottest": "Najtoplejši dan",
        "coldest": "Najhladnejši dan",
        "wettest": "Najbolj moker dan",
        "averages": "Povprečja",
        "avg_max": "Povp. maksimum",
        "avg_min": "Povp. minimum",
        "total_precip": "Skupne padavine",
        "patterns": "Vremenski vzorci",
        "most_common": "Najpogostejše vreme",
        "of": "od",
        "no_data": "Ni podatkov o zgodovini vremena.",
        "comparison": "primerjava let",
        "difference": "Razlika",
    },
    "en": {
        "now": "now",
        "feels_like": "Feels like",
        "humidity": "Humidity",
        "wind": "Wind",
        "gusts": "gusts",
        "pressure": "Pressure",
        "hourly": "hourly forecast",
        "daily": "daily forecast",
        "history": "weather history",
        "days": "days",
        "time": "Time",
        "day": "Day",
        "temp": "Temp",
        "max": "Max",
        "min": "Min",
        "mean": "Mean",
        "rain": "Rain",
        "precip": "Precip",
        "condition": "Condition",
        "extremes": "Extremes",
        "hottest": "Hottest day",
        "coldest": "Coldest day",
        "wettest": "Wettest day",
        "averages": "Averages",
        "avg_max": "Avg. maximum",
        "avg_min": "Avg. minimum",
        "total_precip": "Total precipitation",
        "patterns": "Weather patterns",
        "most_common": "Most common weather",
        "of": "of",
        "no_data": "No historical weather data available.",
        "comparison": "year comparison",
        "difference": "Difference",
    },
}


def _labels(language: str) -> dict:
    return LABELS.get(language, LABELS["en"])


def _fmt(value, unit: str = "", decimals: int = 0) -> str:
    """Format a possibly-missing number with its unit; '—' for None."""
    if value is None:
        return "—"
    return f"{value:.{decimals}f}{unit}"


def _signed(value, unit: str = "", decimals: int = 0) -> str:
    if value is None:
        return "—"
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.{decimals}f}{unit}"


def render_current(
    current: dict,
    units: dict,
    location_line: str,
    language: str = "sl",
) -> str:
    """Render the current-conditions card.

    Args:
        current: The 'current' dict from fetch_weather.
        units: The 'units' dict from fetch_weather.
        location_line: Display name for the location header.
        language: Display language.

    Returns:
        Multi-line string.
    """
    lbl = _labels(language)
    t_unit = units.get("temperature", "°C")
    w_unit = units.get("wind_speed", "km/h")
    icon = emoji_for(current.get("weathercode"), bool(current.get("is_day", True)))

    lines = [
        f"📍 {location_line} — {fmt_hour(current['time'])} ({lbl['now']})",
        f"{icon}  {describe(current.get('weathercode'), language)}",
        f"🌡  {_fmt(current.get('temperature'), t_unit)}  "
        f"({lbl['feels_like']} {_fmt(current.get('feels_like'), t_unit)})",
        f"💧 {lbl['humidity']}:  {_fmt(current.get('humidity'), '%')}",
        f"💨 {lbl['wind']}:  {_fmt(current.get('wind_speed'), ' ' + w_unit)} "
        f"{current.get('wind_direction', '')}",
    ]
    if current.get("wind_gusts") is not None:
        lines[-1] += f"  ({lbl['gusts']} {_fmt(current['wind_gusts'], ' ' + w_unit)})"
    if current.get("pressure") is not None:
        lines.append(f"🧭 {lbl['pressure']}:  {_fmt(current['pressure'], ' ' + units.get('pressure', 'hPa'))}")
    return "\n".join(lines)


def render_hourly_table(
    hours: list[dict],
    units: dict,
    location_line: str,
    language: str = "sl",
) -> str:
    """Render the hourly forecast as a fixed-width ASCII table.

    Args:
        hours: The 'hourly' list from fetch_weather.
        units: The 'units' dict from fetch_weather.
        location_line: Display name for the location header.
        language: Display language.

    Returns:
        Multi-line string containing the formatted table.
    """
    lbl = _labels(language)
    t_unit = units.get("temperature", "°C")
    sep = "─" * 62

    header_row = (
        f"{lbl['time']:<6}  {lbl['temp']:>6}  {lbl['feels_like'][:6]:>6}  "
        f"{lbl['rain']:>5}  {lbl['condition']}"
    )
    lines = [f"📍 {location_line} — {lbl['hourly']}", sep, header_row, sep]

    for h in hours:
        icon = emoji_for(h.get("weathercode"), bool(h.get("is_day", True)))
        lines.append(
            f"{fmt_hour(h['time']):<6}  "
            f"{_fmt(h['temperature'], t_unit):>6}  "
            f"{_fmt(h['feels_like'], t_unit):>6}  "
            f"{h.get('precipitation_probability', 0):>4}%  "
            f"{icon} {describe(h.get('weathercode'), language)}"
        )

    lines.append(sep)
    return "\n".join(lines)


def render_daily_table(
    days: list[dict],
    units: dict,
    location_line: str,
    language: str = "sl",
    today: str | None = None,
) -> str:
    """Render the multi-day forecast as a fixed-width ASCII table.

    Args:
        days: The 'daily' list from fetch_weather.
        units: The 'units' dict from fetch_weather.
        location_line: Display name for the location header.
        language: Display language.
        today: 'YYYY-MM-DD' of today; that row is labelled 'Today'.

    Returns:
        Multi-line string containing the formatted table.
    """
    lbl = _labels(language)
    t_unit = units.get("temperature", "°C")
    p_unit = units.get("precipitation", "mm")
    w_unit = units.get("wind_speed", "km/h")
    sep = "─" * 72

    header_row = (
        f"{lbl['day']:<10}  {lbl['max']:>6}  {lbl['min']:>6}  {lbl['rain']:>5}  "
        f"{lbl['precip']:>9}  {lbl['wind']:>12}  {lbl['condition']}"
    )
    lines = [f"📍 {location_line} — {lbl['daily']} ({len(days)} {lbl['days']})", sep, header_row, sep]

    for d in days:
        if d["date"] == today:
            day_label = TODAY_LABELS.get(language, TODAY_LABELS["en"])
        else:
            day_label = fmt_day(d["date"], language)
        lines.append(
            f"{day_label:<10}  "
            f"{_fmt(d['temp_max'], t_unit):>6}  "
            f"{_fmt(d['temp_min'], t_unit):>6}  "
            f"{d['rain_probability']:>4}%  "
            f"{_fmt(d['precip_mm'], ' ' + p_unit, 1):>9}  "
            f"{_fmt(d['wind_max'], ' ' + w_unit):>8} {d['wind_direction']:<3}  "
            f"{describe(d.get('weathercode'), language)}"
        )

    lines.append(sep)
    return "\n".join(lines)


def render_history_summary(
    summary: AnalysisSummary | None,
    location_line: str,
    days: int,
    language: str = "sl",
) -> str:
    """Render the extremes / averages / patterns cards of a history analysis.

    Example:
        📍 Ljubljana, Slovenia — weather history (14 days)
        ──────────────────────────────────────────────────
        Extremes
          🔥 Hottest day:          25°C
        ...
    """
    lbl = _labels(language)
    if summary is None:
        return f"📍 {location_line} — {lbl['no_data']}"

    t_unit = summary.units.get("temperature_2m_max", "°C")
    p_unit = " " + summary.units.get("precipitation_sum", "mm")
    ex, av, pat = summary.extremes, summary.averages, summary.weather_patterns
    sep = "─" * 50

    lines = [
        f"📍 {location_line} — {lbl['history']} ({days} {lbl['days']})",
        sep,
        lbl["extremes"],
        f"  🔥 {lbl['hottest']:<22} {_fmt(ex.hottest_day, t_unit)}",
        f"  🥶 {lbl['coldest']:<22} {_fmt(ex.coldest_day, t_unit)}",
        f"  🌧  {lbl['wettest']:<21} {_fmt(ex.wettest_day, p_unit, 1)}",
        "",
        lbl["averages"],
        f"  🌡  {lbl['avg_max']:<21} {_fmt(av.avg_max_temp, t_unit)}",
        f"  🌡  {lbl['avg_min']:<21} {_fmt(av.avg_min_temp, t_unit)}",
        f"  💧 {lbl['total_precip']:<22} {_fmt(av.total_precipitation, p_unit, 1)}",
        "",
        lbl["patterns"],
        f"  🌤  {lbl['most_common']:<21} {pat.most_common_weather} "
        f"({pat.most_common_weather_days} {lbl['of']} {pat.total_days} {lbl['days']})",
        sep,
    ]
    return "\n".join(lines)


def render_history_table(
    rows: list[dict],
    units: dict,
    language: str = "sl",
) -> str:
    """Render per-day history rows from analysis.daily_breakdown()."""
    lbl = _labels(language)
    t_unit = units.get("temperature_2m_max", "°C")
    p_unit = " " + units.get("precipitation_sum", "mm")
    sep = "─" * 66

    header_row = (
        f"{lbl['day']:<10}  {lbl['max']:>6}  {lbl['min']:>6}  {lbl['mean']:>6}  "
        f"{lbl['precip']:>9}  {lbl['condition']}"
    )
    lines = [sep, header_row, sep]
    for r in rows:
        lines.append(
            f"{fmt_day(r['date'], language):<10}  "
            f"{_fmt(r['temp_max'], t_unit):>6}  "
            f"{_fmt(r['temp_min'], t_unit):>6}  "
            f"{_fmt(r['temp_mean'], t_unit):>6}  "
            f"{_fmt(r['precipitation'], p_unit, 1):>9}  "
            f"{r['description']}"
        )
    lines.append(sep)
    return "\n".join(lines)


def render_comparison(
    comparison: YearComparison,
    location_line: str,
    language: str = "sl",
) -> str:
    """Render two analysed years side by side with their differences."""
    lbl = _labels(language)
    first, second = comparison.first, comparison.second
    units = (first or second).units if (first or second) else {}
    t_unit = units.get("temperature_2m_max", "°C")
    p_unit = " " + units.get("precipitation_sum", "mm")
    sep = "─" * 66

    def col(summary: AnalysisSummary | None, attr: str, unit: str, decimals: int = 0) -> str:
        if summary is None:
            return "—"
        group, name = attr.split(".")
        return _fmt(getattr(getattr(summary, group), name), unit, decimals)

    rows = [
        (lbl["hottest"],      "extremes.hottest_day",         t_unit, 0, None),
        (lbl["coldest"],      "extremes.coldest_day",         t_unit, 0, None),
        (lbl["wettest"],      "extremes.wettest_day",         p_unit, 1, None),
        (lbl["avg_max"],      "averages.avg_max_temp",        t_unit, 0, comparison.avg_max_temp_diff),
        (lbl["avg_min"],      "averages.avg_min_temp",        t_unit, 0, comparison.avg_min_temp_diff),
        (lbl["total_precip"], "averages.total_precipitation", p_unit, 1, comparison.total_precipitation_diff),
    ]

    header_row = (
        f"{'':<22}  {comparison.first_year:>12}  {comparison.second_year:>12}  {lbl['difference']:>12}"
    )
    lines = [f"📍 {location_line} — {lbl['comparison']}", sep, header_row, sep]
    for label, attr, unit, decimals, diff in rows:
        diff_str = _signed(diff, unit, decimals) if diff is not None else ""
        lines.append(
            f"{label:<22}  {col(first, attr, unit, decimals):>12}  "
            f"{col(second, attr, unit, decimals):>12}  {diff_str:>12}"
        )

    common = [
        s.weather_patterns.most_common_weather if s else "—"
        for s in (first, second)
    ]
    lines.append(f"{lbl['most_common']:<22}  {common[0]:>12}  {common[1]:>12}")
    lines.append(sep)
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────
# Bar chart helpers
# ─────────────────────────────────────────────────────────────

def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def render_bar_chart(
    labels: list[str],
    values: list[float],
    title: str,
    unit: str = "",
    bar_width: int | None = None,
    decimals: int = 0,
) -> str:
    """Render a labelled horizontal bar chart.

    Args:
        labels: List of row label strings.
        values: List of numeric values corresponding to each label.
        title: Chart title printed above the bars.
        unit: Optional unit suffix appended to each value (e.g. ' mm').
        bar_width: Width of the bar in characters. Auto-detected from terminal if None.
        decimals: Decimal places shown for each value.

    Returns:
        Multi-line string containing the chart.
    """
    if bar_width is None:
        try:
            terminal_width = os.get_terminal_size().columns
        except OSError:
            terminal_width = FALLBACK_TERMINAL_WIDTH
        bar_width = max(10, terminal_width - BAR_LABEL_RESERVE)

    max_val = max(values) if values else 1
    if max_val == 0:
        max_val = 1  # avoid division by zero

    label_w = max(len(lbl) for lbl in labels) if labels else 3
    lines = [title]
    for label, value in zip(labels, values):
        bar = _bar(value, max_val, bar_width)
        val_str = f"{value:.{decimals}f}{unit}"
        lines.append(f"  {label:<{label_w}} │{bar}│ {val_str:>8}")

    return "\n".join(lines)


def render_precipitation_chart(rows: list[dict], unit: str = "mm", language: str = "sl") -> str:
    """Bar chart of daily precipitation from analysis.daily_breakdown() rows, oldest first."""
    ordered = list(reversed(rows))
    labels = [fmt_day(r["date"], language) for r in ordered]
    values = [r["precipitation"] or 0.0 for r in ordered]
    return render_bar_chart(labels, values, f"{_labels(language)['precip']} ({unit})",
                            unit=f" {unit}", decimals=1)
