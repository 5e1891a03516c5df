# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — Fetch historical daily weather data from Open-Meteo Archive API.
API docs: https://open-meteo.com/en/docs/historical-weather-api
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import requests

from weather_dash.analysis import DailySeries
from weather_dash.utils import call_api

ARCHIVE_API_URL = "https://archive-api.open-meteo.com/v1/archive"

DAILY_VARIABLES = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "temperature_2m_mean",
    "precipitation_sum",
    "wind_speed_10m_max",
]

REQUIRED_VARIABLES = [
    "time",
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
]

# Period presets offered by the dashboards (days -> label)
HISTORY_PERIODS = {
    7:  {"sl": "Zadnji teden",    "en": "Last week"},
    14: {"sl": "Zadnja 2 tedna",  "en": "Last 2 weeks"},
    21: {"sl": "Zadnje 3 tedne",  "en": "Last 3 weeks"},
    30: {"sl": "Zadnji mesec",    "en": "Last month"},
}
DEFAULT_HISTORY_DAYS = 14


def history_date_range(days: int, today: date | None = None) -> tuple[date, date]:
    """Return (start_date, end_date) covering the last N days up to today."""
    end = today or date.today()
    return end - timedelta(days=days), end


def year_date_range(year: int) -> tuple[date, date]:
    """Return (1 January, 31 December) of a calendar year."""
    return date(year, 1, 1), date(year, 12, 31)


def fetch_historical(
    latitude: float,
    longitude: float,
    start_date: date,
    end_date: date,
) -> DailySeries | None:
    """Fetch daily historical weather from the Open-Meteo Archive API.

    Returns a DailySeries (see analysis.py), or None if the response has no
    daily block. One request, no retry.

    Raises RuntimeError if the request fails or the response is malformed.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
        "daily": ",".join(DAILY_VARIABLES),
        "timezone": "auto",
    }

    def _call() -> dict:
        r = requests.get(ARCHIVE_API_URL, params=params, timeout=60)
        r.raise_for_status()
        return r.json()

    data = call_api(_call, label="Open-Meteo historical archive API")
    return parse_daily_series(data)


def fetch_weather_history(
    latitude: float,
    longitude: float,
    days: int = DEFAULT_HISTORY_DAYS,
) -> DailySeries | None:
    """Fetch the last N days of daily weather ending today."""
    start, end = history_date_range(days)
    return fetch_historical(latitude, longitude, start, end)


def fetch_yearly_comparison(
    latitude: float,
    longitude: float,
    year1: int,
    year2: int,
) -> tuple[DailySeries | None, DailySeries | None]:
    """Fetch two complete calendar years in parallel.

    Both requests run at once; if either fails its RuntimeError propagates
    after both have finished.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [
            pool.submit(fetch_historical, latitude, longitude, *year_date_range(year))
            for year in (year1, year2)
        ]
        first, second = (f.result() for f in futures)
    return first, second


def parse_daily_series(data: dict) -> DailySeries | None:
    """Parse an Open-Meteo archive response into a DailySeries.

    Values are kept as reported, including None for missing days.

    Raises:
        RuntimeError: If the daily block lacks a required array.
    """
    daily = data.get("daily")
    if not daily:
        return None

    missing = [key for key in REQUIRED_VARIABLES if key not in daily]
    if missing:
        raise RuntimeError(
            f"Unexpected API response structure: daily block is missing {', '.join(missing)}"
        )

    return DailySeries(
        time=tuple(date.fromisoformat(t) for t in daily["time"]),
        weather_code=tuple(daily["weather_code"]),
        temperature_max=tuple(daily["temperature_2m_max"]),
        temperature_min=tuple(daily["temperature_2m_min"]),
        precipitation_sum=tuple(daily["precipitation_sum"]),
        temperature_mean=tuple(daily.get("temperature_2m_mean") or ()),
        wind_speed_max=tuple(daily.get("wind_speed_10m_max") or ()),
        units=dict(data.get("daily_units") or {}),
    )
