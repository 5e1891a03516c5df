# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
weather.py — Fetch current conditions, hourly and daily forecast from Open-Meteo.

Open-Meteo is free and requires no API key. A single request returns the
current conditions, the next 24 hours and up to 16 days; we return them as
plain lists of dicts, with the provider's unit strings alongside.

API docs: https://open-meteo.com/en/docs
"""

import requests

from weather_dash.utils import call_api


OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "snowfall",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
]

HOURLY_VARIABLES = [
    "temperature_2m",
    "apparent_temperature",
    "precipitation_probability",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "is_day",
]

DAILY_VARIABLES = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
    "uv_index_max",
    "precipitation_sum",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "wind_direction_10m_dominant",
]

FORECAST_HOURS = 24
MAX_FORECAST_DAYS = 16


def degrees_to_compass(degrees: float) -> str:
    """Convert a wind bearing in degrees to a 16-point compass label.

    Args:
        degrees: Wind direction in degrees (0–360, where 0 = North).

    Returns:
        Compass label such as 'N', 'NNE', 'NW', etc.
    """
    compass = [
        "N", "NNE", "NE", "ENE",
        "E", "ESE", "SE", "SSE",
        "S", "SSW", "SW", "WSW",
        "W", "WNW", "NW", "NNW",
    ]
    # Each segment is 360/16 = 22.5 degrees wide
    index = round(degrees / 22.5) % 16
    return compass[index]


def fetch_weather(
    latitude: float,
    longitude: float,
    forecast_days: int = 7,
) -> dict:
    """Fetch current conditions plus hourly and daily forecast in one request.

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        forecast_days: Number of days of daily forecast (1-16).

    Returns:
        Dict with keys current (dict), hourly (list of dicts, next 24 hours),
        daily (list of dicts) and units (dict of provider unit strings keyed
        by our field names).

    Raises:
        ValueError: If forecast_days is outside 1-16.
        RuntimeError: If the request fails or the response is malformed.
    """
    if not 1 <= forecast_days <= MAX_FORECAST_DAYS:
        raise ValueError(f"forecast_days must be between 1 and {MAX_FORECAST_DAYS}, got {forecast_days}")

    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": ",".join(CURRENT_VARIABLES),
        "hourly": ",".join(HOURLY_VARIABLES),
        "daily": ",".join(DAILY_VARIABLES),
        "forecast_days": forecast_days,
        "forecast_hours": FORECAST_HOURS,
        "timezone": "auto",
    }

    def _call():
        r = requests.get(OPEN_METEO_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    data = call_api(_call, label="Open-Meteo forecast API")

    try:
        return {
            "current": _parse_current(data["current"]),
            "hourly":  _parse_hourly(data["hourly"]),
            "daily":   _parse_daily(data["daily"]),
            "units":   _parse_units(data),
        }
    except (KeyError, TypeError) as e:
        raise RuntimeError(f"Unexpected API response structure: missing {e}") from e


def _parse_current(current: dict) -> dict:
    """Map the 'current' block onto our field names."""
    return {
        "time":          current["time"],
        "temperature":   current["temperature_2m"],
        "feels_like":    current["apparent_temperature"],
        "humidity":      current["relative_humidity_2m"],
        "is_day":        bool(current["is_day"]),
        "precipitation": current.get("precipitation") or 0,
        "snowfall":      current.get("snowfall") or 0,
        "weathercode":   current["weather_code"],
        "cloud_cover":   current.get("cloud_cover"),
        "pressure":      current.get("pressure_msl"),
        "wind_speed":    current["wind_speed_10m"],
        "wind_gusts":    current.get("wind_gusts_10m"),
        "wind_direction": degrees_to_compass(current.get("wind_direction_10m") or 0),
    }


def _parse_hourly(hourly: dict) -> list[dict]:
    """Turn the parallel hourly arrays into one dict per hour."""
    times = hourly["time"]
    temps = hourly["temperature_2m"]
    feels = hourly["apparent_temperature"]
    precip_prob = hourly["precipitation_probability"]
    precip = hourly["precipitation"]
    codes = hourly["weather_code"]
    wind = hourly["wind_speed_10m"]
    is_day = hourly["is_day"]

    result = []
    for i in range(min(FORECAST_HOURS, len(times))):
        result.append({
            "time": times[i],
            "temperature": temps[i],
            "feels_like": feels[i],
            "precipitation_probability": precip_prob[i] or 0,
            "precipitation": precip[i] or 0,
            "weathercode": codes[i],
            "wind_speed": wind[i],
            "is_day": bool(is_day[i]),
        })
    return result


def _parse_daily(daily: dict) -> list[dict]:
    """Turn the parallel daily arrays into one dict per day."""
    result = []
    for i, date_str in enumerate(daily["time"]):
        result.append({
            "date": date_str,
            "weathercode": daily["weather_code"][i],
            "temp_max": daily["temperature_2m_max"][i],
            "temp_min": daily["temperature_2m_min"][i],
            "sunrise": daily["sunrise"][i],
            "sunset": daily["sunset"][i],
            "uv_index": daily["uv_index_max"][i],
            "precip_mm": daily["precipitation_sum"][i] or 0,
            "rain_probability": daily["precipitation_probability_max"][i] or 0,
            "wind_max": daily["wind_speed_10m_max"][i],
            "wind_direction": degrees_to_compass(daily["wind_direction_10m_dominant"][i] or 0),
        })
    return result


def _parse_units(data: dict) -> dict:
    """Collect the unit strings we display, keyed by our field names."""
    current_units = data.get("current_units") or {}
    daily_units = data.get("daily_units") or {}
    return {
        "temperature":   current_units.get("temperature_2m", "°C"),
        "wind_speed":    current_units.get("wind_speed_10m", "km/h"),
        "precipitation": daily_units.get("precipitation_sum", "mm"),
        "pressure":      current_units.get("pressure_msl", "hPa"),
    }
