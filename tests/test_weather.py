# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_weather.py — Unit tests for weather.py.

All tests use in-memory fake API payloads — no network calls.
"""

from datetime import datetime, timedelta

import pytest

from weather_dash.weather import FORECAST_HOURS, degrees_to_compass, fetch_weather


# ---------------------------------------------------------------------------
# degrees_to_compass
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("degrees,expected", [
    (0, "N"),
    (22.5, "NNE"),
    (90, "E"),
    (180, "S"),
    (315, "NW"),
    (359.9, "N"),
])
def test_degrees_to_compass(degrees, expected):
    assert degrees_to_compass(degrees) == expected


# ---------------------------------------------------------------------------
# Fake Open-Meteo forecast payload
# ---------------------------------------------------------------------------

def _make_payload(hours: int = 30, days: int = 3) -> dict:
    base = datetime(2025, 2, 24, 0, 0)
    times = [(base + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)]
    dates = [(base + timedelta(days=i)).strftime("%Y-%m-%d") for i in range(days)]
    return {
        "current_units": {"temperature_2m": "°F", "wind_speed_10m": "mp/h", "pressure_msl": "hPa"},
        "daily_units": {"precipitation_sum": "inch"},
        "current": {
            "time": "2025-02-24T10:00",
            "temperature_2m": 4.2,
            "relative_humidity_2m": 81,
            "apparent_temperature": 1.0,
            "is_day": 1,
            "precipitation": None,
            "snowfall": 0.0,
            "weather_code": 3,
            "cloud_cover": 100,
            "pressure_msl": 1018.4,
            "wind_speed_10m": 11.2,
            "wind_direction_10m": 270,
            "wind_gusts_10m": 25.0,
        },
        "hourly": {
            "time": times,
            "temperature_2m": [5.0] * hours,
            "apparent_temperature": [3.0] * hours,
            "precipitation_probability": [None] + [40] * (hours - 1),
            "precipitation": [0.0] * hours,
            "weather_code": [61] * hours,
            "wind_speed_10m": [10.0] * hours,
            "is_day": [0] * 7 + [1] * (hours - 7),
        },
        "daily": {
            "time": dates,
            "weather_code": [3] * days,
            "temperature_2m_max": [8.0] * days,
            "temperature_2m_min": [-1.0] * days,
            "sunrise": [d + "T06:45" for d in dates],
            "sunset": [d + "T17:40" for d in dates],
            "uv_index_max": [2.1] * days,
            "precipitation_sum": [None] * days,
            "precipitation_probability_max": [70] * days,
            "wind_speed_10m_max": [20.0] * days,
            "wind_direction_10m_dominant": [90] * days,
        },
    }


# ---------------------------------------------------------------------------
# fetch_weather
# ---------------------------------------------------------------------------

class TestFetchWeather:

    def setup_method(self):
        self.payload = _make_payload()

    def test_current_block(self, monkeypatch):
        monkeypatch.setattr("weather_dash.weather.call_api", lambda fn, **kw: self.payload)
        current = fetch_weather(46.05, 14.51)["current"]

        assert current["temperature"] == pytest.approx(4.2)
        assert current["feels_like"] == pytest.approx(1.0)
        assert current["is_day"] is True
        assert current["weathercode"] == 3
        assert current["precipitation"] == 0
        assert current["wind_direction"] == "W"

    def test_hourly_is_capped_at_forecast_hours(self, monkeypatch):
        monkeypatch.setattr("weather_dash.weather.call_api", lambda fn, **kw: self.payload)
        hourly = fetch_weather(46.05, 14.51)["hourly"]

        assert len(hourly) == FORECAST_HOURS
        assert hourly[0]["precipitation_probability"] == 0
        assert hourly[1]["precipitation_probability"] == 40
        assert hourly[0]["is_day"] is False
        assert hourly[10]["is_day"] is True

    def test_daily_rows(self, monkeypatch):
        monkeypatch.setattr("weather_dash.weather.call_api", lambda fn, **kw: self.payload)
        daily = fetch_weather(46.05, 14.51, forecast_days=3)["daily"]

        assert [d["date"] for d in daily] == ["2025-02-24", "2025-02-25", "2025-02-26"]
        assert daily[0]["precip_mm"] == 0
        assert daily[0]["rain_probability"] == 70
        assert daily[0]["wind_direction"] == "E"

    def test_units_come_from_provider(self, monkeypatch):
        monkeypatch.setattr("weather_dash.weather.call_api", lambda fn, **kw: self.payload)
        units = fetch_weather(46.05, 14.51)["units"]

        assert units["temperature"] == "°F"
        assert units["wind_speed"] == "mp/h"
        assert units["precipitation"] == "inch"

    def test_units_default_when_absent(self, monkeypatch):
        del self.payload["current_units"]
        del self.payload["daily_units"]
        monkeypatch.setattr("weather_dash.weather.call_api", lambda fn, **kw: self.payload)
        units = fetch_weather(46.05, 14.51)["units"]

        assert units == {"temperature": "°C", "wind_speed": "km/h", "precipitation": "mm", "pressure": "hPa"}

    def test_malformed_response_raises_runtime_error(self, monkeypatch):
        del self.payload["hourly"]
        monkeypatch.setattr("weather_dash.weather.call_api", lambda fn, **kw: self.payload)

        with pytest.raises(RuntimeError, match="Unexpected API response structure"):
            fetch_weather(46.05, 14.51)

    @pytest.mark.parametrize("days", [0, 17])
    def test_forecast_days_out_of_range(self, days):
        with pytest.raises(ValueError):
            fetch_weather(46.05, 14.51, forecast_days=days)
