# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for cli.py — argument handling and command wiring, network mocked."""

import pytest
from datetime import date

from weather_dash import utils
from weather_dash.analysis import DailySeries
from weather_dash.cli import main
from weather_dash.geocode import LocationNotFoundError


CONFIG_TOML = """
[location]
latitude = 46.0569
longitude = 14.5058
name = "Ljubljana, Slovenia"

[display]
language = "en"
forecast_days = 3
history_days = 7

[log]
path = "logs/test.log"
"""

FORECAST = {
    "current": {
        "time": "2025-02-24T10:00", "temperature": 4.0, "feels_like": 1.0, "humidity": 80,
        "is_day": True, "weathercode": 3, "wind_speed": 10.0, "wind_gusts": None,
        "wind_direction": "W", "pressure": None,
    },
    "hourly": [
        {"time": f"2025-02-24T{h:02d}:00", "temperature": 4.0, "feels_like": 1.0,
         "precipitation_probability": 10, "weathercode": 3, "is_day": True}
        for h in range(24)
    ],
    "daily": [
        {"date": "2025-02-24", "weathercode": 3, "temp_max": 8.0, "temp_min": -1.0,
         "rain_probability": 10, "precip_mm": 0.0, "wind_max": 20.0, "wind_direction": "E"},
    ],
    "units": {"temperature": "°C", "wind_speed": "km/h", "precipitation": "mm", "pressure": "hPa"},
}

SERIES = DailySeries(
    time=(date(2025, 2, 23), date(2025, 2, 24)),
    weather_code=(61, 61),
    temperature_max=(8.0, 10.0),
    temperature_min=(-1.0, 1.0),
    precipitation_sum=(4.0, 2.5),
    units={"temperature_2m_max": "°C", "precipitation_sum": "mm"},
)


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every command in an empty directory with the log path restored afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(utils, "LOG_FILE", utils.DEFAULT_LOG_PATH)
    return tmp_path


@pytest.fixture
def config_file(workdir):
    (workdir / "config.toml").write_text(CONFIG_TOML)
    return workdir / "config.toml"


# ---------------------------------------------------------------------------
# now / forecast
# ---------------------------------------------------------------------------

def test_now_uses_config_location(config_file, monkeypatch, capsys):
    calls = {}

    def fake_fetch(latitude, longitude, forecast_days):
        calls.update(latitude=latitude, forecast_days=forecast_days)
        return FORECAST

    monkeypatch.setattr("weather_dash.cli.fetch_weather", fake_fetch)

    main(["now", "--hours", "3"])

    out = capsys.readouterr().out
    assert calls == {"latitude": 46.0569, "forecast_days": 1}
    assert "Ljubljana, Slovenia" in out
    assert "Overcast" in out
    assert out.count("10%") == 3


def test_forecast_days_default_from_config(config_file, monkeypatch, capsys):
    calls = {}

    def fake_fetch(latitude, longitude, forecast_days):
        calls["forecast_days"] = forecast_days
        return FORECAST

    monkeypatch.setattr("weather_dash.cli.fetch_weather", fake_fetch)

    main(["forecast"])

    assert calls["forecast_days"] == 3
    assert "daily forecast" in capsys.readouterr().out


def test_lang_option_overrides_config(config_file, monkeypatch, capsys):
    monkeypatch.setattr("weather_dash.cli.fetch_weather", lambda **kw: FORECAST)

    main(["--lang", "sl", "forecast", "--days", "1"])

    assert "Oblačno" in capsys.readouterr().out


def test_set_log_path_from_config(config_file, monkeypatch):
    monkeypatch.setattr("weather_dash.cli.fetch_weather", lambda **kw: FORECAST)

    main(["forecast"])

    assert str(utils.LOG_FILE) == "logs/test.log"


# ---------------------------------------------------------------------------
# history / compare
# ---------------------------------------------------------------------------

def test_history_with_location_needs_no_config(monkeypatch, capsys):
    monkeypatch.setattr(
        "weather_dash.cli.geocode",
        lambda place: {"latitude": 48.85, "longitude": 2.35, "name": "Paris, France"},
    )
    monkeypatch.setattr("weather_dash.cli.fetch_weather_history", lambda **kw: SERIES)

    main(["--location", "Paris", "--lang", "en", "history", "--days", "14", "--chart"])

    out = capsys.readouterr().out
    assert "Paris, France — weather history (14 days)" in out
    assert "6.5 mm" in out
    assert "Slight rain (2 of 2 days)" in out
    assert "Precip (mm)" in out


def test_history_without_data(config_file, monkeypatch, capsys):
    monkeypatch.setattr("weather_dash.cli.fetch_weather_history", lambda **kw: None)

    main(["history"])

    assert "No historical weather data available." in capsys.readouterr().out


def test_compare_prints_both_years(config_file, monkeypatch, capsys):
    monkeypatch.setattr(
        "weather_dash.cli.fetch_yearly_comparison",
        lambda lat, lon, y1, y2: (SERIES, SERIES),
    )

    main(["compare", "2020", "2021"])

    out = capsys.readouterr().out
    assert "year comparison" in out
    assert "2020" in out and "2021" in out


@pytest.mark.parametrize("year", ["1939", str(date.today().year)])
def test_compare_rejects_out_of_range_year(config_file, year, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["compare", "2020", year])
    assert excinfo.value.code == 1
    assert "out of range" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# search / location handling
# ---------------------------------------------------------------------------

def test_search_lists_results(monkeypatch, capsys):
    monkeypatch.setattr(
        "weather_dash.cli.search_locations",
        lambda query, count: [{"name": "Celje", "country": "Slovenia", "latitude": 46.23, "longitude": 15.26}],
    )

    main(["search", "Celje"])

    assert "Celje, Slovenia" in capsys.readouterr().out


def test_search_without_results_exits(monkeypatch):
    monkeypatch.setattr("weather_dash.cli.search_locations", lambda query, count: [])
    with pytest.raises(SystemExit) as excinfo:
        main(["search", "Atlantis"])
    assert excinfo.value.code == 1


def test_lat_lon_uses_reverse_geocoded_name(monkeypatch, capsys):
    monkeypatch.setattr(
        "weather_dash.cli.reverse_geocode",
        lambda lat, lon, language: {"name": "Koper", "country": "Slovenia", "latitude": lat, "longitude": lon},
    )
    monkeypatch.setattr("weather_dash.cli.fetch_weather", lambda **kw: FORECAST)

    main(["--lat", "45.55", "--lon", "13.73", "forecast"])

    assert "Koper, Slovenia" in capsys.readouterr().out


def test_lat_without_lon_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--lat", "45.55", "now"])
    assert excinfo.value.code == 2


# ---------------------------------------------------------------------------
# error mapping
# ---------------------------------------------------------------------------

def test_missing_config_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["now"])
    assert excinfo.value.code == 1
    assert "[error] Config file not found" in capsys.readouterr().out


def test_unknown_location_exits_with_error(monkeypatch, capsys):
    def not_found(place):
        raise LocationNotFoundError(f'Location "{place}" not found. Try a more specific name.')

    monkeypatch.setattr("weather_dash.cli.geocode", not_found)

    with pytest.raises(SystemExit) as excinfo:
        main(["--location", "Atlantis", "now"])
    assert excinfo.value.code == 1
    assert '[error] Location "Atlantis" not found' in capsys.readouterr().out


def test_api_failure_exits_with_error(config_file, monkeypatch, capsys):
    def failing(**kw):
        raise RuntimeError("Open-Meteo forecast API failed. Check your internet connection.")

    monkeypatch.setattr("weather_dash.cli.fetch_weather", failing)

    with pytest.raises(SystemExit) as excinfo:
        main(["now"])
    assert excinfo.value.code == 1
    assert "[error] Open-Meteo forecast API failed" in capsys.readouterr().out
