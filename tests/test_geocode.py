# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_geocode.py — Unit tests for geocode.py.

All tests mock call_api — no real network calls.
"""

import pytest

from weather_dash.geocode import (
    LocationNotFoundError,
    format_location_name,
    geocode,
    reverse_geocode,
    search_locations,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_result(name="Tokyo", admin1="Tokyo", country="Japan", lat=35.6895, lon=139.6917) -> dict:
    return {
        "name": name,
        "admin1": admin1,
        "country": country,
        "latitude": lat,
        "longitude": lon,
    }


# ---------------------------------------------------------------------------
# geocode — successful cases
# ---------------------------------------------------------------------------

def test_geocode_returns_latitude_longitude_name(monkeypatch):
    payload = {"results": [_make_result()]}
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: payload)

    result = geocode("Tokyo")

    assert result["latitude"] == pytest.approx(35.6895)
    assert result["longitude"] == pytest.approx(139.6917)
    assert result["name"] == "Tokyo, Tokyo, Japan"


def test_geocode_name_without_admin1(monkeypatch):
    payload = {"results": [_make_result(name="Ljubljana", admin1=None, country="Slovenia")]}
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: payload)

    assert geocode("Ljubljana")["name"] == "Ljubljana, Slovenia"


def test_geocode_uses_first_result_only(monkeypatch):
    payload = {"results": [
        _make_result(name="Paris", admin1="Île-de-France", country="France", lat=48.8566, lon=2.3522),
        _make_result(name="Paris", admin1="Texas", country="United States", lat=33.6609, lon=-95.5555),
    ]}
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: payload)

    result = geocode("Paris")

    assert result["latitude"] == pytest.approx(48.8566)
    assert "France" in result["name"]


# ---------------------------------------------------------------------------
# geocode — failure cases
# ---------------------------------------------------------------------------

def test_geocode_raises_when_no_results(monkeypatch):
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: {})

    with pytest.raises(LocationNotFoundError, match="Atlantis"):
        geocode("Atlantis")


def test_location_not_found_is_value_error():
    assert issubclass(LocationNotFoundError, ValueError)


def test_geocode_propagates_api_failure(monkeypatch):
    def failing(fn, **kw):
        raise RuntimeError("Geocoding API failed.")

    monkeypatch.setattr("weather_dash.geocode.call_api", failing)

    with pytest.raises(RuntimeError):
        geocode("Tokyo")


# ---------------------------------------------------------------------------
# search_locations
# ---------------------------------------------------------------------------

def test_search_returns_all_results(monkeypatch):
    payload = {"results": [_make_result(), _make_result(name="Kyoto")]}
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: payload)

    assert [r["name"] for r in search_locations("to")] == ["Tokyo", "Kyoto"]


def test_search_blank_query_skips_request(monkeypatch):
    def should_not_call(fn, **kw):
        raise AssertionError("no request expected")

    monkeypatch.setattr("weather_dash.geocode.call_api", should_not_call)

    assert search_locations("   ") == []


def test_search_sends_stripped_query(monkeypatch):
    sent = {}

    def fake_get(url, params, timeout):
        sent.update(params)

        class Response:
            def raise_for_status(self):
                pass

            def json(self):
                return {"results": []}

        return Response()

    monkeypatch.setattr("weather_dash.geocode.requests.get", fake_get)

    assert search_locations("  Maribor ", count=3) == []
    assert sent["name"] == "Maribor"
    assert sent["count"] == 3


def test_format_location_name_skips_empty_parts():
    assert format_location_name({"name": "Bled", "admin1": "", "country": "Slovenia"}) == "Bled, Slovenia"


# ---------------------------------------------------------------------------
# reverse_geocode
# ---------------------------------------------------------------------------

def test_reverse_geocode_returns_city(monkeypatch):
    payload = {"city": "Ljubljana", "countryName": "Slovenija", "latitude": 46.05, "longitude": 14.5}
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: payload)

    result = reverse_geocode(46.05, 14.5)

    assert result == {"name": "Ljubljana", "country": "Slovenija", "latitude": 46.05, "longitude": 14.5}


def test_reverse_geocode_without_city_returns_none(monkeypatch):
    monkeypatch.setattr("weather_dash.geocode.call_api", lambda fn, **kw: {"city": ""})

    assert reverse_geocode(0.0, -30.0) is None
