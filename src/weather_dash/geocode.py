# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
geocode.py — Place names to coordinates and back.

Forward search uses the Open-Meteo Geocoding API (free, no API key).
API docs: https://open-meteo.com/en/docs/geocoding-api

Reverse lookup uses BigDataCloud's free client-side endpoint.
API docs: https://www.bigdatacloud.com/free-api/free-reverse-geocode-to-city-api
"""

import requests

from weather_dash.utils import call_api

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
REVERSE_GEOCODING_URL = "https://api.bigdatacloud.net/data/reverse-geocode-client"

# Quick picks shown when no location has been searched yet
DEFAULT_LOCATIONS = [
    {"name": "New York",  "latitude": 40.7128,  "longitude": -74.0060, "country": "United States"},
    {"name": "London",    "latitude": 51.5074,  "longitude": -0.1278,  "country": "United Kingdom"},
    {"name": "Tokyo",     "latitude": 35.6762,  "longitude": 139.6503, "country": "Japan"},
    {"name": "Sydney",    "latitude": -33.8688, "longitude": 151.2093, "country": "Australia"},
    {"name": "Ljubljana", "latitude": 46.0569,  "longitude": 14.5058,  "country": "Slovenia"},
]


class LocationNotFoundError(ValueError):
    """Raised when a place name has no geocoding match."""


def search_locations(query: str, count: int = 10) -> list[dict]:
    """Search for places matching a name.

    Args:
        query: Free-text place name; surrounding whitespace is ignored.
        count: Maximum number of results to request.

    Returns:
        Raw Open-Meteo result dicts (name, latitude, longitude, country,
        admin1, timezone, ...). Empty list for a blank query or no match.

    Raises:
        RuntimeError: If the API call fails.
    """
    query = query.strip()
    if not query:
        return []

    params = {
        "name": query,
        "count": count,
        "language": "en",
        "format": "json",
    }

    def _call():
        r = requests.get(GEOCODING_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    data = call_api(_call, label=f"Geocoding API for '{query}'")
    return data.get("results") or []


def format_location_name(result: dict) -> str:
    """Build a 'City, Region, Country' name, skipping empty parts."""
    name_parts = [result.get("name") or ""]
    if result.get("admin1"):
        name_parts.append(result["admin1"])
    if result.get("country"):
        name_parts.append(result["country"])
    return ", ".join(part for part in name_parts if part)


def geocode(place: str) -> dict:
    """Look up coordinates for a place name.

    Args:
        place: Human-readable place name, e.g. 'Tokyo' or 'London, UK'.

    Returns:
        Dict with keys: latitude (float), longitude (float), name (str).
        The name is a canonical 'City, Region, Country' string.

    Raises:
        LocationNotFoundError: If no results are found for the place name.
        RuntimeError: If the API call fails.
    """
    results = search_locations(place, count=1)
    if not results:
        raise LocationNotFoundError(f'Location "{place}" not found. Try a more specific name.')

    result = results[0]
    return {
        "latitude": result["latitude"],
        "longitude": result["longitude"],
        "name": format_location_name(result) or place,
    }


def reverse_geocode(latitude: float, longitude: float, language: str = "sl") -> dict | None:
    """Find the city nearest to a coordinate pair.

    Returns:
        Dict with keys name, country, latitude, longitude — or None when the
        service knows no city for the position.

    Raises:
        RuntimeError: If the API call fails.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "localityLanguage": language,
    }

    def _call():
        r = requests.get(REVERSE_GEOCODING_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    data = call_api(_call, label="Reverse geocoding API")
    if not data.get("city"):
        return None

    return {
        "name": data["city"],
        "country": data.get("countryName", ""),
        "latitude": data.get("latitude", latitude),
        "longitude": data.get("longitude", longitude),
    }
