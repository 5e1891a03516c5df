# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for weather-dash.

We use argparse (stdlib) rather than click because:
- No extra dependency to install
- Sufficient for a handful of subcommands
- Easier for beginners to read and understand

Commands:
  weather-dash now                  — current conditions + next hours
  weather-dash forecast             — daily forecast table
  weather-dash history              — statistics for the last N days
  weather-dash compare YEAR1 YEAR2  — two calendar years side by side
  weather-dash search QUERY         — list matching places
"""

import argparse
from datetime import date
from pathlib import Path

from weather_dash.analysis import analyze, compare_years, daily_breakdown
from weather_dash.chart import (
    render_comparison,
    render_current,
    render_daily_table,
    render_history_summary,
    render_history_table,
    render_hourly_table,
    render_precipitation_chart,
)
from weather_dash.codes import LANGUAGES
from weather_dash.config import DEFAULT_CONFIG_PATH, load_config, load_config_or_default
from weather_dash.geocode import (
    LocationNotFoundError,
    format_location_name,
    geocode,
    reverse_geocode,
    search_locations,
)
from weather_dash.history import HISTORY_PERIODS, fetch_weather_history, fetch_yearly_comparison
from weather_dash.weather import MAX_FORECAST_DAYS, fetch_weather
from weather_dash.utils import set_log_file


def _load_settings(args) -> dict:
    """Load config; it is only mandatory when no location is given on the command line."""
    path = Path(args.config)
    if args.command == "search" or args.location or (args.lat is not None and args.lon is not None):
        config = load_config_or_default(path)
    else:
        config = load_config(path)
    if args.lang:
        config["display"]["language"] = args.lang
    return config


def _resolve_location(args, config: dict) -> tuple[float, float, str]:
    """Pick coordinates from --location, --lat/--lon, or the config file."""
    if args.location:
        loc = geocode(args.location)
        return loc["latitude"], loc["longitude"], loc["name"]

    if args.lat is not None and args.lon is not None:
        place = reverse_geocode(args.lat, args.lon, language=config["display"]["language"])
        if place:
            name = ", ".join(p for p in (place["name"], place["country"]) if p)
        else:
            name = f"{args.lat:.4f}°, {args.lon:.4f}°"
        return args.lat, args.lon, name

    location = config["location"]
    return location["latitude"], location["longitude"], location["name"]


def cmd_now(args, config: dict) -> None:
    """Print current conditions and the next hours."""
    latitude, longitude, display_name = _resolve_location(args, config)
    language = config["display"]["language"]

    print(f"Fetching weather for {display_name}...")
    data = fetch_weather(latitude=latitude, longitude=longitude, forecast_days=1)

    print()
    print(render_current(data["current"], data["units"], display_name, language))
    print()
    print(render_hourly_table(data["hourly"][:args.hours], data["units"], display_name, language))


def cmd_forecast(args, config: dict) -> None:
    """Print the daily forecast table."""
    latitude, longitude, display_name = _resolve_location(args, config)
    language = config["display"]["language"]
    days = args.days or config["display"]["forecast_days"]

    print(f"Fetching {days}-day forecast for {display_name}...")
    data = fetch_weather(latitude=latitude, longitude=longitude, forecast_days=days)

    print()
    print(render_daily_table(data["daily"], data["units"], display_name, language,
                             today=date.today().isoformat()))


def cmd_history(args, config: dict) -> None:
    """Print history statistics and the daily breakdown for the last N days."""
    latitude, longitude, display_name = _resolve_location(args, config)
    language = config["display"]["language"]
    days = args.days or config["display"]["history_days"]

    print(f"Fetching {days}-day weather history for {display_name}...")
    series = fetch_weather_history(latitude=latitude, longitude=longitude, days=days)
    summary = analyze(series, language)

    print()
    print(render_history_summary(summary, display_name, days, language))
    if summary is None:
        return

    rows = daily_breakdown(series, language)
    print()
    print(render_history_table(rows, series.units, language))
    if args.chart:
        print()
        print(render_precipitation_chart(rows, series.units.get("precipitation_sum", "mm"), language))


def cmd_compare(args, config: dict) -> None:
    """Print two calendar years side by side."""
    latitude, longitude, display_name = _resolve_location(args, config)
    language = config["display"]["language"]

    current_year = date.today().year
    for year in (args.year1, args.year2):
        if not 1940 <= year < current_year:
            print(f"[error] Year {year} is out of range. Use a complete year between 1940 and {current_year - 1}.")
            raise SystemExit(1)

    print(f"Fetching {args.year1} and {args.year2} for {display_name}...")
    first, second = fetch_yearly_comparison(latitude, longitude, args.year1, args.year2)
    comparison = compare_years(args.year1, first, args.year2, second, language)

    print()
    print(render_comparison(comparison, display_name, language))


def cmd_search(args, config: dict) -> None:
    """List places matching a query."""
    results = search_locations(args.query, count=args.count)
    if not results:
        print(f'[error] Location "{args.query}" not found. Try a more specific name.')
        raise SystemExit(1)
    for r in results:
        print(f"📍 {format_location_name(r):<50} {r['latitude']:>9.4f}, {r['longitude']:>9.4f}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="weather-dash",
        description="Weather dashboard for the terminal using Open-Meteo",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to the TOML config file (default: config.toml)",
    )
    parser.add_argument(
        "--location",
        metavar="PLACE",
        default=None,
        help='Look up coordinates by place name, e.g. "Tokyo" or "London, UK"',
    )
    parser.add_argument("--lat", type=float, default=None, help="Latitude in decimal degrees")
    parser.add_argument("--lon", type=float, default=None, help="Longitude in decimal degrees")
    parser.add_argument(
        "--lang",
        choices=LANGUAGES,
        default=None,
        help="Display language (overrides [display].language)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_now = subparsers.add_parser("now", help="Current conditions and the next hours")
    p_now.add_argument("--hours", type=int, default=12, help="Hours to show (1-24). Default: 12.")

    p_forecast = subparsers.add_parser("forecast", help="Daily forecast table")
    p_forecast.add_argument(
        "--days",
        type=int,
        choices=range(1, MAX_FORECAST_DAYS + 1),
        metavar="N",
        default=None,
        help=f"Days to forecast (1-{MAX_FORECAST_DAYS}). Default: [display].forecast_days.",
    )

    p_history = subparsers.add_parser("history", help="Weather statistics for recent days")
    p_history.add_argument(
        "--days",
        type=int,
        choices=sorted(HISTORY_PERIODS),
        default=None,
        help="Period length. Default: [display].history_days.",
    )
    p_history.add_argument("--chart", action="store_true", help="Also draw a precipitation bar chart")

    p_compare = subparsers.add_parser("compare", help="Compare two calendar years")
    p_compare.add_argument("year1", type=int)
    p_compare.add_argument("year2", type=int)

    p_search = subparsers.add_parser("search", help="Find places by name")
    p_search.add_argument("query")
    p_search.add_argument("--count", type=int, default=10, help="Maximum results. Default: 10.")

    args = parser.parse_args(argv)

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    commands = {
        "now": cmd_now,
        "forecast": cmd_forecast,
        "history": cmd_history,
        "compare": cmd_compare,
        "search": cmd_search,
    }

    try:
        config = _load_settings(args)
        set_log_file(config["log"]["path"])
        commands[args.command](args, config)
    except (LocationNotFoundError, FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)
    except RuntimeError as e:
        print(f"[error] {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
