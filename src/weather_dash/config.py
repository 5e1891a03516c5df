# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing.
"""

import copy
import tomllib
from pathlib import Path

from weather_dash.codes import LANGUAGES
from weather_dash.history import HISTORY_PERIODS
from weather_dash.weather import MAX_FORECAST_DAYS


DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULT_CONFIG = {
    "location": {
        "latitude": 46.0569,
        "longitude": 14.5058,
        "name": "Ljubljana, Slovenia",
    },
    "display": {
        "language": "sl",
        "forecast_days": 7,
        "history_days": 14,
    },
    "log": {
        "path": "logs/weather_dash.log",
    },
}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your location."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return config


def load_config_or_default(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Like load_config, but fall back to the built-in defaults if the file is absent.

    An existing but invalid file still raises ValueError.
    """
    if not path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)
    return load_config(path)


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [location]
        latitude  = <float>   # decimal degrees, e.g. 46.0569
        longitude = <float>   # decimal degrees, e.g. 14.5058
        name      = <str>     # display name, e.g. "Ljubljana, Slovenia"

        [display]
        language      = <str>   # "sl" or "en"
        forecast_days = <int>   # 1-16
        history_days  = <int>   # 7, 14, 21 or 30

        [log]
        path = <str>     # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or a display
            value is out of range.
    """
    required_sections = ["location", "display", "log"]
    for section in required_sections:
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")

    location = config["location"]
    for key in ("latitude", "longitude", "name"):
        if key not in location:
            raise ValueError(f"Missing required config key: [location].{key}")

    display = config["display"]
    for key in ("language", "forecast_days", "history_days"):
        if key not in display:
            raise ValueError(f"Missing required config key: [display].{key}")

    if "path" not in config["log"]:
        raise ValueError("Missing required config key: [log].path")

    if display["language"] not in LANGUAGES:
        raise ValueError(
            f"Invalid [display].language: {display['language']!r} "
            f"(expected one of {', '.join(LANGUAGES)})"
        )
    if not 1 <= display["forecast_days"] <= MAX_FORECAST_DAYS:
        raise ValueError(f"Invalid [display].forecast_days: must be 1-{MAX_FORECAST_DAYS}")
    if display["history_days"] not in HISTORY_PERIODS:
        periods = ", ".join(str(d) for d in HISTORY_PERIODS)
        raise ValueError(f"Invalid [display].history_days: must be one of {periods}")
