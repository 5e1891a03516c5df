# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: API call wrapper, failure logging, date labels.
"""

from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import Any

DEFAULT_LOG_PATH = Path("logs/weather_dash.log")

# Where call_api records failures; the CLI points it at [log].path
LOG_FILE = DEFAULT_LOG_PATH

# Short weekday/month names per display language. strftime("%a") depends on
# the process locale, which is rarely sl_SI on the machines we run on.
WEEKDAYS = {
    "sl": ["pon", "tor", "sre", "čet", "pet", "sob", "ned"],
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
}
MONTHS = {
    "sl": ["jan", "feb", "mar", "apr", "maj", "jun",
           "jul", "avg", "sep", "okt", "nov", "dec"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}
TODAY_LABELS = {"sl": "Danes", "en": "Today"}


def fmt_day(value: str | date, language: str = "en") -> str:
    """Format a date as a short human-readable label.

    Args:
        value: Date in 'YYYY-MM-DD' format or a datetime.date.
        language: 'sl' or 'en' (anything else uses English names).

    Returns:
        Formatted string like 'Mon 24 Feb' or 'pon 24 feb'.
    """
    d = value if isinstance(value, date) else datetime.strptime(value, "%Y-%m-%d").date()
    weekdays = WEEKDAYS.get(language, WEEKDAYS["en"])
    months = MONTHS.get(language, MONTHS["en"])
    return f"{weekdays[d.weekday()]} {d.day:02d} {months[d.month - 1]}"


def fmt_hour(time_str: str) -> str:
    """Format an ISO datetime string as a short hour label.

    Args:
        time_str: Datetime in 'YYYY-MM-DDTHH:MM' format.

    Returns:
        Formatted string like 'HH:00'.
    """
    dt = datetime.strptime(time_str, "%Y-%m-%dT%H:%M")
    return dt.strftime("%H:%M")


def call_api(
    fn: Callable[[], Any],
    label: str = "API call",
    log_path: Path | None = None,
) -> Any:
    """Make a single API call, logging and re-raising any failure.

    There is no retry: one request per call, the caller decides what to show.

    Args:
        fn: Zero-argument callable performing the request.
        label: Human-readable name for the call, used in messages.
        log_path: Path to the log file for recording failures
            (default: LOG_FILE).

    Returns:
        The return value of fn.

    Raises:
        RuntimeError: If fn raises anything.
    """
    try:
        return fn()
    except Exception as e:
        print(f"[weather] {label} failed: {e}")
        _log_error(f"{label}: {e}", log_path=log_path or LOG_FILE)
        raise RuntimeError(f"{label} failed. Check your internet connection.") from e


def set_log_file(path: str | Path) -> None:
    """Send future call_api failure lines to path."""
    global LOG_FILE
    LOG_FILE = Path(path)


def _log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] API call failed: {message}\n")
    except OSError:
        pass  # Never crash on logging failure
