# Project: weather-lookup
# Owner: GreenUnicorn
"""
utils.py — Shared utilities: date labels, JSON over HTTP, and error logging.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Any

import requests

from weather_lookup.errors import ApiError

DEFAULT_LOG_PATH = Path("logs/weather_lookup.log")
REQUEST_TIMEOUT_SECONDS = 10

WEEKDAYS: dict[str, list[str]] = {
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
    "pt": ["seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom."],
}


def fmt_day(date_str: str, language: str = "en") -> str:
    """Format a date string as a short weekday + day/month label.

    The string is parsed as a plain calendar date with no timezone attached,
    so the label never drifts to the previous or next day.

    Args:
        date_str: Date in 'YYYY-MM-DD' format.
        language: 'en' or 'pt'. Anything else falls back to English.

    Returns:
        Formatted string like 'Mon, 15/01' or 'seg., 15/01'.
    """
    dt = datetime.strptime(date_str, "%Y-%m-%d").date()
    weekday = WEEKDAYS.get(language, WEEKDAYS["en"])[dt.weekday()]
    return f"{weekday}, {dt.day:02d}/{dt.month:02d}"


def get_json(url: str, params: dict, stage: str) -> Any:
    """GET a URL and decode the JSON body. No retries.

    Args:
        url: Endpoint URL.
        params: Query parameters.
        stage: Short name of the call ('geocoding', 'forecast'), used in errors.

    Returns:
        The decoded JSON body.

    Raises:
        ApiError: If the request fails or the status is not 2xx.
    """
    try:
        r = requests.get(url, params=params, timeout=REQUEST_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        raise ApiError(stage, None, str(e)) from e

    if not r.ok:
        raise ApiError(stage, r.status_code, r.reason or "")

    try:
        return r.json()
    except ValueError as e:
        raise ApiError(stage, r.status_code, f"invalid JSON body ({e})") from e


def log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Print an error to stderr and append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    print(f"[error] {message}", file=sys.stderr)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure
