# Project: weather-lookup
# Owner: GreenUnicorn
"""
weather.py — Fetch current conditions and a daily forecast from Open-Meteo.

Open-Meteo is free and requires no API key. One call returns the current
conditions and, optionally, a few days of daily min/max temperatures.

API docs: https://open-meteo.com/en/docs
"""

from datetime import datetime

from weather_lookup.errors import ResponseFormatError
from weather_lookup.utils import get_json

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

DAILY_VARIABLES = [
    "weathercode",
    "temperature_2m_max",
    "temperature_2m_min",
]

DEFAULT_FORECAST_DAYS = 5
DEFAULT_UNIT = "°C"


def fetch_weather(
    latitude: float,
    longitude: float,
    daily: bool = True,
    forecast_days: int = DEFAULT_FORECAST_DAYS,
) -> dict:
    """Fetch current weather (and optionally a daily forecast) from Open-Meteo.

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        daily: Also request the daily min/max/weathercode block.
        forecast_days: Number of days in the daily block (1-16).

    Returns:
        Raw JSON response dict.

    Raises:
        ApiError: If the API call fails or returns a non-2xx status.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current_weather": "true",
        "timezone": "auto",
    }
    if daily:
        params["daily"] = ",".join(DAILY_VARIABLES)
        params["forecast_days"] = forecast_days

    return get_json(OPEN_METEO_URL, params, stage="forecast")


def parse_current(data: dict) -> dict:
    """Extract current conditions from a forecast response.

    Accepts both the legacy ``current_weather`` block and the newer
    ``current`` block (requested with ``current=temperature_2m,weather_code``).

    Args:
        data: Raw JSON response from the forecast API.

    Returns:
        Dict with keys temperature, unit, weathercode.

    Raises:
        ResponseFormatError: If the body is not an object or neither block
            is present.
    """
    _require_object(data, "forecast body")

    if data.get("current_weather"):
        block = data["current_weather"]
        _require_object(block, "current_weather")
        units = _object_or_empty(data.get("current_weather_units"))
        return {
            "temperature": block.get("temperature"),
            "unit": units.get("temperature", DEFAULT_UNIT),
            "weathercode": block.get("weathercode"),
        }

    if data.get("current"):
        block = data["current"]
        _require_object(block, "current")
        units = _object_or_empty(data.get("current_units"))
        code = block.get("weather_code", block.get("weathercode"))
        return {
            "temperature": block.get("temperature_2m"),
            "unit": units.get("temperature_2m", DEFAULT_UNIT),
            "weathercode": code,
        }

    raise ResponseFormatError(
        "Unexpected API response structure: no 'current_weather' or 'current' block"
    )


def parse_daily(data: dict, forecast_days: int = DEFAULT_FORECAST_DAYS) -> list[dict] | None:
    """Extract the daily forecast from a forecast response.

    The API returns parallel arrays; entries are aligned by index and the
    result is cut to the shortest array so a ragged payload never indexes
    past its end.

    Args:
        data: Raw JSON response from the forecast API.
        forecast_days: Maximum number of days to return.

    Returns:
        List of dicts with keys date, temp_min, temp_max, weathercode, unit,
        or None if the response has no daily block.

    Raises:
        ResponseFormatError: If the body or the daily block is not an
            object, or a date is not in YYYY-MM-DD form.
    """
    _require_object(data, "forecast body")

    daily = data.get("daily")
    if not daily:
        return None
    _require_object(daily, "daily")

    units = _object_or_empty(data.get("daily_units"))
    unit = units.get("temperature_2m_max", DEFAULT_UNIT)

    dates = _list_or_empty(daily.get("time"))
    codes = _list_or_empty(daily.get("weathercode", daily.get("weather_code")))
    temp_max = _list_or_empty(daily.get("temperature_2m_max"))
    temp_min = _list_or_empty(daily.get("temperature_2m_min"))

    count = min(len(dates), len(codes), len(temp_max), len(temp_min), forecast_days)

    result = []
    for i in range(count):
        _check_date(dates[i])
        result.append({
            "date": dates[i],
            "temp_min": temp_min[i],
            "temp_max": temp_max[i],
            "weathercode": codes[i],
            "unit": unit,
        })

    return result


def _require_object(value, what: str) -> None:
    if not isinstance(value, dict):
        raise ResponseFormatError(f"Unexpected API response structure: {what} is not an object")


def _object_or_empty(value) -> dict:
    return value if isinstance(value, dict) else {}


def _list_or_empty(value) -> list:
    return value if isinstance(value, list) else []


def _check_date(date_str) -> None:
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except (TypeError, ValueError):
        raise ResponseFormatError(f"Unexpected API response structure: bad daily date {date_str!r}")
