# Project: weather-lookup
# Owner: GreenUnicorn
"""
lookup.py — Fetch weather for a location and render it into a Display.

Two entry points share one fetch-and-render chain:
  get_weather_by_city    — free-text city name, geocoded first
  get_weather_by_coords  — fixed coordinates (e.g. from config.toml)

Every failure is caught here, logged, and shown as a single message in the
current region with the forecast region cleared. Nothing is retried.
"""

from pathlib import Path

from weather_lookup.codes import describe_weather_code
from weather_lookup.display import CURRENT, FORECAST, Display
from weather_lookup.errors import EmptyInputError, WeatherLookupError
from weather_lookup.geocode import geocode
from weather_lookup.render import (
    error_detail,
    label,
    render_current,
    render_error,
    render_forecast,
    render_message,
)
from weather_lookup.utils import DEFAULT_LOG_PATH, log_error
from weather_lookup.weather import (
    DEFAULT_FORECAST_DAYS,
    fetch_weather,
    parse_current,
    parse_daily,
)


def validate_city(city: str | None) -> str:
    """Return the stripped city name.

    Raises:
        EmptyInputError: If the name is missing or whitespace only.
    """
    if not city or not city.strip():
        raise EmptyInputError()
    return city.strip()


def get_weather_by_city(
    city: str | None,
    display: Display,
    language: str = "en",
    forecast_days: int = DEFAULT_FORECAST_DAYS,
    html: bool = True,
    log_path: Path = DEFAULT_LOG_PATH,
) -> dict | None:
    """Geocode a city name, fetch its weather, and render both regions.

    Args:
        city: City name as typed by the user.
        display: Regions to render into.
        language: Geocoding, label and condition language ('en' or 'pt').
        forecast_days: Number of daily entries to request and show.
        html: Render HTML markup if True, plain text otherwise.
        log_path: Log file for errors.

    Returns:
        Dict with keys city, temperature, unit, condition and forecast (the
        parsed daily entries), or None if the input was empty or any step
        failed.
    """
    try:
        place = validate_city(city)
    except EmptyInputError as e:
        log_error(str(e), log_path=log_path)
        display.write(CURRENT, render_message(label("empty_input", language), html=html))
        display.clear(FORECAST)
        return None

    display.write(CURRENT, render_message(label("searching", language), html=html))
    display.clear(FORECAST)

    try:
        loc = geocode(place, language=language)
        return _fetch_and_render(
            loc["latitude"],
            loc["longitude"],
            loc["name"],
            display,
            language=language,
            daily=True,
            forecast_days=forecast_days,
            html=html,
        )
    except WeatherLookupError as e:
        return _render_failure(e, display, language, html, log_path)


def get_weather_by_coords(
    latitude: float,
    longitude: float,
    name: str,
    display: Display,
    language: str = "en",
    daily: bool = True,
    forecast_days: int = DEFAULT_FORECAST_DAYS,
    html: bool = True,
    log_path: Path = DEFAULT_LOG_PATH,
) -> dict | None:
    """Fetch weather for fixed coordinates and render both regions.

    Args:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        name: Display name shown as the city.
        display: Regions to render into.
        language: Label and condition language.
        daily: Request and render the daily forecast as well.
        forecast_days: Number of daily entries to request and show.
        html: Render HTML markup if True, plain text otherwise.
        log_path: Log file for errors.

    Returns:
        The report dict, or None if the fetch failed.
    """
    display.clear(FORECAST)

    try:
        return _fetch_and_render(
            latitude,
            longitude,
            name,
            display,
            language=language,
            daily=daily,
            forecast_days=forecast_days,
            html=html,
        )
    except WeatherLookupError as e:
        return _render_failure(e, display, language, html, log_path)


def _fetch_and_render(
    latitude: float,
    longitude: float,
    name: str,
    display: Display,
    language: str,
    daily: bool,
    forecast_days: int,
    html: bool,
) -> dict:
    data = fetch_weather(latitude, longitude, daily=daily, forecast_days=forecast_days)

    current = parse_current(data)
    report = {
        "city": name,
        "temperature": current["temperature"],
        "unit": current["unit"],
        "condition": describe_weather_code(current["weathercode"], language),
    }
    display.write(CURRENT, render_current(report, language=language, html=html))

    days = parse_daily(data, forecast_days=forecast_days) if daily else None
    if days is not None:
        display.write(FORECAST, render_forecast(days, language=language, html=html))

    print(f"[weather] Weather data retrieved: {report}")
    report["forecast"] = days
    return report


def _render_failure(
    error: WeatherLookupError,
    display: Display,
    language: str,
    html: bool,
    log_path: Path,
) -> None:
    log_error(f"Weather lookup failed: {error}", log_path=log_path)
    display.write(CURRENT, render_error(error_detail(error, language), language=language, html=html))
    display.clear(FORECAST)
    return None
