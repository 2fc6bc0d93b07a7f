# Project: weather-lookup
# Owner: GreenUnicorn
"""
geocode.py — Look up coordinates for a city name using Open-Meteo Geocoding API.

Free, no API key required.
API docs: https://open-meteo.com/en/docs/geocoding-api
"""

from weather_lookup.errors import LocationNotFoundError, ResponseFormatError
from weather_lookup.utils import get_json

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


def geocode(place: str, language: str = "en") -> dict:
    """Look up coordinates for a city name using Open-Meteo Geocoding.

    Args:
        place: Human-readable city name, e.g. 'Tokyo' or 'São Paulo'.
        language: Language for the resolved name ('en', 'pt', ...).

    Returns:
        Dict with keys: latitude (float), longitude (float), name (str).
        The name is the city name as the API spells it.

    Raises:
        LocationNotFoundError: If no results are found for the place name.
        ApiError: If the API call fails or returns a non-2xx status.
        ResponseFormatError: If the body or its first result is malformed.
    """
    params = {
        "name": place,
        "count": 1,
        "language": language,
        "format": "json",
    }

    data = get_json(GEOCODING_URL, params, stage="geocoding")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ResponseFormatError("Unexpected API response structure: geocoding body is not an object")

    results = data.get("results")
    if not results:
        raise LocationNotFoundError(place)

    result = results[0] if isinstance(results, list) else None
    if not isinstance(result, dict) or "latitude" not in result or "longitude" not in result:
        raise ResponseFormatError(
            "Unexpected API response structure: geocoding result has no latitude/longitude"
        )

    return {
        "latitude": result["latitude"],
        "longitude": result["longitude"],
        "name": result.get("name") or place,
    }
