# Project: weather-lookup
# Owner: GreenUnicorn
"""
errors.py — Exceptions raised while looking up weather.

Everything a lookup can fail with derives from WeatherLookupError, so the
orchestrator in lookup.py only needs one except clause.
"""


class WeatherLookupError(Exception):
    """Base class for every error a lookup can surface to the user."""


class EmptyInputError(WeatherLookupError, ValueError):
    """Raised when no city name was given."""

    def __init__(self) -> None:
        super().__init__("City name must not be empty.")


class LocationNotFoundError(WeatherLookupError, ValueError):
    """Raised when the geocoding API returns no results for a place name."""

    def __init__(self, place: str) -> None:
        self.place = place
        super().__init__(f'City "{place}" not found.')


class ApiError(WeatherLookupError, RuntimeError):
    """Raised when an Open-Meteo call fails or answers with a non-2xx status.

    Attributes:
        stage: Which call failed, 'geocoding' or 'forecast'.
        status: HTTP status code, or None if no response was received.
        reason: HTTP reason phrase or the transport error text.
    """

    def __init__(self, stage: str, status: int | None, reason: str) -> None:
        self.stage = stage
        self.status = status
        self.reason = reason
        if status is None:
            message = f"Network error during {stage}: {reason}"
        else:
            message = f"Network error during {stage}: {reason} (Code: {status})"
        super().__init__(message)


class ResponseFormatError(WeatherLookupError, RuntimeError):
    """Raised when a response lacks a block the parser needs."""
