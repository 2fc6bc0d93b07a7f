# Project: weather-lookup
# Owner: GreenUnicorn
"""
test_geocode.py — Unit tests for geocode.py.

All tests mock get_json, so no real network calls happen.
"""

import pytest

from weather_lookup.errors import ApiError, ResponseFormatError, WeatherLookupError
from weather_lookup.geocode import GEOCODING_URL, LocationNotFoundError, geocode


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_result(name="Tokyo", lat=35.6895, lon=139.6917) -> dict:
    return {
        "name": name,
        "admin1": "Tokyo",
        "country": "Japan",
        "latitude": lat,
        "longitude": lon,
    }


# ---------------------------------------------------------------------------
# geocode — successful cases
# ---------------------------------------------------------------------------

def test_geocode_returns_latitude_longitude_name(monkeypatch):
    payload = {"results": [_make_result()]}
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: payload)

    result = geocode("tokyo")

    assert result["latitude"] == pytest.approx(35.6895)
    assert result["longitude"] == pytest.approx(139.6917)
    assert result["name"] == "Tokyo"


def test_geocode_uses_first_result_only(monkeypatch):
    payload = {"results": [
        _make_result(name="Paris", lat=48.8566, lon=2.3522),
        _make_result(name="Paris", lat=33.6609, lon=-95.5555),
    ]}
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: payload)

    result = geocode("Paris")

    assert result["latitude"] == pytest.approx(48.8566)


def test_geocode_sends_expected_params(monkeypatch):
    calls = []

    def fake_get_json(url, params, stage):
        calls.append((url, params, stage))
        return {"results": [_make_result(name="São Paulo")]}

    monkeypatch.setattr("weather_lookup.geocode.get_json", fake_get_json)

    geocode("sao paulo", language="pt")

    url, params, stage = calls[0]
    assert url == GEOCODING_URL
    assert params == {"name": "sao paulo", "count": 1, "language": "pt", "format": "json"}
    assert stage == "geocoding"


def test_geocode_falls_back_to_query_when_name_missing(monkeypatch):
    raw = _make_result()
    raw.pop("name")
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: {"results": [raw]})

    assert geocode("Tokyo")["name"] == "Tokyo"


# ---------------------------------------------------------------------------
# geocode — not found / failures
# ---------------------------------------------------------------------------

def test_geocode_raises_location_not_found_when_empty_results(monkeypatch):
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: {"results": []})
    with pytest.raises(LocationNotFoundError, match="not found"):
        geocode("xyznonexistent")


def test_geocode_raises_location_not_found_when_no_results_key(monkeypatch):
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: {"generationtime_ms": 0.5})
    with pytest.raises(LocationNotFoundError) as exc:
        geocode("xyznonexistent")
    assert exc.value.place == "xyznonexistent"
    assert str(exc.value) == 'City "xyznonexistent" not found.'


def test_location_not_found_is_value_error():
    assert issubclass(LocationNotFoundError, ValueError)
    assert issubclass(LocationNotFoundError, WeatherLookupError)


def test_geocode_propagates_api_error(monkeypatch):
    def fail(url, params, stage):
        raise ApiError(stage, 502, "Bad Gateway")

    monkeypatch.setattr("weather_lookup.geocode.get_json", fail)
    with pytest.raises(ApiError, match="geocoding: Bad Gateway \\(Code: 502\\)"):
        geocode("Tokyo")


# ---------------------------------------------------------------------------
# geocode — malformed bodies
# ---------------------------------------------------------------------------

def test_geocode_raises_response_format_error_without_longitude(monkeypatch):
    payload = {"results": [{"name": "X", "latitude": 1.0}]}
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: payload)
    with pytest.raises(ResponseFormatError, match="latitude/longitude"):
        geocode("X")


def test_geocode_raises_response_format_error_for_non_object_body(monkeypatch):
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: ["X"])
    with pytest.raises(ResponseFormatError, match="not an object"):
        geocode("X")


def test_geocode_null_body_means_not_found(monkeypatch):
    monkeypatch.setattr("weather_lookup.geocode.get_json", lambda url, params, **kw: None)
    with pytest.raises(LocationNotFoundError):
        geocode("X")
