# Project: weather-lookup
# Owner: GreenUnicorn
"""Tests for utils.py: date labels, get_json, log_error."""

import time
from unittest.mock import MagicMock, patch

import pytest
import requests

from weather_lookup.errors import ApiError
from weather_lookup.utils import fmt_day, get_json, log_error


# ---------------------------------------------------------------------------
# fmt_day
# ---------------------------------------------------------------------------

def test_fmt_day_english():
    assert fmt_day("2024-01-15") == "Mon, 15/01"


def test_fmt_day_portuguese():
    assert fmt_day("2024-01-15", "pt") == "seg., 15/01"
    assert fmt_day("2024-01-21", "pt") == "dom., 21/01"


def test_fmt_day_unknown_language_uses_english():
    assert fmt_day("2024-03-01", "xx") == "Fri, 01/03"


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="time.tzset is POSIX only")
@pytest.mark.parametrize("tz", ["UTC", "America/Sao_Paulo", "Pacific/Kiritimati", "Pacific/Pago_Pago"])
def test_fmt_day_does_not_shift_with_timezone(monkeypatch, tz):
    """The calendar day must be the same whatever the local timezone is."""
    monkeypatch.setenv("TZ", tz)
    time.tzset()
    try:
        assert fmt_day("2024-01-15") == "Mon, 15/01"
    finally:
        monkeypatch.undo()
        time.tzset()


def test_fmt_day_rejects_bad_format():
    with pytest.raises(ValueError):
        fmt_day("15/01/2024")


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------

def _response(status: int = 200, reason: str = "OK", body=None) -> MagicMock:
    r = MagicMock()
    r.status_code = status
    r.reason = reason
    r.ok = status < 400
    r.json.return_value = body if body is not None else {}
    return r


def test_get_json_returns_body():
    with patch("weather_lookup.utils.requests.get", return_value=_response(body={"a": 1})) as get:
        assert get_json("https://example.test", {"x": 1}, stage="forecast") == {"a": 1}
    get.assert_called_once()
    _, kwargs = get.call_args
    assert kwargs["params"] == {"x": 1}


def test_get_json_raises_api_error_with_status():
    with patch("weather_lookup.utils.requests.get", return_value=_response(500, "Internal Server Error")):
        with pytest.raises(ApiError) as exc:
            get_json("https://example.test", {}, stage="geocoding")
    assert exc.value.status == 500
    assert exc.value.stage == "geocoding"
    assert "Internal Server Error" in str(exc.value)
    assert "(Code: 500)" in str(exc.value)


def test_get_json_wraps_transport_errors():
    with patch("weather_lookup.utils.requests.get", side_effect=requests.ConnectionError("boom")):
        with pytest.raises(ApiError, match="Network error during forecast: boom"):
            get_json("https://example.test", {}, stage="forecast")


def test_get_json_wraps_invalid_json():
    r = _response()
    r.json.side_effect = ValueError("Expecting value")
    with patch("weather_lookup.utils.requests.get", return_value=r):
        with pytest.raises(ApiError, match="invalid JSON"):
            get_json("https://example.test", {}, stage="forecast")


def test_get_json_does_not_retry():
    with patch("weather_lookup.utils.requests.get", return_value=_response(503, "Service Unavailable")) as get:
        with pytest.raises(ApiError):
            get_json("https://example.test", {}, stage="forecast")
    assert get.call_count == 1


# ---------------------------------------------------------------------------
# log_error
# ---------------------------------------------------------------------------

def test_log_error_appends_line(tmp_path, capsys):
    log_path = tmp_path / "logs" / "weather.log"
    log_error("first", log_path=log_path)
    log_error("second", log_path=log_path)

    lines = log_path.read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("[ERROR] first")
    assert lines[1].endswith("[ERROR] second")
    assert "[error] first" in capsys.readouterr().err


def test_log_error_never_raises_on_unwritable_path(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    # Parent "directory" is a regular file, so mkdir fails
    log_error("oops", log_path=blocker / "sub" / "weather.log")
