"""
test_config.py — Tests for config loading and validation.

We write a temporary TOML file in each test so we don't depend on
a real config.toml existing in the project.
"""

import pytest

from weather_lookup.config import DEFAULTS, load_config


VALID_TOML = """
[location]
latitude = 38.7167
longitude = -9.1333
name = "Lisboa"

[display]
language = "pt"
forecast_days = 7

[log]
path = "logs/custom.log"
"""


def test_load_valid_config(tmp_path):
    """A valid config file should load without error."""
    config_file = tmp_path / "config.toml"
    config_file.write_text(VALID_TOML)

    config = load_config(config_file)

    assert config["location"]["name"] == "Lisboa"
    assert config["display"]["language"] == "pt"
    assert config["display"]["forecast_days"] == 7
    assert config["log"]["path"] == "logs/custom.log"


def test_missing_explicit_file_raises(tmp_path):
    """An explicitly given config file that does not exist raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.toml")


def test_missing_default_file_uses_defaults(tmp_path, monkeypatch):
    """Without ./config.toml the built-in defaults apply."""
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config == DEFAULTS
    # Callers get a copy, not the module-level dict
    config["display"]["language"] = "pt"
    assert DEFAULTS["display"]["language"] == "en"


def test_default_file_is_read_when_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.toml").write_text(VALID_TOML)
    assert load_config()["location"]["name"] == "Lisboa"


def test_partial_config_gets_defaults(tmp_path):
    """Only [location] given: [display] and [log] fall back to defaults."""
    config_file = tmp_path / "config.toml"
    config_file.write_text('[location]\nlatitude = 1.0\nlongitude = 2.0\nname = "X"\n')

    config = load_config(config_file)

    assert config["display"] == DEFAULTS["display"]
    assert config["log"] == DEFAULTS["log"]


def test_missing_location_key_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[location]\nlatitude = 1.0\nlongitude = 2.0\n")

    with pytest.raises(ValueError, match="name"):
        load_config(config_file)


def test_unsupported_language_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text('[display]\nlanguage = "de"\n')

    with pytest.raises(ValueError, match="language"):
        load_config(config_file)


@pytest.mark.parametrize("days", [0, 17, "5"])
def test_out_of_range_forecast_days_raises(tmp_path, days):
    config_file = tmp_path / "config.toml"
    value = f'"{days}"' if isinstance(days, str) else days
    config_file.write_text(f"[display]\nforecast_days = {value}\n")

    with pytest.raises(ValueError, match="forecast_days"):
        load_config(config_file)


def test_boolean_forecast_days_raises(tmp_path):
    """TOML true is a bool, not a day count."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("[display]\nforecast_days = true\n")

    with pytest.raises(ValueError, match="forecast_days"):
        load_config(config_file)
