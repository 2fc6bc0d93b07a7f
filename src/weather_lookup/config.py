# Project: weather-lookup
# Owner: GreenUnicorn
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory.
If that default file is absent the built-in defaults below are used; a path
given explicitly must exist.
"""

import copy
import tomllib
from pathlib import Path

from weather_lookup.codes import SUPPORTED_LANGUAGES

DEFAULT_CONFIG_PATH = Path("config.toml")

MAX_FORECAST_DAYS = 16

DEFAULTS: dict = {
    "location": {
        "latitude": -23.5475,
        "longitude": -46.6361,
        "name": "São Paulo",
    },
    "display": {
        "language": "en",
        "forecast_days": 5,
    },
    "log": {
        "path": "logs/weather_lookup.log",
    },
}


def load_config(path: Path | None = None) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file. None means DEFAULT_CONFIG_PATH,
            falling back to DEFAULTS when that file does not exist.

    Returns:
        Nested dict of configuration values, with defaults filled in for
        any missing [display] or [log] keys.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
        ValueError: If a key is missing or out of range.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return copy.deepcopy(DEFAULTS)

    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and adjust it."
        )

    with open(path, "rb") as f:
        raw = tomllib.load(f)

    config = _merge_defaults(raw)
    _validate(config)
    return config


def _merge_defaults(raw: dict) -> dict:
    """Fill in [display] and [log] keys the file leaves out."""
    config = copy.deepcopy(raw)
    for section in ("display", "log"):
        merged = dict(DEFAULTS[section])
        merged.update(config.get(section, {}))
        config[section] = merged
    if "location" not in config:
        config["location"] = dict(DEFAULTS["location"])
    return config


def _validate(config: dict) -> None:
    """Validate config values.

    Expected config schema::

        [location]
        latitude  = <float>   # decimal degrees, e.g. -23.5475
        longitude = <float>   # decimal degrees, e.g. -46.6361
        name      = <str>     # display name, e.g. "São Paulo"

        [display]
        language      = <str>   # "en" or "pt"
        forecast_days = <int>   # 1-16

        [log]
        path = <str>     # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict with defaults merged in.

    Raises:
        ValueError: If any required key is absent or a value is out of range.
    """
    location = config["location"]
    for key in ("latitude", "longitude", "name"):
        if key not in location:
            raise ValueError(f"Missing required config key: [location].{key}")

    display = config["display"]
    if display["language"] not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported [display].language: {display['language']!r} "
            f"(expected one of {', '.join(SUPPORTED_LANGUAGES)})"
        )

    days = display["forecast_days"]
    if isinstance(days, bool) or not isinstance(days, int) or not 1 <= days <= MAX_FORECAST_DAYS:
        raise ValueError(f"[display].forecast_days must be between 1 and {MAX_FORECAST_DAYS}, got {days!r}")
