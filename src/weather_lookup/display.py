# Project: weather-lookup
# Owner: GreenUnicorn
"""
display.py — The two output regions a lookup writes into.

A lookup only ever replaces the whole content of a region: ``current`` holds
the current conditions (or a status/error message) and ``forecast`` holds the
daily forecast list. Subclasses decide where the markup ends up.
"""

CURRENT = "current"
FORECAST = "forecast"
REGIONS = (CURRENT, FORECAST)


class Display:
    """Base class for a pair of replaceable output regions."""

    def write(self, region: str, markup: str) -> None:
        """Replace the content of a region with markup."""
        if region not in REGIONS:
            raise ValueError(f"Unknown display region: {region!r}")
        self._write(region, markup)

    def clear(self, region: str) -> None:
        self.write(region, "")

    def _write(self, region: str, markup: str) -> None:
        raise NotImplementedError


class MemoryDisplay(Display):
    """Keeps region content as strings. Used by the CLI and the tests."""

    def __init__(self) -> None:
        self.current = ""
        self.forecast = ""

    def _write(self, region: str, markup: str) -> None:
        setattr(self, region, markup)
