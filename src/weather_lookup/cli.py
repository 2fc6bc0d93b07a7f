# Project: weather-lookup
# Owner: GreenUnicorn
"""
cli.py — Command-line interface for weather-lookup.

We use argparse (stdlib) rather than click because:
- No extra dependency to install
- Sufficient for 3 simple subcommands

Commands:
  weather-lookup city NAME     — geocode a city and show its weather
  weather-lookup here          — show weather for the fixed [location] in config
  weather-lookup interactive   — read city names line by line, one lookup per Enter
"""

import argparse
import sys
from pathlib import Path

from weather_lookup.codes import SUPPORTED_LANGUAGES
from weather_lookup.config import MAX_FORECAST_DAYS, load_config
from weather_lookup.display import MemoryDisplay
from weather_lookup.lookup import get_weather_by_city, get_weather_by_coords

QUIT_WORDS = {"quit", "exit", "q"}


def _settings(args) -> dict:
    """Load config and apply command-line overrides."""
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}", file=sys.stderr)
        raise SystemExit(1)

    display = config["display"]
    days = getattr(args, "days", None)
    if days is None:
        days = display["forecast_days"]
    if not 1 <= days <= MAX_FORECAST_DAYS:
        print(f"[error] --days must be between 1 and {MAX_FORECAST_DAYS}.", file=sys.stderr)
        raise SystemExit(1)

    return {
        "location": config["location"],
        "language": args.language or display["language"],
        "forecast_days": days,
        "html": getattr(args, "html", False),
        "log_path": Path(config["log"]["path"]),
    }


def _print_regions(display: MemoryDisplay) -> None:
    print()
    print(display.current)
    if display.forecast:
        print()
        print(display.forecast)
    print()


def cmd_city(args) -> None:
    """Geocode a city name, fetch its weather, print both regions."""
    s = _settings(args)
    display = MemoryDisplay()
    report = get_weather_by_city(
        args.name,
        display,
        language=s["language"],
        forecast_days=s["forecast_days"],
        html=s["html"],
        log_path=s["log_path"],
    )
    _print_regions(display)
    if report is None:
        raise SystemExit(1)


def cmd_here(args) -> None:
    """Fetch weather for the fixed coordinates in config and print both regions."""
    s = _settings(args)
    location = s["location"]
    display = MemoryDisplay()
    report = get_weather_by_coords(
        location["latitude"],
        location["longitude"],
        location["name"],
        display,
        language=s["language"],
        daily=not args.no_forecast,
        forecast_days=s["forecast_days"],
        html=s["html"],
        log_path=s["log_path"],
    )
    _print_regions(display)
    if report is None:
        raise SystemExit(1)


def cmd_interactive(args) -> None:
    """Prompt for city names until EOF or 'quit'. Each line is one lookup."""
    s = _settings(args)
    display = MemoryDisplay()
    prompt = "Cidade: " if s["language"] == "pt" else "City: "

    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if line.strip().lower() in QUIT_WORDS:
            return
        get_weather_by_city(
            line,
            display,
            language=s["language"],
            forecast_days=s["forecast_days"],
            html=False,
            log_path=s["log_path"],
        )
        _print_regions(display)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Current weather and daily forecast from Open-Meteo",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        default=None,
        help="Path to a TOML config file (default: ./config.toml if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    lookup_opts = argparse.ArgumentParser(add_help=False)
    lookup_opts.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="Language for city names, labels and conditions (default: from config)",
    )

    render_opts = argparse.ArgumentParser(add_help=False)
    render_opts.add_argument(
        "--days",
        metavar="N",
        type=int,
        default=None,
        help=f"Days of daily forecast to show (1-{MAX_FORECAST_DAYS}, default: from config)",
    )
    render_opts.add_argument(
        "--html",
        action="store_true",
        help="Print HTML markup instead of plain text",
    )

    p_city = subparsers.add_parser(
        "city", parents=[lookup_opts, render_opts], help="Look up weather by city name"
    )
    p_city.add_argument("name", metavar="NAME", help='City name, e.g. "Tokyo" or "São Paulo"')

    p_here = subparsers.add_parser(
        "here", parents=[lookup_opts, render_opts], help="Weather for the [location] set in config"
    )
    p_here.add_argument(
        "--no-forecast",
        action="store_true",
        help="Only show current conditions",
    )

    subparsers.add_parser(
        "interactive", parents=[lookup_opts], help="Look up cities typed one per line"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "city": cmd_city,
        "here": cmd_here,
        "interactive": cmd_interactive,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
