# Project: weather-lookup
# Owner: GreenUnicorn
"""
render.py — Build the markup written into the two display regions.

Every function returns a string. HTML output is what the Streamlit page
injects; text output is what the CLI prints. Values coming from the API are
HTML-escaped before interpolation.
"""

from html import escape

from weather_lookup.codes import describe_weather_code
from weather_lookup.errors import ApiError, LocationNotFoundError, WeatherLookupError
from weather_lookup.utils import fmt_day

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "city": "City",
        "temperature": "Temperature",
        "condition": "Condition",
        "forecast_title": "Forecast for the next days",
        "searching": "Searching...",
        "empty_input": "Please enter a city name.",
        "error": "Error",
    },
    "pt": {
        "city": "Cidade",
        "temperature": "Temperatura",
        "condition": "Condição",
        "forecast_title": "Previsão para os próximos dias",
        "searching": "Buscando...",
        "empty_input": "Por favor, insira o nome de uma cidade.",
        "error": "Erro",
    },
}

TABLE_WIDTH = 44

# Portuguese wording for errors; English uses the exception message as is.
PT_STAGES = {"geocoding": "na geocodificação", "forecast": "na busca do clima"}


def label(key: str, language: str = "en") -> str:
    """Return a UI label in the given language (English if unsupported)."""
    return LABELS.get(language, LABELS["en"])[key]


def render_message(text: str, html: bool = True) -> str:
    """Render a one-line info or error message."""
    if not html:
        return text
    return f'<p class="info-message">{escape(text)}</p>'


def render_error(detail: str, language: str = "en", html: bool = True) -> str:
    """Render 'Error: <detail>' as a message."""
    return render_message(f"{label('error', language)}: {detail}", html=html)


def render_current(report: dict, language: str = "en", html: bool = True) -> str:
    """Render the current-weather region.

    Args:
        report: Dict with keys city, temperature, unit, condition.
        language: Label language.
        html: HTML markup if True, plain text otherwise.

    Returns:
        Markup for the current-weather region.
    """
    city = f"{report['city']}"
    temperature = f"{report['temperature']}{report['unit']}"
    condition = f"{report['condition']}"

    if not html:
        return "\n".join([
            f"📍 {label('city', language)}:        {city}",
            f"🌡  {label('temperature', language)}: {temperature}",
            f"☁️  {label('condition', language)}:   {condition}",
        ])

    return (
        f"<p><strong>{label('city', language)}:</strong> <span>{escape(city)}</span></p>\n"
        f"<p><strong>{label('temperature', language)}:</strong> <span>{escape(temperature)}</span></p>\n"
        f"<p><strong>{label('condition', language)}:</strong> <span>{escape(condition)}</span></p>"
    )


def render_forecast(days: list[dict], language: str = "en", html: bool = True) -> str:
    """Render the forecast region, one entry per day.

    Args:
        days: Daily forecast dicts from weather.parse_daily.
        language: Label and weekday language.
        html: HTML markup if True, a fixed-width table otherwise.

    Returns:
        Markup for the forecast region.
    """
    title = label("forecast_title", language)

    if not html:
        sep = "─" * TABLE_WIDTH
        lines = [title, sep]
        for d in days:
            unit = d.get("unit", "°C")
            desc = describe_weather_code(d["weathercode"], language)
            lines.append(
                f"{fmt_day(d['date'], language):<12}"
                f"Min: {d['temp_min']}{unit} | Max: {d['temp_max']}{unit}  {desc}"
            )
        lines.append(sep)
        return "\n".join(lines)

    parts = [f"<h3>{escape(title)}</h3>"]
    for d in days:
        unit = escape(str(d.get("unit", "°C")))
        desc = describe_weather_code(d["weathercode"], language)
        parts.append(
            '<div class="forecast-day">'
            f'<div class="date">{escape(fmt_day(d["date"], language))}</div>'
            f'<div class="temp">Min: {escape(str(d["temp_min"]))}{unit} | '
            f'Max: {escape(str(d["temp_max"]))}{unit}</div>'
            f'<div class="desc">{escape(desc)}</div>'
            "</div>"
        )
    return "\n".join(parts)


def error_detail(error: WeatherLookupError, language: str = "en") -> str:
    """Return the user-facing text for a lookup error in the given language."""
    if language != "pt":
        return str(error)
    if isinstance(error, LocationNotFoundError):
        return f'Cidade "{error.place}" não encontrada.'
    if isinstance(error, ApiError):
        stage = PT_STAGES.get(error.stage, error.stage)
        if error.status is None:
            return f"Erro de rede {stage}: {error.reason}"
        return f"Erro de rede {stage}: {error.reason} (Código: {error.status})"
    return str(error)
