# Project: weather-lookup
# Owner: GreenUnicorn
"""
codes.py — Translate WMO weather codes into short descriptions.

Open-Meteo reports conditions as WMO codes (0-99, sparse).
Code table: https://open-meteo.com/en/docs (section "WMO Weather interpretation codes")
"""

DEFAULT_LANGUAGE = "en"

WEATHER_CODES: dict[str, dict[int, str]] = {
    "en": {
        0: "Clear sky",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Drizzle: Light",
        53: "Drizzle: Moderate",
        55: "Drizzle: Dense",
        56: "Freezing drizzle: Light",
        57: "Freezing drizzle: Dense",
        61: "Rain: Slight",
        63: "Rain: Moderate",
        65: "Rain: Heavy",
        66: "Freezing rain: Light",
        67: "Freezing rain: Heavy",
        71: "Snow fall: Slight",
        73: "Snow fall: Moderate",
        75: "Snow fall: Heavy",
        77: "Snow grains",
        80: "Rain showers: Slight",
        81: "Rain showers: Moderate",
        82: "Rain showers: Violent",
        85: "Snow showers: Slight",
        86: "Snow showers: Heavy",
        95: "Thunderstorm: Slight or moderate",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    },
    "pt": {
        0: "Céu limpo",
        1: "Principalmente limpo",
        2: "Parcialmente nublado",
        3: "Encoberto",
        45: "Nevoeiro",
        48: "Nevoeiro depositando rima",
        51: "Garoa: Leve",
        53: "Garoa: Moderada",
        55: "Garoa: Densa",
        56: "Garoa Congelante: Leve",
        57: "Garoa Congelante: Densa",
        61: "Chuva: Leve",
        63: "Chuva: Moderada",
        65: "Chuva: Forte",
        66: "Chuva Congelante: Leve",
        67: "Chuva Congelante: Forte",
        71: "Queda de neve: Leve",
        73: "Queda de neve: Moderada",
        75: "Queda de neve: Forte",
        77: "Grãos de neve",
        80: "Pancadas de chuva: Leves",
        81: "Pancadas de chuva: Moderadas",
        82: "Pancadas de chuva: Violentas",
        85: "Pancadas de neve: Leves",
        86: "Pancadas de neve: Fortes",
        95: "Trovoada: Leve ou moderada",
        96: "Trovoada com granizo leve",
        99: "Trovoada com granizo forte",
    },
}

UNAVAILABLE: dict[str, str] = {
    "en": "Condition unavailable",
    "pt": "Condição não disponível",
}

SUPPORTED_LANGUAGES = tuple(WEATHER_CODES)


def describe_weather_code(code: int | None, language: str = DEFAULT_LANGUAGE) -> str:
    """Return a human-readable description for a WMO weather code.

    Args:
        code: WMO code as reported by Open-Meteo (may be None).
        language: 'en' or 'pt'. Anything else falls back to English.

    Returns:
        The description, or the "unavailable" string for unknown codes.
    """
    if language not in WEATHER_CODES:
        language = DEFAULT_LANGUAGE
    try:
        key = int(code)
    except (TypeError, ValueError):
        return UNAVAILABLE[language]
    return WEATHER_CODES[language].get(key, UNAVAILABLE[language])
