# Project: weather-lookup
# Owner: GreenUnicorn
"""
app.py — Streamlit weather page: search a city, see current weather + forecast.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import plotly.graph_objects as go
import streamlit as st

from weather_lookup.config import load_config
from weather_lookup.display import Display
from weather_lookup.lookup import get_weather_by_city, get_weather_by_coords
from weather_lookup.utils import fmt_day


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather",
    page_icon="🌤",
    layout="centered",
    initial_sidebar_state="collapsed",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 720px; }

  html, body, [class*="css"] {
    font-family: -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", Roboto, sans-serif;
    background-color: #0a0a0a;
    color: #f5f5f7;
  }

  .stTextInput > div > div > input {
    background: #1c1c1e !important;
    border: 1px solid #3a3a3c !important;
    border-radius: 980px !important;
    color: #f5f5f7 !important;
    padding: 0.75rem 1.25rem !important;
  }
  .stButton > button {
    background: #0a84ff !important;
    color: #ffffff !important;
    border: none !important;
    border-radius: 980px !important;
    font-weight: 600 !important;
  }

  .info-message { color: #8e8e93; text-align: center; }
  .forecast-day {
    background: #1c1c1e;
    border: 1px solid #2c2c2e;
    border-radius: 12px;
    padding: 12px 16px;
    margin-bottom: 8px;
  }
  .forecast-day .date { font-weight: 600; }
  .forecast-day .temp { color: #8e8e93; font-size: 0.9rem; }
  .forecast-day .desc { font-size: 0.95rem; }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    legend=dict(bgcolor="rgba(0,0,0,0)", font=dict(color="#8e8e93")),
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366")),
)


class StreamlitDisplay(Display):
    """Binds the two regions to st.empty() placeholders.

    Region markup is also kept in st.session_state so a rerun that does not
    fetch can repaint the last result.
    """

    def __init__(self) -> None:
        self.placeholders = {"current": st.empty(), "forecast": st.empty()}
        if "regions" not in st.session_state:
            st.session_state.regions = {"current": "", "forecast": ""}

    def _write(self, region: str, markup: str) -> None:
        st.session_state.regions[region] = markup
        self._paint(region, markup)

    def _paint(self, region: str, markup: str) -> None:
        if markup:
            self.placeholders[region].markdown(markup, unsafe_allow_html=True)
        else:
            self.placeholders[region].empty()

    def replay(self) -> None:
        for region, markup in st.session_state.regions.items():
            self._paint(region, markup)


def temperature_chart(days: list[dict], language: str) -> go.Figure:
    """Min/max temperature lines for the daily forecast."""
    labels = [fmt_day(d["date"], language) for d in days]
    unit = days[0].get("unit", "°C") if days else "°C"

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=[d["temp_max"] for d in days],
        name="Max",
        mode="lines+markers",
        line=dict(color="#0a84ff", width=2),
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=[d["temp_min"] for d in days],
        name="Min",
        mode="lines+markers",
        line=dict(color="#0a84ff", width=1, dash="dot"),
    ))
    fig.update_layout(**PLOTLY_LAYOUT, height=260)
    fig.update_yaxes(ticksuffix=unit)
    return fig


# ─────────────────────────────────────────────────────────────
# Settings and session state
# ─────────────────────────────────────────────────────────────

try:
    config = load_config()
except (FileNotFoundError, ValueError) as e:
    st.error(f"Config error: {e}")
    st.stop()

language = config["display"]["language"]
forecast_days = config["display"]["forecast_days"]
log_path = Path(config["log"]["path"])

if "search" not in st.session_state:
    st.session_state.search = False   # set by Enter in the input or the button
if "loaded" not in st.session_state:
    st.session_state.loaded = False   # True once the first lookup has run
if "report" not in st.session_state:
    st.session_state.report = None    # last successful report, or None


def request_search() -> None:
    st.session_state.search = True


# ─────────────────────────────────────────────────────────────
# Search row
# ─────────────────────────────────────────────────────────────

st.markdown("<h2 style='text-align:center'>🌤 Weather</h2>", unsafe_allow_html=True)

city_input = st.text_input(
    "City",
    key="city",
    placeholder="Cidade" if language == "pt" else "City",
    label_visibility="collapsed",
    on_change=request_search,
)
st.button("Buscar" if language == "pt" else "Search", on_click=request_search)

display = StreamlitDisplay()
chart_slot = st.empty()

if st.session_state.search:
    st.session_state.search = False
    st.session_state.loaded = True
    st.session_state.report = get_weather_by_city(
        city_input,
        display,
        language=language,
        forecast_days=forecast_days,
        log_path=log_path,
    )
elif not st.session_state.loaded:
    # First load: fixed coordinates from config
    st.session_state.loaded = True
    location = config["location"]
    st.session_state.report = get_weather_by_coords(
        location["latitude"],
        location["longitude"],
        location["name"],
        display,
        language=language,
        forecast_days=forecast_days,
        log_path=log_path,
    )
else:
    # Rerun without a search: repaint the last result, no new request
    display.replay()

report = st.session_state.report
if report and report.get("forecast"):
    chart_slot.plotly_chart(
        temperature_chart(report["forecast"], language),
        use_container_width=True,
        config={"displayModeBar": False},
    )


# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="info-message" style="margin-top:2rem">'
    'Powered by <a href="https://open-meteo.com" style="color:#0a84ff;text-decoration:none;">Open-Meteo</a>'
    "</div>",
    unsafe_allow_html=True,
)
