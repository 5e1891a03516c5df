# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
app.py — Streamlit weather dashboard: current conditions, hourly and daily forecast.

The colour theme follows the sun: light cards by day, dark cards by night
(from the current 'is_day' flag of the searched location).

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datetime import date

import plotly.graph_objects as go
import streamlit as st

from weather_dash.codes import describe, emoji_for
from weather_dash.config import load_config_or_default
from weather_dash.geocode import DEFAULT_LOCATIONS, LocationNotFoundError, geocode
from weather_dash.utils import TODAY_LABELS, fmt_day, fmt_hour, set_log_file
from weather_dash.weather import fetch_weather


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Vreme",
    page_icon="🌤",
    layout="wide",
    initial_sidebar_state="collapsed",
)

CONFIG = load_config_or_default()
set_log_file(CONFIG["log"]["path"])
LANGUAGE = CONFIG["display"]["language"]


# ─────────────────────────────────────────────────────────────
# Day / night themes
# ─────────────────────────────────────────────────────────────

THEMES = {
    "day": {
        "background": "linear-gradient(180deg, #4facfe 0%, #a1d8ff 100%)",
        "card": "rgba(255,255,255,0.75)",
        "border": "rgba(255,255,255,0.9)",
        "text": "#0b2545",
        "muted": "#476582",
        "accent": "#ff9f0a",
    },
    "night": {
        "background": "linear-gradient(180deg, #0b1026 0%, #2b3467 100%)",
        "card": "rgba(28,28,46,0.8)",
        "border": "#3a3a5c",
        "text": "#f5f5f7",
        "muted": "#8e8ea8",
        "accent": "#64d2ff",
    },
}


def theme_css(theme: dict) -> str:
    """Build the page CSS for one theme palette."""
    return f"""
<style>
  #MainMenu, footer, header {{ visibility: hidden; }}
  .block-container {{ padding-top: 2rem; padding-bottom: 4rem; max-width: 960px; }}
  .stApp {{ background: {theme["background"]}; }}
  html, body, [class*="css"] {{
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    color: {theme["text"]};
  }}
  .wd-card {{
    background: {theme["card"]};
    border: 1px solid {theme["border"]};
    border-radius: 16px;
    padding: 24px 28px;
    margin-bottom: 1.5rem;
  }}
  .hero-temp {{ font-size: 6rem; font-weight: 800; letter-spacing: -0.04em; line-height: 1; }}
  .hero-sub {{ color: {theme["muted"]}; font-size: 1rem; margin-top: 0.25rem; }}
  .stat-label {{
    font-size: 0.68rem; text-transform: uppercase; letter-spacing: 0.08em;
    color: {theme["muted"]}; font-weight: 600;
  }}
  .stat-value {{ font-size: 1.4rem; font-weight: 700; }}
  .section-label {{
    font-size: 0.72rem; text-transform: uppercase; letter-spacing: 0.1em;
    color: {theme["muted"]}; font-weight: 600; margin-bottom: 0.75rem;
  }}
  .wd-table {{ width: 100%; border-collapse: collapse; font-size: 0.95rem; }}
  .wd-table th {{
    font-size: 0.65rem; text-transform: uppercase; letter-spacing: 0.1em;
    color: {theme["muted"]}; text-align: right; padding: 8px 10px;
  }}
  .wd-table th:first-child, .wd-table td:first-child {{ text-align: left; }}
  .wd-table td {{ padding: 10px; text-align: right; font-variant-numeric: tabular-nums; }}
  .wd-table tr.today td {{ color: {theme["accent"]}; font-weight: 700; }}
  .error-card {{
    background: rgba(255, 69, 58, 0.12); border: 1px solid rgba(255, 69, 58, 0.4);
    border-radius: 12px; color: #ff453a; padding: 16px 20px; text-align: center;
  }}
  .wd-footer {{ text-align: center; color: {theme["muted"]}; font-size: 0.8rem; padding: 3rem 0 1rem; }}
</style>
"""


def plotly_layout(theme: dict) -> dict:
    return dict(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=theme["muted"], size=12),
        margin=dict(l=8, r=8, t=32, b=8),
        showlegend=False,
        xaxis=dict(showgrid=False, zeroline=False),
        yaxis=dict(gridcolor="rgba(128,128,128,0.2)", zeroline=False),
    )


def stat_html(label: str, value: str) -> str:
    return f'<div class="stat-label">{label}</div><div class="stat-value">{value}</div>'


# ─────────────────────────────────────────────────────────────
# Session state
# ─────────────────────────────────────────────────────────────

if "location" not in st.session_state:
    st.session_state.location = {
        "latitude": CONFIG["location"]["latitude"],
        "longitude": CONFIG["location"]["longitude"],
        "name": CONFIG["location"]["name"],
    }
if "weather" not in st.session_state:
    st.session_state.weather = None
if "error" not in st.session_state:
    st.session_state.error = None


def load_weather(loc: dict) -> None:
    """Fetch the forecast for a resolved location into session state."""
    st.session_state.error = None
    st.session_state.location = loc
    try:
        st.session_state.weather = fetch_weather(
            latitude=loc["latitude"],
            longitude=loc["longitude"],
            forecast_days=CONFIG["display"]["forecast_days"],
        )
    except RuntimeError as e:
        st.session_state.error = f"Weather API error: {e}"
        st.session_state.weather = None


def search(place: str) -> None:
    try:
        loc = geocode(place)
    except LocationNotFoundError as e:
        st.session_state.error = str(e)
        return
    except RuntimeError as e:
        st.session_state.error = f"Network error: {e}"
        return
    load_weather(loc)


if st.session_state.weather is None and st.session_state.error is None:
    load_weather(st.session_state.location)

weather = st.session_state.weather
is_day = bool(weather["current"]["is_day"]) if weather else True
THEME = THEMES["day" if is_day else "night"]
st.markdown(theme_css(THEME), unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# SECTION 1: Search + quick picks
# ─────────────────────────────────────────────────────────────

col_l, col_c, col_r = st.columns([1, 2, 1])
with col_c:
    place = st.text_input(
        label="location",
        placeholder="Poišči kraj" if LANGUAGE == "sl" else "Search for a place",
        label_visibility="collapsed",
    )
    if st.button("Išči" if LANGUAGE == "sl" else "Search", use_container_width=True) and place.strip():
        search(place.strip())
        st.rerun()

    pick_cols = st.columns(len(DEFAULT_LOCATIONS))
    for col, loc in zip(pick_cols, DEFAULT_LOCATIONS):
        with col:
            if st.button(loc["name"], key=f"pick-{loc['name']}"):
                load_weather({
                    "latitude": loc["latitude"],
                    "longitude": loc["longitude"],
                    "name": f"{loc['name']}, {loc['country']}",
                })
                st.rerun()

if st.session_state.error:
    st.markdown(f'<div class="error-card">⚠️ {st.session_state.error}</div>', unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# SECTION 2: Current conditions
# ─────────────────────────────────────────────────────────────

if weather:
    current = weather["current"]
    units = weather["units"]
    loc = st.session_state.location
    t_unit = units["temperature"]

    st.markdown('<div class="wd-card">', unsafe_allow_html=True)
    hero_left, hero_right = st.columns([1, 1])
    with hero_left:
        st.markdown(
            f'<div class="hero-temp">{emoji_for(current["weathercode"], is_day)} '
            f'{round(current["temperature"])}{t_unit}</div>'
            f'<div class="hero-sub">{describe(current["weathercode"], LANGUAGE)} · '
            f'📍 {loc["name"]} · {fmt_hour(current["time"])}</div>',
            unsafe_allow_html=True,
        )
    with hero_right:
        stats = [
            ("Občutek" if LANGUAGE == "sl" else "Feels like", f"{round(current['feels_like'])}{t_unit}"),
            ("Vlažnost" if LANGUAGE == "sl" else "Humidity", f"{current['humidity']}%"),
            ("Veter" if LANGUAGE == "sl" else "Wind",
             f"{round(current['wind_speed'])} {units['wind_speed']} {current['wind_direction']}"),
            ("Tlak" if LANGUAGE == "sl" else "Pressure", f"{current['pressure'] or '—'} {units['pressure']}"),
        ]
        pill_cols = st.columns(2)
        for i, (label, value) in enumerate(stats):
            with pill_cols[i % 2]:
                st.markdown(stat_html(label, value), unsafe_allow_html=True)
    st.markdown("</div>", unsafe_allow_html=True)

    # ─────────────────────────────────────────────────────────
    # SECTION 3: Hourly chart
    # ─────────────────────────────────────────────────────────

    hourly = weather["hourly"]
    st.markdown('<div class="section-label">24 h</div>', unsafe_allow_html=True)
    fig_hourly = go.Figure()
    fig_hourly.add_trace(go.Scatter(
        x=[fmt_hour(h["time"]) for h in hourly],
        y=[h["temperature"] for h in hourly],
        mode="lines+markers",
        line=dict(color=THEME["accent"], width=2),
        marker=dict(
            size=6,
            color=[THEME["accent"] if h["is_day"] else THEME["muted"] for h in hourly],
        ),
        text=[describe(h["weathercode"], LANGUAGE) for h in hourly],
        hovertemplate="%{x} · %{y}" + t_unit + "<br>%{text}<extra></extra>",
    ))
    fig_hourly.add_trace(go.Bar(
        x=[fmt_hour(h["time"]) for h in hourly],
        y=[h["precipitation_probability"] for h in hourly],
        yaxis="y2",
        marker_color="rgba(10,132,255,0.35)",
        hovertemplate="%{y}%<extra></extra>",
    ))
    fig_hourly.update_layout(
        **plotly_layout(THEME),
        yaxis2=dict(overlaying="y", side="right", range=[0, 100], showgrid=False, ticksuffix="%"),
        height=260,
    )
    st.plotly_chart(fig_hourly, use_container_width=True, config={"displayModeBar": False})

    # ─────────────────────────────────────────────────────────
    # SECTION 4: Daily table + range chart
    # ─────────────────────────────────────────────────────────

    daily = weather["daily"]
    today_str = date.today().isoformat()
    today_label = TODAY_LABELS.get(LANGUAGE, TODAY_LABELS["en"])

    table_html = '<div class="wd-card"><table class="wd-table"><thead><tr>'
    for header in ("", "Max", "Min", "%", units["precipitation"], units["wind_speed"], ""):
        table_html += f"<th>{header}</th>"
    table_html += "</tr></thead><tbody>"
    for d in daily:
        is_today = d["date"] == today_str
        label = today_label if is_today else fmt_day(d["date"], LANGUAGE)
        table_html += (
            f'<tr class="{"today" if is_today else ""}">'
            f"<td>{label}</td>"
            f"<td>{round(d['temp_max'])}°</td>"
            f"<td>{round(d['temp_min'])}°</td>"
            f"<td>{d['rain_probability']}%</td>"
            f"<td>{d['precip_mm']:.1f}</td>"
            f"<td>{round(d['wind_max'])} {d['wind_direction']}</td>"
            f"<td>{describe(d['weathercode'], LANGUAGE)}</td>"
            "</tr>"
        )
    table_html += "</tbody></table></div>"
    st.markdown(table_html, unsafe_allow_html=True)

    if len(daily) > 1:
        labels = [today_label if d["date"] == today_str else fmt_day(d["date"], LANGUAGE) for d in daily]
        fig_daily = go.Figure()
        fig_daily.add_trace(go.Bar(
            x=labels,
            y=[d["temp_max"] - d["temp_min"] for d in daily],
            base=[d["temp_min"] for d in daily],
            customdata=[d["temp_max"] for d in daily],
            text=[emoji_for(d["weathercode"]) for d in daily],
            textposition="outside",
            marker_color=THEME["accent"],
            hovertemplate="%{base:.0f}° – %{customdata:.0f}°<extra></extra>",
        ))
        fig_daily.update_layout(**plotly_layout(THEME), height=260)
        st.plotly_chart(fig_daily, use_container_width=True, config={"displayModeBar": False})


# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="wd-footer">'
    'Podatki: <a href="https://open-meteo.com" style="color:inherit;">Open-Meteo</a>'
    ' &nbsp;·&nbsp; Zgodovina: <code>streamlit run app/history.py</code>'
    '</div>',
    unsafe_allow_html=True,
)
