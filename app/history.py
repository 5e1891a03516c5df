# Project: weather-dash
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — Streamlit weather history dashboard.

Shows extremes, averages and the most common weather for the last
7/14/21/30 days, the daily breakdown, and two calendar years side by side.

Run with:
    streamlit run app/history.py

Requires: pip install -e ".[ui]"
Data source: ERA5 reanalysis via Open-Meteo Historical Weather API (free, no key).
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datetime import date

import plotly.graph_objects as go
import streamlit as st
from plotly.subplots import make_subplots

from weather_dash.analysis import analyze, compare_years, daily_breakdown
from weather_dash.codes import ICON_EMOJI
from weather_dash.config import load_config_or_default
from weather_dash.geocode import LocationNotFoundError, geocode
from weather_dash.history import HISTORY_PERIODS, fetch_weather_history, fetch_yearly_comparison
from weather_dash.utils import fmt_day, set_log_file


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Zgodovina vremena",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed",
)

CONFIG = load_config_or_default()
set_log_file(CONFIG["log"]["path"])
LANGUAGE = CONFIG["display"]["language"]
SL = LANGUAGE == "sl"

HISTORY_CSS = """
<style>
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 1000px; }
  html, body, [class*="css"] {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    background-color: #0a0a0a;
    color: #f5f5f7;
  }
  .wd-card {
    background: #1c1c1e; border: 1px solid #2c2c2e; border-radius: 16px;
    padding: 20px 24px; margin-bottom: 1rem; height: 100%;
  }
  .card-title {
    font-size: 0.72rem; text-transform: uppercase; letter-spacing: 0.1em;
    color: #8e8e93; font-weight: 600; margin-bottom: 0.6rem;
  }
  .card-row { display: flex; justify-content: space-between; padding: 4px 0; }
  .card-row span:last-child { font-weight: 700; font-variant-numeric: tabular-nums; }
  .wd-table { width: 100%; border-collapse: collapse; font-size: 0.9rem; }
  .wd-table th {
    font-size: 0.65rem; text-transform: uppercase; letter-spacing: 0.1em;
    color: #636366; text-align: right; padding: 8px 10px; border-bottom: 1px solid #2c2c2e;
  }
  .wd-table th:first-child, .wd-table td:first-child { text-align: left; }
  .wd-table td { padding: 8px 10px; text-align: right; border-bottom: 1px solid #1c1c1e; }
  .error-card {
    background: rgba(255, 69, 58, 0.1); border: 1px solid rgba(255, 69, 58, 0.3);
    border-radius: 12px; color: #ff453a; padding: 16px 20px; text-align: center;
  }
</style>
"""
st.markdown(HISTORY_CSS, unsafe_allow_html=True)

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    legend=dict(bgcolor="rgba(0,0,0,0)", orientation="h"),
)


def card(title: str, rows: list[tuple[str, str]]) -> str:
    """Render one summary card as HTML."""
    body = "".join(f'<div class="card-row"><span>{k}</span><span>{v}</span></div>' for k, v in rows)
    return f'<div class="wd-card"><div class="card-title">{title}</div>{body}</div>'


def fmt_value(value, unit: str, decimals: int = 0) -> str:
    return "—" if value is None else f"{value:.{decimals}f} {unit}"


# ─────────────────────────────────────────────────────────────
# Location + period
# ─────────────────────────────────────────────────────────────

if "location" not in st.session_state:
    st.session_state.location = {
        "latitude": CONFIG["location"]["latitude"],
        "longitude": CONFIG["location"]["longitude"],
        "name": CONFIG["location"]["name"],
    }

st.markdown(f"## {'Zgodovina vremena' if SL else 'Weather history'}")

search_col, period_col = st.columns([2, 1])
with search_col:
    place = st.text_input(
        "location",
        placeholder="Poišči kraj" if SL else "Search for a place",
        label_visibility="collapsed",
    )
    if place.strip():
        try:
            st.session_state.location = geocode(place.strip())
        except LocationNotFoundError as e:
            st.markdown(f'<div class="error-card">⚠️ {e}</div>', unsafe_allow_html=True)
        except RuntimeError as e:
            st.markdown(f'<div class="error-card">⚠️ {e}</div>', unsafe_allow_html=True)
with period_col:
    period_days = st.selectbox(
        "period",
        options=list(HISTORY_PERIODS),
        index=list(HISTORY_PERIODS).index(CONFIG["display"]["history_days"]),
        format_func=lambda d: HISTORY_PERIODS[d][LANGUAGE],
        label_visibility="collapsed",
    )

loc = st.session_state.location
st.caption(f"📍 {loc['name']} · {loc['latitude']:.4f}°, {loc['longitude']:.4f}°")


@st.cache_data(ttl=3600, show_spinner=False)
def load_history(latitude: float, longitude: float, days: int):
    return fetch_weather_history(latitude, longitude, days)


@st.cache_data(ttl=86400, show_spinner=False)
def load_years(latitude: float, longitude: float, year1: int, year2: int):
    return fetch_yearly_comparison(latitude, longitude, year1, year2)


# ─────────────────────────────────────────────────────────────
# SECTION 1: Summary cards
# ─────────────────────────────────────────────────────────────

try:
    with st.spinner("Nalagam zgodovino vremena..." if SL else "Loading weather history..."):
        series = load_history(loc["latitude"], loc["longitude"], period_days)
except RuntimeError as e:
    st.markdown(f'<div class="error-card">⚠️ {e}</div>', unsafe_allow_html=True)
    series = None

summary = analyze(series, LANGUAGE)

if summary is None:
    st.info("Ni podatkov za izbrano obdobje." if SL else "No data for the selected period.")
else:
    t_unit = summary.units.get("temperature_2m_max", "°C")
    p_unit = summary.units.get("precipitation_sum", "mm")
    ex, av, pat = summary.extremes, summary.averages, summary.weather_patterns

    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown(card("Ekstremi" if SL else "Extremes", [
            ("🔥 " + ("Najtoplejši dan" if SL else "Hottest day"), fmt_value(ex.hottest_day, t_unit)),
            ("🥶 " + ("Najhladnejši dan" if SL else "Coldest day"), fmt_value(ex.coldest_day, t_unit)),
            ("🌧 " + ("Najbolj moker dan" if SL else "Wettest day"), fmt_value(ex.wettest_day, p_unit, 1)),
        ]), unsafe_allow_html=True)
    with c2:
        st.markdown(card("Povprečja" if SL else "Averages", [
            ("Povp. maksimum" if SL else "Avg. maximum", fmt_value(av.avg_max_temp, t_unit)),
            ("Povp. minimum" if SL else "Avg. minimum", fmt_value(av.avg_min_temp, t_unit)),
            ("Skupne padavine" if SL else "Total precipitation", fmt_value(av.total_precipitation, p_unit, 1)),
        ]), unsafe_allow_html=True)
    with c3:
        st.markdown(card("Vremenski vzorci" if SL else "Weather patterns", [
            ("Najpogostejše" if SL else "Most common", pat.most_common_weather),
            ("Dni" if SL else "Days", f"{pat.most_common_weather_days} / {pat.total_days}"),
        ]), unsafe_allow_html=True)

    # ─────────────────────────────────────────────────────────
    # SECTION 2: Temperature + precipitation chart
    # ─────────────────────────────────────────────────────────

    rows = daily_breakdown(series, LANGUAGE)
    ordered = list(reversed(rows))
    labels = [fmt_day(r["date"], LANGUAGE) for r in ordered]

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Bar(
        x=labels, y=[r["precipitation"] for r in ordered],
        name=p_unit, marker_color="rgba(10,132,255,0.5)",
    ), secondary_y=True)
    fig.add_trace(go.Scatter(
        x=labels, y=[r["temp_max"] for r in ordered],
        name="Max", mode="lines+markers", line=dict(color="#ff9f0a", width=2),
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=labels, y=[r["temp_min"] for r in ordered],
        name="Min", mode="lines+markers", line=dict(color="#64d2ff", width=2),
    ), secondary_y=False)
    fig.update_layout(**PLOTLY_LAYOUT, height=320)
    fig.update_yaxes(ticksuffix="°", gridcolor="#2c2c2e", secondary_y=False)
    fig.update_yaxes(showgrid=False, secondary_y=True)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    # ─────────────────────────────────────────────────────────
    # SECTION 3: Daily table
    # ─────────────────────────────────────────────────────────

    table_html = '<table class="wd-table"><thead><tr>'
    for header in ("", "Max", "Min", "Povp" if SL else "Mean", p_unit,
                   series.units.get("wind_speed_10m_max", "km/h"), ""):
        table_html += f"<th>{header}</th>"
    table_html += "</tr></thead><tbody>"
    for r in rows:
        table_html += (
            "<tr>"
            f"<td>{fmt_day(r['date'], LANGUAGE)}</td>"
            f"<td>{fmt_value(r['temp_max'], '°')}</td>"
            f"<td>{fmt_value(r['temp_min'], '°')}</td>"
            f"<td>{fmt_value(r['temp_mean'], '°')}</td>"
            f"<td>{fmt_value(r['precipitation'], '', 1)}</td>"
            f"<td>{fmt_value(r['wind_max'], '')}</td>"
            f"<td>{ICON_EMOJI.get(r['icon'], '❔')} {r['description']}</td>"
            "</tr>"
        )
    table_html += "</tbody></table>"
    st.markdown(table_html, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# SECTION 4: Year comparison
# ─────────────────────────────────────────────────────────────

st.markdown(f"### {'Primerjava let' if SL else 'Compare years'}")
last_full_year = date.today().year - 1
y1_col, y2_col, btn_col = st.columns([1, 1, 1])
with y1_col:
    year1 = st.number_input("year1", 1940, last_full_year, last_full_year - 1, label_visibility="collapsed")
with y2_col:
    year2 = st.number_input("year2", 1940, last_full_year, last_full_year, label_visibility="collapsed")
with btn_col:
    run_compare = st.button("Primerjaj" if SL else "Compare", use_container_width=True)

if run_compare:
    try:
        with st.spinner("..."):
            first, second = load_years(loc["latitude"], loc["longitude"], int(year1), int(year2))
    except RuntimeError as e:
        st.markdown(f'<div class="error-card">⚠️ {e}</div>', unsafe_allow_html=True)
    else:
        comparison = compare_years(int(year1), first, int(year2), second, LANGUAGE)
        metrics = [
            ("Povp. maksimum" if SL else "Avg. maximum", "avg_max_temp"),
            ("Povp. minimum" if SL else "Avg. minimum", "avg_min_temp"),
        ]
        fig_cmp = go.Figure()
        for year, s, color in ((comparison.first_year, comparison.first, "#0a84ff"),
                               (comparison.second_year, comparison.second, "#ff9f0a")):
            if s is None:
                continue
            fig_cmp.add_trace(go.Bar(
                x=[m[0] for m in metrics],
                y=[getattr(s.averages, m[1]) for m in metrics],
                name=str(year), marker_color=color,
            ))
        fig_cmp.update_layout(**PLOTLY_LAYOUT, barmode="group", height=280)
        st.plotly_chart(fig_cmp, use_container_width=True, config={"displayModeBar": False})

        diff_cols = st.columns(3)
        diff_cols[0].metric(metrics[0][0], f"{comparison.avg_max_temp_diff if comparison.avg_max_temp_diff is not None else '—'}°")
        diff_cols[1].metric(metrics[1][0], f"{comparison.avg_min_temp_diff if comparison.avg_min_temp_diff is not None else '—'}°")
        diff_cols[2].metric(
            "Skupne padavine" if SL else "Total precipitation",
            f"{comparison.total_precipitation_diff if comparison.total_precipitation_diff is not None else '—'}",
        )
