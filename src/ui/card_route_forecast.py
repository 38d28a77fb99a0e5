# src/ui/card_route_forecast.py
from __future__ import annotations

from collections.abc import Sequence
from html import escape

import plotly.graph_objects as go
import streamlit as st
from streamlit.components.v1 import html as st_html

from src.api import fetch_routes
from src.api.forecast_models import Route
from src.api.forecast_series import CHART_GROUPS, ChartSeries
from src.api.route_alignment import LocationForecast
from src.config import (
    CHART_HEIGHT_PX,
    COLOR_PRIMARY,
    COLOR_SECONDARY,
    DAY_TODAY,
    DAY_TOMORROW,
    DEFAULT_SPEED_KMH,
    DEFAULT_START_HOUR,
    PLOTLY_CONFIG,
    STRAVA_ACCESS_TOKEN,
    STRAVA_ATHLETE_ID,
)
from src.ui.common import hint_card, section_title
from src.utils_weather import chance_of_rain_percent, round_temperature
from src.viewmodels.route_forecast import ForecastQuery, RouteForecastSession, RouteForecastView
from src.weather_icons import render_weather_icon, render_wind_icon

CARD_TITLE = "Route forecast"
SERIES_COLORS = (COLOR_PRIMARY, COLOR_SECONDARY)


def _load_routes() -> list[Route]:
    """Reitit haetaan kerran per sessio."""
    routes = st.session_state.get("routes")
    if routes is None:
        routes = fetch_routes(STRAVA_ATHLETE_ID, STRAVA_ACCESS_TOKEN)
        st.session_state["routes"] = routes
    return routes


def _session() -> RouteForecastSession:
    session = st.session_state.get("route_forecast_session")
    if session is None:
        session = RouteForecastSession()
        st.session_state["route_forecast_session"] = session
    return session


def build_chart(series_list: Sequence[ChartSeries]) -> go.Figure:
    """Spline chart; x-axis labels come from the first series."""
    first = series_list[0]
    x = list(range(len(first.entries)))

    fig = go.Figure()
    for series, color in zip(series_list, SERIES_COLORS):
        fig.add_trace(
            go.Scatter(
                x=x,
                y=series.values,
                name=series.name,
                mode="lines+markers+text",
                line=dict(color=color, shape="spline", width=2),
                fill="tozeroy",
                text=[e.value_label for e in series.entries],
                textposition="top center",
                hovertemplate="%{text}<extra>" + series.name + "</extra>",
            )
        )

    fig.update_layout(
        title=None,
        height=CHART_HEIGHT_PX,
        margin=dict(l=10, r=10, t=36, b=30),
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        plot_bgcolor="#fff",
        paper_bgcolor="#fff",
        font=dict(color="#000"),
        xaxis=dict(
            tickmode="array",
            tickvals=x,
            ticktext=[e.label or "" for e in first.entries],
            showgrid=False,
        ),
        yaxis=dict(visible=False, showgrid=False),
    )
    return fig


def _segments_html(location_forecasts: Sequence[LocationForecast]) -> str:
    def cell(lf: LocationForecast) -> str:
        sample = lf.sample
        return f"""
            <div class="seg-cell">
              <div class="km">{lf.km} km</div>
              <div class="sub">{lf.dt:%H:%M}</div>
              <div class="icon">{render_weather_icon(lf.weather_icon)}</div>
              <div class="temp">{round_temperature(sample.temp):g}°C</div>
              <div class="pop">Rain {chance_of_rain_percent(sample.pop)}%</div>
              <div class="wind">{render_wind_icon(lf.wind_icon_id, lf.wind_icon)} {sample.wind_speed:g} m/s</div>
            </div>
        """

    return (
        """
        <!doctype html>
        <html><head><meta charset="utf-8">
        <style>
          html,body {margin:0;padding:0;background:transparent;color:#111;
                     font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
          .seg-row {display:flex;gap:8px;overflow-x:auto;padding:4px 2px;}
          .seg-cell {flex:0 0 84px;display:grid;justify-items:center;row-gap:2px;
                     background:#f4f5f7;border-radius:12px;padding:6px 4px;}
          .km{font-weight:600;font-size:.9rem;}
          .sub,.pop,.wind{font-size:.8rem;opacity:.8;}
          .temp{font-size:1.05rem;}
        </style></head><body><div class="seg-row">
        """
        + "".join(cell(lf) for lf in location_forecasts)
        + "</div></body></html>"
    )


def _render_view(view: RouteForecastView) -> None:
    title_html = f"🚴 {escape(view.title)}"
    if view.forecast_issued_for:
        title_html += f"&nbsp; | &nbsp;{escape(view.forecast_issued_for)}"
    section_title(title_html, mb=2)

    if view.forecast_issued_at:
        st.caption(view.forecast_issued_at)

    if view.error:
        hint_card(CARD_TITLE, view.error)
        return
    if view.is_empty:
        hint_card(CARD_TITLE, view.empty_message or "No forecast.")
        return

    st_html(_segments_html(view.location_forecasts), height=175, scrolling=False)

    for chart_title, fields in CHART_GROUPS:
        series_list = [view.series(field, with_labels) for field, with_labels in fields]
        st.markdown(f"**{chart_title}**")
        st.plotly_chart(
            build_chart(series_list),
            use_container_width=True,
            theme=None,
            config=PLOTLY_CONFIG,
        )


def card_route_forecast() -> None:
    """Render the route picker and the forecast along the selected route."""
    try:
        routes = _load_routes()
        if not routes:
            hint_card(CARD_TITLE, "No routes found for this athlete.")
            return

        route = st.selectbox("Route", routes, format_func=lambda r: r.name)
        col1, col2, col3 = st.columns(3)
        with col1:
            day = st.radio("Day", (DAY_TODAY, DAY_TOMORROW), horizontal=True)
        with col2:
            hour = st.number_input("Start hour", min_value=0, max_value=23, value=DEFAULT_START_HOUR, step=1)
        with col3:
            speed = st.number_input(
                "Average speed (km/h)",
                min_value=1.0,
                max_value=60.0,
                value=DEFAULT_SPEED_KMH,
                step=0.5,
            )

        refresh = st.button("Refresh")

        query = ForecastQuery(route=route, day=day, hour=int(hour), speed_kmh=float(speed))
        session = _session()

        # Streamlit ajaa skriptin uudelleen jokaisella interaktiolla: haetaan vain kun valinnat muuttuvat,
        # käyttäjä pyytää päivitystä tai edellinen haku päättyi virheeseen
        view = session.view
        if (
            refresh
            or view is None
            or view.error
            or st.session_state.get("route_forecast_query") != query
        ):
            st.session_state["route_forecast_query"] = query
            view = session.load(query)
        if view is None:
            return

        _render_view(view)

    except Exception as e:
        hint_card(CARD_TITLE, f"Error: {e}", height_dvh=15)
