"""
Hourly forecasts → route points.

Each fetched (route, forecast set) pair is one point along the route, the
first at SEGMENT_KM, the next at 2 * SEGMENT_KM and so on. For every point the
arrival time is projected from the start time and average speed, and the
forecast hour at exactly that time is picked. Points without a matching hour
are left out.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from src.api.forecast_index import find_nearest
from src.api.forecast_models import ForecastSet, HourlySample, Route
from src.api.segment_projector import project_segments
from src.config import MATCH_TOLERANCE_S, SEGMENT_KM
from src.utils_time import unix_timestamp_to_local
from src.utils_weather import WIND_DIRECTIONS, wind_sector

logger = logging.getLogger("routeforecast")


@dataclass(frozen=True)
class LocationForecast:
    """Forecast hour matched to one point of the route."""

    km: int
    sample: HourlySample
    dt: datetime  # arrival, local time
    weather_icon: str
    wind_icon_id: int  # 0..15, 0 = N
    wind_icon: str  # "N", "NNE", ...


def _location_forecast(km: int, sample: HourlySample, arrival_unix_ts: float) -> LocationForecast:
    wind_icon_id = wind_sector(sample.wind_deg)
    return LocationForecast(
        km=km,
        sample=sample,
        dt=unix_timestamp_to_local(arrival_unix_ts),
        weather_icon=sample.icon,
        wind_icon_id=wind_icon_id,
        wind_icon=WIND_DIRECTIONS[wind_icon_id],
    )


def align(
    pairs: Sequence[tuple[Route, ForecastSet]],
    issued_at_unix_ts: float,
    speed_kmh: float,
    segment_km: int = SEGMENT_KM,
    tolerance_s: float = MATCH_TOLERANCE_S,
) -> tuple[LocationForecast, ...]:
    """
    Match every route point to its forecast hour.

    Raises InvalidSpeed before anything is matched if speed_kmh is not positive.
    The result keeps input order; unmatched points are skipped.
    """
    projections = project_segments(len(pairs), speed_kmh, issued_at_unix_ts, segment_km)

    location_forecasts: list[LocationForecast] = []
    for (route, forecast_set), projection in zip(pairs, projections):
        sample = find_nearest(forecast_set.samples, projection.arrival_unix_ts, tolerance_s)
        if sample is None:
            logger.debug(
                "No hourly forecast for route %s at %s km (target %s)",
                route.id,
                projection.km,
                projection.arrival_unix_ts,
            )
            continue

        location_forecasts.append(
            _location_forecast(projection.km, sample, projection.arrival_unix_ts)
        )

    return tuple(location_forecasts)
