from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from src.api import align, fetch_forecasts
from src.api.forecast_models import Route
from src.api.forecast_series import ChartSeries, extract_series
from src.api.http import FetchError
from src.api.route_alignment import LocationForecast
from src.api.segment_projector import InvalidSpeed, validate_speed
from src.config import DAY_TODAY, DEFAULT_SPEED_KMH, DEFAULT_START_HOUR
from src.utils import report_error
from src.utils_time import datetime_to_unix_timestamp, issued_for, unix_timestamp_to_local

logger = logging.getLogger("routeforecast")

EMPTY_NO_MATCH = "No forecast hours match the selected start time and speed."
EMPTY_NO_DATA = "No forecast available for this route."


@dataclass(frozen=True)
class ForecastQuery:
    """Käyttäjän valinnat: reitti, päivä, lähtötunti ja keskinopeus."""

    route: Route
    day: str = DAY_TODAY
    hour: int = DEFAULT_START_HOUR
    speed_kmh: float = DEFAULT_SPEED_KMH


@dataclass(frozen=True)
class RouteForecastView:
    """UI:lle valmis, muuttumaton tulos yhdestä hausta."""

    generation: int
    title: str
    location_forecasts: tuple[LocationForecast, ...] = ()
    forecast_issued_at: str | None = None
    forecast_issued_for: str | None = None
    empty_message: str | None = None
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.location_forecasts

    def series(self, field: str, with_labels: bool = True) -> ChartSeries:
        return extract_series(self.location_forecasts, field, with_labels)


def _format_issued_at(dt: datetime) -> str:
    # esim. "Yr Forecast Issued at Thu, 16 Oct 9:00" (ei %-d, ei toimi Windowsilla)
    return f"Yr Forecast Issued at {dt:%a}, {dt.day} {dt:%b} {dt.hour}:{dt:%M}"


def _format_issued_for(dt: datetime) -> str:
    return f"{dt:%A}, {dt.day} {dt:%b}"


def build_route_forecast_view(
    query: ForecastQuery,
    generation: int = 0,
    now: datetime | None = None,
) -> RouteForecastView:
    """
    Run one full request: fetch forecasts, align them to the route and wrap the result.

    Never raises. Invalid speed and fetch failures are reported in view.error,
    anything unexpected is logged and gives an empty view.
    """
    route = query.route
    title = route.name

    try:
        speed = validate_speed(query.speed_kmh)
        start = issued_for(query.day, query.hour, now)
        start_ts = datetime_to_unix_timestamp(start)

        pairs = fetch_forecasts(route.id, route.athlete_id, route.name)

        issued_at_text: str | None = None
        issued_at_ts = pairs[0][1].issued_at_unix_ts if pairs else None
        if issued_at_ts is not None:
            issued_at_text = _format_issued_at(unix_timestamp_to_local(issued_at_ts))

        location_forecasts = align(pairs, start_ts, speed)

        empty_message = None
        if not location_forecasts:
            empty_message = EMPTY_NO_MATCH if pairs else EMPTY_NO_DATA

        return RouteForecastView(
            generation=generation,
            title=title,
            location_forecasts=location_forecasts,
            forecast_issued_at=issued_at_text,
            forecast_issued_for=_format_issued_for(start),
            empty_message=empty_message,
        )

    except InvalidSpeed as e:
        logger.warning("Invalid speed for route %s: %s", route.id, e)
        return RouteForecastView(generation=generation, title=title, error=str(e))
    except FetchError as e:
        report_error(f"fetch_forecasts: route {route.id}", e)
        return RouteForecastView(
            generation=generation,
            title=title,
            empty_message=EMPTY_NO_DATA,
            error="Unable to fetch the forecast. Try again later.",
        )
    except Exception as e:
        logger.exception("Unable to get forecast for route %s", route.id)
        report_error(f"build_route_forecast_view: route {route.id}", e)
        return RouteForecastView(generation=generation, title=title, empty_message=EMPTY_NO_DATA)


class RouteForecastSession:
    """
    Holds the latest view for one user session.

    Every request gets a new generation number. A result is kept only if its
    generation is still the latest one, so a slow older request cannot
    overwrite a newer result.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._view: RouteForecastView | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def view(self) -> RouteForecastView | None:
        return self._view

    def begin_request(self) -> int:
        """Start a new request and drop the current result."""
        self._generation += 1
        self._view = None
        return self._generation

    def publish(self, view: RouteForecastView) -> bool:
        if view.generation != self._generation:
            logger.info(
                "Discarding stale forecast (generation %s, latest %s)",
                view.generation,
                self._generation,
            )
            return False
        self._view = view
        return True

    def load(self, query: ForecastQuery, now: datetime | None = None) -> RouteForecastView | None:
        generation = self.begin_request()
        view = build_route_forecast_view(query, generation=generation, now=now)
        self.publish(view)
        return self._view
