from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from src.api.forecast_models import ForecastSet, Route, forecast_set_from_json
from src.api.http import api_request_with_retry
from src.config import FORECAST_SERVICE_URL

logger = logging.getLogger("routeforecast")


def fetch_forecast_raw(route_id: str, athlete_id: str, service_url: str = FORECAST_SERVICE_URL) -> Any:
    """Hakee reitin pisteiden tuntiennusteet raakana."""
    url = service_url.replace("@RouteId", quote(str(route_id))).replace(
        "@AthleteId", quote(str(athlete_id))
    )
    return api_request_with_retry(url, "GET")


def fetch_forecasts(
    route_id: str,
    athlete_id: str,
    route_name: str = "",
    service_url: str = FORECAST_SERVICE_URL,
) -> list[tuple[Route, ForecastSet]]:
    """
    One (route, forecast set) pair per route point, in the order the service sent them.

    Raises FetchError when the service cannot be reached; returns [] when it has no data.
    """
    data = fetch_forecast_raw(route_id, athlete_id, service_url)
    if not isinstance(data, list):
        return []

    route = Route(id=str(route_id), athlete_id=str(athlete_id), name=route_name)
    pairs = [(route, forecast_set_from_json(item)) for item in data if isinstance(item, dict)]
    logger.info("Fetched %s forecast points for route %s", len(pairs), route_id)
    return pairs
