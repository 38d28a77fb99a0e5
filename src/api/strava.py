"""Strava route listing. The access token comes from configuration."""

from __future__ import annotations

import logging

from src.api.forecast_models import Route, route_from_json
from src.api.http import api_request_with_retry
from src.config import STRAVA_ROUTES_URL

logger = logging.getLogger("routeforecast")


def fetch_routes(
    athlete_id: str,
    access_token: str,
    routes_url: str = STRAVA_ROUTES_URL,
) -> list[Route]:
    """Hakee urheilijan reitit Stravasta. Tyhjä lista, jos reittejä ei ole."""
    if not access_token:
        raise ValueError("Authorization token is invalid.")
    if not routes_url:
        raise ValueError("Routes url is invalid.")

    url = routes_url.replace("@AthleteId", str(athlete_id))
    data = api_request_with_retry(
        url,
        "GET",
        headers={"Authorization": f"Bearer {access_token}"},
    )
    if not isinstance(data, list):
        return []

    routes = [route_from_json(item) for item in data if isinstance(item, dict)]
    logger.info("Fetched %s routes for athlete %s", len(routes), athlete_id)
    return routes
