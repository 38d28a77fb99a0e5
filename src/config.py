# config.py
"""Configuration settings for the Route Forecast application."""

import os
from zoneinfo import ZoneInfo

HTTP_TIMEOUT_S: float = 8.0
HTTP_RETRY_COUNT: int = 3
HTTP_RETRY_BASE_S: float = 2.0
"""Retry settings for idempotent requests (GET/DELETE)."""

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- TIMEZONE -------------------

TZ: ZoneInfo = ZoneInfo(os.getenv("ROUTE_TZ", "Europe/Helsinki"))
"""Timezone used for arrival times and chart labels."""

# ------------------- ALIGNMENT -------------------

SEGMENT_KM: int = 10
"""Distance between forecast points along a route (km)."""

MATCH_TOLERANCE_S: float = 1e-9
"""Max difference (s) between an arrival time and an hourly sample timestamp."""

DEFAULT_SPEED_KMH: float = 25.0
DEFAULT_START_HOUR: int = 8

DAY_TODAY: str = "Today"
DAY_TOMORROW: str = "Tomorrow"

# ------------------- EXTERNAL SERVICES -------------------

STRAVA_ROUTES_URL: str = os.getenv(
    "STRAVA_ROUTES_URL", "https://www.strava.com/api/v3/athletes/@AthleteId/routes"
)
STRAVA_ATHLETE_ID: str = os.getenv("STRAVA_ATHLETE_ID", "")
STRAVA_ACCESS_TOKEN: str = os.getenv("STRAVA_ACCESS_TOKEN", "")

FORECAST_SERVICE_URL: str = os.getenv(
    "FORECAST_SERVICE_URL",
    "http://localhost:7071/api/yrforecast?routeId=@RouteId&athleteId=@AthleteId",
)
"""Forecast service returning one hourly forecast list per route point."""

# ------------------- UI COLORS -------------------

COLOR_PRIMARY: str = "#FC4C02"
"""First series colour (Strava orange)."""

COLOR_SECONDARY: str = "#4dc9fe"
"""Second series colour on two-series charts."""

COLOR_TEXT_GRAY: str = "#d0d0d0"

# ------------------- PLOTLY CONFIG -------------------

PLOTLY_CONFIG: dict = {
    "displayModeBar": False,
    "responsive": True,
}

CHART_HEIGHT_PX: int = 220
