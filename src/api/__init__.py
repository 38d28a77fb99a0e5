# src/api/__init__.py
from .forecast_fetch import fetch_forecasts as fetch_forecasts
from .forecast_index import find_nearest as find_nearest
from .forecast_series import extract_series as extract_series
from .http import FetchError as FetchError
from .route_alignment import LocationForecast as LocationForecast, align as align
from .segment_projector import InvalidSpeed as InvalidSpeed, project_segments as project_segments
from .strava import fetch_routes as fetch_routes
