# src/utils_weather.py
"""Weather-related utility functions for Route Forecast."""

from __future__ import annotations

from typing import Final

SECTOR_DEG: Final[float] = 22.5

# Ilmansuunnat 16 sektorissa, indeksi = round(deg / 22.5) % 16
WIND_DIRECTIONS: Final[tuple[str, ...]] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)


def wind_sector(wind_deg: float | None) -> int:
    """Map wind direction in degrees to one of the 16 compass sectors (0 = N).

    Uses Python's round(), i.e. ties go to the even sector (11.25° → 0, 33.75° → 2).
    """
    deg = 0.0 if wind_deg is None else float(wind_deg)
    return int(round(deg / SECTOR_DEG)) % len(WIND_DIRECTIONS)


def wind_sector_name(wind_deg: float | None) -> str:
    return WIND_DIRECTIONS[wind_sector(wind_deg)]


def round_temperature(temp: float) -> float:
    """Temperature for display, one decimal."""
    return round(float(temp), 1)


def chance_of_rain_percent(pop: float) -> int:
    """Precipitation probability 0–1 → whole percent, ties to even (0.125 → 12)."""
    return int(round(float(pop) * 100))
