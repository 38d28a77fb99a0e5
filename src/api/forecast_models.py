"""Route and hourly forecast records, plus parsing from raw JSON."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from src.api.forecast_utils import as_float, as_int, as_str, pick
from src.utils_time import unix_timestamp_to_local


@dataclass(frozen=True)
class Route:
    """Strava route as listed for one athlete."""

    id: str
    athlete_id: str
    name: str


@dataclass(frozen=True)
class HourlySample:
    """One forecast hour for one point along a route."""

    unix_timestamp: int
    temp: float = 0.0  # °C
    pop: float = 0.0  # precipitation probability 0–1
    cloudiness: float = 0.0  # %
    uvi: float = 0.0
    wind_speed: float = 0.0  # m/s
    wind_gust: float = 0.0  # m/s
    wind_deg: float = 0.0
    icon: str = ""  # Yr symbol code, e.g. "partlycloudy_day"

    @property
    def dt(self) -> datetime:
        return unix_timestamp_to_local(self.unix_timestamp)


@dataclass(frozen=True)
class ForecastSet:
    """Hourly samples for one route point, in the order the service sent them."""

    samples: tuple[HourlySample, ...] = ()

    @property
    def issued_at_unix_ts(self) -> int | None:
        """Timestamp of the first sample, None for an empty set."""
        if not self.samples:
            return None
        return self.samples[0].unix_timestamp


def route_from_json(raw: Mapping[str, Any]) -> Route:
    """Strava route JSON → Route. id_str is preferred, ids exceed 2**53."""
    athlete = raw.get("athlete") or {}
    return Route(
        id=as_str(pick(raw, "id_str", "id")),
        athlete_id=as_str(pick(athlete, "id_str", "id")),
        name=as_str(raw.get("name")),
    )


def sample_from_json(raw: Mapping[str, Any]) -> HourlySample | None:
    """Parse one hourly record; None when the timestamp is missing or broken."""
    ts = as_int(pick(raw, "unixTimestamp", "unix_timestamp", "dt"))
    if ts is None:
        return None

    def num(*keys: str) -> float:
        value = as_float(pick(raw, *keys))
        return 0.0 if value is None else value

    return HourlySample(
        unix_timestamp=ts,
        temp=num("temp"),
        pop=num("pop"),
        cloudiness=num("cloudiness", "clouds"),
        uvi=num("uvi"),
        wind_speed=num("windSpeed", "wind_speed"),
        wind_gust=num("windGust", "wind_gust"),
        wind_deg=num("windDeg", "wind_deg"),
        icon=as_str(raw.get("icon")),
    )


def forecast_set_from_json(raw: Mapping[str, Any]) -> ForecastSet:
    hourly: Iterable[Any] = pick(raw, "hourlyForecasts", "hourly_forecasts") or []
    samples: list[HourlySample] = []
    for item in hourly:
        if not isinstance(item, Mapping):
            continue
        sample = sample_from_json(item)
        if sample is None:
            # rikkinäinen aikaleima -> ohitetaan
            continue
        samples.append(sample)
    return ForecastSet(samples=tuple(samples))
