from __future__ import annotations

import math
from dataclasses import dataclass

from src.config import SEGMENT_KM


class InvalidSpeed(ValueError):
    """Raised when the average speed is zero, negative or not a number."""


@dataclass(frozen=True)
class SegmentProjection:
    km: int
    arrival_unix_ts: float


def validate_speed(speed_kmh: float) -> float:
    try:
        speed = float(speed_kmh)
    except (TypeError, ValueError) as e:
        raise InvalidSpeed(f"speed must be a number, got {speed_kmh!r}") from e
    if not math.isfinite(speed) or speed <= 0:
        raise InvalidSpeed(f"speed must be positive, got {speed_kmh!r}")
    return speed


def project_arrival(km: float, speed_kmh: float, issued_at_unix_ts: float) -> float:
    """Expected arrival (Unix seconds) at km when leaving at issued_at_unix_ts."""
    speed = validate_speed(speed_kmh)
    travel_time_h = km / speed
    return 3600 * travel_time_h + issued_at_unix_ts


def project_segments(
    count: int,
    speed_kmh: float,
    issued_at_unix_ts: float,
    segment_km: int = SEGMENT_KM,
) -> list[SegmentProjection]:
    """
    Points at segment_km, 2 * segment_km, ... one per fetched route point.

    Distance comes from the list position only, not from the route geometry.
    """
    speed = validate_speed(speed_kmh)
    projections: list[SegmentProjection] = []
    for index in range(count):
        km = index * segment_km + segment_km
        projections.append(
            SegmentProjection(km=km, arrival_unix_ts=project_arrival(km, speed, issued_at_unix_ts))
        )
    return projections
