from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final

from src.api.forecast_models import HourlySample
from src.api.route_alignment import LocationForecast
from src.utils_weather import chance_of_rain_percent, round_temperature

TEMPERATURE: Final = "temperature"
RAIN_CHANCE: Final = "rain_chance"
CLOUDINESS: Final = "cloudiness"
UV: Final = "uv"
WIND_SPEED: Final = "wind_speed"
WIND_GUST: Final = "wind_gust"

# kenttä → (sarjan nimi, arvo tuntiennusteesta)
_FIELDS: Final[dict[str, tuple[str, Callable[[HourlySample], float]]]] = {
    TEMPERATURE: ("Temp °C", lambda s: round_temperature(s.temp)),
    RAIN_CHANCE: ("Chance of Rain %", lambda s: chance_of_rain_percent(s.pop)),
    CLOUDINESS: ("Cloudiness %", lambda s: s.cloudiness),
    UV: ("UVI 0 (low) to 11+ (extreme)", lambda s: s.uvi),
    WIND_SPEED: ("Wind Speed m/s", lambda s: s.wind_speed),
    WIND_GUST: ("Wind Gust m/s", lambda s: s.wind_gust),
}

SERIES_FIELDS: Final[tuple[str, ...]] = tuple(_FIELDS)

# Kaaviot: (otsikko, [(kenttä, näytetäänkö kellonajat)])
CHART_GROUPS: Final[tuple[tuple[str, tuple[tuple[str, bool], ...]], ...]] = (
    ("Temperature", ((TEMPERATURE, True),)),
    ("Chance of rain", ((RAIN_CHANCE, True),)),
    ("UV index and cloudiness", ((UV, True), (CLOUDINESS, False))),
    ("Wind", ((WIND_SPEED, True), (WIND_GUST, False))),
)


@dataclass(frozen=True)
class ChartEntry:
    value: float
    value_label: str
    label: str | None = None


@dataclass(frozen=True)
class ChartSeries:
    field: str
    name: str
    entries: tuple[ChartEntry, ...]

    @property
    def values(self) -> list[float]:
        return [e.value for e in self.entries]

    @property
    def labels(self) -> list[str | None]:
        return [e.label for e in self.entries]


def series_name(field: str) -> str:
    if field not in _FIELDS:
        raise ValueError(f"unknown series field: {field!r}")
    return _FIELDS[field][0]


def _format_value(value: float) -> str:
    return f"{value:g}"


def extract_series(
    location_forecasts: Iterable[LocationForecast],
    field: str,
    with_labels: bool = True,
) -> ChartSeries:
    """One chart entry per location forecast, labelled with the forecast hour (HH:MM)."""
    if field not in _FIELDS:
        raise ValueError(f"unknown series field: {field!r}")

    name, getter = _FIELDS[field]
    entries: list[ChartEntry] = []
    for location_forecast in location_forecasts:
        sample = location_forecast.sample
        value = getter(sample)
        entries.append(
            ChartEntry(
                value=value,
                value_label=_format_value(value),
                label=sample.dt.strftime("%H:%M") if with_labels else None,
            )
        )

    return ChartSeries(field=field, name=name, entries=tuple(entries))
