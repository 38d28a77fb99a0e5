from __future__ import annotations

import pytest

import src.api.forecast_series as fs
from src.api.forecast_models import HourlySample
from src.api.route_alignment import LocationForecast
from src.utils_time import unix_timestamp_to_local

TS = 1_760_594_400


def _lf(km: int, ts: int, **fields) -> LocationForecast:
    sample = HourlySample(ts, **fields)
    return LocationForecast(
        km=km,
        sample=sample,
        dt=unix_timestamp_to_local(ts),
        weather_icon=sample.icon,
        wind_icon_id=0,
        wind_icon="N",
    )


def _forecasts() -> list[LocationForecast]:
    return [
        _lf(10, TS, temp=12.36, pop=0.473, cloudiness=42.5, uvi=3.25, wind_speed=4.44, wind_gust=9.99),
        _lf(20, TS + 3600, temp=-1.04, pop=0.0, cloudiness=100, uvi=0, wind_speed=5, wind_gust=11),
    ]


def test_temperature_rounded_to_one_decimal():
    series = fs.extract_series(_forecasts(), fs.TEMPERATURE)
    assert series.name == "Temp °C"
    assert series.values == [12.4, -1.0]
    assert series.entries[0].value_label == "12.4"


def test_rain_chance_is_whole_percent():
    series = fs.extract_series(_forecasts(), fs.RAIN_CHANCE)
    assert series.values == [47, 0]
    assert series.entries[0].value_label == "47"


def test_pass_through_fields():
    forecasts = _forecasts()
    assert fs.extract_series(forecasts, fs.CLOUDINESS).values == [42.5, 100]
    assert fs.extract_series(forecasts, fs.UV).values == [3.25, 0]
    assert fs.extract_series(forecasts, fs.WIND_SPEED).values == [4.44, 5]
    assert fs.extract_series(forecasts, fs.WIND_GUST).values == [9.99, 11]


def test_labels_are_sample_local_time():
    series = fs.extract_series(_forecasts(), fs.TEMPERATURE)
    expected = [
        unix_timestamp_to_local(TS).strftime("%H:%M"),
        unix_timestamp_to_local(TS + 3600).strftime("%H:%M"),
    ]
    assert series.labels == expected


def test_without_labels():
    series = fs.extract_series(_forecasts(), fs.CLOUDINESS, with_labels=False)
    assert series.labels == [None, None]
    assert len(series.entries) == 2


def test_empty_input_gives_empty_series():
    assert fs.extract_series([], fs.UV).entries == ()


def test_unknown_field_raises():
    with pytest.raises(ValueError):
        fs.extract_series(_forecasts(), "humidity")
    with pytest.raises(ValueError):
        fs.series_name("humidity")


def test_chart_groups_cover_every_field_once():
    fields = [field for _, group in fs.CHART_GROUPS for field, _ in group]
    assert sorted(fields) == sorted(fs.SERIES_FIELDS)
    # toinen sarja samassa kaaviossa ilman kellonaikoja
    assert fs.CHART_GROUPS[2][1] == ((fs.UV, True), (fs.CLOUDINESS, False))
