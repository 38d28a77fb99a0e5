# tests/test_weather_icons.py
from pathlib import Path

import src.weather_icons as wi


def _write_dummy_png(path: Path):
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n"
        b"\x00\x00\x00\rIHDR"
        b"\x00\x00\x00\x01\x00\x00\x00\x01"
        b"\x08\x02\x00\x00\x00\x90wS\xde"
        b"\x00\x00\x00\nIDATx\xdac``\x00\x00\x00\x02\x00\x01"
        b"\x0d\n-\xb4\x00\x00\x00\x00IEND\xaeB`\x82"
    )


def test_find_icon_path_direct_and_cache(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    icon_path = tmp_path / "rain.png"
    _write_dummy_png(icon_path)
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    assert wi._find_icon_path("rain") == icon_path
    assert wi._ICON_CACHE["rain"] == icon_path
    assert wi._find_icon_path("rain") == icon_path


def test_find_icon_path_night_falls_back_to_day(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    day = tmp_path / "partlycloudy_day.png"
    _write_dummy_png(day)
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    assert wi._find_icon_path("partlycloudy_night") == day


def test_find_icon_path_falls_back_to_clearsky(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    fallback = tmp_path / "clearsky_day.png"
    _write_dummy_png(fallback)
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    assert wi._find_icon_path("heavysnow") == fallback


def test_find_icon_path_none_if_no_files(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])
    assert wi._find_icon_path("rain") is None


def test_render_weather_icon_img_and_placeholder(monkeypatch, tmp_path):
    wi._ICON_CACHE.clear()
    _write_dummy_png(tmp_path / "fog.png")
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path])

    assert wi.render_weather_icon("fog").startswith("<img ")
    assert "data:image/png;base64," in wi.render_weather_icon("fog")
    assert wi.render_weather_icon("").startswith("<span")

    wi._ICON_CACHE.clear()
    monkeypatch.setattr(wi, "SEARCH_DIRS", [tmp_path / "empty"])
    assert "not found: fog" in wi.render_weather_icon("fog")


def test_render_wind_icon_arrow_fallback(monkeypatch, tmp_path):
    monkeypatch.setattr(wi, "WIND_DIRS", [tmp_path])
    html = wi.render_wind_icon(0, "N")
    assert "↓" in html
    assert 'title="N"' in html

    _write_dummy_png(tmp_path / "E.png")
    assert wi.render_wind_icon(4, "E").startswith("<img ")
