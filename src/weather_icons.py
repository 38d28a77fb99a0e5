# weather_icons.py
import base64
from pathlib import Path

from src.paths import ASSETS, ROOT_DIR

SEARCH_DIRS = [
    ASSETS / "yr",
    ROOT_DIR / "yr",
    Path.cwd() / "assets" / "yr",
]
WIND_DIRS = [
    ASSETS / "wind",
    ROOT_DIR / "wind",
    Path.cwd() / "assets" / "wind",
]

# Unicode-nuoli tuulen kulkusuuntaan (tuuli puhaltaa sektorista, nuoli osoittaa poispäin)
WIND_ARROWS = ("↓", "↓", "↙", "↙", "←", "←", "↖", "↖", "↑", "↑", "↗", "↗", "→", "→", "↘", "↘")


def _read_png_as_data_uri(path: Path) -> str:
    b64 = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:image/png;base64,{b64}"


# Cache: muistetaan löytyneet polut
_ICON_CACHE: dict[str, Path] = {}


def _first_existing(dirs: list[Path], fname: str) -> Path | None:
    for root in dirs:
        p = root / fname
        if p.exists():
            return p
    return None


def _find_icon_path(code: str) -> Path | None:
    """Yr symbol code → PNG path. Falls back to the day/night variant and then to clearsky_day."""
    p = _ICON_CACHE.get(code)
    if p and p.exists():
        return p

    candidates = [code]
    if code.endswith("_night"):
        candidates.append(code[: -len("_night")] + "_day")
    elif code.endswith("_day"):
        candidates.append(code[: -len("_day")] + "_night")
    elif code.endswith("_polartwilight"):
        candidates.append(code[: -len("_polartwilight")] + "_day")
    candidates.append("clearsky_day")

    for candidate in candidates:
        p = _first_existing(SEARCH_DIRS, f"{candidate}.png")
        if p:
            _ICON_CACHE[code] = p
            return p
    return None


def _placeholder(size: int, text: str, title: str = "") -> str:
    title_attr = f' title="{title}"' if title else ""
    return (
        f"<span{title_attr} "
        f'style="display:inline-block;width:{size}px;height:{size}px;'
        f"background:#eee;border-radius:8px;text-align:center;line-height:{size}px;"
        f'color:#888;">{text}</span>'
    )


def render_weather_icon(code: str, size: int = 40) -> str:
    """Palauttaa <img>-HTML:n Yr-symbolikoodille."""
    if not code:
        return _placeholder(size, "?")
    p = _find_icon_path(code)
    if not p:
        return _placeholder(size, "?", title=f"not found: {code}")
    uri = _read_png_as_data_uri(p)
    return f'<img src="{uri}" width="{size}" height="{size}" alt="{code}" style="vertical-align:middle;" />'


def render_wind_icon(wind_icon_id: int, wind_icon: str, size: int = 28) -> str:
    """Wind direction icon for a compass sector; an arrow glyph if no image is available."""
    p = _first_existing(WIND_DIRS, f"{wind_icon}.png")
    if p:
        uri = _read_png_as_data_uri(p)
        return f'<img src="{uri}" width="{size}" height="{size}" alt="{wind_icon}" style="vertical-align:middle;" />'
    arrow = WIND_ARROWS[wind_icon_id % len(WIND_ARROWS)]
    return f'<span title="{wind_icon}" style="font-size:{size * 0.7:.0f}px;">{arrow}</span>'
