from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

import pandas as pd


def _cast_to_float(value: Any) -> float | None:
    """Muunna annettu arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        result = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    # "Infinity" / inf ei kelpaa mittausarvoksi
    return result if math.isfinite(result) else None


def _cast_to_int(value: Any) -> int | None:
    """Muunna annettu arvo int-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    as_float_value = _cast_to_float(value)
    if as_float_value is None:
        return None
    try:
        return int(as_float_value)
    except (OverflowError, ValueError):
        # inf / nan
        return None


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely eri lähdetyypeille:
    - None → None
    - pandas NA / NaN → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    if isinstance(value, (list, tuple, dict)):
        return value

    if pd.isna(value):
        return None

    if hasattr(value, "item"):
        value = value.item()

    return value


def as_float(x: Any) -> float | None:
    value = _normalize_scalar(x)
    if value is None or isinstance(value, bool):
        return None
    return _cast_to_float(value)


def as_int(x: Any) -> int | None:
    value = _normalize_scalar(x)
    if value is None or isinstance(value, bool):
        return None
    return _cast_to_int(value)


def as_str(x: Any) -> str:
    value = _normalize_scalar(x)
    return "" if value is None else str(value)


def pick(raw: Mapping[str, Any], *keys: str) -> Any | None:
    """Palauttaa ensimmäisen löytyvän avaimen arvon (camelCase tai snake_case)."""
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None
