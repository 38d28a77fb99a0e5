from __future__ import annotations

from collections.abc import Iterable

from src.api.forecast_models import HourlySample
from src.config import MATCH_TOLERANCE_S


def find_nearest(
    samples: Iterable[HourlySample],
    target_unix_ts: float,
    tolerance_s: float = MATCH_TOLERANCE_S,
) -> HourlySample | None:
    """
    First sample whose timestamp is within tolerance_s of target_unix_ts.

    With the default tolerance this is an exact match: an arrival time that
    does not land on a whole forecast hour finds nothing. None means "no
    sample for this point" and is a normal outcome.
    """
    return next(
        (s for s in samples if abs(s.unix_timestamp - target_unix_ts) < tolerance_s),
        None,
    )
