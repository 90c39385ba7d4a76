"""
mmcal.engines.year
------------------
Resolves a Myanmar year: its type (common, small watat, big watat) and
the civil day on which its first month, Tagu, begins.

Watat years are 2 or 3 years apart, so the nearest preceding watat year
is found by stepping back rather than by a closed form.
"""

from __future__ import annotations

import logging
import math
import numbers

from ..core.errors import CalendarDomainError, WatatInconsistencyError
from ..core.types import WatatInfo, YearInfo
from .specs import CalendarParams, ERA3
from .watat import evaluate_watat

logger = logging.getLogger(__name__)


def previous_watat(myanmar_year: int, params: CalendarParams = ERA3.params) -> tuple[WatatInfo, int]:
    """Nearest watat year strictly before `myanmar_year`, with its distance."""
    for yd in range(1, params.watat_lookback + 1):
        w = evaluate_watat(myanmar_year - yd, params)
        if w.is_watat:
            return w, yd
    raise WatatInconsistencyError(
        myanmar_year,
        message=f"No watat year within {params.watat_lookback} years before {myanmar_year}",
    )


def resolve_year(myanmar_year: int, params: CalendarParams = ERA3.params) -> YearInfo:
    if isinstance(myanmar_year, bool) or not isinstance(myanmar_year, numbers.Integral):
        raise TypeError(f"Myanmar year must be an integer, got {myanmar_year!r}")
    myanmar_year = int(myanmar_year)

    y2 = evaluate_watat(myanmar_year, params)
    y1, yd = previous_watat(myanmar_year, params)

    year_type = 0
    if y2.is_watat:
        nd = (y2.second_waso_full_moon - y1.second_waso_full_moon) % 354
        if nd != 30 and nd != 31:
            raise WatatInconsistencyError(myanmar_year, nd)
        year_type = math.floor(nd / 31) + 1

    tagu_first_day = y1.second_waso_full_moon + 354 * yd - params.tagu_offset
    if not math.isfinite(tagu_first_day):
        raise CalendarDomainError(f"Tagu first day for year {myanmar_year} is not finite")

    logger.debug(
        "year %d: type=%d tagu1=%s watat_year=%d yd=%d",
        myanmar_year, year_type, tagu_first_day, y1.myanmar_year, yd,
    )
    return YearInfo(
        myanmar_year=myanmar_year,
        tagu_first_day=tagu_first_day,
        year_type=year_type,
        watat_year=y1.myanmar_year,
        watat_distance=yd,
    )
