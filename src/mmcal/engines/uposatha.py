"""
mmcal.engines.uposatha
----------------------
Uposatha (observance) days of a Gregorian year: the civil days whose
Myanmar date is a full moon or a new moon.
"""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR
from typing import TYPE_CHECKING, List, Sequence

from ..core.time import iter_year_days, myanmar_day_number
from ..core.types import FULL_MOON, NEW_MOON, UposathaDay

if TYPE_CHECKING:
    from .calendar import MyanmarCalendarEngine

logger = logging.getLogger(__name__)

MOON_PHASES = (0, 1, 2, 3)


def find_uposatha_days(
    engine: "MyanmarCalendarEngine",
    year: int,
    *,
    phases: Sequence[int] = (FULL_MOON, NEW_MOON),
) -> List[UposathaDay]:
    """
    Scan January 1 .. December 31 of `year` (midnight UTC of each day,
    shifted half a day onto the Myanmar day) and keep the days whose moon
    phase is in `phases`. The result is in ascending date order.
    """
    if not (MINYEAR <= year <= MAXYEAR):
        raise ValueError(f"year must be in {MINYEAR}..{MAXYEAR}, got {year}")
    wanted = frozenset(phases)
    unknown = wanted.difference(MOON_PHASES)
    if unknown:
        raise ValueError(f"Unknown moon phase codes {sorted(unknown)}; expected a subset of {MOON_PHASES}")

    out: List[UposathaDay] = []
    for d in iter_year_days(year):
        md = engine.to_myanmar_date(myanmar_day_number(d))
        if md.moon_phase in wanted:
            out.append(UposathaDay(civil_date=d, myanmar=md))

    logger.debug("year %d: %d days with moon phase in %s", year, len(out), sorted(wanted))
    return out
