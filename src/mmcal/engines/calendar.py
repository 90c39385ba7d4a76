"""
mmcal.engines.calendar
----------------------
The Orchestrator. Binds the watat evaluator and year resolver to civil
Julian day numbers and produces the full Myanmar date breakdown.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Dict, List, Sequence

from ..core.errors import CalendarDomainError
from ..core.time import myanmar_day_number
from ..core.types import DayInfo, EngineId, FULL_MOON, MyanmarDate, NEW_MOON, UposathaDay, WatatInfo, YearInfo
from .specs import CalendarParams
from .watat import evaluate_watat, round_half_up
from .year import resolve_year

logger = logging.getLogger(__name__)

# Mean month length and phase shift of the closed-form month decomposition
MONTH_DAYS = 29.544
MONTH_SHIFT = 29.26


class MyanmarCalendarEngine:
    """
    Translates continuous Julian day values into Myanmar calendar dates.
    """
    def __init__(self, id: EngineId, params: CalendarParams):
        self.id = id
        self.params = params

    # ---------------------------------------------------------
    # Year level
    # ---------------------------------------------------------

    def watat_info(self, myanmar_year: int) -> WatatInfo:
        return evaluate_watat(myanmar_year, self.params)

    def year_info(self, myanmar_year: int) -> YearInfo:
        return resolve_year(myanmar_year, self.params)

    def estimate_year(self, jd: int) -> int:
        """Myanmar year whose solar new year has passed by civil day `jd`."""
        return math.floor((jd - 0.5 - self.params.epoch) / self.params.solar_year)

    # ---------------------------------------------------------
    # Day level
    # ---------------------------------------------------------

    def to_myanmar_date(self, jdn: float) -> MyanmarDate:
        if not math.isfinite(jdn):
            raise CalendarDomainError(f"Julian day must be finite, got {jdn!r}")
        jd = round_half_up(jdn)
        my = self.estimate_year(jd)
        yi = self.year_info(my)

        dd = jd - round_half_up(yi.tagu_first_day) + 1
        b = yi.year_type // 2
        c = 1 // (yi.year_type + 1)
        yl = 354 + (1 - c) * 30 + b

        # Days past the nominal year length fall in late Tagu / late Kason.
        mmt = (dd - 1) // yl
        if mmt not in (0, 1):
            raise CalendarDomainError(f"Day {jd} lies {dd} days from Tagu 1 of year {my}")
        dd -= mmt * yl

        a = (dd + 423) // 512
        mm = math.floor((dd - b * a + c * a * 30 + MONTH_SHIFT) / MONTH_DAYS)
        e = (mm + 12) // 16
        f = (mm + 11) // 16
        md = dd - math.floor(MONTH_DAYS * mm - MONTH_SHIFT) - b * e + c * f * 30
        mm += f * 3 - e * 4 + 12 * mmt

        mml = 30 - mm % 2
        if mm == 3:
            mml += b  # Nayon gains a day in a big watat year
        if not (0 <= mm <= 14) or not (1 <= md <= mml):
            raise CalendarDomainError(f"Day {jd} resolved to month {mm} day {md} in year {my}")

        mp = (md + 1) // 16 + md // 16 + md // mml
        fd = md - 15 * (md // 16)
        wd = (jd + 2) % 7

        year_transit = self.estimate_year(jd - 1) != my

        logger.debug(
            "jdn=%s jd=%d my=%d yl=%d mm=%d md=%d mp=%d", jdn, jd, my, yl, mm, md, mp
        )
        return MyanmarDate(
            jdn=jd,
            myanmar_year=my,
            buddhist_year=my + self.params.buddhist_offset,
            year_type=yi.year_type,
            year_length=yl,
            month=mm,
            month_type=mmt,
            month_length=mml,
            month_day=md,
            fortnight_day=fd,
            moon_phase=mp,
            week_day=wd,
            year_transit=year_transit,
        )

    def find_uposatha_days(self, year: int, *, phases: Sequence[int] = (FULL_MOON, NEW_MOON)) -> List[UposathaDay]:
        from .uposatha import find_uposatha_days
        return find_uposatha_days(self, year, phases=phases)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "params": self.params.__dict__}

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        jdn = myanmar_day_number(d)
        md = self.to_myanmar_date(jdn)
        dbg = None
        if debug:
            yi = self.year_info(md.myanmar_year)
            dbg = {
                "jdn": jdn,
                "tagu_first_day": yi.tagu_first_day,
                "watat_year": yi.watat_year,
                "watat_distance": yi.watat_distance,
                "second_waso_full_moon": self.watat_info(md.myanmar_year).second_waso_full_moon,
            }
        return DayInfo(civil_date=d, engine=self.id, myanmar=md, debug=dbg)

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
