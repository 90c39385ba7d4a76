"""
mmcal.engines.watat
-------------------
Watat (intercalary year) test for a single Myanmar year, using mean
solar and lunar periods only.
"""

from __future__ import annotations

import math

from ..core.types import WatatInfo
from .specs import CalendarParams, ERA3


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def excess_day(myanmar_year: int, params: CalendarParams = ERA3.params) -> float:
    """
    Days of the solar year left over after whole lunar months, counted from
    the Kali Yuga epoch (ME -3739). Values below the carry threshold are
    moved up by one lunar month.
    """
    lm = params.lunar_month
    ed = (params.solar_year * (myanmar_year + 3739)) % lm
    if ed < params.excess_threshold:
        ed += lm
    return ed


def evaluate_watat(myanmar_year: int, params: CalendarParams = ERA3.params) -> WatatInfo:
    ed = excess_day(myanmar_year, params)
    # Full moon of the second Waso, to the nearest civil day.
    fm = (
        params.solar_year * myanmar_year
        + params.epoch
        - ed
        + 4.5 * params.lunar_month
        + params.watat_offset
    )
    return WatatInfo(
        myanmar_year=myanmar_year,
        is_watat=ed >= params.watat_threshold,
        second_waso_full_moon=float(round_half_up(fm)),
        excess_day=ed,
    )
