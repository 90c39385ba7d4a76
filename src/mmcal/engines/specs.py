"""
mmcal.engines.specs
-------------------
Pure data definitions of the calendar constants. Engines are built from
these by `mmcal.engines.factory.make_engine`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Dict

from ..core.types import EngineId


# ============================================================
# THIRD ERA CONSTANTS (ME 1312 onwards)
# ============================================================

SOLAR_YEAR = 365.2587565       # mean solar year (days)
LUNAR_MONTH = 29.53058795      # mean synodic month (days)
MYANMAR_EPOCH = 1954168.050623  # Julian date of the beginning of ME 0

THIRD_ERA_MONTHS = 8     # intercalation month count
THIRD_ERA_OFFSET = -0.5  # watat offset (days)

BUDDHIST_OFFSET = 1182   # Buddhist (Sasana) year = Myanmar year + 1182
WATAT_LOOKBACK = 3       # a watat year always occurs within 3 preceding years
TAGU_OFFSET = 102        # days from the second Waso full moon back to Tagu 1


@dataclass(frozen=True)
class CalendarParams:
    solar_year: float = SOLAR_YEAR
    lunar_month: float = LUNAR_MONTH
    epoch: float = MYANMAR_EPOCH
    intercalation_months: int = THIRD_ERA_MONTHS
    watat_offset: float = THIRD_ERA_OFFSET
    buddhist_offset: int = BUDDHIST_OFFSET
    watat_lookback: int = WATAT_LOOKBACK
    tagu_offset: int = TAGU_OFFSET

    def __post_init__(self) -> None:
        for name in ("solar_year", "lunar_month", "epoch", "watat_offset"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.solar_year <= 0 or self.lunar_month <= 0:
            raise ValueError("solar_year, lunar_month must be positive")
        if not (self.solar_year / 12 > self.lunar_month):
            raise ValueError("Require solar_year / 12 > lunar_month")
        if not (0 < self.intercalation_months < 12):
            raise ValueError("intercalation_months must be in 1..11")
        if self.watat_lookback < 1:
            raise ValueError("watat_lookback must be positive")

    @property
    def month_excess(self) -> float:
        """Days by which a twelfth of the solar year exceeds the lunar month."""
        return self.solar_year / 12 - self.lunar_month

    @property
    def excess_threshold(self) -> float:
        """Excess days below this value are carried over by one lunar month."""
        return self.month_excess * (12 - self.intercalation_months)

    @property
    def watat_threshold(self) -> float:
        """Excess days at or above this value make the year watat."""
        return self.lunar_month - self.month_excess * self.intercalation_months


@dataclass(frozen=True)
class EngineSpec:
    id: EngineId
    params: CalendarParams
    meta: dict

    @staticmethod
    def like(name: str) -> "EngineSpec":
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, params=replace(self.params, **kwargs))


ERA3 = EngineSpec(
    id=EngineId(family="era3", name="era3", version="1"),
    params=CalendarParams(),
    meta={"description": "Myanmar calendar, Third Era mean-value watat rule"},
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "era3": ERA3,
}
