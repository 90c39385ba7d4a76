from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional

# Moon phase codes
WAXING = 0
FULL_MOON = 1
WANING = 2
NEW_MOON = 3

@dataclass(frozen=True)
class EngineId:
    family: Literal["era3", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class WatatInfo:
    myanmar_year: int
    is_watat: bool
    second_waso_full_moon: float
    excess_day: float

@dataclass(frozen=True)
class YearInfo:
    myanmar_year: int
    tagu_first_day: float
    year_type: int  # 0 common, 1 small watat, 2 big watat
    watat_year: int  # nearest preceding watat year
    watat_distance: int

    @property
    def year_length(self) -> int:
        return 354 + (30 if self.year_type else 0) + (1 if self.year_type == 2 else 0)

@dataclass(frozen=True)
class MyanmarDate:
    jdn: int
    myanmar_year: int
    buddhist_year: int
    year_type: int
    year_length: int
    month: int  # 0 first Waso, 1..12 Tagu..Tabaung, 13/14 late Tagu/Kason
    month_type: int
    month_length: int
    month_day: int
    fortnight_day: int
    moon_phase: int
    week_day: int  # 0 = Saturday
    year_transit: bool = False

    @property
    def is_full_moon(self) -> bool:
        return self.moon_phase == FULL_MOON

    @property
    def is_new_moon(self) -> bool:
        return self.moon_phase == NEW_MOON

@dataclass(frozen=True)
class UposathaDay:
    civil_date: date
    myanmar: MyanmarDate

    @property
    def moon_phase(self) -> int:
        return self.myanmar.moon_phase

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    myanmar: MyanmarDate
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
