from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol, Sequence

from .types import DayInfo, MyanmarDate, UposathaDay, WatatInfo, YearInfo

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def watat_info(self, myanmar_year: int) -> WatatInfo: ...
    def year_info(self, myanmar_year: int) -> YearInfo: ...
    def to_myanmar_date(self, jdn: float) -> MyanmarDate: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...
    def find_uposatha_days(self, year: int, *, phases: Sequence[int] = (1, 3)) -> List[UposathaDay]: ...
    def explain(self, d: date) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
