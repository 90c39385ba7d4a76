from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, EngineRegistry
from .core.time import DateLike, myanmar_day_number
from .core.types import DayInfo, FULL_MOON, MyanmarDate, NEW_MOON, UposathaDay, WatatInfo, YearInfo
from .attributes.registry import compute_attributes
from .engines.specs import EngineSpec
from .engines.factory import make_engine as _make_engine

DEFAULT_ENGINE = "era3"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Year level
# ============================================================

def watat_info(myanmar_year: int, *, engine: str = DEFAULT_ENGINE) -> WatatInfo:
    return _reg().get(engine).watat_info(myanmar_year)

def year_info(myanmar_year: int, *, engine: str = DEFAULT_ENGINE) -> YearInfo:
    return _reg().get(engine).year_info(myanmar_year)

# ============================================================
# Day level
# ============================================================

def to_myanmar_date(jdn: float, *, engine: str = DEFAULT_ENGINE) -> MyanmarDate:
    """Myanmar date of a Julian day value (days since -4713-11-24 05:00 UTC)."""
    return _reg().get(engine).to_myanmar_date(jdn)

def myanmar_date(d: DateLike, *, engine: str = DEFAULT_ENGINE) -> MyanmarDate:
    """Myanmar date of a civil date (midnight UTC) or UTC datetime."""
    return _reg().get(engine).to_myanmar_date(myanmar_day_number(d))

def day_info(
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(engine).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: date, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

def find_uposatha_days(
    year: int,
    *,
    engine: str = DEFAULT_ENGINE,
    phases: Sequence[int] = (FULL_MOON, NEW_MOON),
) -> List[UposathaDay]:
    return _reg().get(engine).find_uposatha_days(year, phases=phases)

def uposatha_dates(year: int, *, engine: str = DEFAULT_ENGINE) -> List[date]:
    """Plain civil dates of the full-moon and new-moon days of `year`."""
    return [u.civil_date for u in find_uposatha_days(year, engine=engine)]
