"""mmcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    explain,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
    watat_info,
    year_info,
    to_myanmar_date,
    myanmar_date,
    find_uposatha_days,
    uposatha_dates,
)
from .core.errors import CalendarDomainError, MmcalError, WatatInconsistencyError
from .core.time import julian_day
from .core.types import MyanmarDate, UposathaDay, WatatInfo, YearInfo

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "day_info",
    "explain",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "watat_info",
    "year_info",
    "to_myanmar_date",
    "myanmar_date",
    "find_uposatha_days",
    "uposatha_dates",
    "julian_day",
    "MyanmarDate",
    "UposathaDay",
    "WatatInfo",
    "YearInfo",
    "MmcalError",
    "WatatInconsistencyError",
    "CalendarDomainError",
]
