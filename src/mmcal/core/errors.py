from __future__ import annotations

from typing import Optional


class MmcalError(Exception):
    """Base error."""


class WatatInconsistencyError(MmcalError):
    """Raised when the watat model cannot classify a Myanmar year."""

    def __init__(self, myanmar_year: int, nd: Optional[float] = None, message: Optional[str] = None):
        self.myanmar_year = myanmar_year
        self.nd = nd
        if message is None:
            message = f"Watat day difference for year {myanmar_year} is {nd}, expected 30 or 31"
        super().__init__(message)


class CalendarDomainError(MmcalError, ValueError):
    """Raised when an input or intermediate value falls outside the calendar's domain."""


class EngineUnavailableError(MmcalError):
    """Raised when an optional dependency (e.g. numpy for diagnostics) is not available."""
