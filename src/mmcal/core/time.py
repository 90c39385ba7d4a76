from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Iterator, Union

# Offset of the calendar epoch (-4713-11-24 05:00 UTC, proleptic Gregorian)
# from the astronomical Julian Date, whose zero is noon of the same day.
EPOCH_OFFSET_DAYS = 7.0 / 24.0

DateLike = Union[date, datetime]


def date_to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def jdn_to_date(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of date_to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def julian_day(d: DateLike) -> float:
    """
    Days elapsed since -4713-11-24 05:00 UTC.

    A datetime is read in UTC (naive values are taken to be UTC already),
    a plain date means midnight UTC.
    """
    if isinstance(d, datetime):
        dt = _as_utc(d)
        seconds = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
        jd = date_to_jdn(dt.date()) - 0.5 + seconds / 86400.0
    else:
        jd = date_to_jdn(d) - 0.5
    return jd + EPOCH_OFFSET_DAYS


def myanmar_day_number(d: DateLike) -> float:
    """Julian day value aligned to the Myanmar day boundary (julian_day + 0.5)."""
    return julian_day(d) + 0.5


def iter_year_days(year: int) -> Iterator[date]:
    """Every civil date from January 1 to December 31 of `year`."""
    jdn0 = date_to_jdn(date(year, 1, 1))
    jdn1 = date_to_jdn(date(year, 12, 31))
    for jdn in range(jdn0, jdn1 + 1):
        yield jdn_to_date(jdn)
