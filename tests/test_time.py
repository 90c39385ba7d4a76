# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone

from mmcal.core import time as mt

def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(5000):
        jdn_in = random.randint(1721426, 5373484)
        assert mt.date_to_jdn(mt.jdn_to_date(jdn_in)) == jdn_in

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert mt.date_to_jdn(date(2000, 1, 1)) == 2451545

    # Astronomical JD of the Unix epoch is 2440587.5; the calendar epoch sits 7 hours earlier.
    unix_dt = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert mt.julian_day(unix_dt) == pytest.approx(2440587.5 + 7 / 24, abs=1e-9)
    assert mt.julian_day(datetime(2000, 1, 1, 12)) == pytest.approx(2451545.0 + 7 / 24, abs=1e-9)

def test_date_is_midnight_utc():
    d = date(2026, 3, 14)
    assert mt.julian_day(d) == mt.julian_day(datetime(2026, 3, 14, tzinfo=timezone.utc))

def test_aware_datetime_is_converted_to_utc():
    yangon = timezone(timedelta(hours=6, minutes=30))
    local = datetime(2026, 1, 1, 6, 30, tzinfo=yangon)
    assert mt.julian_day(local) == mt.julian_day(datetime(2026, 1, 1))

def test_julian_day_is_monotonic_and_fractional():
    t0 = datetime(2024, 2, 28, 23, 0, tzinfo=timezone.utc)
    values = [mt.julian_day(t0 + timedelta(hours=h)) for h in range(0, 72, 6)]
    assert all(b > a for a, b in zip(values, values[1:]))
    assert values[1] - values[0] == pytest.approx(0.25, abs=1e-9)

def test_myanmar_day_number_rounds_to_civil_jdn():
    for d in (date(1900, 1, 1), date(2000, 1, 1), date(2026, 12, 31)):
        x = mt.myanmar_day_number(d)
        assert x - mt.date_to_jdn(d) == pytest.approx(7 / 24, abs=1e-9)

def test_iter_year_days():
    days = list(mt.iter_year_days(2024))
    assert len(days) == 366
    assert days[0] == date(2024, 1, 1)
    assert days[-1] == date(2024, 12, 31)
    assert len(list(mt.iter_year_days(2026))) == 365
