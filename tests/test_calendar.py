# tests/test_calendar.py

import math
import random
from datetime import date, datetime, timezone
from unittest.mock import patch

import pytest

import mmcal
from mmcal.core.errors import CalendarDomainError, WatatInconsistencyError
from mmcal.core.time import date_to_jdn
from mmcal.core.types import WatatInfo, YearInfo
from mmcal.engines.specs import ERA3

def test_reference_date_2000():
    m = mmcal.myanmar_date(date(2000, 1, 1))
    assert m.jdn == 2451545
    assert m.myanmar_year == 1361
    assert m.buddhist_year == 2543
    assert m.year_type == 1
    assert m.year_length == 384
    # Nadaw waning 10, a Saturday
    assert (m.month, m.month_type, m.month_day) == (9, 0, 25)
    assert m.month_length == 29
    assert m.fortnight_day == 10
    assert m.moon_phase == 2
    assert m.week_day == 0
    assert not m.year_transit

def test_late_tagu_and_new_year():
    eve = mmcal.myanmar_date(date(2024, 4, 16))
    assert (eve.myanmar_year, eve.month, eve.month_type, eve.month_day) == (1385, 13, 1, 8)
    assert not eve.year_transit

    ny = mmcal.myanmar_date(date(2024, 4, 17))
    assert (ny.myanmar_year, ny.month, ny.month_type, ny.month_day) == (1386, 1, 0, 9)
    assert ny.year_transit
    assert ny.week_day == 4  # Wednesday

def test_new_year_days():
    transits = [
        d for d in (date(2023, 4, 17), date(2024, 4, 17), date(2025, 4, 17), date(2026, 4, 17))
        if mmcal.myanmar_date(d).year_transit
    ]
    assert len(transits) == 4
    assert not mmcal.myanmar_date(date(2025, 4, 16)).year_transit

def test_watat_year_months():
    first_waso = mmcal.myanmar_date(date(2023, 6, 18))
    assert (first_waso.month, first_waso.month_day, first_waso.month_length) == (0, 1, 30)

    second_waso_full = mmcal.myanmar_date(date(2023, 8, 1))
    assert (second_waso_full.month, second_waso_full.month_day) == (4, 15)
    assert second_waso_full.is_full_moon
    assert date_to_jdn(date(2023, 8, 1)) == mmcal.watat_info(1385).second_waso_full_moon

    # Nayon has 30 days in a big watat year
    nayon = mmcal.myanmar_date(date(2023, 6, 2))
    assert (nayon.month, nayon.month_length, nayon.moon_phase) == (3, 30, 1)

def test_jdn_is_rounded_half_up():
    j = 2451545
    assert mmcal.to_myanmar_date(j + 0.49) == mmcal.to_myanmar_date(j)
    assert mmcal.to_myanmar_date(j + 0.5) == mmcal.to_myanmar_date(j + 1)

def test_date_and_datetime_agree():
    d = date(2026, 5, 30)
    assert mmcal.myanmar_date(d) == mmcal.myanmar_date(datetime(2026, 5, 30, tzinfo=timezone.utc))

def test_deterministic():
    random.seed(7)
    for _ in range(200):
        j = random.uniform(2415020.0, 2488070.0)
        assert mmcal.to_myanmar_date(j) == mmcal.to_myanmar_date(j)

def test_ranges_and_weekday():
    random.seed(42)
    for _ in range(3000):
        j = random.randint(2415021, 2488069) + random.uniform(0.0, 0.49)
        m = mmcal.to_myanmar_date(j)
        assert 1 <= m.month_day <= m.month_length
        assert m.month_length in (29, 30)
        assert 1 <= m.fortnight_day <= 15
        assert m.moon_phase in (0, 1, 2, 3)
        assert 0 <= m.month <= 14
        assert m.month_type in (0, 1)
        assert m.week_day == (math.floor(j) + 2) % 7

def test_day_to_day_continuity():
    prev = None
    for jdn in range(date_to_jdn(date(1995, 1, 1)), date_to_jdn(date(2030, 12, 31)) + 1):
        m = mmcal.to_myanmar_date(jdn)
        if prev is not None:
            if m.myanmar_year == prev.myanmar_year:
                assert m.month_day == prev.month_day + 1 or m.month_day == 1
                if m.month_day == 1:
                    assert prev.month_day == prev.month_length
                    assert m.month != prev.month
                assert not m.year_transit
            else:
                assert m.myanmar_year == prev.myanmar_year + 1
                assert m.year_transit
        prev = m

def test_moon_phase_matches_month_day():
    for jdn in range(2460000, 2460400):
        m = mmcal.to_myanmar_date(jdn)
        if m.month_day == 15:
            assert m.moon_phase == 1
        elif m.month_day == m.month_length:
            assert m.moon_phase == 3
        elif m.month_day < 15:
            assert m.moon_phase == 0
        else:
            assert m.moon_phase == 2

def test_non_finite_jdn():
    with pytest.raises(CalendarDomainError):
        mmcal.to_myanmar_date(float("nan"))
    with pytest.raises(CalendarDomainError):
        mmcal.to_myanmar_date(float("inf"))

def test_out_of_domain_year_data():
    bogus = YearInfo(myanmar_year=1361, tagu_first_day=2451545.0 + 2000, year_type=0, watat_year=1360, watat_distance=1)
    with patch("mmcal.engines.calendar.resolve_year", return_value=bogus):
        with pytest.raises(CalendarDomainError):
            mmcal.to_myanmar_date(2451545)

def test_watat_error_propagates():
    def fake(my, params=ERA3.params):
        return WatatInfo(my, False, 1000.0, 5.0)

    with patch("mmcal.engines.year.evaluate_watat", side_effect=fake):
        with pytest.raises(WatatInconsistencyError):
            mmcal.to_myanmar_date(2451545)
        with pytest.raises(WatatInconsistencyError):
            mmcal.find_uposatha_days(2000)

def test_day_info_debug():
    info = mmcal.day_info(date(2024, 4, 17), debug=True)
    assert info.myanmar.myanmar_year == 1386
    assert info.debug["tagu_first_day"] == 2460410
    assert info.debug["watat_year"] == 1385
    assert mmcal.day_info(date(2024, 4, 17)).debug is None

def test_explain():
    out = mmcal.explain(date(2000, 1, 1))
    assert out["myanmar"].myanmar_year == 1361
    assert out["debug"] is not None
