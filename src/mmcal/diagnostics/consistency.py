"""
Scan a range of civil days and Myanmar years and check the calendar
invariants: day and fortnight ranges, weekday, day-to-day continuity,
year types and the spacing of consecutive Tagu 1 days.
"""

from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

import mmcal
from mmcal.core.errors import MmcalError
from mmcal.core.time import date_to_jdn, jdn_to_date, myanmar_day_number
from mmcal.core.types import MyanmarDate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def check_day(m: MyanmarDate, prev: Optional[MyanmarDate]) -> List[str]:
    problems = []
    if not (1 <= m.month_day <= m.month_length):
        problems.append(f"month_day {m.month_day} outside 1..{m.month_length}")
    if not (1 <= m.fortnight_day <= 15):
        problems.append(f"fortnight_day {m.fortnight_day} outside 1..15")
    if m.moon_phase not in (0, 1, 2, 3):
        problems.append(f"moon_phase {m.moon_phase}")
    if m.week_day != (m.jdn + 2) % 7:
        problems.append(f"week_day {m.week_day}")
    if prev is not None:
        if m.myanmar_year == prev.myanmar_year:
            if m.month_day != prev.month_day + 1 and m.month_day != 1:
                problems.append(f"month_day {prev.month_day} -> {m.month_day}")
            if m.year_transit:
                problems.append("year_transit inside a year")
        elif m.myanmar_year != prev.myanmar_year + 1 or not m.year_transit:
            problems.append(f"year {prev.myanmar_year} -> {m.myanmar_year}")
    return problems


def check_years(Y0: int, Y1: int, engine: str) -> List[str]:
    problems = []
    prev = mmcal.year_info(Y0 - 1, engine=engine)
    for Y in range(Y0, Y1 + 1):
        yi = mmcal.year_info(Y, engine=engine)
        if yi.year_type not in (0, 1, 2):
            problems.append(f"ME {Y}: year_type {yi.year_type}")
        if yi.tagu_first_day - prev.tagu_first_day != prev.year_length:
            problems.append(f"ME {Y}: Tagu 1 is {yi.tagu_first_day - prev.tagu_first_day} days after ME {Y - 1}")
        prev = yi
    return problems


def scan(start: date, end: date, engine: str, *, max_failures: int) -> int:
    failures = 0
    prev: Optional[MyanmarDate] = None
    for jdn in range(date_to_jdn(start), date_to_jdn(end) + 1):
        d = jdn_to_date(jdn)
        try:
            m = mmcal.to_myanmar_date(myanmar_day_number(d), engine=engine)
        except MmcalError as e:
            failures += 1
            print(f"FAIL {d}: {e}")
            prev = None
        else:
            problems = check_day(m, prev)
            if problems:
                failures += 1
                print(f"FAIL {d}: {'; '.join(problems)}")
                print("  ", m)
            prev = m
        if failures >= max_failures:
            break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check calendar invariants over a date range.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--engine", default="era3")
    p.add_argument("--max-failures", type=int, default=10, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Scanning days {start} .. {end} ...")
    failures = scan(start, end, args.engine, max_failures=args.max_failures)

    Y0 = mmcal.myanmar_date(start, engine=args.engine).myanmar_year
    Y1 = mmcal.myanmar_date(end, engine=args.engine).myanmar_year
    print(f"Checking years ME {Y0} .. {Y1} ...")
    for msg in check_years(Y0, Y1, args.engine):
        failures += 1
        print(f"FAIL {msg}")

    if failures == 0:
        print("All checks passed.")
        return 0

    print(f"Failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
