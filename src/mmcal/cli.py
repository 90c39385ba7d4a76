from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_PHASES = {"full": (1,), "new": (3,), "both": (1, 3)}


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_day(argv: list[str]) -> int:
    import mmcal

    p = argparse.ArgumentParser(prog="mmcal day", description="Gregorian -> Myanmar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="era3")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = mmcal.day_info(_parse_ymd(args.date), engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    m = info.myanmar
    print(f"Date          = {info.civil_date.isoformat()}")
    print(f"Myanmar year  = {m.myanmar_year}  (Buddhist year {m.buddhist_year}, type {m.year_type}, {m.year_length} days)")
    print(f"Month         = {m.month}  (type {m.month_type}, {m.month_length} days)")
    print(f"Day           = {m.month_day}  (fortnight day {m.fortnight_day})")
    print(f"Moon phase    = {m.moon_phase}")
    print(f"Weekday       = {m.week_day}")
    if m.year_transit:
        print("Year transit  = yes")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    if info.debug:
        print()
        for k, v in info.debug.items():
            print(f"  {k} = {v}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import mmcal
    from mmcal.core.time import jdn_to_date

    p = argparse.ArgumentParser(prog="mmcal year", description="Watat status and Tagu 1 of a Myanmar year")
    p.add_argument("year", type=int, help="Myanmar (ME) year")
    p.add_argument("--engine", default="era3")
    args = p.parse_args(argv)

    w = mmcal.watat_info(args.year, engine=args.engine)
    yi = mmcal.year_info(args.year, engine=args.engine)
    tagu1 = int(yi.tagu_first_day)

    print(f"Myanmar year        = {args.year}")
    print(f"Watat               = {'yes' if w.is_watat else 'no'}")
    print(f"Year type           = {yi.year_type}")
    print(f"Year length         = {yi.year_length}")
    print(f"Excess days         = {w.excess_day:.6f}")
    print(f"2nd Waso full moon  = {int(w.second_waso_full_moon)}  ({jdn_to_date(int(w.second_waso_full_moon)).isoformat()})")
    print(f"Tagu 1              = {tagu1}  ({jdn_to_date(tagu1).isoformat()})")
    print(f"Previous watat year = {yi.watat_year}  ({yi.watat_distance} years back)")
    return 0


def cmd_uposatha(argv: list[str]) -> int:
    import mmcal

    p = argparse.ArgumentParser(prog="mmcal uposatha", description="List full-moon and new-moon days of a Gregorian year")
    p.add_argument("year", type=int, help="Gregorian year")
    p.add_argument("--engine", default="era3")
    p.add_argument("--phase", choices=sorted(_PHASES), default="both")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Date display format (default: iso).",
    )
    args = p.parse_args(argv)

    days = mmcal.find_uposatha_days(args.year, engine=args.engine, phases=_PHASES[args.phase])
    for u in days:
        d = u.civil_date
        s = d.isoformat() if args.dates == "iso" else f"{d.month:02d}-{d.day:02d}"
        label = "full moon" if u.moon_phase == 1 else "new moon"
        print(f"{s}  {label:9s}  ME {u.myanmar.myanmar_year} month {u.myanmar.month}")
    print(f"\n{len(days)} days")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    verbose = False
    if argv and argv[0] in ("-v", "--verbose"):
        verbose = True
        argv = argv[1:]
    _setup_logging(verbose)

    # Shorthand: `mmcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="mmcal", description="Myanmar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Myanmar day label", add_help=False)
    sub.add_parser("year", help="Watat status and Tagu 1 of a Myanmar year", add_help=False)
    sub.add_parser("uposatha", help="Full-moon and new-moon days of a Gregorian year", add_help=False)
    sub.add_parser("tagu-table", help="Print Tagu 1 / new year table (diagnostics)", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["consistency", "watat-barcode"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "uposatha":
        return cmd_uposatha(rest)

    if args.cmd == "tagu-table":
        return _run_module_main("mmcal.diagnostics.tagu_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "consistency": "mmcal.diagnostics.consistency",
            "watat-barcode": "mmcal.diagnostics.watat_barcode",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
