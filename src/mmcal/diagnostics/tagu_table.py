from __future__ import annotations

import argparse

import mmcal
from mmcal.core.time import jdn_to_date


YEAR_TYPES = ("common", "small watat", "big watat")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Tagu 1, new year day and year type for a range of Myanmar years."
    )
    p.add_argument("--from-year", type=int, default=1370, help="First Myanmar year (default: 1370).")
    p.add_argument("--to-year", type=int, default=1400, help="Last Myanmar year (default: 1400).")
    p.add_argument("--engine", default="era3")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["ME", "Type", "Length", "Tagu 1", "New year"]
    colw = [5, 12, 6, 10, 10]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        yi = mmcal.year_info(Y, engine=args.engine)
        tagu1 = jdn_to_date(int(yi.tagu_first_day))
        # first civil day of the year: scan forward from Tagu 1 for the year transit
        new_year = None
        for k in range(0, 60):
            d = jdn_to_date(int(yi.tagu_first_day) + k)
            if mmcal.myanmar_date(d, engine=args.engine).year_transit:
                new_year = d
                break
        row = [
            str(Y),
            YEAR_TYPES[yi.year_type],
            str(yi.year_length),
            tagu1.isoformat(),
            new_year.isoformat() if new_year else "-",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
