#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import mmcal
from mmcal.core.errors import EngineUnavailableError


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise EngineUnavailableError('Need numpy. Install: pip install "mmcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise EngineUnavailableError('Need matplotlib. Install: pip install "mmcal[diagnostics]"') from e


def build_points(np, engine: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Myanmar years and their year types (0 common, 1 small watat, 2 big watat)."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    types = np.array([mmcal.year_info(int(Y), engine=engine).year_type for Y in years], dtype=int)
    return years, types


def watat_gaps(np, years, types) -> "np.ndarray":
    """Distances in years between consecutive watat years."""
    w = years[types > 0]
    return np.diff(w)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Watat barcode: small and big watat years across a range of Myanmar years."
    )
    p.add_argument("--start-year", type=int, default=1312)
    p.add_argument("--end-year", type=int, default=1462)
    p.add_argument("--engine", default="era3")
    p.add_argument("--out", default="watat_barcode.png")
    p.add_argument("--title", default="Watat years (Third Era mean-value rule)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years, types = build_points(np, args.engine, start_year, end_year)
    gaps = watat_gaps(np, years, types)
    if gaps.size:
        counts = {int(g): int(n) for g, n in zip(*np.unique(gaps, return_counts=True))}
        print(f"Watat gaps (years -> count): {counts}")

    fig, ax = plt.subplots(figsize=(16, 2.4))
    ax.bar(years[types == 1], 1.0, width=0.8, color="0.55", label="small watat")
    ax.bar(years[types == 2], 1.0, width=0.8, color="0.15", label="big watat")

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0, 1)
    ax.set_yticks([])
    ax.tick_params(axis="x", length=0)
    ax.set_xlabel("Myanmar year (ME)")
    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
