#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from astrotime.reference import deltat as dt


def boundary_jumps(method: str = "meeus") -> List[Tuple[int, float, float, float]]:
    """
    For every segment boundary year b of the model, the ΔT values for
    December of b-1 and January of b, and their difference (seconds).
    """
    rows = []
    for b in dt.segment_boundaries(method):
        year = int(b)
        before = dt.delta_t(year - 1, 12, method=method)
        after = dt.delta_t(year, 1, method=method)
        rows.append((year, before, after, after - before))
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tabulate ΔT jumps across polynomial segment boundaries.")
    p.add_argument("--method", choices=["meeus", "em2006"], default="meeus")
    p.add_argument("--max-jump", type=float, default=1.0, help="flag jumps above this many seconds inside --modern-range")
    p.add_argument("--modern-start", type=int, default=1620)
    p.add_argument("--modern-end", type=int, default=2030)
    args = p.parse_args(argv)

    print(f"ΔT segment boundaries ({args.method})")
    print(f"{'year':>6}  {'Dec y-1':>12}  {'Jan y':>12}  {'jump':>10}")
    flagged = 0
    for year, before, after, jump in boundary_jumps(args.method):
        mark = ""
        if args.modern_start <= year <= args.modern_end and abs(jump) > args.max_jump:
            mark = "  <-- exceeds limit"
            flagged += 1
        print(f"{year:>6}  {before:12.3f}  {after:12.3f}  {jump:10.3f}{mark}")

    return 1 if flagged else 0


if __name__ == "__main__":
    raise SystemExit(main())
