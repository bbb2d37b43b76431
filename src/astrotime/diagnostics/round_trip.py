from __future__ import annotations

import argparse
import random
from typing import List, Optional

import astrotime
from astrotime.core.errors import InvalidCalendarTransition


def random_date(year_lo: int, year_hi: int) -> astrotime.Date:
    """Random valid Date in [year_lo, year_hi], in the calendar in force on that day."""
    while True:
        year = random.randint(year_lo, year_hi)
        month = random.randint(1, 12)
        cal = astrotime.calendar_for(year, month, 1.0)
        n = astrotime.days_in_month(year, month, cal)
        dd = random.uniform(1.0, n + 1.0)
        if dd >= n + 1.0:
            continue
        cal = astrotime.calendar_for(year, month, dd)
        try:
            return astrotime.Date(year, month, dd, cal)
        except InvalidCalendarTransition:
            # reform gap
            continue


def roundtrip_test(N: int, year_lo: int, year_hi: int, seed: int, *, tol_days: float, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(year_lo, year_hi)
        jd = astrotime.julian_day(d0)
        d1 = astrotime.date_frm_julian_day(jd)

        ok = (
            d1.year == d0.year
            and d1.month == d0.month
            and d1.calendar_type is d0.calendar_type
            and abs(d1.decimal_day - d0.decimal_day) <= tol_days
        )
        if not ok:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("jd:", repr(jd))
            print("d1:", d1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random Date -> JD -> Date round-trip check.")
    p.add_argument("--n", type=int, default=20000)
    p.add_argument("--year-start", type=int, default=-4712)
    p.add_argument("--year-end", type=int, default=3000)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--tol", type=float, default=1e-6, help="tolerance on decimal_day (days)")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    if args.year_end < args.year_start:
        raise SystemExit("--year-end must be >= --year-start")

    failures = roundtrip_test(
        args.n, args.year_start, args.year_end, args.seed,
        tol_days=args.tol, max_failures=args.max_failures,
    )
    if failures:
        print(f"\n{failures} round-trip failure(s).")
        return 1
    print(f"OK: {args.n} dates round-tripped within {args.tol:g} days.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
