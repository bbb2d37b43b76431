#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from typing import List, Optional

from astrotime.ephemeris import load_timescale
from astrotime.reference import sidereal as sd
from astrotime.reference import time_scales as ts


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astrotime[diagnostics]"') from e


def _diff_seconds(a_hours: float, b_hours: float) -> float:
    """Signed difference a - b of two sidereal times, in seconds of time, wrapped to [-12h, 12h)."""
    d = (a_hours - b_hours + 12.0) % 24.0 - 12.0
    return d * 3600.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare mn_sidr/apprnt_sidr against skyfield GMST/GAST.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--step-days", type=float, default=97.3)
    p.add_argument("--tol-mean", type=float, default=0.01, help="max |mean difference| in seconds of time")
    p.add_argument("--tol-apparent", type=float, default=0.05, help="max |apparent difference| in seconds of time")
    args = p.parse_args(argv)

    np = _need_numpy()
    from skyfield.nutationlib import iau2000a_radians, mean_obliquity

    timescale = load_timescale()

    jd_start = ts.JD_J2000 + (args.year_start - 2000) * 365.25
    jd_end = ts.JD_J2000 + (args.year_end - 2000) * 365.25
    jds = np.arange(jd_start, jd_end, args.step_days)

    print(f"Comparing {len(jds)} epochs from {args.year_start} to {args.year_end}...")

    err_mean = []
    err_app = []
    for jd in jds:
        jd = float(jd)
        t = timescale.ut1_jd(jd)

        dpsi_rad, _ = iau2000a_radians(t)
        eps_deg = mean_obliquity(t.tdb) / 3600.0
        dpsi_deg = math.degrees(float(dpsi_rad))

        err_mean.append(_diff_seconds(sd.mn_sidr(jd), float(t.gmst)))
        err_app.append(_diff_seconds(sd.apprnt_sidr(jd, dpsi_deg, eps_deg), float(t.gast)))

    err_mean = np.array(err_mean)
    err_app = np.array(err_app)

    print("Mean sidereal time     (astrotime - skyfield GMST):")
    print(f"  max |diff| = {np.max(np.abs(err_mean)):.6f} s   rms = {np.sqrt(np.mean(err_mean ** 2)):.6f} s")
    print("Apparent sidereal time (astrotime - skyfield GAST):")
    print(f"  max |diff| = {np.max(np.abs(err_app)):.6f} s   rms = {np.sqrt(np.mean(err_app ** 2)):.6f} s")

    ok = np.max(np.abs(err_mean)) <= args.tol_mean and np.max(np.abs(err_app)) <= args.tol_apparent
    print("OK" if ok else "FAIL: difference exceeds tolerance")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
