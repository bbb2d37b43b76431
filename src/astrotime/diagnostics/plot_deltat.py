#!/usr/bin/env python3
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astrotime[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "astrotime[diagnostics]"') from e


def diff_path(out: str) -> Path:
    """Filename of the difference plot, next to the main plot: deltat.png -> deltat_diff.png"""
    p = Path(out)
    return p.with_name(p.stem + "_diff.png")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot Delta T (TT-UT) using astrotime.reference.deltat.")
    p.add_argument("--y0", type=int, default=1600, help="start year")
    p.add_argument("--y1", type=int, default=2100, help="end year")
    p.add_argument("--step", type=float, default=0.25, help="sampling step in years (e.g., 0.1, 0.25, 1.0)")
    p.add_argument("--out", default="deltat.png", help="output image filename")
    p.add_argument("--show-em2006", action="store_true", help="also plot the Espenak–Meeus model and the difference")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    from astrotime.reference import deltat as dt

    # dense evaluation grid
    ys = np.arange(float(args.y0), float(args.y1) + 1e-12, float(args.step), dtype=float)
    meeus = np.array([dt.delta_t_seconds(float(y), method="meeus") for y in ys], dtype=float)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(ys, meeus, linewidth=2, label="meeus")

    if args.show_em2006:
        em = np.array([dt.delta_t_seconds(float(y), method="em2006") for y in ys], dtype=float)
        ax.plot(ys, em, linewidth=1.5, linestyle="--", label="em2006 (Espenak–Meeus)")

        fig2, ax2 = plt.subplots(figsize=(10, 3))
        ax2.plot(ys, meeus - em, linewidth=2)
        ax2.set_title("meeus - em2006 (seconds)")
        ax2.set_xlabel("Year")
        ax2.set_ylabel("ΔT_meeus - ΔT_em2006")
        ax2.grid(True, alpha=0.3)
        fig2.tight_layout()
        diff_out = diff_path(args.out)
        fig2.savefig(diff_out, dpi=200)
        print(f"Saved: {diff_out}")

    for b in dt.segment_boundaries("meeus"):
        if args.y0 <= b <= args.y1:
            ax.axvline(b, color="grey", linewidth=0.5, alpha=0.5)

    ax.set_title("Delta T = TT − UT (seconds)")
    ax.set_xlabel("Year")
    ax.set_ylabel("ΔT (s)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
