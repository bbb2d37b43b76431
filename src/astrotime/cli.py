from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2}(?:\.\d*)?)$")

_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def _parse_date(s: str) -> tuple[int, int, float]:
    """Parse '[-]Y-MM-DD[.ddd]' into (year, month, decimal_day)."""
    m = _DATE_RE.match(s.strip())
    if not m:
        raise SystemExit(f"Bad date {s!r}; expected [-]Y-MM-DD[.ddd]")
    return int(m.group(1)), int(m.group(2)), float(m.group(3))


def _fmt_hms(h: float) -> str:
    from astrotime.reference.sidereal import hours_to_hms

    h_int, m_int, s = hours_to_hms(h)
    return f"{h_int:02d}h{m_int:02d}m{s:07.4f}s"


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


def cmd_jd(argv: list[str]) -> int:
    import astrotime
    from astrotime.core.errors import AstrotimeError

    # negative years look like options to argparse; take the date positionally first
    date_arg = None
    if argv and _DATE_RE.match(argv[0]):
        date_arg, argv = argv[0], argv[1:]

    p = argparse.ArgumentParser(prog="astrotime jd", description="Calendar date -> Julian Day and derived time scales")
    p.add_argument("date", nargs="?" if date_arg else None, default=date_arg,
                   help="[-]Y-MM-DD[.ddd], astronomical year numbering")
    p.add_argument("--calendar", choices=["auto", "julian", "gregorian"], default="auto",
                   help="calendar of the date (auto: Julian before 1582-10-15)")
    p.add_argument("--hour", type=float, default=0.0)
    p.add_argument("--minute", type=float, default=0.0)
    p.add_argument("--second", type=float, default=0.0)
    p.add_argument("--method", choices=["meeus", "em2006"], default="meeus", help="ΔT model")
    args = p.parse_args(argv)

    year, month, dd = _parse_date(args.date)
    if args.calendar == "auto":
        cal = astrotime.calendar_for(year, month, dd)
    else:
        cal = astrotime.CalendarType(args.calendar)

    try:
        if args.hour or args.minute or args.second:
            if dd != int(dd):
                raise SystemExit("Give either a fractional day or --hour/--minute/--second, not both")
            dom = astrotime.DayOfMonth(int(dd), args.hour, args.minute, args.second)
            date = astrotime.Date.from_day_of_month(year, month, dom, cal)
        else:
            date = astrotime.Date(year, month, dd, cal)
    except AstrotimeError as e:
        raise SystemExit(str(e)) from e

    jd = astrotime.julian_day(date)
    dT = astrotime.delta_t(year, month, method=args.method)
    jde = astrotime.julian_ephemeris_day(jd, dT)

    print(f"Date    : {date.year}-{date.month:02d}-{date.decimal_day:09.6f} ({date.calendar_type.value})")
    print(f"Year    = {astrotime.decimal_year(date):.8f}")
    print(f"JD      = {jd:.6f}")
    print(f"T       = {astrotime.julian_cent(jd):.12f}  (Julian centuries from J2000.0)")
    print(f"tau     = {astrotime.julian_mill(jd):.12f}  (Julian millennia from J2000.0)")
    print(f"Weekday : {_WEEKDAYS[astrotime.day_of_week(jd)]}")
    print(f"ΔT      = {dT:.2f} s  ({args.method})")
    print(f"JDE     = {jde:.6f}")
    return 0


def cmd_date(argv: list[str]) -> int:
    import astrotime

    p = argparse.ArgumentParser(prog="astrotime date", description="Julian Day -> calendar date")
    p.add_argument("jd", type=float, help="Julian Day")
    args = p.parse_args(argv)

    date = astrotime.date_frm_julian_day(args.jd)
    print(f"JD      = {args.jd:.6f}")
    print(f"Date    : {date.year}-{date.month:02d}-{date.decimal_day:09.6f} ({date.calendar_type.value})")
    print(f"Time    : {_fmt_hms(date.day_fraction * 24.0)}")
    print(f"Weekday : {_WEEKDAYS[astrotime.day_of_week(args.jd)]}")
    return 0


def cmd_deltat(argv: list[str]) -> int:
    from astrotime.reference import deltat as dt

    p = argparse.ArgumentParser(prog="astrotime deltat", description="Approximate ΔT = TT - UT for a year and month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, nargs="?", default=1)
    p.add_argument("--method", choices=["meeus", "em2006"], default="meeus")
    p.add_argument("--correction-c", action="store_true", help="apply the lunar secular acceleration correction")
    args = p.parse_args(argv)

    if not (1 <= args.month <= 12):
        raise SystemExit(f"month must be in 1..12, got {args.month}")

    y = dt.delta_t_year(args.year, args.month)
    value = dt.delta_t(args.year, args.month, method=args.method, apply_correction_c=args.correction_c)
    print(f"y  = {y:.4f}")
    print(f"ΔT = {value:.3f} s  ({args.method})")
    return 0


def cmd_sidereal(argv: list[str]) -> int:
    from astrotime.reference import sidereal as sd

    p = argparse.ArgumentParser(prog="astrotime sidereal", description="Greenwich mean/apparent sidereal time at a JD(UT).")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Day in UT (default: J2000.0 = 2451545.0)")
    p.add_argument("--nutation-deg", type=float, default=None, help="nutation in longitude Δψ (degrees)")
    p.add_argument("--obliquity-deg", type=float, default=None, help="obliquity of the ecliptic ε (degrees)")
    args = p.parse_args(argv)

    if (args.nutation_deg is None) != (args.obliquity_deg is None):
        raise SystemExit("--nutation-deg and --obliquity-deg must be given together")

    mean = sd.mn_sidr(args.jd)
    print(f"JD            = {args.jd:.6f}")
    print(f"Mean GST      = {mean:.9f} h  ({_fmt_hms(mean)})")
    if args.nutation_deg is not None:
        app = sd.apprnt_sidr(args.jd, args.nutation_deg, args.obliquity_deg)
        print(f"Apparent GST  = {app:.9f} h  ({_fmt_hms(app)})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `astrotime Y-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_jd(argv)

    p = argparse.ArgumentParser(prog="astrotime", description="Astronomical time and calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("jd", help="Calendar date -> Julian Day, T, ΔT, JDE")
    sub.add_parser("date", help="Julian Day -> calendar date")
    sub.add_parser("deltat", help="Approximate ΔT for a year and month")
    sub.add_parser("sidereal", help="Greenwich mean/apparent sidereal time")

    # diagnostics (no ephemeris)
    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "deltat-continuity", "plot-deltat"],
        help="Which diagnostic to run",
    )

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Cross-checks against external ephemeris libraries")
    p_ephem.add_argument("tool", choices=["validate-sidereal"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "jd":
        return cmd_jd(rest)

    if args.cmd == "date":
        return cmd_date(rest)

    if args.cmd == "deltat":
        return cmd_deltat(rest)

    if args.cmd == "sidereal":
        return cmd_sidereal(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "astrotime.diagnostics.round_trip",
            "deltat-continuity": "astrotime.diagnostics.deltat_continuity",
            "plot-deltat": "astrotime.diagnostics.plot_deltat",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-sidereal": "astrotime.diagnostics.ephem.validate_sidereal",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
