from __future__ import annotations

"""
astrotime.reference.deltat

Polynomial ΔT (= TT − UT) estimates, in seconds.

ΔT is evaluated at the decimal year
    y = year + (month - 0.5) / 12
i.e. the middle of the month. This is the convention of the published
polynomials and differs from astrotime.core.types.decimal_year.

Models
------
- "meeus" (default): Meeus' long-term parabolas before 1600
  (Astronomical Algorithms, ch. 10), then the Espenak–Meeus branches.
- "em2006": the Espenak–Meeus (NASA Five Millennium Canon) piecewise
  polynomials throughout, valid roughly −1999..+3000.

Every model is a sequence of half-open segments [y_min, y_max); a year
exactly on a boundary belongs to the later segment.
"""

from typing import Callable, Tuple
import math


Segment = Tuple[float, float, Callable[[float], float]]


def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


# ---------------------------------------------------------------------------
# Branch polynomials
# ---------------------------------------------------------------------------

def _long_term(y: float) -> float:
    # Morrison & Stephenson parabola
    u = (y - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def _meeus_before_948(y: float) -> float:
    t = (y - 2000.0) / 100.0
    return 2177.0 + 497.0 * t + 44.1 * t * t


def _meeus_948_1600(y: float) -> float:
    t = (y - 2000.0) / 100.0
    return 102.0 + 102.0 * t + 25.3 * t * t


def _em_before_500(y: float) -> float:
    return _poly(y / 100.0, (
        10583.6,
        -1014.41,
        33.78311,
        -5.952053,
        -0.1798452,
        0.022174192,
        0.0090316521,
    ))


def _em_500_1600(y: float) -> float:
    return _poly((y - 1000.0) / 100.0, (
        1574.2,
        -556.01,
        71.23472,
        0.319781,
        -0.8503463,
        -0.005050998,
        0.0083572073,
    ))


def _em_1600_1700(y: float) -> float:
    t = y - 1600.0
    return 120.0 - 0.9808 * t - 0.01532 * t * t + (t ** 3) / 7129.0


def _em_1700_1800(y: float) -> float:
    t = y - 1700.0
    return 8.83 + 0.1603 * t - 0.0059285 * t * t + 0.00013336 * (t ** 3) - (t ** 4) / 1174000.0


def _em_1800_1860(y: float) -> float:
    return _poly(y - 1800.0, (
        13.72,
        -0.332447,
        0.0068612,
        0.0041116,
        -0.00037436,
        0.0000121272,
        -0.0000001699,
        0.000000000875,
    ))


def _em_1860_1900(y: float) -> float:
    t = y - 1860.0
    return 7.62 + 0.5737 * t - 0.251754 * (t ** 2) + 0.01680668 * (t ** 3) - 0.0004473624 * (t ** 4) + (t ** 5) / 233174.0


def _em_1900_1920(y: float) -> float:
    t = y - 1900.0
    return -2.79 + 1.494119 * t - 0.0598939 * (t ** 2) + 0.0061966 * (t ** 3) - 0.000197 * (t ** 4)


def _em_1920_1941(y: float) -> float:
    t = y - 1920.0
    return 21.20 + 0.84493 * t - 0.076100 * (t ** 2) + 0.0020936 * (t ** 3)


def _em_1941_1961(y: float) -> float:
    t = y - 1950.0
    return 29.07 + 0.407 * t - (t ** 2) / 233.0 + (t ** 3) / 2547.0


def _em_1961_1986(y: float) -> float:
    t = y - 1975.0
    return 45.45 + 1.067 * t - (t ** 2) / 260.0 - (t ** 3) / 718.0


def _em_1986_2005(y: float) -> float:
    return _poly(y - 2000.0, (
        63.86,
        0.3345,
        -0.060374,
        0.0017275,
        0.000651814,
        0.00002373599,
    ))


def _em_2005_2050(y: float) -> float:
    t = y - 2000.0
    return 62.92 + 0.32217 * t + 0.005589 * (t ** 2)


def _em_2050_2150(y: float) -> float:
    # long-term parabola with a linear term removing the jump at 2150
    return _long_term(y) - 0.5628 * (2150.0 - y)


_INF = math.inf

# Espenak–Meeus branches from 1600 on, shared by both models.
_MODERN: Tuple[Segment, ...] = (
    (1600.0, 1700.0, _em_1600_1700),
    (1700.0, 1800.0, _em_1700_1800),
    (1800.0, 1860.0, _em_1800_1860),
    (1860.0, 1900.0, _em_1860_1900),
    (1900.0, 1920.0, _em_1900_1920),
    (1920.0, 1941.0, _em_1920_1941),
    (1941.0, 1961.0, _em_1941_1961),
    (1961.0, 1986.0, _em_1961_1986),
    (1986.0, 2005.0, _em_1986_2005),
    (2005.0, 2050.0, _em_2005_2050),
    (2050.0, 2150.0, _em_2050_2150),
    (2150.0, _INF, _long_term),
)

MEEUS_SEGMENTS: Tuple[Segment, ...] = (
    (-_INF, 948.0, _meeus_before_948),
    (948.0, 1600.0, _meeus_948_1600),
) + _MODERN

EM2006_SEGMENTS: Tuple[Segment, ...] = (
    (-_INF, -500.0, _long_term),
    (-500.0, 500.0, _em_before_500),
    (500.0, 1600.0, _em_500_1600),
) + _MODERN

_MODELS = {
    "meeus": MEEUS_SEGMENTS,
    "em2006": EM2006_SEGMENTS,
}


def segment_boundaries(method: str = "meeus") -> Tuple[float, ...]:
    """Finite years at which the chosen model switches polynomial."""
    segs = _segments(method)
    return tuple(y0 for y0, _, _ in segs if math.isfinite(y0))


def _segments(method: str) -> Tuple[Segment, ...]:
    key = method.lower().strip()
    if key not in _MODELS:
        raise ValueError(f"method must be one of: {', '.join(sorted(_MODELS))}")
    return _MODELS[key]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t_seconds(y: float, *, method: str = "meeus", apply_correction_c: bool = False) -> float:
    """
    ΔT(y) in seconds, where y is a decimal year.

    apply_correction_c:
        If True, apply the lunar-secular-acceleration correction
        c = -0.000012932 (y-1955)^2 outside 1955..2005, as described
        in the Canon documentation.
    """
    dt = None
    for y0, y1, fn in _segments(method):
        if y0 <= y < y1:
            dt = fn(y)
            break
    if dt is None:
        # only NaN misses every segment
        return math.nan

    if apply_correction_c and (y < 1955.0 or y > 2005.0):
        dt += -0.000012932 * (y - 1955.0) ** 2

    return float(dt)


def delta_t_year(year: int, month: int) -> float:
    """Decimal year at the middle of the month, the ΔT evaluation point."""
    return year + (month - 0.5) / 12.0


def delta_t(year: int, month: int, *, method: str = "meeus", apply_correction_c: bool = False) -> float:
    """
    Approximate ΔT = TT − UT in seconds for a year and month (1..12).

    Accurate to about a second over 1620..present; ancient and far-future
    values are extrapolations with errors of minutes to hours.
    """
    return delta_t_seconds(delta_t_year(year, month), method=method, apply_correction_c=apply_correction_c)
