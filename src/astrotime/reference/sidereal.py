from __future__ import annotations

from math import cos, fmod, radians
from typing import Tuple

from .time_scales import JD_J2000, julian_cent


# ------------------------------------------------------------
# Angle helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # y + 360 rounds to 360.0 when y is a tiny negative number
    return 0.0 if y >= 360.0 else y


def wrap_hours(h: float) -> float:
    """Wrap decimal hours to [0,24)."""
    y = fmod(h, 24.0)
    if y < 0:
        y += 24.0
    return 0.0 if y >= 24.0 else y


def hours_to_hms(h: float) -> Tuple[int, int, float]:
    """Split non-negative decimal hours into (hours, minutes, seconds)."""
    h_int = int(h)
    m = (h - h_int) * 60.0
    m_int = int(m)
    s = (m - m_int) * 60.0
    return h_int, m_int, s


# ------------------------------------------------------------
# Greenwich sidereal time
# ------------------------------------------------------------

def mean_sidereal_deg(jd: float) -> float:
    """
    Greenwich mean sidereal angle θ0 in degrees, wrapped to [0,360)
    (IAU 1982, Meeus eq. 12.4):

      θ0 = 280.46061837 + 360.98564736629 (JD - 2451545.0)
           + 0.000387933 T^2 - T^3 / 38710000
    """
    T = julian_cent(jd)
    theta = (
        280.46061837
        + 360.98564736629 * (jd - JD_J2000)
        + 0.000387933 * (T * T)
        - (T * T * T) / 38710000.0
    )
    return wrap_deg(theta)


def mn_sidr(jd: float) -> float:
    """Greenwich mean sidereal time for a UT Julian Day, in hours [0,24)."""
    return wrap_hours(mean_sidereal_deg(jd) / 15.0)


def equation_of_equinoxes_hours(nutation_in_longitude_deg: float, obliquity_deg: float) -> float:
    """Δψ cos ε expressed in hours (both inputs in degrees)."""
    return nutation_in_longitude_deg * cos(radians(obliquity_deg)) / 15.0


def apprnt_sidr(jd: float, nutation_in_longitude_deg: float, mean_obliquity_deg: float) -> float:
    """
    Greenwich apparent sidereal time in hours [0,24).

    Adds the equation of the equinoxes to mn_sidr(jd). Nutation in longitude
    and obliquity are supplied by the caller's nutation model, both in degrees.
    """
    return wrap_hours(mn_sidr(jd) + equation_of_equinoxes_hours(nutation_in_longitude_deg, mean_obliquity_deg))
