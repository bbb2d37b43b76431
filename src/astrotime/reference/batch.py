from __future__ import annotations

"""
Element-wise evaluation over arrays of Julian Days.

Requires numpy:
  pip install "astrotime[diagnostics]"
"""

from typing import Any

from .deltat import delta_t
from .time_scales import JD_J2000


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "astrotime[diagnostics]"') from e


def _wrap24(np, h):
    h = np.mod(h, 24.0)
    # np.mod returns exactly 24.0 for tiny negative inputs
    return np.where(h >= 24.0, 0.0, h)


def julian_cent_array(jd: Any):
    np = _need_numpy()
    return (np.asarray(jd, dtype=float) - JD_J2000) / 36525.0


def mn_sidr_array(jd: Any):
    """Vectorised mn_sidr: Greenwich mean sidereal time in hours [0,24)."""
    np = _need_numpy()
    jd = np.asarray(jd, dtype=float)
    T = (jd - JD_J2000) / 36525.0
    theta = (
        280.46061837
        + 360.98564736629 * (jd - JD_J2000)
        + 0.000387933 * (T * T)
        - (T * T * T) / 38710000.0
    )
    return _wrap24(np, np.mod(theta, 360.0) / 15.0)


def apprnt_sidr_array(jd: Any, nutation_in_longitude_deg: Any, mean_obliquity_deg: Any):
    """Vectorised apprnt_sidr; the nutation inputs broadcast against jd."""
    np = _need_numpy()
    eqeq = np.asarray(nutation_in_longitude_deg, dtype=float) * np.cos(np.radians(mean_obliquity_deg)) / 15.0
    return _wrap24(np, mn_sidr_array(jd) + eqeq)


def delta_t_array(years: Any, months: Any, *, method: str = "meeus"):
    """ΔT in seconds for broadcast arrays of integer years and months."""
    np = _need_numpy()
    y, m = np.broadcast_arrays(np.asarray(years, dtype=int), np.asarray(months, dtype=int))
    out = np.empty(y.shape, dtype=float)
    for idx in np.ndindex(y.shape):
        out[idx] = delta_t(int(y[idx]), int(m[idx]), method=method)
    return out
