"""Diagnostics package.

- diagnostics: always available, light-weight checks (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras)
"""

__all__ = ["round_trip", "deltat_continuity", "plot_deltat"]
