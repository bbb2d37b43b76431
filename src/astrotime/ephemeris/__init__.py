"""Ephemeris adapters/providers (optional).

Cross-checks against external astronomy libraries.
Install with:
  pip install "astrotime[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "astrotime[ephemeris]"') from e


def load_timescale():
    """skyfield Timescale built from the data files bundled with skyfield (no download)."""
    require_ephemeris()
    from skyfield.api import load

    return load.timescale(builtin=True)
