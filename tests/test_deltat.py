# tests/test_deltat.py

import math

import pytest

from astrotime.reference import deltat as dt


@pytest.mark.parametrize(
    "year, expected",
    [
        # Meeus Table 10.A / Espenak–Meeus observed values (seconds)
        (1800, 13.7),
        (1850, 7.1),
        (1900, -2.7),
        (1950, 29.1),
        (1980, 50.5),
        (2000, 63.8),
    ],
)
def test_modern_values_within_a_second(year, expected):
    assert dt.delta_t(year, 1) == pytest.approx(expected, abs=1.0)


def test_evaluation_year_is_mid_month():
    assert dt.delta_t_year(2000, 1) == pytest.approx(2000.0 + 0.5 / 12.0)
    assert dt.delta_t_year(2000, 12) == pytest.approx(2000.0 + 11.5 / 12.0)
    assert dt.delta_t(1975, 7) == pytest.approx(dt.delta_t_seconds(1975.0 + 6.5 / 12.0))


def test_continuity_across_modern_boundaries():
    boundaries = [b for b in dt.segment_boundaries("meeus") if 1620 <= b <= 2030]
    assert boundaries == [1700.0, 1800.0, 1860.0, 1900.0, 1920.0, 1941.0, 1961.0, 1986.0, 2005.0]
    for b in boundaries:
        year = int(b)
        jump = dt.delta_t(year, 1) - dt.delta_t(year - 1, 12)
        assert abs(jump) < 1.0, f"ΔT jump of {jump:.3f} s at {year}"


def test_boundary_year_belongs_to_later_segment():
    # 948.0 is evaluated by the 948..1600 parabola
    t = (948.0 - 2000.0) / 100.0
    assert dt.delta_t_seconds(948.0) == pytest.approx(102.0 + 102.0 * t + 25.3 * t * t)
    t = (947.999 - 2000.0) / 100.0
    assert dt.delta_t_seconds(947.999) == pytest.approx(2177.0 + 497.0 * t + 44.1 * t * t)
    # 1600.0 starts the Espenak–Meeus 1600..1700 branch (t = 0)
    assert dt.delta_t_seconds(1600.0) == pytest.approx(120.0)
    assert dt.delta_t_seconds(1600.0, method="em2006") == pytest.approx(120.0)


def test_ancient_and_far_future():
    # Meeus long-term parabola at year 0
    assert dt.delta_t_seconds(0.0) == pytest.approx(9877.0)
    # Espenak–Meeus gives roughly 17190 s at -500
    assert dt.delta_t_seconds(-500.0, method="em2006") == pytest.approx(17190.0, rel=0.01)
    # far future: Morrison–Stephenson parabola
    u = (3500.0 - 1820.0) / 100.0
    assert dt.delta_t_seconds(3500.0) == pytest.approx(-20.0 + 32.0 * u * u)
    assert dt.delta_t_seconds(3500.0, method="em2006") == dt.delta_t_seconds(3500.0)


def test_models_agree_from_1600():
    for y in (1600.0, 1750.5, 1901.2, 1999.9, 2049.0, 2200.0):
        assert dt.delta_t_seconds(y, method="meeus") == dt.delta_t_seconds(y, method="em2006")


def test_correction_c():
    base = dt.delta_t_seconds(2100.0)
    corrected = dt.delta_t_seconds(2100.0, apply_correction_c=True)
    assert corrected - base == pytest.approx(-0.000012932 * 145.0 ** 2)
    # no correction inside 1955..2005
    assert dt.delta_t_seconds(1980.0, apply_correction_c=True) == dt.delta_t_seconds(1980.0)


def test_method_validation():
    assert dt.delta_t(2000, 1, method=" EM2006 ") == dt.delta_t(2000, 1, method="em2006")
    with pytest.raises(ValueError):
        dt.delta_t(2000, 1, method="iers")


def test_nan_year():
    assert math.isnan(dt.delta_t_seconds(float("nan")))
