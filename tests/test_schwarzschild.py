"""
Tests for gravitational time dilation (exterior and interior Schwarzschild).

Reference values:
  Rs(Sun)   = 2.953 km
  Rs(Earth) = 8.87 mm
  Earth surface dtau/dt = 1 - 6.96e-10
"""

import math
import pytest
from physics.constants import SOLAR_MASS, EARTH_MASS, EARTH_RADIUS, SOLAR_RADIUS
from physics.schwarzschild import (
    schwarzschild_radius,
    compacity,
    dilation_at_surface,
    dilation_at_center,
    dilation_at_distance,
    density,
    is_black_hole,
    is_near_black_hole,
    compactness_regime,
    dilation_profile,
    observer_comparison,
)

NS_MASS = 1.4 * SOLAR_MASS
NS_RADIUS = 10.0


class TestSchwarzschildRadius:

    def test_sun(self):
        assert schwarzschild_radius(SOLAR_MASS) == pytest.approx(2.954, abs=0.002)

    def test_earth(self):
        assert schwarzschild_radius(EARTH_MASS) == pytest.approx(8.87e-6, rel=1e-3)

    def test_linear_in_mass(self):
        assert schwarzschild_radius(2 * SOLAR_MASS) == pytest.approx(
            2 * schwarzschild_radius(SOLAR_MASS), rel=1e-12)

    def test_zero_mass(self):
        assert schwarzschild_radius(0) == 0.0

    def test_compacity(self):
        c = compacity(NS_MASS, NS_RADIUS)
        assert c == pytest.approx(schwarzschild_radius(NS_MASS) / NS_RADIUS)
        assert 0.4 < c < 0.42


class TestExteriorDilation:

    def test_earth_surface(self):
        f = dilation_at_surface(EARTH_MASS, EARTH_RADIUS)
        assert 1 - f == pytest.approx(6.96e-10, rel=1e-2)

    def test_sun_surface(self):
        f = dilation_at_surface(SOLAR_MASS, SOLAR_RADIUS)
        assert 1 - f == pytest.approx(2.12e-6, rel=1e-2)

    def test_neutron_star(self):
        rs = schwarzschild_radius(NS_MASS)
        expected = math.sqrt(1 - rs / NS_RADIUS)
        assert dilation_at_surface(NS_MASS, NS_RADIUS) == pytest.approx(expected)

    def test_at_horizon(self):
        rs = schwarzschild_radius(SOLAR_MASS)
        assert dilation_at_surface(SOLAR_MASS, rs) == 0.0

    def test_inside_horizon(self):
        assert dilation_at_surface(SOLAR_MASS, 1.0) == 0.0


class TestInteriorDilation:

    def test_center_slower_than_surface(self):
        for mass, radius in [(EARTH_MASS, EARTH_RADIUS),
                             (SOLAR_MASS, SOLAR_RADIUS),
                             (NS_MASS, NS_RADIUS)]:
            assert dilation_at_center(mass, radius) < dilation_at_surface(mass, radius)

    def test_center_formula(self):
        rs = schwarzschild_radius(NS_MASS)
        expected = 1.5 * math.sqrt(1 - rs / NS_RADIUS) - 0.5
        assert dilation_at_center(NS_MASS, NS_RADIUS) == pytest.approx(expected)

    def test_center_black_hole(self):
        assert dilation_at_center(SOLAR_MASS, 1.0) == 0.0

    def test_center_beyond_buchdahl_clamped(self):
        """Between R = Rs and R = 9/8 Rs the formula would go negative."""
        rs = schwarzschild_radius(SOLAR_MASS)
        assert dilation_at_center(SOLAR_MASS, 1.05 * rs) == 0.0

    def test_center_just_above_buchdahl(self):
        rs = schwarzschild_radius(SOLAR_MASS)
        f = dilation_at_center(SOLAR_MASS, 1.15 * rs)
        assert 0 < f < 0.1


class TestDilationAtDistance:

    def test_center_matches(self):
        assert dilation_at_distance(NS_MASS, NS_RADIUS, 0.0) == pytest.approx(
            dilation_at_center(NS_MASS, NS_RADIUS))

    def test_surface_continuity(self):
        inside = dilation_at_distance(NS_MASS, NS_RADIUS, NS_RADIUS)
        assert inside == pytest.approx(dilation_at_surface(NS_MASS, NS_RADIUS), rel=1e-12)

    def test_exterior_uses_metric(self):
        d = 3 * NS_RADIUS
        assert dilation_at_distance(NS_MASS, NS_RADIUS, d) == pytest.approx(
            dilation_at_surface(NS_MASS, d))

    def test_monotonic_outward(self):
        prev = -1
        for i in range(1, 101):
            f = dilation_at_distance(NS_MASS, NS_RADIUS, i / 20 * NS_RADIUS)
            assert f > prev
            prev = f

    def test_approaches_one_far_away(self):
        assert dilation_at_distance(NS_MASS, NS_RADIUS, 1e9) == pytest.approx(1.0, abs=1e-8)

    def test_black_hole_interior_zero(self):
        assert dilation_at_distance(SOLAR_MASS, 1.0, 0.5) == 0.0


class TestDensity:

    def test_earth(self):
        assert density(EARTH_MASS, EARTH_RADIUS) == pytest.approx(5514, rel=1e-2)

    def test_sun(self):
        assert density(SOLAR_MASS, SOLAR_RADIUS) == pytest.approx(1410, rel=1e-2)

    def test_neutron_star(self):
        assert 6e17 < density(NS_MASS, NS_RADIUS) < 7e17

    def test_extreme_radii_do_not_raise(self):
        assert density(1e30, 1e200) == 0.0
        assert density(1.0, 1e280) == 0.0
        assert density(1e30, 1e-300) == math.inf

    def test_stepwise_division_matches_volume(self):
        radius_m = 1234.5 * 1000.0
        expected = 3e23 / ((4.0 / 3.0) * math.pi * radius_m ** 3)
        assert density(3e23, 1234.5) == pytest.approx(expected, rel=1e-12)


class TestClassification:

    def test_black_hole(self):
        rs = schwarzschild_radius(SOLAR_MASS)
        assert is_black_hole(SOLAR_MASS, rs)
        assert is_black_hole(SOLAR_MASS, 0.5 * rs)
        assert not is_black_hole(SOLAR_MASS, SOLAR_RADIUS)

    def test_near_black_hole(self):
        rs = schwarzschild_radius(SOLAR_MASS)
        assert is_near_black_hole(SOLAR_MASS, 1.2 * rs)
        assert not is_near_black_hole(SOLAR_MASS, rs)
        assert not is_near_black_hole(SOLAR_MASS, 1.5 * rs)

    def test_regimes(self):
        rs = schwarzschild_radius(SOLAR_MASS)
        assert compactness_regime(SOLAR_MASS, 0.9 * rs) == "black_hole"
        assert compactness_regime(SOLAR_MASS, 1.5 * rs) == "critical"
        assert compactness_regime(SOLAR_MASS, 3 * rs) == "compact"
        assert compactness_regime(SOLAR_MASS, 7 * rs) == "dense"
        assert compactness_regime(SOLAR_MASS, SOLAR_RADIUS) == "ordinary"

    def test_neutron_star_is_compact(self):
        assert compactness_regime(NS_MASS, NS_RADIUS) == "compact"


class TestProfile:

    def test_length_and_range(self):
        points = dilation_profile(NS_MASS, NS_RADIUS)
        assert len(points) == 200
        assert points[0][0] == pytest.approx(5.0 / 200)
        assert points[-1][0] == pytest.approx(5.0)

    def test_increasing(self):
        factors = [f for _, f in dilation_profile(NS_MASS, NS_RADIUS)]
        assert all(b > a for a, b in zip(factors, factors[1:]))

    def test_all_in_unit_interval(self):
        for _, f in dilation_profile(SOLAR_MASS, SOLAR_RADIUS, 50):
            assert 0 < f <= 1

    def test_black_hole_empty(self):
        assert dilation_profile(SOLAR_MASS, 1.0) == []

    def test_beyond_buchdahl_drops_center(self):
        """Interior points with a clamped factor of 0 are dropped."""
        rs = schwarzschild_radius(SOLAR_MASS)
        points = dilation_profile(SOLAR_MASS, 1.05 * rs, 100)
        assert 0 < len(points) < 100
        assert all(f > 0 for _, f in points)


class TestObserverComparison:

    def test_earth_one_day(self):
        c = observer_comparison(EARTH_MASS, EARTH_RADIUS, 86400)
        assert c["time_infinity"] == 86400
        assert c["time_surface"] < 86400
        assert c["time_center"] < c["time_surface"]
        # ~60 microseconds per day at the Earth's surface
        assert c["diff_infinity_surface"] == pytest.approx(6.0e-5, rel=0.02)
        assert c["negligible"] is True

    def test_differences_consistent(self):
        c = observer_comparison(NS_MASS, NS_RADIUS, 3600)
        assert c["diff_infinity_center"] == pytest.approx(
            c["diff_infinity_surface"] + c["diff_surface_center"])
        assert c["negligible"] is False

    def test_black_hole_rejected(self):
        with pytest.raises(ValueError):
            observer_comparison(SOLAR_MASS, 1.0, 3600)
