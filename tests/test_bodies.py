"""
Tests for the celestial body catalog and nearest-match search.
"""

import math
import pytest
from physics.constants import EARTH_MASS, EARTH_RADIUS, SOLAR_MASS, SOLAR_RADIUS
from physics.schwarzschild import is_black_hole
from physics.matching import log_distance, find_nearest_body, nearest_bodies
from data.celestial_bodies import (
    CATEGORIES,
    CELESTIAL_BODIES,
    CELESTIAL_PRESETS,
    get_all_bodies,
    get_body_by_id,
    bodies_by_category,
)


class TestCatalog:

    def test_ids_unique(self):
        ids = [b["id"] for b in CELESTIAL_BODIES]
        assert len(ids) == len(set(ids))

    def test_required_fields(self):
        for body in CELESTIAL_BODIES:
            assert set(body) == {"id", "name", "name_en", "category",
                                 "mass_kg", "radius_km"}

    def test_values_positive_and_finite(self):
        for body in CELESTIAL_BODIES:
            assert body["mass_kg"] > 0 and math.isfinite(body["mass_kg"]), body["id"]
            assert body["radius_km"] > 0 and math.isfinite(body["radius_km"]), body["id"]

    def test_categories_known_and_populated(self):
        seen = {b["category"] for b in CELESTIAL_BODIES}
        assert seen == set(CATEGORIES)

    def test_english_names_ascii(self):
        """French names may carry accents; English names are plain ASCII."""
        for body in CELESTIAL_BODIES:
            assert body["name_en"].isascii(), body["id"]

    def test_black_holes_at_horizon(self):
        for body in bodies_by_category("black_hole"):
            assert is_black_hole(body["mass_kg"], body["radius_km"])

    def test_other_bodies_not_black_holes(self):
        for body in CELESTIAL_BODIES:
            if body["category"] != "black_hole":
                assert not is_black_hole(body["mass_kg"], body["radius_km"]), body["id"]

    def test_catalog_size(self):
        assert len(get_all_bodies()) >= 150

    def test_get_all_returns_copy(self):
        bodies = get_all_bodies()
        bodies.clear()
        assert len(get_all_bodies()) == len(CELESTIAL_BODIES)


class TestLookup:

    def test_earth(self):
        earth = get_body_by_id("earth")
        assert earth["name"] == "Terre"
        assert earth["name_en"] == "Earth"
        assert earth["mass_kg"] == EARTH_MASS

    def test_sun(self):
        sun = get_body_by_id("sun")
        assert sun["category"] == "star"
        assert sun["radius_km"] == SOLAR_RADIUS

    def test_unknown(self):
        assert get_body_by_id("nonexistent") is None

    def test_by_category(self):
        planets = bodies_by_category("planet")
        assert len(planets) == 8
        assert all(b["category"] == "planet" for b in planets)

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            bodies_by_category("galaxy")


class TestPresets:

    def test_ids(self):
        assert [p["id"] for p in CELESTIAL_PRESETS] == [
            "earth", "jupiter", "sun", "white_dwarf", "neutron_star"]

    def test_neutron_star_preset(self):
        ns = CELESTIAL_PRESETS[-1]
        assert ns["mass_kg"] == pytest.approx(1.4 * SOLAR_MASS)
        assert ns["radius_km"] == 10.0


class TestLogDistance:

    def test_identical(self):
        assert log_distance(EARTH_MASS, EARTH_RADIUS, EARTH_MASS, EARTH_RADIUS) == 0.0

    def test_one_decade_in_mass(self):
        assert log_distance(10 * EARTH_MASS, EARTH_RADIUS,
                            EARTH_MASS, EARTH_RADIUS) == pytest.approx(1.0)

    def test_diagonal(self):
        d = log_distance(100.0, 100.0, 1.0, 1.0)
        assert d == pytest.approx(2.0 * math.sqrt(2.0))

    def test_symmetric(self):
        a = log_distance(SOLAR_MASS, SOLAR_RADIUS, EARTH_MASS, EARTH_RADIUS)
        b = log_distance(EARTH_MASS, EARTH_RADIUS, SOLAR_MASS, SOLAR_RADIUS)
        assert a == b


class TestNearestBody:

    def test_exact_earth(self):
        body, distance = find_nearest_body(EARTH_MASS, EARTH_RADIUS)
        assert body["id"] == "earth"
        assert distance == 0.0

    def test_exact_sun(self):
        body, distance = find_nearest_body(SOLAR_MASS, SOLAR_RADIUS)
        assert body["id"] == "sun"
        assert distance == pytest.approx(0.0, abs=1e-12)

    def test_neutron_star_region(self):
        body, _ = find_nearest_body(1.4 * SOLAR_MASS, 10.0)
        assert body["category"] == "neutron_star"

    def test_tie_keeps_first(self):
        bodies = [
            {"id": "a", "mass_kg": 10.0, "radius_km": 1.0},
            {"id": "b", "mass_kg": 1.0, "radius_km": 10.0},
        ]
        body, _ = find_nearest_body(1.0, 1.0, bodies)
        assert body["id"] == "a"

    def test_empty_catalog(self):
        assert find_nearest_body(EARTH_MASS, EARTH_RADIUS, []) is None

    def test_invalid_input(self):
        with pytest.raises(ValueError):
            find_nearest_body(0.0, EARTH_RADIUS)
        with pytest.raises(ValueError):
            find_nearest_body(EARTH_MASS, -1.0)


class TestNearestBodies:

    def test_sorted_and_limited(self):
        matches = nearest_bodies(EARTH_MASS, EARTH_RADIUS, k=5)
        assert len(matches) == 5
        distances = [d for _, d in matches]
        assert distances == sorted(distances)
        assert matches[0][0]["id"] == "earth"

    def test_first_agrees_with_find_nearest(self):
        best, best_distance = find_nearest_body(3e25, 25000.0)
        matches = nearest_bodies(3e25, 25000.0, k=1)
        assert matches[0][0] is best
        assert matches[0][1] == best_distance

    @pytest.mark.parametrize("k", [0, -1])
    def test_k_below_one_rejected(self, k):
        with pytest.raises(ValueError):
            nearest_bodies(EARTH_MASS, EARTH_RADIUS, k=k)

    def test_k_larger_than_catalog(self):
        bodies = [{"id": "a", "mass_kg": 1.0, "radius_km": 1.0}]
        assert len(nearest_bodies(1.0, 1.0, k=10, bodies=bodies)) == 1

    def test_stable_on_ties(self):
        bodies = [
            {"id": "a", "mass_kg": 10.0, "radius_km": 1.0},
            {"id": "b", "mass_kg": 1.0, "radius_km": 10.0},
            {"id": "c", "mass_kg": 1.0, "radius_km": 1.0},
        ]
        ids = [b["id"] for b, _ in nearest_bodies(1.0, 1.0, k=3, bodies=bodies)]
        assert ids == ["c", "a", "b"]
