"""
API contract and numerical robustness tests.

These verify that the API returns consistent, well-formed responses
across normal and extreme inputs, and that no combination of parameters
causes crashes, NaN, or Infinity values.
"""

import math
import pytest
from physics.constants import SPEED_OF_LIGHT, SOLAR_MASS
from physics.services import MIN_MASS_KG, MAX_MASS_KG, MIN_RADIUS_KM, MAX_RADIUS_KM


def _assert_finite(value, path="result"):
    """Recursively check that every number in a JSON payload is finite."""
    if isinstance(value, dict):
        for k, v in value.items():
            _assert_finite(v, "{}.{}".format(path, k))
    elif isinstance(value, list):
        for i, v in enumerate(value):
            _assert_finite(v, "{}[{}]".format(path, i))
    elif isinstance(value, float):
        assert math.isfinite(value), "{} is {}".format(path, value)


# (mass_kg, radius_km) from a pebble to the most massive black hole
EXTREME_BODIES = [
    (1.0, 1e-6),
    (1.0, 1e6),
    (1e10, 0.001),
    (1e45, 1e12),
    (6.6e10 * SOLAR_MASS, 1e3),
    (2.0 * SOLAR_MASS, 5.95),
    (2.0 * SOLAR_MASS, 6.5),
    (MIN_MASS_KG, MAX_RADIUS_KM),
    (MAX_MASS_KG, MIN_RADIUS_KM),
    (MAX_MASS_KG, MAX_RADIUS_KM),
    (MIN_MASS_KG, MIN_RADIUS_KM),
]

# Finite but outside the accepted body bounds
OUT_OF_RANGE_BODIES = [
    (1e30, 1e200),
    (1e30, 1e-300),
    (1.0, 1e280),
    (1e300, 1.0),
    (0.5, 1.0),
]


class TestSpecialRobustness:

    @pytest.mark.parametrize("payload", [
        {"velocity": 0},
        {"velocity": SPEED_OF_LIGHT},
        {"velocity": -100},
        {"velocity": 1e12},
        {"fraction": 0.99999999},
        {"gamma": 0.1},
        {"gamma": 1e9},
        {"gamma": 320, "reference_time": 1e15},
    ])
    def test_finite_output(self, client, payload):
        resp = client.post("/api/special/compute", json=payload)
        assert resp.status_code == 200
        data = resp.get_json()
        _assert_finite(data)
        assert 1.0 <= data["gamma"] <= 320.0
        assert 0.0 <= data["proper_time"] <= data["reference_time"]

    def test_curve_arrays_equal_length(self, client):
        data = client.get("/api/special/curves?num_points=250").get_json()
        for curve in data.values():
            lengths = {len(v) for v in curve.values()}
            assert lengths == {251}
        _assert_finite(data)

    def test_non_numeric_rejected(self, client):
        resp = client.post("/api/special/compute", json={"velocity": "fast"})
        assert resp.status_code == 400

    def test_non_object_body_rejected(self, client):
        resp = client.post("/api/special/compute", json=[1, 2, 3])
        assert resp.status_code == 400


class TestGravityRobustness:

    @pytest.mark.parametrize("mass,radius", EXTREME_BODIES)
    def test_finite_output(self, client, mass, radius):
        resp = client.post("/api/gravity/compute", json={
            "mass_kg": mass, "radius_km": radius})
        assert resp.status_code == 200
        data = resp.get_json()
        _assert_finite(data)
        assert 0.0 <= data["factor_center"] <= data["factor_surface"] <= 1.0

    @pytest.mark.parametrize("mass,radius", EXTREME_BODIES)
    def test_profile_arrays(self, client, mass, radius):
        resp = client.post("/api/gravity/profile", json={
            "mass_kg": mass, "radius_km": radius, "num_points": 60})
        assert resp.status_code == 200
        data = resp.get_json()
        assert len(data["distance"]) == len(data["dilation"])
        assert all(0.0 < f <= 1.0 for f in data["dilation"])
        _assert_finite(data)

    @pytest.mark.parametrize("mass,radius", OUT_OF_RANGE_BODIES)
    def test_out_of_range_rejected(self, client, mass, radius):
        for endpoint in ("/api/gravity/compute", "/api/gravity/profile"):
            resp = client.post(endpoint, json={"mass_kg": mass, "radius_km": radius})
            assert resp.status_code == 400
            assert "between" in resp.get_json()["error"]

    def test_comparison_absent_only_for_black_holes(self, client):
        for mass, radius in EXTREME_BODIES:
            data = client.post("/api/gravity/compute", json={
                "mass_kg": mass, "radius_km": radius}).get_json()
            assert (data["comparison"] is None) == data["is_black_hole"]

    @pytest.mark.parametrize("payload", [
        {"mass_kg": "heavy", "radius_km": 10},
        {"mass_kg": 1e30},
        {"radius_km": 10},
        {"mass_kg": -1e30, "radius_km": 10},
        {"mass_kg": 1e30, "radius_km": 10, "lang": "es"},
    ])
    def test_invalid_input(self, client, payload):
        resp = client.post("/api/gravity/compute", json=payload)
        assert resp.status_code == 400
        assert "error" in resp.get_json()


class TestInversionRobustness:

    @pytest.mark.parametrize("payload", [
        {"target_factor": 0.5, "radius_km": 1e200},
        {"target_factor": 0.5, "radius_km": 1e-300},
    ])
    def test_mass_out_of_range_radius(self, client, payload):
        resp = client.post("/api/inversion/mass", json=payload)
        assert resp.status_code == 400

    @pytest.mark.parametrize("mass", [1e-300, 1e300])
    def test_radius_out_of_range_mass(self, client, mass):
        resp = client.post("/api/inversion/radius", json={
            "target_factor": 0.5, "mass_kg": mass})
        assert resp.status_code == 400

    @pytest.mark.parametrize("target", [0.01, 0.5, 0.999999])
    @pytest.mark.parametrize("depth", [0.0, 0.5, 1.0, 10.0])
    def test_mass_finite(self, client, target, depth):
        resp = client.post("/api/inversion/mass", json={
            "target_factor": target, "radius_km": 1000.0, "depth": depth})
        assert resp.status_code == 200
        data = resp.get_json()
        _assert_finite(data)
        assert data["achieved_factor"] == pytest.approx(target, rel=1e-6)

    @pytest.mark.parametrize("target", [1e-6, 0.01, 0.5, 0.999999])
    def test_radius_finite(self, client, target):
        resp = client.post("/api/inversion/radius", json={
            "target_factor": target, "mass_kg": 1e20})
        assert resp.status_code == 200
        data = resp.get_json()
        _assert_finite(data)
        assert data["radius_km"] > 0
