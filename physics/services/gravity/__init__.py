"""
Gravitational Time Dilation Service.

Backs the "gravitational time dilation experiment": the user picks a mass
and a radius (or a preset body) and a far-observer duration, and the
service returns the Schwarzschild radius, mean density, compactness
regime, the time dilation factors at the surface and at the center, the
proper time elapsed for each observer, and the closest real body.

Exterior:  dtau/dt = sqrt(1 - Rs/R)
Interior:  dtau/dt = (3/2) sqrt(1 - Rs/R) - 1/2        (center)

A body inside its own Schwarzschild radius is reported as a black hole;
no observer comparison or profile is produced for it.
"""

import logging

from flask import current_app, jsonify

from physics.schwarzschild import (
    schwarzschild_radius,
    compacity,
    density,
    dilation_at_surface,
    dilation_at_center,
    dilation_profile,
    is_black_hole,
    is_near_black_hole,
    compactness_regime,
    observer_comparison,
)
from physics.formatting import (
    format_mass,
    format_radius,
    format_density,
    format_schwarzschild_radius,
    format_time,
    format_number,
)
from physics.matching import find_nearest_body
from physics.services import (
    MIN_MASS_KG,
    MAX_MASS_KG,
    MIN_RADIUS_KM,
    MAX_RADIUS_KM,
    PhysicsService,
    bounded_number,
    clamped_number,
    language,
    reference_time,
    request_config,
)
from data.celestial_bodies import CELESTIAL_PRESETS

log = logging.getLogger(__name__)

DEFAULT_PROFILE_POINTS = 200
DEFAULT_PROFILE_EXTENT = 5.0

# Far-observer durations offered as buttons: 1 hour, 1 day, 1 month, 1 year
REFERENCE_TIME_PRESETS = [3600, 86400, 2592000, 31536000]

_PRESETS_BY_ID = {p["id"]: p for p in CELESTIAL_PRESETS}


class GravityService(PhysicsService):

    id = "gravity"
    name = "Gravitational Time Dilation"
    description = "Time at the surface and center of a massive body"
    category = "general_relativity"
    status = "live"
    route = "/relativite-generale"

    def validate(self, config):
        """
        Validate body parameters.

        A "preset" id supplies mass and radius; explicit mass_kg /
        radius_km override it. Both must lie within the accepted body
        bounds (MIN_MASS_KG..MAX_MASS_KG, MIN_RADIUS_KM..MAX_RADIUS_KM).
        """
        config = dict(config)
        preset_id = config.get("preset")
        if preset_id is not None:
            preset = _PRESETS_BY_ID.get(preset_id)
            if preset is None:
                raise ValueError("Unknown preset '{}'".format(preset_id))
            config.setdefault("mass_kg", preset["mass_kg"])
            config.setdefault("radius_km", preset["radius_km"])

        return {
            "mass_kg": bounded_number(config, "mass_kg", MIN_MASS_KG, MAX_MASS_KG),
            "radius_km": bounded_number(config, "radius_km", MIN_RADIUS_KM, MAX_RADIUS_KM),
            "reference_time": reference_time(config),
            "lang": language(config),
        }

    def compute(self, config):
        """Full experiment result for one body configuration."""
        mass = config["mass_kg"]
        radius = config["radius_km"]
        t_ref = config["reference_time"]
        lang = config["lang"]

        rs = schwarzschild_radius(mass)
        rho = density(mass, radius)
        black_hole = is_black_hole(mass, radius)
        surface = dilation_at_surface(mass, radius)
        center = dilation_at_center(mass, radius)

        nearest, distance = find_nearest_body(mass, radius)

        result = {
            "mass_kg": mass,
            "radius_km": radius,
            "schwarzschild_radius_km": rs,
            "compacity": compacity(mass, radius),
            "radius_ratio": radius / rs,
            "density": rho,
            "regime": compactness_regime(mass, radius),
            "is_black_hole": black_hole,
            "is_near_black_hole": is_near_black_hole(mass, radius),
            "factor_surface": surface,
            "factor_center": center,
            "reference_time": t_ref,
            "comparison": None,
            "nearest_body": {
                "id": nearest["id"],
                "name": nearest["name"] if lang == "fr" else nearest["name_en"],
                "category": nearest["category"],
                "log_distance": round(distance, 4),
            },
            "formatted": {
                "mass": format_mass(mass, lang),
                "radius": format_radius(radius, lang),
                "density": format_density(rho, lang),
                "schwarzschild_radius": format_schwarzschild_radius(rs),
                "radius_ratio": format_number(radius / rs),
                "reference_time": format_time(t_ref, lang),
            },
        }

        if not black_hole:
            comparison = observer_comparison(mass, radius, t_ref)
            result["comparison"] = comparison
            for key in ("time_surface", "time_center", "diff_infinity_surface",
                        "diff_infinity_center", "diff_surface_center"):
                result["formatted"][key] = format_time(comparison[key], lang)
            result["formatted"]["factor_surface"] = format_number(surface, 6)
            result["formatted"]["factor_center"] = format_number(center, 6)

        log.debug("gravity: M=%.3e kg R=%.3e km regime=%s",
                  mass, radius, result["regime"])
        return result

    def compute_profile(self, config, num_points=DEFAULT_PROFILE_POINTS,
                        extent=DEFAULT_PROFILE_EXTENT):
        """dtau/dt against distance (in body radii) for the dilation chart."""
        mass = config["mass_kg"]
        radius = config["radius_km"]
        points = dilation_profile(mass, radius, num_points, extent)
        return {
            "is_black_hole": is_black_hole(mass, radius),
            "distance": [round(d, 6) for d, _ in points],
            "dilation": [f for _, f in points],
            "surface_at": 1.0,
        }

    def register_routes(self, bp):
        """Register gravitational time dilation endpoints on the given blueprint."""
        service = self

        @bp.route("/gravity/compute", methods=["POST"])
        def gravity_compute():
            data = request_config()
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                config = service.validate(data)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            return jsonify(service.compute(config))

        @bp.route("/gravity/profile", methods=["POST"])
        def gravity_profile():
            data = request_config()
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                config = service.validate(data)
                extent = clamped_number(data, "extent", DEFAULT_PROFILE_EXTENT, 1.0, 100.0)
                num_points = clamped_number(data, "num_points", DEFAULT_PROFILE_POINTS,
                                            10, current_app.config["MAX_CURVE_POINTS"])
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            return jsonify(service.compute_profile(config, int(num_points), extent))

        @bp.route("/gravity/presets", methods=["GET"])
        def gravity_presets():
            return jsonify({
                "bodies": CELESTIAL_PRESETS,
                "reference_times": REFERENCE_TIME_PRESETS,
            })
