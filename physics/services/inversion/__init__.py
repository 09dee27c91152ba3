"""
Inversion Service: "what body gives this much time dilation?"

POST /api/inversion/mass    - mass for a target factor at a given radius
POST /api/inversion/radius  - radius for a target factor at a given mass

The observer position is "depth" in body radii (0 = center, 1 = surface).
Both searches are bounded bisections (physics.inversion); a target that
cannot be bracketed is reported with HTTP 422.
"""

import logging

from flask import jsonify

from physics.inversion import solve_mass, solve_radius, factor_at_depth
from physics.schwarzschild import schwarzschild_radius, compactness_regime
from physics.formatting import format_mass, format_radius
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
    positive_number,
    request_config,
)

log = logging.getLogger(__name__)

MAX_DEPTH = 1000.0


class InversionService(PhysicsService):

    id = "inversion"
    name = "Dilation Inversion"
    description = "Mass or radius required for a target time dilation"
    category = "general_relativity"
    status = "live"
    route = "/relativite-generale"

    def validate(self, config):
        """
        Validate an inversion request.

        "solve_for" is "mass" (needs radius_km) or "radius" (needs mass_kg).
        target_factor must lie strictly between 0 and 1.
        """
        solve_for = config.get("solve_for", "mass")
        if solve_for not in ("mass", "radius"):
            raise ValueError("solve_for must be 'mass' or 'radius'")

        target = positive_number(config, "target_factor")
        if target >= 1:
            raise ValueError("target_factor must be between 0 and 1 (exclusive)")

        out = {
            "solve_for": solve_for,
            "target_factor": target,
            "depth": clamped_number(config, "depth", 1.0, 0.0, MAX_DEPTH),
            "lang": language(config),
        }
        if solve_for == "mass":
            out["radius_km"] = bounded_number(config, "radius_km", MIN_RADIUS_KM, MAX_RADIUS_KM)
        else:
            out["mass_kg"] = bounded_number(config, "mass_kg", MIN_MASS_KG, MAX_MASS_KG)
        return out

    def compute(self, config):
        """
        Run the inversion.

        Returns None when the target cannot be bracketed; otherwise the
        solved body, the factor recomputed from it, and its nearest match.
        """
        target = config["target_factor"]
        depth = config["depth"]
        lang = config["lang"]

        if config["solve_for"] == "mass":
            radius = config["radius_km"]
            mass = solve_mass(target, radius, depth)
        else:
            mass = config["mass_kg"]
            radius = solve_radius(target, mass, depth)
            if radius is None:
                mass = None

        if mass is None:
            return None

        nearest, distance = find_nearest_body(mass, radius)
        return {
            "solve_for": config["solve_for"],
            "target_factor": target,
            "depth": depth,
            "mass_kg": mass,
            "radius_km": radius,
            "schwarzschild_radius_km": schwarzschild_radius(mass),
            "achieved_factor": factor_at_depth(mass, radius, depth),
            "regime": compactness_regime(mass, radius),
            "nearest_body": {
                "id": nearest["id"],
                "name": nearest["name"] if lang == "fr" else nearest["name_en"],
                "log_distance": round(distance, 4),
            },
            "formatted": {
                "mass": format_mass(mass, lang),
                "radius": format_radius(radius, lang),
            },
        }

    def register_routes(self, bp):
        """Register inversion endpoints on the given blueprint."""
        service = self

        def run(solve_for):
            data = request_config()
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            data["solve_for"] = solve_for
            try:
                config = service.validate(data)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            result = service.compute(config)
            if result is None:
                log.info("inversion: unreachable target %s", config)
                return jsonify({"error": "Target factor cannot be reached"}), 422
            return jsonify(result)

        @bp.route("/inversion/mass", methods=["POST"])
        def inversion_mass():
            return run("mass")

        @bp.route("/inversion/radius", methods=["POST"])
        def inversion_radius():
            return run("radius")
