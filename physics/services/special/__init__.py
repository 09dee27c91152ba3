"""
Special Relativity Service.

Lorentz factor calculator: from a velocity (km/s), a fraction of c, or a
target gamma, return the matching gamma / velocity pair and the proper
time a traveller experiences while a reference duration elapses for the
stationary observer.

    gamma = 1 / sqrt(1 - v^2/c^2),   tau = t / gamma

gamma is capped at GAMMA_MAX (320) so the charts stay finite.
"""

import logging

from flask import current_app, jsonify, request

from physics.constants import SPEED_OF_LIGHT, GAMMA_MAX
from physics.special import (
    lorentz_gamma,
    velocity_from_gamma,
    velocity_gamma_curve,
    gamma_velocity_curve,
    proper_time,
)
from physics.formatting import (
    format_number,
    format_velocity_fraction,
    format_velocity_km_s,
    format_time,
)
from physics.services import (
    PhysicsService,
    clamp,
    clamped_number,
    language,
    reference_time,
    request_config,
)

log = logging.getLogger(__name__)

DEFAULT_CURVE_POINTS = 1000


class SpecialRelativityService(PhysicsService):

    id = "special"
    name = "Special Relativity"
    description = "Lorentz factor, velocity and proper time"
    category = "special_relativity"
    status = "live"
    route = "/relativity"

    def validate(self, config):
        """
        Normalize the input to a velocity in km/s.

        Exactly one of "velocity" (km/s), "fraction" (v/c) or "gamma" is
        used, in that order of precedence. Velocities are clamped to
        [0, c] and gamma to [1, GAMMA_MAX].
        """
        if "velocity" in config:
            velocity = clamped_number(config, "velocity", None, 0.0, SPEED_OF_LIGHT)
        elif "fraction" in config:
            fraction = clamped_number(config, "fraction", None, 0.0, 1.0)
            velocity = fraction * SPEED_OF_LIGHT
        elif "gamma" in config:
            gamma = clamped_number(config, "gamma", None, 1.0, GAMMA_MAX)
            velocity = velocity_from_gamma(gamma)
        else:
            raise ValueError("One of velocity, fraction or gamma is required")

        return {
            "velocity": velocity,
            "reference_time": reference_time(config),
            "lang": language(config),
        }

    def compute(self, config):
        """Gamma, velocity and proper time for a validated config."""
        velocity = config["velocity"]
        lang = config["lang"]
        t_ref = config["reference_time"]

        gamma = lorentz_gamma(velocity)
        tau = proper_time(t_ref, velocity)

        return {
            "velocity_km_s": velocity,
            "fraction": velocity / SPEED_OF_LIGHT,
            "gamma": gamma,
            "gamma_capped": gamma >= GAMMA_MAX,
            "reference_time": t_ref,
            "proper_time": tau,
            "time_saved": t_ref - tau,
            "formatted": {
                "gamma": format_number(gamma, 4),
                "fraction": format_velocity_fraction(velocity),
                "velocity": format_velocity_km_s(velocity, gamma, lang),
                "reference_time": format_time(t_ref, lang),
                "proper_time": format_time(tau, lang),
            },
        }

    def compute_curves(self, num_points=DEFAULT_CURVE_POINTS):
        """gamma(v) and v(gamma) curve data for the two calculator charts."""
        vg = velocity_gamma_curve(num_points)
        gv = gamma_velocity_curve(num_points)
        return {
            "velocity_to_gamma": {
                "velocity": [round(v, 6) for v, _ in vg],
                "gamma": [round(g, 6) for _, g in vg],
            },
            "gamma_to_velocity": {
                "gamma": [round(g, 6) for g, _ in gv],
                "velocity": [round(v, 6) for _, v in gv],
            },
        }

    def register_routes(self, bp):
        """Register special relativity endpoints on the given blueprint."""
        service = self

        @bp.route("/special/compute", methods=["POST"])
        def special_compute():
            data = request_config()
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                config = service.validate(data)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            return jsonify(service.compute(config))

        @bp.route("/special/curves", methods=["GET"])
        def special_curves():
            max_points = current_app.config["MAX_CURVE_POINTS"]
            num_points = request.args.get("num_points", DEFAULT_CURVE_POINTS, type=int)
            num_points = int(clamp(num_points, 10, max_points))
            log.debug("special curves: %d points", num_points)
            return jsonify(service.compute_curves(num_points))
