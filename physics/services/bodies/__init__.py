"""
Celestial Bodies Service.

GET  /api/bodies             - full catalog (optionally ?category=...)
GET  /api/bodies/<id>        - single body with derived quantities
POST /api/bodies/nearest     - closest real bodies to a (mass, radius) pair

Closeness is the log10 distance in the (mass, radius) plane, see
physics.matching.
"""

from flask import jsonify, request

from physics.matching import find_nearest_body, nearest_bodies
from physics.schwarzschild import (
    schwarzschild_radius,
    density,
    dilation_at_surface,
    dilation_at_center,
    compactness_regime,
)
from physics.services import (
    PhysicsService,
    clamped_number,
    language,
    positive_number,
    request_config,
)
from data.celestial_bodies import (
    CATEGORIES,
    get_all_bodies,
    get_body_by_id,
    bodies_by_category,
)

MAX_MATCHES = 20


def describe_body(body):
    """Catalog entry plus its Schwarzschild radius, density and dilation factors."""
    mass = body["mass_kg"]
    radius = body["radius_km"]
    out = dict(body)
    out.update({
        "schwarzschild_radius_km": schwarzschild_radius(mass),
        "density": density(mass, radius),
        "regime": compactness_regime(mass, radius),
        "factor_surface": dilation_at_surface(mass, radius),
        "factor_center": dilation_at_center(mass, radius),
    })
    return out


class BodiesService(PhysicsService):

    id = "bodies"
    name = "Celestial Bodies"
    description = "Reference catalog and nearest real-body match"
    category = "catalog"
    status = "live"
    route = "/relativite-generale"

    def validate(self, config):
        """Validate a nearest-match query: positive mass and radius, k in [1, 20]."""
        return {
            "mass_kg": positive_number(config, "mass_kg"),
            "radius_km": positive_number(config, "radius_km"),
            "k": int(clamped_number(config, "k", 5, 1, MAX_MATCHES)),
            "lang": language(config),
        }

    def compute(self, config):
        """Best match and the k nearest bodies, closest first."""
        mass = config["mass_kg"]
        radius = config["radius_km"]
        lang = config["lang"]

        best, best_distance = find_nearest_body(mass, radius)
        matches = nearest_bodies(mass, radius, config["k"])

        def entry(body, distance):
            return {
                "id": body["id"],
                "name": body["name"] if lang == "fr" else body["name_en"],
                "category": body["category"],
                "mass_kg": body["mass_kg"],
                "radius_km": body["radius_km"],
                "log_distance": round(distance, 4),
            }

        return {
            "nearest": entry(best, best_distance),
            "matches": [entry(b, d) for b, d in matches],
        }

    def register_routes(self, bp):
        """Register catalog endpoints on the given blueprint."""
        service = self

        @bp.route("/bodies", methods=["GET"])
        def list_bodies():
            category = request.args.get("category")
            if category is None:
                return jsonify({"categories": list(CATEGORIES),
                                "bodies": get_all_bodies()})
            try:
                bodies = bodies_by_category(category)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            return jsonify({"categories": [category], "bodies": bodies})

        @bp.route("/bodies/<body_id>", methods=["GET"])
        def get_body(body_id):
            body = get_body_by_id(body_id)
            if body is None:
                return jsonify({"error": "Body not found"}), 404
            return jsonify(describe_body(body))

        @bp.route("/bodies/nearest", methods=["POST"])
        def bodies_nearest():
            data = request_config()
            if data is None:
                return jsonify({"error": "Request body must be JSON"}), 400
            try:
                config = service.validate(data)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            return jsonify(service.compute(config))
