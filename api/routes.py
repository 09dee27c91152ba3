"""
Flask API blueprint for the UNIVERS relativity calculators.

Shared endpoints:
  GET  /api/services             - metadata of every registered service
  GET  /api/constants            - physical constants used by the engine

Service-owned endpoints are mounted by each live service's
register_routes() (e.g. /api/special/compute, /api/gravity/compute,
/api/bodies/nearest, /api/inversion/mass).
"""

from flask import Blueprint, jsonify

from physics import constants


def create_api_blueprint(registry):
    """
    Build the /api blueprint for a populated ServiceRegistry.

    Parameters
    ----------
    registry : ServiceRegistry
        Registry whose live services mount their own routes.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__, url_prefix="/api")

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for all registered services."""
        return jsonify(registry.list_all())

    @api.route("/constants", methods=["GET"])
    def get_constants():
        """Return the physical constants used by the engine."""
        return jsonify({
            "SPEED_OF_LIGHT": constants.SPEED_OF_LIGHT,
            "G": constants.G,
            "SOLAR_MASS": constants.SOLAR_MASS,
            "EARTH_MASS": constants.EARTH_MASS,
            "JUPITER_MASS": constants.JUPITER_MASS,
            "EARTH_RADIUS": constants.EARTH_RADIUS,
            "SOLAR_RADIUS": constants.SOLAR_RADIUS,
            "GAMMA_MAX": constants.GAMMA_MAX,
        })

    for service in registry.live():
        service.register_routes(api)

    return api
