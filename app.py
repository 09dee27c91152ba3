"""
UNIVERS - Relativity calculators for univers.run
Flask application factory.

Serves the JSON API behind the site's interactive pages (Lorentz factor
calculator, gravitational time dilation experiment, celestial body
matching) via registered PhysicsService instances.

Configuration (lowest to highest precedence):
  1. DEFAULT_CONFIG below
  2. UNIVERS_* environment variables (e.g. UNIVERS_DEFAULT_LANG=en)
  3. the test_config mapping passed to create_app()

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

__version__ = "0.1.0"

import logging

from flask import Flask, jsonify

from physics.services import ServiceRegistry
from physics.services.special import SpecialRelativityService
from physics.services.gravity import GravityService
from physics.services.bodies import BodiesService
from physics.services.inversion import InversionService

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "DEFAULT_LANG": "fr",
    "MAX_CURVE_POINTS": 2000,
}


def create_registry():
    """Build and populate the service registry."""
    registry = ServiceRegistry()
    registry.register(SpecialRelativityService())
    registry.register(GravityService())
    registry.register(BodiesService())
    registry.register(InversionService())
    return registry


def create_app(test_config=None):
    """Application factory for the UNIVERS API."""
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("UNIVERS")
    if test_config is not None:
        app.config.from_mapping(test_config)

    if app.config["DEFAULT_LANG"] not in ("fr", "en"):
        raise ValueError("DEFAULT_LANG must be 'fr' or 'en'")

    registry = create_registry()
    app.extensions["univers_registry"] = registry

    # Create and register API blueprint (shared + service-owned routes)
    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry)
    app.register_blueprint(api)

    @app.route("/")
    def root():
        return jsonify({
            "name": "UNIVERS",
            "version": __version__,
            "services": registry.list_all(),
        })

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    log.debug("UNIVERS app created with %d services", len(registry.list_all()))
    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
