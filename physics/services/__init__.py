"""
Calculator services and their registry.

The four calculators (special relativity, gravitational time dilation,
celestial bodies, inversion) are PhysicsService subclasses. app.py
registers one instance of each; api.routes mounts the endpoints of the
live ones.

Helpers:
    positive_number, bounded_number, clamped_number, reference_time,
    language, request_config:
    validation used by the services' validate() methods

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math
from abc import ABC, abstractmethod

from flask import current_app, request

from physics.constants import SECONDS_PER_DAY
from physics.formatting import LANGUAGES

# Body parameters accepted by the gravity and inversion calculators. Inside
# these bounds every derived quantity (density, R/Rs, log10 distances) stays
# a finite float.
MIN_MASS_KG = 1.0
MAX_MASS_KG = 1e55
MIN_RADIUS_KM = 1e-9
MAX_RADIUS_KM = 1e20


class PhysicsService(ABC):
    """
    One calculator of the site: input checking, computation and the
    JSON endpoints that expose them.

    Subclasses set the listing attributes below and implement validate()
    and compute(). Only services whose status is "live" get their routes
    mounted.

    Attributes
    ----------
    id : str
        Registry key, also the URL namespace (/api/<id>/...).
    name, description : str
        Shown in the /api/services listing.
    category : str
        "special_relativity", "general_relativity" or "catalog".
    status : str
        "live" or "coming_soon".
    route : str
        Site page backed by this service.
    """

    id = ""
    name = ""
    description = ""
    category = ""
    status = "coming_soon"
    route = ""

    @abstractmethod
    def validate(self, config):
        """
        Check a request payload and return the cleaned inputs.

        Out-of-range values are clamped where the calculator allows it;
        anything unusable raises ValueError, which the routes turn into
        a 400 response.
        """

    @abstractmethod
    def compute(self, config):
        """Result dict for inputs returned by validate(); must be JSON-ready."""

    def register_routes(self, blueprint):
        """Attach this service's endpoints to the /api blueprint."""

    def metadata(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "status": self.status,
            "route": self.route,
        }


class ServiceRegistry:
    """Services by id, in the order they were registered."""

    def __init__(self):
        self._services = {}

    def register(self, service):
        """Add a service; a second service with the same id is a ValueError."""
        if service.id in self._services:
            raise ValueError("Duplicate service id '{}'".format(service.id))
        self._services[service.id] = service

    def get(self, service_id):
        return self._services.get(service_id)

    def list_all(self):
        """Listing entries for every service, live or not."""
        return [service.metadata() for service in self._services.values()]

    def live(self):
        return [service for service in self._services.values()
                if service.status == "live"]


# ---------------------------------------------------------------------------
# Shared input validation
# ---------------------------------------------------------------------------

def _number(config, key, default=None):
    value = config.get(key, default)
    if value is None:
        raise ValueError("{} is required".format(key))
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError("{} must be a number".format(key)) from None
    if not math.isfinite(value):
        raise ValueError("{} must be finite".format(key))
    return value


def positive_number(config, key, default=None):
    """Read config[key] as a finite number > 0."""
    value = _number(config, key, default)
    if value <= 0:
        raise ValueError("{} must be positive".format(key))
    return value


def bounded_number(config, key, lo, hi, default=None):
    """Read config[key] as a finite number in [lo, hi]; out of range is a ValueError."""
    value = _number(config, key, default)
    if not lo <= value <= hi:
        raise ValueError("{} must be between {:g} and {:g}".format(key, lo, hi))
    return value


def clamp(value, lo, hi):
    return max(lo, min(value, hi))


def clamped_number(config, key, default, lo, hi):
    """Read config[key] as a finite number and clamp it to [lo, hi]."""
    return clamp(_number(config, key, default), lo, hi)


def reference_time(config, key="reference_time"):
    """Far-observer duration in seconds; one day when missing or not positive."""
    try:
        value = float(config.get(key) or 0)
    except (TypeError, ValueError):
        raise ValueError("{} must be a number".format(key)) from None
    if not math.isfinite(value) or value <= 0:
        return float(SECONDS_PER_DAY)
    return value


def language(config):
    lang = config.get("lang", "fr")
    if lang not in LANGUAGES:
        raise ValueError("lang must be one of: {}".format(", ".join(LANGUAGES)))
    return lang


def request_config():
    """
    JSON body of the current request as a dict, or None if the body is
    missing or not a JSON object. The app's DEFAULT_LANG fills in a
    missing "lang".
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    data.setdefault("lang", current_app.config.get("DEFAULT_LANG", "fr"))
    return data
