"""
Nearest-match search over the celestial body catalog.

Bodies span ~40 decades in mass and ~10 in radius, so closeness is
measured in log space:

    d = sqrt( (log10 M1 - log10 M2)^2 + (log10 R1 - log10 R2)^2 )

A distance of 1 means "one order of magnitude away" along a single axis.
"""

import math

from data.celestial_bodies import CELESTIAL_BODIES


def log_distance(mass_a, radius_a, mass_b, radius_b):
    """Euclidean distance between two (mass, radius) points in log10 space."""
    dm = math.log10(mass_a) - math.log10(mass_b)
    dr = math.log10(radius_a) - math.log10(radius_b)
    return math.sqrt(dm * dm + dr * dr)


def _check(mass_kg, radius_km):
    if mass_kg <= 0 or radius_km <= 0:
        raise ValueError("mass and radius must be positive")


def find_nearest_body(mass_kg, radius_km, bodies=None):
    """
    Closest catalog body to (mass_kg, radius_km).

    Parameters
    ----------
    mass_kg : float
        Mass in kilograms.
    radius_km : float
        Radius in kilometres.
    bodies : list of dict, optional
        Catalog to search (default: CELESTIAL_BODIES).

    Returns
    -------
    tuple (dict, float) or None
        The best body and its log distance. On ties the earlier catalog
        entry wins. None for an empty catalog.
    """
    _check(mass_kg, radius_km)
    if bodies is None:
        bodies = CELESTIAL_BODIES

    best = None
    best_distance = math.inf
    for body in bodies:
        d = log_distance(mass_kg, radius_km, body["mass_kg"], body["radius_km"])
        if d < best_distance:
            best = body
            best_distance = d

    if best is None:
        return None
    return best, best_distance


def nearest_bodies(mass_kg, radius_km, k=5, bodies=None):
    """The k closest bodies as (body, distance) pairs, nearest first."""
    _check(mass_kg, radius_km)
    if k < 1:
        raise ValueError("k must be at least 1")
    if bodies is None:
        bodies = CELESTIAL_BODIES

    scored = [
        (body, log_distance(mass_kg, radius_km, body["mass_kg"], body["radius_km"]))
        for body in bodies
    ]
    # sorted() is stable: equal distances keep catalog order
    scored = sorted(scored, key=lambda item: item[1])
    return scored[:k]
