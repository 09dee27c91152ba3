"""
Gravitational time dilation around and inside a static spherical body.

Exterior (Schwarzschild metric), observer at r >= R:
    dtau/dt = sqrt(1 - Rs/r)

Interior (Schwarzschild interior solution, uniform density), r <= R:
    dtau/dt = (3/2) sqrt(1 - Rs/R) - (1/2) sqrt(1 - Rs r^2 / R^3)

At the center this reduces to (3/2) sqrt(1 - Rs/R) - 1/2, which reaches
zero at the Buchdahl limit Rs/R = 8/9. Factors are clamped to [0, 1]:
0 means the formula no longer describes a static body.

Masses in kg, radii and distances in km.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

import numpy as np

from physics.constants import G, C_LIGHT


def schwarzschild_radius(mass_kg):
    """
    Schwarzschild radius Rs = 2GM/c^2.

    Parameters
    ----------
    mass_kg : float
        Mass in kilograms.

    Returns
    -------
    float
        Rs in kilometres.
    """
    return 2.0 * G * mass_kg / (C_LIGHT * C_LIGHT) / 1000.0


def compacity(mass_kg, radius_km):
    """Dimensionless field strength Rs/R."""
    return schwarzschild_radius(mass_kg) / radius_km


def dilation_at_surface(mass_kg, radius_km):
    """
    Exterior time dilation factor sqrt(1 - Rs/R) at radius_km.

    Returns 0 when radius_km is at or inside the Schwarzschild radius.
    """
    factor = 1.0 - schwarzschild_radius(mass_kg) / radius_km
    if factor <= 0:
        return 0.0
    return math.sqrt(factor)


def dilation_at_center(mass_kg, radius_km):
    """
    Interior time dilation factor at the center of a uniform-density sphere.

    (3/2) sqrt(1 - Rs/R) - 1/2, clamped to 0 beyond the Buchdahl limit
    and for black holes.
    """
    factor = 1.0 - schwarzschild_radius(mass_kg) / radius_km
    if factor <= 0:
        return 0.0
    return max(1.5 * math.sqrt(factor) - 0.5, 0.0)


def dilation_at_distance(mass_kg, radius_km, distance_km):
    """
    Time dilation factor at distance_km from the center.

    Uses the interior solution for distance_km <= radius_km and the
    exterior metric beyond the surface. Both agree at the surface.

    Parameters
    ----------
    mass_kg : float
        Mass of the body in kilograms.
    radius_km : float
        Radius of the body in kilometres.
    distance_km : float
        Observer distance from the center in kilometres.

    Returns
    -------
    float
        dtau/dt in [0, 1].
    """
    if distance_km > radius_km:
        return dilation_at_surface(mass_kg, distance_km)

    rs = schwarzschild_radius(mass_kg)
    surface_factor = 1.0 - rs / radius_km
    if surface_factor <= 0:
        return 0.0

    r_ratio = distance_km / radius_km
    inner = 1.0 - rs * r_ratio * r_ratio / radius_km
    value = 1.5 * math.sqrt(surface_factor) - 0.5 * math.sqrt(inner)
    return max(value, 0.0)


def density(mass_kg, radius_km):
    """Mean density M / (4/3 pi R^3) in kg/m^3."""
    radius_m = radius_km * 1000.0
    # Divide step by step: R^3 alone overflows or underflows for extreme radii
    return mass_kg / (4.0 / 3.0 * math.pi) / radius_m / radius_m / radius_m


def is_black_hole(mass_kg, radius_km):
    """True when the body lies within its own Schwarzschild radius."""
    return radius_km <= schwarzschild_radius(mass_kg)


def is_near_black_hole(mass_kg, radius_km):
    """True for Rs < R < 1.5 Rs (extreme but still static configuration)."""
    rs = schwarzschild_radius(mass_kg)
    return rs < radius_km < 1.5 * rs


def compactness_regime(mass_kg, radius_km):
    """
    Classify a body by R/Rs.

    Returns one of "black_hole" (R <= Rs), "critical" (R/Rs < 2),
    "compact" (< 5), "dense" (< 10) or "ordinary".
    """
    if is_black_hole(mass_kg, radius_km):
        return "black_hole"
    ratio = radius_km / schwarzschild_radius(mass_kg)
    if ratio < 2:
        return "critical"
    if ratio < 5:
        return "compact"
    if ratio < 10:
        return "dense"
    return "ordinary"


def dilation_profile(mass_kg, radius_km, num_points=200, extent=5.0):
    """
    Sample dtau/dt from the center out to extent * R.

    The sample at distance 0 is skipped, as are samples whose factor is
    zero or non-finite. A black hole has no valid profile.

    Returns
    -------
    list of (float, float)
        (distance / R, factor) pairs in increasing distance.
    """
    if is_black_hole(mass_kg, radius_km):
        return []

    distances = np.linspace(0.0, radius_km * extent, num_points + 1)[1:].tolist()
    points = []
    for distance in distances:
        factor = dilation_at_distance(mass_kg, radius_km, distance)
        if factor > 0 and math.isfinite(factor):
            points.append((distance / radius_km, factor))
    return points


def observer_comparison(mass_kg, radius_km, reference_time_s):
    """
    Proper time elapsed for three observers while a distant observer
    measures reference_time_s.

    Parameters
    ----------
    mass_kg, radius_km : float
        Body parameters.
    reference_time_s : float
        Duration measured far from the body, in seconds.

    Returns
    -------
    dict
        Factors, elapsed times and age differences (seconds) for the
        distant, surface and center observers, plus a "negligible" flag
        when both factors exceed 0.999.

    Raises
    ------
    ValueError
        If the body is a black hole (the interior solution does not apply).
    """
    if is_black_hole(mass_kg, radius_km):
        raise ValueError("Body is inside its Schwarzschild radius; "
                         "interior time dilation is undefined")

    surface = dilation_at_surface(mass_kg, radius_km)
    center = dilation_at_center(mass_kg, radius_km)

    t_infinity = reference_time_s
    t_surface = reference_time_s * surface
    t_center = reference_time_s * center

    return {
        "factor_surface": surface,
        "factor_center": center,
        "time_infinity": t_infinity,
        "time_surface": t_surface,
        "time_center": t_center,
        "diff_infinity_surface": t_infinity - t_surface,
        "diff_infinity_center": t_infinity - t_center,
        "diff_surface_center": t_surface - t_center,
        "negligible": surface > 0.999 and center > 0.999,
    }
