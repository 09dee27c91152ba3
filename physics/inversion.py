"""
Inverse problem: find the mass or radius that yields a target time
dilation factor.

Forward:  (M, R, depth) -> dtau/dt            (physics.schwarzschild)
Inverse:  (dtau/dt, R, depth) -> M             solve_mass
          (dtau/dt, M, depth) -> R             solve_radius

The observer sits at depth * R from the center (0 = center, 1 = surface,
> 1 = outside). For a fixed radius the factor decreases monotonically with
mass; for a fixed mass it increases monotonically with radius. Both
searches bisect in log10 space because the physically interesting range
spans tens of decades.

Search layout (both routines):
  outer loop (MAX_BRACKET_STEPS): slide the open end of the bracket one
      decade at a time until it straddles the target
  inner loop (MAX_BISECTION_STEPS): halve the bracket until its relative
      width drops below REL_TOLERANCE
"""

import logging
import math

from physics.constants import G, C_LIGHT
from physics.schwarzschild import schwarzschild_radius, dilation_at_distance

log = logging.getLogger(__name__)

MAX_BRACKET_STEPS = 50
MAX_BISECTION_STEPS = 200
REL_TOLERANCE = 1e-12

# Initial width of the bracket, in decades
INITIAL_SPAN = 3.0

_LOG_TOLERANCE = math.log10(1.0 + REL_TOLERANCE)


def factor_at_depth(mass_kg, radius_km, depth):
    """Time dilation factor for an observer at depth * radius_km."""
    return dilation_at_distance(mass_kg, radius_km, depth * radius_km)


def _check_target(target_factor, depth):
    if not (0.0 < target_factor < 1.0):
        raise ValueError("target_factor must be strictly between 0 and 1")
    if depth < 0:
        raise ValueError("depth must be >= 0")


def _bisect(evaluate, target, lo, hi, increasing):
    """
    Bisect log10 bracket [lo, hi] for evaluate(x) == target.

    increasing: whether evaluate grows with x.
    """
    for _ in range(MAX_BISECTION_STEPS):
        if hi - lo < _LOG_TOLERANCE:
            break
        mid = 0.5 * (lo + hi)
        below = evaluate(mid) < target
        if below == increasing:
            lo = mid
        else:
            hi = mid
    return 10.0 ** (0.5 * (lo + hi))


def solve_mass(target_factor, radius_km, depth=1.0):
    """
    Mass (kg) at which an observer at depth * R measures target_factor.

    Parameters
    ----------
    target_factor : float
        Desired dtau/dt, strictly between 0 and 1.
    radius_km : float
        Body radius in kilometres.
    depth : float, optional
        Observer position in units of the body radius (default: surface).

    Returns
    -------
    float or None
        Mass in kg, or None if no bracket was found within
        MAX_BRACKET_STEPS decades.

    Raises
    ------
    ValueError
        If target_factor, radius_km or depth is out of range.
    """
    _check_target(target_factor, depth)
    if radius_km <= 0:
        raise ValueError("radius_km must be positive")

    def evaluate(log_m):
        return factor_at_depth(10.0 ** log_m, radius_km, depth)

    # Mass whose Schwarzschild radius reaches the observer (or the surface,
    # for interior observers): the factor there is 0.
    reach_m = max(depth, 1.0) * radius_km * 1000.0
    log_hi = math.log10(reach_m * C_LIGHT * C_LIGHT / (2.0 * G))
    log_lo = log_hi - INITIAL_SPAN

    for _ in range(MAX_BRACKET_STEPS):
        if evaluate(log_lo) > target_factor:
            break
        log_hi = log_lo
        log_lo -= 1.0
    else:
        log.warning("solve_mass: no bracket for target=%g R=%g km depth=%g",
                    target_factor, radius_km, depth)
        return None

    mass = _bisect(evaluate, target_factor, log_lo, log_hi, increasing=False)
    log.debug("solve_mass: target=%g R=%g km depth=%g -> M=%.6e kg",
              target_factor, radius_km, depth, mass)
    return mass


def solve_radius(target_factor, mass_kg, depth=1.0):
    """
    Radius (km) at which an observer at depth * R measures target_factor.

    Parameters
    ----------
    target_factor : float
        Desired dtau/dt, strictly between 0 and 1.
    mass_kg : float
        Body mass in kilograms.
    depth : float, optional
        Observer position in units of the body radius (default: surface).

    Returns
    -------
    float or None
        Radius in km, or None if no bracket was found within
        MAX_BRACKET_STEPS decades.
    """
    _check_target(target_factor, depth)
    if mass_kg <= 0:
        raise ValueError("mass_kg must be positive")

    def evaluate(log_r):
        return factor_at_depth(mass_kg, 10.0 ** log_r, depth)

    # At this radius the observer sits on the horizon: factor 0.
    log_lo = math.log10(schwarzschild_radius(mass_kg) / max(depth, 1.0))
    log_hi = log_lo + INITIAL_SPAN

    for _ in range(MAX_BRACKET_STEPS):
        if evaluate(log_hi) >= target_factor:
            break
        log_lo = log_hi
        log_hi += 1.0
    else:
        log.warning("solve_radius: no bracket for target=%g M=%g kg depth=%g",
                    target_factor, mass_kg, depth)
        return None

    radius = _bisect(evaluate, target_factor, log_lo, log_hi, increasing=True)
    log.debug("solve_radius: target=%g M=%g kg depth=%g -> R=%.6e km",
              target_factor, mass_kg, depth, radius)
    return radius
