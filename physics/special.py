"""
Special relativity: Lorentz factor and its inverse.

gamma = 1 / sqrt(1 - v^2/c^2)

The factor diverges as v -> c, so every function here caps it at
GAMMA_MAX. Velocities are in km/s.
"""

import math

import numpy as np

from physics.constants import SPEED_OF_LIGHT, GAMMA_MAX, NEAR_LIGHT_FRACTION


def lorentz_gamma(velocity_km_s):
    """
    Lorentz factor for a velocity in km/s.

    Parameters
    ----------
    velocity_km_s : float
        Velocity relative to the observer in km/s.

    Returns
    -------
    float
        gamma in [1, GAMMA_MAX]. Velocities at or above c return the
        cap; zero or negative velocities return 1.
    """
    beta = velocity_km_s / SPEED_OF_LIGHT
    if beta >= 1:
        return GAMMA_MAX
    if beta <= 0:
        return 1.0
    gamma = 1.0 / math.sqrt(1.0 - beta * beta)
    return min(gamma, GAMMA_MAX)


def velocity_from_gamma(gamma):
    """
    Velocity in km/s that produces a given Lorentz factor.

    v = c * sqrt(1 - 1/gamma^2)

    gamma <= 1 returns 0; gamma at or above the cap returns
    NEAR_LIGHT_FRACTION * c.
    """
    if gamma <= 1:
        return 0.0
    if gamma >= GAMMA_MAX:
        return SPEED_OF_LIGHT * NEAR_LIGHT_FRACTION
    beta = math.sqrt(1.0 - 1.0 / (gamma * gamma))
    return beta * SPEED_OF_LIGHT


def velocity_gamma_curve(num_points=1000):
    """Sample gamma(v) for v from 0 to c. Returns (v_km_s, gamma) pairs."""
    velocities = np.linspace(0.0, SPEED_OF_LIGHT, num_points + 1).tolist()
    return [(v, lorentz_gamma(v)) for v in velocities]


def gamma_velocity_curve(num_points=1000):
    """Sample v(gamma) for gamma from 1 to GAMMA_MAX. Returns (gamma, v_km_s) pairs."""
    gammas = np.linspace(1.0, GAMMA_MAX, num_points + 1).tolist()
    return [(g, velocity_from_gamma(g)) for g in gammas]


def proper_time(coordinate_time_s, velocity_km_s):
    """Time elapsed for a traveller moving at velocity_km_s while
    coordinate_time_s elapses for the stationary observer."""
    return coordinate_time_s / lorentz_gamma(velocity_km_s)
