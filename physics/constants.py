"""
Physical constants and reference scales for the relativity calculators.

Lengths shown to users are in kilometres and velocities in km/s, so the
km-based constants are the primary ones. SI versions are provided for
formulas that need metres.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

import math

# Speed of light (CODATA exact)
SPEED_OF_LIGHT = 299792.458  # km/s
C_LIGHT = SPEED_OF_LIGHT * 1000.0  # m/s

# Gravitational constant (CODATA 2018)
G = 6.67430e-11  # m^3 kg^-1 s^-2

# Reference masses
SOLAR_MASS = 1.989e30  # kg
EARTH_MASS = 5.972e24  # kg
JUPITER_MASS = 1.898e27  # kg

# Reference radii (mean)
EARTH_RADIUS = 6371.0  # km
SOLAR_RADIUS = 695700.0  # km
JUPITER_RADIUS = 69911.0  # km

# Display cap on the Lorentz factor. At gamma = 320, v/c = 0.9999951.
GAMMA_MAX = 320.0

# v/c reported once gamma reaches the cap
NEAR_LIGHT_FRACTION = 0.99999

# Calendar units used by the time formatter (30-day month, 365-day year)
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_MONTH = 2592000
SECONDS_PER_YEAR = 31536000

# Compacity Rs/R at which the interior solution's central factor reaches 0
BUCHDAHL_COMPACITY = 8.0 / 9.0


def verify_constants():
    """Verify the Sun's Schwarzschild radius is approximately 2.95 km."""
    rs_sun_km = 2.0 * G * SOLAR_MASS / (C_LIGHT * C_LIGHT) / 1000.0
    return math.isclose(rs_sun_km, 2.95, rel_tol=0.01), rs_sun_km
