"""
Human-readable formatting of calculator results, in French or English.

French is the default language of the site. Output strings contain
typographic characters (narrow no-break space for digit grouping,
multiplication sign, superscript exponents); they are written here as
escape sequences.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from physics.constants import (
    SPEED_OF_LIGHT,
    GAMMA_MAX,
    SOLAR_MASS,
    EARTH_MASS,
    SOLAR_RADIUS,
    EARTH_RADIUS,
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)

LANGUAGES = ("fr", "en")

TIMES = "\u00d7"
CUBED = "\u00b3"
NARROW_NBSP = "\u202f"

# Superscript digits and minus sign for powers of ten
_SUPERSCRIPT = str.maketrans(
    "0123456789-",
    "\u2070\u00b9\u00b2\u00b3\u2074\u2075\u2076\u2077\u2078\u2079\u207b")

# (singular, plural) per unit and language
_UNITS = {
    "fr": {
        "second": ("seconde", "secondes"),
        "minute": ("minute", "minutes"),
        "hour": ("heure", "heures"),
        "day": ("jour", "jours"),
        "month": ("mois", "mois"),
        "year": ("an", "ans"),
        "solar_mass": "masses solaires",
        "earth_mass": "masses terrestres",
        "solar_radius": "rayons solaires",
        "earth_radius": "rayons terrestres",
    },
    "en": {
        "second": ("second", "seconds"),
        "minute": ("minute", "minutes"),
        "hour": ("hour", "hours"),
        "day": ("day", "days"),
        "month": ("month", "months"),
        "year": ("year", "years"),
        "solar_mass": "solar masses",
        "earth_mass": "Earth masses",
        "solar_radius": "solar radii",
        "earth_radius": "Earth radii",
    },
}


def _labels(lang):
    try:
        return _UNITS[lang]
    except KeyError:
        raise ValueError("Unsupported language '{}'".format(lang)) from None


def _grouped(value, lang):
    """Round to an integer and group thousands the way the locale does."""
    text = "{:,.0f}".format(value)
    if lang == "fr":
        return text.replace(",", NARROW_NBSP)
    return text


def _unit(labels, key, plural):
    singular, many = labels[key]
    return many if plural else singular


def format_number(value, decimals=2):
    """Fixed-point representation with the given number of decimals."""
    return "{:.{}f}".format(value, decimals)


def format_velocity_fraction(velocity_km_s):
    """Velocity as a percentage of c, e.g. '86.6025%'."""
    fraction = velocity_km_s / SPEED_OF_LIGHT * 100.0
    return "{:.4f}%".format(fraction)


def format_velocity_km_s(velocity_km_s, gamma, lang="fr"):
    """Velocity in whole km/s with locale grouping; c itself once gamma is capped."""
    if gamma >= GAMMA_MAX:
        return "299,792"
    return _grouped(velocity_km_s, lang)


def format_time(seconds, lang="fr"):
    """
    Express a duration in the two largest meaningful calendar units.

    Months are 30 days and years 365 days.

    Examples (fr): '45.00 secondes', '2 minutes 5 secondes',
    '1 heure 30 minutes', '3 jours 2 heures', '2 mois 10 jours',
    '1 an 3 mois'.
    """
    labels = _labels(lang)

    if seconds < SECONDS_PER_MINUTE:
        return "{:.2f} {}".format(seconds, labels["second"][1])

    if seconds < SECONDS_PER_HOUR:
        minutes = int(seconds // SECONDS_PER_MINUTE)
        secs = seconds % SECONDS_PER_MINUTE
        return "{} {} {:.0f} {}".format(
            minutes, _unit(labels, "minute", minutes > 1),
            secs, _unit(labels, "second", secs != 1))

    if seconds < SECONDS_PER_DAY:
        hours = int(seconds // SECONDS_PER_HOUR)
        minutes = int((seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE)
        return "{} {} {} {}".format(
            hours, _unit(labels, "hour", hours > 1),
            minutes, _unit(labels, "minute", minutes != 1))

    if seconds < SECONDS_PER_MONTH:
        days = int(seconds // SECONDS_PER_DAY)
        hours = int((seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR)
        return "{} {} {} {}".format(
            days, _unit(labels, "day", days > 1),
            hours, _unit(labels, "hour", hours != 1))

    if seconds < SECONDS_PER_YEAR:
        months = int(seconds // SECONDS_PER_MONTH)
        days = int((seconds % SECONDS_PER_MONTH) // SECONDS_PER_DAY)
        return "{} {} {} {}".format(
            months, _unit(labels, "month", months > 1),
            days, _unit(labels, "day", days != 1))

    years = int(seconds // SECONDS_PER_YEAR)
    months = int((seconds % SECONDS_PER_YEAR) // SECONDS_PER_MONTH)
    return "{} {} {} {}".format(
        years, _unit(labels, "year", years > 1),
        months, _unit(labels, "month", months != 1))


def format_mass(mass_kg, lang="fr"):
    """Mass in solar masses, Earth masses, or kg in scientific notation."""
    labels = _labels(lang)
    if mass_kg >= SOLAR_MASS:
        return "{:.2f} {}".format(mass_kg / SOLAR_MASS, labels["solar_mass"])
    if mass_kg >= EARTH_MASS:
        return "{:.2f} {}".format(mass_kg / EARTH_MASS, labels["earth_mass"])
    return "{:.2e} kg".format(mass_kg)


def format_radius(radius_km, lang="fr"):
    """Radius in solar radii, Earth radii, or whole kilometres."""
    labels = _labels(lang)
    if radius_km >= SOLAR_RADIUS:
        return "{:.2f} {}".format(radius_km / SOLAR_RADIUS, labels["solar_radius"])
    if radius_km >= EARTH_RADIUS:
        return "{:.2f} {}".format(radius_km / EARTH_RADIUS, labels["earth_radius"])
    return "{} km".format(_grouped(radius_km, lang))


def _power_of_ten(exponent):
    return "10" + str(exponent).translate(_SUPERSCRIPT)


def format_density(density_kg_m3, lang="fr"):
    """
    Density scaled to the nearest display tier.

    From 1e15 kg/m^3 up the exponent follows the value (neutron star
    matter, black holes); below that the fixed tiers 10^9, 10^6 and 10^3
    apply, and plain kg/m^3 below 1000.
    """
    _labels(lang)
    unit = "kg/m" + CUBED
    if density_kg_m3 >= 1e15:
        mantissa, exponent = "{:.2e}".format(density_kg_m3).split("e")
        return "{} {} {} {}".format(
            mantissa, TIMES, _power_of_ten(int(exponent)), unit)
    for threshold, exponent in ((1e9, 9), (1e6, 6), (1e3, 3)):
        if density_kg_m3 >= threshold:
            return "{:.2f} {} {} {}".format(
                density_kg_m3 / 10.0 ** exponent, TIMES,
                _power_of_ten(exponent), unit)
    return "{:.2f} {}".format(density_kg_m3, unit)


def format_schwarzschild_radius(rs_km):
    """'2.954 km' below 1000 km, thousands of km above."""
    if rs_km < 1000:
        return "{:.3f} km".format(rs_km)
    return "{:.2f} {} 10{} km".format(rs_km / 1000.0, TIMES, CUBED)
