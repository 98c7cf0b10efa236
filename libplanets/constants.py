"""
Constants for libplanets.

Body identities, calendar flags and the numeric coefficients of the
geocentric reduction. The coefficients are empirical values of the
underlying approximation theory and are kept verbatim.
"""

import math
from enum import Enum


class Body(Enum):
    """Identity of a solar-system body. Closed set, values are display names."""

    MOON = "Moon"
    SUN = "Sun"
    MERCURY = "Mercury"
    VENUS = "Venus"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"
    PLUTO = "Pluto"

    def __str__(self) -> str:
        return self.value


# Short aliases
MO = Body.MOON
SU = Body.SUN
ME = Body.MERCURY
VE = Body.VENUS
MA = Body.MARS
JU = Body.JUPITER
SA = Body.SATURN
UR = Body.URANUS
NE = Body.NEPTUNE
PL = Body.PLUTO

PLANETS = (MO, SU, ME, VE, MA, JU, SA, UR, NE, PL)

# Bodies whose longitude may still need the standalone light-time term.
# Positions returned by Planet.position() already include light time.
LIGHT_TRAVEL_BODIES = frozenset({SU, MO})

# =============================================================================
# TIME
# =============================================================================

J2000 = 2451545.0  # JD of 2000-01-01 12:00 TT
DAYS_PER_CENTURY = 36525.0

PI2 = 2.0 * math.pi

# =============================================================================
# GEOCENTRIC REDUCTION
# =============================================================================
# Rates are expressed in 1e-4 rad/day and 1e-4 AU/day.

# Mean anomaly of the Sun, in revolutions: M0 + M1 * T
SUN_M0 = 0.9931266
SUN_M1 = 99.9973604

# Sun's geocentric motion: dl = DL0 + DL1 * sin(M), dr = DR1 * cos(M)
SUN_DL0 = 172.00
SUN_DL1 = 5.75
SUN_DR1 = 2.87

# Light time for 1 AU, in days
LIGHT_TIME_AU = 0.00578
RATE_SCALE = 1e-4

# Light-time term per AU, in seconds of time (x15 gives arc-seconds)
LIGHT_TRAVEL_SEC = 1.365

# =============================================================================
# ORBITS
# =============================================================================

EARTH_MOON_BARYCENTER = "EMB"  # key of the Earth-Moon barycentre elements
GENERAL_PRECESSION = 1.3969713  # degrees per Julian century, in longitude

# =============================================================================
# NUTATION
# =============================================================================

NUTATION_MODELS = ("iau2000b", "iau2000a", "none")
DEFAULT_NUTATION_MODEL = "iau2000b"
