"""
Keplerian body variants for the major planets.

This module computes heliocentric positions for Mercury through Pluto, and
the geocentric position of the Sun, from mean orbital elements with linear
secular rates.

Method: Keplerian orbits with elements varying linearly in time.

IMPORTANT PRECISION LIMITATIONS:
- No periodic perturbations (mutual planetary attractions)
- Accuracies over 1800-2050: ~1 arcminute for the inner planets,
  up to ~10 arcminutes for Jupiter and Saturn
- Outside 1800-2050 the errors grow quickly
- For research-grade precision supply a variant based on a full series

Elements source: E.M. Standish, "Keplerian Elements for Approximate Positions
of the Major Planets" (JPL), table 1 (valid 1800 AD - 2050 AD), referred to
the mean ecliptic and equinox of J2000. Longitudes are carried to the mean
equinox of date with the general precession in longitude.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .constants import (
    Body,
    DAYS_PER_CENTURY,
    EARTH_MOON_BARYCENTER,
    GENERAL_PRECESSION,
    PI2,
    RATE_SCALE,
)
from .planet import Planet, PolarPosition, Rate

logger = logging.getLogger(__name__)

# Step of the numerical differentiation of heliocentric(), in days
RATE_STEP_DAYS = 0.5


@dataclass(frozen=True)
class OrbitalElements:
    """
    Mean Keplerian elements of a planet at J2000.0 and their rates.

    Attributes:
        name: Body name
        a: Semi-major axis in AU
        e: Eccentricity
        i: Inclination to the ecliptic in degrees
        L: Mean longitude in degrees
        varpi: Longitude of perihelion (ϖ = ω + Ω) in degrees
        Omega: Longitude of ascending node (Ω) in degrees
        da, de, di, dL, dvarpi, dOmega: Rates per Julian century
            (AU, 1, degrees)
    """

    name: str
    a: float
    e: float
    i: float
    L: float
    varpi: float
    Omega: float
    da: float
    de: float
    di: float
    dL: float
    dvarpi: float
    dOmega: float

    def at(self, t: float) -> Tuple[float, float, float, float, float, float]:
        """Elements (a, e, i, L, varpi, Omega) at t Julian centuries from J2000."""
        return (
            self.a + self.da * t,
            self.e + self.de * t,
            self.i + self.di * t,
            self.L + self.dL * t,
            self.varpi + self.dvarpi * t,
            self.Omega + self.dOmega * t,
        )


# =============================================================================
# ORBITAL ELEMENTS DATABASE (J2000.0, mean ecliptic and equinox of J2000)
# =============================================================================

PLANET_ELEMENTS = {
    Body.MERCURY: OrbitalElements(
        name="Mercury",
        a=0.38709927, e=0.20563593, i=7.00497902,
        L=252.25032350, varpi=77.45779628, Omega=48.33076593,
        da=0.00000037, de=0.00001906, di=-0.00594749,
        dL=149472.67411175, dvarpi=0.16047689, dOmega=-0.12534081,
    ),
    Body.VENUS: OrbitalElements(
        name="Venus",
        a=0.72333566, e=0.00677672, i=3.39467605,
        L=181.97909950, varpi=131.60246718, Omega=76.67984255,
        da=0.00000390, de=-0.00004107, di=-0.00078890,
        dL=58517.81538729, dvarpi=0.00268329, dOmega=-0.27769418,
    ),
    EARTH_MOON_BARYCENTER: OrbitalElements(
        name="EM Bary",
        a=1.00000261, e=0.01671123, i=-0.00001531,
        L=100.46457166, varpi=102.93768193, Omega=0.0,
        da=0.00000562, de=-0.00004392, di=-0.01294668,
        dL=35999.37244981, dvarpi=0.32327364, dOmega=0.0,
    ),
    Body.MARS: OrbitalElements(
        name="Mars",
        a=1.52371034, e=0.09339410, i=1.84969142,
        L=-4.55343205, varpi=-23.94362959, Omega=49.55953891,
        da=0.00001847, de=0.00007882, di=-0.00813131,
        dL=19140.30268499, dvarpi=0.44441088, dOmega=-0.29257343,
    ),
    Body.JUPITER: OrbitalElements(
        name="Jupiter",
        a=5.20288700, e=0.04838624, i=1.30439695,
        L=34.39644051, varpi=14.72847983, Omega=100.47390909,
        da=-0.00011607, de=-0.00013253, di=-0.00183714,
        dL=3034.74612775, dvarpi=0.21252668, dOmega=0.20469106,
    ),
    Body.SATURN: OrbitalElements(
        name="Saturn",
        a=9.53667594, e=0.05386179, i=2.48599187,
        L=49.95424423, varpi=92.59887831, Omega=113.66242448,
        da=-0.00125060, de=-0.00050991, di=0.00193609,
        dL=1222.49362201, dvarpi=-0.41897216, dOmega=-0.28867794,
    ),
    Body.URANUS: OrbitalElements(
        name="Uranus",
        a=19.18916464, e=0.04725744, i=0.77263783,
        L=313.23810451, varpi=170.95427630, Omega=74.01692503,
        da=-0.00196176, de=-0.00004397, di=-0.00242939,
        dL=428.48202785, dvarpi=0.40805281, dOmega=0.04240589,
    ),
    Body.NEPTUNE: OrbitalElements(
        name="Neptune",
        a=30.06992276, e=0.00859048, i=1.77004347,
        L=-55.12002969, varpi=44.96476227, Omega=131.78422574,
        da=0.00026291, de=0.00005105, di=0.00035372,
        dL=218.45945325, dvarpi=-0.32241464, dOmega=-0.00508664,
    ),
    Body.PLUTO: OrbitalElements(
        name="Pluto",
        a=39.48211675, e=0.24882730, i=17.14001206,
        L=238.92903833, varpi=224.06891629, Omega=110.30393684,
        da=-0.00031596, de=0.00005170, di=0.00004818,
        dL=145.20780515, dvarpi=-0.04062942, dOmega=-0.01183482,
    ),
}


def solve_kepler_equation(M: float, e: float, tol: float = 1e-12) -> float:
    """
    Solve Kepler's equation M = E - e·sin(E) for eccentric anomaly E.

    Uses Newton-Raphson iteration.

    Args:
        M: Mean anomaly in radians
        e: Eccentricity (0 ≤ e < 1)
        tol: Convergence tolerance in radians

    Returns:
        float: Eccentric anomaly E in radians

    Note:
        Initial guess: M for e < 0.8, π for highly eccentric orbits.
        All major planets converge in a few iterations.
    """
    E = M if e < 0.8 else math.pi

    for _ in range(30):
        f = E - e * math.sin(E) - M
        fp = 1 - e * math.cos(E)
        E_new = E - f / fp

        if abs(E_new - E) < tol:
            return E_new
        E = E_new

    logger.warning("Kepler equation did not converge (M=%s, e=%s)", M, e)
    return E


def heliocentric_lbr(elements: OrbitalElements, t: float) -> PolarPosition:
    """
    Heliocentric ecliptic coordinates from orbital elements.

    Args:
        elements: Mean elements and rates
        t: Julian centuries since J2000.0

    Returns:
        PolarPosition (l, b, r): longitude and latitude in radians referred
        to the mean equinox of date, distance in AU

    Algorithm:
        1. Elements at t; argument of perihelion ω = ϖ - Ω, M = L - ϖ
        2. Solve Kepler's equation for eccentric anomaly E
        3. Position in the orbital plane
        4. Rotate to the J2000 ecliptic using Ω, i, ω
        5. Add the general precession in longitude
    """
    a, e, i, L, varpi, Omega = elements.at(t)

    omega = math.radians(varpi - Omega)
    M = math.radians((L - varpi) % 360.0)
    Omega_rad = math.radians(Omega)
    i_rad = math.radians(i)

    E = solve_kepler_equation(M, e)

    # Position in orbital plane (perifocal frame)
    x_orb = a * (math.cos(E) - e)
    y_orb = a * math.sqrt(1 - e * e) * math.sin(E)

    cos_omega = math.cos(omega)
    sin_omega = math.sin(omega)
    cos_Omega = math.cos(Omega_rad)
    sin_Omega = math.sin(Omega_rad)
    cos_i = math.cos(i_rad)
    sin_i = math.sin(i_rad)

    x = (cos_omega * cos_Omega - sin_omega * sin_Omega * cos_i) * x_orb + (
        -sin_omega * cos_Omega - cos_omega * sin_Omega * cos_i
    ) * y_orb
    y = (cos_omega * sin_Omega + sin_omega * cos_Omega * cos_i) * x_orb + (
        -sin_omega * sin_Omega + cos_omega * cos_Omega * cos_i
    ) * y_orb
    z = sin_omega * sin_i * x_orb + cos_omega * sin_i * y_orb

    r = math.sqrt(x * x + y * y + z * z)
    l = (math.atan2(y, x) + math.radians(GENERAL_PRECESSION * t)) % PI2
    b = math.atan2(z, math.hypot(x, y))
    return PolarPosition(l, b, r)


def _wrap_pi(angle: float) -> float:
    return (angle + math.pi) % PI2 - math.pi


class KeplerianPlanet(Planet):
    """
    Planet whose heliocentric position comes from mean Keplerian elements.

    Args:
        id: Body identity, Mercury to Pluto
        elements: Elements to use; defaults to PLANET_ELEMENTS[id]

    Raises:
        ValueError: If no elements are known for the body
    """

    def __init__(
        self, id: Union[Body, str], elements: Optional[OrbitalElements] = None
    ):
        super().__init__(id)
        if elements is None:
            if self.id not in PLANET_ELEMENTS:
                raise ValueError(f"No orbital elements for {self.id}")
            elements = PLANET_ELEMENTS[self.id]
        self.elements = elements

    def heliocentric(self, t: float) -> PolarPosition:
        return heliocentric_lbr(self.elements, t)

    def heliocentric_rate(self, t: float) -> Rate:
        """
        Central difference of heliocentric() over ±RATE_STEP_DAYS, in
        1e-4 rad/day and 1e-4 AU/day.
        """
        h = RATE_STEP_DAYS / DAYS_PER_CENTURY
        l1, b1, r1 = self.heliocentric(t - h)
        l2, b2, r2 = self.heliocentric(t + h)
        scale = 1.0 / (2 * RATE_STEP_DAYS * RATE_SCALE)
        return (
            _wrap_pi(l2 - l1) * scale,
            (b2 - b1) * scale,
            (r2 - r1) * scale,
        )


def sun_position(t: float) -> PolarPosition:
    """
    Geocentric ecliptic coordinates of the Sun.

    The Sun is seen from the Earth-Moon barycentre in the direction opposite
    to the barycentre's heliocentric position.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        PolarPosition (l, b, r) in radians and AU, mean equinox of date
    """
    l, b, r = heliocentric_lbr(PLANET_ELEMENTS[EARTH_MOON_BARYCENTER], t)
    return PolarPosition((l + math.pi) % PI2, -b, r)

