"""
Geocentric reduction of planetary positions for libplanets.

This is the core module. A body variant supplies its heliocentric ecliptic
position and the rate of change of that position; this module turns them
into true geocentric ecliptic coordinates, light-time corrected, and
optionally into apparent coordinates referred to the true equinox of date.

Pipeline:
    heliocentric (l, b, r) + rate (dl, db, dr)
      -> posvel(): rectangular position and velocity
      -> geocentric(): add the Sun's geocentric vector, correct for light time
      -> polar(): longitude, latitude (degrees) and distance (AU)
      -> true_to_apparent(): optional nutation

Units:
    - Angles are radians until the final conversion to degrees.
    - Rates are in 1e-4 rad/day (dl, db) and 1e-4 AU/day (dr). The Sun's
      motion coefficients and the light-time factor are expressed in the
      same units, so every variant must report its rate this way.

Light time is handled with a single linear step: the summed position is
moved back along the combined velocity of body and Sun by the light time
for the approximate distance. No iteration is performed.

References:
    - Montenbruck & Pfleger "Astronomy on the Personal Computer" (POSVEL, GEOCEN)
"""

import logging
import math
from typing import Callable, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from .constants import (
    Body,
    LIGHT_TIME_AU,
    LIGHT_TRAVEL_BODIES,
    LIGHT_TRAVEL_SEC,
    PI2,
    RATE_SCALE,
    SUN_DL0,
    SUN_DL1,
    SUN_DR1,
    SUN_M0,
    SUN_M1,
)
from .errors import ContractViolation
from .utils import cart, frac, polar

logger = logging.getLogger(__name__)


class PolarPosition(NamedTuple):
    """Ecliptic polar position: longitude (rad), latitude (rad), distance (AU)."""

    l: float
    b: float
    r: float


class StateVector(NamedTuple):
    """Rectangular ecliptic position (AU) and velocity (1e-4 AU/day)."""

    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float


class Position(NamedTuple):
    """Ecliptic position: longitude (deg), latitude (deg), distance (AU)."""

    longitude: float
    latitude: float
    distance: float


Rate = Tuple[float, float, float]
NutationFunc = Callable[[float, float, float], Tuple[float, float, float]]
LBRLike = Union[Sequence[float], Mapping[str, float]]


def posvel(
    l: float, b: float, r: float, dl: float, db: float, dr: float
) -> StateVector:
    """
    Rectangular position and velocity from polar coordinates and their
    time derivatives.

    Args:
        l, b, r: Longitude (rad), latitude (rad), distance
        dl, db, dr: Time derivatives of l, b, r

    Returns:
        StateVector (x, y, z, vx, vy, vz), velocity in the units of the
        derivatives.
    """
    cl = math.cos(l)
    sl = math.sin(l)
    cb = math.cos(b)
    sb = math.sin(b)
    x = r * cl * cb
    vx = dr * cl * cb - dl * r * sl * cb - db * r * cl * sb
    y = r * sl * cb
    vy = dr * sl * cb + dl * r * cl * cb - db * r * sl * sb
    z = r * sb
    vz = dr * sb + db * r * cb
    return StateVector(x, y, z, vx, vy, vz)


def sun_motion(t: float) -> Rate:
    """
    Approximate geocentric motion of the Sun (dl, db, dr).

    Args:
        t: Julian centuries since J2000.0

    Returns:
        (dl, db, dr) in 1e-4 rad/day and 1e-4 AU/day
    """
    m = PI2 * frac(SUN_M0 + SUN_M1 * t)
    return SUN_DL0 + SUN_DL1 * math.sin(m), 0.0, SUN_DR1 * math.cos(m)


def _lbr(value: LBRLike) -> PolarPosition:
    if isinstance(value, Mapping):
        return PolarPosition(value["l"], value["b"], value["r"])
    l, b, r = value
    return PolarPosition(l, b, r)


def geocentric(
    t: float,
    body: LBRLike,
    sun: LBRLike,
    rate: Rate,
    sun_rate: Optional[Rate] = None,
) -> Tuple[float, float, float]:
    """
    Light-time corrected geocentric ecliptic coordinates of a body.

    Args:
        t: Julian centuries since J2000.0
        body: Heliocentric (l, b, r) of the body, radians and AU
        sun: Geocentric (l, b, r) of the Sun, radians and AU
        rate: Body's (dl, db, dr) in 1e-4 rad/day and 1e-4 AU/day
        sun_rate: Sun's (dl, db, dr); defaults to sun_motion(t)

    Returns:
        (x, y, z) rectangular geocentric ecliptic coordinates, AU
    """
    if sun_rate is None:
        sun_rate = sun_motion(t)
    dls, dbs, drs = sun_rate
    dl, db, dr = rate
    hpla = _lbr(body)
    gsun = _lbr(sun)

    # ecliptic geocentric coordinates of the Sun
    xs, ys, zs, vxs, vys, vzs = posvel(gsun.l, gsun.b, gsun.r, dls, dbs, drs)
    # ecliptic heliocentric coordinates of the body
    xp, yp, zp, vx, vy, vz = posvel(hpla.l, hpla.b, hpla.r, dl, db, dr)
    x = xp + xs
    y = yp + ys
    z = zp + zs

    delta0 = math.sqrt(x * x + y * y + z * z)
    if delta0 == 0.0:
        logger.debug("body coincides with the observer at t=%s, no light-time", t)
        return x, y, z

    # correct for light travel
    fac = LIGHT_TIME_AU * delta0 * RATE_SCALE
    x -= fac * (vx + vxs)
    y -= fac * (vy + vys)
    z -= fac * (vz + vzs)
    return x, y, z


def to_position(x: float, y: float, z: float) -> Position:
    """Rectangular ecliptic coordinates to Position in degrees and AU."""
    r, b, l = polar(x, y, z)
    return Position(math.degrees(l) % 360.0, math.degrees(b), r)


class Planet:
    """
    Base class for a body variant.

    Subclasses must implement heliocentric() and heliocentric_rate().
    A subclass missing either one cannot be instantiated.

    Example:
        >>> class Vulcan(Planet):
        ...     def heliocentric(self, t):
        ...         return PolarPosition(0.0, 0.0, 0.2)
        ...     def heliocentric_rate(self, t):
        ...         return 0.0, 0.0, 0.0
    """

    def __init__(self, id: Union[Body, str]):
        self._id = as_body(id)
        _check_variant(self)

    @property
    def id(self) -> Body:
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id.value!r})"

    def heliocentric(self, t: float) -> PolarPosition:
        """
        Heliocentric ecliptic coordinates of the body.

        Args:
            t: Julian centuries since J2000.0

        Returns:
            PolarPosition (l, b, r): longitude and latitude in radians,
            distance from the Sun in AU
        """
        raise NotImplementedError

    def heliocentric_rate(self, t: float) -> Rate:
        """
        Time derivatives (dl, db, dr) of heliocentric(t).

        Units are 1e-4 rad/day for dl, db and 1e-4 AU/day for dr.
        """
        raise NotImplementedError

    def _geocentric(
        self, t: float, hpla: LBRLike, gsun: LBRLike
    ) -> Tuple[float, float, float]:
        return geocentric(t, hpla, gsun, self.heliocentric_rate(t))

    def position(self, t: float, sun: LBRLike) -> Position:
        """
        Geocentric ecliptic coordinates of the body, referred to the
        equinox of date and corrected for light time.

        Args:
            t: Julian centuries since J2000.0: (JD - 2451545.0) / 36525.0
            sun: Geocentric (l, b, r) of the Sun in radians and AU, as a
                sequence or a mapping with keys "l", "b", "r"

        Returns:
            Position (longitude, latitude, distance):
                - longitude: degrees, [0, 360)
                - latitude: degrees, [-90, 90]
                - distance: from Earth, AU
        """
        hpla = self.heliocentric(t)
        x, y, z = self._geocentric(t, hpla, sun)
        return to_position(x, y, z)


class FunctionPlanet(Planet):
    """
    Body variant assembled from two callables.

    Args:
        id: Body identity
        heliocentric: Callable t -> (l, b, r)
        rate: Callable t -> (dl, db, dr)

    Raises:
        ContractViolation: If either argument is not callable
    """

    def __init__(
        self,
        id: Union[Body, str],
        heliocentric: Callable[[float], Sequence[float]],
        rate: Callable[[float], Rate],
    ):
        for name, func in (("heliocentric", heliocentric), ("rate", rate)):
            if not callable(func):
                raise ContractViolation(
                    f"{name} for {id} must be callable, got {type(func).__name__}"
                )
        self._heliocentric = heliocentric
        self._rate = rate
        super().__init__(id)

    def heliocentric(self, t: float) -> PolarPosition:
        return _lbr(self._heliocentric(t))

    def heliocentric_rate(self, t: float) -> Rate:
        dl, db, dr = self._rate(t)
        return dl, db, dr


def as_body(id: Union[Body, str]) -> Body:
    """Body for a Body member or its name, e.g. "Mars"."""
    if isinstance(id, Body):
        return id
    try:
        return Body(id)
    except ValueError:
        raise ValueError(f"Unknown body: {id!r}") from None


def _check_variant(planet: Planet) -> None:
    """Raise ContractViolation unless both variant operations are overridden."""
    cls = type(planet)
    missing = [
        name
        for name in ("heliocentric", "heliocentric_rate")
        if not callable(getattr(cls, name, None))
        or getattr(cls, name) is getattr(Planet, name)
    ]
    if missing:
        raise ContractViolation(
            f"{cls.__name__} ({planet.id}) does not implement {', '.join(missing)}"
        )


# =============================================================================
# REGISTRY
# =============================================================================

_REGISTRY: dict[Body, Planet] = {}


def register_planet(planet: Planet) -> None:
    """
    Register a body variant, replacing any variant for the same body.

    Raises:
        ContractViolation: If planet is not a complete variant
    """
    if not isinstance(planet, Planet):
        raise ContractViolation(
            f"Expected a Planet instance, got {type(planet).__name__}"
        )
    _check_variant(planet)
    _REGISTRY[planet.id] = planet
    logger.debug("registered %r", planet)


def unregister_planet(body: Union[Body, str]) -> None:
    """Remove the variant registered for body, if any."""
    _REGISTRY.pop(as_body(body), None)


def get_planet(body: Union[Body, str]) -> Optional[Planet]:
    """Variant registered for body, or None."""
    return _REGISTRY.get(as_body(body))


def registered_bodies() -> Tuple[Body, ...]:
    return tuple(_REGISTRY)


# =============================================================================
# APPARENT POSITION AND LIGHT TIME
# =============================================================================


def true_to_apparent(lbr: Sequence[float], nutate: NutationFunc) -> Position:
    """
    Convert true geocentric coordinates to apparent ones, referred to the
    true equinox of date.

    Args:
        lbr: (longitude, latitude, distance) in degrees and AU, as returned
            by Planet.position()
        nutate: Function (x, y, z) -> (x', y', z') rotating a mean-equinox
            vector to the true equinox, see nutation.mean2true()

    Returns:
        Position (longitude, latitude, distance) in degrees and AU
    """
    l0, b0, r0 = lbr
    x, y, z = nutate(*cart(r0, math.radians(b0), math.radians(l0)))
    return to_position(x, y, z)


def light_travel(delta: float) -> float:
    """
    Light-time travel correction, to be subtracted from the true longitude:

        lon -= light_travel(delta)

    Do not apply it to positions from Planet.position(), which already
    account for light time. See apply_light_travel().

    Args:
        delta: Distance from Earth, AU

    Returns:
        float: correction in arc-degrees
    """
    lt = LIGHT_TRAVEL_SEC * delta  # seconds of time
    return lt * 15 / 3600


def apply_light_travel(longitude: float, delta: float, body: Union[Body, str]) -> float:
    """
    Subtract the light-time term from a longitude.

    Args:
        longitude: True longitude, degrees
        delta: Distance from Earth, AU
        body: Body the longitude belongs to

    Returns:
        float: Corrected longitude in degrees, [0, 360)

    Raises:
        ValueError: If body's position already includes light time
    """
    body = as_body(body)
    if body not in LIGHT_TRAVEL_BODIES:
        raise ValueError(
            f"Light time is already included in the position of {body}"
        )
    return (longitude - light_travel(delta)) % 360.0
