"""
Positions of several bodies at one instant.

Drives the geocentric reduction for a set of bodies:
- The Sun's geocentric position is computed once and shared
- The nutation function is built once and shared
- Each body uses its registered variant (see planet.register_planet),
  otherwise the Keplerian variant

The Sun is a special case: its geocentric position is known directly, so it
does not go through Planet.position(). Its apparent longitude gets the
standalone light-time term instead.

Every body is an independent pure computation, so the work can be spread
over a thread pool without locks.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Dict, Iterable, Optional, Union

from .constants import PLANETS, Body
from .kepler import KeplerianPlanet, sun_position
from .nutation import mean2true
from .planet import (
    NutationFunc,
    Planet,
    PolarPosition,
    Position,
    apply_light_travel,
    as_body,
    get_planet,
    true_to_apparent,
)
from .time_utils import jd_to_centuries

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _keplerian(body: Body) -> KeplerianPlanet:
    return KeplerianPlanet(body)


def _variant(body: Body) -> Planet:
    planet = get_planet(body)
    if planet is not None:
        return planet
    if body is Body.MOON:
        raise ValueError("No series for the Moon; register a Moon variant first")
    return _keplerian(body)


def _calc(
    t: float,
    body: Body,
    sun: PolarPosition,
    nutate: Optional[NutationFunc],
) -> Position:
    if body is Body.SUN:
        pos = Position(math.degrees(sun.l) % 360.0, math.degrees(sun.b), sun.r)
        if nutate is not None:
            pos = true_to_apparent(pos, nutate)
            pos = pos._replace(
                longitude=apply_light_travel(pos.longitude, pos.distance, body)
            )
    else:
        pos = _variant(body).position(t, sun)
        if nutate is not None:
            pos = true_to_apparent(pos, nutate)
    logger.debug("%s at t=%s: %s", body, t, pos)
    return pos


def calc_position(
    t: float,
    body: Union[Body, str],
    apparent: bool = True,
    nutate: Optional[NutationFunc] = None,
) -> Position:
    """
    Geocentric ecliptic position of a body.

    Args:
        t: Julian centuries since J2000.0 (TT)
        body: Body identity or name
        apparent: If True, refer to the true equinox of date (nutation);
            otherwise return the true position, mean equinox of date
        nutate: Nutation function; defaults to nutation.mean2true(t).
            Only valid with apparent=True

    Returns:
        Position (longitude, latitude, distance) in degrees and AU

    Raises:
        ValueError: For the Moon when no Moon variant is registered, or
            when nutate is given with apparent=False
    """
    body = as_body(body)
    if not apparent and nutate is not None:
        raise ValueError("nutate has no effect on true positions (apparent=False)")
    if apparent and nutate is None:
        nutate = mean2true(t)
    return _calc(t, body, sun_position(t), nutate if apparent else None)


def calc_positions(
    t: float,
    bodies: Optional[Iterable[Union[Body, str]]] = None,
    apparent: bool = True,
    max_workers: Optional[int] = None,
) -> Dict[Body, Position]:
    """
    Geocentric ecliptic positions of several bodies at one instant.

    Args:
        t: Julian centuries since J2000.0 (TT)
        bodies: Bodies to compute; defaults to every body with a variant
            (the Moon only when a Moon variant is registered)
        apparent: Apply nutation, see calc_position()
        max_workers: If given, compute in a thread pool of that size

    Returns:
        dict mapping each Body to its Position, in request order
    """
    if bodies is None:
        targets = [b for b in PLANETS if b is not Body.MOON or get_planet(b)]
    else:
        targets = [as_body(b) for b in bodies]

    # fail before computing anything
    for body in targets:
        if body is not Body.SUN:
            _variant(body)

    sun = sun_position(t)
    nutate = mean2true(t) if apparent else None

    if max_workers:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(
                executor.map(lambda b: _calc(t, b, sun, nutate), targets)
            )
    else:
        results = [_calc(t, b, sun, nutate) for b in targets]

    return dict(zip(targets, results))


def calc_positions_jd(
    jd: float,
    bodies: Optional[Iterable[Union[Body, str]]] = None,
    apparent: bool = True,
    max_workers: Optional[int] = None,
) -> Dict[Body, Position]:
    """Same as calc_positions() for a Julian Day (TT)."""
    return calc_positions(jd_to_centuries(jd), bodies, apparent, max_workers)
