"""
Nutation for libplanets.

Builds the functions used by true_to_apparent() to refer a position from
the mean to the true equinox of date. In ecliptic coordinates nutation is
a rotation about the ecliptic pole by the nutation in longitude (delta-psi);
the nutation in obliquity (delta-epsilon) moves the equator, not the
ecliptic, and does not enter.

Models:
- "iau2000b": IAU 2000B, 77 luni-solar terms (~1 mas), default
- "iau2000a": IAU 2000A, full series (~0.1 mas), noticeably slower
- "none": identity, apparent positions equal true ones

Both IAU series are computed by Skyfield.
"""

import math
from typing import Optional, Tuple

from skyfield.nutationlib import iau2000a, iau2000b_radians

from .planet import NutationFunc
from .state import get_nutation_model, get_timescale
from .time_utils import centuries_to_jd

# Skyfield's iau2000a() returns tenths of a micro-arcsecond
_TENTH_USEC_TO_RAD = math.radians(1e-7 / 3600.0)


def identity(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Nutation function of the "none" model."""
    return x, y, z


def nutation_angles(t: float, model: Optional[str] = None) -> Tuple[float, float]:
    """
    Nutation in longitude and in obliquity.

    Args:
        t: Julian centuries since J2000.0 (TT)
        model: Nutation model; defaults to the configured one

    Returns:
        (dpsi, deps) in radians

    Raises:
        ValueError: If the model name is unknown
    """
    model = (model or get_nutation_model()).lower()
    if model == "none":
        return 0.0, 0.0

    jd_tt = centuries_to_jd(t)
    if model == "iau2000b":
        ts = get_timescale()
        t_obj = ts.tt_jd(jd_tt)
        dpsi, deps = iau2000b_radians(t_obj)
        return float(dpsi), float(deps)
    if model == "iau2000a":
        dpsi, deps = iau2000a(jd_tt)
        return float(dpsi) * _TENTH_USEC_TO_RAD, float(deps) * _TENTH_USEC_TO_RAD

    raise ValueError(f"Unknown nutation model: {model!r}")


def mean2true(t: float, model: Optional[str] = None) -> NutationFunc:
    """
    Function converting ecliptic rectangular coordinates referred to the
    mean equinox of date to the true equinox of date.

    Args:
        t: Julian centuries since J2000.0 (TT)
        model: Nutation model; defaults to the configured one

    Returns:
        Callable (x, y, z) -> (x', y', z') bound to time t

    Example:
        >>> nut = mean2true(t)
        >>> apparent = true_to_apparent(planet.position(t, sun), nut)
    """
    dpsi, _ = nutation_angles(t, model)
    if dpsi == 0.0:
        return identity

    c = math.cos(dpsi)
    s = math.sin(dpsi)

    def nutate(x: float, y: float, z: float) -> Tuple[float, float, float]:
        return c * x - s * y, s * x + c * y, z

    return nutate
