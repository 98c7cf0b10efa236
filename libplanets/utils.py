"""
Math primitives for libplanets.

Fractional part, polar/Cartesian conversions and angular helpers used by
the geocentric reduction.
"""

import math
from typing import Tuple

from .constants import PI2


def frac(x: float) -> float:
    """
    Fractional part of x, always in [0, 1).

    Examples:
        >>> frac(1.25)
        0.25
        >>> frac(-0.25)
        0.75
    """
    return x - math.floor(x)


def to_range(x: float, limit: float) -> float:
    """Reduce x to the range [0, limit)."""
    return x % limit


def polar(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert rectangular coordinates to polar.

    Args:
        x, y, z: Rectangular coordinates

    Returns:
        Tuple (r, theta, phi) where:
            - r: radius vector, >= 0
            - theta: latitude in radians, [-pi/2, pi/2]
            - phi: longitude in radians, [0, 2*pi)

    Note:
        The zero vector maps to (0.0, 0.0, 0.0).
    """
    rho = math.hypot(x, y)
    r = math.sqrt(rho * rho + z * z)
    theta = math.atan2(z, rho)
    phi = math.atan2(y, x) % PI2
    if phi >= PI2:
        phi = 0.0
    return r, theta, phi


def cart(r: float, theta: float, phi: float) -> Tuple[float, float, float]:
    """
    Convert polar coordinates (r, latitude, longitude) to rectangular.

    Angles are in radians.
    """
    rcst = r * math.cos(theta)
    return rcst * math.cos(phi), rcst * math.sin(phi), r * math.sin(theta)


def diff_angle(p1: float, p2: float) -> float:
    """
    Calculate distance in degrees p1 - p2 normalized to [-180;180].

    Examples:
        >>> diff_angle(10, 20)
        -10.0
        >>> diff_angle(350, 10)
        -20.0
        >>> diff_angle(10, 350)
        20.0
    """
    diff = (p1 - p2) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff
