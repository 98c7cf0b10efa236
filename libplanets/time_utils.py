"""
Time conversion utilities for libplanets.

The position pipeline takes time as Julian centuries since J2000.0 (TT):

    t = (JD - 2451545.0) / 36525.0
"""

from .constants import DAYS_PER_CENTURY, J2000


def jd_to_centuries(jd: float) -> float:
    """Julian centuries since J2000.0 for a Julian Day."""
    return (jd - J2000) / DAYS_PER_CENTURY


def centuries_to_jd(t: float) -> float:
    """Julian Day for a time in Julian centuries since J2000.0."""
    return J2000 + t * DAYS_PER_CENTURY
