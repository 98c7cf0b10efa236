"""
pytest configuration and shared fixtures for libplanets tests.
"""

import math

import pytest
import libplanets as lp
from libplanets.constants import *


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def standard_jd():
    """Standard Julian Day for testing (J2000.0)."""
    return 2451545.0  # 2000-01-01 12:00:00 TT


@pytest.fixture
def standard_t():
    """J2000.0 in Julian centuries."""
    return 0.0


@pytest.fixture
def test_dates():
    """Collection of test dates spanning different eras."""
    return [
        (2000, 1, 1, 12.0, "J2000"),
        (1980, 5, 20, 0.0, "Past"),
        (2024, 11, 5, 18.0, "Recent"),
        (1950, 10, 15, 6.0, "Mid-century"),
    ]


@pytest.fixture
def all_planets():
    """Bodies with Keplerian variants."""
    return [
        (ME, "Mercury"),
        (VE, "Venus"),
        (MA, "Mars"),
        (JU, "Jupiter"),
        (SA, "Saturn"),
        (UR, "Uranus"),
        (NE, "Neptune"),
        (PL, "Pluto"),
    ]


@pytest.fixture
def polar_states():
    """Heliocentric (l, b, r) samples in radians and AU."""
    return [
        (0.0, 0.0, 1.0),
        (1.0, 0.2, 0.72),
        (math.pi, -0.1, 5.2),
        (4.5, 1.2, 30.1),
        (6.2, -1.4, 0.39),
        (2.0, 0.0, 39.5),
    ]


@pytest.fixture
def synthetic_planet():
    """Factory of planets with constant heliocentric position and rate."""

    def _make(lbr, rate=(0.0, 0.0, 0.0), body=MA):
        return lp.FunctionPlanet(body, lambda t: lbr, lambda t: rate)

    return _make


# ============================================================================
# TOLERANCE FIXTURES
# ============================================================================


@pytest.fixture
def default_tolerances():
    """Tolerances of the Keplerian variants against Swiss Ephemeris."""
    return {
        "longitude": 0.5,  # degrees
        "latitude": 0.5,  # degrees
        "distance": 0.02,  # relative
        "sun_longitude": 0.02,  # degrees
    }


# ============================================================================
# SETUP/TEARDOWN
# ============================================================================


@pytest.fixture(autouse=True)
def reset_state():
    """Reset configuration and the variant registry around each test."""
    lp.set_nutation_model(DEFAULT_NUTATION_MODEL)

    yield

    lp.set_nutation_model(DEFAULT_NUTATION_MODEL)
    for body in lp.registered_bodies():
        lp.unregister_planet(body)


# ============================================================================
# MARKERS
# ============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
