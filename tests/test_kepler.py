"""
Unit tests for the Keplerian planet variants and the Sun.
"""

import math

import pytest
import swisseph as swe
import libplanets as lp
from libplanets.constants import *
from libplanets.kepler import PLANET_ELEMENTS, RATE_STEP_DAYS


SWE_IDS = {
    ME: swe.MERCURY,
    VE: swe.VENUS,
    MA: swe.MARS,
    JU: swe.JUPITER,
    SA: swe.SATURN,
    UR: swe.URANUS,
    NE: swe.NEPTUNE,
    PL: swe.PLUTO,
}


@pytest.mark.unit
class TestKeplerEquation:
    """Tests for solve_kepler_equation."""

    @pytest.mark.parametrize("e", [0.0, 0.0167, 0.2056, 0.2488, 0.6, 0.95])
    def test_solution_satisfies_equation(self, e):
        for M in (0.0, 0.1, 1.0, math.pi / 2, 3.0, 5.5):
            E = lp.solve_kepler_equation(M, e)
            assert E - e * math.sin(E) == pytest.approx(M, abs=1e-10)

    def test_circular_orbit(self):
        assert lp.solve_kepler_equation(1.234, 0.0) == pytest.approx(1.234)


@pytest.mark.unit
class TestHeliocentric:
    """Tests for heliocentric positions from orbital elements."""

    def test_distance_between_perihelion_and_aphelion(self, all_planets):
        for body, name in all_planets:
            elements = PLANET_ELEMENTS[body]
            q = elements.a * (1 - elements.e)
            Q = elements.a * (1 + elements.e)
            planet = lp.KeplerianPlanet(body)
            for t in (-0.5, 0.0, 0.24):
                l, b, r = planet.heliocentric(t)
                assert q * 0.99 <= r <= Q * 1.01, f"{name}: r={r}"
                assert 0.0 <= l < 2 * math.pi, f"{name}: l={l}"
                assert abs(b) <= math.radians(elements.i) + 0.01, f"{name}: b={b}"

    def test_mercury_rate(self):
        """Mercury moves 2.2-6.3 deg/day; rate is in 1e-4 rad/day."""
        mercury = lp.KeplerianPlanet(ME)
        for t in (0.0, 0.001, 0.002, 0.1):
            dl, db, dr = mercury.heliocentric_rate(t)
            deg_per_day = math.degrees(dl * 1e-4)
            assert 2.0 < deg_per_day < 6.5

    def test_rate_matches_positions(self):
        """Integrating the rate over a day reproduces the motion."""
        mars = lp.KeplerianPlanet(MA)
        t = 0.1
        dl, db, dr = mars.heliocentric_rate(t)
        l1, b1, r1 = mars.heliocentric(t)
        l2, b2, r2 = mars.heliocentric(t + 1.0 / DAYS_PER_CENTURY)

        dl_day = ((l2 - l1 + math.pi) % (2 * math.pi) - math.pi) * 1e4
        assert dl_day == pytest.approx(dl, rel=5e-3)
        assert (r2 - r1) * 1e4 == pytest.approx(dr, abs=0.1)

    def test_rate_across_zero_longitude(self):
        """Longitude wrap does not produce a spurious rate."""
        mercury = lp.KeplerianPlanet(ME)
        # sample a year and check every rate stays prograde
        for day in range(0, 365, 3):
            dl, _, _ = mercury.heliocentric_rate(day / DAYS_PER_CENTURY)
            assert 0 < dl < 1200

    def test_custom_elements(self):
        elements = PLANET_ELEMENTS[MA]
        planet = lp.KeplerianPlanet(MA, elements)
        assert planet.elements is elements

    @pytest.mark.parametrize("body", [SU, MO])
    def test_no_elements(self, body):
        with pytest.raises(ValueError, match="No orbital elements"):
            lp.KeplerianPlanet(body)

    def test_rate_step(self):
        assert RATE_STEP_DAYS > 0


@pytest.mark.unit
class TestSunPosition:
    """Tests for the Sun's geocentric position."""

    def test_j2000(self, standard_t):
        l, b, r = lp.sun_position(standard_t)

        # geometric longitude of the Sun at J2000.0 is 280.37 deg
        assert math.degrees(l) == pytest.approx(280.38, abs=0.02)
        assert abs(math.degrees(b)) < 0.001
        # near perihelion
        assert r == pytest.approx(0.9833, abs=0.0005)

    def test_mean_motion_matches_sun_motion(self):
        """Over a year the Keplerian Sun and sun_motion() agree on the mean rate."""
        h = 0.5 / DAYS_PER_CENTURY
        kepler_rates = []
        approx_rates = []
        for day in range(365):
            t = day / DAYS_PER_CENTURY
            l1, _, _ = lp.sun_position(t - h)
            l2, _, _ = lp.sun_position(t + h)
            kepler_rates.append(((l2 - l1) % (2 * math.pi)) * 1e4)
            approx_rates.append(lp.sun_motion(t)[0])

        assert sum(kepler_rates) / 365 == pytest.approx(172.0, abs=0.3)
        assert sum(approx_rates) / 365 == pytest.approx(172.0, abs=0.3)

@pytest.mark.integration
class TestAgainstSwissEphemeris:
    """Compare the Keplerian pipeline with Swiss Ephemeris (Moshier)."""

    @pytest.mark.parametrize(
        "year,month,day", [(2000, 1, 1), (1980, 5, 20), (2024, 11, 5), (1950, 10, 15)]
    )
    def test_all_planets(self, year, month, day, all_planets, default_tolerances):
        jd = swe.julday(year, month, day, 12.0)
        t = lp.jd_to_centuries(jd)
        tol = default_tolerances

        for body, name in all_planets:
            pos = lp.calc_position(t, body)
            res_swe, _ = swe.calc(jd, SWE_IDS[body], swe.FLG_MOSEPH)

            diff_lon = abs(lp.diff_angle(pos.longitude, res_swe[0]))
            assert diff_lon < tol["longitude"], f"{name}: longitude diff {diff_lon}"
            assert abs(pos.latitude - res_swe[1]) < tol["latitude"], f"{name}: latitude"
            assert pos.distance == pytest.approx(res_swe[2], rel=tol["distance"]), name

    def test_sun(self, standard_jd, default_tolerances):
        pos = lp.calc_position(lp.jd_to_centuries(standard_jd), SU)
        res_swe, _ = swe.calc(standard_jd, swe.SUN, swe.FLG_MOSEPH)

        diff_lon = abs(lp.diff_angle(pos.longitude, res_swe[0]))
        assert diff_lon < default_tolerances["sun_longitude"]
        assert pos.distance == pytest.approx(res_swe[2], abs=1e-3)
