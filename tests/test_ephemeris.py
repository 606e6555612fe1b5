"""
Tests for the ephemeris facade: positions, orbit paths, error handling.
"""
import logging
import math
import pytest

from orrery.core.config import EphemerisCfg
from orrery.core.constants import MS_PER_DAY
from orrery.core.errors import InvalidEccentricity, UnknownBody
from orrery.core.frames import dot, ecliptic_to_scene, norm, sub
from orrery.core.timeconv import centuries_since_j2000_ms
from orrery.data.planets import PLANETS, Body
from orrery.physics.elements import OrbitalElementSet
from orrery.physics.ephemeris import EphemerisEngine
from orrery.physics.kepler import wrap_to_2pi

J2000_MS = 946_728_000_000.0
CENTURY_MS = 36525.0 * MS_PER_DAY


def make_set(**overrides):
    values = dict(
        a0_au=1.0, a_dot_au=0.0,
        e0=0.0, e_dot=0.0,
        inc0_deg=0.0, inc_dot_deg=0.0,
        mean_long0_deg=0.0, mean_long_dot_deg=36000.0,
        long_peri0_deg=0.0, long_peri_dot_deg=0.0,
        long_node0_deg=0.0, long_node_dot_deg=0.0,
    )
    values.update(overrides)
    return OrbitalElementSet(**values)


@pytest.fixture
def engine():
    return EphemerisEngine()


class TestPositionOf:
    def test_earth_at_j2000_between_perihelion_and_aphelion(self, engine):
        osc = engine.elements_at(Body.EARTH, J2000_MS)
        assert centuries_since_j2000_ms(J2000_MS) == 0.0
        assert abs(math.degrees(osc.mean_anomaly_rad) + 2.48) < 0.01

        r = engine.radius_of(Body.EARTH, J2000_MS)
        assert osc.a * (1 - osc.e) <= r <= osc.a * (1 + osc.e)
        # Two and a half degrees before perihelion
        assert r < osc.a * (1 - osc.e) + 0.01 * osc.a * osc.e

    def test_accepts_body_names(self, engine):
        assert engine.position_of("Earth", J2000_MS) == engine.position_of(Body.EARTH, J2000_MS)

    def test_deterministic(self, engine):
        t = J2000_MS + 1234567890.0
        assert engine.position_of(Body.MARS, t) == engine.position_of(Body.MARS, t)

    def test_circular_orbit_is_a_circle_in_its_plane(self):
        inc, node, peri = 30.0, 40.0, 100.0
        engine = EphemerisEngine(
            elements={Body.EARTH: make_set(a0_au=2.0, inc0_deg=inc, long_node0_deg=node, long_peri0_deg=peri)},
            cfg=EphemerisCfg(au_scene_units=1000.0),
        )
        i, o = math.radians(inc), math.radians(node)
        normal = ecliptic_to_scene((math.sin(i) * math.sin(o), -math.sin(i) * math.cos(o), math.cos(i)))

        for k in range(24):
            r = engine.position_of(Body.EARTH, J2000_MS + k * 0.0417 * CENTURY_MS / 100.0)
            assert math.isclose(norm(r), 2000.0, rel_tol=1e-12)
            assert abs(dot(r, normal)) < 1e-9 * 2000.0

    def test_periodic_over_keplers_third_law_period(self):
        a_au = 1.5
        es = make_set(a0_au=a_au, e0=0.2, inc0_deg=5.0, long_node0_deg=80.0, long_peri0_deg=120.0)
        engine = EphemerisEngine(elements={Body.MARS: es})
        period_days = engine.orbital_period_days(Body.MARS)
        # Mean motion consistent with the period
        n_deg_per_century = 360.0 * 36525.0 / period_days
        engine = EphemerisEngine(elements={Body.MARS: make_set(
            a0_au=a_au, e0=0.2, inc0_deg=5.0, long_node0_deg=80.0, long_peri0_deg=120.0,
            mean_long_dot_deg=n_deg_per_century,
        )})

        for t in [J2000_MS, J2000_MS + 17.0 * MS_PER_DAY, J2000_MS - 400.0 * MS_PER_DAY]:
            r0 = engine.position_of(Body.MARS, t)
            r1 = engine.position_of(Body.MARS, t + period_days * MS_PER_DAY)
            assert norm(sub(r0, r1)) < 1e-6 * norm(r0)

    def test_positions_at_covers_every_planet_in_order(self, engine):
        positions = engine.positions_at(J2000_MS + 3650.0 * MS_PER_DAY)
        assert set(positions) == set(Body)

        order = [Body.MERCURY, Body.VENUS, Body.EARTH, Body.MARS,
                 Body.JUPITER, Body.SATURN, Body.URANUS, Body.NEPTUNE]
        radii = [norm(positions[b]) for b in order]
        assert radii == sorted(radii)

    def test_earth_year_period(self, engine):
        assert abs(engine.orbital_period_days(Body.EARTH) - 365.26) < 0.05


class TestOrbitPath:
    def test_sample_count_and_open_end(self):
        engine = EphemerisEngine(elements={Body.EARTH: make_set()}, cfg=EphemerisCfg(au_scene_units=1000.0))
        n = 8
        path = engine.orbit_path_of(Body.EARTH, n, at_time_ms=J2000_MS)
        assert len(path) == n

        # Circular, unrotated orbit: angle from +z towards +x is the mean anomaly
        angles = [wrap_to_2pi(math.atan2(p[0], p[2])) for p in path]
        for i, ang in enumerate(angles):
            assert math.isclose(ang, 2 * math.pi * i / n, abs_tol=1e-9)
        assert all(b > a for a, b in zip(angles, angles[1:]))
        assert angles[-1] < 2 * math.pi

        # Start and end are close but not the same point
        assert norm(sub(path[0], path[-1])) > 0.0

    def test_closed_path_repeats_first_point(self, engine):
        path = engine.orbit_path_of(Body.MARS, 16, at_time_ms=J2000_MS, closed=True)
        assert len(path) == 17
        assert path[-1] == path[0]

    def test_default_sample_count_from_config(self):
        engine = EphemerisEngine(cfg=EphemerisCfg(orbit_path_samples=12))
        assert len(engine.orbit_path_of(Body.VENUS, at_time_ms=J2000_MS)) == 12

    def test_rejects_empty_path(self, engine):
        with pytest.raises(ValueError, match="sample_count must be >= 1"):
            engine.orbit_path_of(Body.EARTH, 0, at_time_ms=J2000_MS)

    def test_points_bracketed_by_perihelion_and_aphelion(self, engine):
        osc = engine.elements_at(Body.MERCURY, J2000_MS)
        for p in engine.orbit_path_of(Body.MERCURY, 360, at_time_ms=J2000_MS):
            r = norm(p)
            assert osc.a * (1 - osc.e) - 1e-9 <= r <= osc.a * (1 + osc.e) + 1e-9

    def test_position_lies_on_path_built_at_same_time(self, engine):
        t = J2000_MS + 800.0 * MS_PER_DAY
        for body in (Body.MERCURY, Body.EARTH, Body.MARS):
            path = engine.orbit_path_of(body, 3600, at_time_ms=t)
            r = engine.position_of(body, t)
            max_gap = max(norm(sub(path[i], path[i - 1])) for i in range(len(path)))
            nearest = min(norm(sub(r, p)) for p in path)
            assert nearest <= 0.6 * max_gap


class TestErrors:
    def test_unknown_body_enum(self):
        engine = EphemerisEngine(elements={Body.EARTH: PLANETS[Body.EARTH]})
        with pytest.raises(UnknownBody):
            engine.position_of(Body.MARS, J2000_MS)

    def test_unknown_body_name(self, engine):
        with pytest.raises(UnknownBody, match="pluto"):
            engine.position_of("pluto", J2000_MS)
        with pytest.raises(LookupError):
            engine.orbit_path_of("pluto", 10, at_time_ms=J2000_MS)

    def test_invalid_eccentricity_propagates(self):
        engine = EphemerisEngine(elements={Body.EARTH: make_set(e0=0.9, e_dot=0.2)})
        # Fine at the epoch, hyperbolic one century later
        engine.position_of(Body.EARTH, J2000_MS)
        with pytest.raises(InvalidEccentricity):
            engine.position_of(Body.EARTH, J2000_MS + CENTURY_MS)

    def test_non_convergence_falls_back_to_last_estimate(self, caplog):
        # M = 1 rad at the epoch
        es = make_set(e0=0.5, mean_long0_deg=math.degrees(1.0))
        strict = EphemerisEngine(elements={Body.EARTH: es}, cfg=EphemerisCfg(kepler_max_iter=1))
        normal = EphemerisEngine(elements={Body.EARTH: es})

        with caplog.at_level(logging.WARNING, logger="orrery.physics.ephemeris"):
            r = strict.position_of(Body.EARTH, J2000_MS)

        assert "did not converge" in caplog.text
        assert norm(sub(r, normal.position_of(Body.EARTH, J2000_MS))) < 0.05 * norm(r)
