"""
Static element table for the eight planets.

Keplerian elements and rates are the JPL "approximate positions of the
planets" set valid 1800 AD - 2050 AD (Standish), referred to the mean
ecliptic and equinox of J2000. Earth uses the Earth-Moon barycenter row.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from orrery.core.errors import UnknownBody
from orrery.physics.elements import OrbitalElementSet


class Body(Enum):
    """Bodies with an element set."""
    MERCURY = "mercury"
    VENUS = "venus"
    EARTH = "earth"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"

    @classmethod
    def parse(cls, name: "str | Body") -> "Body":
        """Look up a body by (case-insensitive) name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownBody(name) from None

    def __str__(self) -> str:
        return self.value


# Sun radius for renderers (km)
SUN_RADIUS_KM: float = 695_700.0
SUN_COLOR: str = "#ffd54a"

_PLANETS = {
    Body.MERCURY: OrbitalElementSet(
        a0_au=0.38709927, a_dot_au=0.00000037,
        e0=0.20563593, e_dot=0.00001906,
        inc0_deg=7.00497902, inc_dot_deg=-0.00594749,
        mean_long0_deg=252.25032350, mean_long_dot_deg=149472.67411175,
        long_peri0_deg=77.45779628, long_peri_dot_deg=0.16047689,
        long_node0_deg=48.33076593, long_node_dot_deg=-0.12534081,
        rotation_period_hours=1407.6, axial_tilt_deg=0.034, axial_dir_deg=281.01,
        radius_km=2439.7, color="#9e9e9e",
    ),
    Body.VENUS: OrbitalElementSet(
        a0_au=0.72333566, a_dot_au=0.00000390,
        e0=0.00677672, e_dot=-0.00004107,
        inc0_deg=3.39467605, inc_dot_deg=-0.00078890,
        mean_long0_deg=181.97909950, mean_long_dot_deg=58517.81538729,
        long_peri0_deg=131.60246718, long_peri_dot_deg=0.00268329,
        long_node0_deg=76.67984255, long_node_dot_deg=-0.27769418,
        # Retrograde spin
        rotation_period_hours=-5832.5, axial_tilt_deg=177.36, axial_dir_deg=272.76,
        radius_km=6051.8, color="#e6c27a",
    ),
    Body.EARTH: OrbitalElementSet(
        a0_au=1.00000261, a_dot_au=0.00000562,
        e0=0.01671123, e_dot=-0.00004392,
        inc0_deg=-0.00001531, inc_dot_deg=-0.01294668,
        mean_long0_deg=100.46457166, mean_long_dot_deg=35999.37244981,
        long_peri0_deg=102.93768193, long_peri_dot_deg=0.32327364,
        long_node0_deg=0.0, long_node_dot_deg=0.0,
        rotation_period_hours=23.9345, axial_tilt_deg=23.44, axial_dir_deg=0.0,
        radius_km=6371.0, color="#2f6fd6",
    ),
    Body.MARS: OrbitalElementSet(
        a0_au=1.52371034, a_dot_au=0.00001847,
        e0=0.09339410, e_dot=0.00007882,
        inc0_deg=1.84969142, inc_dot_deg=-0.00813131,
        mean_long0_deg=-4.55343205, mean_long_dot_deg=19140.30268499,
        long_peri0_deg=-23.94362959, long_peri_dot_deg=0.44441088,
        long_node0_deg=49.55953891, long_node_dot_deg=-0.29257343,
        rotation_period_hours=24.6229, axial_tilt_deg=25.19, axial_dir_deg=317.68,
        radius_km=3389.5, color="#c1440e",
    ),
    Body.JUPITER: OrbitalElementSet(
        a0_au=5.20288700, a_dot_au=-0.00011607,
        e0=0.04838624, e_dot=-0.00013253,
        inc0_deg=1.30439695, inc_dot_deg=-0.00183714,
        mean_long0_deg=34.39644051, mean_long_dot_deg=3034.74612775,
        long_peri0_deg=14.72847983, long_peri_dot_deg=0.21252668,
        long_node0_deg=100.47390909, long_node_dot_deg=0.20469106,
        rotation_period_hours=9.925, axial_tilt_deg=3.13, axial_dir_deg=268.05,
        radius_km=69911.0, color="#d8ca9d",
    ),
    Body.SATURN: OrbitalElementSet(
        a0_au=9.53667594, a_dot_au=-0.00125060,
        e0=0.05386179, e_dot=-0.00050991,
        inc0_deg=2.48599187, inc_dot_deg=0.00193609,
        mean_long0_deg=49.95424423, mean_long_dot_deg=1222.49362201,
        long_peri0_deg=92.59887831, long_peri_dot_deg=-0.41897216,
        long_node0_deg=113.66242448, long_node_dot_deg=-0.28867794,
        rotation_period_hours=10.656, axial_tilt_deg=26.73, axial_dir_deg=40.58,
        radius_km=58232.0, color="#e3cf9a",
    ),
    Body.URANUS: OrbitalElementSet(
        a0_au=19.18916464, a_dot_au=-0.00196176,
        e0=0.04725744, e_dot=-0.00004397,
        inc0_deg=0.77263783, inc_dot_deg=-0.00242939,
        mean_long0_deg=313.23810451, mean_long_dot_deg=428.48202785,
        long_peri0_deg=170.95427630, long_peri_dot_deg=0.40805281,
        long_node0_deg=74.01692503, long_node_dot_deg=0.04240589,
        rotation_period_hours=-17.24, axial_tilt_deg=97.77, axial_dir_deg=257.31,
        radius_km=25362.0, color="#9fd9e6",
    ),
    Body.NEPTUNE: OrbitalElementSet(
        a0_au=30.06992276, a_dot_au=0.00026291,
        e0=0.00859048, e_dot=0.00005105,
        inc0_deg=1.77004347, inc_dot_deg=0.00035372,
        mean_long0_deg=-55.12002969, mean_long_dot_deg=218.45945325,
        long_peri0_deg=44.96476227, long_peri_dot_deg=-0.32241464,
        long_node0_deg=131.78422574, long_node_dot_deg=-0.00508664,
        rotation_period_hours=16.11, axial_tilt_deg=28.32, axial_dir_deg=299.36,
        radius_km=24622.0, color="#3f54ba",
    ),
}

PLANETS: Mapping[Body, OrbitalElementSet] = MappingProxyType(_PLANETS)


__all__ = ["Body", "PLANETS", "SUN_COLOR", "SUN_RADIUS_KM"]
