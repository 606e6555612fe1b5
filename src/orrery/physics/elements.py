# src/orrery/physics/elements.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from orrery.core.constants import AU_SCENE_UNITS
from orrery.core.errors import InvalidEccentricity
from orrery.core.timeconv import deg_to_rad


@dataclass(frozen=True)
class OrbitalElementSet:
    """
    Mean orbital elements at J2000 and their linear rates (per Julian century).

    Units:
        a0_au / a_dot_au: semi-major axis in AU
        e0 / e_dot: eccentricity (0<=e0<1)
        inc0_deg / inc_dot_deg: inclination in degrees
        mean_long0_deg / mean_long_dot_deg: mean longitude in degrees
        long_peri0_deg / long_peri_dot_deg: longitude of perihelion in degrees
        long_node0_deg / long_node_dot_deg: longitude of ascending node in degrees

    The remaining fields describe the body for renderers and are not used to
    compute positions. spin_phase_hours shifts the zero of the spin angle
    away from J2000 by that many hours.
    """
    a0_au: float
    a_dot_au: float
    e0: float
    e_dot: float
    inc0_deg: float
    inc_dot_deg: float
    mean_long0_deg: float
    mean_long_dot_deg: float
    long_peri0_deg: float
    long_peri_dot_deg: float
    long_node0_deg: float
    long_node_dot_deg: float
    rotation_period_hours: float = 24.0
    axial_tilt_deg: float = 0.0
    axial_dir_deg: float = 0.0
    spin_phase_hours: float = 0.0
    radius_km: float = 1.0
    color: str = "#ffffff"

    def __post_init__(self):
        if self.a0_au <= 0:
            raise ValueError("Semi-major axis must be positive.")
        if not (0.0 <= self.e0 < 1.0):
            raise ValueError(f"Eccentricity at epoch must be in range [0, 1). Got: {self.e0}")
        angles = (
            self.inc0_deg, self.inc_dot_deg,
            self.mean_long0_deg, self.mean_long_dot_deg,
            self.long_peri0_deg, self.long_peri_dot_deg,
            self.long_node0_deg, self.long_node_dot_deg,
        )
        if not all(math.isfinite(x) for x in angles):
            raise ValueError("Angular elements and rates must be finite.")
        if not (math.isfinite(self.rotation_period_hours) and self.rotation_period_hours != 0.0):
            raise ValueError(f"Rotation period must be finite and non-zero. Got: {self.rotation_period_hours}")
        if not math.isfinite(self.spin_phase_hours):
            raise ValueError(f"Spin phase must be finite. Got: {self.spin_phase_hours}")


@dataclass(frozen=True)
class OsculatingElements:
    """
    Elements evaluated at T (centuries since J2000). Angles in radians,
    a in scene units.

    argp_rad and mean_anomaly_rad are left unreduced.
    """
    T: float
    a: float
    e: float
    inc_rad: float
    mean_long_rad: float
    long_peri_rad: float
    long_node_rad: float

    def __post_init__(self):
        if not (0.0 <= self.e < 1.0):
            raise InvalidEccentricity(self.e, T=self.T)

    @property
    def argp_rad(self) -> float:
        """w = longitude of perihelion - longitude of node."""
        return self.long_peri_rad - self.long_node_rad

    @property
    def mean_anomaly_rad(self) -> float:
        """M = mean longitude - longitude of perihelion."""
        return self.mean_long_rad - self.long_peri_rad


def osculate(
    element_set: OrbitalElementSet,
    T: float,
    au_scale: float = AU_SCENE_UNITS,
    body: Optional[Any] = None,
) -> OsculatingElements:
    """
    Linear extrapolation of every element to T: value = base + rate * T.

    Raises:
        InvalidEccentricity: drifted eccentricity outside [0, 1)
    """
    es = element_set
    e = es.e0 + es.e_dot * T
    if not (0.0 <= e < 1.0):
        raise InvalidEccentricity(e, T=T, body=body)

    return OsculatingElements(
        T=T,
        a=(es.a0_au + es.a_dot_au * T) * au_scale,
        e=e,
        inc_rad=deg_to_rad(es.inc0_deg + es.inc_dot_deg * T),
        mean_long_rad=deg_to_rad(es.mean_long0_deg + es.mean_long_dot_deg * T),
        long_peri_rad=deg_to_rad(es.long_peri0_deg + es.long_peri_dot_deg * T),
        long_node_rad=deg_to_rad(es.long_node0_deg + es.long_node_dot_deg * T),
    )
