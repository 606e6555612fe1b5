"""Configuration dataclasses for the ephemeris engine and simulation clock."""
from __future__ import annotations

from dataclasses import dataclass

from orrery.core.constants import AU_SCENE_UNITS


@dataclass(frozen=True)
class EphemerisCfg:
    au_scene_units: float = AU_SCENE_UNITS
    kepler_tol: float = 1e-6
    kepler_max_iter: int = 30
    orbit_path_samples: int = 10_000


@dataclass(frozen=True)
class ClockCfg:
    acceleration_factor: float = 10_000.0
    # ~60 fps
    frame_dt_ms: float = 16.0


EPHEMERIS_CFG = EphemerisCfg()
CLOCK_CFG = ClockCfg()


__all__ = ["CLOCK_CFG", "EPHEMERIS_CFG", "ClockCfg", "EphemerisCfg"]
