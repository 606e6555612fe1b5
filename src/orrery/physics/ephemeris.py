"""
Ephemeris facade: body + time -> heliocentric position in scene units.

Positions are recomputed from the element table on every call, so calling
position_of once per frame for every body never accumulates error.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from orrery.core.config import EPHEMERIS_CFG, EphemerisCfg
from orrery.core.constants import YEAR_GAUSS_DAYS
from orrery.core.errors import ConvergenceFailure, UnknownBody
from orrery.core.frames import Vector3, norm, to_heliocentric
from orrery.core.timeconv import centuries_since_j2000_ms, now_ms
from orrery.data.planets import PLANETS, Body
from orrery.physics.elements import OrbitalElementSet, OsculatingElements, osculate
from orrery.physics.kepler import solve_keplers_equation

logger = logging.getLogger(__name__)

OrbitPath = Tuple[Vector3, ...]


@dataclass(frozen=True)
class EphemerisEngine:
    """
    Keplerian two-body ephemeris over a fixed element table.

    elements: Body -> OrbitalElementSet (owned by the caller, never mutated)
    cfg: AU scale and Kepler solver settings
    """
    elements: Mapping[Body, OrbitalElementSet] = field(default_factory=lambda: PLANETS)
    cfg: EphemerisCfg = EPHEMERIS_CFG

    @property
    def bodies(self) -> List[Body]:
        return list(self.elements.keys())

    def element_set(self, body: Body | str) -> OrbitalElementSet:
        key = Body.parse(body) if isinstance(body, str) else body
        try:
            return self.elements[key]
        except KeyError:
            raise UnknownBody(body) from None

    def elements_at(self, body: Body | str, simulation_time_ms: float) -> OsculatingElements:
        T = centuries_since_j2000_ms(simulation_time_ms)
        return osculate(self.element_set(body), T, au_scale=self.cfg.au_scene_units, body=body)

    def _solve(self, M_rad: float, e: float, body: Body | str) -> float:
        try:
            return solve_keplers_equation(
                M_rad, e, tol=self.cfg.kepler_tol, max_iter=self.cfg.kepler_max_iter
            )
        except ConvergenceFailure as exc:
            logger.warning(
                "Kepler solver did not converge for %s (M=%.6f, e=%.6f, residual=%.3e); using last estimate",
                body, M_rad, e, exc.residual,
            )
            return exc.last_estimate

    def _place(self, osc: OsculatingElements, M_rad: float, body: Body | str) -> Vector3:
        E = self._solve(M_rad, osc.e, body)
        return to_heliocentric(osc.a, osc.e, osc.inc_rad, osc.argp_rad, osc.long_node_rad, E)

    def position_of(self, body: Body | str, simulation_time_ms: float) -> Vector3:
        """
        Heliocentric position of body at simulation_time_ms (ms since Unix
        epoch), in scene units.
        """
        osc = self.elements_at(body, simulation_time_ms)
        return self._place(osc, osc.mean_anomaly_rad, body)

    def positions_at(self, simulation_time_ms: float) -> Dict[Body, Vector3]:
        return {b: self.position_of(b, simulation_time_ms) for b in self.elements}

    def radius_of(self, body: Body | str, simulation_time_ms: float) -> float:
        return norm(self.position_of(body, simulation_time_ms))

    def orbit_path_of(
        self,
        body: Body | str,
        sample_count: Optional[int] = None,
        at_time_ms: Optional[float] = None,
        closed: bool = False,
    ) -> OrbitPath:
        """
        Sample one revolution at M = 2π·i/N for i in 0..N-1 using elements
        frozen at at_time_ms (wall clock when omitted).

        The default path is open: the last sample sits at 2π·(N-1)/N.
        closed=True appends the first point again as the M = 2π sample.
        """
        n = self.cfg.orbit_path_samples if sample_count is None else sample_count
        if n < 1:
            raise ValueError(f"sample_count must be >= 1. Got: {n}")
        if at_time_ms is None:
            at_time_ms = now_ms()

        osc = self.elements_at(body, at_time_ms)
        points: List[Vector3] = []
        for i in range(n):
            M = 2.0 * math.pi * i / n
            points.append(self._place(osc, M, body))

        if closed:
            points.append(points[0])

        logger.debug("Built orbit path for %s with %d points (T=%.6f)", body, len(points), osc.T)
        return tuple(points)

    def orbital_period_days(self, body: Body | str) -> float:
        """Sidereal period from Kepler's third law at the J2000 semi-major axis."""
        a_au = self.element_set(body).a0_au
        return YEAR_GAUSS_DAYS * a_au ** 1.5
