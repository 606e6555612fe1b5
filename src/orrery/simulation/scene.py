from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from orrery.core.errors import UnknownBody
from orrery.core.timeconv import now_ms
from orrery.data.planets import Body
from orrery.physics.ephemeris import EphemerisEngine, OrbitPath

logger = logging.getLogger(__name__)


@dataclass
class SolarSystemScene:
    """
    Composition root: which bodies are shown and their static orbit paths.
    Keep this pure: just data + lookup, no stepping logic.
    """
    name: str
    engine: EphemerisEngine = field(default_factory=EphemerisEngine)
    orbit_paths: Dict[Body, OrbitPath] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        name: str,
        engine: Optional[EphemerisEngine] = None,
        bodies: Optional[Iterable[Body | str]] = None,
        path_samples: Optional[int] = None,
        at_time_ms: Optional[float] = None,
    ) -> "SolarSystemScene":
        """
        Create a scene and generate every orbit path once, from elements
        evaluated at at_time_ms (wall clock when omitted).
        """
        scene = cls(name=name, engine=engine or EphemerisEngine())
        if at_time_ms is None:
            at_time_ms = now_ms()
        for body in (scene.engine.bodies if bodies is None else bodies):
            scene.add_body(body, path_samples=path_samples, at_time_ms=at_time_ms)
        logger.info("Scene %r built with %d bodies", name, len(scene.orbit_paths))
        return scene

    def add_body(
        self,
        body: Body | str,
        path_samples: Optional[int] = None,
        at_time_ms: Optional[float] = None,
    ) -> None:
        key = Body.parse(body) if isinstance(body, str) else body
        if key in self.orbit_paths:
            raise ValueError(f"Duplicate body: {key}")
        if key not in self.engine.elements:
            raise UnknownBody(body)
        self.orbit_paths[key] = self.engine.orbit_path_of(key, path_samples, at_time_ms=at_time_ms)

    def body_list(self) -> List[Body]:
        return list(self.orbit_paths.keys())

    def orbit_path(self, body: Body | str) -> OrbitPath:
        key = Body.parse(body) if isinstance(body, str) else body
        try:
            return self.orbit_paths[key]
        except KeyError:
            raise UnknownBody(body) from None
