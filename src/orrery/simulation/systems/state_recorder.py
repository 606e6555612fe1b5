from __future__ import annotations

from dataclasses import dataclass

from orrery.simulation.scene import SolarSystemScene
from orrery.simulation.engine import SimulationLog


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"

    def on_step(self, t_ms: float, scene: SolarSystemScene, log: SimulationLog) -> None:
        for body in scene.body_list():
            r = scene.engine.position_of(body, t_ms)
            log.record_position(str(body), t_ms, r)
