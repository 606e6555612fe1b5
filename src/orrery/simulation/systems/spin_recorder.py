from __future__ import annotations

from dataclasses import dataclass

from orrery.physics.rotation import spin_angle_rad
from orrery.simulation.scene import SolarSystemScene
from orrery.simulation.engine import SimulationLog


@dataclass
class SpinRecorderSystem:
    name: str = "spin_recorder"

    def on_step(self, t_ms: float, scene: SolarSystemScene, log: SimulationLog) -> None:
        for body in scene.body_list():
            angle = spin_angle_rad(scene.engine.element_set(body), t_ms)
            log.record_spin(str(body), t_ms, angle)
