from __future__ import annotations

import logging
from dataclasses import dataclass, field
from collections import Counter
from typing import Any, Dict, List, Protocol, Tuple

from orrery.core.frames import Vector3
from orrery.simulation.clock import SimulationClock
from orrery.simulation.scene import SolarSystemScene

logger = logging.getLogger(__name__)


class System(Protocol):
    """
    Plugin interface for per-frame systems.
    Each system runs once per frame, after the clock has advanced.
    """
    name: str

    def on_step(self, t_ms: float, scene: SolarSystemScene, log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    Stores outputs from a frame loop run.
    Keep it simple and serializable.
    """
    # Positions: body name -> list of (t_ms, position in scene units)
    body_positions: Dict[str, List[Tuple[float, Vector3]]] = field(default_factory=dict)

    # Spin: body name -> list of (t_ms, spin angle in radians)
    body_spins: Dict[str, List[Tuple[float, float]]] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list)

    def record_position(self, body: str, t_ms: float, r: Vector3) -> None:
        self.body_positions.setdefault(body, []).append((t_ms, r))

    def record_spin(self, body: str, t_ms: float, angle_rad: float) -> None:
        self.body_spins.setdefault(body, []).append((t_ms, angle_rad))

    def record_event(self, t_ms: float, kind: str, **details: Any) -> None:
        self.events.append({"t_ms": t_ms, "type": kind, **details})

    def frame_count(self) -> int:
        """
        Samples expected per body: the frame count of the run that produced the
        log, else the most common sample count (ties go to the shorter one).
        """
        for event in self.events:
            if event.get("type") == "start" and "frames" in event:
                return int(event["frames"])
        counts = Counter(len(samples) for samples in self.body_positions.values())
        if not counts:
            return 0
        return min(counts, key=lambda n: (-counts[n], n))

    def ragged_bodies(self) -> List[str]:
        """Bodies whose position count differs from frame_count(), sorted."""
        n = self.frame_count()
        return sorted(b for b, samples in self.body_positions.items() if len(samples) != n)


@dataclass
class FrameLoop:
    """
    Offline stand-in for the render loop: a fixed real-time step per frame.
    Deterministic replay: given same clock start + dt + frame count => same output.
    """
    frame_dt_ms: float
    clock: SimulationClock
    systems: List[System] = field(default_factory=list)

    def step(self, scene: SolarSystemScene, log: SimulationLog) -> float:
        """Advance the clock by one frame and run every system."""
        t = self.clock.advance(self.frame_dt_ms)
        for sys in self.systems:
            sys.on_step(t, scene, log)
        return t

    def run(self, scene: SolarSystemScene, n_frames: int) -> SimulationLog:
        if self.frame_dt_ms <= 0:
            raise ValueError("frame_dt_ms must be positive.")
        if n_frames < 0:
            raise ValueError("n_frames must be >= 0.")

        log = SimulationLog()
        t_start = self.clock.current_time()
        logger.info(
            "Running %d frames of %.3f ms at %gx from t=%.0f ms",
            n_frames, self.frame_dt_ms, self.clock.acceleration_factor, t_start,
        )
        log.record_event(t_start, "start", scene=scene.name, frames=n_frames)

        for _ in range(n_frames):
            self.step(scene, log)

        t_end = self.clock.current_time()
        log.record_event(t_end, "end", simulated_ms=t_end - t_start)
        logger.info("Frame loop finished at t=%.0f ms (%.3f days simulated)", t_end, (t_end - t_start) / 86_400_000.0)
        return log
