"""Simulation time and frame timing."""
from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass, field
from typing import Optional

from orrery.core.config import CLOCK_CFG, ClockCfg
from orrery.core.timeconv import now_ms


@dataclass
class SimulationClock:
    """
    Accelerated simulation time in milliseconds since the Unix epoch.

    Advanced once per frame by the render loop; never goes backwards.
    Reads and writes are serialized so another thread can take snapshots
    while the render loop advances the clock.
    """

    simulation_time_ms: float
    acceleration_factor: float = CLOCK_CFG.acceleration_factor
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not math.isfinite(self.simulation_time_ms):
            raise ValueError(f"Simulation time must be finite. Got: {self.simulation_time_ms}")
        if not (math.isfinite(self.acceleration_factor) and self.acceleration_factor >= 0.0):
            raise ValueError(f"Acceleration factor must be finite and non-negative. Got: {self.acceleration_factor}")

    @classmethod
    def starting_now(cls, acceleration_factor: Optional[float] = None) -> "SimulationClock":
        if acceleration_factor is None:
            acceleration_factor = CLOCK_CFG.acceleration_factor
        return cls(simulation_time_ms=now_ms(), acceleration_factor=acceleration_factor)

    @classmethod
    def from_config(cls, cfg: ClockCfg = CLOCK_CFG, start_ms: Optional[float] = None) -> "SimulationClock":
        start = now_ms() if start_ms is None else start_ms
        return cls(simulation_time_ms=start, acceleration_factor=cfg.acceleration_factor)

    def advance(self, real_delta_ms: float) -> float:
        """
        simulation_time_ms += real_delta_ms * acceleration_factor.
        Negative deltas count as zero.
        """
        delta = max(0.0, real_delta_ms)
        with self._lock:
            self.simulation_time_ms += delta * self.acceleration_factor
            return self.simulation_time_ms

    def current_time(self) -> float:
        with self._lock:
            return self.simulation_time_ms


@dataclass
class FrameTimer:
    """High resolution timer based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick_ms(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt * 1000.0


__all__ = ["FrameTimer", "SimulationClock"]
