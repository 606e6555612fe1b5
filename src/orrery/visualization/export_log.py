from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from orrery.simulation.engine import SimulationLog
from orrery.simulation.scene import SolarSystemScene


def export_log_to_json(log: SimulationLog, out_path: str = "out/orrery_log.json") -> str:
    """
    Export minimal playback data:
      {
        "body_positions": {
          "earth": [{"t_ms":..., "r":[x,y,z]}, ...],
          ...
        }
      }
    """
    data: Dict[str, Any] = {"body_positions": {}}

    for body, samples in log.body_positions.items():
        data["body_positions"][body] = [{"t_ms": t, "r": [r[0], r[1], r[2]]} for (t, r) in samples]

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path


def export_playback_bundle(
    scene: SolarSystemScene,
    log: SimulationLog,
    out_path: str = "out/orrery_bundle.json",
) -> str:
    """
    Export a bundle for an external viewer:
      - times_ms: global time vector
      - body_positions: positions over time (scene units)
      - orbit_paths: static polylines per body
      - bodies: per-body metadata for drawing

    JSON shape:
    {
      "scene": "...",
      "times_ms": [t0, t1, ...],
      "body_positions": { "earth": [[x,y,z], ...], ... },
      "orbit_paths": { "earth": [[x,y,z], ...], ... },
      "bodies": { "earth": {"color": "#...", "radius_km": ..., "rotation_period_hours": ...,
                            "axial_tilt_deg": ..., "axial_dir_deg": ...,
                            "spin_phase_hours": ...}, ... }
    }
    """
    body_names = sorted(log.body_positions.keys())
    if not body_names:
        raise ValueError("No body positions found in log.")

    ragged = log.ragged_bodies()
    if ragged:
        raise ValueError(f"{', '.join(ragged)} samples length mismatch.")

    times_ms: List[float] = [t for (t, _r) in log.body_positions[body_names[0]]]

    data: Dict[str, Any] = {
        "scene": scene.name,
        "times_ms": times_ms,
        "body_positions": {},
        "orbit_paths": {},
        "bodies": {},
    }

    for name in body_names:
        samples = log.body_positions[name]
        data["body_positions"][name] = [[r[0], r[1], r[2]] for (_t, r) in samples]

    if log.body_spins:
        data["body_spins_rad"] = {name: [a for (_t, a) in samples] for name, samples in log.body_spins.items()}

    for body in scene.body_list():
        es = scene.engine.element_set(body)
        data["orbit_paths"][str(body)] = [[p[0], p[1], p[2]] for p in scene.orbit_path(body)]
        data["bodies"][str(body)] = {
            "color": es.color,
            "radius_km": es.radius_km,
            "rotation_period_hours": es.rotation_period_hours,
            "axial_tilt_deg": es.axial_tilt_deg,
            "axial_dir_deg": es.axial_dir_deg,
            "spin_phase_hours": es.spin_phase_hours,
        }

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
