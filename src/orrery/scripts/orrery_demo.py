"""
Run the orrery offline: advance an accelerated clock frame by frame, record
every planet's position, and write plotly scenes plus a JSON bundle.
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from orrery.core.config import CLOCK_CFG, EPHEMERIS_CFG
from orrery.core.timeconv import datetime_to_epoch_ms, now_ms
from orrery.physics.ephemeris import EphemerisEngine
from orrery.simulation.clock import SimulationClock
from orrery.simulation.engine import FrameLoop
from orrery.simulation.scene import SolarSystemScene
from orrery.simulation.systems.spin_recorder import SpinRecorderSystem
from orrery.simulation.systems.state_recorder import StateRecorderSystem
from orrery.visualization.export_log import export_playback_bundle
from orrery.visualization.plotly_viewer import render_animated_scene, render_static_scene

logger = logging.getLogger(__name__)


def parse_start(text: str) -> float:
    """ISO-8601 start time to epoch ms. A trailing Z means UTC."""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime_to_epoch_ms(datetime.fromisoformat(text))

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--frames", type=int, default=600, help="Number of frames to simulate.")
    p.add_argument("--dt-ms", type=float, default=CLOCK_CFG.frame_dt_ms, help="Real milliseconds per frame.")
    p.add_argument("--acceleration", type=float, default=CLOCK_CFG.acceleration_factor,
                   help="Simulation milliseconds per real millisecond.")
    p.add_argument("--samples", type=int, default=EPHEMERIS_CFG.orbit_path_samples,
                   help="Points per orbit path.")
    p.add_argument("--start", type=str, default=None,
                   help="Start time as ISO-8601 (UTC if no offset). Defaults to now.")
    p.add_argument("--out-dir", type=Path, default=Path("out"))
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    start_ms = parse_start(args.start) if args.start else now_ms()

    engine = EphemerisEngine()
    scene = SolarSystemScene.build("Solar System", engine=engine, path_samples=args.samples, at_time_ms=start_ms)
    clock = SimulationClock(simulation_time_ms=start_ms, acceleration_factor=args.acceleration)
    loop = FrameLoop(frame_dt_ms=args.dt_ms, clock=clock, systems=[StateRecorderSystem(), SpinRecorderSystem()])
    sim_log = loop.run(scene, n_frames=args.frames)

    out_dir: Path = args.out_dir
    written = [render_static_scene(scene, sim_log, out_html=str(out_dir / "orrery_scene.html"))]
    if args.frames > 0:
        written.append(render_animated_scene(scene, sim_log, out_html=str(out_dir / "orrery_animated.html")))
        written.append(export_playback_bundle(scene, sim_log, out_path=str(out_dir / "orrery_bundle.json")))

    for path in written:
        logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
