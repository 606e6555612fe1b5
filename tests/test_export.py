import json

import pytest

from orrery.data.planets import Body
from orrery.simulation.clock import SimulationClock
from orrery.simulation.engine import FrameLoop, SimulationLog
from orrery.simulation.scene import SolarSystemScene
from orrery.simulation.systems.spin_recorder import SpinRecorderSystem
from orrery.simulation.systems.state_recorder import StateRecorderSystem
from orrery.visualization.export_log import export_log_to_json, export_playback_bundle
from orrery.visualization.plotly_viewer import render_animated_scene, render_static_scene

J2000_MS = 946_728_000_000.0


@pytest.fixture
def scene():
    return SolarSystemScene.build("Export", bodies=[Body.VENUS, Body.EARTH], path_samples=20, at_time_ms=J2000_MS)


@pytest.fixture
def log(scene):
    clock = SimulationClock(simulation_time_ms=J2000_MS)
    loop = FrameLoop(frame_dt_ms=16.0, clock=clock, systems=[StateRecorderSystem(), SpinRecorderSystem()])
    return loop.run(scene, n_frames=4)


def test_export_log_to_json(log, tmp_path):
    out = export_log_to_json(log, out_path=str(tmp_path / "nested" / "log.json"))
    data = json.loads((tmp_path / "nested" / "log.json").read_text(encoding="utf-8"))

    assert out.endswith("log.json")
    assert set(data["body_positions"]) == {"venus", "earth"}
    first = data["body_positions"]["earth"][0]
    assert first["t_ms"] == J2000_MS + 160_000.0
    assert len(first["r"]) == 3


def test_export_playback_bundle(scene, log, tmp_path):
    path = tmp_path / "bundle.json"
    export_playback_bundle(scene, log, out_path=str(path))
    data = json.loads(path.read_text(encoding="utf-8"))

    assert data["scene"] == "Export"
    assert len(data["times_ms"]) == 4
    assert len(data["body_positions"]["venus"]) == 4
    assert len(data["orbit_paths"]["earth"]) == 20
    assert data["bodies"]["earth"]["axial_tilt_deg"] == 23.44
    assert data["bodies"]["earth"]["spin_phase_hours"] == 0.0
    assert len(data["body_spins_rad"]["venus"]) == 4


def test_bundle_requires_positions(scene, tmp_path):
    with pytest.raises(ValueError, match="No body positions found in log"):
        export_playback_bundle(scene, SimulationLog(), out_path=str(tmp_path / "b.json"))


def test_bundle_rejects_ragged_log(scene, log, tmp_path):
    log.record_position("earth", J2000_MS, (0.0, 0.0, 0.0))
    with pytest.raises(ValueError, match="earth samples length mismatch"):
        export_playback_bundle(scene, log, out_path=str(tmp_path / "b.json"))


def test_render_static_scene(scene, log, tmp_path):
    out = render_static_scene(scene, log, out_html=str(tmp_path / "scene.html"))
    assert (tmp_path / "scene.html").exists()
    assert out.endswith("scene.html")


def test_render_static_scene_without_positions(scene, tmp_path):
    render_static_scene(scene, SimulationLog(), out_html=str(tmp_path / "paths.html"), show_sun=False)
    assert (tmp_path / "paths.html").exists()


def test_render_animated_scene(scene, log, tmp_path):
    render_animated_scene(scene, log, out_html=str(tmp_path / "anim.html"))
    assert (tmp_path / "anim.html").exists()


def test_render_animated_scene_requires_positions(scene, tmp_path):
    with pytest.raises(ValueError, match="No body positions found in log"):
        render_animated_scene(scene, SimulationLog(), out_html=str(tmp_path / "anim.html"))


def test_bundle_names_every_ragged_body(scene, log, tmp_path):
    log.record_position("earth", J2000_MS, (0.0, 0.0, 0.0))
    log.record_position("venus", J2000_MS, (0.0, 0.0, 0.0))
    with pytest.raises(ValueError, match="earth, venus samples length mismatch"):
        export_playback_bundle(scene, log, out_path=str(tmp_path / "b.json"))


def test_render_animated_scene_names_ragged_body(scene, log, tmp_path):
    log.record_position("earth", J2000_MS, (0.0, 0.0, 0.0))
    with pytest.raises(ValueError, match="^earth samples length mismatch"):
        render_animated_scene(scene, log, out_html=str(tmp_path / "anim.html"))
