from __future__ import annotations

import math
from pathlib import Path
from typing import List, Tuple

import plotly.graph_objects as go

from orrery.data.planets import SUN_COLOR
from orrery.simulation.engine import SimulationLog
from orrery.simulation.scene import SolarSystemScene

# Marker radius of the Sun in scene units; the true radius is far below a pixel
SUN_MARKER_SCENE_UNITS: float = 40.0


def _sun_mesh(radius: float = SUN_MARKER_SCENE_UNITS, n_lat: int = 16, n_lon: int = 32):
    # Create a sphere mesh (parametric)
    lats = [(-math.pi / 2) + i * (math.pi / (n_lat - 1)) for i in range(n_lat)]
    lons = [(-math.pi) + j * (2 * math.pi / (n_lon - 1)) for j in range(n_lon)]

    x = []
    y = []
    z = []
    for lat in lats:
        x.append([radius * math.cos(lat) * math.cos(lon) for lon in lons])
        y.append([radius * math.sin(lat) for _lon in lons])
        z.append([radius * math.cos(lat) * math.sin(lon) for lon in lons])
    return x, y, z


def _xyz(points) -> Tuple[List[float], List[float], List[float]]:
    return [p[0] for p in points], [p[1] for p in points], [p[2] for p in points]


def _sun_trace() -> go.Surface:
    sx, sy, sz = _sun_mesh()
    return go.Surface(
        x=sx, y=sy, z=sz,
        showscale=False,
        colorscale=[[0.0, SUN_COLOR], [1.0, SUN_COLOR]],
        name="Sun",
    )


def _layout_scene() -> dict:
    return dict(
        xaxis_title="x (scene units)",
        yaxis_title="y (ecliptic north)",
        zaxis_title="z (scene units)",
        aspectmode="data",
    )


def render_static_scene(
    scene: SolarSystemScene,
    log: SimulationLog,
    out_html: str = "out/orrery_scene.html",
    show_sun: bool = True,
) -> str:
    """
    Renders a static 3D scene:
      - Sun
      - Orbit path of each body
      - Last recorded position marker for each body
    """
    fig = go.Figure()

    if show_sun:
        fig.add_trace(_sun_trace())

    for body in scene.body_list():
        color = scene.engine.element_set(body).color
        xs, ys, zs = _xyz(scene.orbit_path(body))

        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            name=f"{body} orbit",
            line=dict(color=color, width=2),
            opacity=0.5,
        ))

        samples = log.body_positions.get(str(body))
        if samples:
            _t, r = samples[-1]
            fig.add_trace(go.Scatter3d(
                x=[r[0]], y=[r[1]], z=[r[2]],
                mode="markers",
                name=f"{body} now",
                marker=dict(size=5, color=color),
            ))

    fig.update_layout(
        title=f"{scene.name} (static)",
        scene=_layout_scene(),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html


def render_animated_scene(
    scene: SolarSystemScene,
    log: SimulationLog,
    out_html: str = "out/orrery_animated.html",
    show_sun: bool = True,
) -> str:
    """
    Renders an animated 3D scene:
      - Sun and orbit paths (static)
      - One marker per body, moved along its recorded positions
    """
    bodies = [b for b in scene.body_list() if log.body_positions.get(str(b))]
    if not bodies:
        raise ValueError("No body positions found in log.")

    ragged = log.ragged_bodies()
    if ragged:
        raise ValueError(f"{', '.join(ragged)} samples length mismatch.")
    times = [t for (t, _r) in log.body_positions[str(bodies[0])]]
    n_frames = len(times)

    fig = go.Figure()
    if show_sun:
        fig.add_trace(_sun_trace())

    for b in bodies:
        color = scene.engine.element_set(b).color
        xs, ys, zs = _xyz(scene.orbit_path(b))
        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs, mode="lines", name=f"{b} orbit",
            line=dict(color=color, width=2), opacity=0.5,
        ))

    # Markers come last so frames can address them by index
    first_marker = len(fig.data)
    for b in bodies:
        color = scene.engine.element_set(b).color
        _t, r = log.body_positions[str(b)][0]
        fig.add_trace(go.Scatter3d(
            x=[r[0]], y=[r[1]], z=[r[2]], mode="markers", name=str(b),
            marker=dict(size=5, color=color),
        ))
    marker_traces = list(range(first_marker, first_marker + len(bodies)))

    frames = []
    for i in range(n_frames):
        data = []
        for b in bodies:
            _t, r = log.body_positions[str(b)][i]
            data.append(go.Scatter3d(x=[r[0]], y=[r[1]], z=[r[2]], mode="markers"))
        frames.append(go.Frame(name=str(i), data=data, traces=marker_traces))

    fig.frames = frames

    t0 = times[0]
    fig.update_layout(
        title=f"{scene.name} (animated)",
        scene=_layout_scene(),
        margin=dict(l=0, r=0, t=40, b=0),
        updatemenus=[dict(
            type="buttons",
            showactive=True,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": 50, "redraw": True}, "fromcurrent": True}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False}, "mode": "immediate"}]),
            ],
        )],
        sliders=[dict(
            steps=[dict(method="animate", args=[[str(i)], {"mode": "immediate", "frame": {"duration": 0, "redraw": True}}],
                        label=f"{(times[i] - t0) / 86_400_000.0:.1f}d") for i in range(0, n_frames, max(1, n_frames // 20))],
            active=0
        )]
    )

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
