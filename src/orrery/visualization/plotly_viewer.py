from __future__ import annotations

from pathlib import Path
from typing import List

import plotly.graph_objects as go

from orrery.core.settings import DEFAULT_PLAYBACK_SETTINGS, PlaybackSettings
from orrery.simulation.engine import SimulationLog


def _axis_title(axis: str, playback: PlaybackSettings) -> str:
    if playback.au_to_display == 1.0:
        return f"{axis} (AU)"
    return f"{axis} (AU x {playback.au_to_display:g})"


def _sun_trace(size: int = 12) -> go.Scatter3d:
    return go.Scatter3d(
        x=[0.0], y=[0.0], z=[0.0],
        mode="markers",
        name="Sun",
        marker=dict(size=size, color="gold"),
    )


def build_static_figure(
    log: SimulationLog,
    playback: PlaybackSettings = DEFAULT_PLAYBACK_SETTINGS,
    show_sun: bool = True,
) -> go.Figure:
    """
    Static heliocentric scene:
      - Sun at the origin
      - Orbit track for each body
      - Last position marker for each body
    Every coordinate is AU * playback.au_to_display.
    """
    k = playback.au_to_display
    fig = go.Figure()

    if show_sun:
        fig.add_trace(_sun_trace())

    for body_id, samples in log.body_positions_au.items():
        xs = [r[0] * k for (_t, r) in samples]
        ys = [r[1] * k for (_t, r) in samples]
        zs = [r[2] * k for (_t, r) in samples]

        fig.add_trace(go.Scatter3d(
            x=xs, y=ys, z=zs,
            mode="lines",
            name=f"{body_id} track",
        ))

        fig.add_trace(go.Scatter3d(
            x=[xs[-1]], y=[ys[-1]], z=[zs[-1]],
            mode="markers",
            name=f"{body_id} now",
            marker=dict(size=5),
        ))

    fig.update_layout(
        title="Orrery — Heliocentric Positions (Ecliptic J2000)",
        scene=dict(
            xaxis_title=_axis_title("X", playback),
            yaxis_title=_axis_title("Y", playback),
            zaxis_title=_axis_title("Z", playback),
            aspectmode="data",
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )
    return fig


def render_static_scene(
    log: SimulationLog,
    out_html: str = "out/orrery_scene.html",
    playback: PlaybackSettings = DEFAULT_PLAYBACK_SETTINGS,
    show_sun: bool = True,
) -> str:
    fig = build_static_figure(log, playback=playback, show_sun=show_sun)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html


def build_animated_figure(
    log: SimulationLog,
    playback: PlaybackSettings = DEFAULT_PLAYBACK_SETTINGS,
) -> go.Figure:
    """
    Animated scene: Sun, full tracks, and one moving marker per body.
    Frame duration follows playback.tick_interval_s.
    """
    body_ids = sorted(log.body_positions_au.keys())
    if not body_ids:
        raise ValueError("No body positions found in log.")

    k = playback.au_to_display
    epochs = [t for (t, _r) in log.body_positions_au[body_ids[0]]]
    fig = go.Figure()
    fig.add_trace(_sun_trace())

    for body_id in body_ids:
        samples = log.body_positions_au[body_id]
        if len(samples) != len(epochs):
            raise ValueError(f"{body_id} samples length mismatch.")
        fig.add_trace(go.Scatter3d(
            x=[r[0] * k for (_t, r) in samples],
            y=[r[1] * k for (_t, r) in samples],
            z=[r[2] * k for (_t, r) in samples],
            mode="lines",
            name=f"{body_id} track",
        ))

    # Markers come after Sun + tracks
    first_marker = 1 + len(body_ids)
    for body_id in body_ids:
        _t, r = log.body_positions_au[body_id][0]
        fig.add_trace(go.Scatter3d(
            x=[r[0] * k], y=[r[1] * k], z=[r[2] * k],
            mode="markers",
            name=body_id,
            marker=dict(size=6),
        ))
    marker_indices: List[int] = list(range(first_marker, first_marker + len(body_ids)))

    frames = []
    for i in range(len(epochs)):
        data = []
        for body_id in body_ids:
            _t, r = log.body_positions_au[body_id][i]
            data.append(go.Scatter3d(x=[r[0] * k], y=[r[1] * k], z=[r[2] * k], mode="markers", marker=dict(size=6)))
        frames.append(go.Frame(name=str(i), data=data, traces=marker_indices))
    fig.frames = frames

    frame_ms = int(playback.tick_interval_s * 1000)
    fig.update_layout(
        title="Orrery — Animated Playback",
        scene=dict(
            xaxis_title=_axis_title("X", playback),
            yaxis_title=_axis_title("Y", playback),
            zaxis_title=_axis_title("Z", playback),
            aspectmode="data",
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        updatemenus=[dict(
            type="buttons",
            showactive=True,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": frame_ms, "redraw": True}, "fromcurrent": True}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False}, "mode": "immediate"}]),
            ],
        )],
        sliders=[dict(
            steps=[dict(method="animate", args=[[str(i)], {"mode": "immediate", "frame": {"duration": 0, "redraw": True}}],
                        label=epochs[i].date().isoformat()) for i in range(0, len(epochs), max(1, len(epochs)//20))],
            active=0
        )]
    )
    return fig


def render_animated_scene(
    log: SimulationLog,
    out_html: str = "out/orrery_animated.html",
    playback: PlaybackSettings = DEFAULT_PLAYBACK_SETTINGS,
) -> str:
    fig = build_animated_figure(log, playback=playback)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
