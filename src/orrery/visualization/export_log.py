from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from orrery.core.julian import julian_date
from orrery.core.settings import DEFAULT_PLAYBACK_SETTINGS, PlaybackSettings
from orrery.simulation.engine import SimulationLog


def export_log_to_json(log: SimulationLog, out_path: str = "out/simlog.json") -> str:
    """
    Export minimal playback data:
      {
        "body_positions_au": {
          "Earth": [{"epoch": "2000-01-01T12:00:00+00:00", "jd": 2451545.0, "r": [x,y,z]}, ...],
          ...
        }
      }
    """
    data: Dict[str, Any] = {"body_positions_au": {}}

    for body_id, samples in log.body_positions_au.items():
        data["body_positions_au"][body_id] = [
            {"epoch": t.isoformat(), "jd": julian_date(t), "r": [r[0], r[1], r[2]]} for (t, r) in samples
        ]

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path


def export_playback_bundle(
    log: SimulationLog,
    out_path: str = "out/playback_bundle.json",
    playback: PlaybackSettings = DEFAULT_PLAYBACK_SETTINGS,
) -> str:
    """
    Export a bundle for an external renderer:
      - epochs: global time vector (ISO UTC and Julian Date)
      - body_positions_au: dense arrays aligned to the epochs
      - au_to_display: scale the renderer must apply to AU positions
      - events: apsis passages and other recorded events

    JSON shape:
    {
      "epochs_utc": ["2000-01-01T12:00:00+00:00", ...],
      "julian_dates": [2451545.0, ...],
      "au_to_display": 1.0,
      "tick_interval_s": 0.5,
      "body_positions_au": { "Earth": [[x,y,z], ...], ... },
      "events": [{"kind": "perihelion", "epoch": "...", "body": "Earth", ...}, ...]
    }
    """
    body_ids = sorted(log.body_positions_au.keys())
    if not body_ids:
        raise ValueError("No body positions found in log.")

    # Reference epochs (assume uniform sampling across bodies)
    ref_samples = log.body_positions_au[body_ids[0]]
    epochs = [t for (t, _r) in ref_samples]

    data: Dict[str, Any] = {
        "epochs_utc": [t.isoformat() for t in epochs],
        "julian_dates": [julian_date(t) for t in epochs],
        "au_to_display": playback.au_to_display,
        "tick_interval_s": playback.tick_interval_s,
        "body_positions_au": {},
        "events": [],
    }

    for body_id in body_ids:
        samples = log.body_positions_au[body_id]
        if len(samples) != len(epochs):
            raise ValueError(f"{body_id} samples length mismatch.")
        data["body_positions_au"][body_id] = [[r[0], r[1], r[2]] for (_t, r) in samples]

    events: List[Dict[str, Any]] = []
    for event in log.events:
        item = dict(event)
        item["epoch"] = item["epoch"].isoformat()
        events.append(item)
    data["events"] = events

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
