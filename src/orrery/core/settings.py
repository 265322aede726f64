"""
Runtime settings for the solver and for playback.

Defaults: 1e-4 rad Kepler tolerance, unnormalized mean anomaly, one
simulated day every half second of wall time, positions drawn in AU.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from orrery.core.constants import KEPLER_MAX_ITER, KEPLER_TOL_DEG

logger = logging.getLogger(__name__)

ENV_PREFIX = "ORRERY_"


@dataclass(frozen=True)
class SolverSettings:
    tolerance_deg: float = KEPLER_TOL_DEG
    max_iter: int = KEPLER_MAX_ITER
    # Reduce M into [0, 360) before iterating
    normalize_mean_anomaly: bool = False

    def __post_init__(self):
        if self.tolerance_deg <= 0:
            raise ValueError(f"tolerance_deg must be positive. Got: {self.tolerance_deg}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1. Got: {self.max_iter}")


@dataclass(frozen=True)
class PlaybackSettings:
    tick_interval_s: float = 0.5
    step_days: float = 1.0
    # Display units per AU, applied only when drawing
    au_to_display: float = 1.0

    def __post_init__(self):
        if self.tick_interval_s < 0:
            raise ValueError(f"tick_interval_s must be non-negative. Got: {self.tick_interval_s}")
        if self.step_days <= 0:
            raise ValueError(f"step_days must be positive. Got: {self.step_days}")
        if self.au_to_display <= 0:
            raise ValueError(f"au_to_display must be positive. Got: {self.au_to_display}")


DEFAULT_SOLVER_SETTINGS = SolverSettings()
DEFAULT_PLAYBACK_SETTINGS = PlaybackSettings()


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Cannot interpret {raw!r} as a boolean.")


def _coerce(cls, values: Mapping[str, Any]):
    known = {f.name: f for f in fields(cls)}
    unknown = set(values) - set(known)
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} keys: {sorted(unknown)}")

    kwargs: Dict[str, Any] = {}
    for key, raw in values.items():
        default = getattr(cls, key)
        if isinstance(default, bool):
            kwargs[key] = _parse_bool(raw) if isinstance(raw, str) else bool(raw)
        elif isinstance(default, int):
            kwargs[key] = int(raw)
        else:
            kwargs[key] = float(raw)
    return cls(**kwargs)


def load_settings(path: str) -> Tuple[SolverSettings, PlaybackSettings]:
    """
    Load settings from a JSON file:
      {"solver": {"tolerance_deg": ..., ...}, "playback": {"step_days": ..., ...}}
    Missing sections or keys fall back to the defaults.
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("Settings file must contain a JSON object.")

    solver = _coerce(SolverSettings, data.get("solver", {}))
    playback = _coerce(PlaybackSettings, data.get("playback", {}))
    logger.info("Loaded settings from %s", path)
    return solver, playback


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> Tuple[SolverSettings, PlaybackSettings]:
    """
    Build settings from ORRERY_* variables, e.g. ORRERY_STEP_DAYS=2,
    ORRERY_NORMALIZE_MEAN_ANOMALY=true.
    """
    env = os.environ if environ is None else environ

    def pick(cls) -> Dict[str, str]:
        out = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key in env:
                out[f.name] = env[key]
        return out

    return _coerce(SolverSettings, pick(SolverSettings)), _coerce(PlaybackSettings, pick(PlaybackSettings))
