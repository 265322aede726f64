from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Mapping, Protocol, Any, Tuple

from orrery.core.frames import Vector3
from orrery.core.julian import as_utc
from orrery.core.settings import DEFAULT_SOLVER_SETTINGS, SolverSettings
from orrery.physics.elements import OrbitalElements
from orrery.physics.orbit import position
from orrery.simulation.scenario import Scenario

logger = logging.getLogger(__name__)


def tick(
    epoch: datetime,
    bodies: Mapping[str, OrbitalElements],
    settings: SolverSettings = DEFAULT_SOLVER_SETTINGS,
) -> Dict[str, Vector3]:
    """
    One simulation step: heliocentric position (AU) of every body at epoch.
    Holds no state between calls; the caller owns the clock.
    """
    return {body_id: position(epoch, elements, settings) for body_id, elements in bodies.items()}


class System(Protocol):
    """
    Plugin interface for simulation systems.
    Each system runs per tick and can write to the log.
    on_start is optional; Engine.run calls it once before the first tick.
    """
    name: str

    def on_start(self, start: datetime, scenario: Scenario) -> None:
        ...

    def on_step(self, epoch: datetime, scenario: Scenario, log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    Stores outputs from a simulation run.
    Keep it simple and serializable.
    """
    # Positions: body_id -> list of (epoch, r_ecl_au)
    body_positions_au: Dict[str, List[Tuple[datetime, Vector3]]] = field(default_factory=dict)

    # Free-form events later
    events: List[Dict[str, Any]] = field(default_factory=list)

    def record_position(self, body_id: str, epoch: datetime, r_ecl: Vector3) -> None:
        self.body_positions_au.setdefault(body_id, []).append((epoch, r_ecl))

    def record_event(self, kind: str, epoch: datetime, **details: Any) -> None:
        self.events.append({"kind": kind, "epoch": epoch, **details})


@dataclass
class Engine:
    """
    Fixed-step simulation engine over calendar epochs.
    Deterministic replay: given same scenario + step + start/end => same output.
    """
    step_days: float
    systems: List[System] = field(default_factory=list)

    def run(self, scenario: Scenario, start: datetime, end: datetime) -> SimulationLog:
        if self.step_days <= 0:
            raise ValueError("step_days must be positive.")
        step = timedelta(days=self.step_days)
        if step <= timedelta(0):
            raise ValueError(f"step_days {self.step_days} is below the 1 microsecond clock resolution.")
        start = as_utc(start)
        end = as_utc(end)
        if end < start:
            raise ValueError("end must be >= start.")

        log = SimulationLog()
        # Note: inclusive end if it lands exactly; otherwise last tick < end
        end_with_slack = end + timedelta(microseconds=1)

        logger.info(
            "Running scenario %r from %s to %s every %g day(s) with %d system(s)",
            scenario.name, start.isoformat(), end.isoformat(), self.step_days, len(self.systems),
        )

        for sys in self.systems:
            # Optional hook: systems that keep per-run state reset it here
            on_start = getattr(sys, "on_start", None)
            if on_start is not None:
                on_start(start, scenario)

        n_ticks = 0
        epoch = start
        while epoch <= end_with_slack:
            for sys in self.systems:
                sys.on_step(epoch, scenario, log)
            n_ticks += 1
            # Multiply rather than accumulate so long runs do not drift
            epoch = start + step * n_ticks

        logger.info("Scenario %r finished after %d tick(s)", scenario.name, n_ticks)
        return log
