from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Tuple

from orrery.core.frames import norm
from orrery.core.settings import DEFAULT_SOLVER_SETTINGS, SolverSettings
from orrery.simulation.scenario import Scenario
from orrery.simulation.engine import SimulationLog, tick


@dataclass
class ApsisSystem:
    """
    Flags perihelion/aphelion passages as log events.

    A passage is a local extremum of heliocentric distance over three
    consecutive ticks; the event is stamped with the middle tick, so its
    resolution is the engine step.
    """
    name: str = "apsis"
    settings: SolverSettings = field(default=DEFAULT_SOLVER_SETTINGS)
    _history: Dict[str, List[Tuple[datetime, float]]] = field(default_factory=dict, repr=False)

    def on_start(self, start: datetime, scenario: Scenario) -> None:
        self._history.clear()

    def on_step(self, epoch: datetime, scenario: Scenario, log: SimulationLog) -> None:
        for body_id, r in tick(epoch, scenario.bodies, self.settings).items():
            hist = self._history.setdefault(body_id, [])
            hist.append((epoch, norm(r)))
            if len(hist) < 3:
                continue
            del hist[:-3]

            (_t0, d0), (t1, d1), (_t2, d2) = hist
            if d1 < d0 and d1 <= d2:
                log.record_event("perihelion", t1, body=body_id, distance_au=d1)
            elif d1 > d0 and d1 >= d2:
                log.record_event("aphelion", t1, body=body_id, distance_au=d1)
