from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from orrery.core.settings import DEFAULT_SOLVER_SETTINGS, SolverSettings
from orrery.simulation.scenario import Scenario
from orrery.simulation.engine import SimulationLog, tick


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"
    settings: SolverSettings = field(default=DEFAULT_SOLVER_SETTINGS)

    def on_step(self, epoch: datetime, scenario: Scenario, log: SimulationLog) -> None:
        for body_id, r in tick(epoch, scenario.bodies, self.settings).items():
            log.record_position(body_id, epoch, r)
