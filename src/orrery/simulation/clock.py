from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from orrery.core.julian import as_utc, julian_date


@dataclass
class SimulationClock:
    """
    Simulated calendar clock advanced by a fixed step per tick.
    The only time state in the system lives here, outside the solver.
    """
    epoch: datetime
    step_days: float = 1.0

    def __post_init__(self):
        if self.step_days <= 0:
            raise ValueError(f"step_days must be positive. Got: {self.step_days}")
        self.epoch = as_utc(self.epoch)

    @property
    def julian_date(self) -> float:
        return julian_date(self.epoch)

    def advance(self, n_steps: int = 1) -> datetime:
        self.epoch = self.epoch + timedelta(days=self.step_days * n_steps)
        return self.epoch
