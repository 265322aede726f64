"""
Real-time driver: every tick_interval_s of wall time, advance the
simulated clock by step_days and print the inner planets' positions.
Ctrl-C to stop.
"""
import logging
import time
from datetime import datetime, timezone

from orrery.core.catalog import DEFAULT_CATALOG, INNER_PLANETS
from orrery.core.settings import settings_from_env
from orrery.simulation.clock import SimulationClock
from orrery.simulation.engine import tick

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger("live_run")

solver, playback = settings_from_env()
bodies = DEFAULT_CATALOG.subset(INNER_PLANETS)
clock = SimulationClock(epoch=datetime.now(timezone.utc), step_days=playback.step_days)

log.info("Starting at %s, %g day(s) per %gs tick", clock.epoch.isoformat(), playback.step_days, playback.tick_interval_s)
try:
    while True:
        epoch = clock.advance()
        positions = tick(epoch, bodies, solver)
        k = playback.au_to_display
        line = "  ".join(f"{name}=({r[0]*k:+.3f}, {r[1]*k:+.3f}, {r[2]*k:+.3f})" for name, r in positions.items())
        print(epoch.date(), line)
        time.sleep(playback.tick_interval_s)
except KeyboardInterrupt:
    log.info("Stopped at %s", clock.epoch.isoformat())
