import logging
from datetime import datetime, timedelta, timezone

from orrery.core.catalog import elements_for
from orrery.core.frames import norm
from orrery.physics.orbit import propagate

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

earth = elements_for("Earth")
start = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)

for epoch, r in propagate(earth, [start + timedelta(days=d) for d in (0, 91, 182, 273)]):
    print(epoch.date(), r, f"|r|={norm(r):.6f} AU")
