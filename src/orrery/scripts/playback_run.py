import logging
from datetime import datetime, timedelta, timezone

from orrery.core.catalog import DEFAULT_CATALOG, INNER_PLANETS
from orrery.core.settings import settings_from_env
from orrery.simulation.scenario import Scenario
from orrery.simulation.engine import Engine
from orrery.simulation.systems.state_recorder import StateRecorderSystem
from orrery.simulation.systems.apsis_system import ApsisSystem
from orrery.visualization.export_log import export_playback_bundle
from orrery.visualization.plotly_viewer import render_static_scene, render_animated_scene

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

solver, playback = settings_from_env()

scenario = Scenario.from_catalog("Inner Planets", DEFAULT_CATALOG, INNER_PLANETS)

start = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
end = start + timedelta(days=365)

engine = Engine(
    step_days=playback.step_days,
    systems=[StateRecorderSystem(settings=solver), ApsisSystem(settings=solver)],
)
log = engine.run(scenario, start, end)

bundle_path = export_playback_bundle(log, out_path="out/playback_bundle.json", playback=playback)
static_path = render_static_scene(log, out_html="out/orrery_scene.html", playback=playback)
anim_path = render_animated_scene(log, out_html="out/orrery_animated.html", playback=playback)

print("Apsis passages:")
for event in log.events:
    print(f"  {event['body']:8s} {event['kind']:10s} {event['epoch'].date()} {event['distance_au']:.5f} AU")

print("Wrote:")
print(" -", bundle_path)
print(" -", static_path)
print(" -", anim_path)
print("\nOpen the HTML files in your browser.")
