import logging

from planet_sim import Simulation
from planet_sim.scenarios import spawn_grid
from planet_sim.renderer import DebugRenderer, TrailTracker
from planet_sim.core.invariants import linear_momentum, total_mass

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

# Two heavy bodies with a 10x10 cloud of small ones between them
sim = Simulation(G=1e-4, dt=1 / 60)
sim.spawn((300.0, 400.0), radius=30.0)
spawn_grid(sim, (260.0, 360.0), columns=10, rows=10, gap=50.0, radius=2.0)
sim.spawn((600.0, 400.0), radius=30.0)

trails = TrailTracker()
renderer = DebugRenderer(verbose=False, trails=trails)
m0, p0 = total_mass(sim.snapshot()), linear_momentum(sim.snapshot())

for frame in range(600):
    result = sim.step()
    trails.update(sim.snapshot(), result)
    if frame % 120 == 0:
        renderer.render_simulation(sim)

print("bodies", len(sim), "mass", total_mass(sim.snapshot()), "vs", m0)
print("momentum", linear_momentum(sim.snapshot()), "vs", p0)
