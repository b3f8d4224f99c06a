import logging

import numpy as np
from planet_sim import Simulation
from planet_sim.scenarios import spawn_orbiting
from planet_sim.core.invariants import kinetic_energy, potential_energy

logging.basicConfig(level=logging.INFO)

sim = Simulation(G=1.0, dt=0.05)
sun = sim.spawn((0.0, 0.0), mass=1000.0, radius=5.0)
planet = spawn_orbiting(sim, sun, distance=100.0, radius=1.0, mass=1e-3)

bodies = sim.snapshot()
e0 = kinetic_energy(bodies) + potential_energy(bodies, sim.G)

for _ in range(4000):
    sim.step()

bodies = sim.snapshot()
e1 = kinetic_energy(bodies) + potential_energy(bodies, sim.G)
r = np.linalg.norm(sim.get(planet).position - sim.get(sun).position)

print("t", sim.time, "r", r)
print("e0", e0, "e1", e1, "de rel", abs(e1 - e0) / abs(e0))
