"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from planet_sim import Simulation
from planet_sim.profiler import Profiler
from planet_sim.renderer import NullRenderer

def run(n: int, steps: int = 100):
    prof = Profiler()
    renderer = NullRenderer()
    sim = Simulation(G=1e-4, dt=1/60, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn bodies in a sparse grid with small random jitter so few merge
    side = int(np.ceil(np.sqrt(n)))
    k = 0
    for iy in range(side):
        for ix in range(side):
            if k >= n:
                break
            x = 20.0 * ix + 0.5 * float(rng.normal())
            y = 20.0 * iy + 0.5 * float(rng.normal())
            sim.spawn((x, y), radius=2.0)
            k += 1

    # warmup
    for _ in range(5):
        sim.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
        # Snapshot cost is part of a real frame
        renderer.render_simulation(sim)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, len(sim), prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 50, 100, 250]:
        per_step, alive, summary = run(n)
        print(f"N={n:4d}  alive={alive:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["scan", "resolve", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
