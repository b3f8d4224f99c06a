# MIT License (see LICENSE)
"""
Simulation constants used throughout the engine.

Units are simulation units (pixels, frames), not SI. These are defaults:
Simulation accepts its own values so tests and scenarios can vary them.
"""
from __future__ import annotations

# Gravitational constant, F = G·m₁·m₂ / r²
G: float = 1e-4

# Distance floor for the gravity evaluator. Pairs closer than this are
# evaluated as if they were exactly this far apart: r² → max(r², d_min²).
# Setting it to 0 makes coincident bodies raise DegenerateDistance instead.
DEFAULT_MIN_DISTANCE: float = 1e-3

# Mass per unit volume used when a body is spawned without an explicit mass.
# mass = density · (4/3)·π·r³
DEFAULT_DENSITY: float = 1.0

# Default timestep per call to Simulation.step()
DEFAULT_DT: float = 1 / 60
