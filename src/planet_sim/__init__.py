# MIT License (see LICENSE)
"""
planet_sim - A 2D gravity simulation of merging planets.

Bodies attract each other with Newtonian gravity; bodies that overlap merge
into a single body conserving mass, volume and momentum.

Main entry points:
    - Simulation: The world; spawn/despawn bodies, step, snapshot.
    - StepResult: Ids removed and created by a step's merges.
    - Body: A point mass with a collision radius.
    - BodyRegistry: Id allocation and storage used by Simulation.

Submodules:
    - core: Gravity, integration, conserved quantities.
    - collision: Detection, grouping, merging.
    - scenarios: Grid and orbit builders.
    - renderer: Optional visualization adapters and trails.

Example:
    from planet_sim import Simulation

    sim = Simulation(G=1e-4)
    sun = sim.spawn((0, 0), mass=1e6, radius=20)
    sim.spawn((200, 0), velocity=(0, 0.7), radius=2)
    result = sim.step(1 / 60)
"""
import logging

from .errors import SimulationError, NotFound, DegenerateDistance, InvariantViolation
from .registry import BodyRegistry
from .simulation import Simulation, StepResult
from .types import Body, CollisionGroup

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core simulation
    "Simulation",
    "StepResult",
    "Body",
    "BodyRegistry",
    "CollisionGroup",
    # Errors
    "SimulationError",
    "NotFound",
    "DegenerateDistance",
    "InvariantViolation",
]
