# MIT License (see LICENSE)
"""
Core type definitions for the planet simulation.

Defines the fundamental data structures:
- Body: the simulated entity, a point mass with a collision radius.
- CollisionGroup: ids of bodies that merge together in one step.

Bodies obey plain Newtonian mechanics in 2D:
  dx/dt = v
  dv/dt = F/m
For merging, each body is treated as a sphere of its radius, so volumes
(and therefore radii) combine as (4/3)·π·r³ regardless of the 2D rendering.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import f64, volume_of_sphere


# Set of body ids found to collide, directly or transitively, in one step
CollisionGroup = frozenset[int]


@dataclass
class Body:
    """
    A gravitating, collidable body ("planet").

    Attributes:
        position: Center position [x, y].
        velocity: Linear velocity [vx, vy].
        mass: Mass, must be > 0.
        radius: Collision radius, must be > 0.
        force: Accumulated force [Fx, Fy] for the current step (cleared
               after integration).
        id: Unique identifier assigned by BodyRegistry.add(). -1 until then.

    Note:
        Position, velocity and force are converted to float64 numpy arrays
        on init.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    radius: float = 1.0

    # Runtime state (not user-specified)
    force: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))
    id: int = -1

    def __post_init__(self) -> None:
        """Convert position/velocity/force to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.force = f64(self.force)
        self.mass = float(self.mass)
        self.radius = float(self.radius)

    @property
    def volume(self) -> float:
        """Volume of the sphere of this body's radius."""
        return volume_of_sphere(self.radius)

    @property
    def momentum(self) -> np.ndarray:
        """Linear momentum p = m·v."""
        return self.mass * self.velocity

    def clear_forces(self) -> None:
        """Reset accumulated force to zero for the next timestep."""
        self.force[:] = 0.0

    def copy(self) -> "Body":
        """Independent copy; mutating it never affects the original."""
        return Body(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            mass=self.mass,
            radius=self.radius,
            force=self.force.copy(),
            id=self.id,
        )
