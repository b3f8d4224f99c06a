# MIT License (see LICENSE)
"""
The simulation world and step loop.

The Simulation class owns the body registry and advances it in discrete
steps. Each step runs, in this order:
    1. Detect & accumulate: every unordered pair is tested once. Colliding
       pairs are recorded for merging; all other pairs attract each other.
    2. Resolve collisions: each connected group of colliding bodies is
       replaced by one merged body.
    3. Integrate: every live body (merged replacements included) advances by
       semi-implicit Euler; accumulators are then cleared.
The presentation layer reads state only between steps and uses the returned
StepResult to retire per-body resources (trails) of bodies that vanished.

A step is atomic. Validation, the pair scan and merge planning happen before
anything is mutated; if any of them raises, the registry is unchanged.

Structure:
    - User creates a Simulation.
    - User spawns bodies via spawn().
    - User calls sim.step(dt) in a loop and renders sim.snapshot().
"""
from __future__ import annotations
import logging
import math
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager

import numpy as np

from . import constants
from .collision.detector import scan_pairs
from .collision.grouping import CollisionGrouper
from .collision.merge import apply_merges, plan_merges
from .core.gravity import newtonian_force
from .core.integrators import check_body, symplectic_euler_step
from .errors import InvariantViolation
from .profiler import Profiler
from .registry import BodyRegistry
from .types import Body, CollisionGroup
from .util import volume_of_sphere

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """
    Ids that disappeared and appeared during a step.

    Attributes:
        removed: Ids absorbed into merges.
        created: Ids of the merged replacement bodies.
        merges: For each created id, the ids it absorbed.
    """
    removed: frozenset[int] = frozenset()
    created: frozenset[int] = frozenset()
    merges: dict[int, CollisionGroup] = field(default_factory=dict)


@dataclass
class Simulation:
    """
    Gravitating, merging bodies in 2D.

    Attributes:
        G: Gravitational constant used by the gravity evaluator.
        dt: Default timestep for step() when none is given.
        min_distance: Gravity distance floor. 0 disables it, making coincident
                      bodies raise DegenerateDistance.
        density: Mass per unit volume for bodies spawned without a mass.
        profiler: Optional Profiler instance for timing statistics.
    """
    G: float = constants.G
    dt: float = constants.DEFAULT_DT
    min_distance: float = constants.DEFAULT_MIN_DISTANCE
    density: float = constants.DEFAULT_DENSITY
    profiler: Profiler | None = None

    # Internal state
    registry: BodyRegistry = field(default_factory=BodyRegistry)
    time: float = 0.0
    step_count: int = 0

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not math.isfinite(self.G):
            raise ValueError(f"G must be finite, got {self.G}")
        if not (self.dt > 0 and math.isfinite(self.dt)):
            raise ValueError(f"dt must be positive and finite, got {self.dt}")
        if not self.min_distance >= 0:
            raise ValueError(f"min_distance must be non-negative, got {self.min_distance}")
        if not self.density > 0:
            raise ValueError(f"density must be positive, got {self.density}")

    def mass_for_radius(self, radius: float) -> float:
        """Mass of a body of this radius under the configured density."""
        return self.density * volume_of_sphere(radius)

    def spawn(
        self,
        position: tuple[float, float] | np.ndarray,
        velocity: tuple[float, float] | np.ndarray | None = None,
        mass: float | None = None,
        *,
        radius: float,
    ) -> int:
        """
        Add a new body to the simulation.

        Args:
            position: Center [x, y].
            velocity: Initial velocity, zero if omitted.
            mass: Mass, derived from radius and density if omitted.
            radius: Collision radius.

        Returns:
            The assigned body id.

        Raises:
            ValueError: If radius or mass is not positive and finite.
        """
        if not radius > 0:
            raise ValueError(f"Body radius must be positive, got {radius}")
        if mass is None:
            mass = self.mass_for_radius(radius)
        if not mass > 0:
            raise ValueError(f"Body mass must be positive, got {mass}")
        body = Body(
            position=position,
            velocity=(0.0, 0.0) if velocity is None else velocity,
            mass=mass,
            radius=radius,
        )
        return self.add_body(body)

    def add_body(self, body: Body) -> int:
        """
        Add a prebuilt body. Its id is overwritten and its accumulator cleared.

        Raises:
            ValueError: If the body's mass, radius or state is invalid.
        """
        try:
            check_body(body)
        except InvariantViolation as e:
            raise ValueError(str(e)) from e
        body.clear_forces()
        return self.registry.add(body)

    def despawn(self, body_id: int) -> None:
        """
        Remove a body on external request.

        Raises:
            NotFound: If body_id is not live.
        """
        self.registry.remove(body_id)

    def get(self, body_id: int) -> Body:
        """Copy of a live body. Raises NotFound if absent."""
        return self.registry.get(body_id).copy()

    def snapshot(self) -> list[Body]:
        """Copies of all live bodies, in insertion order."""
        return [b.copy() for b in self.registry.bodies()]

    def __len__(self) -> int:
        return len(self.registry)

    def __contains__(self, body_id: object) -> bool:
        return body_id in self.registry

    def _section(self, name: str) -> ContextManager:
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _scan(self, bodies: list[Body]) -> tuple[np.ndarray, CollisionGrouper]:
        """
        Test every pair once; route it to grouping or to gravity.

        Gravity accumulates into a per-index buffer rather than into the
        bodies, so nothing is mutated until the step commits.
        """
        forces = np.zeros((len(bodies), 2), dtype=np.float64)
        grouper = CollisionGrouper()
        for i, j, colliding in scan_pairs(bodies):
            a, b = bodies[i], bodies[j]
            if colliding:
                grouper.add_pair(a.id, b.id)
            else:
                f = newtonian_force(
                    a.position, b.position, a.mass, b.mass,
                    self.G, self.min_distance, ids=(a.id, b.id),
                )
                forces[i] += f
                forces[j] -= f
        if not np.all(np.isfinite(forces)):
            raise InvariantViolation("Gravity produced a non-finite force")
        return forces, grouper

    def step(self, dt: float | None = None) -> StepResult:
        """
        Advance the simulation by one tick.

        Returns:
            The ids removed and created by merges during this step.

        Raises:
            ValueError: If dt is not positive and finite.
            InvariantViolation: If a body has invalid state or merge
                bookkeeping fails. Nothing is mutated.
            DegenerateDistance: If two bodies coincide with no distance floor.
                Nothing is mutated.
        """
        dt = float(self.dt if dt is None else dt)
        if not (dt > 0 and math.isfinite(dt)):
            raise ValueError(f"dt must be positive and finite, got {dt}")

        bodies = self.registry.bodies()
        for b in bodies:
            check_body(b)

        # 1. Detect & accumulate
        with self._section("scan"):
            forces, grouper = self._scan(bodies)

        # 2. Resolve collisions (plan, then commit)
        with self._section("resolve"):
            plans = plan_merges(self.registry, grouper.groups())
            merges = apply_merges(self.registry, plans)

        # 3. Integrate
        with self._section("integrate"):
            for b, f in zip(bodies, forces):
                if b.id not in grouper:
                    b.force += f
            live = self.registry.bodies()
            for b in live:
                symplectic_euler_step(b, dt)
            for b in live:
                b.clear_forces()

        self.time += dt
        self.step_count += 1

        removed = frozenset(grouper.ids())
        if merges:
            logger.debug(
                "step %d: %d bodies merged into %d", self.step_count, len(removed), len(merges)
            )
        return StepResult(removed=removed, created=frozenset(merges), merges=merges)

    def run(self, steps: int, dt: float | None = None) -> StepResult:
        """
        Advance several steps and report their combined effect.

        A body created and absorbed within the run appears in neither set;
        `merges` maps each surviving created id to the pre-run ids it absorbed.
        """
        created: set[int] = set()
        removed: set[int] = set()
        merges: dict[int, CollisionGroup] = {}
        for _ in range(steps):
            result = self.step(dt)
            for new_id, members in result.merges.items():
                origin: set[int] = set()
                for m in members:
                    if m in created:
                        created.discard(m)
                        origin |= merges.pop(m)
                    else:
                        removed.add(m)
                        origin.add(m)
                created.add(new_id)
                merges[new_id] = frozenset(origin)
        return StepResult(removed=frozenset(removed), created=frozenset(created), merges=merges)
