# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering, a text debug
implementation, a no-op renderer and per-body trail bookkeeping. The core
engine has no rendering dependency - these adapters are optional and only
ever read state between completed steps (via Simulation.snapshot()).
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Iterable, TextIO
import sys

import numpy as np

from ..types import Body

if TYPE_CHECKING:
    from ..simulation import Simulation, StepResult


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses should implement the drawing methods to integrate with
    various graphics backends (pygame, matplotlib, web frontend, etc.).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.time)
        for body in sim.snapshot():
            renderer.draw_body(body)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulation time.
        """
        ...

    @abstractmethod
    def draw_body(self, body: Body) -> None:
        """Draw a single body."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """
        Finalize the current frame.

        Called after all bodies have been drawn for this frame.
        """
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """Convenience method to render every live body."""
        self.begin_frame(sim.time)
        for body in sim.snapshot():
            self.draw_body(body)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text debug renderer for development and testing.

    Writes a header with body and trail counts, then one line per body.

    Output:
        === Frame t=0.0167 bodies=2 trails=2 ===
        [0] r=1.00 m=10.00 @ (0.00, 0.00) v=(0.00, 0.00)
        [1] r=1.00 m=10.00 @ (100.00, 0.00) v=(-0.00, 0.00)
    """

    def __init__(
        self,
        output: TextIO | None = None,
        verbose: bool = True,
        trails: "TrailTracker | None" = None,
    ):
        """
        Initialize the debug renderer.

        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include mass and velocity.
            trails: Trail tracker whose count is shown in the header.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self.trails = trails
        self._lines: list[str] = []
        self._current_time = 0.0

    def begin_frame(self, time: float) -> None:
        self._current_time = time
        self._lines = []

    def draw_body(self, body: Body) -> None:
        """Buffer a body as a text line."""
        pos = body.position
        line = f"[{body.id}] r={body.radius:.2f}"
        if self.verbose:
            line += f" m={body.mass:.2f}"
        line += f" @ ({pos[0]:.2f}, {pos[1]:.2f})"
        if self.verbose:
            vel = body.velocity
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f})"
        self._lines.append(line)

    def end_frame(self) -> None:
        """Write the header and buffered body lines."""
        header = f"=== Frame t={self._current_time:.4f} bodies={len(self._lines)}"
        if self.trails is not None:
            header += f" trails={len(self.trails)} points={self.trails.point_count()}"
        self.output.write(header + " ===\n")
        for line in self._lines:
            self.output.write(line + "\n")
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful as a placeholder or for performance testing without rendering overhead.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, body: Body) -> None:
        pass

    def end_frame(self) -> None:
        pass


class Trail:
    """
    Bounded history of a body's recent positions.

    While emitting, each update appends the body's position. Once the body
    is gone the trail stops emitting and loses one point per update until
    it is empty ("dead").
    """

    def __init__(self, max_points: int = 120):
        self.points: deque[np.ndarray] = deque(maxlen=max_points)
        self.emitting = True

    def stop_emitting(self) -> None:
        self.emitting = False

    def update(self, position: np.ndarray | None) -> None:
        if self.emitting and position is not None:
            self.points.append(np.array(position, dtype=np.float64))
        elif self.points:
            self.points.popleft()

    @property
    def is_dead(self) -> bool:
        return not self.emitting and not self.points

    def __len__(self) -> int:
        return len(self.points)


class TrailTracker:
    """
    One Trail per body, kept in lockstep with the simulation's ids.

    Trails start for bodies the tracker has not seen (spawned or created by a
    merge), stop emitting for bodies that were removed, and are dropped once
    they have faded out.

    Usage:
        trails = TrailTracker()
        result = sim.step()
        trails.update(sim.snapshot(), result)
    """

    def __init__(self, max_points: int = 120):
        self.max_points = max_points
        self.trails: dict[int, Trail] = {}

    def update(self, bodies: Iterable[Body], result: "StepResult | None" = None) -> None:
        """
        Advance all trails by one frame.

        Args:
            bodies: Snapshot of the live bodies after the step.
            result: The step's result. Removed ids stop emitting even if the
                    caller's snapshot is stale.
        """
        # Remove dead trails
        self.trails = {k: t for k, t in self.trails.items() if not t.is_dead}

        positions = {b.id: b.position for b in bodies}
        if result is not None:
            for body_id in result.removed:
                if body_id in self.trails:
                    self.trails[body_id].stop_emitting()
                positions.pop(body_id, None)

        for body_id in positions:
            if body_id not in self.trails:
                self.trails[body_id] = Trail(self.max_points)

        for body_id, trail in self.trails.items():
            position = positions.get(body_id)
            if position is None:
                trail.stop_emitting()
            trail.update(position)

    def point_count(self) -> int:
        """Total points across all trails."""
        return sum(len(t) for t in self.trails.values())

    def __len__(self) -> int:
        return len(self.trails)

    def __contains__(self, body_id: object) -> bool:
        return body_id in self.trails
