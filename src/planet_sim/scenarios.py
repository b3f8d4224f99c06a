# MIT License (see LICENSE)
"""
Builders for common initial conditions.

These are conveniences for the presentation layer and examples: a square
cloud of small bodies, a body placed on a circular orbit, and the
drag-to-launch velocity used when spawning bodies with the mouse.
"""
from __future__ import annotations
import math

import numpy as np

from .simulation import Simulation
from .util import f64, circular_orbit_speed, norm, get_angle


def spawn_grid(
    sim: Simulation,
    top_left: tuple[float, float],
    columns: int,
    rows: int,
    gap: float,
    radius: float,
    mass: float | None = None,
) -> list[int]:
    """
    Spawn a columns × rows grid of identical bodies at rest.

    Args:
        sim: Simulation to spawn into.
        top_left: Position of the first body.
        columns, rows: Grid dimensions.
        gap: Center-to-center spacing along both axes.
        radius: Radius of every body.
        mass: Mass of every body, density-derived if omitted.

    Returns:
        Ids of the spawned bodies, column by column.
    """
    x0, y0 = top_left
    ids = []
    for i in range(columns):
        for j in range(rows):
            ids.append(sim.spawn((x0 + i * gap, y0 + j * gap), mass=mass, radius=radius))
    return ids


def spawn_orbiting(
    sim: Simulation,
    host_id: int,
    distance: float,
    radius: float,
    angle: float = 0.0,
    mass: float | None = None,
    clockwise: bool = False,
) -> int:
    """
    Spawn a body on a circular orbit around an existing host.

    The orbit speed is sqrt(G·M/r) relative to the host, and the host's own
    velocity is added so the pair keeps moving together.
    """
    host = sim.get(host_id)
    offset = np.array([math.cos(angle), math.sin(angle)], dtype=np.float64) * distance
    speed = circular_orbit_speed(sim.G, host.mass, distance)
    # Tangent direction, counterclockwise unless asked otherwise
    tangent = np.array([-offset[1], offset[0]], dtype=np.float64) / distance
    if clockwise:
        tangent = -tangent
    return sim.spawn(
        host.position + offset,
        velocity=host.velocity + speed * tangent,
        mass=mass,
        radius=radius,
    )


def launch_velocity(
    press: tuple[float, float],
    release: tuple[float, float],
    scale: float = 1.0,
) -> np.ndarray:
    """
    Slingshot velocity for a body dragged from `press` to `release`.

    The body is launched away from the release point, with speed
    proportional to drag length.
    """
    return (f64(press) - f64(release)) * scale


def describe_launch(press: tuple[float, float], release: tuple[float, float]) -> tuple[float, float]:
    """Speed and heading (radians) of launch_velocity(press, release)."""
    v = launch_velocity(press, release)
    return norm(v), get_angle(v)
