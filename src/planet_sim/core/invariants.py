# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. Merging conserves total mass,
volume and linear momentum exactly (up to rounding); kinetic energy is
dissipated by every merge, as in any perfectly inelastic collision.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..constants import DEFAULT_MIN_DISTANCE
from ..types import Body
from ..util import norm2


def total_mass(bodies: Iterable[Body]) -> float:
    """M = Σ m"""
    return float(sum(b.mass for b in bodies))


def total_volume(bodies: Iterable[Body]) -> float:
    """V = Σ (4/3)·π·r³"""
    return float(sum(b.volume for b in bodies))


def linear_momentum(bodies: Iterable[Body]) -> np.ndarray:
    """
    Calculate the total linear momentum of a system.

    P = Σ (m * v)
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def center_of_mass(bodies: Iterable[Body]) -> np.ndarray:
    """
    Mass-weighted centroid Σ m·x / Σ m.

    Returns the zero vector for an empty system.
    """
    weighted = np.zeros(2, dtype=np.float64)
    mass = 0.0
    for b in bodies:
        weighted += b.mass * b.position
        mass += b.mass
    if mass == 0.0:
        return weighted
    return weighted / mass


def kinetic_energy(bodies: Iterable[Body]) -> float:
    """T = Σ 0.5 * m * v²"""
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * norm2(b.velocity)
    return ke


def potential_energy(
    bodies: Iterable[Body],
    G: float,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> float:
    """
    Gravitational potential energy U = −Σ_{i<j} G·m_i·m_j / r_ij.

    Uses the same distance floor as the gravity evaluator.
    """
    bodies = list(bodies)
    u = 0.0
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            r = max(float(np.sqrt(norm2(bj.position - bi.position))), min_distance)
            if r == 0.0:
                continue
            u -= G * bi.mass * bj.mass / r
    return u
