# MIT License (see LICENSE)
"""
Newtonian gravity between pairs of bodies.

Implements F = G·m₁·m₂ / r² along the line joining the two centers:
  F_a = G·m_a·m_b · d / |d|³,   d = p_b − p_a
  F_b = −F_a                    (Newton's third law)

Each unordered pair is evaluated once and the result applied to both bodies,
never once per body. Colliding pairs are handled by merging and must not be
passed here.

Distance floor:
  r² → max(r², d_min²). With d_min > 0 the force stays finite for arbitrarily
  close bodies. With d_min == 0, coincident bodies raise DegenerateDistance.
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import DEFAULT_MIN_DISTANCE
from ..errors import DegenerateDistance
from ..types import Body
from ..util import norm2

logger = logging.getLogger(__name__)


def newtonian_force(
    pos_a: np.ndarray,
    pos_b: np.ndarray,
    mass_a: float,
    mass_b: float,
    G: float,
    min_distance: float = DEFAULT_MIN_DISTANCE,
    ids: tuple[int, int] = (-1, -1),
) -> np.ndarray:
    """
    Gravitational force exerted on body a by body b.

    Args:
        pos_a, pos_b: Body centers.
        mass_a, mass_b: Body masses.
        G: Gravitational constant.
        min_distance: Distance floor (see module docs).
        ids: Body ids, only used in error/log messages.

    Returns:
        Force vector on a, pointing toward b.

    Raises:
        DegenerateDistance: If the bodies coincide and min_distance == 0.
    """
    d = pos_b - pos_a
    r2 = norm2(d)
    if r2 == 0.0:
        if min_distance <= 0.0:
            raise DegenerateDistance(*ids)
        # Direction is undefined; no net pull either way.
        logger.warning("bodies %d and %d are coincident; gravity skipped", *ids)
        return np.zeros(2, dtype=np.float64)

    r2_eff = max(r2, min_distance * min_distance)
    magnitude = G * mass_a * mass_b / r2_eff
    return d * (magnitude / np.sqrt(r2))


def apply_newtonian_gravity(
    a: Body,
    b: Body,
    G: float,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> np.ndarray:
    """
    Accumulate mutual gravity into a.force and b.force.

    Returns:
        The force applied to a (b received its negation).
    """
    f = newtonian_force(a.position, b.position, a.mass, b.mass, G, min_distance, ids=(a.id, b.id))
    a.force += f
    b.force -= f
    return f
