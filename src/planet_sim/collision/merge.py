# MIT License (see LICENSE)
"""
Merging of collision groups into single replacement bodies.

A group is replaced by one body that conserves:
  - mass:      M = Σ m
  - volume:    V = Σ (4/3)·π·r³,   r_new = (3V / 4π)^(1/3)
  - momentum:  v_new = Σ m·v / M
and sits at the group's center of mass, x_new = Σ m·x / M.

This is a perfectly inelastic collision, so kinetic energy is not conserved.

Merging is split into a planning pass that only reads the registry and a
commit pass that mutates it. The commit runs only when every group planned
successfully, so no caller ever sees a group half-replaced.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from ..core.integrators import check_body
from ..errors import InvariantViolation
from ..registry import BodyRegistry
from ..types import Body, CollisionGroup
from ..util import inverse_volume_of_sphere

logger = logging.getLogger(__name__)


def merge_bodies(members: Sequence[Body]) -> Body:
    """
    Build the body that replaces a group of colliding bodies.

    Args:
        members: The bodies being merged (at least one).

    Returns:
        A new unregistered body (id -1) with zero accumulated force.
    """
    if not members:
        raise InvariantViolation("Cannot merge an empty collision group")

    mass = 0.0
    volume = 0.0
    momentum = np.zeros(2, dtype=np.float64)
    sum_of_mx = np.zeros(2, dtype=np.float64)

    for b in members:
        mass += b.mass
        volume += b.volume
        momentum += b.mass * b.velocity
        sum_of_mx += b.mass * b.position

    return Body(
        position=sum_of_mx / mass,
        velocity=momentum / mass,
        mass=mass,
        radius=inverse_volume_of_sphere(volume),
    )


@dataclass(frozen=True)
class MergePlan:
    """A group of live ids and the body that will replace them."""
    members: CollisionGroup
    replacement: Body


def plan_merges(registry: BodyRegistry, groups: Iterable[CollisionGroup]) -> list[MergePlan]:
    """
    Validate groups and build their replacement bodies without mutating anything.

    Raises:
        InvariantViolation: If a group references an id that is not live, an
            id appears in more than one group, or a replacement body has
            invalid state.
    """
    plans = []
    seen: set[int] = set()
    for group in groups:
        for body_id in group:
            if body_id in seen:
                raise InvariantViolation(f"Body {body_id} appears in more than one collision group")
            if body_id not in registry:
                raise InvariantViolation(f"Collision group references stale body id {body_id}")
            seen.add(body_id)
        members = [registry.get(body_id) for body_id in sorted(group)]
        replacement = merge_bodies(members)
        # Overflowing sums (mass, momentum) must fail here, before commit
        check_body(replacement)
        plans.append(MergePlan(members=frozenset(group), replacement=replacement))
    return plans


def apply_merges(registry: BodyRegistry, plans: Iterable[MergePlan]) -> dict[int, CollisionGroup]:
    """
    Remove every planned group's members and register the replacements.

    Returns:
        Mapping of new body id -> ids it absorbed.
    """
    plans = list(plans)
    for plan in plans:
        for body_id in plan.members:
            registry.remove(body_id)

    merges = {}
    for plan in plans:
        new_id = registry.add(plan.replacement)
        merges[new_id] = plan.members
        logger.debug(
            "merged %s into body %d (m=%.4g, r=%.4g)",
            sorted(plan.members), new_id, plan.replacement.mass, plan.replacement.radius,
        )
    return merges
