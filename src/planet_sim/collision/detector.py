# MIT License (see LICENSE)
"""
Circle–circle overlap testing over all pairs.

Two bodies collide when their centers are no farther apart than the sum of
their radii. The boundary is closed: exactly touching counts as colliding.
Squared distances are compared so no square root is taken.

There is no broadphase; every unordered pair is visited once, O(N²).
"""
from __future__ import annotations
from typing import Iterator, Sequence

from ..types import Body
from ..util import norm2


def check_collision(a: Body, b: Body) -> bool:
    """True if the circles of a and b overlap or touch."""
    r = a.radius + b.radius
    return norm2(b.position - a.position) <= r * r


def scan_pairs(bodies: Sequence[Body]) -> Iterator[tuple[int, int, bool]]:
    """
    Visit every unordered pair of bodies exactly once.

    Yields:
        (i, j, colliding) with i < j indices into `bodies`.
    """
    n = len(bodies)
    for i in range(n - 1):
        bi = bodies[i]
        for j in range(i + 1, n):
            yield i, j, check_collision(bi, bodies[j])
