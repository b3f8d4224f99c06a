# MIT License (see LICENSE)
"""
Grouping of colliding bodies into merge groups.

A merge group is a connected component of the "collides-with" graph built
from the pairs found this step: if A touches B and B touches C, then A, B
and C merge into one body even when A and C do not overlap.

Implemented as a disjoint-set forest (union-find) keyed by body id, with
path compression and union by size, so adding a pair that bridges two
existing groups unions them. A body can never end up in two groups.

Reference:
    https://en.wikipedia.org/wiki/Disjoint-set_data_structure
"""
from __future__ import annotations

from ..types import CollisionGroup


class CollisionGrouper:
    """
    Collects colliding pairs for one step and reports the resulting groups.

    Usage:
        grouper = CollisionGrouper()
        grouper.add_pair(1, 2)
        grouper.add_pair(2, 3)
        grouper.groups()   # [frozenset({1, 2, 3})]
    """

    def __init__(self) -> None:
        self._parent: dict[int, int] = {}
        self._size: dict[int, int] = {}

    def _find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def _make(self, x: int) -> None:
        if x not in self._parent:
            self._parent[x] = x
            self._size[x] = 1

    def add_pair(self, i: int, j: int) -> None:
        """Record that bodies i and j collide."""
        self._make(i)
        self._make(j)
        ri, rj = self._find(i), self._find(j)
        if ri == rj:
            return
        if self._size[ri] < self._size[rj]:
            ri, rj = rj, ri
        self._parent[rj] = ri
        self._size[ri] += self._size[rj]

    def groups(self) -> list[CollisionGroup]:
        """
        Disjoint groups of colliding ids.

        Sorted by smallest member id so downstream id assignment does not
        depend on the order pairs were added.
        """
        members: dict[int, set[int]] = {}
        for x in self._parent:
            members.setdefault(self._find(x), set()).add(x)
        return sorted((frozenset(m) for m in members.values()), key=min)

    def ids(self) -> frozenset[int]:
        """Every id that is in some group."""
        return frozenset(self._parent)

    def __contains__(self, body_id: object) -> bool:
        return body_id in self._parent

    def __len__(self) -> int:
        """Number of distinct groups."""
        return sum(1 for x in self._parent if self._find(x) == x)
