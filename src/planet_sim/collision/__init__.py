# MIT License (see LICENSE)
"""
Collision detection, grouping and merging.

This subpackage provides:
    - Detector: closed-boundary circle overlap over all pairs.
    - Grouping: union-find over colliding pairs -> connected components.
    - Merge: replacement of each component by one mass/volume/momentum
      conserving body.

Typical usage:
    from planet_sim.collision import CollisionGrouper, check_collision

    grouper = CollisionGrouper()
    if check_collision(a, b):
        grouper.add_pair(a.id, b.id)
    groups = grouper.groups()
"""
from .detector import check_collision, scan_pairs
from .grouping import CollisionGrouper
from .merge import MergePlan, merge_bodies, plan_merges, apply_merges

__all__ = [
    # Detection
    "check_collision",
    "scan_pairs",
    # Grouping
    "CollisionGrouper",
    # Merging
    "MergePlan",
    "merge_bodies",
    "plan_merges",
    "apply_merges",
]
