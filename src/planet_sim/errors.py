# MIT License (see LICENSE)
"""
Exception types raised by the simulation engine.

Every engine error derives from SimulationError, and additionally from the
builtin exception it most resembles, so callers can catch either.
"""
from __future__ import annotations


class SimulationError(Exception):
    """Base class for all engine errors."""


class NotFound(SimulationError, KeyError):
    """A body id was referenced that is not (or never was) live."""

    def __init__(self, body_id: int):
        super().__init__(body_id)
        self.body_id = body_id

    def __str__(self) -> str:
        return f"No live body with id {self.body_id}"


class DegenerateDistance(SimulationError, ZeroDivisionError):
    """Two bodies sit at the same position and no distance floor is configured."""

    def __init__(self, id_a: int, id_b: int):
        super().__init__(f"Bodies {id_a} and {id_b} are coincident; gravity is undefined")
        self.id_a = id_a
        self.id_b = id_b


class InvariantViolation(SimulationError, RuntimeError):
    """
    A data-model contract was broken.

    Raised for bodies with non-positive mass/radius or non-finite state, and
    for merge bookkeeping errors (stale ids, an id in two groups).
    """
