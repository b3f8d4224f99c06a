# MIT License (see LICENSE)
"""
Body registry: the owner of the live set of bodies.

Identifiers come from a monotonically increasing counter that is never reset
or recycled, so an id held by an external collaborator (a renderer trail, for
example) refers to the same body for that body's whole lifetime and to no
other body afterwards.
"""
from __future__ import annotations
import logging
from typing import Iterator

from .errors import NotFound
from .types import Body

logger = logging.getLogger(__name__)


class BodyRegistry:
    """
    Insertion-ordered mapping of id -> Body.

    Iteration order is insertion order. Physics must not depend on it.
    """

    def __init__(self, first_id: int = 0) -> None:
        self._bodies: dict[int, Body] = {}
        self._next_id = first_id

    @property
    def next_id(self) -> int:
        """The id the next added body will receive."""
        return self._next_id

    def add(self, body: Body) -> int:
        """
        Store a body under a fresh id.

        Args:
            body: The body to store. Its id field is overwritten.

        Returns:
            The assigned id.
        """
        body.id = self._next_id
        self._next_id += 1
        self._bodies[body.id] = body
        logger.debug("registered body %d (m=%.4g, r=%.4g)", body.id, body.mass, body.radius)
        return body.id

    def remove(self, body_id: int) -> Body:
        """
        Delete a body and return it.

        Raises:
            NotFound: If body_id is not live.
        """
        try:
            body = self._bodies.pop(body_id)
        except KeyError:
            raise NotFound(body_id) from None
        logger.debug("removed body %d", body_id)
        return body

    def get(self, body_id: int) -> Body:
        """Live body for an id. Raises NotFound if absent."""
        try:
            return self._bodies[body_id]
        except KeyError:
            raise NotFound(body_id) from None

    def ids(self) -> list[int]:
        return list(self._bodies)

    def bodies(self) -> list[Body]:
        return list(self._bodies.values())

    def items(self) -> list[tuple[int, Body]]:
        return list(self._bodies.items())

    def __iter__(self) -> Iterator[tuple[int, Body]]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self._bodies)

    def __contains__(self, body_id: object) -> bool:
        return body_id in self._bodies
