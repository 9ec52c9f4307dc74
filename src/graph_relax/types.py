"""
Common types for the layout engine.

This module provides the fundamental types shared across the package:
- Node: Graph vertex with identity and mutable position
- Link: Unordered pair of node identities
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Hashable, Iterator, Sequence, TypedDict, Union

logger = logging.getLogger(__name__)


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout iterations have begun
    - tick: Fired once per iteration
    - end: Layout has finished (iteration count reached or converged)
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    iteration: int
    temperature: float
    max_displacement: float
    total_displacement: float


class Node:
    """
    Graph node with identity and position.

    Attributes:
        id: Opaque, unique, hashable identity
        x: X coordinate
        y: Y coordinate

    Any other keyword passed to the constructor is kept as an attribute and
    written back out by the exporters, in the order it was given. A keyword
    that clashes with a Node member (``to_dict``, ...) is not set as an
    attribute but is still exported.
    """

    def __init__(self, id: Any = None, x: Any = None, y: Any = None, **kwargs: Any) -> None:
        """Initialize node; position is validated later by the layout."""
        self.id: Any = id
        self.x: float = x
        self.y: float = y
        self._extra_fields: list[str] = []
        self._shadowed: dict[str, Any] = {}

        # Copy any additional custom properties
        for key, value in kwargs.items():
            self._extra_fields.append(key)
            if hasattr(self, key):
                # Name taken by a Node member: kept for export only
                self._shadowed[key] = value
                logger.warning(
                    "Node %r: field %r clashes with a Node attribute and is only kept for export",
                    id,
                    key,
                )
            else:
                setattr(self, key, value)

    def to_dict(self) -> dict[str, Any]:
        """Return the node as a plain record (id, x, y, then extra fields)."""
        record: dict[str, Any] = {"id": self.id, "x": self.x, "y": self.y}
        for key in self._extra_fields:
            record[key] = self._shadowed[key] if key in self._shadowed else getattr(self, key)
        return record

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, x={self.x!r}, y={self.y!r})"


class Link:
    """
    Unordered edge between two node identities.

    Links are immutable; only the positions of the nodes they name change
    during a layout run.

    Attributes:
        source: Id of the first endpoint
        target: Id of the second endpoint
    """

    __slots__ = ("_source", "_target")

    def __init__(self, source: Hashable, target: Hashable) -> None:
        """
        Initialize link between two node ids.

        Raises:
            ValueError: If source or target is None
        """
        if source is None:
            raise ValueError("Link source cannot be None")
        if target is None:
            raise ValueError("Link target cannot be None")
        self._source = source
        self._target = target

    @property
    def source(self) -> Hashable:
        return self._source

    @property
    def target(self) -> Hashable:
        return self._target

    def __iter__(self) -> Iterator[Hashable]:
        yield self._source
        yield self._target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Link):
            return NotImplemented
        return {self._source, self._target} == {other._source, other._target}

    def __hash__(self) -> int:
        return hash(frozenset((self._source, self._target)))

    def to_list(self) -> list[Any]:
        """Return the link as a ``[source, target]`` pair."""
        return [self._source, self._target]

    def __repr__(self) -> str:
        return f"Link({self._source!r} -- {self._target!r})"


# Type aliases for the Pythonic API
NodeLike = Union[Node, dict[str, Any], Any]
"""Input type for nodes: Node objects, dicts, or objects with id/x/y attributes."""

LinkLike = Union[Link, Sequence[Any], dict[str, Any], Any]
"""Input type for links: Link objects, [source, target] pairs, or dicts."""


__all__ = [
    "EventType",
    "Event",
    "Node",
    "Link",
    "NodeLike",
    "LinkLike",
]
