"""
Base classes for layout algorithms.

This module provides abstract base classes that define the common interface
and shared functionality for layouts:

- BaseLayout: Abstract base with event system, node/link management and
  eager validation
- IterativeLayout: Tick loop with a fixed iteration count and optional
  early exit
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import NodeIndex
from .types import (
    Event,
    EventType,
    Link,
    LinkLike,
    Node,
    NodeLike,
)
from .validation import coerce_link, validate_iterations, validate_nodes

logger = logging.getLogger(__name__)


class BaseLayout(ABC):
    """
    Abstract base class for layouts.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Node/link normalisation via properties
    - Eager validation into a NodeIndex and resolved link pairs

    Node objects passed in are kept as-is and updated in place; dicts and
    other objects are converted to new Node instances.

    Example:
        layout = SomeLayout(
            nodes=[{"id": "a", "x": 0.1, "y": 0.2}, {"id": "b", "x": 0.8, "y": 0.5}],
            links=[["a", "b"]],
        )
        layout.run()

        for node in layout.nodes:
            print(f"Node {node.id}: ({node.x}, {node.y})")
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            nodes: List of nodes (Node objects, dicts, or objects with id/x/y)
            links: List of links ([source, target] pairs, dicts or Link objects)
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        # Built by validate()
        self._index: Optional[NodeIndex] = None
        self._pairs: list[tuple[int, int]] = []
        self._positions: list[tuple[float, float]] = []

        if nodes is not None:
            self.nodes = nodes
        if links is not None:
            self.links = links

        # Register event callbacks
        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes."""
        return self._nodes

    @nodes.setter
    def nodes(self, value: Sequence[NodeLike]) -> None:
        """Set nodes from a sequence of Node objects, dicts, or objects."""
        self._nodes = []
        self._index = None
        for node_data in value:
            if isinstance(node_data, Node):
                self._nodes.append(node_data)
            elif isinstance(node_data, dict):
                self._nodes.append(Node(**node_data))
            else:
                # Generic object - copy identity and position
                self._nodes.append(
                    Node(
                        getattr(node_data, "id", None),
                        getattr(node_data, "x", None),
                        getattr(node_data, "y", None),
                    )
                )

    @property
    def links(self) -> list[Link]:
        """Get the list of links."""
        return self._links

    @links.setter
    def links(self, value: Sequence[LinkLike]) -> None:
        """
        Set links from Link objects, [source, target] pairs or dicts.

        Raises:
            InvalidLinkError: If a record is not a pair of ids
        """
        self._links = [coerce_link(link_data, i) for i, link_data in enumerate(value)]
        self._index = None

    @property
    def index(self) -> Optional[NodeIndex]:
        """Node id index built by the last validate() call."""
        return self._index

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate current configuration.

        Checks node ids are present and unique, positions are finite numbers
        and every link endpoint names a known node. Called automatically by
        run() before any position changes, but can be called early for
        fail-fast behavior.

        Returns:
            self (for chaining)

        Raises:
            InvalidNodeError: If a node has no id or a bad position.
            DuplicateNodeError: If two nodes share an id.
            InvalidLinkError: If any link references an unknown node id.
        """
        self._positions = validate_nodes(self._nodes)
        index = NodeIndex.from_nodes(self._nodes)
        self._pairs = index.resolve_links(self._links)
        self._index = index
        return self

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Implementations should validate first, then compute positions and
        fire the start/end events.

        Returns:
            self (for chaining)
        """
        pass


class IterativeLayout(BaseLayout):
    """
    Base class for iterative layout algorithms.

    Provides:
    - Iteration count management (zero is allowed and leaves positions as-is)
    - Tick-based iteration loop with optional early exit

    Subclasses implement tick(); it returns True to stop early.
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        iterations: int = 300,
    ) -> None:
        """
        Initialize iterative layout.

        Args:
            nodes: List of nodes
            links: List of links
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations: Number of iterations (>= 0)

        Raises:
            ValidationError: If iterations is negative
        """
        super().__init__(
            nodes=nodes,
            links=links,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )
        self._iterations: int = validate_iterations(iterations)
        self._iteration: int = 0

    @property
    def iterations(self) -> int:
        """Get the number of iterations."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set the number of iterations (>= 0)."""
        self._iterations = validate_iterations(value)

    @property
    def iteration(self) -> int:
        """Number of iterations completed by the last run."""
        return self._iteration

    @abstractmethod
    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True to stop before the iteration count is reached.
        """
        pass

    def kick(self) -> None:
        """Run tick() for the configured number of iterations."""
        for _ in range(self._iterations):
            if self.tick():
                logger.debug("Stopped early after %d iterations", self._iteration)
                break


__all__ = [
    "BaseLayout",
    "IterativeLayout",
]
