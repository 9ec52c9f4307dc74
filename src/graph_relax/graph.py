"""
Node id index.

Links name their endpoints by node id, while the simulation works on
arrays aligned with the node list. NodeIndex is built once per run and maps
each id to its dense position so links can be resolved up front.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterator, Mapping, Sequence

from .types import Link, Node
from .validation import DuplicateNodeError, InvalidLinkError, InvalidNodeError


class NodeIndex(Mapping[Hashable, int]):
    """
    Read-only mapping from node id to position in the node list.

    Example:
        index = NodeIndex.from_nodes(nodes)
        pairs = index.resolve_links(links)   # [(0, 1), (1, 2)]
        node = nodes[index["a"]]
    """

    def __init__(self, positions: dict[Hashable, int]) -> None:
        self._positions = positions

    @classmethod
    def from_nodes(cls, nodes: Sequence[Node]) -> NodeIndex:
        """
        Build the index from a node sequence.

        Raises:
            InvalidNodeError: If a node has no id
            DuplicateNodeError: If two nodes share an id
        """
        positions: dict[Hashable, int] = {}
        for i, node in enumerate(nodes):
            if node.id is None:
                raise InvalidNodeError(f"Node at position {i}: missing id")
            if node.id in positions:
                raise DuplicateNodeError(f"Duplicate node id {node.id!r}")
            positions[node.id] = i
        return cls(positions)

    def __getitem__(self, node_id: Hashable) -> int:
        return self._positions[node_id]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def resolve(self, link: Link, position: Any = None) -> tuple[int, int]:
        """
        Resolve a link's endpoint ids to node positions.

        Args:
            link: Link to resolve
            position: Link position in its list, used in the error message

        Raises:
            InvalidLinkError: If either endpoint id is unknown
        """
        label = "Link" if position is None else f"Link {position}"
        try:
            src = self._positions[link.source]
        except (KeyError, TypeError):
            raise InvalidLinkError(
                f"{label}: source {link.source!r} is not a known node id"
            ) from None
        try:
            tgt = self._positions[link.target]
        except (KeyError, TypeError):
            raise InvalidLinkError(
                f"{label}: target {link.target!r} is not a known node id"
            ) from None
        return src, tgt

    def resolve_links(self, links: Sequence[Link]) -> list[tuple[int, int]]:
        """Resolve every link, failing on the first dangling id."""
        return [self.resolve(link, i) for i, link in enumerate(links)]

    def __repr__(self) -> str:
        return f"NodeIndex(size={len(self._positions)})"


__all__ = ["NodeIndex"]
