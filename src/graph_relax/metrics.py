"""
Layout quality metrics.

Provides quantitative measures of a layout:
- Edge length metrics: Total and average edge length (reported before and
  after a layout run)
- Edge length variance / uniformity: How evenly sized the edges are
- Edge crossings: Number of intersecting edges

All metrics resolve link endpoints by node id and work with the current
node positions. Links may be Link objects, [source, target] pairs or
dicts; a link naming an unknown id raises InvalidLinkError.
"""

from __future__ import annotations

import math
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

from .config import EPSILON
from .geometry import distance
from .graph import NodeIndex
from .types import LinkLike, Node
from .validation import coerce_link


class EdgeLengthMetrics(NamedTuple):
    """
    Aggregate edge lengths of a layout.

    A graph without edges yields zeros with ``edge_count == 0``; use
    ``has_edges`` to tell that case apart from a real zero-length layout.
    """

    total_edge_length: float
    average_edge_length: float
    edge_count: int

    @property
    def has_edges(self) -> bool:
        return self.edge_count > 0

    def report_lines(self, title: str) -> list[str]:
        """Render the console report block, numbers to 4 decimals."""
        if not self.has_edges:
            return [f"{title}", "- No edges: edge length metrics are undefined"]
        return [
            f"{title}",
            f"- Average edge length: {self.average_edge_length:.4f}",
            f"- Total edge length: {self.total_edge_length:.4f}",
        ]


def edge_length_metrics(
    nodes: Sequence[Node],
    links: Sequence[LinkLike],
    *,
    epsilon: float = EPSILON,
    index: Optional[NodeIndex] = None,
) -> EdgeLengthMetrics:
    """
    Compute total and average edge length.

    Each edge length is the epsilon-offset distance between its endpoints,
    so coincident endpoints contribute ``epsilon``.

    Args:
        nodes: List of positioned nodes
        links: Links or [source, target] pairs of node ids
        epsilon: Offset added to each distance
        index: Prebuilt id index; built from ``nodes`` if omitted

    Returns:
        EdgeLengthMetrics(total, average, edge_count)

    Raises:
        InvalidLinkError: If a link references an unknown node id
    """
    lengths = _get_edge_lengths(nodes, links, epsilon=epsilon, index=index)
    if not lengths:
        return EdgeLengthMetrics(0.0, 0.0, 0)

    total = math.fsum(lengths)
    return EdgeLengthMetrics(total, total / len(lengths), len(lengths))


def _resolve_pairs(links: Sequence[LinkLike], index: NodeIndex) -> List[Tuple[int, int]]:
    """Normalise link records and resolve them to node positions."""
    return index.resolve_links([coerce_link(link, i) for i, link in enumerate(links)])


def _get_edge_lengths(
    nodes: Sequence[Node],
    links: Sequence[LinkLike],
    *,
    epsilon: float = EPSILON,
    index: Optional[NodeIndex] = None,
) -> List[float]:
    """Get list of edge lengths, in link order."""
    if not links:
        return []
    if index is None:
        index = NodeIndex.from_nodes(nodes)

    lengths = []
    for s, t in _resolve_pairs(links, index):
        lengths.append(distance(nodes[s], nodes[t], epsilon))
    return lengths


def edge_length_variance(nodes: Sequence[Node], links: Sequence[LinkLike]) -> float:
    """
    Compute the variance of edge lengths.

    Lower variance indicates more uniform edge lengths.

    Returns:
        Variance of edge lengths (0.0 without edges)
    """
    lengths = _get_edge_lengths(nodes, links, epsilon=0.0)
    if not lengths:
        return 0.0

    mean = sum(lengths) / len(lengths)
    return sum((length - mean) ** 2 for length in lengths) / len(lengths)


def edge_length_uniformity(nodes: Sequence[Node], links: Sequence[LinkLike]) -> float:
    """
    Compute edge length uniformity (0-1, higher is better).

    Returns:
        1 - (std_dev / mean), clamped to [0, 1]
    """
    lengths = _get_edge_lengths(nodes, links, epsilon=0.0)
    if not lengths:
        return 1.0

    mean = sum(lengths) / len(lengths)
    if mean == 0:
        return 0.0

    variance = sum((length - mean) ** 2 for length in lengths) / len(lengths)
    std_dev = math.sqrt(variance)

    return max(0.0, min(1.0, 1.0 - std_dev / mean))


def edge_crossings(nodes: Sequence[Node], links: Sequence[LinkLike]) -> int:
    """
    Count the number of edge crossings in the layout.

    Two edges cross if their line segments intersect (excluding
    shared endpoints).

    Time Complexity: O(m^2) where m = number of edges
    """
    if len(links) < 2:
        return 0

    pairs = _resolve_pairs(links, NodeIndex.from_nodes(nodes))
    crossings = 0
    for i in range(len(pairs)):
        for j in range(i + 1, len(pairs)):
            if _edges_cross(nodes, pairs[i], pairs[j]):
                crossings += 1

    return crossings


def _edges_cross(nodes: Sequence[Node], e1: Tuple[int, int], e2: Tuple[int, int]) -> bool:
    """Check if two resolved edges cross (not at shared endpoints)."""
    s1, t1 = e1
    s2, t2 = e2

    # Skip if edges share an endpoint
    if s1 == s2 or s1 == t2 or t1 == s2 or t1 == t2:
        return False

    p1 = (nodes[s1].x, nodes[s1].y)
    p2 = (nodes[t1].x, nodes[t1].y)
    p3 = (nodes[s2].x, nodes[s2].y)
    p4 = (nodes[t2].x, nodes[t2].y)

    return _segments_intersect(p1, p2, p3, p4)


def _segments_intersect(
    p1: Tuple[float, float],
    p2: Tuple[float, float],
    p3: Tuple[float, float],
    p4: Tuple[float, float],
) -> bool:
    """Check if line segments (p1,p2) and (p3,p4) intersect."""

    def ccw(a: Tuple[float, float], b: Tuple[float, float], c: Tuple[float, float]) -> bool:
        return (c[1] - a[1]) * (b[0] - a[0]) > (b[1] - a[1]) * (c[0] - a[0])

    return ccw(p1, p3, p4) != ccw(p2, p3, p4) and ccw(p1, p2, p3) != ccw(p1, p2, p4)


def layout_quality_summary(nodes: Sequence[Node], links: Sequence[LinkLike]) -> dict[str, Any]:
    """
    Compute a summary of layout quality metrics.

    Returns:
        Dictionary with:
        - total_edge_length / average_edge_length / edge_count
        - edge_length_variance: Variance of edge lengths
        - edge_length_uniformity: Uniformity score (0-1)
        - edge_crossings: Number of edge crossings
    """
    lengths = edge_length_metrics(nodes, links)
    return {
        "total_edge_length": lengths.total_edge_length,
        "average_edge_length": lengths.average_edge_length,
        "edge_count": lengths.edge_count,
        "edge_length_variance": edge_length_variance(nodes, links),
        "edge_length_uniformity": edge_length_uniformity(nodes, links),
        "edge_crossings": edge_crossings(nodes, links),
    }


__all__ = [
    "EdgeLengthMetrics",
    "edge_length_metrics",
    "edge_length_variance",
    "edge_length_uniformity",
    "edge_crossings",
    "layout_quality_summary",
]
