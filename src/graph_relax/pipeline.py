"""
One complete layout run: measure, relax, measure again.

    nodes, edges = load_nodes(...), load_edges(...)
    result = relax(nodes, edges)
    print("\n".join(result.before.report_lines("Initial graph metrics:")))
    write_positions("positions.json", result.nodes)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from .force import FruchtermanReingoldLayout
from .metrics import EdgeLengthMetrics, edge_length_metrics
from .types import LinkLike, Node, NodeLike
from .validation import EmptyGraphError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelaxResult:
    """Outcome of relax(): the finished layout and the metrics around it."""

    layout: FruchtermanReingoldLayout
    before: EdgeLengthMetrics
    after: EdgeLengthMetrics

    @property
    def nodes(self) -> list[Node]:
        return self.layout.nodes


def relax(
    nodes: Sequence[NodeLike],
    links: Sequence[LinkLike],
    **layout_options: Any,
) -> RelaxResult:
    """
    Validate a graph, lay it out and report edge lengths before and after.

    Args:
        nodes: Node records with ids and initial positions
        links: ``[source, target]`` pairs (or Link objects / dicts)
        **layout_options: Passed to FruchtermanReingoldLayout (iterations,
            temperature, cooling_factor, epsilon, ...)

    Returns:
        RelaxResult with the layout and the before/after metrics

    Raises:
        EmptyGraphError: If there are no nodes
        ValidationError: If a node or link is malformed; raised before any
            position is modified
    """
    if not nodes:
        raise EmptyGraphError("Graph has no nodes to lay out")

    layout = FruchtermanReingoldLayout(nodes=nodes, links=links, **layout_options)
    layout.validate()
    if not layout.links:
        logger.warning("Graph has no edges; only repulsion will act on the nodes")

    before = edge_length_metrics(layout.nodes, layout.links, epsilon=layout.epsilon, index=layout.index)
    layout.run()
    after = edge_length_metrics(layout.nodes, layout.links, epsilon=layout.epsilon, index=layout.index)

    logger.info(
        "Average edge length %.4f -> %.4f over %d iterations",
        before.average_edge_length,
        after.average_edge_length,
        layout.iteration,
    )
    return RelaxResult(layout=layout, before=before, after=after)


__all__ = ["RelaxResult", "relax"]
