"""
Export functionality for layout results.

This module provides functions to export laid-out graphs:
- JSON: The node collection with updated positions (the position document)
- SVG: A preview image of the unit-square layout

Example usage:
    from graph_relax import FruchtermanReingoldLayout
    from graph_relax.export import to_json, to_svg

    layout = FruchtermanReingoldLayout(
        nodes=[{"id": i, "x": i / 4, "y": i / 4} for i in range(5)],
        links=[[i, (i + 1) % 5] for i in range(5)],
    ).run()

    with open("positions.json", "w") as f:
        f.write(to_json(layout.nodes))

    with open("graph.svg", "w") as f:
        f.write(to_svg(layout.nodes, layout.links))
"""

from .positions import node_records, to_json
from .svg import to_svg

__all__ = [
    "node_records",
    "to_json",
    "to_svg",
]
