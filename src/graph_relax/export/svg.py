"""
SVG export for unit-square layouts.

Scales positions from [0, 1] x [0, 1] onto a pixel canvas and renders
straight edges, circular nodes and optional id labels. Intended as a quick
visual check of a layout result.
"""

from __future__ import annotations

from typing import Optional, Sequence
from xml.sax.saxutils import escape

from ..graph import NodeIndex
from ..types import LinkLike, Node
from ..validation import coerce_link


def to_svg(
    nodes: Sequence[Node],
    links: Sequence[LinkLike],
    *,
    size: tuple[float, float] = (600.0, 600.0),
    node_radius: float = 8.0,
    node_color: str = "#4a90d9",
    node_stroke: str = "#2c5aa0",
    node_stroke_width: float = 1.5,
    edge_color: str = "#666666",
    edge_width: float = 1.5,
    show_labels: bool = True,
    label_color: str = "#000000",
    font_size: float = 10.0,
    font_family: str = "sans-serif",
    padding: float = 20.0,
    background: Optional[str] = None,
) -> str:
    """
    Export a unit-square layout to SVG format.

    Args:
        nodes: Positioned nodes (coordinates in [0, 1])
        links: Links or [source, target] pairs of node ids
        size: Drawing area in pixels as (width, height), excluding padding
        node_radius: Node circle radius (default 8)
        node_color: Fill color for nodes (default blue)
        node_stroke: Stroke color for nodes (default darker blue)
        node_stroke_width: Stroke width for nodes
        edge_color: Color for edges (default gray)
        edge_width: Width for edges
        show_labels: Whether to draw node ids next to nodes
        label_color: Color for labels
        font_size: Font size for labels
        font_family: Font family for labels
        padding: Margin around the drawing area
        background: Background color (default None for transparent)

    Returns:
        SVG string representation of the graph

    Raises:
        InvalidLinkError: If a link references an unknown node id
    """
    draw_w, draw_h = float(size[0]), float(size[1])
    width = draw_w + 2 * padding
    height = draw_h + 2 * padding

    def project(node: Node) -> tuple[float, float]:
        return padding + node.x * draw_w, padding + node.y * draw_h

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    if not nodes:
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    index = NodeIndex.from_nodes(nodes)

    svg_parts.append('  <g class="edges">')
    pairs = index.resolve_links([coerce_link(link, i) for i, link in enumerate(links)])
    for s, t in pairs:
        x1, y1 = project(nodes[s])
        x2, y2 = project(nodes[t])
        svg_parts.append(
            f'    <line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" '
            f'stroke="{escape(edge_color)}" stroke-width="{edge_width}"/>'
        )
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="nodes">')
    for node in nodes:
        cx, cy = project(node)
        svg_parts.append(
            f'    <circle cx="{cx:.2f}" cy="{cy:.2f}" r="{node_radius}" '
            f'fill="{escape(node_color)}" stroke="{escape(node_stroke)}" '
            f'stroke-width="{node_stroke_width}"/>'
        )
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for node in nodes:
            cx, cy = project(node)
            svg_parts.append(
                f'    <text x="{cx + node_radius + 2:.2f}" y="{cy - node_radius:.2f}" '
                f'fill="{escape(label_color)}" font-size="{font_size}" '
                f'font-family="{escape(font_family)}">{escape(str(node.id))}</text>'
            )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


__all__ = ["to_svg"]
