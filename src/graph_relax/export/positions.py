"""
JSON export for laid-out nodes.

Produces the human-readable position document handed to the writer: the
node collection in input order, each record with its id, updated x/y and
any extra fields it came with.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from ..types import Node


def node_records(nodes: Sequence[Node]) -> list[dict[str, Any]]:
    """Convert nodes to plain records, preserving order."""
    return [node.to_dict() for node in nodes]


def to_json(nodes: Sequence[Node], *, indent: Optional[int] = 2) -> str:
    """
    Export node positions to a JSON array.

    Args:
        nodes: Nodes after a layout run
        indent: Indentation for pretty printing (default 2, None for compact)

    Returns:
        JSON string: ``[{"id": ..., "x": ..., "y": ...}, ...]``
    """
    return json.dumps(node_records(nodes), indent=indent)


__all__ = ["node_records", "to_json"]
