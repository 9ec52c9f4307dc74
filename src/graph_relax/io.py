"""
Reading graphs from and writing layouts to JSON files.

Input:
- Node file: ``[{"id": 0, "x": 0.1, "y": 0.2}, ...]``
- Edge file: ``[[0, 1], [1, 2], ...]``
- Or one graph document: ``{"nodes": [...], "edges": [...]}``

Output:
- Position file: the node records with updated x/y, indented for reading.
- SVG preview: see export.to_svg.

Write failures raise GraphFormatError like read failures do.

Loaders only check the document shape; ids and positions are validated by
the layout before it runs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence, Union

from .export import to_json, to_svg
from .types import LinkLike, Node
from .validation import GraphFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> Any:
    """Read a JSON document, converting failures to GraphFormatError."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise GraphFormatError(f"{path}: cannot read file ({e.strerror or e})") from e
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"{path}: invalid JSON ({e})") from e


def _expect_list(data: Any, path: PathLike, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise GraphFormatError(f"{path}: expected a JSON array of {what}, got {type(data).__name__}")
    return data


def load_nodes(path: PathLike) -> list[dict[str, Any]]:
    """
    Load the node collection.

    Args:
        path: JSON file holding an array of node objects

    Returns:
        List of node records

    Raises:
        GraphFormatError: If the file is unreadable or not an array of objects
    """
    records = _expect_list(_read_json(path), path, "nodes")
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise GraphFormatError(f"{path}: node {i} must be an object, got {record!r}")
    logger.debug("Loaded %d nodes from %s", len(records), path)
    return records


def load_edges(path: PathLike) -> list[Any]:
    """
    Load the edge collection.

    Args:
        path: JSON file holding an array of ``[source, target]`` pairs

    Returns:
        List of edge records

    Raises:
        GraphFormatError: If the file is unreadable or not an array
    """
    records = _expect_list(_read_json(path), path, "edges")
    logger.debug("Loaded %d edges from %s", len(records), path)
    return records


def load_graph(path: PathLike) -> tuple[list[dict[str, Any]], list[Any]]:
    """
    Load nodes and edges from a single graph document.

    The document is an object with a ``nodes`` array and an ``edges`` array
    (``links`` is accepted as an alias).

    Returns:
        (node records, edge records)

    Raises:
        GraphFormatError: If the document does not have that shape
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise GraphFormatError(f"{path}: expected a JSON object with nodes and edges")
    if "nodes" not in data:
        raise GraphFormatError(f"{path}: missing 'nodes'")
    nodes = _expect_list(data["nodes"], path, "nodes")
    edges = _expect_list(data.get("edges", data.get("links", [])), path, "edges")
    logger.debug("Loaded %d nodes and %d edges from %s", len(nodes), len(edges), path)
    return nodes, edges


def _write_text(path: PathLike, text: str) -> None:
    """Write a text file, converting failures to GraphFormatError."""
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise GraphFormatError(f"{path}: cannot write file ({e.strerror or e})") from e


def write_positions(path: PathLike, nodes: Sequence[Node], *, indent: int = 2) -> None:
    """
    Write the node collection with its current positions.

    Raises:
        GraphFormatError: If the file cannot be written
    """
    _write_text(path, to_json(nodes, indent=indent) + "\n")
    logger.debug("Wrote %d node positions to %s", len(nodes), path)


def write_svg(path: PathLike, nodes: Sequence[Node], links: Sequence[LinkLike]) -> None:
    """
    Write an SVG preview of the layout.

    Raises:
        GraphFormatError: If the file cannot be written
    """
    _write_text(path, to_svg(nodes, links))
    logger.debug("Wrote SVG preview to %s", path)


__all__ = [
    "load_nodes",
    "load_edges",
    "load_graph",
    "write_positions",
    "write_svg",
]
