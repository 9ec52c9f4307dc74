"""
Input validation utilities for the layout engine.

Provides centralized validation functions for nodes, links and simulation
parameters. Raises descriptive exceptions on invalid input. Everything here
runs before a simulation starts, so a rejected graph is never partially
laid out.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Sequence

from .types import Link, Node


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidNodeError(ValidationError):
    """Raised when a node is malformed (missing id or bad position)."""

    pass


class DuplicateNodeError(InvalidNodeError):
    """Raised when two nodes share the same id."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when a link is malformed or references an unknown node."""

    pass


class EmptyGraphError(ValidationError):
    """Raised when a graph without nodes is given where one is required."""

    pass


class GraphFormatError(ValidationError):
    """Raised when an input document cannot be read as a graph."""

    pass


def validate_coordinate(node_id: Any, name: str, value: Any) -> float:
    """
    Validate a single position coordinate.

    Args:
        node_id: Id of the node (for the error message)
        name: Coordinate name, "x" or "y"
        value: Raw coordinate value

    Returns:
        The coordinate as a float

    Raises:
        InvalidNodeError: If the value is missing, non-numeric or not finite
    """
    if value is None:
        raise InvalidNodeError(f"Node {node_id!r}: missing {name} coordinate")
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidNodeError(
            f"Node {node_id!r}: {name} coordinate must be a number, got {value!r}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidNodeError(f"Node {node_id!r}: {name} coordinate must be finite, got {value}")
    return value


def validate_nodes(nodes: Sequence[Node]) -> list[tuple[float, float]]:
    """
    Validate node ids and positions.

    Nodes are not modified.

    Args:
        nodes: Sequence of Node objects

    Returns:
        The validated (x, y) positions as floats, in node order

    Raises:
        InvalidNodeError: If a node has no id or an invalid position
        DuplicateNodeError: If two nodes share an id
    """
    seen: set[Any] = set()
    positions: list[tuple[float, float]] = []
    for i, node in enumerate(nodes):
        if node.id is None:
            raise InvalidNodeError(f"Node at position {i}: missing id")
        try:
            duplicate = node.id in seen
        except TypeError:
            raise InvalidNodeError(
                f"Node at position {i}: id {node.id!r} is not hashable"
            ) from None
        if duplicate:
            raise DuplicateNodeError(f"Duplicate node id {node.id!r}")
        seen.add(node.id)

        x = validate_coordinate(node.id, "x", node.x)
        y = validate_coordinate(node.id, "y", node.y)
        positions.append((x, y))

    return positions


def coerce_link(link_data: Any, position: int) -> Link:
    """
    Convert a link record into a Link.

    Accepts Link objects, ``[source, target]`` pairs, dicts with
    ``source``/``target`` keys, and objects with those attributes.

    Raises:
        InvalidLinkError: If the record is not a pair of ids
    """
    if isinstance(link_data, Link):
        return link_data
    if isinstance(link_data, dict):
        source = link_data.get("source")
        target = link_data.get("target")
    elif isinstance(link_data, (list, tuple)):
        if len(link_data) != 2:
            raise InvalidLinkError(
                f"Link {position}: expected [source, target], got {len(link_data)} elements"
            )
        source, target = link_data
    else:
        source = getattr(link_data, "source", None)
        target = getattr(link_data, "target", None)

    if source is None or target is None:
        raise InvalidLinkError(f"Link {position}: source and target are required, got {link_data!r}")
    return Link(source, target)


def validate_iterations(iterations: int) -> int:
    """
    Validate iteration count is non-negative.

    Args:
        iterations: Number of iterations

    Returns:
        Validated iteration count

    Raises:
        ValidationError: If iterations < 0
    """
    iterations = int(iterations)
    if iterations < 0:
        raise ValidationError(f"iterations must be >= 0, got {iterations}")
    return iterations


def validate_cooling_factor(cooling_factor: float) -> float:
    """
    Validate cooling factor is in (0, 1].

    Raises:
        ValidationError: If the factor is outside (0, 1]
    """
    cooling_factor = float(cooling_factor)
    if not 0 < cooling_factor <= 1:
        raise ValidationError(f"cooling_factor must be in (0, 1], got {cooling_factor}")
    return cooling_factor


def validate_positive(name: str, value: float) -> float:
    """
    Validate a parameter is a finite, strictly positive number.

    Raises:
        ValidationError: If the value is not > 0 or not finite
    """
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


__all__ = [
    "ValidationError",
    "InvalidNodeError",
    "DuplicateNodeError",
    "InvalidLinkError",
    "EmptyGraphError",
    "GraphFormatError",
    "validate_coordinate",
    "validate_nodes",
    "coerce_link",
    "validate_iterations",
    "validate_cooling_factor",
    "validate_positive",
]
