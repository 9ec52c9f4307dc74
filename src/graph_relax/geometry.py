"""Euclidean distance between node positions."""

from __future__ import annotations

import math
from typing import Any

from .config import EPSILON


def distance_xy(x1: float, y1: float, x2: float, y2: float, epsilon: float = EPSILON) -> float:
    """Distance between two coordinate pairs, offset by ``epsilon``."""
    dx = x1 - x2
    dy = y1 - y2
    return math.sqrt(dx * dx + dy * dy) + epsilon


def distance(a: Any, b: Any, epsilon: float = EPSILON) -> float:
    """
    Compute the distance between two positioned objects.

    Args:
        a: Object with ``x`` and ``y`` attributes (e.g. a Node)
        b: Object with ``x`` and ``y`` attributes
        epsilon: Small constant added to the result

    Returns:
        ``sqrt(dx^2 + dy^2) + epsilon``, always strictly positive
    """
    return distance_xy(a.x, a.y, b.x, b.y, epsilon)


__all__ = ["distance", "distance_xy"]
