"""
graph-relax: Force-directed layout of graphs in the unit square.

This package turns a graph with initial node positions into a relaxed 2D
layout using a deterministic Fruchterman-Reingold simulation, and measures
edge lengths before and after.

Main pieces:
- force: FruchtermanReingoldLayout, the simulation engine
- metrics: Total/average edge length and other layout quality measures
- io / export: JSON input and output, SVG preview
- pipeline: relax(), one measured layout run
"""

__version__ = "0.1.0"

# Base classes for building layouts
from .base import BaseLayout, IterativeLayout

# Default parameters
from .config import COOLING, EPSILON, INITIAL_TEMPERATURE, ITERATIONS

# Force-directed layout
from .force import FruchtermanReingoldLayout
from .geometry import distance, distance_xy
from .graph import NodeIndex

# Metrics for layout quality evaluation
from .metrics import (
    EdgeLengthMetrics,
    edge_crossings,
    edge_length_metrics,
    edge_length_uniformity,
    edge_length_variance,
    layout_quality_summary,
)
from .pipeline import RelaxResult, relax
from .types import (
    Event,
    EventType,
    Link,
    LinkLike,
    Node,
    NodeLike,
)

# Validation utilities
from .validation import (
    DuplicateNodeError,
    EmptyGraphError,
    GraphFormatError,
    InvalidLinkError,
    InvalidNodeError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Link",
    "EventType",
    "Event",
    "NodeLike",
    "LinkLike",
    "NodeIndex",
    # Defaults
    "ITERATIONS",
    "COOLING",
    "INITIAL_TEMPERATURE",
    "EPSILON",
    # Base classes
    "BaseLayout",
    "IterativeLayout",
    # Force-directed layout
    "FruchtermanReingoldLayout",
    # Geometry
    "distance",
    "distance_xy",
    # Metrics
    "EdgeLengthMetrics",
    "edge_length_metrics",
    "edge_length_variance",
    "edge_length_uniformity",
    "edge_crossings",
    "layout_quality_summary",
    # Pipeline
    "RelaxResult",
    "relax",
    # Validation
    "ValidationError",
    "InvalidNodeError",
    "DuplicateNodeError",
    "InvalidLinkError",
    "EmptyGraphError",
    "GraphFormatError",
]
