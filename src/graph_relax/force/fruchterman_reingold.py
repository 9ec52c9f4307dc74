"""
Fruchterman-Reingold force-directed layout in the unit square.

Based on the paper:
"Graph Drawing by Force-directed Placement" by Fruchterman and Reingold (1991)

The algorithm simulates a physical system where:
- All nodes repel each other (like electrical charges)
- Connected nodes attract each other (like springs)
- A "temperature" caps movement and decreases over time

This variant is fully deterministic: there is no random initialisation, the
input positions are the starting point, and every iteration is run unless a
convergence threshold is explicitly requested. Positions are clamped to
[0, 1] x [0, 1] after every step.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Optional, Sequence

import numpy as np

from ..base import IterativeLayout
from ..config import COOLING, EPSILON, INITIAL_TEMPERATURE, ITERATIONS
from ..geometry import distance_xy
from ..types import (
    Event,
    EventType,
    LinkLike,
    NodeLike,
)
from ..validation import ValidationError, validate_cooling_factor, validate_positive

logger = logging.getLogger(__name__)


class FruchtermanReingoldLayout(IterativeLayout):
    """
    Fruchterman-Reingold force-directed graph layout.

    This algorithm positions nodes by simulating a physical system where:
    - All node pairs have repulsive forces k^2 / d
    - Connected node pairs have attractive forces d^2 / k
    - Movement per iteration is capped by a temperature that decays
      geometrically (temperature *= cooling_factor)

    with k = sqrt(1 / node_count) unless ``optimal_distance`` is given.

    Example:
        layout = FruchtermanReingoldLayout(
            nodes=[
                {"id": 0, "x": 0.1, "y": 0.1},
                {"id": 1, "x": 0.5, "y": 0.5},
                {"id": 2, "x": 0.9, "y": 0.9},
            ],
            links=[[0, 1], [1, 2]],
        )
        layout.run()

        for node in layout.nodes:
            print(f"Node {node.id}: ({node.x:.4f}, {node.y:.4f})")
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # IterativeLayout parameters
        iterations: int = ITERATIONS,
        # FruchtermanReingold-specific parameters
        temperature: float = INITIAL_TEMPERATURE,
        cooling_factor: float = COOLING,
        epsilon: float = EPSILON,
        optimal_distance: Optional[float] = None,
        convergence_threshold: Optional[float] = None,
        vectorized: bool = False,
    ) -> None:
        """
        Initialize Fruchterman-Reingold layout.

        Args:
            nodes: List of nodes with ids and initial positions
            links: List of links between node ids
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations: Number of iterations. Default 300.
            temperature: Initial cap on per-iteration displacement. Default 0.1.
            cooling_factor: Temperature decay per iteration, in (0, 1]. Default 0.95.
            epsilon: Offset added to every distance. Default 1e-6.
            optimal_distance: Ideal edge length k. If None, sqrt(1 / node_count).
            convergence_threshold: If set, stop once the summed displacement
                of an iteration falls below this value. Default None (always
                run every iteration).
            vectorized: Compute repulsion with numpy broadcasting instead of
                the pairwise loop. Same forces, O(n^2) memory.

        Raises:
            ValidationError: If a parameter is out of range
        """
        super().__init__(
            nodes=nodes,
            links=links,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
            iterations=iterations,
        )

        self._temperature: float = validate_positive("temperature", temperature)
        self._cooling_factor: float = validate_cooling_factor(cooling_factor)
        self._epsilon: float = validate_positive("epsilon", epsilon)
        self._optimal_distance: Optional[float] = (
            validate_positive("optimal_distance", optimal_distance)
            if optimal_distance is not None
            else None
        )
        self._convergence_threshold: Optional[float] = None
        self.convergence_threshold = convergence_threshold
        self._vectorized: bool = bool(vectorized)

        # Internal state, set up by run()
        self._current_temperature: float = self._temperature
        self._k: float = 0.0
        self._pos_x: Optional[np.ndarray] = None
        self._pos_y: Optional[np.ndarray] = None
        self._disp_x: Optional[np.ndarray] = None
        self._disp_y: Optional[np.ndarray] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def temperature(self) -> float:
        """Get initial temperature."""
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        """Set initial temperature (must be positive)."""
        self._temperature = validate_positive("temperature", value)

    @property
    def current_temperature(self) -> float:
        """Temperature after the most recent iteration."""
        return self._current_temperature

    @property
    def cooling_factor(self) -> float:
        """Get cooling factor (temperature decay per iteration)."""
        return self._cooling_factor

    @cooling_factor.setter
    def cooling_factor(self, value: float) -> None:
        """Set cooling factor, in (0, 1]."""
        self._cooling_factor = validate_cooling_factor(value)

    @property
    def epsilon(self) -> float:
        """Get the distance offset."""
        return self._epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        """Set the distance offset (must be positive)."""
        self._epsilon = validate_positive("epsilon", value)

    @property
    def optimal_distance(self) -> float:
        """Get ideal edge length k."""
        if self._optimal_distance is not None:
            return self._optimal_distance
        return self._compute_optimal_distance()

    @optimal_distance.setter
    def optimal_distance(self, value: Optional[float]) -> None:
        """Set ideal edge length; None derives it from the node count."""
        self._optimal_distance = (
            validate_positive("optimal_distance", value) if value is not None else None
        )

    @property
    def convergence_threshold(self) -> Optional[float]:
        """Get the early-exit displacement threshold (None = disabled)."""
        return self._convergence_threshold

    @convergence_threshold.setter
    def convergence_threshold(self, value: Optional[float]) -> None:
        """Set the early-exit displacement threshold."""
        if value is None:
            self._convergence_threshold = None
            return
        value = float(value)
        if not math.isfinite(value) or value < 0:
            raise ValidationError(f"convergence_threshold must be >= 0, got {value}")
        self._convergence_threshold = value

    @property
    def vectorized(self) -> bool:
        """Get whether repulsion uses numpy broadcasting."""
        return self._vectorized

    @vectorized.setter
    def vectorized(self, value: bool) -> None:
        """Enable/disable numpy broadcasting for repulsion."""
        self._vectorized = bool(value)

    # -------------------------------------------------------------------------
    # Layout Implementation
    # -------------------------------------------------------------------------

    def _compute_optimal_distance(self) -> float:
        """Ideal edge length for the unit square: sqrt(1 / n)."""
        n = max(1, len(self._nodes))
        return math.sqrt(1.0 / n)

    def run(self, **kwargs: Any) -> "FruchtermanReingoldLayout":
        """
        Run the layout algorithm.

        Validates the whole graph first; a malformed node or a dangling link
        raises before any position is modified. Node positions are updated in
        place when the iterations are done.

        Returns:
            self for chaining

        Raises:
            InvalidNodeError: If a node has no id or a bad position
            DuplicateNodeError: If two nodes share an id
            InvalidLinkError: If a link names an unknown node id
        """
        self.validate()

        n = len(self._nodes)
        self._iteration = 0
        self._current_temperature = self._temperature

        if n == 0:
            logger.warning("Layout has no nodes; nothing to do")
            self.trigger({"type": EventType.start, "iteration": 0, "temperature": self._temperature})
            self.trigger({"type": EventType.end, "iteration": 0, "temperature": self._temperature})
            return self

        self._k = self.optimal_distance

        self._pos_x = np.array([p[0] for p in self._positions], dtype=np.float64)
        self._pos_y = np.array([p[1] for p in self._positions], dtype=np.float64)
        self._disp_x = np.zeros(n, dtype=np.float64)
        self._disp_y = np.zeros(n, dtype=np.float64)

        outside = int(
            np.count_nonzero(
                (self._pos_x < 0) | (self._pos_x > 1) | (self._pos_y < 0) | (self._pos_y > 1)
            )
        )
        if outside:
            logger.warning("%d node(s) start outside the unit square and will be clamped", outside)

        logger.debug(
            "Running layout: nodes=%d links=%d iterations=%d k=%.6f temperature=%g cooling=%g",
            n,
            len(self._links),
            self._iterations,
            self._k,
            self._temperature,
            self._cooling_factor,
        )

        self.trigger(
            {"type": EventType.start, "iteration": 0, "temperature": self._current_temperature}
        )

        self.kick()

        # Sync positions back to nodes
        for i, node in enumerate(self._nodes):
            node.x = float(self._pos_x[i])
            node.y = float(self._pos_y[i])

        logger.debug(
            "Layout finished after %d iterations, temperature=%g",
            self._iteration,
            self._current_temperature,
        )

        self.trigger(
            {
                "type": EventType.end,
                "iteration": self._iteration,
                "temperature": self._current_temperature,
            }
        )

        return self

    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True if the convergence threshold was reached, False otherwise.
        """
        # These are set in run() before tick() is called
        assert self._disp_x is not None
        assert self._disp_y is not None

        k = self._k
        k_sq = k * k

        # Reset displacements
        self._disp_x.fill(0.0)
        self._disp_y.fill(0.0)

        # Calculate repulsive forces between all pairs
        if self._vectorized:
            self._compute_repulsive_vectorized(k_sq)
        else:
            self._compute_repulsive_naive(k_sq)

        # Calculate attractive forces along edges
        self._compute_attractive(k)

        # Apply displacements, limited by temperature
        max_step, total_step = self._apply_displacements(self._current_temperature)

        # Cool down
        self._current_temperature *= self._cooling_factor
        self._iteration += 1

        self.trigger(
            {
                "type": EventType.tick,
                "iteration": self._iteration,
                "temperature": self._current_temperature,
                "max_displacement": max_step,
                "total_displacement": total_step,
            }
        )

        if self._convergence_threshold is not None and total_step < self._convergence_threshold:
            return True
        return False

    def _compute_repulsive_naive(self, k_sq: float) -> None:
        """Compute repulsive forces using O(n^2) pairwise calculation."""
        assert self._pos_x is not None and self._pos_y is not None
        assert self._disp_x is not None and self._disp_y is not None
        pos_x, pos_y = self._pos_x, self._pos_y
        disp_x, disp_y = self._disp_x, self._disp_y
        eps = self._epsilon
        n = len(pos_x)

        for i in range(n):
            xi = pos_x[i]
            yi = pos_y[i]
            for j in range(i + 1, n):
                dx = xi - pos_x[j]
                dy = yi - pos_y[j]
                dist = distance_xy(xi, yi, pos_x[j], pos_y[j], eps)

                # Repulsive force: f_r = k^2 / d
                force = k_sq / dist
                fx = (dx / dist) * force
                fy = (dy / dist) * force

                disp_x[i] += fx
                disp_y[i] += fy
                disp_x[j] -= fx
                disp_y[j] -= fy

    def _compute_repulsive_vectorized(self, k_sq: float) -> None:
        """Compute the same pairwise repulsion with numpy broadcasting."""
        assert self._pos_x is not None and self._pos_y is not None
        assert self._disp_x is not None and self._disp_y is not None
        dx = self._pos_x[:, np.newaxis] - self._pos_x[np.newaxis, :]
        dy = self._pos_y[:, np.newaxis] - self._pos_y[np.newaxis, :]
        dist = np.sqrt(dx * dx + dy * dy) + self._epsilon

        # The diagonal has dx = dy = 0 and contributes nothing
        force = k_sq / dist
        self._disp_x += ((dx / dist) * force).sum(axis=1)
        self._disp_y += ((dy / dist) * force).sum(axis=1)

    def _compute_attractive(self, k: float) -> None:
        """Pull the endpoints of every link toward each other."""
        assert self._pos_x is not None and self._pos_y is not None
        assert self._disp_x is not None and self._disp_y is not None
        pos_x, pos_y = self._pos_x, self._pos_y
        disp_x, disp_y = self._disp_x, self._disp_y
        eps = self._epsilon

        for src, tgt in self._pairs:
            dx = pos_x[src] - pos_x[tgt]
            dy = pos_y[src] - pos_y[tgt]
            dist = distance_xy(pos_x[src], pos_y[src], pos_x[tgt], pos_y[tgt], eps)

            # Attractive force: f_a = d^2 / k
            force = dist * dist / k
            fx = (dx / dist) * force
            fy = (dy / dist) * force

            disp_x[src] -= fx
            disp_y[src] -= fy
            disp_x[tgt] += fx
            disp_y[tgt] += fy

    def _apply_displacements(self, temperature: float) -> tuple[float, float]:
        """
        Move every node along its displacement, capped at ``temperature``,
        then clamp it into the unit square.

        Returns:
            (largest step applied, sum of all steps applied)
        """
        assert self._pos_x is not None and self._pos_y is not None
        assert self._disp_x is not None and self._disp_y is not None
        pos_x, pos_y = self._pos_x, self._pos_y
        disp_x, disp_y = self._disp_x, self._disp_y

        max_step = 0.0
        total_step = 0.0
        for i in range(len(pos_x)):
            ddx = float(disp_x[i])
            ddy = float(disp_y[i])
            disp_len = math.sqrt(ddx * ddx + ddy * ddy)

            if disp_len > 0:
                step = min(disp_len, temperature)
                scale = step / disp_len
                pos_x[i] += ddx * scale
                pos_y[i] += ddy * scale
                max_step = max(max_step, step)
                total_step += step

            # Hard boundary: the layout lives in the unit square
            pos_x[i] = max(0.0, min(1.0, float(pos_x[i])))
            pos_y[i] = max(0.0, min(1.0, float(pos_y[i])))

        return max_step, total_step


__all__ = ["FruchtermanReingoldLayout"]
