"""
Default simulation parameters.

These are the only tunable knobs of a layout run. They are used as the
defaults of FruchtermanReingoldLayout and of the command line flags.
"""

from __future__ import annotations

# Number of annealing iterations. The simulation always runs the full count
# unless a convergence threshold is explicitly requested.
ITERATIONS: int = 300

# Multiplicative temperature decay applied once per iteration.
COOLING: float = 0.95

# Initial cap on per-iteration node displacement (in unit-square units).
INITIAL_TEMPERATURE: float = 0.1

# Added to every distance so coincident nodes never divide by zero.
EPSILON: float = 1e-6

__all__ = [
    "ITERATIONS",
    "COOLING",
    "INITIAL_TEMPERATURE",
    "EPSILON",
]
