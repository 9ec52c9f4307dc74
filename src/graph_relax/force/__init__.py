"""
Force-directed graph layout.

- FruchtermanReingold: Repulsion between all pairs, attraction along edges,
  annealed step size, clamped to the unit square
"""

from .fruchterman_reingold import FruchtermanReingoldLayout

__all__ = [
    "FruchtermanReingoldLayout",
]
