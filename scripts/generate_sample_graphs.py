#!/usr/bin/env python3
"""
Generate sample graphs with initial positions.

Writes node/edge file pairs in the format read by graph-relax:
    <name>_nodes.json  [{"id": 0, "x": 0.42, "y": 0.17}, ...]
    <name>_edges.json  [[0, 1], [1, 2], ...]

Initial positions are drawn uniformly from the unit square with a fixed
seed, so every run produces the same files.

Usage:
    python scripts/generate_sample_graphs.py [--output-dir data] [--seed 42]
"""

from __future__ import annotations

import argparse
import json
import random
from pathlib import Path


def random_positions(n: int, rng: random.Random) -> list[dict]:
    """Node records with ids 0..n-1 at random positions."""
    return [{"id": i, "x": round(rng.random(), 6), "y": round(rng.random(), 6)} for i in range(n)]


def generate_erdos_renyi(n: int, p: float, rng: random.Random) -> tuple[list[dict], list[list[int]]]:
    """
    Generate Erdős-Rényi random graph G(n, p).

    Each possible edge exists independently with probability p.
    """
    nodes = random_positions(n, rng)
    edges = [[i, j] for i in range(n) for j in range(i + 1, n) if rng.random() < p]
    return nodes, edges


def generate_grid(rows: int, cols: int, rng: random.Random) -> tuple[list[dict], list[list[int]]]:
    """Generate a 2D grid graph with scrambled initial positions."""
    nodes = random_positions(rows * cols, rng)
    edges = []
    for i in range(rows):
        for j in range(cols):
            node = i * cols + j
            if j < cols - 1:
                edges.append([node, node + 1])
            if i < rows - 1:
                edges.append([node, node + cols])
    return nodes, edges


def generate_path(n: int, rng: random.Random) -> tuple[list[dict], list[list[int]]]:
    """Generate a simple path 0 - 1 - ... - n-1."""
    return random_positions(n, rng), [[i, i + 1] for i in range(n - 1)]


def save_pair(name: str, nodes: list[dict], edges: list[list[int]], output_dir: Path) -> None:
    with open(output_dir / f"{name}_nodes.json", "w") as f:
        json.dump(nodes, f, indent=2)
    with open(output_dir / f"{name}_edges.json", "w") as f:
        json.dump(edges, f)
    print(f"  {name}: {len(nodes)} nodes, {len(edges)} edges")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate sample graphs for graph-relax")
    parser.add_argument("--output-dir", type=Path, default=Path("data"), help="Where to write files")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)
    rng = random.Random(args.seed)

    print(f"Writing sample graphs to {args.output_dir}/")
    save_pair("path_10", *generate_path(10, rng), args.output_dir)
    save_pair("grid_5x5", *generate_grid(5, 5, rng), args.output_dir)
    save_pair("er_50", *generate_erdos_renyi(50, 0.08, rng), args.output_dir)
    save_pair("er_200", *generate_erdos_renyi(200, 0.02, rng), args.output_dir)


if __name__ == "__main__":
    main()
