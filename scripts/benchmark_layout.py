#!/usr/bin/env python3
"""
Time the pairwise and vectorized repulsion paths on sample graphs.

Usage:
    python scripts/generate_sample_graphs.py
    python scripts/benchmark_layout.py [--data-dir data] [--iterations 100]
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from graph_relax import FruchtermanReingoldLayout, edge_length_metrics
from graph_relax.io import load_edges, load_nodes


def benchmark(nodes: list[dict], edges: list, iterations: int, vectorized: bool) -> tuple[float, float]:
    """Run one layout on fresh node copies; return (seconds, final average edge length)."""
    fresh = [dict(n) for n in nodes]
    start = time.perf_counter()
    layout = FruchtermanReingoldLayout(
        nodes=fresh, links=edges, iterations=iterations, vectorized=vectorized
    ).run()
    elapsed = time.perf_counter() - start
    return elapsed, edge_length_metrics(layout.nodes, layout.links).average_edge_length


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark graph-relax repulsion paths")
    parser.add_argument("--data-dir", type=Path, default=Path("data"))
    parser.add_argument("--iterations", type=int, default=100)
    args = parser.parse_args()

    node_files = sorted(args.data_dir.glob("*_nodes.json"))
    if not node_files:
        print("No sample graphs found. Run generate_sample_graphs.py first.")
        return

    print(f"{'Graph':<15s}{'nodes':>8s}{'pairwise':>12s}{'vectorized':>12s}{'avg edge':>12s}")
    print("-" * 59)
    for node_file in node_files:
        name = node_file.name[: -len("_nodes.json")]
        nodes = load_nodes(node_file)
        edges = load_edges(args.data_dir / f"{name}_edges.json")

        naive_time, average = benchmark(nodes, edges, args.iterations, vectorized=False)
        vector_time, _ = benchmark(nodes, edges, args.iterations, vectorized=True)
        print(f"{name:<15s}{len(nodes):>8d}{naive_time:>11.4f}s{vector_time:>11.4f}s{average:>12.4f}")


if __name__ == "__main__":
    main()
