"""
Command line entry point.

Usage:
    graph-relax NODES EDGES [-o positions.json] [--svg graph.svg]
                [--iterations N] [--cooling F] [--temperature F] [--epsilon F]
                [--convergence-threshold F] [--vectorized] [-v | -q]

Examples:
    graph-relax data/raw_nodes.json data/raw_edges.json
    graph-relax nodes.json edges.json -o out.json --iterations 500 --svg out.svg
    python -m graph_relax nodes.json edges.json -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import COOLING, EPSILON, INITIAL_TEMPERATURE, ITERATIONS
from .io import load_edges, load_nodes, write_positions, write_svg
from .logging_config import setup_logging
from .pipeline import relax
from .validation import GraphFormatError, ValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="graph-relax",
        description=(
            "Lay out a graph in the unit square with a Fruchterman-Reingold "
            "simulation and report edge lengths before and after."
        ),
    )
    parser.add_argument("nodes", type=Path, help="JSON array of {id, x, y} node objects")
    parser.add_argument("edges", type=Path, help="JSON array of [source, target] pairs")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("positions.json"),
        help="where to write the node positions (default: positions.json)",
    )
    parser.add_argument("--svg", type=Path, default=None, help="also write an SVG preview")
    parser.add_argument(
        "--iterations", type=int, default=ITERATIONS, help=f"iteration count (default: {ITERATIONS})"
    )
    parser.add_argument(
        "--cooling", type=float, default=COOLING, help=f"cooling factor (default: {COOLING})"
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=INITIAL_TEMPERATURE,
        help=f"initial temperature (default: {INITIAL_TEMPERATURE})",
    )
    parser.add_argument(
        "--epsilon", type=float, default=EPSILON, help=f"distance offset (default: {EPSILON})"
    )
    parser.add_argument(
        "--convergence-threshold",
        type=float,
        default=None,
        help="stop early once an iteration moves nodes less than this in total",
    )
    parser.add_argument(
        "--vectorized", action="store_true", help="compute repulsion with numpy broadcasting"
    )
    parser.add_argument("--log-file", default=None, help="also write log messages to this file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    setup_logging(level, args.log_file)

    try:
        nodes = load_nodes(args.nodes)
        edges = load_edges(args.edges)
        result = relax(
            nodes,
            edges,
            iterations=args.iterations,
            cooling_factor=args.cooling,
            temperature=args.temperature,
            epsilon=args.epsilon,
            convergence_threshold=args.convergence_threshold,
            vectorized=args.vectorized,
        )
    except ValidationError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("\n".join(result.before.report_lines("Initial graph metrics:")))
    print("\n".join(result.after.report_lines("Final graph metrics:")))

    try:
        write_positions(args.output, result.nodes)
        print(f"Node positions saved to {args.output}")

        if args.svg is not None:
            write_svg(args.svg, result.nodes, result.layout.links)
            print(f"SVG preview saved to {args.svg}")
    except GraphFormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
