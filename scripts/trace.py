#!/usr/bin/env python3
"""
PathTrace CLI - Run a shortest-path algorithm and print its trace.

Usage:
    python scripts/trace.py
    python scripts/trace.py --algorithm bellman-ford --source B
    python scripts/trace.py --preset 1 --algorithm floyd-warshall
    python scripts/trace.py --graph my_graph.json --source A --step 5

Algorithms:
    dijkstra        - Greedy single-source (default)
    bellman-ford    - Single-source, negative weights, negative-cycle check
    floyd-warshall  - All pairs, shown from the first node

Graph files (.json or .msgpack):
    {"nodes": [{"id": "A"}, ...],
     "edges": [{"id": "AB", "source": "A", "target": "B", "weight": 4}, ...]}
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from pathtrace.algorithms import ALGORITHMS, format_distance, run_algorithm  # noqa: E402
from pathtrace.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_PRESET_INDEX,
    EDGE_ARROW,
    LOG_LEVEL,
)
from pathtrace.graph import (  # noqa: E402
    GraphFormatError,
    get_preset_graph,
    load_graph,
    preset_names,
)
from pathtrace.replay import project  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Trace a shortest-path algorithm step by step",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--preset",
        type=int,
        default=DEFAULT_PRESET_INDEX,
        help=(
            "Built-in graph index: "
            + ", ".join(f"{i}={name}" for i, name in enumerate(preset_names()))
        ),
    )
    source.add_argument(
        "--graph",
        type=Path,
        default=None,
        help="Load the graph from a .json or .msgpack file",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=list(ALGORITHMS),
        help=f"Algorithm to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Source node id (default: first node; ignored by floyd-warshall)",
    )
    parser.add_argument(
        "--step",
        type=int,
        default=None,
        help="Also print the replay overlay at this step index",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = load_graph(args.graph) if args.graph else get_preset_graph(args.preset)
    except (OSError, GraphFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    source_id = args.source
    if source_id is None and graph.nodes:
        source_id = graph.nodes[0].id

    result = run_algorithm(args.algorithm, graph, source_id)

    print("\n" + "=" * 60)
    print(f"Algorithm: {result.algorithm}")
    print(f"  Nodes:  {len(graph.nodes)}")
    print(f"  Edges:  {len(graph.edges)}")
    print(f"  Source: {result.source_id}")
    print("=" * 60 + "\n")

    print("Steps:")
    width = len(str(len(result.steps)))
    for i, step in enumerate(result.steps):
        print(f"  {i:>{width}}. [{step.kind}] {step.message}")

    if result.has_negative_cycle:
        print("\nNegative cycle detected: paths are not available")

    print("\nDistances:")
    for node_id, distance in result.distances.items():
        path = result.path_to(node_id)
        route = f"  via {f' {EDGE_ARROW} '.join(path)}" if path else ""
        print(f"  {node_id}: {format_distance(distance)}{route}")

    if args.step is not None:
        frame = project(graph, result, args.step)
        print(f"\nReplay at step {frame.step_index}: {frame.message}")
        print(f"  Visited:     {', '.join(frame.visited_nodes) or '-'}")
        print(f"  Highlighted: {', '.join(frame.highlighted_edges) or '-'}")
        for node_id, overlay in frame.nodes.items():
            print(f"  {node_id}: {format_distance(overlay.distance)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
