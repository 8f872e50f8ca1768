"""
Algorithms module.

Provides shortest-path algorithms that record a replayable step log:
- dijkstra: greedy single-source, non-negative weights
- bellman-ford: single-source, negative weights, negative-cycle detection
- floyd-warshall: all pairs, projected onto the first node

Every runner shares the signature (graph, source_id) -> AlgorithmResult.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pathtrace.algorithms.bellman_ford import bellman_ford
from pathtrace.algorithms.dijkstra import dijkstra
from pathtrace.algorithms.floyd_warshall import floyd_warshall
from pathtrace.algorithms.types import (
    UNREACHABLE,
    AlgorithmResult,
    AlgorithmStep,
    Distance,
    StepKind,
    extend_distance,
    format_distance,
    improves,
    is_reachable,
)
from pathtrace.config import DEFAULT_ALGORITHM
from pathtrace.graph.model import Graph

logger = logging.getLogger(__name__)

Runner = Callable[[Graph, Optional[str]], AlgorithmResult]


def _floyd_warshall_runner(graph: Graph, source_id: str | None = None) -> AlgorithmResult:
    # All-pairs: the representative source is always the first node
    return floyd_warshall(graph)


_RUNNERS: dict[str, Runner] = {
    "dijkstra": dijkstra,
    "bellman-ford": bellman_ford,
    "floyd-warshall": _floyd_warshall_runner,
}

ALGORITHMS: tuple[str, ...] = tuple(_RUNNERS)

__all__ = [
    "ALGORITHMS",
    "UNREACHABLE",
    "AlgorithmResult",
    "AlgorithmStep",
    "Distance",
    "Runner",
    "StepKind",
    "bellman_ford",
    "dijkstra",
    "extend_distance",
    "floyd_warshall",
    "format_distance",
    "get_algorithm",
    "improves",
    "is_reachable",
    "run_algorithm",
]


def get_algorithm(name: str) -> Runner:
    """
    Get an algorithm runner by identifier.

    Args:
        name: One of ALGORITHMS

    Returns:
        The runner; Dijkstra when `name` is unknown
    """
    if name not in _RUNNERS:
        logger.warning(
            f"Unknown algorithm '{name}', falling back to {DEFAULT_ALGORITHM}. "
            f"Available: {', '.join(ALGORITHMS)}"
        )
        name = DEFAULT_ALGORITHM
    return _RUNNERS[name]


def run_algorithm(
    name: str, graph: Graph, source_id: str | None = None
) -> AlgorithmResult:
    """Run the algorithm called `name` on `graph` from `source_id`."""
    return get_algorithm(name)(graph, source_id)
