"""
Floyd-Warshall with a recorded step log.

Computes all-pairs shortest distances on dense numpy matrices indexed by a
node-id -> index mapping built once per run, then projects the row of the
first node (the representative source) onto the single-source result
shape the other algorithms use.
"""

from __future__ import annotations

import logging
from numbers import Integral

import numpy as np

from pathtrace.algorithms.types import (
    UNREACHABLE,
    AlgorithmResult,
    AlgorithmStep,
    Distance,
    StepKind,
    format_distance,
)
from pathtrace.config import EDGE_ARROW
from pathtrace.graph.model import Edge, Graph

logger = logging.getLogger(__name__)

NAME = "floyd-warshall"

# Marker in the next-hop matrix for "no next hop"
NO_HOP = -1

# Total integer weight magnitude above which int64 sums could overflow
INT64_SAFE_TOTAL = 2**62


def _matrix_dtype(edges: list[Edge]) -> type:
    """
    Matrix dtype for these edge weights.

    float64 when any weight is not an integer. Integer weights use int64
    while every path sum is guaranteed to fit, and Python ints (object
    dtype) beyond that.
    """
    weights = [edge.weight for edge in edges]
    if not all(isinstance(w, Integral) for w in weights):
        return np.float64
    # A simple path never sums to more than the total magnitude of all weights
    if sum(abs(int(w)) for w in weights) < INT64_SAFE_TOTAL:
        return np.int64
    return object


class _Matrices:
    """
    Distance, reachability and next-hop matrices for one run.

    Reachability is tracked in its own boolean mask so unreachable pairs
    never rely on float infinity.
    """

    def __init__(self, node_ids: list[str], edges: list[Edge]) -> None:
        self.node_ids = node_ids
        self.index: dict[str, int] = {node_id: i for i, node_id in enumerate(node_ids)}
        n = len(node_ids)

        usable = [
            edge
            for edge in edges
            if edge.source in self.index and edge.target in self.index
        ]
        skipped = len(edges) - len(usable)
        if skipped:
            logger.warning(f"Floyd-Warshall: skipping {skipped} edge(s) with unknown endpoints")

        self.dist = np.zeros((n, n), dtype=_matrix_dtype(usable))
        self.reachable = np.eye(n, dtype=bool)
        self.next_hop = np.full((n, n), NO_HOP, dtype=np.int64)

        # Later parallel edges overwrite earlier ones; self-loops keep the zero diagonal
        for edge in usable:
            i, j = self.index[edge.source], self.index[edge.target]
            if i == j:
                continue
            self.dist[i, j] = edge.weight
            self.reachable[i, j] = True
            self.next_hop[i, j] = j

    def distance(self, i: int, j: int) -> Distance:
        """Python scalar distance, or UNREACHABLE."""
        if not self.reachable[i, j]:
            return UNREACHABLE
        value = self.dist[i, j]
        return value.item() if isinstance(value, np.generic) else value

    def relax_via(self, k: int) -> list[tuple[int, int]]:
        """
        Route every pair through intermediate `k` where that is strictly shorter.

        Pairs are scanned row by row in graph order; each improvement is
        applied before the next pair is examined.

        Returns:
            The improved (i, j) pairs in scan order
        """
        improved: list[tuple[int, int]] = []
        n = len(self.node_ids)
        for i in range(n):
            if not self.reachable[i, k]:
                continue
            for j in range(n):
                if not self.reachable[k, j]:
                    continue
                candidate = self.dist[i, k] + self.dist[k, j]
                if self.reachable[i, j] and not candidate < self.dist[i, j]:
                    continue
                self.dist[i, j] = candidate
                self.reachable[i, j] = True
                self.next_hop[i, j] = self.next_hop[i, k]
                improved.append((i, j))
        return improved

    def rebuild_path(self, i: int, j: int) -> list[str] | None:
        """
        Follow next hops from i to j.

        Returns None when a hop is missing or the walk does not reach j
        within |V| hops (only possible with negative cycles).
        """
        path = [self.node_ids[i]]
        current = i
        for _ in range(len(self.node_ids)):
            current = int(self.next_hop[current, j])
            if current == NO_HOP:
                return None
            path.append(self.node_ids[current])
            if current == j:
                return path
        return None


def floyd_warshall(graph: Graph) -> AlgorithmResult:
    """
    Run Floyd-Warshall over the whole graph.

    The first node in graph order is the representative source: its row
    becomes `distances` and `paths`, and `previous_nodes` holds the
    second-to-last node of each reconstructed path.

    Args:
        graph: Graph to search (not modified)

    Returns:
        Step log plus the representative source's distances, predecessors
        and paths
    """
    node_ids = list(dict.fromkeys(graph.node_ids()))
    matrices = _Matrices(node_ids, graph.edges)

    steps: list[AlgorithmStep] = [
        AlgorithmStep(
            kind=StepKind.DISTANCE_UPDATE,
            message="Initialized distance matrix with direct edges",
        )
    ]

    for k, via in enumerate(node_ids):
        steps.append(
            AlgorithmStep(
                kind=StepKind.NODE_VISIT,
                node_id=via,
                message=f"Using node {via} as intermediate node",
            )
        )
        for i, j in matrices.relax_via(k):
            steps.append(
                AlgorithmStep(
                    kind=StepKind.DISTANCE_UPDATE,
                    message=(
                        f"Updated path {node_ids[i]} {EDGE_ARROW} {node_ids[j]} "
                        f"via {via}, new distance: "
                        f"{format_distance(matrices.distance(i, j))}"
                    ),
                )
            )

    source_id = node_ids[0] if node_ids else None
    distances: dict[str, Distance] = {}
    previous: dict[str, str | None] = {}
    paths: dict[str, list[str]] = {}

    for j, target in enumerate(node_ids):
        distances[target] = matrices.distance(0, j)
        previous[target] = None
        if target == source_id or distances[target] is UNREACHABLE:
            continue
        path = matrices.rebuild_path(0, j)
        if path is not None:
            paths[target] = path
            previous[target] = path[-2]

    logger.debug(
        f"Floyd-Warshall over {len(node_ids)} nodes: {len(steps)} steps, "
        f"representative source {source_id}"
    )

    return AlgorithmResult(
        algorithm=NAME,
        source_id=source_id,
        steps=steps,
        distances=distances,
        previous_nodes=previous,
        paths=paths,
    )
