"""
Dijkstra's algorithm with a recorded step log.

Greedy: repeatedly settles the closest unsettled node and relaxes its
outgoing edges. Selection is a linear scan, which is plenty for graphs of
a few dozen nodes.
"""

from __future__ import annotations

import logging

from pathtrace.algorithms.common import initial_state
from pathtrace.algorithms.paths import build_paths
from pathtrace.algorithms.types import (
    AlgorithmResult,
    AlgorithmStep,
    Distance,
    StepKind,
    extend_distance,
    format_distance,
    improves,
    is_reachable,
)
from pathtrace.graph.model import Graph

logger = logging.getLogger(__name__)

NAME = "dijkstra"


def _closest_unsettled(
    distances: dict[str, Distance], settled: set[str]
) -> str | None:
    """
    Unsettled node with the smallest reachable distance.

    Ties go to the node that comes first in graph order (the distance map
    is built in that order). Returns None when no unsettled node is
    reachable.
    """
    best: str | None = None
    best_distance: Distance | None = None
    for node_id, distance in distances.items():
        if node_id in settled or not is_reachable(distance):
            continue
        if best is None or distance < best_distance:
            best, best_distance = node_id, distance
    return best


def dijkstra(graph: Graph, source_id: str | None) -> AlgorithmResult:
    """
    Run Dijkstra from `source_id`.

    Settled nodes are final: an edge pointing back into a settled node is
    never relaxed, even with a negative weight. On graphs with negative
    weights the distances, predecessors and step log can therefore differ
    from a variant that relaxes every outgoing edge; use Bellman-Ford there.

    Args:
        graph: Graph to search (not modified)
        source_id: Start node; an unknown id leaves every node unreachable

    Returns:
        Step log, final distances, predecessors and paths
    """
    distances, previous, steps = initial_state(graph, source_id)
    settled: set[str] = set()

    while len(settled) < len(distances):
        current = _closest_unsettled(distances, settled)
        if current is None:
            break

        settled.add(current)
        steps.append(
            AlgorithmStep(
                kind=StepKind.NODE_VISIT,
                node_id=current,
                message=(
                    f"Visiting node {current} with distance "
                    f"{format_distance(distances[current])}"
                ),
            )
        )

        for edge in graph.outgoing(current):
            neighbor = edge.target
            if neighbor not in distances or neighbor in settled:
                continue

            candidate = extend_distance(distances[current], edge.weight)
            if not improves(candidate, distances[neighbor]):
                continue

            distances[neighbor] = candidate
            previous[neighbor] = current
            steps.append(
                AlgorithmStep(
                    kind=StepKind.EDGE_RELAX,
                    edge_id=edge.id,
                    node_id=neighbor,
                    distance=candidate,
                    previous=current,
                    message=(
                        f"Relaxing edge to {neighbor}, new distance: "
                        f"{format_distance(candidate)}"
                    ),
                )
            )

    paths = build_paths(source_id, distances, previous) if source_id in distances else {}

    logger.debug(
        f"Dijkstra from {source_id}: {len(steps)} steps, "
        f"{len(settled)}/{len(distances)} nodes settled"
    )

    return AlgorithmResult(
        algorithm=NAME,
        source_id=source_id,
        steps=steps,
        distances=distances,
        previous_nodes=previous,
        paths=paths,
    )
