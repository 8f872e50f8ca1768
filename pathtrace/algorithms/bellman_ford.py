"""
Bellman-Ford with a recorded step log.

Relaxes every edge |V| - 1 times, then makes one more pass to detect
negative cycles. Handles negative weights at O(V * E) cost.
"""

from __future__ import annotations

import logging

from pathtrace.algorithms.common import initial_state
from pathtrace.algorithms.paths import build_paths
from pathtrace.algorithms.types import (
    AlgorithmResult,
    AlgorithmStep,
    StepKind,
    extend_distance,
    format_distance,
    improves,
)
from pathtrace.config import EDGE_ARROW
from pathtrace.graph.model import Graph

logger = logging.getLogger(__name__)

NAME = "bellman-ford"


def bellman_ford(graph: Graph, source_id: str | None) -> AlgorithmResult:
    """
    Run Bellman-Ford from `source_id`.

    Always performs exactly |V| - 1 full passes, each announced by a
    marker step. When the detection pass still finds an improving edge,
    the result is flagged `has_negative_cycle`, one step is emitted per
    offending edge and no paths are reconstructed. Distances are reported
    as computed in that case and may be meaningless for nodes behind the
    cycle.

    An unknown source ends the run right after its start step: no
    iteration markers, no detection pass, no paths.

    Args:
        graph: Graph to search (not modified)
        source_id: Start node; an unknown id leaves every node unreachable

    Returns:
        Step log, final distances, predecessors and paths
    """
    distances, previous, steps = initial_state(graph, source_id)
    if source_id not in distances:
        return AlgorithmResult(
            algorithm=NAME,
            source_id=source_id,
            steps=steps,
            distances=distances,
            previous_nodes=previous,
        )

    for iteration in range(1, len(graph.nodes)):
        steps.append(
            AlgorithmStep(
                kind=StepKind.DISTANCE_UPDATE,
                message=f"Iteration {iteration}: Relaxing all edges",
            )
        )

        for edge in graph.edges:
            if edge.source not in distances or edge.target not in distances:
                continue

            candidate = extend_distance(distances[edge.source], edge.weight)
            if not improves(candidate, distances[edge.target]):
                continue

            distances[edge.target] = candidate
            previous[edge.target] = edge.source
            steps.append(
                AlgorithmStep(
                    kind=StepKind.EDGE_RELAX,
                    edge_id=edge.id,
                    node_id=edge.target,
                    distance=candidate,
                    previous=edge.source,
                    message=(
                        f"Relaxing edge {edge.source} {EDGE_ARROW} {edge.target}, "
                        f"new distance: {format_distance(candidate)}"
                    ),
                )
            )

    has_negative_cycle = False
    for edge in graph.edges:
        if edge.source not in distances or edge.target not in distances:
            continue

        candidate = extend_distance(distances[edge.source], edge.weight)
        if improves(candidate, distances[edge.target]):
            has_negative_cycle = True
            steps.append(
                AlgorithmStep(
                    kind=StepKind.DISTANCE_UPDATE,
                    edge_id=edge.id,
                    message=(
                        f"Negative cycle detected involving edge "
                        f"{edge.source} {EDGE_ARROW} {edge.target}"
                    ),
                )
            )

    if has_negative_cycle:
        logger.warning(
            f"Bellman-Ford from {source_id}: negative cycle detected, "
            f"paths are not reconstructed"
        )
        paths = {}
    else:
        paths = build_paths(source_id, distances, previous)

    logger.debug(f"Bellman-Ford from {source_id}: {len(steps)} steps")

    return AlgorithmResult(
        algorithm=NAME,
        source_id=source_id,
        steps=steps,
        distances=distances,
        previous_nodes=previous,
        paths=paths,
        has_negative_cycle=has_negative_cycle,
    )
