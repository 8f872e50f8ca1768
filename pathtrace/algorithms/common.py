"""
Initial state shared by the single-source algorithms.
"""

from __future__ import annotations

import logging

from pathtrace.algorithms.types import UNREACHABLE, AlgorithmStep, Distance, StepKind
from pathtrace.graph.model import Graph

logger = logging.getLogger(__name__)


def initial_state(
    graph: Graph, source_id: str | None
) -> tuple[dict[str, Distance], dict[str, str | None], list[AlgorithmStep]]:
    """
    Fresh distance map, predecessor map and step log for a run from `source_id`.

    Every node starts UNREACHABLE with no predecessor; the source starts at
    0. A source that is not in the graph leaves everything UNREACHABLE and
    the first step says so.

    Returns:
        (distances, previous, steps)
    """
    distances: dict[str, Distance] = {node_id: UNREACHABLE for node_id in graph.node_ids()}
    previous: dict[str, str | None] = {node_id: None for node_id in distances}
    steps: list[AlgorithmStep] = []

    if source_id in distances:
        distances[source_id] = 0
        steps.append(
            AlgorithmStep(
                kind=StepKind.DISTANCE_UPDATE,
                node_id=source_id,
                distance=0,
                message=f"Starting from node {source_id}",
            )
        )
    else:
        logger.warning(f"Source node {source_id!r} is not in the graph")
        steps.append(
            AlgorithmStep(
                kind=StepKind.DISTANCE_UPDATE,
                message=f"Source node {source_id} is not in the graph",
            )
        )

    return distances, previous, steps
