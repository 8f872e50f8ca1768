"""
Fold a prefix of a step log into a display overlay.

A frame is always rebuilt from scratch: nothing carries over between
calls, so scrubbing forward or backward to any index gives the same
overlay every time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

from pathtrace.algorithms.types import (
    UNREACHABLE,
    AlgorithmResult,
    AlgorithmStep,
    Distance,
    StepKind,
)
from pathtrace.graph.model import Graph


@dataclass(frozen=True)
class NodeOverlay:
    """
    Display state of one node.

    Attributes:
        visited: Whether a node-visit step has named this node yet
        distance: Distance to show (UNREACHABLE renders as infinity)
    """

    visited: bool = False
    distance: Distance = UNREACHABLE


@dataclass(frozen=True)
class ReplayFrame:
    """
    Overlay after folding steps [0..step_index].

    Attributes:
        step_index: Index of the last folded step (-1 when none were folded)
        step: The last folded step, if any
        nodes: Node id -> overlay, in graph order
        edges: Edge id -> highlighted flag, in graph order
        highlighted_edges: Highlighted edge ids in first-highlight order
    """

    step_index: int
    step: AlgorithmStep | None
    nodes: Mapping[str, NodeOverlay] = field(default_factory=dict)
    edges: Mapping[str, bool] = field(default_factory=dict)
    highlighted_edges: tuple[str, ...] = ()

    @property
    def visited_nodes(self) -> list[str]:
        """Visited node ids in graph order."""
        return [node_id for node_id, overlay in self.nodes.items() if overlay.visited]

    @property
    def message(self) -> str:
        return self.step.message if self.step else ""


def project(graph: Graph, result: AlgorithmResult, step_index: int) -> ReplayFrame:
    """
    Build the overlay for `step_index`.

    Every node starts unvisited at its final distance from `result` and
    every edge starts unhighlighted. Steps 0..step_index are then applied
    in order: node-visit marks the node visited, edge-relax highlights the
    edge, a distance-update carrying a distance sets that node's distance.
    Steps naming ids that are not in `graph` are ignored.

    Args:
        graph: Graph being displayed
        result: Result of a run on that graph
        step_index: Last step to fold; clamped to the step log

    Returns:
        The overlay; `result` and `graph` are not modified
    """
    last = max(min(step_index, len(result.steps) - 1), -1)

    visited: dict[str, bool] = {}
    distances: dict[str, Distance] = {}
    for node in graph.nodes:
        visited[node.id] = False
        distances[node.id] = result.distance_to(node.id)

    highlighted: dict[str, None] = {}
    for step in result.steps[: last + 1]:
        if step.kind is StepKind.NODE_VISIT:
            if step.node_id in visited:
                visited[step.node_id] = True
        elif step.kind is StepKind.EDGE_RELAX:
            if step.edge_id is not None:
                highlighted[step.edge_id] = None
        elif step.kind is StepKind.DISTANCE_UPDATE and step.node_id in distances:
            if step.distance is not None:
                distances[step.node_id] = step.distance

    edge_ids = [edge.id for edge in graph.edges]
    known_edges = set(edge_ids)
    highlighted_edges = tuple(edge_id for edge_id in highlighted if edge_id in known_edges)

    return ReplayFrame(
        step_index=last,
        step=result.steps[last] if last >= 0 else None,
        nodes=MappingProxyType(
            {
                node_id: NodeOverlay(visited=visited[node_id], distance=distances[node_id])
                for node_id in visited
            }
        ),
        edges=MappingProxyType({edge_id: edge_id in highlighted for edge_id in edge_ids}),
        highlighted_edges=highlighted_edges,
    )


def iter_frames(graph: Graph, result: AlgorithmResult) -> Iterator[ReplayFrame]:
    """Yield the frame for every step index in order."""
    for index in range(len(result.steps)):
        yield project(graph, result, index)
