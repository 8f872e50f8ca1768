"""
Shared result types for the shortest-path algorithms.

Every algorithm produces an AlgorithmResult: the ordered step log plus
final distances, predecessors and reconstructed paths. Distances that no
path reaches hold the UNREACHABLE marker rather than a float infinity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from pathtrace.config import INFINITY_SYMBOL


class _Unreachable:
    """
    Marker for "no path found".

    Single shared instance; compare with `is`. Arithmetic and ordering are
    not defined, use the helpers below.
    """

    _instance: _Unreachable | None = None

    def __new__(cls) -> _Unreachable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNREACHABLE"

    def __str__(self) -> str:
        return INFINITY_SYMBOL

    def __copy__(self) -> _Unreachable:
        return self

    def __deepcopy__(self, memo) -> _Unreachable:
        return self

    def __reduce__(self) -> str:
        return "UNREACHABLE"


UNREACHABLE = _Unreachable()

Distance = Union[int, float, _Unreachable]


def is_reachable(distance: Distance) -> bool:
    """True for any real distance, False for UNREACHABLE."""
    return distance is not UNREACHABLE


def extend_distance(distance: Distance, weight: float) -> Distance:
    """Distance after following one more edge; UNREACHABLE stays UNREACHABLE."""
    if distance is UNREACHABLE:
        return UNREACHABLE
    return distance + weight


def improves(candidate: Distance, current: Distance) -> bool:
    """
    Whether `candidate` is strictly shorter than `current`.

    Any real distance beats UNREACHABLE; UNREACHABLE never beats anything.
    """
    if candidate is UNREACHABLE:
        return False
    if current is UNREACHABLE:
        return True
    return candidate < current


def format_distance(distance: Distance | None) -> str:
    """
    Render a distance for messages and display.

    UNREACHABLE renders as the infinity symbol, integral floats drop their
    ".0", None renders as an empty string.
    """
    if distance is None:
        return ""
    if distance is UNREACHABLE:
        return INFINITY_SYMBOL
    if isinstance(distance, float) and distance.is_integer():
        return str(int(distance))
    return str(distance)


class StepKind(str, Enum):
    """Kinds of observable events in a step log."""

    NODE_VISIT = "node-visit"
    EDGE_RELAX = "edge-relax"
    DISTANCE_UPDATE = "distance-update"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AlgorithmStep:
    """
    One event in an algorithm run.

    Attributes:
        kind: What happened
        message: Human-readable description
        node_id: Node the event concerns, if any
        edge_id: Edge the event concerns, if any
        distance: Distance carried by the event, if any
        previous: Predecessor recorded by the event, if any
    """

    kind: StepKind
    message: str
    node_id: str | None = None
    edge_id: str | None = None
    distance: Distance | None = None
    previous: str | None = None


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Complete, immutable record of one algorithm run.

    Containers are copied and frozen on construction, so a result never
    aliases the algorithm's working state or the input graph.

    Attributes:
        algorithm: Identifier of the algorithm that produced this result
        source_id: Source node used (representative source for Floyd-Warshall)
        steps: Ordered step log
        distances: Node id -> final distance or UNREACHABLE
        previous_nodes: Node id -> predecessor id or None
        paths: Node id -> node ids from source to that node (reachable
            non-source nodes only)
        has_negative_cycle: Set by Bellman-Ford when a negative cycle is found
    """

    algorithm: str
    source_id: str | None
    steps: tuple[AlgorithmStep, ...] = ()
    distances: Mapping[str, Distance] = field(default_factory=dict)
    previous_nodes: Mapping[str, str | None] = field(default_factory=dict)
    paths: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    has_negative_cycle: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "distances", MappingProxyType(dict(self.distances)))
        object.__setattr__(
            self, "previous_nodes", MappingProxyType(dict(self.previous_nodes))
        )
        object.__setattr__(
            self,
            "paths",
            MappingProxyType({k: tuple(v) for k, v in self.paths.items()}),
        )

    def distance_to(self, node_id: str) -> Distance:
        """Final distance to `node_id`, UNREACHABLE if unknown."""
        return self.distances.get(node_id, UNREACHABLE)

    def path_to(self, node_id: str) -> tuple[str, ...] | None:
        """Reconstructed path to `node_id`, or None if there is none."""
        return self.paths.get(node_id)

    def reachable_nodes(self) -> list[str]:
        """Ids with a real final distance, in distance-map order."""
        return [
            node_id
            for node_id, distance in self.distances.items()
            if is_reachable(distance)
        ]
