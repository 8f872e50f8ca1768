"""
Graph dataclasses: nodes, directed weighted edges and the editable graph.

The algorithms only read node ids and edge endpoints/weights. Positions
and labels belong to whoever draws the graph.
"""

from __future__ import annotations

import logging
import string
from dataclasses import asdict, dataclass, field, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes:
        id: Unique identifier, stable across runs
        x: Horizontal position (presentation only)
        y: Vertical position (presentation only)
        label: Display label, defaults to the id
    """

    id: str
    x: float = 0.0
    y: float = 0.0
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.id)


@dataclass(frozen=True)
class Edge:
    """
    A directed weighted edge from `source` to `target`.

    Attributes:
        id: Unique identifier (parallel edges get distinct ids)
        source: Id of the tail node
        target: Id of the head node
        weight: Edge cost, may be negative
    """

    id: str
    source: str
    target: str
    weight: float


def generate_node_id(existing: list[Node]) -> str:
    """
    Pick the first free id from A..Z, then AA..ZZ.

    Falls back to "Node<n+1>" once every one- and two-letter id is taken.
    """
    taken = {node.id for node in existing}
    letters = string.ascii_uppercase

    for letter in letters:
        if letter not in taken:
            return letter

    for first in letters:
        for second in letters:
            candidate = first + second
            if candidate not in taken:
                return candidate

    return f"Node{len(existing) + 1}"


def generate_edge_id(source: str, target: str, existing: list[Edge]) -> str:
    """
    Build an edge id from its endpoints ("AB").

    A parallel edge gets a numeric suffix ("AB2", "AB3", ...) so ids stay
    unique.
    """
    taken = {edge.id for edge in existing}
    base = f"{source}{target}"
    if base not in taken:
        return base

    suffix = 2
    while f"{base}{suffix}" in taken:
        suffix += 1
    return f"{base}{suffix}"


@dataclass
class Graph:
    """
    Ordered nodes and ordered directed edges.

    Node order is the iteration and tie-break order for every algorithm.
    Edges may reference ids that are not (or no longer) nodes; the
    algorithms tolerate that.

    Attributes:
        nodes: Nodes in insertion order
        edges: Edges in insertion order
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def node_ids(self) -> list[str]:
        """Node ids in graph order."""
        return [node.id for node in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return any(node.id == node_id for node in self.nodes)

    def get_node(self, node_id: str) -> Node | None:
        """Return the node with this id, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def get_edge(self, edge_id: str) -> Edge | None:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def outgoing(self, node_id: str) -> list[Edge]:
        """Edges leaving `node_id`, in graph edge order."""
        return [edge for edge in self.edges if edge.source == node_id]

    def dangling_edges(self) -> list[Edge]:
        """Edges whose source or target is not a node of this graph."""
        ids = set(self.node_ids())
        return [
            edge
            for edge in self.edges
            if edge.source not in ids or edge.target not in ids
        ]

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_node(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: str | None = None,
        node_id: str | None = None,
    ) -> Node:
        """
        Append a node.

        Args:
            x: Horizontal position
            y: Vertical position
            label: Display label (defaults to the id)
            node_id: Explicit id; generated when omitted

        Returns:
            The new node

        Raises:
            ValueError: If `node_id` is already used
        """
        if node_id is None:
            node_id = generate_node_id(self.nodes)
        elif self.has_node(node_id):
            raise ValueError(f"Node '{node_id}' already exists")

        node = Node(id=node_id, x=x, y=y, label=label or node_id)
        self.nodes.append(node)
        return node

    def remove_node(self, node_id: str) -> None:
        """
        Remove a node and every edge touching it.

        Raises:
            KeyError: If the node does not exist
        """
        if not self.has_node(node_id):
            raise KeyError(node_id)

        self.nodes = [node for node in self.nodes if node.id != node_id]
        before = len(self.edges)
        self.edges = [
            edge
            for edge in self.edges
            if edge.source != node_id and edge.target != node_id
        ]
        logger.debug(
            f"Removed node {node_id} and {before - len(self.edges)} incident edges"
        )

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        """Reposition a node. Raises KeyError if it does not exist."""
        for i, node in enumerate(self.nodes):
            if node.id == node_id:
                self.nodes[i] = replace(node, x=x, y=y)
                return self.nodes[i]
        raise KeyError(node_id)

    def add_edge(
        self,
        source: str,
        target: str,
        weight: float,
        edge_id: str | None = None,
    ) -> Edge:
        """
        Append a directed edge.

        Endpoints are not checked; a dangling edge is allowed.

        Raises:
            ValueError: If `edge_id` is already used
        """
        if edge_id is None:
            edge_id = generate_edge_id(source, target, self.edges)
        elif self.get_edge(edge_id) is not None:
            raise ValueError(f"Edge '{edge_id}' already exists")

        edge = Edge(id=edge_id, source=source, target=target, weight=weight)
        self.edges.append(edge)
        return edge

    def remove_edge(self, edge_id: str) -> None:
        """Remove an edge. Raises KeyError if it does not exist."""
        if self.get_edge(edge_id) is None:
            raise KeyError(edge_id)
        self.edges = [edge for edge in self.edges if edge.id != edge_id]

    def copy(self) -> Graph:
        """Shallow copy; nodes and edges are immutable so this is independent."""
        return Graph(nodes=list(self.nodes), edges=list(self.edges))

    def to_dict(self) -> dict:
        """Plain-dict form, the inverse of `graph_from_dict`."""
        return {
            "nodes": [asdict(node) for node in self.nodes],
            "edges": [asdict(edge) for edge in self.edges],
        }
