"""
Load graphs from plain dicts, JSON files or msgpack files.

Expected shape:

    {
        "nodes": [{"id": "A", "x": 0, "y": 0, "label": "A"}, ...],
        "edges": [{"id": "AB", "source": "A", "target": "B", "weight": 4}, ...]
    }

Node positions/labels and edge ids are optional.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import msgpack

from pathtrace.config import GRAPH_FILE_SUFFIXES
from pathtrace.graph.model import Edge, Graph, Node, generate_edge_id

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """Raised when graph data does not have the expected shape."""


def _parse_weight(raw, where: str) -> float:
    # bool is an int subclass
    if isinstance(raw, bool):
        raise GraphFormatError(f"{where}: weight {raw!r} is not a number")
    if isinstance(raw, (int, float)):
        return raw
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise GraphFormatError(f"{where}: weight {raw!r} is not a number") from e


def _parse_coordinate(raw, where: str) -> float:
    if isinstance(raw, bool):
        raise GraphFormatError(f"{where}: {raw!r} is not a number")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise GraphFormatError(f"{where}: {raw!r} is not a number") from e


def _list_field(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise GraphFormatError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def graph_from_dict(data: dict) -> Graph:
    """
    Build a Graph from its dict form.

    Args:
        data: Mapping with "nodes" and "edges" lists

    Returns:
        The parsed graph

    Raises:
        GraphFormatError: If a required key is missing or a value is malformed
    """
    if not isinstance(data, dict):
        raise GraphFormatError(f"Expected a mapping, got {type(data).__name__}")

    graph = Graph()
    seen_nodes: set[str] = set()

    for i, raw in enumerate(_list_field(data, "nodes")):
        if not isinstance(raw, dict) or "id" not in raw:
            raise GraphFormatError(f"nodes[{i}]: missing 'id'")
        node_id = str(raw["id"])
        if node_id in seen_nodes:
            raise GraphFormatError(f"nodes[{i}]: duplicate id '{node_id}'")
        seen_nodes.add(node_id)
        graph.nodes.append(
            Node(
                id=node_id,
                x=_parse_coordinate(raw.get("x", 0.0), f"nodes[{i}].x"),
                y=_parse_coordinate(raw.get("y", 0.0), f"nodes[{i}].y"),
                label=str(raw.get("label") or node_id),
            )
        )

    seen_edges: set[str] = set()
    for i, raw in enumerate(_list_field(data, "edges")):
        if not isinstance(raw, dict):
            raise GraphFormatError(f"edges[{i}]: expected a mapping")
        for key in ("source", "target", "weight"):
            if key not in raw:
                raise GraphFormatError(f"edges[{i}]: missing '{key}'")

        source, target = str(raw["source"]), str(raw["target"])
        edge_id = raw.get("id")
        if edge_id is None:
            edge_id = generate_edge_id(source, target, graph.edges)
        edge_id = str(edge_id)
        if edge_id in seen_edges:
            raise GraphFormatError(f"edges[{i}]: duplicate id '{edge_id}'")
        seen_edges.add(edge_id)

        graph.edges.append(
            Edge(
                id=edge_id,
                source=source,
                target=target,
                weight=_parse_weight(raw["weight"], f"edges[{i}]"),
            )
        )

    dangling = graph.dangling_edges()
    if dangling:
        logger.warning(
            f"{len(dangling)} edge(s) reference unknown nodes: "
            f"{', '.join(edge.id for edge in dangling)}"
        )

    return graph


def load_graph(path: str | Path) -> Graph:
    """
    Read a graph file.

    Args:
        path: A .json or .msgpack file

    Returns:
        The parsed graph

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFormatError: If the suffix is unsupported or the content is malformed
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in GRAPH_FILE_SUFFIXES:
        raise GraphFormatError(
            f"Unsupported graph file '{path.name}' "
            f"(expected one of {', '.join(GRAPH_FILE_SUFFIXES)})"
        )

    logger.info(f"Loading graph from {path}...")
    try:
        if suffix == ".json":
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = msgpack.unpack(f, raw=False)
    except (json.JSONDecodeError, msgpack.UnpackException, ValueError) as e:
        raise GraphFormatError(f"Could not decode {path.name}: {e}") from e

    graph = graph_from_dict(data)
    logger.info(f"Loaded {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph
