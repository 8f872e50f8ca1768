"""
Graph module.

Provides the input side of every algorithm run:
- Node, Edge, Graph: directed weighted graph with editing helpers
- Presets: built-in sample graphs
- Loader: graphs from dicts, JSON or msgpack files
"""

from pathtrace.graph.loader import GraphFormatError, graph_from_dict, load_graph
from pathtrace.graph.model import (
    Edge,
    Graph,
    Node,
    generate_edge_id,
    generate_node_id,
)
from pathtrace.graph.presets import PRESETS, get_preset_graph, preset_names

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "generate_node_id",
    "generate_edge_id",
    "PRESETS",
    "get_preset_graph",
    "preset_names",
    "GraphFormatError",
    "graph_from_dict",
    "load_graph",
]
