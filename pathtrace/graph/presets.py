"""
Built-in sample graphs.

Each preset is a factory so callers always get a fresh, independently
editable Graph.
"""

from __future__ import annotations

import logging
from typing import Callable

from pathtrace.graph.model import Edge, Graph, Node

logger = logging.getLogger(__name__)


def simple_sample() -> Graph:
    """Five nodes A-E; from A the shortest path to E runs A -> B -> D -> E."""
    return Graph(
        nodes=[
            Node("A", 150, 100),
            Node("B", 350, 100),
            Node("C", 550, 100),
            Node("D", 250, 250),
            Node("E", 450, 250),
        ],
        edges=[
            Edge("AB", "A", "B", 4),
            Edge("AC", "A", "C", 2),
            Edge("BC", "B", "C", 1),
            Edge("BD", "B", "D", 5),
            Edge("CD", "C", "D", 8),
            Edge("CE", "C", "E", 10),
            Edge("DE", "D", "E", 2),
        ],
    )


def directed_weighted() -> Graph:
    """Five nodes with two edges leaving D, including one back into C."""
    return Graph(
        nodes=[
            Node("A", 100, 120),
            Node("B", 250, 60),
            Node("C", 400, 120),
            Node("D", 250, 200),
            Node("E", 400, 240),
        ],
        edges=[
            Edge("AB", "A", "B", 2),
            Edge("AC", "A", "C", 10),
            Edge("AD", "A", "D", 3),
            Edge("BD", "B", "D", 8),
            Edge("BC", "B", "C", 2),
            Edge("CD", "C", "E", 4),
            Edge("DE", "D", "C", 4),
            Edge("DE2", "D", "E", 3),
            Edge("EC", "E", "C", 1),
        ],
    )


PRESETS: list[tuple[str, Callable[[], Graph]]] = [
    ("Simple Sample", simple_sample),
    ("Directed Weighted", directed_weighted),
]


def preset_names() -> list[str]:
    """Names of the built-in presets, in index order."""
    return [name for name, _ in PRESETS]


def get_preset_graph(index: int) -> Graph:
    """
    Build the preset at `index`.

    Args:
        index: Position in PRESETS

    Returns:
        A fresh Graph; the first preset when `index` is out of range
    """
    if not 0 <= index < len(PRESETS):
        logger.warning(f"Unknown preset index {index}, using '{PRESETS[0][0]}'")
        index = 0
    return PRESETS[index][1]()
