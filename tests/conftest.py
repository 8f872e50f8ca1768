"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathtrace.graph import Edge, Graph, Node, get_preset_graph


@pytest.fixture
def simple_graph() -> Graph:
    """The "Simple Sample" preset: five nodes A-E."""
    return get_preset_graph(0)


@pytest.fixture
def directed_graph() -> Graph:
    """The "Directed Weighted" preset."""
    return get_preset_graph(1)


@pytest.fixture
def negative_cycle_graph() -> Graph:
    """A and B pointing at each other with weight -1."""
    return Graph(
        nodes=[Node("A"), Node("B")],
        edges=[Edge("AB", "A", "B", -1), Edge("BA", "B", "A", -1)],
    )


@pytest.fixture
def negative_weight_graph() -> Graph:
    """Negative edge but no negative cycle; the cheaper route goes through it."""
    return Graph(
        nodes=[Node("S"), Node("A"), Node("B"), Node("T")],
        edges=[
            Edge("SA", "S", "A", 4),
            Edge("SB", "S", "B", 5),
            Edge("BA", "B", "A", -3),
            Edge("AT", "A", "T", 1),
        ],
    )


@pytest.fixture
def disconnected_graph() -> Graph:
    """A -> B, with C isolated and D only reachable from C."""
    return Graph(
        nodes=[Node("A"), Node("B"), Node("C"), Node("D")],
        edges=[Edge("AB", "A", "B", 3), Edge("CD", "C", "D", 1)],
    )


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()
