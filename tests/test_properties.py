"""
Cross-algorithm properties: determinism, optimality and agreement.
"""

import pytest

from pathtrace.algorithms import (
    ALGORITHMS,
    bellman_ford,
    dijkstra,
    floyd_warshall,
    is_reachable,
    run_algorithm,
)
from pathtrace.graph import Graph

GRAPH_FIXTURES = [
    "simple_graph",
    "directed_graph",
    "disconnected_graph",
    "negative_weight_graph",
]

NON_NEGATIVE_FIXTURES = ["simple_graph", "directed_graph", "disconnected_graph"]


def path_cost(graph: Graph, path: tuple[str, ...]) -> float:
    """Sum of the cheapest edge between each consecutive pair."""
    total = 0
    for u, v in zip(path, path[1:]):
        total += min(e.weight for e in graph.edges if e.source == u and e.target == v)
    return total


class TestDeterminism:
    """Repeated runs are indistinguishable."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    @pytest.mark.parametrize("fixture", GRAPH_FIXTURES)
    def test_identical_results(self, name, fixture, request):
        graph = request.getfixturevalue(fixture)
        first = run_algorithm(name, graph, graph.nodes[0].id)
        second = run_algorithm(name, graph, graph.nodes[0].id)
        assert first == second
        assert [s.message for s in first.steps] == [s.message for s in second.steps]


class TestTriangleInequality:
    """No edge can still shorten a final distance."""

    @pytest.mark.parametrize("algorithm", [dijkstra, bellman_ford])
    @pytest.mark.parametrize("fixture", NON_NEGATIVE_FIXTURES)
    def test_holds_for_every_edge(self, algorithm, fixture, request):
        graph = request.getfixturevalue(fixture)
        result = algorithm(graph, graph.nodes[0].id)
        for edge in graph.edges:
            du = result.distances[edge.source]
            if not is_reachable(du):
                continue
            dv = result.distances[edge.target]
            assert is_reachable(dv)
            assert dv <= du + edge.weight

    def test_bellman_ford_with_negative_edge(self, negative_weight_graph):
        result = bellman_ford(negative_weight_graph, "S")
        for edge in negative_weight_graph.edges:
            assert result.distances[edge.target] <= result.distances[edge.source] + edge.weight


class TestPathConsistency:
    """Reconstructed paths start at the source, end at the node and cost its distance."""

    @pytest.mark.parametrize("name", ALGORITHMS)
    @pytest.mark.parametrize("fixture", NON_NEGATIVE_FIXTURES)
    def test_paths_match_distances(self, name, fixture, request):
        graph = request.getfixturevalue(fixture)
        result = run_algorithm(name, graph, graph.nodes[0].id)
        for node_id, path in result.paths.items():
            assert path[0] == result.source_id
            assert path[-1] == node_id
            assert path_cost(graph, path) == result.distances[node_id]

    def test_negative_weight_paths(self, negative_weight_graph):
        result = bellman_ford(negative_weight_graph, "S")
        for node_id, path in result.paths.items():
            assert path_cost(negative_weight_graph, path) == result.distances[node_id]


class TestAgreement:
    """All three algorithms agree on non-negative graphs."""

    @pytest.mark.parametrize("fixture", NON_NEGATIVE_FIXTURES)
    def test_dijkstra_matches_bellman_ford(self, fixture, request):
        graph = request.getfixturevalue(fixture)
        for node in graph.nodes:
            assert dijkstra(graph, node.id).distances == bellman_ford(graph, node.id).distances

    @pytest.mark.parametrize("fixture", NON_NEGATIVE_FIXTURES)
    def test_floyd_warshall_row_matches(self, fixture, request):
        graph = request.getfixturevalue(fixture)
        representative = graph.nodes[0].id
        fw = floyd_warshall(graph)
        assert fw.distances == dijkstra(graph, representative).distances
        assert fw.distances == bellman_ford(graph, representative).distances
