"""
Unit tests for Floyd-Warshall and its single-source projection.
"""

import pytest

from pathtrace.algorithms import UNREACHABLE, StepKind, dijkstra, floyd_warshall
from pathtrace.graph import Edge, Graph, Node


class TestSimpleSample:
    """The Simple Sample preset, projected onto A."""

    @pytest.fixture
    def result(self, simple_graph):
        return floyd_warshall(simple_graph)

    def test_representative_source_is_first_node(self, result):
        assert result.source_id == "A"
        assert result.algorithm == "floyd-warshall"

    def test_projected_distances(self, result):
        """A's row of the all-pairs matrix."""
        assert dict(result.distances) == {"A": 0, "B": 4, "C": 2, "D": 9, "E": 11}

    def test_projected_paths(self, result):
        """Paths come from the next-hop matrix."""
        assert result.paths["D"] == ("A", "B", "D")
        assert result.paths["E"] == ("A", "B", "D", "E")
        assert result.paths["C"] == ("A", "C")
        assert "A" not in result.paths

    def test_previous_nodes_follow_paths(self, result):
        """Each predecessor is the second-to-last node on its path."""
        assert dict(result.previous_nodes) == {
            "A": None,
            "B": "A",
            "C": "A",
            "D": "B",
            "E": "D",
        }

    def test_initialization_step_first(self, result):
        first = result.steps[0]
        assert first.kind is StepKind.DISTANCE_UPDATE
        assert first.message == "Initialized distance matrix with direct edges"

    def test_one_visit_per_intermediate(self, result):
        """Every node is announced once as intermediate, in graph order."""
        visits = [s.node_id for s in result.steps if s.kind is StepKind.NODE_VISIT]
        assert visits == ["A", "B", "C", "D", "E"]

    def test_update_messages(self, result):
        """Every strict improvement is reported, in (k, i, j) scan order."""
        updates = [s.message for s in result.steps if s.kind is StepKind.DISTANCE_UPDATE]
        assert updates == [
            "Initialized distance matrix with direct edges",
            "Updated path A → D via B, new distance: 9",
            "Updated path A → E via C, new distance: 12",
            "Updated path B → E via C, new distance: 11",
            "Updated path A → E via D, new distance: 11",
            "Updated path B → E via D, new distance: 7",
        ]
        assert len(result.steps) == 11

    def test_integer_weights_stay_integers(self, result):
        """Integer inputs produce plain Python ints."""
        assert all(type(d) is int for d in result.distances.values())


class TestMatrixInitialization:
    """Parallel edges, self-loops and dangling edges."""

    def test_last_parallel_edge_wins(self):
        """The later edge overwrites the earlier one even when it is longer."""
        graph = Graph(
            nodes=[Node("A"), Node("B")],
            edges=[Edge("AB2", "A", "B", 2), Edge("AB", "A", "B", 5)],
        )
        assert floyd_warshall(graph).distances["B"] == 5

    def test_self_loop_keeps_zero_diagonal(self):
        graph = Graph(
            nodes=[Node("A"), Node("B")],
            edges=[Edge("AA", "A", "A", 7), Edge("AB", "A", "B", 1)],
        )
        result = floyd_warshall(graph)
        assert result.distances["A"] == 0
        assert result.distances["B"] == 1

    def test_dangling_edges_are_skipped(self):
        graph = Graph(
            nodes=[Node("A"), Node("B")],
            edges=[Edge("AX", "A", "X", 1), Edge("XB", "X", "B", 1)],
        )
        result = floyd_warshall(graph)
        assert result.distances["B"] is UNREACHABLE
        assert dict(result.paths) == {}

    def test_float_weights(self):
        """Any float weight switches the matrix to floats."""
        graph = Graph(
            nodes=[Node("A"), Node("B"), Node("C")],
            edges=[Edge("AB", "A", "B", 1.5), Edge("BC", "B", "C", 2)],
        )
        result = floyd_warshall(graph)
        assert result.distances["C"] == pytest.approx(3.5)
        assert result.paths["C"] == ("A", "B", "C")

    def test_large_integer_sums_do_not_wrap(self):
        """Path sums past the int64 range stay exact and positive."""
        graph = Graph(
            nodes=[Node("A"), Node("B"), Node("C")],
            edges=[Edge("AB", "A", "B", 2**62), Edge("BC", "B", "C", 2**62)],
        )
        result = floyd_warshall(graph)
        assert result.distances["C"] == 2**63
        assert result.distances["C"] == dijkstra(graph, "A").distances["C"]
        assert result.paths["C"] == ("A", "B", "C")

    def test_weight_beyond_int64(self):
        graph = Graph(
            nodes=[Node("A"), Node("B")],
            edges=[Edge("AB", "A", "B", 10**20)],
        )
        result = floyd_warshall(graph)
        assert result.distances["B"] == 10**20
        assert type(result.distances["B"]) is int


class TestEdgeCases:
    """Inputs the engine absorbs without raising."""

    def test_unreachable_from_representative(self, disconnected_graph):
        """C and D are not reachable from A, even though D is from C."""
        result = floyd_warshall(disconnected_graph)
        assert result.distances["C"] is UNREACHABLE
        assert result.distances["D"] is UNREACHABLE
        assert set(result.paths) == {"B"}

    def test_empty_graph(self, empty_graph):
        result = floyd_warshall(empty_graph)
        assert result.source_id is None
        assert dict(result.distances) == {}
        assert len(result.steps) == 1

    def test_negative_cycle_terminates(self, negative_cycle_graph):
        """A negative cycle does not hang path reconstruction."""
        result = floyd_warshall(negative_cycle_graph)
        assert result.source_id == "A"
        assert set(result.distances) == {"A", "B"}
