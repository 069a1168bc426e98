import numpy as np
import pytest

from dinicflow.config import MAX_NUMBER_OF_NODES, MIN_NUMBER_OF_NODES
from dinicflow.errors import DomainError, NodeIndexError
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.matrix import MAX_ENTRY


class TestConstruction:
    def test_defaults(self):
        graph = CapacitatedGraph(5)
        assert graph.num_nodes == 5
        assert graph.source == 0
        assert graph.sink == 4
        assert graph.num_edges() == 0

    def test_explicit_terminals(self):
        graph = CapacitatedGraph(5, 3, 1)
        assert (graph.source, graph.sink) == (3, 1)

    @pytest.mark.parametrize("n", [MIN_NUMBER_OF_NODES - 1, 0, -3, MAX_NUMBER_OF_NODES + 1])
    def test_node_count_out_of_bounds(self, n):
        with pytest.raises(DomainError):
            CapacitatedGraph(n)

    def test_node_count_bounds_inclusive(self):
        assert CapacitatedGraph(MIN_NUMBER_OF_NODES).num_nodes == MIN_NUMBER_OF_NODES

    def test_source_equals_sink(self):
        with pytest.raises(DomainError, match="different"):
            CapacitatedGraph(3, 1, 1)

    @pytest.mark.parametrize("source, sink", [(-1, 2), (3, 0), (0, 3)])
    def test_terminal_out_of_range(self, source, sink):
        with pytest.raises(DomainError):
            CapacitatedGraph(3, source, sink)

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            CapacitatedGraph(1)


class TestCapacities:
    def test_set_get(self):
        graph = CapacitatedGraph(3)
        graph.set_capacity(0, 2, 7)
        assert graph.get_capacity(0, 2) == 7
        assert isinstance(graph.get_capacity(0, 2), int)
        assert graph.get_capacity(2, 0) == 0

    def test_zero_removes_edge(self):
        graph = CapacitatedGraph(3)
        graph.set_capacity(0, 1, 4)
        assert graph.has_edge(0, 1)
        graph.set_capacity(0, 1, 0)
        assert not graph.has_edge(0, 1)

    def test_negative_capacity(self):
        graph = CapacitatedGraph(3)
        with pytest.raises(DomainError, match="negative"):
            graph.set_capacity(0, 1, -2)
        assert graph.get_capacity(0, 1) == 0

    @pytest.mark.parametrize("capacity", [0.5, 2.9, float("inf"), float("nan"), "3"])
    def test_non_integer_capacity(self, capacity):
        graph = CapacitatedGraph(3)
        graph.set_capacity(0, 1, 4)
        with pytest.raises(DomainError, match="integer"):
            graph.set_capacity(0, 1, capacity)
        assert graph.get_capacity(0, 1) == 4

    def test_integral_float_and_numpy_capacity(self):
        graph = CapacitatedGraph(3)
        graph.set_capacity(0, 1, 3.0)
        graph.set_capacity(1, 2, np.int32(5))
        assert graph.get_capacity(0, 1) == 3
        assert graph.get_capacity(1, 2) == 5

    def test_capacity_above_int64(self):
        graph = CapacitatedGraph(3)
        with pytest.raises(DomainError, match="maximum"):
            graph.set_capacity(0, 1, 2**70)
        graph.set_capacity(0, 1, MAX_ENTRY)
        assert graph.get_capacity(0, 1) == MAX_ENTRY

    @pytest.mark.parametrize("u, v", [(3, 0), (0, 3), (-1, 1)])
    def test_out_of_range(self, u, v):
        graph = CapacitatedGraph(3)
        with pytest.raises(NodeIndexError):
            graph.set_capacity(u, v, 1)
        with pytest.raises(NodeIndexError):
            graph.get_capacity(u, v)
        with pytest.raises(IndexError):
            graph.has_edge(u, v)

    def test_index_checked_before_sign(self):
        graph = CapacitatedGraph(3)
        with pytest.raises(NodeIndexError):
            graph.set_capacity(5, 0, -1)

    def test_is_valid_edge(self):
        graph = CapacitatedGraph.from_edges(3, [(0, 1, 4)])
        assert graph.is_valid_edge(0, 1, 4)
        assert not graph.is_valid_edge(0, 1, 3)
        assert graph.is_valid_edge(1, 2, 0)
        assert not graph.is_valid_edge(0, 9, 4)


class TestTraversal:
    def test_successors_predecessors(self):
        graph = CapacitatedGraph.from_edges(4, [(0, 2, 1), (0, 1, 1), (3, 1, 2)])
        assert graph.successors(0) == [1, 2]
        assert graph.predecessors(1) == [0, 3]

    def test_edges_row_major(self):
        graph = CapacitatedGraph.from_edges(3, [(2, 0, 1), (0, 1, 5), (0, 2, 3)])
        assert list(graph.edges()) == [(0, 1, 5), (0, 2, 3), (2, 0, 1)]

    def test_reachability(self):
        graph = CapacitatedGraph.from_edges(4, [(0, 1, 1), (1, 2, 1), (3, 0, 1)])
        assert graph.reachable_from(0) == {0, 1, 2}
        assert not graph.is_sink_reachable_from_source()
        graph.set_capacity(2, 3, 1)
        assert graph.is_sink_reachable_from_source()

    def test_direct_edge_reachability(self):
        graph = CapacitatedGraph.from_edges(2, [(0, 1, 1)])
        assert graph.is_sink_reachable_from_source()

    def test_reverse_edge_does_not_count(self):
        graph = CapacitatedGraph.from_edges(2, [(1, 0, 1)])
        assert not graph.is_sink_reachable_from_source()


def test_str_renders_matrix():
    graph = CapacitatedGraph.from_edges(3, [(0, 1, 5), (1, 2, 12)])
    assert str(graph) == "0 5 0\n0 0 12\n0 0 0\n"


def test_copy_and_equality():
    graph = CapacitatedGraph.from_edges(3, [(0, 1, 5)])
    clone = graph.copy()
    assert clone == graph
    clone.set_capacity(0, 1, 1)
    assert clone != graph
    assert graph.get_capacity(0, 1) == 5
