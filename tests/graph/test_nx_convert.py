import networkx as nx
import pytest

from dinicflow.algorithms.dinic import compute_max_flow
from dinicflow.errors import DomainError
from dinicflow.graph.convert import NodeMap, from_networkx, to_networkx


def test_from_networkx_digraph():
    G = nx.DiGraph()
    G.add_edge("s", "a", capacity=3)
    G.add_edge("a", "t", capacity=2)
    G.add_edge("s", "t", capacity=1)

    net, node_map = from_networkx(G, "s", "t")

    assert node_map.to_name == {0: "a", 1: "s", 2: "t"}
    assert (net.source, net.sink) == (1, 2)
    assert net.get_capacity(1, 0) == 3
    assert compute_max_flow(net).total_flow == 3


def test_from_networkx_multigraph_sums_parallel_edges():
    G = nx.MultiDiGraph()
    G.add_edge(0, 1, capacity=2)
    G.add_edge(0, 1, capacity=5)
    net, _ = from_networkx(G, 0, 1)
    assert net.get_capacity(0, 1) == 7


def test_from_networkx_undirected_doubles_edges():
    G = nx.Graph()
    G.add_edge("x", "y", capacity=4)
    net, node_map = from_networkx(G, "x", "y")
    x, y = node_map.to_index["x"], node_map.to_index["y"]
    assert net.get_capacity(x, y) == 4
    assert net.get_capacity(y, x) == 4


def test_from_networkx_drops_self_loops():
    G = nx.DiGraph()
    G.add_edge(0, 0, capacity=9)
    G.add_edge(0, 1, capacity=1)
    net, _ = from_networkx(G, 0, 1)
    assert net.get_capacity(0, 0) == 0


def test_from_networkx_default_capacity():
    G = nx.DiGraph()
    G.add_edge(0, 1)
    net, _ = from_networkx(G, 0, 1, default_capacity=6)
    assert net.get_capacity(0, 1) == 6


@pytest.mark.parametrize("capacity", [None, -1, 2.5, float("inf"), float("nan"), "wide"])
def test_from_networkx_bad_capacity(capacity):
    G = nx.DiGraph()
    if capacity is None:
        G.add_edge(0, 1)
    else:
        G.add_edge(0, 1, capacity=capacity)
    with pytest.raises(DomainError):
        from_networkx(G, 0, 1)


def test_from_networkx_unknown_terminal():
    G = nx.DiGraph()
    G.add_edge(0, 1, capacity=1)
    with pytest.raises(DomainError):
        from_networkx(G, 0, 5)


def test_from_networkx_type_error():
    with pytest.raises(TypeError):
        from_networkx({"a": "b"}, "a", "b")


def test_to_networkx_with_flow(single_edge):
    compute_max_flow(single_edge)
    G = to_networkx(single_edge)
    assert list(G.nodes()) == [0, 1]
    assert G.edges[0, 1] == {"capacity": 5, "flow": 5}
    assert G.graph["source"] == 0 and G.graph["sink"] == 1


def test_to_networkx_plain_graph_with_names(diamond4):
    node_map = NodeMap.from_names(["s", "a", "b", "t"])
    G = to_networkx(diamond4.graph, node_map)
    assert G.edges["s", "a"] == {"capacity": 3}
    assert nx.maximum_flow_value(G, "s", "t") == 5
