import pytest

from dinicflow.algorithms.ledger import FlowLedger
from dinicflow.errors import DomainError
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.network import FlowNetwork, new_graph


def test_new_graph_default_terminals():
    net = new_graph(4)
    assert (net.source, net.sink) == (0, 3)
    assert isinstance(net.graph, CapacitatedGraph)
    assert isinstance(net.ledger, FlowLedger)
    assert net.ledger.graph is net.graph


def test_new_graph_explicit_terminals():
    net = new_graph(4, 2, 1)
    assert (net.source, net.sink) == (2, 1)


def test_new_graph_validates():
    with pytest.raises(DomainError):
        new_graph(4, 2, 2)


def test_capacity_delegation():
    net = FlowNetwork(3)
    net.set_capacity(0, 1, 4)
    assert net.graph.get_capacity(0, 1) == 4
    assert net.has_edge(0, 1)
    assert net.is_valid_edge(0, 1, 4)
    assert list(net.edges()) == [(0, 1, 4)]


def test_reachability_ignores_flow():
    net = FlowNetwork(2)
    net.set_capacity(0, 1, 1)
    net.ledger.set_flow(0, 1, 1)
    assert net.is_sink_reachable_from_source()
    assert not net.build_residual().is_sink_reachable_from_source()


def test_str_and_total_flow():
    net = FlowNetwork(2)
    net.set_capacity(0, 1, 3)
    net.ledger.set_flow(0, 1, 2)
    assert str(net) == "0 3\n0 0\n"
    assert net.total_flow() == 2
    assert "total_flow=2" in repr(net)
