import pytest

from dinicflow.graph.network import FlowNetwork, new_graph


def _network(num_nodes, edges, source=0, sink=None) -> FlowNetwork:
    net = new_graph(num_nodes, source, sink)
    for u, v, capacity in edges:
        net.set_capacity(u, v, capacity)
    return net


@pytest.fixture
def diamond4():
    # Capacity:
    #        [3]      [2]
    #     ┌──────►1──────┐
    #     │       │[1]   ▼
    #     0       ▼      3
    #     │  [2]  2 [3]  ▲
    #     └──────►└──────┘
    #
    # Max flow 0 -> 3 is 5: every unit out of 0 reaches 3.
    return _network(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3), (1, 2, 1)])


@pytest.fixture
def single_edge():
    return _network(2, [(0, 1, 5)])


@pytest.fixture
def disconnected():
    # {0, 1} and {2, 3} share no edge
    return _network(4, [(0, 1, 7), (1, 0, 2), (2, 3, 4)])


@pytest.fixture
def antiparallel():
    return _network(2, [(0, 1, 4), (1, 0, 3)])


@pytest.fixture
def dead_branch6():
    # 0 -> 1 -> 3 -> 5 is a branch that passes the sink's layer;
    # 0 -> 2 -> 4 reaches the sink (node 4) at level 2.
    return _network(
        6, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1), (3, 5, 1)], source=0, sink=4
    )


@pytest.fixture
def clrs6():
    # Classic textbook network, max flow 23.
    return _network(
        6,
        [
            (0, 1, 16),
            (0, 2, 13),
            (1, 3, 12),
            (2, 1, 4),
            (2, 4, 14),
            (3, 2, 9),
            (3, 5, 20),
            (4, 3, 7),
            (4, 5, 4),
        ],
    )


@pytest.fixture
def tie4():
    # Two equal predecessors of the sink; lower index wins.
    return _network(4, [(0, 1, 5), (0, 2, 5), (1, 3, 2), (2, 3, 2)])
