"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from dinicflow.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>> network, node_map = from_networkx(G, "s", "t")
    >>> node_map.to_index["a"]
    0
    >>> G_out = to_networkx(network, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from dinicflow.errors import DomainError
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.network import FlowNetwork

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    source: Hashable,
    sink: Hashable,
    *,
    capacity_attr: str = "capacity",
    default_capacity: Optional[int] = None,
) -> Tuple[FlowNetwork, NodeMap]:
    """Convert a NetworkX graph into a `FlowNetwork`.

    Nodes are sorted by ``str`` for deterministic indexing. Parallel edges of
    multigraphs are merged by summing capacities; undirected edges become a
    pair of opposite directed edges with the same capacity. Self-loops are
    dropped since they never carry source-sink flow.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        source: Name of the source node.
        sink: Name of the sink node.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges lacking the attribute; None
            makes a missing attribute an error.

    Returns:
        Tuple of (network, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        DomainError: If source or sink is not in G, an edge has no capacity,
            or a capacity is negative or not integral.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    for role, name in (("Source", source), ("Sink", sink)):
        if name not in G:
            raise DomainError(f"{role} node {name!r} is not in the graph")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    network = FlowNetwork(
        len(node_map), node_map.to_index[source], node_map.to_index[sink]
    )

    for u, v, data in G.edges(data=True):
        if u == v:
            continue
        capacity = _edge_capacity(u, v, data, capacity_attr, default_capacity)
        pairs = [(u, v)] if G.is_directed() else [(u, v), (v, u)]
        for a, b in pairs:
            i, j = node_map.to_index[a], node_map.to_index[b]
            network.set_capacity(i, j, network.get_capacity(i, j) + capacity)

    return network, node_map


def to_networkx(
    graph: Union[CapacitatedGraph, FlowNetwork],
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> "nx.DiGraph":
    """Convert a graph or network to a NetworkX DiGraph.

    Every positive-capacity edge becomes a DiGraph edge with ``capacity_attr``
    set; for a `FlowNetwork`, ``flow_attr`` carries the ledger's flow. The
    graph attributes ``source`` and ``sink`` name the terminals.

    Args:
        graph: CapacitatedGraph or FlowNetwork to convert.
        node_map: Optional NodeMap restoring original node names; nodes are
            labeled 0..n-1 otherwise.
        capacity_attr: Edge attribute name for capacity.
        flow_attr: Edge attribute name for flow.
    """
    import networkx as nx

    ledger = graph.ledger if isinstance(graph, FlowNetwork) else None
    base = graph.graph if isinstance(graph, FlowNetwork) else graph

    def name(index: int) -> Hashable:
        if node_map is None:
            return index
        return node_map.to_name.get(index, index)

    G = nx.DiGraph(source=name(base.source), sink=name(base.sink))
    G.add_nodes_from(name(i) for i in range(base.num_nodes))
    for u, v, capacity in base.edges():
        attrs = {capacity_attr: capacity}
        if ledger is not None:
            attrs[flow_attr] = ledger.get_flow(u, v)
        G.add_edge(name(u), name(v), **attrs)
    return G


def _edge_capacity(
    u: Hashable,
    v: Hashable,
    data: Dict[str, Any],
    capacity_attr: str,
    default_capacity: Optional[int],
) -> int:
    value = data.get(capacity_attr, default_capacity)
    if value is None:
        raise DomainError(f"Edge ({u!r}, {v!r}) has no '{capacity_attr}' attribute")
    try:
        capacity = int(value)
    except (TypeError, ValueError, OverflowError):
        raise DomainError(
            f"Capacity of edge ({u!r}, {v!r}) must be a finite integer, got {value!r}"
        ) from None
    if capacity != value:
        raise DomainError(f"Capacity of edge ({u!r}, {v!r}) must be an integer, got {value!r}")
    if capacity < 0:
        raise DomainError(f"Capacity of edge ({u!r}, {v!r}) cannot be negative")
    return capacity
