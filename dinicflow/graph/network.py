"""A capacitated graph together with the flow it carries."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from dinicflow.algorithms.ledger import FlowLedger
from dinicflow.algorithms.level_graph import LevelGraph, build_level_graph
from dinicflow.algorithms.residual import build_residual
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.types.base import Capacity, NodeIndex


class FlowNetwork:
    """Owns one `CapacitatedGraph` and the one `FlowLedger` bound to it.

    Capacity accessors are forwarded to the graph. Flow is read and written
    through ``ledger``.

    Args:
        num_nodes: Number of nodes.
        source: Source index (default 0).
        sink: Sink index (default ``num_nodes - 1``).

    Raises:
        DomainError: On an unsupported node count or source/sink pair.
    """

    def __init__(
        self,
        num_nodes: int,
        source: NodeIndex = 0,
        sink: Optional[NodeIndex] = None,
    ) -> None:
        self._graph = CapacitatedGraph(num_nodes, source, sink)
        self._ledger = FlowLedger(self._graph)

    @property
    def graph(self) -> CapacitatedGraph:
        return self._graph

    @property
    def ledger(self) -> FlowLedger:
        return self._ledger

    @property
    def num_nodes(self) -> int:
        return self._graph.num_nodes

    @property
    def source(self) -> NodeIndex:
        return self._graph.source

    @property
    def sink(self) -> NodeIndex:
        return self._graph.sink

    def get_capacity(self, u: NodeIndex, v: NodeIndex) -> Capacity:
        return self._graph.get_capacity(u, v)

    def set_capacity(self, u: NodeIndex, v: NodeIndex, capacity: Capacity) -> None:
        self._graph.set_capacity(u, v, capacity)

    def has_edge(self, u: NodeIndex, v: NodeIndex) -> bool:
        return self._graph.has_edge(u, v)

    def is_valid_edge(self, u: NodeIndex, v: NodeIndex, capacity: Capacity) -> bool:
        return self._graph.is_valid_edge(u, v, capacity)

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex, Capacity]]:
        return self._graph.edges()

    def is_sink_reachable_from_source(self) -> bool:
        """Reachability over original edges, ignoring the current flow."""
        return self._graph.is_sink_reachable_from_source()

    def total_flow(self) -> Capacity:
        return self._ledger.get_total_flow()

    def build_residual(self) -> CapacitatedGraph:
        """Residual network of the current flow."""
        return build_residual(self._graph, self._ledger)

    def build_level_graph(self) -> LevelGraph:
        """Level graph of the current residual network."""
        return build_level_graph(self.build_residual())

    def __str__(self) -> str:
        return str(self._graph)

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(num_nodes={self.num_nodes}, source={self.source}, "
            f"sink={self.sink}, total_flow={self.total_flow()})"
        )


def new_graph(
    num_nodes: int,
    source: Optional[NodeIndex] = None,
    sink: Optional[NodeIndex] = None,
) -> FlowNetwork:
    """Create an empty network; source and sink default to the first and last node."""
    return FlowNetwork(num_nodes, 0 if source is None else source, sink)
