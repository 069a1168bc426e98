"""Directed graph with integer edge capacities and a designated source/sink.

Capacities live in a dense ``n x n`` matrix; a capacity of 0 means "no edge".
Residual networks and level graphs are plain `CapacitatedGraph` instances
built from fresh matrices, so nothing here knows about flows or levels.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from dinicflow.config import MAX_NUMBER_OF_NODES, MIN_NUMBER_OF_NODES
from dinicflow.errors import DomainError
from dinicflow.graph.matrix import DenseMatrix
from dinicflow.types.base import Capacity, NodeIndex


class CapacitatedGraph:
    """Dense capacitated digraph over nodes ``0..n-1``.

    Construction validates the node count against
    ``[MIN_NUMBER_OF_NODES, MAX_NUMBER_OF_NODES]`` and the source/sink pair;
    after that only capacities change.

    Args:
        num_nodes: Number of nodes.
        source: Source index (default 0).
        sink: Sink index (default ``num_nodes - 1``).
        capacities: Optional pre-built capacity matrix of matching size. The
            graph takes ownership of it.

    Raises:
        DomainError: If the node count is out of bounds, source equals sink,
            or either index is out of range.
    """

    def __init__(
        self,
        num_nodes: int,
        source: NodeIndex = 0,
        sink: Optional[NodeIndex] = None,
        *,
        capacities: Optional[DenseMatrix] = None,
    ) -> None:
        if num_nodes < MIN_NUMBER_OF_NODES:
            raise DomainError(f"Graph must have at least {MIN_NUMBER_OF_NODES} nodes")
        if num_nodes > MAX_NUMBER_OF_NODES:
            raise DomainError(f"Graph must have no more than {MAX_NUMBER_OF_NODES} nodes")
        if sink is None:
            sink = num_nodes - 1
        if not 0 <= source < num_nodes:
            raise DomainError(f"Bad source index {source}")
        if not 0 <= sink < num_nodes:
            raise DomainError(f"Bad sink index {sink}")
        if source == sink:
            raise DomainError("Source and sink must be different")

        if capacities is None:
            capacities = DenseMatrix(num_nodes, label="capacity")
        elif capacities.size != num_nodes:
            raise DomainError(
                f"Capacity matrix has {capacities.size} nodes, expected {num_nodes}"
            )

        self._num_nodes = num_nodes
        self._source = source
        self._sink = sink
        self._capacities = capacities

    @classmethod
    def from_edges(
        cls,
        num_nodes: int,
        edges: Iterable[Tuple[NodeIndex, NodeIndex, Capacity]],
        source: NodeIndex = 0,
        sink: Optional[NodeIndex] = None,
    ) -> "CapacitatedGraph":
        """Build a graph from ``(u, v, capacity)`` triples.

        A repeated ``(u, v)`` overwrites the earlier capacity.
        """
        graph = cls(num_nodes, source, sink)
        for u, v, capacity in edges:
            graph.set_capacity(u, v, capacity)
        return graph

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @property
    def source(self) -> NodeIndex:
        return self._source

    @property
    def sink(self) -> NodeIndex:
        return self._sink

    @property
    def capacities(self) -> DenseMatrix:
        return self._capacities

    def get_capacity(self, u: NodeIndex, v: NodeIndex) -> Capacity:
        """Return the capacity of ``(u, v)``.

        Raises:
            NodeIndexError: If either index is out of range.
        """
        return self._capacities.get(u, v)

    def set_capacity(self, u: NodeIndex, v: NodeIndex, capacity: Capacity) -> None:
        """Set the capacity of ``(u, v)``; 0 removes the edge.

        Raises:
            NodeIndexError: If either index is out of range.
            DomainError: If ``capacity`` is negative.
        """
        self._capacities.set(u, v, capacity)

    def has_edge(self, u: NodeIndex, v: NodeIndex) -> bool:
        """Return True iff ``(u, v)`` has positive capacity.

        Raises:
            NodeIndexError: If either index is out of range.
        """
        return self._capacities.get(u, v) > 0

    def is_valid_edge(self, u: NodeIndex, v: NodeIndex, capacity: Capacity) -> bool:
        """Return True iff ``(u, v)`` exists in range with exactly ``capacity``.

        Out-of-range indices yield False instead of an error.
        """
        try:
            return self._capacities.get(u, v) == capacity
        except IndexError:
            return False

    def successors(self, u: NodeIndex) -> List[NodeIndex]:
        """Nodes ``v`` with ``capacity(u, v) > 0``, ascending."""
        self._capacities.check_index(u)
        return np.flatnonzero(self._capacities.array[u] > 0).tolist()

    def predecessors(self, v: NodeIndex) -> List[NodeIndex]:
        """Nodes ``u`` with ``capacity(u, v) > 0``, ascending."""
        self._capacities.check_index(v)
        return np.flatnonzero(self._capacities.array[:, v] > 0).tolist()

    def edges(self) -> Iterator[Tuple[NodeIndex, NodeIndex, Capacity]]:
        """Yield ``(u, v, capacity)`` for every edge in row-major order."""
        return self._capacities.nonzero()

    def num_edges(self) -> int:
        return int(np.count_nonzero(self._capacities.array))

    def reachable_from(self, start: NodeIndex) -> Set[NodeIndex]:
        """Return every node reachable from ``start`` over positive edges."""
        self._capacities.check_index(start)
        adjacency = self._capacities.array > 0
        seen = np.zeros(self._num_nodes, dtype=bool)
        seen[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            fresh = np.flatnonzero(adjacency[node] & ~seen)
            seen[fresh] = True
            queue.extend(fresh.tolist())
        return set(np.flatnonzero(seen).tolist())

    def is_sink_reachable_from_source(self) -> bool:
        """Plain BFS reachability of the sink from the source."""
        adjacency = self._capacities.array > 0
        seen = np.zeros(self._num_nodes, dtype=bool)
        seen[self._source] = True
        queue = deque([self._source])
        while queue:
            node = queue.popleft()
            if adjacency[node, self._sink]:
                return True
            fresh = np.flatnonzero(adjacency[node] & ~seen)
            seen[fresh] = True
            queue.extend(fresh.tolist())
        return False

    def copy(self) -> "CapacitatedGraph":
        return CapacitatedGraph(
            self._num_nodes, self._source, self._sink, capacities=self._capacities.copy()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapacitatedGraph):
            return NotImplemented
        return (
            self._source == other._source
            and self._sink == other._sink
            and self._capacities == other._capacities
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._capacities)

    def __repr__(self) -> str:
        return (
            f"CapacitatedGraph(num_nodes={self._num_nodes}, source={self._source}, "
            f"sink={self._sink}, edges={self.num_edges()})"
        )
