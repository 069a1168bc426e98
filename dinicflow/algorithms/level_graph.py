"""BFS level graph over a residual network.

A level graph keeps only residual edges that advance exactly one BFS layer
away from the source. The BFS stops as soon as the sink is dequeued; at that
point every node whose level is at least the sink's loses its outgoing edges,
since none of them can lie on a shortest source-sink path.
"""

from __future__ import annotations

from collections import deque
from typing import List

import numpy as np

from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.matrix import DTYPE, DenseMatrix
from dinicflow.logging import get_logger
from dinicflow.types.base import Capacity, NodeIndex

logger = get_logger(__name__)

#: Level of a node the BFS never reached.
UNVISITED = -1


class LevelGraph:
    """Layered subgraph of a residual network plus the BFS level of each node.

    The edge store is its own `CapacitatedGraph`; blocking-flow computation
    lowers its capacities in place as paths get saturated.
    """

    def __init__(self, graph: CapacitatedGraph, levels: np.ndarray) -> None:
        self._graph = graph
        self._levels = levels

    @property
    def graph(self) -> CapacitatedGraph:
        return self._graph

    @property
    def num_nodes(self) -> int:
        return self._graph.num_nodes

    @property
    def source(self) -> NodeIndex:
        return self._graph.source

    @property
    def sink(self) -> NodeIndex:
        return self._graph.sink

    @property
    def levels(self) -> np.ndarray:
        """Read-only level array; `UNVISITED` for nodes the BFS never reached."""
        view = self._levels.view()
        view.flags.writeable = False
        return view

    def level(self, node: NodeIndex) -> int:
        self._graph.capacities.check_index(node)
        return int(self._levels[node])

    @property
    def sink_level(self) -> int:
        return int(self._levels[self._graph.sink])

    def sink_reached(self) -> bool:
        return self.sink_level != UNVISITED

    def get_capacity(self, u: NodeIndex, v: NodeIndex) -> Capacity:
        return self._graph.get_capacity(u, v)

    def set_capacity(self, u: NodeIndex, v: NodeIndex, capacity: Capacity) -> None:
        self._graph.set_capacity(u, v, capacity)

    def has_edge(self, u: NodeIndex, v: NodeIndex) -> bool:
        return self._graph.has_edge(u, v)

    def is_sink_reachable_from_source(self) -> bool:
        return self._graph.is_sink_reachable_from_source()

    def layers(self) -> List[List[NodeIndex]]:
        """Group reached nodes by level, index 0 holding the source."""
        reached = self._levels[self._levels != UNVISITED]
        if reached.size == 0:
            return []
        return [
            np.flatnonzero(self._levels == depth).tolist()
            for depth in range(int(reached.max()) + 1)
        ]

    def __str__(self) -> str:
        return str(self._graph)

    def __repr__(self) -> str:
        return (
            f"LevelGraph(num_nodes={self.num_nodes}, sink_level={self.sink_level}, "
            f"edges={self._graph.num_edges()})"
        )


def build_level_graph(residual: CapacitatedGraph) -> LevelGraph:
    """Layer ``residual`` by BFS from its source.

    Edges ``(u, v)`` are copied only when ``level(v) > level(u)``, which under
    BFS means ``level(v) == level(u) + 1``; same-layer and backward edges are
    dropped. Successors are scanned in ascending index order.

    If the queue empties before the sink is dequeued, the partial structure
    is returned and the sink stays `UNVISITED`.

    Args:
        residual: Residual network to layer. It is not modified.

    Returns:
        A fresh `LevelGraph` with the residual's node count, source and sink.
    """
    n = residual.num_nodes
    source, sink = residual.source, residual.sink
    res = residual.capacities.array

    levels = np.full(n, UNVISITED, dtype=DTYPE)
    levels[source] = 0
    kept = np.zeros((n, n), dtype=DTYPE)

    queue = deque([source])
    while queue:
        node = queue.popleft()
        if node == sink:
            _remove_dead_edges(kept, levels, int(levels[sink]))
            break

        current = levels[node]
        targets = np.flatnonzero(res[node] > 0)
        fresh = targets[levels[targets] == UNVISITED]
        levels[fresh] = current + 1
        queue.extend(fresh.tolist())

        forward = targets[levels[targets] > current]
        kept[node, forward] = res[node, forward]

    logger.debug(
        "Level graph built: sink level %d, %d edges",
        int(levels[sink]),
        int(np.count_nonzero(kept)),
    )
    graph = CapacitatedGraph(n, source, sink, capacities=DenseMatrix(n, kept, label="capacity"))
    return LevelGraph(graph, levels)


def _remove_dead_edges(kept: np.ndarray, levels: np.ndarray, sink_level: int) -> None:
    """Drop all outgoing edges of nodes at or beyond the sink's level."""
    kept[levels >= sink_level, :] = 0
