"""Blocking flow on a level graph.

Augmenting paths are extracted from the level graph one at a time, pushed to
their bottleneck and subtracted from the level graph's capacities, until no
source-sink path remains. Two extraction strategies exist (see `PathSearch`):

- ``GREEDY_BACKWARD`` walks from the sink toward the source, at each hop
  picking the predecessor with the largest remaining capacity (lowest index
  on ties). It does not backtrack: if the walk hits a node whose incoming
  edges were all saturated, the phase ends early and the next phase picks up
  the remaining flow.
- ``DFS`` searches forward from the source with a per-node edge pointer that
  only advances within a phase, which yields a true blocking flow.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from dinicflow.algorithms.ledger import FlowLedger
from dinicflow.algorithms.level_graph import UNVISITED, LevelGraph
from dinicflow.logging import get_logger
from dinicflow.types.base import Capacity, NodeIndex, PathSearch

logger = get_logger(__name__)

Path = List[NodeIndex]
PathFinder = Callable[[], Optional[Path]]


def find_augmenting_path(level_graph: LevelGraph) -> Optional[Path]:
    """Walk backward from the sink along max-capacity predecessors.

    Args:
        level_graph: Level graph with current remaining capacities.

    Returns:
        Nodes from source to sink, or None if the sink was never reached or
        some node on the walk has no remaining incoming edge.
    """
    if not level_graph.sink_reached():
        return None

    capacities = level_graph.graph.capacities.array
    levels = level_graph.levels

    node = level_graph.sink
    reverse_path = [node]
    while levels[node] > 0:
        column = capacities[:, node]
        predecessor = int(np.argmax(column))
        if column[predecessor] <= 0:
            return None
        reverse_path.append(predecessor)
        node = predecessor

    reverse_path.reverse()
    return reverse_path


class _PointerSearch:
    """Forward DFS with advancing edge pointers, valid for one level graph."""

    def __init__(self, level_graph: LevelGraph) -> None:
        self._level_graph = level_graph
        self._next = [0] * level_graph.num_nodes

    def __call__(self) -> Optional[Path]:
        level_graph = self._level_graph
        if not level_graph.sink_reached():
            return None

        capacities = level_graph.graph.capacities.array
        sink = level_graph.sink
        pointers = self._next
        path = [level_graph.source]
        while path:
            node = path[-1]
            if node == sink:
                return path
            start = pointers[node]
            ahead = np.flatnonzero(capacities[node, start:] > 0)
            if ahead.size:
                pointers[node] = start + int(ahead[0])
                path.append(pointers[node])
                continue
            # dead end: retire the node and the parent's edge into it
            pointers[node] = level_graph.num_nodes
            path.pop()
            if path:
                pointers[path[-1]] += 1
        return None


def compute_bottleneck(level_graph: LevelGraph, path: Sequence[NodeIndex]) -> Capacity:
    """Minimum remaining capacity along ``path``; 0 for paths of length <= 1."""
    if len(path) <= 1:
        return 0
    return min(level_graph.get_capacity(u, v) for u, v in zip(path, path[1:]))


def saturate_path(
    level_graph: LevelGraph,
    ledger: FlowLedger,
    path: Sequence[NodeIndex],
    amount: Capacity,
) -> None:
    """Push ``amount`` along ``path``.

    Each level-graph edge on the path loses ``amount`` of capacity (possibly
    dropping to zero) and the original graph's ledger gains ``amount`` of
    skew-symmetric flow on the same pair.
    """
    for u, v in zip(path, path[1:]):
        level_graph.set_capacity(u, v, level_graph.get_capacity(u, v) - amount)
        ledger.add_flow(u, v, amount)


def path_finder(level_graph: LevelGraph, path_search: PathSearch) -> PathFinder:
    """Return a zero-argument callable yielding successive augmenting paths."""
    if path_search == PathSearch.DFS:
        return _PointerSearch(level_graph)
    return lambda: find_augmenting_path(level_graph)


def compute_blocking_flow(
    level_graph: LevelGraph,
    ledger: FlowLedger,
    path_search: PathSearch = PathSearch.GREEDY_BACKWARD,
) -> Tuple[int, Capacity]:
    """Saturate augmenting paths in ``level_graph`` until none is found.

    Args:
        level_graph: Level graph for the current phase; consumed in place.
        ledger: Flow ledger of the original graph.
        path_search: Path extraction strategy.

    Returns:
        Tuple of (number of augmenting paths, total flow pushed).
    """
    if level_graph.sink_level == UNVISITED:
        return 0, 0

    next_path = path_finder(level_graph, path_search)
    augmentations = 0
    pushed = 0
    path = next_path()
    while path is not None:
        bottleneck = compute_bottleneck(level_graph, path)
        saturate_path(level_graph, ledger, path, bottleneck)
        logger.debug("Augmented %d along %s", bottleneck, path)
        augmentations += 1
        pushed += bottleneck
        path = next_path()
    return augmentations, pushed
