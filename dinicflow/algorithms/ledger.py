"""Per-edge flow bookkeeping for a capacitated graph.

The ledger stores one non-negative flow value per ordered node pair. Updates
through `FlowLedger.add_flow` are skew-symmetric: flow pushed along ``(u, v)``
first cancels flow already on ``(v, u)``. Capacity and conservation are not
enforced on every write; `FlowLedger.is_valid` checks them on demand.
"""

from __future__ import annotations

from typing import List

import numpy as np

from dinicflow.config import INDEX_OFFSET
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.matrix import DenseMatrix
from dinicflow.logging import get_logger
from dinicflow.types.base import Capacity, NodeIndex

logger = get_logger(__name__)


class FlowLedger:
    """Flow matrix bound to the graph whose capacities it must respect.

    Args:
        graph: Owning graph. Capacities are read from it at validation and
            rendering time, so later capacity edits are taken into account.
    """

    def __init__(self, graph: CapacitatedGraph) -> None:
        self._graph = graph
        self._flows = DenseMatrix(graph.num_nodes, label="flow")

    @property
    def graph(self) -> CapacitatedGraph:
        return self._graph

    @property
    def flows(self) -> DenseMatrix:
        return self._flows

    def get_flow(self, u: NodeIndex, v: NodeIndex) -> Capacity:
        """Return the flow on ``(u, v)``.

        Raises:
            NodeIndexError: If either index is out of range.
        """
        return self._flows.get(u, v)

    def set_flow(self, u: NodeIndex, v: NodeIndex, flow: Capacity) -> None:
        """Overwrite the flow on ``(u, v)`` without touching ``(v, u)``.

        Raises:
            NodeIndexError: If either index is out of range.
            DomainError: If ``flow`` is negative.
        """
        self._flows.set(u, v, flow)

    def add_flow(self, u: NodeIndex, v: NodeIndex, delta: Capacity) -> None:
        """Push ``delta`` units along ``(u, v)``.

        Flow on the opposite pair ``(v, u)`` is cancelled first, by at most
        ``delta``; whatever remains is added to ``(u, v)``.
        """
        back = self._flows.get(v, u)
        reduction = min(back, delta)
        self._flows.set(v, u, back - reduction)
        self._flows.set(u, v, self._flows.get(u, v) + delta - reduction)

    def clear(self) -> None:
        """Zero every entry."""
        self._flows.clear()

    def snapshot(self) -> np.ndarray:
        """Return a copy of the flow matrix."""
        return self._flows.array.copy()

    def outflow(self) -> np.ndarray:
        """Total outgoing flow per node."""
        return self._flows.array.sum(axis=1)

    def inflow(self) -> np.ndarray:
        """Total incoming flow per node."""
        return self._flows.array.sum(axis=0)

    def get_total_flow(self) -> Capacity:
        """Sum of the flow leaving the source."""
        return int(self._flows.array[self._graph.source].sum())

    def violations(self) -> List[str]:
        """Describe every capacity or conservation violation.

        Returns:
            Human-readable messages with 1-based node numbers; empty when the
            flow is valid.
        """
        problems: List[str] = []
        flows = self._flows.array
        capacities = self._graph.capacities.array
        source, sink = self._graph.source, self._graph.sink

        for u, v in zip(*np.nonzero(flows > capacities)):
            problems.append(
                f"flow {int(flows[u, v])} on ({u + INDEX_OFFSET}, {v + INDEX_OFFSET}) "
                f"exceeds capacity {int(capacities[u, v])}"
            )

        outflow = flows.sum(axis=1)
        inflow = flows.sum(axis=0)
        if outflow[source] != inflow[sink]:
            problems.append(
                f"source outflow {int(outflow[source])} differs from "
                f"sink inflow {int(inflow[sink])}"
            )

        interior = np.ones(self._graph.num_nodes, dtype=bool)
        interior[[source, sink]] = False
        for node in np.flatnonzero(interior & (outflow != inflow)):
            problems.append(
                f"node {node + INDEX_OFFSET} has inflow {int(inflow[node])} "
                f"but outflow {int(outflow[node])}"
            )
        return problems

    def is_valid(self) -> bool:
        """Check capacity bounds and conservation.

        Returns False (never raises) when any edge carries more than its
        capacity, source outflow differs from sink inflow, or an interior
        node's inflow differs from its outflow.
        """
        problems = self.violations()
        for message in problems:
            logger.debug("Invalid flow: %s", message)
        return not problems

    def __str__(self) -> str:
        capacities = self._graph.capacities
        return "".join(
            f"({u + INDEX_OFFSET}, {v + INDEX_OFFSET}) "
            f"({flow}/{capacities.get(u, v)})\n"
            for u, v, flow in self._flows.nonzero()
        )

    def __repr__(self) -> str:
        return f"FlowLedger(num_nodes={self._graph.num_nodes}, total_flow={self.get_total_flow()})"
