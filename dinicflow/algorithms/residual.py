"""Residual network derivation."""

from __future__ import annotations

import numpy as np

from dinicflow.algorithms.ledger import FlowLedger
from dinicflow.errors import ConfigurationError
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.matrix import DenseMatrix


def build_residual(graph: CapacitatedGraph, ledger: FlowLedger) -> CapacitatedGraph:
    """Build the residual network of ``graph`` under the flow in ``ledger``.

    Every original edge ``(u, v)`` with capacity ``c`` and flow ``f``
    contributes ``c - f`` (if positive) to residual ``(u, v)`` and ``f`` to
    residual ``(v, u)``. Contributions are summed, so when both ``(u, v)`` and
    ``(v, u)`` are original edges each direction keeps its own remaining
    capacity plus the cancellable flow of the other. Flow recorded on pairs
    without capacity contributes nothing.

    Args:
        graph: Base graph.
        ledger: Flow over ``graph``.

    Returns:
        A new graph with the same node count, source and sink.

    Raises:
        ConfigurationError: If the ledger has a different node count.
    """
    if ledger.graph.num_nodes != graph.num_nodes:
        raise ConfigurationError(
            f"Flow ledger has {ledger.graph.num_nodes} nodes, graph has {graph.num_nodes}"
        )

    capacities = graph.capacities.array
    flows = ledger.flows.array
    has_edge = capacities > 0

    forward = np.where(has_edge, np.maximum(capacities - flows, 0), 0)
    backward = np.where(has_edge, flows, 0)
    residual = forward + backward.T

    return CapacitatedGraph(
        graph.num_nodes,
        graph.source,
        graph.sink,
        capacities=DenseMatrix(graph.num_nodes, residual, label="capacity"),
    )
