"""dinicflow: maximum flow on dense capacitated graphs with Dinic's algorithm.

Primary API:
    new_graph() - Create a FlowNetwork (graph + flow ledger)
    compute_max_flow() - Run Dinic phases to convergence
    step() - Run a single phase
    min_cut() - Minimum cut of the current flow
    read_network(), read_flow() - Load the 1-based triplet text format

Example:
    from dinicflow import new_graph, compute_max_flow

    net = new_graph(4, 0, 3)
    net.set_capacity(0, 1, 3)
    net.set_capacity(1, 3, 2)
    result = compute_max_flow(net)
    print(result.total_flow, net.ledger.is_valid())
"""

from __future__ import annotations

from dinicflow import cli, logging
from dinicflow.algorithms.blocking_flow import (
    compute_blocking_flow,
    compute_bottleneck,
    find_augmenting_path,
    saturate_path,
)
from dinicflow.algorithms.dinic import compute_max_flow, min_cut, step
from dinicflow.algorithms.ledger import FlowLedger
from dinicflow.algorithms.level_graph import LevelGraph, build_level_graph
from dinicflow.algorithms.residual import build_residual
from dinicflow.config import (
    DINIC_CONFIG,
    INDEX_OFFSET,
    MAX_NUMBER_OF_NODES,
    MIN_NUMBER_OF_NODES,
    DinicConfig,
)
from dinicflow.errors import (
    ConfigurationError,
    DomainError,
    InputFormatError,
    NodeIndexError,
)
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.convert import NodeMap, from_networkx, to_networkx
from dinicflow.graph.network import FlowNetwork, new_graph
from dinicflow.io import parse_flow, parse_network, read_flow, read_network
from dinicflow.types.base import PathSearch
from dinicflow.types.dto import MaxFlowResult, MinCut, PhaseResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph model
    "CapacitatedGraph",
    "FlowLedger",
    "FlowNetwork",
    "LevelGraph",
    "new_graph",
    # Algorithm
    "build_residual",
    "build_level_graph",
    "find_augmenting_path",
    "compute_bottleneck",
    "saturate_path",
    "compute_blocking_flow",
    "compute_max_flow",
    "step",
    "min_cut",
    # Configuration
    "DinicConfig",
    "DINIC_CONFIG",
    "PathSearch",
    "INDEX_OFFSET",
    "MIN_NUMBER_OF_NODES",
    "MAX_NUMBER_OF_NODES",
    # Results
    "MaxFlowResult",
    "MinCut",
    "PhaseResult",
    # Errors
    "ConfigurationError",
    "DomainError",
    "InputFormatError",
    "NodeIndexError",
    # I/O and interop
    "parse_network",
    "parse_flow",
    "read_network",
    "read_flow",
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
