"""Max-flow building blocks: ledger, residual network, level graph, blocking flow."""

from dinicflow.algorithms.blocking_flow import (
    compute_blocking_flow,
    compute_bottleneck,
    find_augmenting_path,
    saturate_path,
)
from dinicflow.algorithms.dinic import compute_max_flow, min_cut, step
from dinicflow.algorithms.ledger import FlowLedger
from dinicflow.algorithms.level_graph import UNVISITED, LevelGraph, build_level_graph
from dinicflow.algorithms.residual import build_residual

__all__ = [
    "FlowLedger",
    "LevelGraph",
    "UNVISITED",
    "build_level_graph",
    "build_residual",
    "compute_blocking_flow",
    "compute_bottleneck",
    "compute_max_flow",
    "find_augmenting_path",
    "min_cut",
    "saturate_path",
    "step",
]
